# Course Catalog - read the offline course catalog out of its SQLite store
"""
Course Catalog rebuilds the course -> module -> clip tree, with each module's
author and the stored display order, from the Core Data generated SQLite
database kept by the offline video player.
"""

__version__ = "0.1.0"
