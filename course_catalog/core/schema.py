"""Table layout of the catalog store and the queries run against it.

The store is generated by Core Data, so every table and column carries the
framework's names: ``Z_PK`` is the row key, ``Z_FOK_<PARENT>`` the ordinal of
a row among its parent's children, and ``Z_<n><NAME>`` the columns of
many-to-many join tables.
"""

# Courses
COURSE_TABLE = "ZCOURSEHEADERCD"

# Modules, ordered within a course by Z_FOK_COURSE
MODULE_TABLE = "ZMODULECD"

# Clips, ordered within a module by Z_FOK_MODULE
CLIP_TABLE = "ZCLIPCD"

# Course <-> author join table and the author table
COURSE_AUTHOR_TABLE = "Z_3COURSEHEADERS"
AUTHOR_TABLE = "ZAUTHORHEADERCD"


# No ORDER BY: courses come back in the store's natural row order
SELECT_COURSES = f"""
    SELECT Z_PK, ZTITLE, ZID
    FROM {COURSE_TABLE}
"""

SELECT_COURSE_AUTHOR = f"""
    SELECT ZID
    FROM {AUTHOR_TABLE}
    WHERE Z_PK IN (
        SELECT Z_3AUTHORS
        FROM {COURSE_AUTHOR_TABLE}
        WHERE Z_14COURSEHEADERS = ?
    )
"""

SELECT_MODULES_FOR_COURSE = f"""
    SELECT Z_PK, ZTITLE, ZID
    FROM {MODULE_TABLE}
    WHERE ZCOURSE = ?
    ORDER BY Z_FOK_COURSE ASC
"""

SELECT_CLIPS_FOR_MODULE = f"""
    SELECT ZTITLE, ZID
    FROM {CLIP_TABLE}
    WHERE ZMODULE = ?
    ORDER BY Z_FOK_MODULE ASC
"""

COUNT_CLIPS = f"SELECT COUNT(*) FROM {CLIP_TABLE}"
