#!/usr/bin/env python3
"""
Course Catalog

Read the offline course catalog (courses, modules, clips) out of its SQLite store.

Usage:
    python main.py --db ClientDatabase.sqlite           # List every course
    python main.py --db ClientDatabase.sqlite --count   # Count clips
    python main.py --db ClientDatabase.sqlite --stats   # Show catalog statistics
    python main.py --json catalog.json                  # Export (store path from config)
"""

import argparse
import sys
from typing import Optional

from course_catalog.config import load_config, require_store_path
from course_catalog.core import CatalogStore
from course_catalog.exceptions import CatalogError
from course_catalog.export import catalog_to_json
from course_catalog.logging_config import setup_logging, get_logger
from course_catalog.models import Course

# Initialize logging (will be configured in main())
logger = get_logger('main')


def print_courses(courses: list[Course]):
    """Print the course tree to stdout."""
    for course in courses:
        print(f"\n{course.title} [{course.id}]")
        for module in course.modules:
            print(f"  {module.position:>3}. {module.title} ({module.author_display})")
            for clip in module.clips:
                print(f"        {clip.position:>3}. {clip.title}")


def print_stats(courses: list[Course], clip_total: Optional[int]):
    """Print catalog statistics."""
    print("\n=== Catalog Statistics ===")
    print(f"Courses:       {len(courses)}")
    print(f"Modules:       {sum(len(c.modules) for c in courses)}")
    print(f"Clips (tree):  {sum(c.clip_count for c in courses)}")
    print(f"Clips (store): {clip_total if clip_total is not None else 'unknown'}")


def write_json(courses: list[Course], target: str, indent: int):
    """Write the JSON export to a file, or stdout for '-'."""
    text = catalog_to_json(courses, indent=indent)
    if target == '-':
        print(text)
        return
    with open(target, 'w', encoding='utf-8') as f:
        f.write(text)
        f.write('\n')
    print(f"Wrote {len(courses)} course(s) to {target}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read the offline course catalog from its SQLite store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py --db ClientDatabase.sqlite
    python main.py --db ClientDatabase.sqlite --count
    python main.py --db ClientDatabase.sqlite --stats
    python main.py --db ClientDatabase.sqlite --json catalog.json
    CCAT_STORE__PATH=ClientDatabase.sqlite python main.py --json
        """
    )

    parser.add_argument(
        '--db',
        help='Catalog store path (default: store.path from config)'
    )
    parser.add_argument(
        '--config', '-c',
        help='Config file path (default: config.yaml in the working directory)'
    )
    parser.add_argument(
        '--count',
        action='store_true',
        help='Print the number of clips in the store'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Show catalog statistics'
    )
    parser.add_argument(
        '--json',
        nargs='?',
        const='-',
        metavar='FILE',
        help='Export the catalog as JSON to FILE (default: stdout)'
    )
    parser.add_argument(
        '--verbose', '-V',
        action='store_true',
        help='Enable verbose output (DEBUG level logging)'
    )
    parser.add_argument(
        '--log-file',
        help='Write logs to file (default: logging.file from config)'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except CatalogError as e:
        setup_logging(level="INFO")
        logger.error(f"Configuration error: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    # Initialize logging
    setup_logging(
        level="DEBUG" if args.verbose else config.logging.level,
        log_file=args.log_file or config.logging.file,
        json_format=config.logging.json_format,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console=True
    )

    if args.db:
        config.store.path = args.db

    try:
        store = CatalogStore(require_store_path(config))

        if args.count:
            print(store.clip_count())
            return 0

        courses = store.find_all()

        if args.stats:
            try:
                clip_total = store.clip_count()
            except CatalogError as e:
                logger.warning(f"Clip count unavailable: {e}")
                clip_total = None
            print_stats(courses, clip_total)
        elif args.json:
            write_json(courses, args.json, config.export.indent)
        else:
            print_courses(courses)
        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130

    except CatalogError as e:
        if args.count:
            print("unknown")
        elif e.partial:
            print(f"\nPartial catalog ({len(e.partial)} course(s) read before the error):")
            print_courses(list(e.partial))
        logger.error(f"Catalog error: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
