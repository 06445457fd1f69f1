"""Lookup steps that rebuild one level of the catalog tree each.

All three share the connection opened by ``CatalogStore`` and run a single
query per call. Nothing is retried; every error propagates unchanged.
"""

import sqlite3

from ..exceptions import AuthorNotFoundError, QueryError
from ..logging_config import get_logger
from ..models import Clip, Course, Module
from . import schema
from .database import CatalogConnection

logger = get_logger('assemblers')


def scan_text(row: sqlite3.Row, column: str, sql: str) -> str:
    """Read a text column.

    BLOB values are decoded as UTF-8 and numbers are rendered as text;
    only NULL and undecodable bytes fail.
    """
    value = row[column]
    if value is None:
        raise QueryError(sql, reason=f"cannot scan NULL in column {column} into text")
    if isinstance(value, bytes):
        try:
            return value.decode('utf-8')
        except UnicodeDecodeError as e:
            raise QueryError(sql, reason=f"cannot decode bytes in column {column} as text: {e}")
    return str(value)


def scan_int(row: sqlite3.Row, column: str, sql: str) -> int:
    """Read an integer column, failing on NULL or non-integer values."""
    value = row[column]
    if isinstance(value, bool) or not isinstance(value, int):
        raise QueryError(sql, reason=f"cannot scan {type(value).__name__} in column {column} into integer")
    return value


class AuthorResolver:
    """Resolves the author of a course through the course-author join table."""

    def __init__(self, conn: CatalogConnection):
        self.conn = conn

    def resolve_author(self, course_pk: int) -> str:
        """Return the name of the first author linked to a course.

        Raises:
            AuthorNotFoundError: If the course has no linked author
            QueryError: If the lookup fails
        """
        sql = schema.SELECT_COURSE_AUTHOR
        row = self.conn.query_one(sql, (course_pk,))
        if row is None:
            raise AuthorNotFoundError(course_pk)
        return scan_text(row, 'ZID', sql)


class ClipAssembler:
    """Fills a module with its clips in stored order."""

    def __init__(self, conn: CatalogConnection):
        self.conn = conn

    def assemble_clips(self, module_pk: int, module: Module) -> None:
        """Append the clips of ``module_pk`` to ``module.clips``.

        Positions run 1..N following ``Z_FOK_MODULE``.
        """
        sql = schema.SELECT_CLIPS_FOR_MODULE
        for position, row in enumerate(self.conn.query(sql, (module_pk,)), start=1):
            module.clips.append(Clip(
                position=position,
                title=scan_text(row, 'ZTITLE', sql),
                id=scan_text(row, 'ZID', sql),
                module=module,
            ))


class ModuleAssembler:
    """Fills a course with its modules, their author and their clips."""

    def __init__(self, conn: CatalogConnection):
        self.conn = conn
        self.authors = AuthorResolver(conn)
        self.clips = ClipAssembler(conn)

    def assemble_modules(self, course_pk: int, course: Course) -> None:
        """Append the modules of ``course_pk`` to ``course.modules``.

        The course author is resolved once, before any module is read, and
        copied onto every module. Positions run 1..N following
        ``Z_FOK_COURSE``. A failure while reading clips stops the walk and
        leaves the modules appended so far in place.

        Raises:
            AuthorNotFoundError: If the course has no author
            QueryError: If any lookup fails
        """
        author = self.authors.resolve_author(course_pk)

        sql = schema.SELECT_MODULES_FOR_COURSE
        rows = self.conn.query(sql, (course_pk,))
        for position, row in enumerate(rows, start=1):
            module_pk = scan_int(row, 'Z_PK', sql)
            module = Module(
                position=position,
                title=scan_text(row, 'ZTITLE', sql),
                id=scan_text(row, 'ZID', sql),
                author=author,
                course=course,
            )
            self.clips.assemble_clips(module_pk, module)
            course.modules.append(module)

        logger.debug(f"Course {course.id}: {len(course.modules)} modules by {author}")
