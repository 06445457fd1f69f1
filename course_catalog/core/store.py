"""Entry point for reading the course catalog out of its store."""

from ..exceptions import CatalogError, RowNotFoundError
from ..logging_config import get_logger, log_exception
from ..models import Course
from . import schema
from .assemblers import ModuleAssembler, scan_int, scan_text
from .database import CatalogConnection

logger = get_logger('store')


class CatalogStore:
    """Reads courses, modules and clips from a catalog store.

    Every call opens its own read-only connection and closes it before
    returning. Nothing is cached between calls.

    Usage:
        store = CatalogStore('ClientDatabase.sqlite')
        for course in store.find_all():
            print(course.title)
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    def find_all(self) -> list[Course]:
        """Build every course in the store's natural row order.

        Returns:
            Courses with their modules and clips

        Raises:
            DatabaseConnectionError: If the store cannot be opened
            QueryError: If any lookup fails
            AuthorNotFoundError: If a course has no author

            Errors raised after the store was opened carry the courses
            completed before the failure in their ``partial`` attribute.
        """
        courses: list[Course] = []
        with CatalogConnection(self.db_path) as conn:
            modules = ModuleAssembler(conn)
            sql = schema.SELECT_COURSES
            try:
                for row in conn.query(sql):
                    course_pk = scan_int(row, 'Z_PK', sql)
                    course = Course(
                        title=scan_text(row, 'ZTITLE', sql),
                        id=scan_text(row, 'ZID', sql),
                    )
                    modules.assemble_modules(course_pk, course)
                    courses.append(course)
                    logger.debug(f"Loaded course {course.id}: {course.title}",
                                 extra={'course_id': course.id})
            except CatalogError as e:
                e.partial = tuple(courses)
                log_exception(logger, e, f"Catalog read stopped after {len(courses)} courses")
                raise

        logger.info(f"Loaded {len(courses)} courses from {self.db_path}")
        return courses

    def clip_count(self) -> int:
        """Count every clip row in the store.

        Raises:
            DatabaseConnectionError: If the store cannot be opened
            QueryError: If the count fails
            RowNotFoundError: If the count yields no row
        """
        with CatalogConnection(self.db_path) as conn:
            sql = schema.COUNT_CLIPS
            row = conn.query_one(sql)
            if row is None:
                raise RowNotFoundError(sql)
            return scan_int(row, 0, sql)
