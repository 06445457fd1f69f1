"""Tests for the per-level lookup steps."""

import pytest

from course_catalog.core import (
    AuthorResolver,
    CatalogConnection,
    ClipAssembler,
    ModuleAssembler,
)
from course_catalog.exceptions import AuthorNotFoundError, QueryError
from course_catalog.models import Course, Module


class TestAuthorResolver:
    """Test AuthorResolver.resolve_author()."""

    def test_resolves_linked_author(self, sample_store):
        with CatalogConnection(sample_store) as conn:
            assert AuthorResolver(conn).resolve_author(2) == "john-roe"

    def test_unlinked_course_raises_author_not_found(self, sample_store):
        with CatalogConnection(sample_store) as conn:
            with pytest.raises(AuthorNotFoundError) as exc_info:
                AuthorResolver(conn).resolve_author(42)

        assert exc_info.value.details == {'course_pk': 42}

    def test_null_author_name_is_a_query_error(self, make_store):
        path = (
            make_store()
            .execute('INSERT INTO ZAUTHORHEADERCD (Z_PK, ZID) VALUES (1, NULL)')
            .link(1, 5)
            .save()
        )

        with CatalogConnection(path) as conn:
            with pytest.raises(QueryError):
                AuthorResolver(conn).resolve_author(5)


class TestModuleAssembler:
    """Test ModuleAssembler.assemble_modules()."""

    def test_fills_course_in_ordinal_order(self, sample_store):
        course = Course(title="Go Fundamentals", id="go-fundamentals")

        with CatalogConnection(sample_store) as conn:
            ModuleAssembler(conn).assemble_modules(1, course)

        assert [(m.position, m.id) for m in course.modules] == [(1, "go-basics"), (2, "go-advanced")]
        assert all(m.course is course for m in course.modules)

    def test_author_failure_skips_module_query(self, make_store):
        """Without an author no module is read at all."""
        path = (
            make_store()
            .course(1, "Go", "c1")
            .module(1, 1, 1, "Intro", "m1")
            .execute('DROP TABLE ZMODULECD')
            .save()
        )
        course = Course(title="Go", id="c1")

        with CatalogConnection(path) as conn:
            with pytest.raises(AuthorNotFoundError):
                ModuleAssembler(conn).assemble_modules(1, course)

        assert course.modules == []

    def test_clip_failure_keeps_earlier_modules(self, make_store):
        """Modules appended before a clip failure stay on the course."""
        path = (
            make_store()
            .course(1, "Go", "c1")
            .author(10, "Jane", 1)
            .module(1, 1, 1, "Good", "m1")
            .module(2, 1, 2, "Bad", "m2")
            .clip(1, 1, "Fine", "k1")
            .execute(
                'INSERT INTO ZCLIPCD (ZTITLE, ZID, ZMODULE, Z_FOK_MODULE) VALUES (?, NULL, ?, ?)',
                ("Broken", 2, 1)
            )
            .save()
        )
        course = Course(title="Go", id="c1")

        with CatalogConnection(path) as conn:
            with pytest.raises(QueryError):
                ModuleAssembler(conn).assemble_modules(1, course)

        assert [m.title for m in course.modules] == ["Good"]


class TestClipAssembler:
    """Test ClipAssembler.assemble_clips()."""

    def test_fills_module_in_ordinal_order(self, sample_store):
        module = Module(position=1, title="Basics", id="go-basics")

        with CatalogConnection(sample_store) as conn:
            ClipAssembler(conn).assemble_clips(102, module)

        assert [(c.position, c.title) for c in module.clips] == [(1, "Hello World"), (2, "Variables")]
        assert all(c.module is module for c in module.clips)

    def test_blob_and_numeric_values_scan_as_text(self, make_store):
        """BLOB ids are decoded and numeric titles are rendered as text."""
        path = (
            make_store()
            .execute(
                "INSERT INTO ZCLIPCD (ZTITLE, ZID, ZMODULE, Z_FOK_MODULE) "
                "VALUES ('Blob id', CAST('k1' AS BLOB), 1, 1)"
            )
            .execute(
                "INSERT INTO ZCLIPCD (ZTITLE, ZID, ZMODULE, Z_FOK_MODULE) "
                "VALUES (CAST(42 AS INTEGER), 'k2', 1, 2)"
            )
            .save()
        )
        module = Module(position=1, title="Mixed", id="m1")

        with CatalogConnection(path) as conn:
            ClipAssembler(conn).assemble_clips(1, module)

        assert [(c.title, c.id) for c in module.clips] == [("Blob id", "k1"), ("42", "k2")]

    def test_undecodable_blob_is_a_query_error(self, make_store):
        path = (
            make_store()
            .execute(
                "INSERT INTO ZCLIPCD (ZTITLE, ZID, ZMODULE, Z_FOK_MODULE) "
                "VALUES ('Bad bytes', X'FF', 1, 1)"
            )
            .save()
        )

        with CatalogConnection(path) as conn:
            with pytest.raises(QueryError):
                ClipAssembler(conn).assemble_clips(1, Module())

    def test_module_without_clips_stays_empty(self, sample_store):
        module = Module(position=1, title="Introduction", id="py-intro")

        with CatalogConnection(sample_store) as conn:
            ClipAssembler(conn).assemble_clips(201, module)

        assert module.clips == []
