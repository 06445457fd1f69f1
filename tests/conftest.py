"""Shared fixtures: throwaway catalog stores with the Core Data table layout."""

import sqlite3
from pathlib import Path

import pytest

SCHEMA = '''
    CREATE TABLE ZCOURSEHEADERCD (
        Z_PK INTEGER PRIMARY KEY,
        ZTITLE VARCHAR,
        ZID VARCHAR
    );
    CREATE TABLE ZMODULECD (
        Z_PK INTEGER PRIMARY KEY,
        ZTITLE VARCHAR,
        ZID VARCHAR,
        ZCOURSE INTEGER,
        Z_FOK_COURSE INTEGER
    );
    CREATE TABLE ZCLIPCD (
        Z_PK INTEGER PRIMARY KEY,
        ZTITLE VARCHAR,
        ZID VARCHAR,
        ZMODULE INTEGER,
        Z_FOK_MODULE INTEGER
    );
    CREATE TABLE Z_3COURSEHEADERS (
        Z_PK INTEGER PRIMARY KEY,
        Z_3AUTHORS INTEGER,
        Z_14COURSEHEADERS INTEGER
    );
    CREATE TABLE ZAUTHORHEADERCD (
        Z_PK INTEGER PRIMARY KEY,
        ZID VARCHAR
    );
'''


class StoreBuilder:
    """Writes rows into a fresh store file."""

    def __init__(self, path: Path):
        self.path = path
        self.conn = sqlite3.connect(path)
        self.conn.executescript(SCHEMA)

    def course(self, pk: int, title: str, uid: str) -> 'StoreBuilder':
        self.conn.execute(
            'INSERT INTO ZCOURSEHEADERCD (Z_PK, ZTITLE, ZID) VALUES (?, ?, ?)',
            (pk, title, uid)
        )
        return self

    def author(self, pk: int, name: str, *course_pks: int) -> 'StoreBuilder':
        self.conn.execute(
            'INSERT INTO ZAUTHORHEADERCD (Z_PK, ZID) VALUES (?, ?)', (pk, name)
        )
        for course_pk in course_pks:
            self.link(pk, course_pk)
        return self

    def link(self, author_pk: int, course_pk: int) -> 'StoreBuilder':
        self.conn.execute(
            'INSERT INTO Z_3COURSEHEADERS (Z_3AUTHORS, Z_14COURSEHEADERS) VALUES (?, ?)',
            (author_pk, course_pk)
        )
        return self

    def module(self, pk: int, course_pk: int, ordinal: int, title: str, uid: str) -> 'StoreBuilder':
        self.conn.execute(
            'INSERT INTO ZMODULECD (Z_PK, ZTITLE, ZID, ZCOURSE, Z_FOK_COURSE) VALUES (?, ?, ?, ?, ?)',
            (pk, title, uid, course_pk, ordinal)
        )
        return self

    def clip(self, module_pk: int, ordinal: int, title: str, uid: str) -> 'StoreBuilder':
        self.conn.execute(
            'INSERT INTO ZCLIPCD (ZTITLE, ZID, ZMODULE, Z_FOK_MODULE) VALUES (?, ?, ?, ?)',
            (title, uid, module_pk, ordinal)
        )
        return self

    def execute(self, sql: str, params: tuple = ()) -> 'StoreBuilder':
        self.conn.execute(sql, params)
        return self

    def save(self) -> str:
        self.conn.commit()
        self.conn.close()
        return str(self.path)


@pytest.fixture
def make_store(tmp_path):
    """Factory for empty stores; fill with the builder, then call save()."""
    counter = iter(range(1, 1000))

    def _make(name: str = None) -> StoreBuilder:
        return StoreBuilder(tmp_path / (name or f"store{next(counter)}.sqlite"))

    return _make


@pytest.fixture
def sample_store(make_store):
    """Two courses, modules and clips stored out of display order."""
    return (
        make_store()
        .course(1, "Go Fundamentals", "go-fundamentals")
        .course(2, "Python Basics", "python-basics")
        .author(10, "jane-doe", 1)
        .author(11, "john-roe", 2)
        # Course 1: module pks 101/102 with ordinals 2/1
        .module(101, 1, 2, "Advanced", "go-advanced")
        .module(102, 1, 1, "Basics", "go-basics")
        .clip(102, 2, "Variables", "go-basics-2")
        .clip(102, 1, "Hello World", "go-basics-1")
        .clip(101, 1, "Goroutines", "go-advanced-1")
        # Course 2: a single module without clips
        .module(201, 2, 1, "Introduction", "py-intro")
        .save()
    )
