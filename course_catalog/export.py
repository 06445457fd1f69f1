"""Pydantic schemas for the JSON export of a catalog."""

from typing import Iterable

from pydantic import BaseModel, Field

from .models import Course


class ClipSchema(BaseModel):
    """A clip as exported."""
    position: int = Field(description="Position within the module (1-based)", ge=1)
    title: str = Field(description="Clip title")
    id: str = Field(description="External clip identifier")


class ModuleSchema(BaseModel):
    """A module as exported."""
    position: int = Field(description="Position within the course (1-based)", ge=1)
    title: str = Field(description="Module title")
    id: str = Field(description="External module identifier")
    author: str = Field(description="Author name, or 'unknown'")
    clips: list[ClipSchema] = Field(
        description="Clips in display order",
        default_factory=list
    )


class CourseSchema(BaseModel):
    """A course as exported."""
    title: str = Field(description="Course title")
    id: str = Field(description="External course identifier")
    modules: list[ModuleSchema] = Field(
        description="Modules in display order",
        default_factory=list
    )


class CatalogSchema(BaseModel):
    """The whole exported catalog."""
    course_count: int = Field(description="Number of courses", ge=0)
    module_count: int = Field(description="Number of modules across all courses", ge=0)
    clip_count: int = Field(description="Number of clips across all courses", ge=0)
    courses: list[CourseSchema] = Field(
        description="Courses in store order",
        default_factory=list
    )


def build_catalog_schema(courses: Iterable[Course]) -> CatalogSchema:
    """Validate a course tree into the export schema."""
    courses = list(courses)
    return CatalogSchema(
        course_count=len(courses),
        module_count=sum(len(c.modules) for c in courses),
        clip_count=sum(c.clip_count for c in courses),
        courses=[CourseSchema.model_validate(c.to_dict()) for c in courses],
    )


def catalog_to_json(courses: Iterable[Course], indent: int = 2) -> str:
    """Serialize a course tree to JSON text."""
    return build_catalog_schema(courses).model_dump_json(indent=indent)
