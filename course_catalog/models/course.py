"""Course, Module, and Clip data models."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

UNKNOWN_AUTHOR = "unknown"


@dataclass
class Clip:
    """A single video clip within a module."""

    position: int = 0            # 1-based, dense within the module
    title: str = ""
    id: str = ""

    # Owning module, for navigation only
    module: Optional['Module'] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'position': self.position,
            'title': self.title,
            'id': self.id,
        }


@dataclass
class Module:
    """A module (section) within a course."""

    position: int = 0            # 1-based, dense within the course
    title: str = ""
    id: str = ""
    author: Optional[str] = None

    # Related data
    clips: list[Clip] = field(default_factory=list)

    # Owning course, for navigation only
    course: Optional['Course'] = field(default=None, repr=False, compare=False)

    @property
    def author_display(self) -> str:
        return self.author if self.author else UNKNOWN_AUTHOR

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'position': self.position,
            'title': self.title,
            'id': self.id,
            'author': self.author_display,
            'clips': [c.to_dict() for c in self.clips],
        }


@dataclass
class Course:
    """A course with its ordered modules."""

    title: str = ""
    id: str = ""

    # Related data
    modules: list[Module] = field(default_factory=list)

    @property
    def clip_count(self) -> int:
        """Number of clips across all modules."""
        return sum(1 for _ in self.iter_clips())

    def iter_clips(self) -> Iterator[Clip]:
        """Yield every clip in display order."""
        for module in self.modules:
            yield from module.clips

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'title': self.title,
            'id': self.id,
            'modules': [m.to_dict() for m in self.modules],
        }
