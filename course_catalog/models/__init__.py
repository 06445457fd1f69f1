# Models module - data classes for the course -> module -> clip tree
from .course import Course, Module, Clip, UNKNOWN_AUTHOR

__all__ = [
    'Course',
    'Module',
    'Clip',
    'UNKNOWN_AUTHOR',
]
