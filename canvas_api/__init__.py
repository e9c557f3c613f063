"""Canvas API client package for interacting with the Canvas LMS API."""

from .client import CanvasClient, CanvasAPIError, CanvasResponseError
from .endpoints import (
    get_courses,
    get_course,
    get_modules,
    get_module_items,
    get_file_metadata,
    get_assignments,
)
from .models import Assignment, Course, FileMeta, Module, ModuleItem, ModuleItemType

__all__ = [
    'CanvasClient', 'CanvasAPIError', 'CanvasResponseError',
    'get_courses', 'get_course', 'get_modules', 'get_module_items',
    'get_file_metadata', 'get_assignments',
    'Assignment', 'Course', 'FileMeta', 'Module', 'ModuleItem', 'ModuleItemType',
]
