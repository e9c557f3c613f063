"""Canvas API endpoint functions.

Every function here fails soft: API and parse errors are logged and turned
into an empty list (or None for single-object endpoints).
"""

import logging
from typing import Any, Dict, List, Optional

from .client import CanvasClient, CanvasAPIError, CanvasResponseError
from .models import Assignment, Course, FileMeta, Module, ModuleItem

logger = logging.getLogger(__name__)


def _get_list(client: CanvasClient, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """GET a paginated collection, degrading every failure to []."""
    try:
        data = client.get(endpoint, params=params)
    except CanvasResponseError as e:
        logger.error("Failed to parse Canvas response for %s: %s", endpoint, e)
        return []
    except CanvasAPIError as e:
        logger.error("Canvas API error for %s: %s", endpoint, e)
        return []

    if not isinstance(data, list):
        logger.warning("Canvas response for %s was not an array: %s", endpoint, data)
        return []

    return [entry for entry in data if isinstance(entry, dict)]


def _get_object(client: CanvasClient, endpoint: str) -> Optional[Dict[str, Any]]:
    """GET a single object, degrading every failure to None."""
    try:
        data = client.get(endpoint)
    except CanvasResponseError as e:
        logger.error("Failed to parse Canvas response for %s: %s", endpoint, e)
        return None
    except CanvasAPIError as e:
        logger.error("Canvas API error for %s: %s", endpoint, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Canvas response for %s was not an object", endpoint)
        return None
    return data


def get_courses(client: CanvasClient) -> List[Course]:
    """Fetch all actively-enrolled courses for the token's user."""
    data = _get_list(client, "courses", params={"enrollment_state": "active"})

    valid_courses: List[Course] = []
    for course in data:
        # Skip malformed entries with no name
        if "id" not in course or not course.get("name"):
            continue
        valid_courses.append(Course.from_json(course))

    return valid_courses


def get_course(client: CanvasClient, course_id: str) -> Optional[Course]:
    """Fetch one course record, including its syllabus_body."""
    data = _get_object(client, f"courses/{course_id}")
    if data is None or "id" not in data:
        return None
    return Course.from_json({**data, "name": data.get("name") or course_id})


def get_modules(client: CanvasClient, course_id: str) -> List[Module]:
    """Fetch every module of a course."""
    data = _get_list(client, f"courses/{course_id}/modules")
    return [Module.from_json(module) for module in data if "id" in module]


def get_module_items(client: CanvasClient, course_id: str, module_id: str) -> List[ModuleItem]:
    """Fetch the items of one module."""
    data = _get_list(client, f"courses/{course_id}/modules/{module_id}/items")
    return [ModuleItem.from_json(item) for item in data]


def get_file_metadata(client: CanvasClient, file_id: str) -> Optional[FileMeta]:
    """Fetch display name and signed download URL for a file."""
    data = _get_object(client, f"files/{file_id}")
    if data is None:
        return None
    return FileMeta.from_json(data)


def get_assignments(client: CanvasClient, course_id: str) -> List[Assignment]:
    """Fetch all assignments for a given Canvas course."""
    data = _get_list(client, f"courses/{course_id}/assignments")

    valid_assignments: List[Assignment] = []
    for assignment in data:
        if "name" not in assignment:
            continue
        valid_assignments.append(Assignment.from_json(assignment))

    return valid_assignments
