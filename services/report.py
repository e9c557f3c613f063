"""Report assembly: per-course summaries, nearest due dates and JSON output."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from canvas_api.models import Assignment
from constants import CLOSEST_DUE_DATES_LIMIT, OUTPUT_FILENAME
from services.extractor import extract_text
from utils.datetime_utils import to_utc_iso_z, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModuleListing:
    """A module name with the titles of its items."""
    module_name: str
    items: List[str] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used in output.json."""
        return {"moduleName": self.module_name, "items": list(self.items)}


@dataclass(frozen=True)
class CourseReport:
    """Everything output.json records for one course."""
    class_name: str
    syllabus_text: str
    assignments: List[Assignment] = field(default_factory=list)
    modules: List[ModuleListing] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used in output.json."""
        return {
            "className": self.class_name,
            "syllabusText": self.syllabus_text,
            "assignments": [
                {
                    "name": a.name,
                    "dueDate": to_utc_iso_z(a.due_date) if a.due_date else None,
                    "url": a.url,
                }
                for a in self.assignments
            ],
            "modules": [m.to_json() for m in self.modules],
        }


@dataclass(frozen=True)
class DueDateEntry:
    """One upcoming assignment in the nearest-due-dates list."""
    assignment_name: str
    due_date: datetime
    class_name: str
    url: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used in output.json."""
        return {
            "assignmentName": self.assignment_name,
            "dueDate": to_utc_iso_z(self.due_date),
            "className": self.class_name,
            "url": self.url,
        }


@dataclass(frozen=True)
class FinalReport:
    """The whole output.json document."""
    closest_due_dates: List[DueDateEntry] = field(default_factory=list)
    courses: List[CourseReport] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used in output.json."""
        return {
            "closestDueDates": [entry.to_json() for entry in self.closest_due_dates],
            "courses": [course.to_json() for course in self.courses],
        }


def build_course_report(
    class_name: str,
    file_paths: Iterable[Union[str, Path]],
    assignments: List[Assignment],
    modules: List[ModuleListing],
) -> CourseReport:
    """Merge the extracted texts of a course's files with its assignments and modules."""
    texts: List[str] = []
    for path in file_paths:
        text = extract_text(path)
        if text and text.strip():
            texts.append(text)

    return CourseReport(
        class_name=class_name,
        syllabus_text="\n".join(texts),
        assignments=list(assignments),
        modules=list(modules),
    )


def closest_due_dates(
    course_reports: Iterable[CourseReport],
    now: datetime,
    limit: int = CLOSEST_DUE_DATES_LIMIT,
) -> List[DueDateEntry]:
    """
    The `limit` soonest assignments due strictly after `now`, across all courses.

    Ties keep the order in which the assignments were encountered.
    """
    upcoming = [
        DueDateEntry(
            assignment_name=assignment.name,
            due_date=assignment.due_date,
            class_name=report.class_name,
            url=assignment.url,
        )
        for report in course_reports
        for assignment in report.assignments
        if assignment.due_date is not None and assignment.due_date > now
    ]
    upcoming.sort(key=lambda entry: entry.due_date)
    return upcoming[:limit]


def build_final_report(course_reports: List[CourseReport], now: Optional[datetime] = None) -> FinalReport:
    """Attach the nearest due dates (relative to now) to the course reports."""
    if now is None:
        now = utc_now()
    return FinalReport(
        closest_due_dates=closest_due_dates(course_reports, now),
        courses=list(course_reports),
    )


def write_report(report: FinalReport, output_dir: Union[str, Path]) -> Path:
    """Serialize the report as indented UTF-8 JSON, replacing any previous output."""
    output_path = Path(output_dir) / OUTPUT_FILENAME
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report.to_json(), f, indent=2, ensure_ascii=False)
    logger.info("Extraction complete. Output saved to: %s", output_path)
    return output_path
