"""Typed records parsed from Canvas API JSON."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from constants import FALLBACK_MODULE_ID, FALLBACK_MODULE_NAME
from utils.datetime_utils import parse_due_date


def _optional_str(value: Any) -> Optional[str]:
    """Stringify an id-like value, keeping None as None."""
    return None if value is None else str(value)


def _text_or_none(value: Any) -> Optional[str]:
    """Keep only non-empty string values; anything else counts as absent."""
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class Course:
    """A Canvas course; syllabus_body is only set on single-course lookups."""
    id: str
    name: str
    syllabus_body: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Course":
        """Build a course from a Canvas course record."""
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            syllabus_body=_text_or_none(data.get("syllabus_body")),
        )


@dataclass(frozen=True)
class Module:
    """A named group of module items within a course."""
    id: str
    name: str
    syllabus_body: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        """True for the synthetic module wrapping a course's syllabus_body."""
        return self.id == FALLBACK_MODULE_ID

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Module":
        """Build a module from a Canvas module record."""
        return cls(id=str(data["id"]), name=str(data.get("name") or ""))

    @classmethod
    def fallback(cls, syllabus_body: str) -> "Module":
        """Wrap a course's syllabus_body HTML as a synthetic module."""
        return cls(id=FALLBACK_MODULE_ID, name=FALLBACK_MODULE_NAME, syllabus_body=syllabus_body)


class ModuleItemType(Enum):
    """Module item kinds the scraper distinguishes."""
    FILE = "File"
    EXTERNAL_URL = "ExternalUrl"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "ModuleItemType":
        """Map a Canvas item type to a member; unknown or non-string values are OTHER."""
        if not isinstance(value, str):
            return cls.OTHER
        lowered = value.lower()
        for member in (cls.FILE, cls.EXTERNAL_URL):
            if member.value.lower() == lowered:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class ModuleItem:
    """A single entry of a module: a file, a link or anything else."""
    title: str
    type: ModuleItemType
    content_id: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ModuleItem":
        """Build a module item; url prefers external_url over html_url."""
        return cls(
            title=str(data.get("title") or ""),
            type=ModuleItemType.parse(data.get("type")),
            content_id=_optional_str(data.get("content_id")),
            url=_text_or_none(data.get("external_url")) or _text_or_none(data.get("html_url")),
        )


@dataclass(frozen=True)
class FileMeta:
    """Display name and signed download URL of a Canvas file."""
    display_name: str
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "FileMeta":
        """Build file metadata from a Canvas file record."""
        return cls(display_name=str(data.get("display_name") or ""), url=_text_or_none(data.get("url")))


@dataclass(frozen=True)
class Assignment:
    """An assignment; due_date is None when Canvas gives no usable due_at."""
    name: str
    due_date: Optional[datetime] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Assignment":
        """Build an assignment from a Canvas assignment record."""
        return cls(
            name=str(data["name"]),
            due_date=parse_due_date(data.get("due_at")),
            url=_text_or_none(data.get("html_url")),
        )
