"""Syllabus module selection and the syllabus_body fallback."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from canvas_api.client import CanvasClient
from canvas_api.endpoints import get_course, get_modules
from canvas_api.models import Module
from constants import SYLLABUS_MODULE_KEYWORDS, SYLLABUS_PREVIEW_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallbackPreview:
    """Operator-facing view of a syllabus_body: its links and a short text."""
    links: List[Tuple[str, str]] = field(default_factory=list)
    preview: str = ""


def is_syllabus_module(name: str) -> bool:
    """True when a module name contains one of the syllabus keywords."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in SYLLABUS_MODULE_KEYWORDS)


def select_syllabus_modules(client: CanvasClient, course_id: str,
                            modules: Optional[List[Module]] = None) -> List[Module]:
    """
    Pick the modules of a course that look like syllabus material.

    Pass already-fetched modules to avoid listing them again.

    When no module name matches, the course's syllabus_body (if any) is
    wrapped into a single fallback module instead.
    """
    if modules is None:
        modules = get_modules(client, course_id)
    matches = [module for module in modules if is_syllabus_module(module.name)]
    if matches:
        return matches

    course = get_course(client, course_id)
    if course is not None and course.syllabus_body and course.syllabus_body.strip():
        return [Module.fallback(course.syllabus_body)]

    return []


def describe_fallback_module(module: Module) -> FallbackPreview:
    """Collect the anchors and a truncated plain-text preview of a fallback module."""
    if not module.syllabus_body or not module.syllabus_body.strip():
        return FallbackPreview()

    soup = BeautifulSoup(module.syllabus_body, "html.parser")

    links: List[Tuple[str, str]] = []
    for a in soup.find_all("a", href=True):
        links.append((a.get_text().strip(), a["href"]))

    text = soup.get_text().strip()
    preview = text[:SYLLABUS_PREVIEW_LENGTH].replace("\n", " ").replace("\r", " ")

    return FallbackPreview(links=links, preview=preview)


def log_fallback_module(module: Module) -> FallbackPreview:
    """Log a fallback module's links and preview; nothing from it reaches the report."""
    logger.info("    (No module items - pulled from course syllabus_body)")
    described = describe_fallback_module(module)
    for text, href in described.links:
        logger.info("    Link: %s - %s", text, href)
    if described.preview:
        logger.info("    Syllabus Text Preview: %s...", described.preview)
    return described
