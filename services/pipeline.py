"""Runs the scrape: fetch courses, download syllabus files, assemble the report."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from canvas_api.client import CanvasClient
from canvas_api.endpoints import get_assignments, get_courses, get_module_items, get_modules
from canvas_api.models import Module, ModuleItem
from config import CANVAS_BASE_URL, COURSE_NAME_FILTER, DOWNLOAD_EXTRA_ADDENDUM
from services.downloader import download_module_item
from services.report import (
    FinalReport,
    ModuleListing,
    build_course_report,
    build_final_report,
    write_report,
)
from services.syllabus import log_fallback_module, select_syllabus_modules

logger = logging.getLogger(__name__)


@dataclass
class RunState:
    """Per-run tables keyed by course id."""
    course_names: Dict[str, str] = field(default_factory=dict)
    course_files: Dict[str, List[str]] = field(default_factory=dict)
    course_modules: Dict[str, List[ModuleListing]] = field(default_factory=dict)


def build_module_listing(modules: List[Module], module_items: Dict[str, List[ModuleItem]]) -> List[ModuleListing]:
    """List every module of a course with its item titles."""
    return [
        ModuleListing(
            module_name=module.name,
            items=[item.title for item in module_items.get(module.id, [])],
        )
        for module in modules
    ]


def collect_course_files(
    client: CanvasClient,
    download_dir: Path,
    state: RunState,
    name_filter: str = COURSE_NAME_FILTER,
    include_addendum: bool = DOWNLOAD_EXTRA_ADDENDUM,
) -> RunState:
    """Phase 1: find syllabus modules in each included course and download their documents."""
    logger.info("Fetching active courses...")
    for course in get_courses(client):
        logger.info("Course: %s", course.name)
        state.course_names[course.id] = course.name

        if name_filter not in course.name:
            continue

        # Modules and items are fetched once and shared by the listing and the downloads
        modules = get_modules(client, course.id)
        module_items = {module.id: get_module_items(client, course.id, module.id) for module in modules}
        state.course_modules[course.id] = build_module_listing(modules, module_items)

        for module in select_syllabus_modules(client, course.id, modules):
            logger.info("  Found syllabus module: %s", module.name)

            if module.is_fallback:
                log_fallback_module(module)
                continue

            for item in module_items.get(module.id, []):
                download_module_item(
                    client, item, course.id, download_dir, state.course_files,
                    include_addendum=include_addendum,
                )

    logger.info("Done Scraping.")
    return state


def assemble_report(client: CanvasClient, state: RunState, now: Optional[datetime] = None) -> FinalReport:
    """Phase 2: build a report for every course that has at least one downloaded file."""
    course_reports = []
    for course_id, file_paths in state.course_files.items():
        if not file_paths:
            continue
        course_reports.append(build_course_report(
            class_name=state.course_names.get(course_id, course_id),
            file_paths=file_paths,
            assignments=get_assignments(client, course_id),
            modules=state.course_modules.get(course_id, []),
        ))
    return build_final_report(course_reports, now=now)


def run(
    token: str,
    output_dir: Union[str, Path],
    base_url: str = CANVAS_BASE_URL,
    now: Optional[datetime] = None,
) -> Optional[Path]:
    """Scrape every included course and write output.json; returns its path, or None."""
    if not token:
        logger.error("You must pass in your Canvas API token as a command line argument.")
        return None

    download_dir = Path(output_dir)
    try:
        download_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Cannot create output directory %s: %s", download_dir, e)
        return None

    client = CanvasClient(token=token, base_url=base_url)
    state = RunState()
    try:
        collect_course_files(client, download_dir, state)
    except Exception:
        # Keep whatever was collected so far and still write a report
        logger.exception("Error while scraping Canvas")

    logger.info("Now Extracting...")
    try:
        report = assemble_report(client, state, now=now)
    except Exception:
        logger.exception("Error while assembling the report")
        return None

    try:
        return write_report(report, download_dir)
    except OSError as e:
        logger.error("Error writing report: %s", e)
        return None
