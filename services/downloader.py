"""Downloading syllabus documents referenced by module items."""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from canvas_api.client import CanvasClient, CanvasAPIError
from canvas_api.endpoints import get_file_metadata
from canvas_api.models import ModuleItem, ModuleItemType
from config import DOWNLOAD_EXTRA_ADDENDUM
from constants import SKIPPED_TITLE_MARKERS, SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

_ILLEGAL_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(name: str) -> str:
    """Replace every character that is illegal in a file name with '_'."""
    return _ILLEGAL_FILENAME_CHARS.sub("_", name)


def should_skip_item(item: ModuleItem, include_addendum: bool = DOWNLOAD_EXTRA_ADDENDUM) -> bool:
    """True for Addendum/Wide items unless addendum downloads are enabled."""
    if include_addendum:
        return False
    return any(marker in item.title for marker in SKIPPED_TITLE_MARKERS)


def is_supported_document(name: str) -> bool:
    """True for .pdf and .docx names, case-insensitively."""
    return name.lower().endswith(SUPPORTED_EXTENSIONS)


def download_module_item(
    client: CanvasClient,
    item: ModuleItem,
    course_id: str,
    download_dir: Path,
    course_files: Dict[str, List[str]],
    include_addendum: bool = DOWNLOAD_EXTRA_ADDENDUM,
) -> Optional[Path]:
    """
    Download the document behind a File module item.

    Returns the saved path, or None when the item is skipped or the download
    fails. Saved paths are appended to course_files[course_id] in download order.
    """
    if should_skip_item(item, include_addendum):
        return None

    logger.info("    Item: %s (%s)", item.title, item.type.value)
    logger.info("    URL: %s", item.url)

    if item.type is not ModuleItemType.FILE or not item.content_id:
        return None

    meta = get_file_metadata(client, item.content_id)
    if meta is None or not meta.url or not is_supported_document(meta.display_name):
        return None

    logger.info("    -> Downloading...")
    path = Path(download_dir) / sanitize_filename(meta.display_name)
    try:
        content = client.download(meta.url)
        path.write_bytes(content)
    except CanvasAPIError as e:
        logger.error("      Failed to download file: %s", e)
        return None
    except OSError as e:
        logger.error("      Error saving file %s: %s", path, e)
        return None

    logger.info("      File saved: %s", path)
    for other_course, paths in course_files.items():
        if other_course != course_id and str(path) in paths:
            logger.warning("      %s was also saved for course %s and now holds this course's file", path, other_course)
    course_files.setdefault(course_id, []).append(str(path))
    return path
