"""Text extraction from downloaded PDF and DOCX documents."""

import io
import logging
from pathlib import Path
from typing import Optional, Union

import pdfplumber
from docx import Document
from docx.oxml.ns import qn

from config import DOCX_ERROR_LOG_LEVEL, PDF_ERROR_LOG_LEVEL
from utils.logging_utils import resolve_level

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def extract_text(path: PathLike) -> Optional[str]:
    """Extract plain text from a .pdf or .docx file; None for anything else or on failure."""
    ext = Path(path).suffix.lower()
    if ext == ".pdf":
        return extract_text_from_pdf(path)
    if ext == ".docx":
        return extract_text_from_docx(path)
    return None


def extract_text_from_pdf(path: PathLike) -> Optional[str]:
    """Concatenate page texts in page order, one line break between pages."""
    try:
        with pdfplumber.open(path) as pdf:
            return "\n".join(page.extract_text() or "" for page in pdf.pages)
    except Exception as e:
        logger.log(resolve_level(PDF_ERROR_LOG_LEVEL, logging.DEBUG), "PDF error (%s): %s", path, e)
        return None


def extract_text_from_docx(path: PathLike) -> Optional[str]:
    """Join the non-blank text nodes of the document body with line breaks."""
    try:
        # Read into memory first so the file is not held open while parsing
        with open(path, "rb") as f:
            data = f.read()

        document = Document(io.BytesIO(data))
        texts = (node.text for node in document.element.body.iter(qn("w:t")))
        return "\n".join(text for text in texts if text and text.strip())
    except Exception as e:
        logger.log(resolve_level(DOCX_ERROR_LOG_LEVEL, logging.WARNING), "DOCX error (%s): %s", path, e)
        return None
