"""Utilities package for helper functions."""

from .datetime_utils import (
    parse_canvas_datetime,
    parse_due_date,
    to_utc_iso_z,
    utc_now,
)
from .logging_utils import configure_logging, resolve_level

__all__ = [
    'parse_canvas_datetime',
    'parse_due_date',
    'to_utc_iso_z',
    'utc_now',
    'configure_logging',
    'resolve_level',
]
