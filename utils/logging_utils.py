"""Logging setup for the command-line entry point."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[str, int], default: int = logging.INFO) -> int:
    """Turn a level name like 'WARNING' (or a number) into a logging level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Send log records to stderr with a timestamped format."""
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
