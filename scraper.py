"""Command-line entry point: scrape Canvas syllabi into output.json."""

import logging
import sys
from typing import List, Optional

from config import CANVAS_TOKEN, LOG_LEVEL, OUTPUT_DIR
from services.pipeline import run
from utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Usage: scraper.py <canvas-token> <output-dir>"""
    args = sys.argv[1:] if argv is None else argv
    token = args[0] if len(args) > 0 else CANVAS_TOKEN
    output_dir = args[1] if len(args) > 1 else OUTPUT_DIR

    configure_logging(LOG_LEVEL)
    run(token or "", output_dir)

    # Keep the console open until the user presses Enter
    try:
        input()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
