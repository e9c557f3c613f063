"""Configuration management - loads environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Canvas API Configuration
CANVAS_TOKEN = os.getenv("CANVAS_TOKEN", "")
CANVAS_BASE_URL = os.getenv("CANVAS_BASE_URL", "https://ferris.instructure.com/api/v1")

# Output Configuration
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")

# Scraping Policy
COURSE_NAME_FILTER = os.getenv("COURSE_NAME_FILTER", "SENG")
DOWNLOAD_EXTRA_ADDENDUM = os.getenv("DOWNLOAD_EXTRA_ADDENDUM", "false").strip().lower() in ("1", "true", "yes")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PDF_ERROR_LOG_LEVEL = os.getenv("PDF_ERROR_LOG_LEVEL", "DEBUG").upper()
DOCX_ERROR_LOG_LEVEL = os.getenv("DOCX_ERROR_LOG_LEVEL", "WARNING").upper()
