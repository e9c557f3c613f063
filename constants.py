"""Application constants."""

# Canvas pagination
DEFAULT_PER_PAGE = 100

# HTTP request timeout (in seconds)
REQUEST_TIMEOUT = 30

# Module names containing any of these (lowercased) are treated as syllabus modules
SYLLABUS_MODULE_KEYWORDS = ("syllabus", "introduction", "start")

# Synthesized module wrapping a course's syllabus_body
FALLBACK_MODULE_ID = "fallback"
FALLBACK_MODULE_NAME = "Course Syllabus (from syllabus_body)"
SYLLABUS_PREVIEW_LENGTH = 500

# Module item titles containing these are skipped unless addendum downloads are enabled
SKIPPED_TITLE_MARKERS = ("Addendum", "Wide")

# Document types that are downloaded and extracted
SUPPORTED_EXTENSIONS = (".pdf", ".docx")

# Report settings
CLOSEST_DUE_DATES_LIMIT = 3
OUTPUT_FILENAME = "output.json"
