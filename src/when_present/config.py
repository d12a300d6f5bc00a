"""Local configuration for when-present."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_ENCODING_ERRORS = "replace"
DEFAULT_LOG_LEVEL = "WARNING"

# Source files are decoded leniently; a stray byte should not abort the analysis.
WHEN_PRESENT_ENCODING = os.getenv("WHEN_PRESENT_ENCODING", DEFAULT_ENCODING)
WHEN_PRESENT_ENCODING_ERRORS = os.getenv("WHEN_PRESENT_ENCODING_ERRORS", DEFAULT_ENCODING_ERRORS)
WHEN_PRESENT_LOG_LEVEL = os.getenv("WHEN_PRESENT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

EXIT_OK = 0
EXIT_USAGE_ERROR = 1
EXIT_DIRECTIVE_ERROR = 2
