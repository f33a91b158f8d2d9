"""Local configuration for sectionize."""

from __future__ import annotations

import os


DEFAULT_RANK_PROPERTY_NAME = "dataHeadingRank"
DEFAULT_ID_PROPERTY_NAME = "ariaLabelledby"
DEFAULT_PARSER = "html.parser"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "sectionize/0.1"

# Only the command line reads these; library defaults stay fixed.
SECTIONIZE_RANK_PROPERTY_NAME = os.getenv("SECTIONIZE_RANK_PROPERTY_NAME", DEFAULT_RANK_PROPERTY_NAME)
SECTIONIZE_ID_PROPERTY_NAME = os.getenv("SECTIONIZE_ID_PROPERTY_NAME", DEFAULT_ID_PROPERTY_NAME)
SECTIONIZE_ENABLE_ROOT_SECTION = os.getenv("SECTIONIZE_ENABLE_ROOT_SECTION", "false").lower() == "true"
SECTIONIZE_PARSER = os.getenv("SECTIONIZE_PARSER", DEFAULT_PARSER)
SECTIONIZE_FETCH_TIMEOUT_S = float(os.getenv("SECTIONIZE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
SECTIONIZE_FETCH_MAX_RETRIES = int(os.getenv("SECTIONIZE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
SECTIONIZE_FETCH_BACKOFF_S = float(os.getenv("SECTIONIZE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
SECTIONIZE_USER_AGENT = os.getenv("SECTIONIZE_USER_AGENT", DEFAULT_USER_AGENT)
