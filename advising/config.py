"""
Configuration constants for the advising system.

This module contains all configuration values and constants used throughout
the progress engines. Centralizing these makes it easy to adjust
behavior as university policies change.
"""

import math
import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Bundled catalog data lives inside the package so it ships with the wheel
BASE_DIR = Path(__file__).parent
CATALOG_DIR = BASE_DIR / "data" / "catalog"

# Where profiles are persisted (one JSON file per key)
STORAGE_DIR = Path(
    os.environ.get("COURSE_COMPASS_HOME", Path.home() / ".course_compass")
)

LOG_LEVEL = os.environ.get("COURSE_COMPASS_LOG_LEVEL", "WARNING")


# =============================================================================
# PERSISTED KEYS
# =============================================================================
# Three logical keyspaces:
#   - profiles-list     ordered list of profile ids
#   - current-profile   id of the active profile (or null)
#   - profile-<id>      one serialized StudentProfile per id

PROFILES_LIST_KEY = "profiles-list"
CURRENT_PROFILE_KEY = "current-profile"
PROFILE_KEY_PREFIX = "profile-"

# Bumped whenever the persisted profile shape changes.
#   1 = single "major" string (pre multi-major)
#   2 = "majors" list
PROFILE_SCHEMA_VERSION = 2


def profile_key(profile_id: str) -> str:
    """Storage key for a single profile record."""
    return f"{PROFILE_KEY_PREFIX}{profile_id}"


# =============================================================================
# UNIVERSITY-WIDE REQUIREMENTS
# =============================================================================

TOTAL_GRADUATION_UNITS = 120
UPPER_DIVISION_MIN_UNITS = 42
UPPER_DIVISION_COURSE_NUMBER = 300   # 300- and 400-level courses

# Full-time load used to turn remaining units into semesters
UNITS_PER_SEMESTER = 15

# Exit seminar recommended ahead of everything else when still open
EXIT_SEMINAR_CODE = "UNIV 301"


# =============================================================================
# GEN ED SLOT MODEL
# =============================================================================
# The overall gen-ed percentage treats requirements as a fixed set of slots:
#   3 foundations + 2 language + 2 seminars + 4 EP domains + 3 BC = 14
# Building Connections slots are earned per 3 units, capped at 3.

BC_UNITS_PER_SLOT = 3
BC_SLOTS = 3


# =============================================================================
# MAJOR / MINOR ESTIMATES
# =============================================================================

MAJOR_ELECTIVE_SLOTS = 3
MAJOR_EMPHASIS_SLOTS = 5
# Emphasis courses credited toward completion (the rest are tracked only)
MAJOR_EMPHASIS_CREDIT_CAP = 3

# Unmodeled majors are estimated against a nominal course count
ESTIMATED_MAJOR_COURSES = 15

# Unmodeled minors report this many units required
ESTIMATED_MINOR_UNITS = 18

MAX_SUGGESTED_MINORS = 3
DEFAULT_MAX_RECOMMENDATIONS = 5

# Courses missing a unit count on a pasted transcript
DEFAULT_COURSE_UNITS = 3.0


# =============================================================================
# ADVISOR CHAT
# =============================================================================

CHAT_API_URL = "https://api.anthropic.com/v1/messages"
CHAT_API_VERSION = "2023-06-01"
CHAT_MODEL = os.environ.get("COURSE_COMPASS_CHAT_MODEL", "claude-sonnet-4-20250514")
CHAT_MAX_TOKENS = 1024
CHAT_TIMEOUT_SECONDS = 60


def chat_api_key() -> str:
    """Read the chat API key at call time so it can be set after import."""
    return os.environ.get("ANTHROPIC_API_KEY", "")


# =============================================================================
# PERCENT UTILITIES
# =============================================================================

def round_half_up(value: float) -> int:
    """
    Round .5 away from zero for positive values.

    Python's round() uses banker's rounding (round(12.5) == 12); progress
    bars have always shown 13 for 1/8, so we round half up instead.
    """
    return int(math.floor(value + 0.5))


def percent_of(part: float, whole: float) -> int:
    """Integer percentage of part/whole, 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
