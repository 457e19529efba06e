"""Configuration constants, supported formats, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Supported subtitle extensions, the paragraph gap
threshold, and the export toggles are plain data — not buried in logic —
so both humans and deployment scripts can change them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from the environment with sensible defaults.
default_options() turns them into an immutable ConversionOptions record
that callers pass down to the core.

RULES:
- SUPPORTED_EXTENSIONS lists the subtitle extensions the parsers handle
- Boolean environment values are "true"/"false" (case-insensitive)
- An unparseable gap value raises ValueError when options are built
- The core never reads this module's globals directly; it only receives
  a ConversionOptions parameter
"""

from __future__ import annotations

import math
import os

from dotenv import load_dotenv

from subtitle_docx.core.ir import ConversionOptions

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Supported subtitle file extensions
# ---------------------------------------------------------------------------

SUPPORTED_EXTENSIONS: set[str] = {".srt", ".vtt"}
"""Subtitle file extensions handled by the parsers (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Conversion defaults
# ---------------------------------------------------------------------------

DEFAULT_GAP_SECONDS = os.getenv("SUBTITLE_DOCX_GAP_SECONDS", "2.5")
DEFAULT_KEEP_SPEAKERS = os.getenv("SUBTITLE_DOCX_KEEP_SPEAKERS", "true").lower() == "true"
DEFAULT_STRIP_BRACKETED = os.getenv("SUBTITLE_DOCX_STRIP_BRACKETED", "true").lower() == "true"
DEFAULT_INCLUDE_TIMESTAMPS = os.getenv("SUBTITLE_DOCX_INCLUDE_TIMESTAMPS", "true").lower() == "true"

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def parse_gap_seconds(value: str) -> float:
    """Parse a gap threshold from its textual form.

    RULES:
    - Must be a finite, non-negative number of seconds
    - Raises ValueError with a readable message otherwise
    """
    try:
        gap = float(value)
    except (TypeError, ValueError):
        raise ValueError("Gap threshold must be a number of seconds, got {!r}".format(value))
    if not math.isfinite(gap):
        raise ValueError("Gap threshold must be finite, got {!r}".format(value))
    return gap


def default_options() -> ConversionOptions:
    """Build the default ConversionOptions from the environment.

    WHY: The CLI and HTTP API both need the same starting point for their
    flags and form fields, and deployments may want different defaults
    (e.g. a longer gap for slow-paced documentaries).

    HOW: Reads the module-level defaults (populated from .env/environment)
    and constructs an immutable options record.

    RULES:
    - Raises ValueError if SUBTITLE_DOCX_GAP_SECONDS is not a valid number
    """
    return ConversionOptions(
        gap_threshold_s=parse_gap_seconds(DEFAULT_GAP_SECONDS),
        keep_speakers=DEFAULT_KEEP_SPEAKERS,
        strip_bracketed=DEFAULT_STRIP_BRACKETED,
        include_timestamps=DEFAULT_INCLUDE_TIMESTAMPS,
    )
