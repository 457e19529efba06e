"""Timestamp conversion between subtitle notation and float seconds.

WHY: SRT writes cue times as ``00:01:02,345`` and WebVTT as
``00:01:02.345``. The rest of the pipeline works in float seconds, and
the translator worksheet shows a coarse ``HH:MM:SS`` clock.

HOW: A single regex finds the first ``HH:MM:SS[.,]mmm`` substring
anywhere in the input. parse_timestamp() reports whether it matched;
to_seconds() is the lenient wrapper the parsers use.

RULES:
- Both "," and "." are accepted before the 3-digit millisecond field
- Exactly two digits per clock field, exactly three millisecond digits
- No match → 0.0 seconds, never an exception
- format_clock() floors every field and zero-pads to two digits
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})[.,](\d{3})")


class TimestampResult(NamedTuple):
    """Outcome of parsing one timestamp.

    seconds is 0.0 whenever parsed is False, so callers that only want
    the lenient behavior can ignore the flag.
    """

    seconds: float
    parsed: bool


def parse_timestamp(text: str) -> TimestampResult:
    """Parse the first ``HH:MM:SS,mmm`` / ``HH:MM:SS.mmm`` found in text.

    WHY: A single malformed timing line must never halt a whole batch,
    but callers that care (validation tools, tests) should still be able
    to tell a real ``00:00:00.000`` from a defaulted one.

    Args:
        text: Any string; the timestamp may be embedded anywhere in it.

    Returns:
        TimestampResult(seconds, parsed). Defaulted results are (0.0, False).
    """
    match = _TIMESTAMP_RE.search(text)
    if match is None:
        logger.debug("No timestamp found in %r, defaulting to 0", text)
        return TimestampResult(0.0, False)

    hours, minutes, seconds, millis = (int(group) for group in match.groups())
    return TimestampResult(hours * 3600 + minutes * 60 + seconds + millis / 1000, True)


def to_seconds(text: str) -> float:
    """Convert a subtitle timestamp to float seconds (0.0 if malformed)."""
    return parse_timestamp(text).seconds


def format_clock(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS`` for display.

    Fractions are dropped (floored), hours are not wrapped at 24 and may
    use more than two digits.
    """
    total = max(0, int(math.floor(seconds)))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return "{:02d}:{:02d}:{:02d}".format(hours, minutes, secs)
