"""Speaker tag extraction from raw cue text.

WHY: Transcription vendors mark speaker turns inline, as a first line
like ``- [Anna] Hello there``. Word counts and translator worksheets want
the name separated from the spoken text so it can be shown as a prefix,
a column, or dropped entirely.

HOW: Only the first line of the cue is inspected. When it starts with
``- [Name]`` the tag is cut off, the remaining lines are joined with
spaces and whitespace is collapsed. Otherwise the lines are joined with
spaces and trimmed, nothing more.

RULES:
- Tag pattern: line starts with "- [", one or more non-"]" characters,
  "]", optional whitespace
- A tag on the second or later line is never recognized
- The speaker name is trimmed; the tag is removed from the text
- Untagged text keeps its internal spacing (only line breaks are joined)
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

_SPEAKER_TAG_RE = re.compile(r"^- \[([^\]]+)\]\s*")
_LINE_BREAK_RE = re.compile(r"\r?\n")
_WHITESPACE_RE = re.compile(r"\s+")


class SpeakerSplit(NamedTuple):
    """Speaker name (or None) and the cleaned cue text."""

    speaker: Optional[str]
    text: str


def extract_speaker(raw_text: str) -> SpeakerSplit:
    """Split a leading ``- [Name]`` speaker tag off a cue's text.

    Args:
        raw_text: Cue text as authored, lines joined by line breaks.

    Returns:
        SpeakerSplit with the speaker name (or None) and single-line text.
    """
    lines = _LINE_BREAK_RE.split(raw_text)
    first_line = lines[0].strip()
    match = _SPEAKER_TAG_RE.match(first_line)

    if match:
        speaker = match.group(1).strip()
        rest = [first_line[match.end():]] + lines[1:]
        text = _WHITESPACE_RE.sub(" ", " ".join(rest)).strip()
        return SpeakerSplit(speaker, text)

    return SpeakerSplit(None, _LINE_BREAK_RE.sub(" ", raw_text).strip())
