"""WebVTT (.vtt) parser.

WHY: Browser players and most streaming pipelines deliver WebVTT. The
files we receive are simple — a WEBVTT header followed by timing blocks
— so a small block parser is enough.

HOW: Strip the header, split the body on blank lines, and keep every
block that has at least two non-empty lines and a ``HH:MM:SS.mmm -->
HH:MM:SS.mmm`` timing line. The other lines of the block are the cue
text, which goes through the speaker extractor.

RULES:
- Header: a leading "WEBVTT..." line (any case) plus following line breaks
- Blocks without a timing line, with fewer than two lines, or whose
  timing line does not match are skipped silently (NOTE/STYLE blocks too)
- Only the full HH:MM:SS.mmm form is recognized (no MM:SS.mmm shorthand)
- Cue identifier and settings lines are not special: an identifier line
  before the timing line ends up in the cue text
- Cues with empty text after cleaning are DROPPED by default
"""

from __future__ import annotations

import re
from typing import List

from subtitle_docx.core.ir import Caption
from subtitle_docx.core.speakers import extract_speaker
from subtitle_docx.core.timestamps import to_seconds

_HEADER_RE = re.compile(r"^WEBVTT[^\n]*(?:\r?\n)*", re.IGNORECASE)
_BLOCK_SPLIT_RE = re.compile(r"\r?\n\r?\n")
_LINE_SPLIT_RE = re.compile(r"\r?\n")
_TIMING_RE = re.compile(r"(\d{2}:\d{2}:\d{2}\.\d{3})\s*-->\s*(\d{2}:\d{2}:\d{2}\.\d{3})")


def parse_vtt(text: str, drop_empty: bool = True) -> List[Caption]:
    """Parse WebVTT file text into Captions.

    Args:
        text: Full WebVTT file contents.
        drop_empty: Drop cues whose text is empty after speaker extraction.

    Returns:
        Captions in cue order.
    """
    body = _HEADER_RE.sub("", text, count=1)
    captions: List[Caption] = []

    for block in _BLOCK_SPLIT_RE.split(body):
        lines = [line for line in _LINE_SPLIT_RE.split(block) if line]
        if len(lines) < 2:
            continue

        timing_line = next((line for line in lines if "-->" in line), None)
        if timing_line is None:
            continue

        match = _TIMING_RE.search(timing_line)
        if match is None:
            continue

        raw_text = "\n".join(line for line in lines if line != timing_line)
        split = extract_speaker(raw_text)
        if drop_empty and not split.text:
            continue

        captions.append(Caption(
            start_s=to_seconds(match.group(1)),
            end_s=to_seconds(match.group(2)),
            text=split.text,
            speaker=split.speaker,
        ))

    return captions
