"""SubRip (.srt) parser.

WHY: SRT is the most common subtitle delivery format. Its block
structure (index, timing line, text lines, blank separator) has many
real-world variations — CRLF line endings, missing trailing blank line,
stray whitespace — that a mature tokenizer already handles.

HOW: Structural parsing is delegated to the `srt` library with
ignore_errors=True, so unparseable fragments are skipped instead of
failing the whole file. Each subtitle's content goes through the speaker
extractor; its start/end timedeltas become float seconds.

RULES:
- Cue order is the file order; duplicate or overlapping indices are kept
- Multi-line cue text is joined into a single line
- Empty-text cues are KEPT by default (drop_empty=False); the paragraph
  reconstructor and noise filter deal with them later
- source_file is left blank for the caller to fill in
"""

from __future__ import annotations

from typing import List

import srt

from subtitle_docx.core.ir import Caption
from subtitle_docx.core.speakers import extract_speaker


def parse_srt(text: str, drop_empty: bool = False) -> List[Caption]:
    """Parse SRT file text into Captions.

    Args:
        text: Full SRT file contents.
        drop_empty: Drop cues whose text is empty after speaker extraction.

    Returns:
        Captions in cue order.
    """
    captions: List[Caption] = []
    for subtitle in srt.parse(text, ignore_errors=True):
        split = extract_speaker(subtitle.content)
        if drop_empty and not split.text:
            continue
        captions.append(Caption(
            start_s=subtitle.start.total_seconds(),
            end_s=subtitle.end.total_seconds(),
            text=split.text,
            speaker=split.speaker,
        ))
    return captions
