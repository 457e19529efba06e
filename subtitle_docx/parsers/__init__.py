"""Subtitle parser registry — one parser per subtitle dialect.

WHY: The pipeline receives arbitrary file names and has to pick the
right parser for each. A central dict keyed by subtitle type makes the
lookup trivial and keeps adding a dialect to one line here.

HOW: PARSERS maps a type key ("srt", "vtt") to a parser function taking
the file text. detect_subtitle_type() derives the key from the file
extension. parse_subtitles() ties both together and stamps each caption
with its source file name.

RULES:
- Detection is by lowercase extension only, never by content sniffing
- Unknown extensions produce zero captions (logged, never raised)
- Parsers are pure functions: text in, list of Captions out
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import PurePath
from typing import Callable, Dict, List, Optional

from subtitle_docx.core.ir import Caption
from subtitle_docx.parsers.srt import parse_srt
from subtitle_docx.parsers.vtt import parse_vtt

logger = logging.getLogger(__name__)

PARSERS: Dict[str, Callable[[str], List[Caption]]] = {
    "srt": parse_srt,
    "vtt": parse_vtt,
}


def detect_subtitle_type(filename: str) -> Optional[str]:
    """Return the PARSERS key for a file name, or None if unsupported."""
    suffix = PurePath(filename).suffix.lower().lstrip(".")
    return suffix if suffix in PARSERS else None


def parse_subtitles(filename: str, text: str) -> List[Caption]:
    """Parse one subtitle file, choosing the parser by extension.

    Args:
        filename: File name used for type detection and as source_file.
        text: Full file contents.

    Returns:
        Captions stamped with source_file=filename; [] for unknown types.
    """
    kind = detect_subtitle_type(filename)
    if kind is None:
        logger.info("Skipping %s: not a recognized subtitle file", filename)
        return []

    captions = PARSERS[kind](text)
    logger.debug("Parsed %d captions from %s", len(captions), filename)
    return [dataclasses.replace(c, source_file=filename) for c in captions]
