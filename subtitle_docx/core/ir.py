"""Intermediate representation dataclasses for parsed subtitles and exports.

WHY: SRT and WebVTT files describe the same thing — timed snippets of
spoken text — in two different dialects. Downstream steps (paragraph
reconstruction, word counting, translator worksheets, .docx rendering)
should not care which dialect a cue came from. The IR provides a single,
well-typed form that the parsers produce and everything else consumes.

HOW: Dataclasses form a small hierarchy:
  Caption           — one timed cue after speaker/timestamp extraction
  ConversionOptions — immutable configuration record for one export
  FileWordCount     — reconstructed paragraphs and word total for one file
  WordCountReport   — all FileWordCounts plus the grand total
  TranslatorRow     — one worksheet row (source text + empty translation)
  TranslatorPackage — all rows plus the timestamp-column flag
  ExportBatch       — raw files, parsed captions and options; the single
                      input every formatter receives

RULES:
- All times are float seconds
- Caption order within a file is cue order; it is never re-sorted
- Caption and ConversionOptions are frozen; use dataclasses.replace()
- source_file is stamped by the pipeline, parsers leave it blank
- translation is always "" — a placeholder column for human completion
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Caption:
    """A single timed unit of subtitle text.

    WHY: Each subtitle cue carries raw markup (speaker tags, line breaks,
    timing dialects). Consumers need the cleaned text, the speaker, and
    float-second timing in one place.

    HOW: Created by a format parser from one block of subtitle markup.

    RULES:
    - text: whitespace-normalized, speaker tag removed (may be empty for SRT)
    - start_s <= end_s is expected but not enforced
    - speaker: extracted name from a leading "- [Name]" tag, or None
    - source_file: originating file name, "" until the pipeline stamps it
    """

    start_s: float
    end_s: float
    text: str
    speaker: Optional[str] = None
    source_file: str = ""


@dataclass(frozen=True)
class ConversionOptions:
    """Immutable configuration record for one export run.

    WHY: The paragraph heuristic and translator rows are driven by a few
    user toggles. Passing them as one explicit record keeps the core free
    of UI or CLI state.

    RULES:
    - gap_threshold_s: silence (seconds) between cues that starts a new
      paragraph; must be >= 0
    - keep_speakers: prefix paragraphs/rows with extracted speaker names
    - strip_bracketed: drop "[laughter]" / "♪♪" style noise cues
    - include_timestamps: add a Start column to the translator worksheet
    """

    gap_threshold_s: float = 2.5
    keep_speakers: bool = True
    strip_bracketed: bool = True
    include_timestamps: bool = True

    def __post_init__(self) -> None:
        if self.gap_threshold_s < 0:
            raise ValueError(
                "gap_threshold_s must be >= 0, got {}".format(self.gap_threshold_s)
            )


@dataclass
class FileWordCount:
    """Reconstructed paragraphs and word count for one source file."""

    name: str
    paragraphs: List[str] = field(default_factory=list)
    words: int = 0


@dataclass
class WordCountReport:
    """Word-count mode output: one entry per file plus the grand total."""

    files: List[FileWordCount]
    total_words: int


@dataclass
class TranslatorRow:
    """One row of the translator worksheet.

    RULES:
    - file: source file name
    - start_s: cue start in seconds (rendered only when timestamps are on)
    - speaker: speaker name, or "" when unknown or speakers are disabled
    - source: whitespace-normalized cue text
    - translation: always "" — filled in by the human translator
    """

    file: str
    start_s: float
    speaker: str
    source: str
    translation: str = ""


@dataclass
class TranslatorPackage:
    """Translator mode output: flat ordered rows across all files."""

    rows: List[TranslatorRow]
    include_timestamps: bool = True


@dataclass
class ExportBatch:
    """Everything a formatter needs to render one export.

    WHY: The three export modes look at different views of the same input:
    word count and translator need parsed captions, archive needs the raw
    text. Bundling both (plus the options) gives every formatter the same
    signature.

    RULES:
    - files: raw text per file name, in the order supplied
    - captions: parsed captions per file name, same keys and order as files
    - options: the ConversionOptions used for this export
    """

    files: Dict[str, str]
    captions: Dict[str, List[Caption]]
    options: ConversionOptions = field(default_factory=ConversionOptions)
