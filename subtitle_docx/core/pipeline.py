"""Batch parsing and per-mode export data construction.

WHY: An export always covers a batch of files. The CLI, the HTTP API and
the formatters all need the same steps — parse every file, stamp the
captions with their file name, then derive the structure a given export
mode needs. Doing it once here keeps those layers thin.

HOW: parse_files() runs each file through the parser registry.
build_batch() bundles raw text, captions and options into the ExportBatch
IR. build_word_count_report() and build_translator_package() derive the
word-count and translator structures from parsed captions. Archive mode
needs no derivation: it uses ExportBatch.files as-is.

RULES:
- File order follows the input mapping; caption order follows cue order
- Unknown file types are included with zero captions (and zero words)
- Word counts are summed per paragraph, after speaker prefixes are added
- Translator rows are not noise-filtered: one row per parsed caption
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from subtitle_docx.core.ir import (
    Caption,
    ConversionOptions,
    ExportBatch,
    FileWordCount,
    TranslatorPackage,
    TranslatorRow,
    WordCountReport,
)
from subtitle_docx.core.paragraphs import normalize_text, reconstruct_paragraphs
from subtitle_docx.core.wordcount import count_words
from subtitle_docx.parsers import parse_subtitles


def parse_files(files: Mapping[str, str]) -> Dict[str, List[Caption]]:
    """Parse every file in a ``{name: text}`` mapping.

    Returns:
        ``{name: captions}`` with the same keys in the same order.
    """
    return {name: parse_subtitles(name, text) for name, text in files.items()}


def build_batch(
    files: Mapping[str, str],
    options: Optional[ConversionOptions] = None,
) -> ExportBatch:
    """Parse a batch of raw files into the ExportBatch IR.

    Args:
        files: Raw text per file name.
        options: Conversion options; defaults to ConversionOptions().

    Returns:
        ExportBatch ready for any formatter.
    """
    return ExportBatch(
        files=dict(files),
        captions=parse_files(files),
        options=options if options is not None else ConversionOptions(),
    )


def build_word_count_report(
    captions_by_file: Mapping[str, List[Caption]],
    options: Optional[ConversionOptions] = None,
) -> WordCountReport:
    """Reconstruct paragraphs and count words for every file.

    WHY: Word-count mode reports per-file and total counts of the
    cleaned prose, which is what translation quotes are based on.

    RULES:
    - Per-file words = sum of count_words() over that file's paragraphs
    - total_words = sum over all files
    """
    if options is None:
        options = ConversionOptions()

    results: List[FileWordCount] = []
    for name, captions in captions_by_file.items():
        paragraphs = reconstruct_paragraphs(captions, options)
        words = sum(count_words(p) for p in paragraphs)
        results.append(FileWordCount(name=name, paragraphs=paragraphs, words=words))

    return WordCountReport(
        files=results,
        total_words=sum(f.words for f in results),
    )


def build_translator_package(
    captions_by_file: Mapping[str, List[Caption]],
    options: Optional[ConversionOptions] = None,
) -> TranslatorPackage:
    """Flatten all captions into translator worksheet rows.

    WHY: Translators work cue by cue so the translation can be timed back
    onto the video. Each row carries the file, start time, speaker and
    source text, with an empty translation cell to fill in.

    RULES:
    - Rows are ordered by file, then by cue
    - speaker is "" when keep_speakers is off or the cue has no speaker
    - source is whitespace-normalized caption text
    """
    if options is None:
        options = ConversionOptions()

    rows: List[TranslatorRow] = []
    for captions in captions_by_file.values():
        for caption in captions:
            speaker = (caption.speaker or "") if options.keep_speakers else ""
            rows.append(TranslatorRow(
                file=caption.source_file,
                start_s=caption.start_s,
                speaker=speaker,
                source=normalize_text(caption.text),
            ))

    return TranslatorPackage(rows=rows, include_timestamps=options.include_timestamps)
