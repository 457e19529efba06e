"""Translator worksheet formatter — one table row per cue.

WHY: Human translators work in Word. A table with the source text of
every cue (plus file, start time and speaker for context) and an empty
translation column lets them translate in place and hand the document
back for re-timing.

HOW: Builds a TranslatorPackage from the batch, then writes a title and
a single table. The Start column is inserted after File only when
include_timestamps is on, and shows the cue start as HH:MM:SS.

RULES:
- Title: "Translator Package" (Title style)
- Header row: File, [Start], Speaker, Source, Translation
- Translation cells are always empty
- Output file name: "translator-package.docx"
"""

from __future__ import annotations

from typing import List

from docx import Document

from subtitle_docx.core.ir import ExportBatch, TranslatorPackage, TranslatorRow
from subtitle_docx.core.pipeline import build_translator_package
from subtitle_docx.core.timestamps import format_clock
from subtitle_docx.formatters.base import BaseFormatter, FormatterOutput, render_docx


def translator_headers(include_timestamps: bool) -> List[str]:
    """Column headers for the worksheet table."""
    headers = ["File", "Speaker", "Source", "Translation"]
    if include_timestamps:
        headers.insert(1, "Start")
    return headers


def translator_cells(row: TranslatorRow, include_timestamps: bool) -> List[str]:
    """Cell texts for one worksheet row, matching translator_headers()."""
    cells = [row.file, row.speaker, row.source, ""]
    if include_timestamps:
        cells.insert(1, format_clock(row.start_s))
    return cells


def build_translator_document(package: TranslatorPackage):
    """Lay out a TranslatorPackage as a python-docx Document."""
    document = Document()
    document.add_heading("Translator Package", level=0)

    headers = translator_headers(package.include_timestamps)
    table = document.add_table(rows=1, cols=len(headers))
    table.style = "Table Grid"
    for cell, header in zip(table.rows[0].cells, headers):
        cell.text = header

    for row in package.rows:
        cells = table.add_row().cells
        for cell, value in zip(cells, translator_cells(row, package.include_timestamps)):
            cell.text = value

    return document


class TranslatorFormatter(BaseFormatter):
    """Formatter that produces the translator worksheet."""

    @property
    def name(self) -> str:
        return "Translator Package"

    @property
    def filename(self) -> str:
        return "translator-package.docx"

    def format(self, batch: ExportBatch) -> List[FormatterOutput]:
        package = build_translator_package(batch.captions, batch.options)
        document = build_translator_document(package)
        return [FormatterOutput(filename=self.filename, content=render_docx(document))]
