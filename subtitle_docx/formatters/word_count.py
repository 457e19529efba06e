"""Word-count document formatter — cleaned prose with per-file totals.

WHY: Project managers quote translation and transcription work by word
count. They need the count AND the text it was computed from, so a
client can check what was counted.

HOW: Builds a WordCountReport from the batch (paragraph reconstruction +
word counter), then writes a Word document: title, grand total, and for
each file a heading, its own total, and its paragraphs.

RULES:
- Title: "Word Count (Text Only)" (Title style)
- Second line: "Total words: N"
- Per file: empty paragraph, Heading 2 with the file name, "Words: N",
  then one document paragraph per reconstructed paragraph
- Output file name: "word-count-text-only.docx"
"""

from __future__ import annotations

from typing import List

from docx import Document

from subtitle_docx.core.ir import ExportBatch, WordCountReport
from subtitle_docx.core.pipeline import build_word_count_report
from subtitle_docx.formatters.base import BaseFormatter, FormatterOutput, render_docx


def build_word_count_document(report: WordCountReport):
    """Lay out a WordCountReport as a python-docx Document."""
    document = Document()
    document.add_heading("Word Count (Text Only)", level=0)
    document.add_paragraph("Total words: {}".format(report.total_words))

    for entry in report.files:
        document.add_paragraph("")
        document.add_heading(entry.name, level=2)
        document.add_paragraph("Words: {}".format(entry.words))
        for paragraph in entry.paragraphs:
            document.add_paragraph(paragraph)

    return document


class WordCountFormatter(BaseFormatter):
    """Formatter that produces the word-count document."""

    @property
    def name(self) -> str:
        return "Word Count"

    @property
    def filename(self) -> str:
        return "word-count-text-only.docx"

    def format(self, batch: ExportBatch) -> List[FormatterOutput]:
        report = build_word_count_report(batch.captions, batch.options)
        document = build_word_count_document(report)
        return [FormatterOutput(filename=self.filename, content=render_docx(document))]
