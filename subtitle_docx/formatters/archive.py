"""Archive formatter — the original subtitle files, verbatim, in one document.

WHY: Clients want the delivered subtitles kept alongside the word count
and translation, in a format their document systems index. Combining the
raw files into one Word document does that without touching the content.

HOW: Bypasses parsing entirely. For each file: a Heading 2 with the file
name, then every raw line as its own paragraph in a monospace run, then
an empty paragraph as separator.

RULES:
- Content is never cleaned or reformatted; only "\\r" is removed
- Empty lines are written as a single space so they keep their height
- Line runs use the Consolas font
- Output file name: "archive-originals.docx"
"""

from __future__ import annotations

from typing import List, Mapping

from docx import Document

from subtitle_docx.core.ir import ExportBatch
from subtitle_docx.formatters.base import BaseFormatter, FormatterOutput, render_docx

ARCHIVE_FONT = "Consolas"


def build_archive_document(files: Mapping[str, str]):
    """Lay out raw file contents as a python-docx Document."""
    document = Document()
    for name, text in files.items():
        document.add_heading(name, level=2)
        for line in text.replace("\r", "").split("\n"):
            run = document.add_paragraph().add_run(line or " ")
            run.font.name = ARCHIVE_FONT
        document.add_paragraph("")
    return document


class ArchiveFormatter(BaseFormatter):
    """Formatter that combines the original files into one document."""

    @property
    def name(self) -> str:
        return "Archive Originals"

    @property
    def filename(self) -> str:
        return "archive-originals.docx"

    def format(self, batch: ExportBatch) -> List[FormatterOutput]:
        document = build_archive_document(batch.files)
        return [FormatterOutput(filename=self.filename, content=render_docx(document))]
