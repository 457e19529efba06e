"""Abstract base formatter and output container.

WHY: Every export mode consumes the same ExportBatch IR but produces a
different Word document. This base class enforces a consistent interface
so the CLI and API layers can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles an output file name with its content bytes and MIME type.
render_docx() is the shared python-docx serialization step.

RULES:
- Subclasses MUST implement ``name`` (human-readable), ``filename``
  (default output name) and ``format()``
- ``format()`` returns a list — every current formatter returns one item
- Document content is bytes (.docx); the caller decides where it is saved
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from docx.document import Document as DocumentObject

from subtitle_docx.config import DOCX_MEDIA_TYPE
from subtitle_docx.core.ir import ExportBatch


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        filename: Suggested file name, e.g. ``"translator-package.docx"``.
        content: The serialized document.
        media_type: MIME type for the content.
    """

    filename: str
    content: bytes
    media_type: str = DOCX_MEDIA_TYPE


def render_docx(document: DocumentObject) -> bytes:
    """Serialize a python-docx Document to bytes."""
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class BaseFormatter(ABC):
    """Abstract base for all export formatters.

    To add a new export mode:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement name, filename and format()
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Translator Package'."""

    @property
    @abstractmethod
    def filename(self) -> str:
        """Default output file name, e.g. 'translator-package.docx'."""

    @abstractmethod
    def format(self, batch: ExportBatch) -> List[FormatterOutput]:
        """Render the export batch into one or more output files.

        Args:
            batch: Raw files, parsed captions and conversion options.

        Returns:
            List of FormatterOutput objects.
        """
