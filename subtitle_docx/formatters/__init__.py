"""Export formatter registry — pluggable document hub.

WHY: The CLI and API layers need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new export
modes: create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["translator"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from subtitle_docx.formatters.archive import ArchiveFormatter
from subtitle_docx.formatters.translator import TranslatorFormatter
from subtitle_docx.formatters.word_count import WordCountFormatter

if TYPE_CHECKING:
    from subtitle_docx.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "word_count": WordCountFormatter,
    "translator": TranslatorFormatter,
    "archive": ArchiveFormatter,
}
