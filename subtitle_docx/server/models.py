"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for response serialization
and automatic OpenAPI documentation. Pydantic models enforce field types
at runtime and generate JSON Schema that appears in the /docs UI.

HOW: Each JSON endpoint has its own response model. Enums represent
closed sets like export format names. All models include Field
descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Enum values match formatter registry keys exactly
- Response models mirror the core IR dataclasses field for field
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from subtitle_docx.core.ir import TranslatorPackage, WordCountReport


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ExportFormat(str, Enum):
    """Available export format identifiers.

    RULES:
    - Values match keys in subtitle_docx.formatters.FORMATTERS exactly
    """

    word_count = "word_count"
    translator = "translator"
    archive = "archive"


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FileWordCountModel(BaseModel):
    """Reconstructed paragraphs and word count for one file."""

    name: str = Field(description="Uploaded file name.")
    paragraphs: List[str] = Field(description="Reconstructed prose paragraphs, in order.")
    words: int = Field(description="Word count of this file's paragraphs.")


class WordCountResponse(BaseModel):
    """Word-count report for an uploaded batch.

    RULES:
    - files are in upload order
    - total_words is the sum of every file's words
    """

    files: List[FileWordCountModel] = Field(description="Per-file results.")
    total_words: int = Field(description="Total words across all files.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "files": [
                    {
                        "name": "episode-01.srt",
                        "paragraphs": ["Ann: Hello there.", "Bye."],
                        "words": 4,
                    }
                ],
                "total_words": 4,
            }
        ]
    }}

    @classmethod
    def from_report(cls, report: WordCountReport) -> "WordCountResponse":
        return cls(
            files=[
                FileWordCountModel(name=f.name, paragraphs=f.paragraphs, words=f.words)
                for f in report.files
            ],
            total_words=report.total_words,
        )


class TranslatorRowModel(BaseModel):
    """One translator worksheet row."""

    file: str = Field(description="Source file name.")
    start_s: float = Field(description="Cue start time in seconds.")
    speaker: str = Field(description="Speaker name, or empty string.")
    source: str = Field(description="Whitespace-normalized cue text.")
    translation: str = Field(default="", description="Always empty; filled in by the translator.")


class TranslatorRowsResponse(BaseModel):
    """Translator worksheet rows for an uploaded batch."""

    rows: List[TranslatorRowModel] = Field(description="Rows ordered by file, then cue.")
    include_timestamps: bool = Field(description="Whether the worksheet shows a Start column.")

    @classmethod
    def from_package(cls, package: TranslatorPackage) -> "TranslatorRowsResponse":
        return cls(
            rows=[
                TranslatorRowModel(
                    file=r.file,
                    start_s=r.start_s,
                    speaker=r.speaker,
                    source=r.source,
                    translation=r.translation,
                )
                for r in package.rows
            ],
            include_timestamps=package.include_timestamps,
        )


class FormatInfo(BaseModel):
    """Description of an available export format."""

    key: ExportFormat = Field(description="Format identifier used in API paths.")
    name: str = Field(description="Human-readable format name.")
    filename: str = Field(description="File name of the produced document.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
