"""FastAPI application with export routes and OpenAPI docs.

WHY: Other tools (intranet upload pages, n8n flows, curl scripts) need
the converter over HTTP: upload subtitle files, get back a Word document
or the structured word-count / translator data. FastAPI provides request
validation, multipart handling and automatic OpenAPI documentation.

HOW: A single FastAPI app exposes five endpoints grouped by tags. Every
upload endpoint reads all files into memory, decodes them as UTF-8,
builds one ExportBatch with the submitted options, and answers
synchronously — exports are fast, so there is no job queue.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- Error responses use a consistent ErrorResponse schema
- Unknown export format → 404; bad upload or options → 400
- Any undecodable file fails the whole request (no partial exports)
- Unknown file extensions are accepted and contribute zero captions
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Dict, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from subtitle_docx import __version__
from subtitle_docx.config import default_options, parse_gap_seconds
from subtitle_docx.core.files import decode_subtitle_bytes
from subtitle_docx.core.ir import ConversionOptions, ExportBatch
from subtitle_docx.core.pipeline import (
    build_batch,
    build_translator_package,
    build_word_count_report,
)
from subtitle_docx.formatters import FORMATTERS
from subtitle_docx.server.models import (
    ErrorResponse,
    ExportFormat,
    FormatInfo,
    HealthResponse,
    TranslatorRowsResponse,
    WordCountResponse,
)

logger = logging.getLogger(__name__)

_DEFAULTS = default_options()

app = FastAPI(
    title="Subtitle to Word Converter API",
    description=(
        "REST API for turning .srt/.vtt subtitle files into Word documents: "
        "word counts over reconstructed paragraphs, translator worksheets, "
        "and archives of the original files."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

_UPLOAD_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid upload or options"},
}

UploadedFiles = Annotated[
    Optional[List[UploadFile]],
    File(description="One or more .srt/.vtt files (UTF-8)."),
]
GapThreshold = Annotated[
    str,
    Form(description="Silence in seconds between cues that starts a new paragraph."),
]
KeepSpeakers = Annotated[
    bool,
    Form(description="Prefix paragraphs and rows with extracted speaker names."),
]
StripBracketed = Annotated[
    bool,
    Form(description="Drop [sound effect] and music-only cues from word counts."),
]
IncludeTimestamps = Annotated[
    bool,
    Form(description="Include a Start column in the translator worksheet."),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _read_uploads(files: Optional[List[UploadFile]]) -> Dict[str, str]:
    """Read and decode every uploaded file into a ``{name: text}`` mapping.

    RULES:
    - File names are reduced to their base name (no directories)
    - Duplicate names and non-UTF-8 content raise HTTPException(400)
    """
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")

    contents: Dict[str, str] = {}
    for upload in files:
        name = Path(upload.filename or "upload").name
        if name in contents:
            raise HTTPException(
                status_code=400,
                detail="Duplicate file name '{}'. Uploaded files must have unique names.".format(name),
            )
        data = await upload.read()
        try:
            contents[name] = decode_subtitle_bytes(data)
        except UnicodeDecodeError:
            raise HTTPException(
                status_code=400,
                detail="File '{}' is not valid UTF-8 text.".format(name),
            )
    return contents


def _build_options(
    gap_threshold_s: str,
    keep_speakers: bool,
    strip_bracketed: bool,
    include_timestamps: bool,
) -> ConversionOptions:
    """Build ConversionOptions, mapping validation errors to 400."""
    try:
        return ConversionOptions(
            gap_threshold_s=parse_gap_seconds(gap_threshold_s),
            keep_speakers=keep_speakers,
            strip_bracketed=strip_bracketed,
            include_timestamps=include_timestamps,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


async def _load_batch(
    files: Optional[List[UploadFile]],
    gap_threshold_s: str,
    keep_speakers: bool,
    strip_bracketed: bool,
    include_timestamps: bool,
) -> ExportBatch:
    options = _build_options(gap_threshold_s, keep_speakers, strip_bracketed, include_timestamps)
    contents = await _read_uploads(files)
    return build_batch(contents, options)


# ---------------------------------------------------------------------------
# Endpoints: Exports
# ---------------------------------------------------------------------------


@app.post(
    "/exports/{format_key}",
    tags=["exports"],
    summary="Export uploaded subtitles as a Word document",
    description=(
        "Upload one or more subtitle files and receive the Word document for "
        "the chosen export format (word_count, translator, archive)."
    ),
    responses={
        200: {
            "content": {
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document": {},
            },
            "description": "The generated .docx document.",
        },
        404: {"model": ErrorResponse, "description": "Unknown export format"},
        **_UPLOAD_ERRORS,
    },
)
async def create_export(
    format_key: str,
    files: UploadedFiles = None,
    gap_threshold_s: GapThreshold = str(_DEFAULTS.gap_threshold_s),
    keep_speakers: KeepSpeakers = _DEFAULTS.keep_speakers,
    strip_bracketed: StripBracketed = _DEFAULTS.strip_bracketed,
    include_timestamps: IncludeTimestamps = _DEFAULTS.include_timestamps,
) -> Response:
    if format_key not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        raise HTTPException(
            status_code=404,
            detail="Unknown export format '{}'. Available: {}".format(format_key, available),
        )

    batch = await _load_batch(
        files, gap_threshold_s, keep_speakers, strip_bracketed, include_timestamps,
    )

    formatter = FORMATTERS[format_key]()
    try:
        output = formatter.format(batch)[0]
    except ValueError:
        # python-docx rejects text that cannot be stored in XML
        logger.exception("Failed to render %s export", format_key)
        raise HTTPException(
            status_code=400,
            detail="Could not render the document from the uploaded files.",
        )

    logger.info("Rendered %s export for %d file(s)", format_key, len(batch.files))
    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(output.filename)},
    )


@app.post(
    "/word-counts",
    response_model=WordCountResponse,
    tags=["data"],
    summary="Word counts over reconstructed paragraphs",
    description=(
        "Upload subtitle files and receive the reconstructed paragraphs and "
        "word counts per file as JSON, plus the grand total."
    ),
    responses=_UPLOAD_ERRORS,
)
async def word_counts(
    files: UploadedFiles = None,
    gap_threshold_s: GapThreshold = str(_DEFAULTS.gap_threshold_s),
    keep_speakers: KeepSpeakers = _DEFAULTS.keep_speakers,
    strip_bracketed: StripBracketed = _DEFAULTS.strip_bracketed,
) -> WordCountResponse:
    batch = await _load_batch(
        files, gap_threshold_s, keep_speakers, strip_bracketed, _DEFAULTS.include_timestamps,
    )
    report = build_word_count_report(batch.captions, batch.options)
    return WordCountResponse.from_report(report)


@app.post(
    "/translator-rows",
    response_model=TranslatorRowsResponse,
    tags=["data"],
    summary="Translator worksheet rows",
    description=(
        "Upload subtitle files and receive one row per cue (file, start, "
        "speaker, source text, empty translation) as JSON."
    ),
    responses=_UPLOAD_ERRORS,
)
async def translator_rows(
    files: UploadedFiles = None,
    keep_speakers: KeepSpeakers = _DEFAULTS.keep_speakers,
    include_timestamps: IncludeTimestamps = _DEFAULTS.include_timestamps,
) -> TranslatorRowsResponse:
    batch = await _load_batch(
        files, str(_DEFAULTS.gap_threshold_s), keep_speakers, _DEFAULTS.strip_bracketed, include_timestamps,
    )
    package = build_translator_package(batch.captions, batch.options)
    return TranslatorRowsResponse.from_package(package)


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available export formats",
    description="Returns all export formats with their identifiers, names and file names.",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(key=ExportFormat(key), name=formatter.name, filename=formatter.filename))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Start the API under uvicorn (see cli.serve for the console script)."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
