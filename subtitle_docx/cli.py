"""Command-line interface for the subtitle to Word converter.

WHY: Users need a simple way to turn a folder of .srt/.vtt files into
word-count, translator and archive documents from the terminal. The CLI
wires together the full pipeline — reading files, parsing, paragraph
reconstruction, pluggable formatter output, and file saving — behind a
single command.

HOW: Uses argparse to accept input files, conversion toggles, output
format selection and output directory. Reads every file up front, builds
one ExportBatch, runs each selected formatter and saves its documents.
Status messages go to stderr.

RULES:
- Positional arguments: one or more subtitle file paths
- --formats: comma-separated formatter keys (default: all registered)
- Output directory defaults to the first input file's directory
- Output naming: formatter file name, numeric suffix on conflict
  (word-count-text-only-2.docx)
- Files with unrecognized extensions are reported and contribute nothing
  except their raw text in the archive
- Any read failure aborts the whole batch with exit code 1
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from subtitle_docx import __version__
from subtitle_docx.config import SUPPORTED_EXTENSIONS, default_options, parse_gap_seconds
from subtitle_docx.core.files import read_subtitle_files
from subtitle_docx.core.ir import ConversionOptions
from subtitle_docx.core.pipeline import build_batch
from subtitle_docx.formatters import FORMATTERS
from subtitle_docx.formatters.base import FormatterOutput
from subtitle_docx.parsers import detect_subtitle_type


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    """Print an error to stderr and exit with status 1."""
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(filename: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the converter several times into the same folder.
    Overwriting a previous export could lose a translator's work.

    RULES:
    - First attempt: {filename} (e.g. translator-package.docx)
    - Conflict: insert counter before the extension
      (e.g. translator-package-2.docx)
    - Counter starts at 2 and increments

    Args:
        filename: Formatter's output file name.
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / filename
    if not base_path.exists():
        return base_path

    stem = base_path.stem
    ext = base_path.suffix

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, output_dir: Path) -> Path:
    """Save a single formatter output to disk and return its path."""
    path = _resolve_output_path(output.filename, output_dir)
    path.write_bytes(output.content)
    return path


def _parse_format_keys(formats: Optional[str]) -> List[str]:
    """Validate the --formats value; default to every registered formatter."""
    if not formats:
        return list(FORMATTERS.keys())

    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _options_from_args(args: argparse.Namespace) -> ConversionOptions:
    """Build the immutable options record from parsed flags."""
    return ConversionOptions(
        gap_threshold_s=args.gap,
        keep_speakers=args.speakers,
        strip_bracketed=args.strip_bracketed,
        include_timestamps=args.timestamps,
    )


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the full export pipeline.

    RULES:
    - Validate inputs, formats and output directory before reading files
    - Read all files first; any failure aborts before anything is written
    - Render every selected format before saving; a render failure
      aborts with nothing written
    - Save each formatter's output files with conflict avoidance

    Returns:
        Paths of the saved documents.
    """
    input_paths = [Path(p).resolve() for p in args.input_files]
    for path in input_paths:
        if not path.is_file():
            _fail("File not found: {}".format(path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_paths[0].parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys = _parse_format_keys(args.formats)

    try:
        options = _options_from_args(args)
    except ValueError as e:
        _fail(str(e))

    _status("Reading {} file(s)...".format(len(input_paths)))
    try:
        files = read_subtitle_files(input_paths)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _fail(str(e))

    for name in files:
        if detect_subtitle_type(name) is None:
            _status("  Skipping {}: not a {} file".format(
                name, " or ".join(sorted(SUPPORTED_EXTENSIONS))))

    batch = build_batch(files, options)
    for name, captions in batch.captions.items():
        if detect_subtitle_type(name) is not None:
            _status("  {}: {} captions".format(name, len(captions)))

    _status("Formatting output...")
    outputs: List[FormatterOutput] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        try:
            outputs.extend(formatter.format(batch))
        except ValueError as e:
            # python-docx rejects control characters that XML cannot store
            _fail("Could not render {}: {}".format(formatter.name, e))

    saved_files: List[Path] = []
    for output in outputs:
        saved_path = _save_output(output, output_dir)
        saved_files.append(saved_path)
        _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without running
    the pipeline. Flag defaults come from config (environment / .env).
    """
    defaults = default_options()

    parser = argparse.ArgumentParser(
        prog="subtitle_docx",
        description="Convert .srt/.vtt subtitle files into Word documents "
                    "(word count, translator worksheet, archive).",
    )

    parser.add_argument(
        "input_files",
        nargs="+",
        help="Paths to the subtitle files to convert.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: directory of the first input file).",
    )

    parser.add_argument(
        "--gap",
        type=parse_gap_seconds,
        default=defaults.gap_threshold_s,
        help="Silence in seconds between cues that starts a new paragraph (default: %(default)s).",
    )

    parser.add_argument(
        "--speakers",
        action=argparse.BooleanOptionalAction,
        default=defaults.keep_speakers,
        help="Prefix paragraphs and rows with speaker names.",
    )

    parser.add_argument(
        "--strip-bracketed",
        action=argparse.BooleanOptionalAction,
        default=defaults.strip_bracketed,
        help="Drop [sound effect] and music-only cues from word counts.",
    )

    parser.add_argument(
        "--timestamps",
        action=argparse.BooleanOptionalAction,
        default=defaults.include_timestamps,
        help="Include a Start column in the translator worksheet.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Invalid environment defaults (e.g. SUBTITLE_DOCX_GAP_SECONDS) exit 1
    """
    try:
        parser = build_parser()
    except ValueError as e:
        _fail("Invalid configuration: {}".format(e))
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    run(args)


def serve() -> None:
    """Entry point for the HTTP API (subtitle-docx-api, --serve).

    The server module reads its form defaults from config on import, so
    an invalid environment value is reported here instead of as a traceback.
    """
    try:
        from subtitle_docx.server.app import run_api
    except ValueError as e:
        _fail("Invalid configuration: {}".format(e))
    run_api()


if __name__ == "__main__":
    main()
