"""Reading subtitle files from disk into a name → text mapping.

WHY: Every export mode starts from the full text of each input file,
keyed by its file name (the name is what shows up in the documents).
Keeping the I/O here lets the rest of the core stay pure.

HOW: Each path is read whole as UTF-8. A leading byte-order mark, common
in subtitle files saved by Windows tools, is dropped by decoding with
"utf-8-sig". The mapping preserves the order paths were given.

RULES:
- Any read or decode failure propagates — one bad file fails the batch
- Two paths with the same file name raise ValueError (names are keys)
- No extension filtering here; unknown types are handled by the parsers
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Union


def decode_subtitle_bytes(data: bytes) -> str:
    """Decode raw subtitle bytes as UTF-8, dropping a leading BOM.

    Raises:
        UnicodeDecodeError: If the bytes are not valid UTF-8.
    """
    return data.decode("utf-8-sig")


def read_subtitle_files(paths: Iterable[Union[str, Path]]) -> Dict[str, str]:
    """Read subtitle files into an ordered ``{file name: text}`` mapping.

    Args:
        paths: Paths to .srt/.vtt (or any other) files.

    Returns:
        Dict mapping each file's name (not full path) to its decoded text.

    Raises:
        FileNotFoundError / OSError: If a file cannot be read.
        UnicodeDecodeError: If a file is not valid UTF-8.
        ValueError: If two paths share the same file name.
    """
    files: Dict[str, str] = {}
    for raw_path in paths:
        path = Path(raw_path)
        if path.name in files:
            raise ValueError(
                "Duplicate file name '{}'. Input files must have unique names.".format(path.name)
            )
        files[path.name] = decode_subtitle_bytes(path.read_bytes())
    return files
