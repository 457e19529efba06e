"""Core parsing-independent logic and intermediate representation modules.

WHY: The core package contains the stable heart of the converter —
the IR dataclasses, the timestamp and speaker helpers, the paragraph
reconstruction heuristic and the word counter. These are consumed by
the parsers and all formatters and must remain backward-compatible.

HOW: ir.py defines the data structures, timestamps.py and speakers.py
clean up raw cue fields, paragraphs.py and wordcount.py turn captions
into counted prose, pipeline.py builds per-mode data for a batch of
files, files.py reads subtitle files from disk.

RULES:
- IR dataclasses are the contract — change with care
- Everything except files.py is pure (no I/O, no global state)
- Malformed subtitle input degrades silently; it never raises
"""
