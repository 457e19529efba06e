"""Subtitle to Word converter — word counts, translator worksheets, archives.

WHY: Subtitle files (.srt/.vtt) are a poor format for counting words or
handing to a translator. Cues are short, timestamped fragments, often
tagged with speakers and sprinkled with sound-effect annotations. This
package turns them into clean prose paragraphs and renders Word documents
for three use cases: word-count extraction, translator worksheets, and
archival combination of the raw files.

HOW: Three-stage pipeline — parse (format parsers produce Captions),
reconstruct (paragraph heuristic + word counter), format (pluggable .docx
formatters). Each stage is independently testable.

RULES:
- All formatters consume the same ExportBatch IR
- Adding a new export mode = one new formatter module, no core changes
- Parsing, reconstruction and counting never perform I/O; reading files
  and saving documents live at the edges (core.files, cli, server)
"""

__version__ = "0.1.0"
