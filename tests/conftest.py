"""Shared test fixtures for the subtitle_docx test suite.

WHY: Several test modules need the same small subtitle files — an SRT
with a speaker-tagged cue, a WebVTT file with header and noise cues —
and the captions they parse into. Centralizing them here keeps every
module testing against the same authoritative samples.

HOW: Pytest fixtures provide raw file text and pre-built Caption lists.
make_caption() builds captions with short keyword arguments.

RULES:
- Sample texts use "\\n" line endings unless a test is about CRLF.
- Caption timings are exact binary-friendly values to keep float
  comparisons simple; pytest.approx is still used for parsed times.
"""

from typing import List, Optional

import pytest

from subtitle_docx.core.ir import Caption


# ---------------------------------------------------------------------------
# Sample subtitle files
# ---------------------------------------------------------------------------

SAMPLE_SRT = (
    "1\n"
    "00:00:00,000 --> 00:00:02,000\n"
    "- [Ann] Hello there.\n"
    "\n"
    "2\n"
    "00:00:06,000 --> 00:00:08,000\n"
    "Bye.\n"
)

SAMPLE_VTT = (
    "WEBVTT\n"
    "\n"
    "00:00:01.000 --> 00:00:02.500\n"
    "- [Bob] We should\n"
    "get going\n"
    "\n"
    "00:00:02.600 --> 00:00:04.000\n"
    "before it rains.\n"
    "\n"
    "00:00:04.100 --> 00:00:05.000\n"
    "[thunder]\n"
    "\n"
    "00:00:10.000 --> 00:00:12.000\n"
    "- [Cleo] Too late!\n"
)


def make_caption(
    text: str,
    start: float = 0.0,
    end: Optional[float] = None,
    speaker: Optional[str] = None,
    source_file: str = "",
) -> Caption:
    """Build a Caption; end defaults to one second after start."""
    return Caption(
        start_s=start,
        end_s=start + 1.0 if end is None else end,
        text=text,
        speaker=speaker,
        source_file=source_file,
    )


@pytest.fixture
def sample_srt_text() -> str:
    """Two-cue SRT: a speaker-tagged greeting, then a goodbye after a gap."""
    return SAMPLE_SRT


@pytest.fixture
def sample_vtt_text() -> str:
    """WebVTT with header, multi-line cue, a noise cue and a late reply."""
    return SAMPLE_VTT


@pytest.fixture
def sample_files(sample_srt_text, sample_vtt_text):
    """A three-file batch: SRT, VTT and an unsupported text file."""
    return {
        "episode-01.srt": sample_srt_text,
        "episode-02.vtt": sample_vtt_text,
        "notes.txt": "not a subtitle\r\nsecond line",
    }


@pytest.fixture
def dialogue_captions() -> List[Caption]:
    """Captions of one short scene: sentence split across cues, then a gap."""
    return [
        make_caption("So we went", start=0.0, end=1.0, speaker="Ann"),
        make_caption("down to the river", start=1.2, end=2.0),
        make_caption("and waited.", start=2.1, end=3.0),
        make_caption("Nothing happened", start=3.2, end=4.0, speaker="Bob"),
        make_caption("for hours", start=10.0, end=11.0),
    ]
