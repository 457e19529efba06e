"""Paragraph reconstruction from ordered captions.

WHY: Subtitle cues split sentences at arbitrary points to fit on screen.
Word counting and human review need the speech back as prose: one
paragraph per thought or scene, not one line per cue.

HOW: Captions are normalized and optionally stripped of noise cues
("[door slams]", "♪♪"), then folded left-to-right through a tiny state
machine. The state holds the paragraph being accumulated and the end
time of the previous caption. advance() is the pure transition: it
either appends the caption to the current paragraph or emits the
current paragraph and starts a new one.

RULES:
- A break needs a non-empty current paragraph AND either
  (start_s - previous end_s >= gap_threshold_s) or current text ending
  in ".", "?", "!" or "…"
- The first caption never breaks, whatever its start time
- With keep_speakers, a caption with a speaker is prefixed "Name: "
- Emitted paragraphs are trimmed; an empty trailing paragraph is dropped
- Caption order is preserved; nothing is re-sorted
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from subtitle_docx.core.ir import Caption, ConversionOptions

_WHITESPACE_RE = re.compile(r"\s+")

# A whole cue that is one bracketed annotation, e.g. "[laughter]".
_BRACKETED_RE = re.compile(r"\[.*\]")

# A whole cue made only of musical note symbols, e.g. "♪♪".
_MUSIC_RE = re.compile(r"[♪♫♩♬]+")

_SENTENCE_END = (".", "?", "!", "…")


@dataclass(frozen=True)
class ParagraphState:
    """Fold state: paragraph text so far and the previous caption's end."""

    current: str = ""
    last_end_s: float = 0.0


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_noise_caption(text: str) -> bool:
    """True for a normalized cue that is only a bracketed note or music."""
    return bool(_BRACKETED_RE.fullmatch(text) or _MUSIC_RE.fullmatch(text))


def clean_captions(captions: Iterable[Caption], options: ConversionOptions) -> List[Caption]:
    """Normalize caption text and drop noise cues if requested.

    Returns new Caption objects; the inputs are not modified.
    """
    cleaned = [
        Caption(
            start_s=c.start_s,
            end_s=c.end_s,
            text=normalize_text(c.text),
            speaker=c.speaker,
            source_file=c.source_file,
        )
        for c in captions
    ]
    if options.strip_bracketed:
        cleaned = [c for c in cleaned if not is_noise_caption(c.text)]
    return cleaned


def should_break(state: ParagraphState, caption: Caption, options: ConversionOptions) -> bool:
    """Decide whether caption starts a new paragraph.

    Either a long enough silence or sentence-ending punctuation on the
    text accumulated so far ends the current paragraph.
    """
    if not state.current:
        return False
    gap = caption.start_s - state.last_end_s
    return gap >= options.gap_threshold_s or state.current.strip().endswith(_SENTENCE_END)


def advance(
    state: ParagraphState,
    caption: Caption,
    options: ConversionOptions,
) -> Tuple[Optional[str], ParagraphState]:
    """Feed one caption into the fold.

    Args:
        state: Current fold state.
        caption: Next caption (already normalized/filtered).
        options: Gap threshold and speaker toggle.

    Returns:
        (emitted, new_state). emitted is the finished paragraph when this
        caption triggered a break, otherwise None.
    """
    prefix = ""
    if options.keep_speakers and caption.speaker:
        prefix = "{}: ".format(caption.speaker)
    candidate = prefix + caption.text

    if should_break(state, caption, options):
        return state.current.strip(), ParagraphState(candidate, caption.end_s)

    if state.current:
        current = "{} {}".format(state.current, candidate)
    else:
        current = candidate
    return None, ParagraphState(current, caption.end_s)


def reconstruct_paragraphs(
    captions: Iterable[Caption],
    options: Optional[ConversionOptions] = None,
) -> List[str]:
    """Merge an ordered caption sequence into prose paragraphs.

    Args:
        captions: Captions of one file, in cue order.
        options: Conversion options; defaults to ConversionOptions().

    Returns:
        Paragraph strings in order.
    """
    if options is None:
        options = ConversionOptions()

    paragraphs: List[str] = []
    state = ParagraphState()
    for caption in clean_captions(captions, options):
        emitted, state = advance(state, caption, options)
        if emitted is not None:
            paragraphs.append(emitted)

    # Flush the last paragraph
    tail = state.current.strip()
    if tail:
        paragraphs.append(tail)
    return paragraphs
