"""Unit tests for the paragraph reconstructor.

WHY: Paragraph boundaries decide what translators and reviewers see as
one unit of speech, and every word count is computed over them. The
break rules (timing gap OR sentence-ending punctuation, never on the
first caption) must hold exactly.

HOW: Tests exercise the pure transition function advance() and the
break predicate directly, then the full fold reconstruct_paragraphs()
with noise filtering and speaker prefixes.

RULES:
- Captions are built with conftest.make_caption().
- Default options (gap 2.5s, speakers on, noise stripped) unless stated.
"""

import pytest

from subtitle_docx.core.ir import ConversionOptions
from subtitle_docx.core.paragraphs import (
    ParagraphState,
    advance,
    clean_captions,
    is_noise_caption,
    normalize_text,
    reconstruct_paragraphs,
    should_break,
)

from conftest import make_caption

DEFAULTS = ConversionOptions()


class TestNoiseDetection:
    """is_noise_caption() recognizes whole-cue annotations and music."""

    @pytest.mark.parametrize("text", ["[laughter]", "[door slams]", "[]", "♪♪", "♪", "♫♬♩"])
    def test_noise(self, text):
        assert is_noise_caption(text)

    @pytest.mark.parametrize("text", [
        "[laughter] that's funny",
        "Well [pause] okay",
        "♪ la la la ♪",
        "♪ ♪",
        "",
        "plain words",
    ])
    def test_not_noise(self, text):
        assert not is_noise_caption(text)


class TestCleanCaptions:
    """clean_captions() normalizes text and optionally drops noise."""

    def test_whitespace_normalized(self):
        cleaned = clean_captions([make_caption("  a \t b  ")], DEFAULTS)
        assert cleaned[0].text == "a b"

    def test_noise_dropped_when_stripping(self):
        captions = [make_caption("[laughter]"), make_caption("Hi"), make_caption(" ♪♪ ")]
        assert [c.text for c in clean_captions(captions, DEFAULTS)] == ["Hi"]

    def test_noise_kept_when_not_stripping(self):
        options = ConversionOptions(strip_bracketed=False)
        captions = [make_caption("[laughter]"), make_caption("♪♪")]
        assert [c.text for c in clean_captions(captions, options)] == ["[laughter]", "♪♪"]

    def test_inputs_not_modified(self):
        original = make_caption("  spaced  ")
        clean_captions([original], DEFAULTS)
        assert original.text == "  spaced  "

    def test_normalize_text(self):
        assert normalize_text("a\n\nb   c ") == "a b c"


class TestShouldBreak:
    """The break predicate combines gap and punctuation with OR."""

    def test_never_breaks_on_empty_state(self):
        caption = make_caption("Hi", start=100.0)
        assert not should_break(ParagraphState(), caption, DEFAULTS)

    def test_gap_at_threshold_breaks(self):
        state = ParagraphState("Hello", last_end_s=1.0)
        assert should_break(state, make_caption("there", start=3.5), DEFAULTS)

    def test_gap_below_threshold_does_not_break(self):
        state = ParagraphState("Hello", last_end_s=1.0)
        assert not should_break(state, make_caption("there", start=3.4), DEFAULTS)

    @pytest.mark.parametrize("ending", [".", "?", "!", "…"])
    def test_sentence_end_breaks_without_gap(self, ending):
        state = ParagraphState("Hello" + ending, last_end_s=1.0)
        assert should_break(state, make_caption("Next", start=1.0), DEFAULTS)

    def test_trailing_space_after_punctuation_still_breaks(self):
        state = ParagraphState("Hello. ", last_end_s=1.0)
        assert should_break(state, make_caption("Next", start=1.0), DEFAULTS)

    @pytest.mark.parametrize("ending", [",", ";", ":", "-"])
    def test_other_punctuation_does_not_break(self, ending):
        state = ParagraphState("Hello" + ending, last_end_s=1.0)
        assert not should_break(state, make_caption("Next", start=1.0), DEFAULTS)


class TestAdvance:
    """advance() is the pure fold transition."""

    def test_first_caption_sets_current(self):
        emitted, state = advance(ParagraphState(), make_caption("Hi", start=0, end=1), DEFAULTS)
        assert emitted is None
        assert state == ParagraphState("Hi", 1.0)

    def test_append_with_single_space(self):
        emitted, state = advance(ParagraphState("Hi", 1.0), make_caption("there", start=1.5, end=2), DEFAULTS)
        assert emitted is None
        assert state.current == "Hi there"
        assert state.last_end_s == 2.0

    def test_break_emits_trimmed_paragraph(self):
        emitted, state = advance(ParagraphState("Done. ", 1.0), make_caption("Next", start=1.0, end=2), DEFAULTS)
        assert emitted == "Done."
        assert state == ParagraphState("Next", 2.0)

    def test_speaker_prefix(self):
        caption = make_caption("Hi", speaker="Ann")
        _, state = advance(ParagraphState(), caption, DEFAULTS)
        assert state.current == "Ann: Hi"

    def test_speaker_prefix_disabled(self):
        caption = make_caption("Hi", speaker="Ann")
        _, state = advance(ParagraphState(), caption, ConversionOptions(keep_speakers=False))
        assert state.current == "Hi"

    def test_state_not_mutated(self):
        state = ParagraphState("Hi", 1.0)
        advance(state, make_caption("there", start=1.0), DEFAULTS)
        assert state == ParagraphState("Hi", 1.0)


class TestReconstructParagraphs:
    """reconstruct_paragraphs() folds a whole caption sequence."""

    def test_single_caption_one_paragraph(self):
        assert reconstruct_paragraphs([make_caption("Alone", start=500.0)]) == ["Alone"]

    def test_empty_input(self):
        assert reconstruct_paragraphs([]) == []

    def test_break_on_gap(self):
        captions = [
            make_caption("first part", start=0.0, end=1.0),
            make_caption("second part", start=3.5, end=4.0),
        ]
        assert reconstruct_paragraphs(captions) == ["first part", "second part"]

    def test_break_on_punctuation(self):
        captions = [
            make_caption("It ended.", start=0.0, end=1.0),
            make_caption("Then more", start=1.0, end=2.0),
        ]
        assert reconstruct_paragraphs(captions) == ["It ended.", "Then more"]

    def test_merge_without_gap_or_punctuation(self):
        captions = [
            make_caption("one", start=0.0, end=1.0),
            make_caption("two", start=1.1, end=2.0),
            make_caption("three", start=2.1, end=3.0),
        ]
        assert reconstruct_paragraphs(captions) == ["one two three"]

    def test_dialogue_scene(self, dialogue_captions):
        assert reconstruct_paragraphs(dialogue_captions) == [
            "Ann: So we went down to the river and waited.",
            "Bob: Nothing happened",
            "for hours",
        ]

    def test_dialogue_scene_without_speakers(self, dialogue_captions):
        options = ConversionOptions(keep_speakers=False)
        assert reconstruct_paragraphs(dialogue_captions, options) == [
            "So we went down to the river and waited.",
            "Nothing happened",
            "for hours",
        ]

    def test_larger_gap_threshold_merges(self, dialogue_captions):
        options = ConversionOptions(gap_threshold_s=10.0)
        assert reconstruct_paragraphs(dialogue_captions, options) == [
            "Ann: So we went down to the river and waited.",
            "Bob: Nothing happened for hours",
        ]

    def test_zero_gap_threshold_breaks_every_caption(self):
        captions = [make_caption("a", start=0.0, end=1.0), make_caption("b", start=1.0, end=2.0)]
        assert reconstruct_paragraphs(captions, ConversionOptions(gap_threshold_s=0)) == ["a", "b"]

    def test_noise_excluded_when_stripping(self):
        captions = [
            make_caption("Hello", start=0.0, end=1.0),
            make_caption("[laughter]", start=1.0, end=2.0),
            make_caption("♪♪", start=2.0, end=3.0),
            make_caption("again", start=3.0, end=4.0),
        ]
        assert reconstruct_paragraphs(captions) == ["Hello again"]

    def test_noise_included_when_not_stripping(self):
        captions = [
            make_caption("Hello", start=0.0, end=1.0),
            make_caption("[laughter]", start=1.0, end=2.0),
            make_caption("♪♪", start=2.0, end=3.0),
        ]
        options = ConversionOptions(strip_bracketed=False)
        assert reconstruct_paragraphs(captions, options) == ["Hello [laughter] ♪♪"]

    def test_removed_noise_does_not_update_last_end(self):
        # The gap is measured from the last kept caption, not the dropped one
        captions = [
            make_caption("Hello", start=0.0, end=1.0),
            make_caption("[music]", start=1.0, end=5.0),
            make_caption("there", start=5.0, end=6.0),
        ]
        assert reconstruct_paragraphs(captions) == ["Hello", "there"]

    def test_empty_caption_text_does_not_start_paragraph(self):
        captions = [
            make_caption("", start=0.0, end=1.0),
            make_caption("Hi", start=1.0, end=2.0),
        ]
        assert reconstruct_paragraphs(captions) == ["Hi"]

    def test_text_whitespace_normalized(self):
        captions = [make_caption("  lots   of\tspace  ", start=0.0)]
        assert reconstruct_paragraphs(captions) == ["lots of space"]

    def test_default_options_used_when_none(self):
        captions = [make_caption("Hi", speaker="Ann")]
        assert reconstruct_paragraphs(captions, None) == ["Ann: Hi"]
