"""Unit tests for speaker tag extraction.

WHY: Speaker names feed paragraph prefixes and the translator Speaker
column. A tag left in the text inflates word counts; a tag stripped
from the wrong place mangles dialogue.

HOW: Tests cover tagged and untagged cues, multi-line joining, the
first-line-only rule and whitespace handling on both paths.
"""

from subtitle_docx.core.speakers import extract_speaker


class TestTaggedCues:
    """A leading "- [Name]" on the first line is split off."""

    def test_simple_tag(self):
        result = extract_speaker("- [Ann] Hello there.")
        assert result.speaker == "Ann"
        assert result.text == "Hello there."

    def test_name_is_trimmed(self):
        result = extract_speaker("- [  Dr. Ann Lee ] Hi")
        assert result.speaker == "Dr. Ann Lee"
        assert result.text == "Hi"

    def test_multiline_joined_and_collapsed(self):
        result = extract_speaker("- [Bob] We should\nget   going\r\nnow")
        assert result.speaker == "Bob"
        assert result.text == "We should get going now"

    def test_tag_only_first_line(self):
        result = extract_speaker("- [Bob]\nThe rest")
        assert result.speaker == "Bob"
        assert result.text == "The rest"

    def test_tag_only_cue_has_empty_text(self):
        result = extract_speaker("- [Bob]")
        assert result.speaker == "Bob"
        assert result.text == ""

    def test_leading_whitespace_on_first_line(self):
        result = extract_speaker("   - [Ann] Hi")
        assert result.speaker == "Ann"
        assert result.text == "Hi"


class TestUntaggedCues:
    """Without a tag, lines are joined with spaces and trimmed."""

    def test_no_tag(self):
        result = extract_speaker("Hello\nworld")
        assert result.speaker is None
        assert result.text == "Hello world"

    def test_internal_spacing_preserved(self):
        result = extract_speaker("  Hello   there  ")
        assert result.speaker is None
        assert result.text == "Hello   there"

    def test_tag_on_second_line_not_recognized(self):
        result = extract_speaker("Hello\n- [Ann] there")
        assert result.speaker is None
        assert result.text == "Hello - [Ann] there"

    def test_tag_without_dash_not_recognized(self):
        result = extract_speaker("[Ann] Hello")
        assert result.speaker is None
        assert result.text == "[Ann] Hello"

    def test_empty_brackets_not_recognized(self):
        result = extract_speaker("- [] Hello")
        assert result.speaker is None
        assert result.text == "- [] Hello"

    def test_empty_input(self):
        result = extract_speaker("")
        assert result.speaker is None
        assert result.text == ""
