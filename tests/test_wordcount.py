"""Unit tests for the Unicode-aware word counter."""

import pytest

from subtitle_docx.core.wordcount import count_words


class TestCountWords:
    """count_words() counts letter/digit runs, keeping ' and - inside words."""

    def test_simple_sentence(self):
        assert count_words("Hello, world!") == 2

    def test_contraction_and_hyphen(self):
        assert count_words("don't stop-go") == 2

    def test_curly_apostrophe(self):
        assert count_words("it’s fine") == 2

    def test_empty(self):
        assert count_words("") == 0

    def test_whitespace_only(self):
        assert count_words("   \n\t ") == 0

    def test_punctuation_only(self):
        assert count_words("... !!! ?") == 0

    def test_standalone_dash_not_counted(self):
        assert count_words("wait - what") == 2

    def test_numbers_count(self):
        assert count_words("I have 3 cats and 12 fish") == 7

    def test_speaker_prefix_counts_as_word(self):
        assert count_words("Ann: Hello there.") == 3

    @pytest.mark.parametrize("text,expected", [
        ("café naïve Straße", 3),
        ("Привет мир", 2),
        ("नमस्ते दुनिया", 2),
        ("東京 大阪", 2),
    ])
    def test_non_latin_scripts(self, text, expected):
        assert count_words(text) == expected

    def test_bracketed_annotation_words_count(self):
        assert count_words("[door slams]") == 2
