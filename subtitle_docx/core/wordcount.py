"""Unicode-aware word counting for reconstructed paragraphs.

WHY: Translation quotes are priced per source word, so the count has to
be stable and sensible across scripts — "café", "naïve", "Straße",
"東京" and "३००" should all count — and must not inflate contractions
("don't") or hyphenated compounds ("stop-go") into several words.

HOW: The `regex` module's Unicode property classes find runs of letters,
combining marks, digits, apostrophes (straight and curly) and hyphens.
Runs made only of apostrophes/hyphens (a dash used as punctuation) are
not counted.

RULES:
- Token characters: \\p{L}, \\p{M}, \\p{N}, "'", "’", "-"
- A token must contain at least one letter or digit
- Empty or whitespace-only input counts 0
- This is a heuristic, not a linguistic word-boundary standard:
  abbreviations with periods ("U.S.") count per segment
"""

from __future__ import annotations

import regex

_TOKEN_RE = regex.compile(r"[\p{L}\p{M}\p{N}'’-]+")
_WORDLIKE_RE = regex.compile(r"[\p{L}\p{N}]")


def count_words(text: str) -> int:
    """Count word tokens in text.

    Examples:
        >>> count_words("Hello, world!")
        2
        >>> count_words("don't stop-go")
        2
        >>> count_words("")
        0
    """
    tokens = _TOKEN_RE.findall(text.strip())
    return sum(1 for token in tokens if _WORDLIKE_RE.search(token))
