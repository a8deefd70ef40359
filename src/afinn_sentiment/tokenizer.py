"""Text tokenizer used before lexicon lookup."""

from __future__ import annotations

import re

# Anything other than ASCII letters, digits, space and hyphen.
_NON_WORD_RE = re.compile(r"[^a-zA-Z0-9 -]+")
_MULTI_SPACE_RE = re.compile(r" {2,}")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into lowercase tokens with punctuation removed.

    Punctuation runs become a single space, space runs collapse to one, and
    the result is split on single spaces without trimming. Leading or
    trailing separators therefore yield empty tokens, and ``""`` yields
    ``[""]``.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize expects str, got {type(text).__name__}")
    cleaned = _NON_WORD_RE.sub(" ", text)
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned)
    return cleaned.lower().split(" ")
