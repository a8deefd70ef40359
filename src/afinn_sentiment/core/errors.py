"""Exception hierarchy."""

from __future__ import annotations


class AfinnSentimentError(Exception):
    """Base class for library errors."""


class LexiconLoadError(AfinnSentimentError):
    """The lexicon dataset is missing or malformed. Not recoverable."""
