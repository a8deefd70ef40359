"""Per-polarity aggregation of lexicon weights over a token sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from afinn_sentiment.lexicon import Lexicon, get_lexicon


class Polarity(StrEnum):
    """Direction of sentiment measured by one scan."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class Sentiment:
    """Result of scanning tokens for one polarity.

    ``score`` is the sum of absolute matched weights, ``comparative`` is
    ``score`` over the total token count, ``words`` lists matched tokens in
    the order they appeared.
    """

    score: float
    comparative: float
    words: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "comparative": self.comparative, "words": list(self.words)}


@dataclass(frozen=True)
class Analysis:
    """Combined positive/negative result for one text."""

    score: float
    comparative: float
    positive: Sentiment
    negative: Sentiment

    @classmethod
    def combine(cls, positive: Sentiment, negative: Sentiment) -> Analysis:
        return cls(
            score=positive.score - negative.score,
            comparative=positive.comparative - negative.comparative,
            positive=positive,
            negative=negative,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "comparative": self.comparative,
            "positive": self.positive.to_dict(),
            "negative": self.negative.to_dict(),
        }


def scan(
    tokens: Sequence[str],
    polarity: Polarity | str,
    lexicon: Lexicon | None = None,
) -> Sentiment:
    """Aggregate weights of ``tokens`` that match ``polarity``.

    Misses and zero weights never match. An empty token sequence gives a
    ``nan`` comparative score.
    """
    polarity = Polarity(polarity)
    lex = lexicon if lexicon is not None else get_lexicon()

    score = 0.0
    words: list[str] = []
    for token in tokens:
        weight = lex.lookup(token)
        if weight is None:
            continue
        if polarity is Polarity.NEGATIVE and weight < 0:
            score -= weight
            words.append(token)
        elif polarity is Polarity.POSITIVE and weight > 0:
            score += weight
            words.append(token)

    total = len(tokens)
    comparative = score / total if total else float("nan")
    return Sentiment(score=float(score), comparative=comparative, words=tuple(words))
