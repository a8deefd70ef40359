"""Entry points combining tokenization and per-polarity scoring."""

from __future__ import annotations

from afinn_sentiment.core.logging import get_logger
from afinn_sentiment.lexicon import Lexicon, get_lexicon
from afinn_sentiment.scoring import Analysis, Polarity, Sentiment, scan
from afinn_sentiment.tokenizer import tokenize

logger = get_logger("afinn_sentiment.analysis")


class SentimentAnalyzer:
    """Scores text against a lexicon (the bundled AFINN list by default)."""

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon = lexicon

    @property
    def lexicon(self) -> Lexicon:
        if self._lexicon is None:
            return get_lexicon()
        return self._lexicon

    def positivity(self, text: str) -> Sentiment:
        return scan(tokenize(text), Polarity.POSITIVE, self.lexicon)

    def negativity(self, text: str) -> Sentiment:
        return scan(tokenize(text), Polarity.NEGATIVE, self.lexicon)

    def analyze(self, text: str) -> Analysis:
        """Tokenize once and score both polarities over the same tokens."""
        tokens = tokenize(text)
        lexicon = self.lexicon
        analysis = Analysis.combine(
            positive=scan(tokens, Polarity.POSITIVE, lexicon),
            negative=scan(tokens, Polarity.NEGATIVE, lexicon),
        )
        logger.debug(
            "analysis_complete",
            tokens=len(tokens),
            score=analysis.score,
            positive=analysis.positive.score,
            negative=analysis.negative.score,
        )
        return analysis


_default_analyzer = SentimentAnalyzer()


def positivity(text: str) -> Sentiment:
    """Positive sentiment of ``text`` using the bundled lexicon."""
    return _default_analyzer.positivity(text)


def negativity(text: str) -> Sentiment:
    """Negative sentiment of ``text`` using the bundled lexicon."""
    return _default_analyzer.negativity(text)


def analyze(text: str) -> Analysis:
    """Overall sentiment of ``text`` using the bundled lexicon."""
    return _default_analyzer.analyze(text)
