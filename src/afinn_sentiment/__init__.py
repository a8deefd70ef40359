"""AFINN lexicon sentiment scoring."""

from afinn_sentiment.analysis import SentimentAnalyzer, analyze, negativity, positivity
from afinn_sentiment.core.errors import AfinnSentimentError, LexiconLoadError
from afinn_sentiment.lexicon import Lexicon, get_lexicon
from afinn_sentiment.scoring import Analysis, Polarity, Sentiment, scan
from afinn_sentiment.tokenizer import tokenize

__all__ = [
    "AfinnSentimentError",
    "Analysis",
    "Lexicon",
    "LexiconLoadError",
    "Polarity",
    "Sentiment",
    "SentimentAnalyzer",
    "analyze",
    "get_lexicon",
    "negativity",
    "positivity",
    "scan",
    "tokenize",
]
