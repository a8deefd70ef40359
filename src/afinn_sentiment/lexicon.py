"""AFINN lexicon store: loads the bundled word list once per process."""

from __future__ import annotations

import json
import math
import threading
from collections.abc import Iterator, Mapping
from importlib import resources
from numbers import Real
from types import MappingProxyType

from afinn_sentiment.core.errors import LexiconLoadError
from afinn_sentiment.core.logging import get_logger

logger = get_logger("afinn_sentiment.lexicon")

_DATA_PACKAGE = "afinn_sentiment.data"
_DATA_FILE = "afinn.json"


def _reject_constant(token: str) -> float:
    # NaN, Infinity and -Infinity are not JSON.
    raise LexiconLoadError(f"Lexicon payload contains non-standard constant {token}")


class Lexicon(Mapping[str, float]):
    """Read-only mapping from lowercase word to signed sentiment weight."""

    def __init__(self, entries: Mapping[str, float]) -> None:
        checked: dict[str, float] = {}
        for word, weight in entries.items():
            if not isinstance(word, str):
                raise LexiconLoadError(f"Lexicon key is not a string: {word!r}")
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise LexiconLoadError(f"Lexicon weight for {word!r} is not numeric: {weight!r}")
            if not math.isfinite(weight):
                raise LexiconLoadError(f"Lexicon weight for {word!r} is not finite: {weight!r}")
            checked[word] = weight
        self._entries = MappingProxyType(checked)

    @classmethod
    def from_json(cls, raw: str | bytes) -> Lexicon:
        """Parse a flat JSON object of ``word -> weight``."""
        try:
            payload = json.loads(raw, parse_constant=_reject_constant)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LexiconLoadError(f"Lexicon payload is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise LexiconLoadError("Lexicon payload must be a JSON object")
        if not payload:
            raise LexiconLoadError("Lexicon payload is empty")
        return cls(payload)

    def lookup(self, word: str) -> float | None:
        """Weight for ``word``, or None when the word is not in the lexicon."""
        return self._entries.get(word)

    def __getitem__(self, word: str) -> float:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon(entries={len(self)})"


def load_bundled_lexicon() -> Lexicon:
    """Read ``data/afinn.json`` from the installed package."""
    try:
        raw = resources.files(_DATA_PACKAGE).joinpath(_DATA_FILE).read_bytes()
    except (OSError, ModuleNotFoundError) as exc:
        raise LexiconLoadError(f"Bundled lexicon {_DATA_FILE} is missing: {exc}") from exc
    return Lexicon.from_json(raw)


_lexicon: Lexicon | None = None
_lexicon_lock = threading.Lock()


def get_lexicon() -> Lexicon:
    """Process-wide lexicon, loaded on first use.

    Concurrent first callers block on the lock until the load finishes; no
    caller can observe a partially built lexicon. A failed load is not
    cached, so every caller gets the error.
    """
    global _lexicon
    lexicon = _lexicon
    if lexicon is not None:
        return lexicon
    with _lexicon_lock:
        if _lexicon is None:
            try:
                loaded = load_bundled_lexicon()
            except LexiconLoadError as exc:
                logger.error("lexicon_load_failed", error=str(exc))
                raise
            logger.info("lexicon_loaded", entries=len(loaded))
            _lexicon = loaded
        return _lexicon


def reset_lexicon_cache() -> None:
    """Drop the cached lexicon so the next ``get_lexicon`` reloads it."""
    global _lexicon
    with _lexicon_lock:
        _lexicon = None
