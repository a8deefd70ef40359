from __future__ import annotations

import math
import threading
import time

import pytest

from afinn_sentiment import lexicon as lexicon_module
from afinn_sentiment.core.errors import AfinnSentimentError, LexiconLoadError
from afinn_sentiment.lexicon import Lexicon, get_lexicon, load_bundled_lexicon, reset_lexicon_cache


@pytest.fixture(autouse=True)
def _fresh_cache():
    reset_lexicon_cache()
    yield
    reset_lexicon_cache()


def test_bundled_lexicon_is_populated() -> None:
    lex = load_bundled_lexicon()
    assert len(lex) > 1000
    assert lex.lookup("like") == 2
    assert lex.lookup("bad") < 0
    assert all(isinstance(word, str) for word in lex)


def test_lookup_miss_returns_none() -> None:
    lex = Lexicon({"good": 3})
    assert lex.lookup("unknownword") is None
    assert lex.lookup("") is None
    assert lex.lookup("good") == 3


def test_lexicon_is_read_only() -> None:
    source = {"good": 3}
    lex = Lexicon(source)
    source["bad"] = -3
    assert "bad" not in lex
    with pytest.raises(TypeError):
        lex._entries["bad"] = -3  # type: ignore[index]


def test_from_json_parses_flat_object() -> None:
    lex = Lexicon.from_json(b'{"happy": 3, "sad": -2, "meh": 0, "odd": -1.5}')
    assert len(lex) == 4
    assert lex["odd"] == -1.5


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[1, 2, 3]",
        "{}",
        '{"good": "3"}',
        '{"good": true}',
        '{"good": null}',
        b"\xff\xfe\x00",
        '{"good": NaN}',
        '{"good": Infinity}',
        '{"bad": -Infinity}',
    ],
)
def test_from_json_rejects_malformed_payload(payload: str | bytes) -> None:
    with pytest.raises(LexiconLoadError):
        Lexicon.from_json(payload)


def test_load_error_is_library_error() -> None:
    assert issubclass(LexiconLoadError, AfinnSentimentError)


def test_get_lexicon_returns_shared_instance() -> None:
    assert get_lexicon() is get_lexicon()


def test_get_lexicon_failure_is_fatal_and_not_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken() -> Lexicon:
        raise LexiconLoadError("bundled lexicon is corrupt")

    monkeypatch.setattr(lexicon_module, "load_bundled_lexicon", _broken)
    with pytest.raises(LexiconLoadError):
        get_lexicon()
    with pytest.raises(LexiconLoadError):
        get_lexicon()

    monkeypatch.setattr(lexicon_module, "load_bundled_lexicon", lambda: Lexicon({"ok": 1}))
    assert get_lexicon().lookup("ok") == 1


def test_concurrent_first_access_loads_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []

    def _slow_load() -> Lexicon:
        calls.append(1)
        time.sleep(0.05)
        return Lexicon({"good": 3, "bad": -3})

    monkeypatch.setattr(lexicon_module, "load_bundled_lexicon", _slow_load)

    workers = 16
    barrier = threading.Barrier(workers)
    seen: list[Lexicon] = []
    seen_lock = threading.Lock()

    def _worker() -> None:
        barrier.wait()
        lex = get_lexicon()
        with seen_lock:
            seen.append(lex)

    threads = [threading.Thread(target=_worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(seen) == workers
    assert all(lex is seen[0] for lex in seen)
    assert len(seen[0]) == 2


@pytest.mark.parametrize("weight", [math.nan, math.inf, -math.inf])
def test_non_finite_weights_rejected(weight: float) -> None:
    with pytest.raises(LexiconLoadError):
        Lexicon({"good": 3, "odd": weight})


def test_missing_bundled_file_is_load_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lexicon_module, "_DATA_FILE", "does-not-exist.json")
    with pytest.raises(LexiconLoadError):
        load_bundled_lexicon()
    with pytest.raises(LexiconLoadError):
        get_lexicon()


def test_missing_data_package_is_load_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lexicon_module, "_DATA_PACKAGE", "afinn_sentiment.no_such_data")
    with pytest.raises(LexiconLoadError):
        load_bundled_lexicon()
