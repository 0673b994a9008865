"""Tests for the functional API, progress reporting and logging."""

import logging

import pytest

import pairtok as ptok


@pytest.fixture(autouse=True)
def progress_enabled():
    """Make sure no test leaks a disabled progress switch."""
    ptok.enable_progress()
    yield
    ptok.enable_progress()


# Functional API
# ---------------------------------------------------------------------------


def test_create_tokenizer_is_untrained():
    """A new tokenizer has the 256 byte tokens and no merges."""
    tok = ptok.create_tokenizer()
    assert tok.vocab_size() == 256
    assert len(tok.merges) == 0


def test_functional_roundtrip():
    """train/encode/decode work on a tokenizer passed in explicitly."""
    tok = ptok.create_tokenizer()
    text = b"hello world the sky is blue"
    ptok.train(tok, text, vocab_size=300)

    ids = ptok.encode(tok, text)
    assert ptok.decode(tok, ids) == text
    assert all(0 <= i < tok.vocab_size() for i in ids)


def test_functional_capacity():
    """Capacity bounds pass through the functional helpers."""
    tok = ptok.create_tokenizer()
    with pytest.raises(ptok.CapacityExceededError):
        ptok.train(tok, b"aaab", vocab_size=257, capacity=3)
    with pytest.raises(ptok.CapacityExceededError):
        ptok.encode(tok, b"aaab", capacity=3)
    with pytest.raises(ptok.CapacityExceededError):
        ptok.decode(tok, [97, 97, 97, 98], capacity=3)


# Progress reporting
# ---------------------------------------------------------------------------


def test_on_merge_called_without_verbose():
    """The callback is independent of verbose logging."""
    events = []
    tok = ptok.create_tokenizer()
    ptok.train(tok, b"aaab", vocab_size=300, on_merge=events.append)

    assert len(events) == 1
    event = events[0]
    assert (event.merge_index, event.total_merges) == (1, 44)
    assert (event.pair, event.new_id, event.token_bytes) == ((97, 97), 256, b"aa")


def test_verbose_logs_each_merge(caplog):
    """verbose=True logs one INFO line per merge."""
    caplog.set_level(logging.INFO, logger="pairtok")
    tok = ptok.create_tokenizer()
    tok.train(b"aaab", vocab_size=257, verbose=True)

    assert "merge 1/1: (97, 97) -> 256 [aa]" in caplog.text


def test_verbose_escapes_control_chars(caplog):
    """Newlines inside a token do not break the log line."""
    caplog.set_level(logging.INFO, logger="pairtok")
    tok = ptok.create_tokenizer()
    tok.train(b"\n\n\n", vocab_size=257, verbose=True)

    assert "[\\u000a\\u000a]" in caplog.text


def test_disable_progress_silences_verbose(caplog):
    """The global switch suppresses merge logging but not callbacks."""
    caplog.set_level(logging.INFO, logger="pairtok")
    events = []
    ptok.disable_progress()
    tok = ptok.create_tokenizer()
    tok.train(b"aaab", vocab_size=257, verbose=True, on_merge=events.append)

    assert "merge 1/1" not in caplog.text
    assert len(events) == 1


def test_env_var_silences_verbose(caplog, monkeypatch):
    """PAIRTOK_DISABLE_PROGRESS=1 overrides the switch."""
    monkeypatch.setenv("PAIRTOK_DISABLE_PROGRESS", "1")
    caplog.set_level(logging.INFO, logger="pairtok")
    tok = ptok.create_tokenizer()
    tok.train(b"aaab", vocab_size=257, verbose=True)

    assert "merge 1/1" not in caplog.text


def test_training_time_is_logged(caplog):
    """The training duration is logged even without verbose output."""
    caplog.set_level(logging.INFO, logger="pairtok")
    tok = ptok.create_tokenizer()
    tok.train(b"aaab", vocab_size=257)

    assert "Tokenizer.train finished in" in caplog.text
