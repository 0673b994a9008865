"""Unit tests for BPETrainer."""

import pytest

from pairtok import BPETrainer, CapacityExceededError, TrainerState


def test_trainer_concrete_scenario():
    """'aaab' learns a single (97, 97) merge."""
    result = BPETrainer().train(list(b"aaab"), n_merges=1)
    assert result.n_merges_completed == 1
    assert result.merges.as_dict() == {(97, 97): 256}
    assert result.vocab.expand(256) == b"aa"


def test_trainer_tie_break_prefers_first_occurrence():
    """Among equally frequent pairs the leftmost first occurrence wins."""
    # (99, 100) and (97, 98) both occur twice, (99, 100) appears first
    result = BPETrainer().train(list(b"cdxabcdyab"), n_merges=1)
    assert result.merges[0].pair == (99, 100)


def test_trainer_stops_when_no_pair_repeats():
    """Distinct bytes give nothing to merge."""
    result = BPETrainer().train(list(b"abcdefg"), n_merges=50)
    assert result.n_merges_completed == 0
    assert len(result.vocab) == 256


def test_trainer_stops_early_after_compression():
    """Training ends once the remaining pairs are all unique."""
    result = BPETrainer().train(list(b"abab"), n_merges=10)
    # (97, 98) -> 256 leaves [256, 256] with a single pair
    assert result.n_merges_completed == 1


def test_trainer_empty_input():
    """An empty sequence trains nothing."""
    result = BPETrainer().train([], n_merges=5)
    assert result.n_merges_completed == 0


def test_trainer_learns_nested_merges():
    """Later merges can build on earlier learned tokens."""
    result = BPETrainer().train(list(b"aaaa aaaa aaaa"), n_merges=3)
    merges = result.merges.as_dict()
    assert merges[(97, 97)] == 256
    assert merges[(256, 256)] == 257
    assert result.vocab.expand(257) == b"aaaa"


def test_trainer_reports_each_merge():
    """The callback sees every merge with 1-based indexes."""
    events = []
    BPETrainer().train(list(b"aaaa aaaa aaaa"), n_merges=3, on_merge=events.append)
    assert [e.merge_index for e in events] == [1, 2, 3]
    assert all(e.total_merges == 3 for e in events)
    assert events[0].pair == (97, 97)
    assert events[0].new_id == 256
    assert events[1].token_bytes == b"aaaa"


def test_trainer_state_ends_done():
    """A finished run leaves the trainer in the DONE state."""
    trainer = BPETrainer()
    assert trainer.state is TrainerState.IDLE
    trainer.train(list(b"aaab"), n_merges=1)
    assert trainer.state is TrainerState.DONE


def test_trainer_does_not_mutate_input():
    """The caller's token list is left untouched."""
    tokens = list(b"aaab")
    BPETrainer().train(tokens, n_merges=1)
    assert tokens == [97, 97, 97, 98]


def test_trainer_capacity():
    """Input at the bound trains, one over is rejected."""
    BPETrainer().train(list(b"aaab"), n_merges=1, capacity=4)
    with pytest.raises(CapacityExceededError):
        BPETrainer().train(list(b"aaaab"), n_merges=1, capacity=4)
