"""Standalone BPE training module."""

from dataclasses import dataclass
from enum import Enum
import logging

from ._bpe import bpe_freqs, bpe_merge, check_capacity
from ._merges import MergeTable
from ._progress import MergeEvent, ProgressCallback
from ._vocab import VocabStore
from .types import Token, TokenPair

log = logging.getLogger(__name__)


class TrainerState(str, Enum):
    """Phases of one training run."""

    IDLE = "idle"
    COUNTING = "counting"
    SELECTING = "selecting"
    MERGING = "merging"
    DONE = "done"


@dataclass
class BPETrainingResult:
    """Results from one BPE training run."""

    vocab: VocabStore
    merges: MergeTable
    n_merges_completed: int


class BPETrainer:
    """
    BPE trainer that learns merge operations from a token sequence.

    Each round counts adjacent pairs, picks the most frequent one and merges it
    into a new token. Ties go to the pair seen first in the sequence. Training
    stops after ``n_merges`` rounds or as soon as no pair occurs more than once.

    The trainer builds its own vocabulary and merge table and never touches a
    tokenizer's model, so a failed run leaves callers' state as it was.

    Example:
       >>> tokens = list(b"aaab")
       >>> trainer = BPETrainer()
       >>> result = trainer.train(tokens, n_merges=1)
       >>> result.merges.as_dict()
       {(97, 97): 256}
    """

    def __init__(self) -> None:
        self.state = TrainerState.IDLE

    def _enter(self, state: TrainerState) -> None:
        log.debug("trainer state %s -> %s", self.state.value, state.value)
        self.state = state

    def train(
        self,
        tokens: list[Token],
        n_merges: int,
        on_merge: ProgressCallback | None = None,
        capacity: int | None = None,
    ) -> BPETrainingResult:
        """
        Train BPE on a sequence of tokens.

        :param tokens: Sequence of token ids, typically raw bytes 0-255.
        :param n_merges: Maximum number of merge operations to learn.
        :param on_merge: Called with a ``MergeEvent`` after every merge.
        :param capacity: Optional bound on the working sequence length.
        :return: Training results containing vocabulary and merge rules.
        :raises CapacityExceededError: If ``tokens`` is longer than ``capacity``.
        """
        check_capacity(len(tokens), capacity)

        vocab = VocabStore()
        merges = MergeTable()
        # work on a copy, the caller's list is left alone
        tokens = list(tokens)

        for i in range(n_merges):
            self._enter(TrainerState.COUNTING)
            freqs = bpe_freqs(tokens)

            self._enter(TrainerState.SELECTING)
            best = self._select(freqs)
            if best is None:
                break

            self._enter(TrainerState.MERGING)
            new_tok = vocab.grow(*best)
            tokens = bpe_merge(tokens, best, new_tok, capacity=capacity)
            merges.append(best, new_tok)

            if on_merge is not None:
                on_merge(
                    MergeEvent(
                        merge_index=i + 1,
                        total_merges=n_merges,
                        pair=best,
                        new_id=new_tok,
                        token_bytes=vocab.expand(new_tok),
                    )
                )

        self._enter(TrainerState.DONE)
        return BPETrainingResult(
            vocab=vocab, merges=merges, n_merges_completed=len(merges)
        )

    @staticmethod
    def _select(freqs: dict[TokenPair, int]) -> TokenPair | None:
        """Return the most frequent pair, or ``None`` when no pair repeats."""
        if not freqs:
            return None
        # max() keeps the first maximal item, and freqs is in first-occurrence order
        pair, count = max(freqs.items(), key=lambda item: item[1])
        if count <= 1:
            return None
        return pair


__all__ = ["BPETrainer", "BPETrainingResult", "TrainerState"]
