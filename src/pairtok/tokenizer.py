"""Byte-level BPE tokenizer."""

import logging
from typing import Iterable

from ._bpe import bpe_freqs, bpe_merge, check_capacity
from ._decorators import measure_time
from ._merges import MergeTable
from ._progress import ProgressCallback, _is_enabled, chain_callbacks, log_merge
from ._vocab import VocabStore
from .errors import InvalidVocabSizeError
from .trainer import BPETrainer
from .types import N_BYTE_TOKENS, Token, TokenPair

log = logging.getLogger(__name__)


def _to_bytes(text: str | bytes) -> bytes:
    """Return ``text`` as bytes, encoding strings as UTF-8."""
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


class Tokenizer:
    """
    Tokenizer that operates directly on byte sequences without pre-splitting.

    The model is a ``VocabStore`` (token -> bytes) plus a ``MergeTable``
    (pair -> token, in training order). Both are replaced together when
    training succeeds and are never modified by ``encode`` or ``decode``, so a
    trained tokenizer may be shared between threads for encoding and decoding.
    """

    def __init__(self) -> None:
        """Initialize tokenizer with the base 256 byte vocabulary and no merges."""
        # tokens -> bytes
        self.vocab = VocabStore()
        # byte pair -> merge token
        self.merges = MergeTable()

    @classmethod
    def from_merges(cls, pairs: Iterable[TokenPair]) -> "Tokenizer":
        """
        Build a tokenizer from merge pairs listed in rank order.

        The pair at position ``k`` merges into token ``256 + k``, so every pair
        may only reference byte tokens or tokens created by earlier pairs.

        :raises UnknownIdError: If a pair references a token not created yet.
        :raises VocabularyError: If a pair appears twice.
        """
        vocab = VocabStore()
        merges = MergeTable()
        for pair in pairs:
            merges.append(pair, vocab.grow(*pair))

        tokenizer = cls()
        tokenizer.vocab, tokenizer.merges = vocab, merges
        log.debug(f"built tokenizer from {len(merges)} merge rules")
        return tokenizer

    @measure_time
    def train(
        self,
        text: str | bytes,
        vocab_size: int,
        verbose: bool = False,
        on_merge: ProgressCallback | None = None,
        capacity: int | None = None,
    ) -> None:
        """
        Train the tokenizer on raw text using byte-level BPE.

        Learns at most ``vocab_size - 256`` merges on top of the base byte
        vocabulary and replaces any previously learned model. Training stops
        early, with a warning, once no adjacent pair occurs more than once.

        :param text: Training text; strings are encoded as UTF-8.
        :param vocab_size: Target vocabulary size including the base 256 bytes.
        :param verbose: Log each learned merge when ``True``.
        :param on_merge: Called with a ``MergeEvent`` after every merge.
        :param capacity: Optional bound on the working sequence length.
        :raises InvalidVocabSizeError: If ``vocab_size`` is less than or equal to 256.
        :raises CapacityExceededError: If the text is longer than ``capacity`` bytes.
        """
        if vocab_size <= N_BYTE_TOKENS:
            raise InvalidVocabSizeError(
                "vocab size must be greater than 256", vocab_size=vocab_size
            )

        tokens = list(_to_bytes(text))
        # merges beyond base byte vocabulary
        n_merges = vocab_size - N_BYTE_TOKENS

        progress = log_merge if verbose and _is_enabled() else None
        result = BPETrainer().train(
            tokens,
            n_merges,
            on_merge=chain_callbacks(progress, on_merge),
            capacity=capacity,
        )

        if result.n_merges_completed < n_merges:
            log.warning(
                f"no more byte pairs to merge after {result.n_merges_completed} merges "
                f"(requested {n_merges}) stopping early"
            )

        # swap in the new model only once training has fully succeeded
        self.vocab, self.merges = result.vocab, result.merges

    def encode(self, text: str | bytes, capacity: int | None = None) -> list[Token]:
        """
        Encode text into a sequence of tokens.

        Merges are replayed in the order they were learned: on every pass the
        pair with the lowest merge rank is merged, whatever its frequency in
        this particular text.

        :param text: Text to encode; strings are encoded as UTF-8.
        :param capacity: Optional bound on the working sequence length.
        :raises CapacityExceededError: If the text is longer than ``capacity`` bytes.
        """
        # convert each byte to [0-255] token range
        tokens = list(_to_bytes(text))
        check_capacity(len(tokens), capacity)

        while len(tokens) >= 2:
            bp_freqs = bpe_freqs(tokens)
            # lowest rank first because later merges may be built on earlier ones
            pair = min(bp_freqs, key=self._rank_or_inf)
            new_tok = self.merges.new_id(pair)
            # no merge rule for any pair left
            if new_tok is None:
                break
            tokens = bpe_merge(tokens, pair, new_tok, capacity=capacity)

        return tokens

    def _rank_or_inf(self, pair: TokenPair) -> float:
        rank = self.merges.rank(pair)
        return float("inf") if rank is None else rank

    def decode(self, tokens: Iterable[Token], capacity: int | None = None) -> bytes:
        """
        Decode a sequence of tokens back into bytes.

        Every token contributes its full expansion.

        :param tokens: Token sequence to decode.
        :param capacity: Optional bound on the decoded byte length.
        :raises UnknownIdError: If any token is not in the vocabulary.
        :raises CapacityExceededError: If the decoded bytes exceed ``capacity``.
        """
        txt_bytes = b"".join(self.vocab.expand(tok) for tok in tokens)
        check_capacity(len(txt_bytes), capacity)
        return txt_bytes

    def decode_text(self, tokens: Iterable[Token], errors: str = "replace") -> str:
        """
        Decode tokens into a UTF-8 string.

        :param errors: How to handle invalid UTF-8, passed to ``bytes.decode``.
        """
        return self.decode(tokens).decode("utf-8", errors=errors)

    def vocab_size(self) -> int:
        """Return the number of tokens in the vocabulary."""
        return len(self.vocab)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vocab_size={self.vocab_size()})"
