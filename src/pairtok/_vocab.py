"""Vocabulary store mapping token ids to the bytes they expand to."""

import logging

from .errors import UnknownIdError
from .types import N_BYTE_TOKENS, Token, TokenBytes, TokenPair, Vocabulary

log = logging.getLogger(__name__)


class VocabStore:
    """
    Grow-only token -> bytes mapping.

    Ids ``0..255`` are the raw bytes. Every learned id remembers the two ids it
    was merged from and caches its flattened expansion, so ``expand`` never has
    to walk the merge tree.
    """

    def __init__(self) -> None:
        # index == token id
        self._expansions: list[TokenBytes] = []
        # learned token -> (left child, right child)
        self._parents: dict[Token, TokenPair] = {}
        self.initialize()

    def initialize(self) -> None:
        """Reset the store to the 256 single-byte entries."""
        self._expansions = [bytes([btok]) for btok in range(N_BYTE_TOKENS)]
        self._parents = {}

    def grow(self, first: Token, second: Token) -> Token:
        """
        Append a token expanding to ``expand(first) + expand(second)``.

        :return: The newly assigned token id.
        :raises UnknownIdError: If either child token has not been assigned.
        """
        merged = self.expand(first) + self.expand(second)
        new_tok = len(self._expansions)
        self._expansions.append(merged)
        self._parents[new_tok] = (first, second)
        log.debug(f"vocab grew to {len(self._expansions)} tokens")
        return new_tok

    def expand(self, tok: Token) -> TokenBytes:
        """Return the bytes ``tok`` stands for."""
        if not 0 <= tok < len(self._expansions):
            raise UnknownIdError("token not in vocabulary", invalid_tok=tok)
        return self._expansions[tok]

    def parents(self, tok: Token) -> TokenPair | None:
        """Return the pair ``tok`` was merged from, or ``None`` for a raw byte."""
        self.expand(tok)
        return self._parents.get(tok)

    def as_dict(self) -> Vocabulary:
        """Return a fresh ``{token: bytes}`` mapping in id order."""
        return dict(enumerate(self._expansions))

    def __len__(self) -> int:
        return len(self._expansions)

    def __contains__(self, tok: object) -> bool:
        return isinstance(tok, int) and 0 <= tok < len(self._expansions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VocabStore):
            return NotImplemented
        return (
            self._expansions == other._expansions and self._parents == other._parents
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"
