"""Ordered table of learned merge rules."""

from typing import Iterator, NamedTuple

from .errors import VocabularyError
from .types import N_BYTE_TOKENS, Encoding, Token, TokenPair


class MergeRule(NamedTuple):
    """A learned rewrite ``pair -> new_id``."""

    pair: TokenPair
    new_id: Token

    @property
    def rank(self) -> int:
        """Position in the merge table; lower ranks are applied first when encoding."""
        return self.new_id - N_BYTE_TOKENS


class MergeTable:
    """
    Append-only list of merge rules in training order.

    The rule at rank ``r`` always produces token ``256 + r`` and each pair is
    merged at most once. Rank lookups go through a pair -> rank dict.
    """

    def __init__(self) -> None:
        self._rules: list[MergeRule] = []
        self._ranks: dict[TokenPair, int] = {}

    def append(self, pair: TokenPair, new_id: Token) -> MergeRule:
        """
        Record a new merge rule at the next rank.

        :raises VocabularyError: If ``new_id`` is not the next sequential id or
            ``pair`` already has a rule.
        """
        expected = N_BYTE_TOKENS + len(self._rules)
        if new_id != expected:
            raise VocabularyError(
                f"merge token out of sequence (expected {expected})",
                invalid_tok=new_id,
            )
        if pair in self._ranks:
            raise VocabularyError(f"pair {pair} already merged", invalid_tok=new_id)

        rule = MergeRule(pair, new_id)
        self._ranks[pair] = len(self._rules)
        self._rules.append(rule)
        return rule

    def rank(self, pair: TokenPair) -> int | None:
        """Return the rank of ``pair`` or ``None`` if it was never merged."""
        return self._ranks.get(pair)

    def new_id(self, pair: TokenPair) -> Token | None:
        """Return the token ``pair`` merges into or ``None`` if it was never merged."""
        rank = self._ranks.get(pair)
        if rank is None:
            return None
        return self._rules[rank].new_id

    def as_dict(self) -> Encoding:
        """Return a fresh ``{pair: new_id}`` mapping in rank order."""
        return {rule.pair: rule.new_id for rule in self._rules}

    def __getitem__(self, rank: int) -> MergeRule:
        return self._rules[rank]

    def __iter__(self) -> Iterator[MergeRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, pair: object) -> bool:
        return pair in self._ranks

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergeTable):
            return NotImplemented
        return self._rules == other._rules

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(merges={len(self)})"
