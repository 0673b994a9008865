"""
Core Byte Pair Encoding (BPE) operations.

Both functions are pure: they never mutate their input and are shared by the
trainer and the encoder.
"""

from .errors import CapacityExceededError
from .types import PairCounts, Token, TokenPair


def check_capacity(length: int, capacity: int | None) -> None:
    """Raise ``CapacityExceededError`` if ``length`` elements do not fit in ``capacity``."""
    if capacity is not None and length > capacity:
        raise CapacityExceededError(
            "token sequence exceeds buffer capacity", capacity=capacity, length=length
        )


def bpe_freqs(tokens: list[Token]) -> PairCounts:
    """
    Compute the frequency of all consecutive token pairs in the token list.

    Overlapping occurrences are counted, so ``[5, 5, 5]`` yields ``{(5, 5): 2}``.
    The returned dict iterates pairs in order of their first occurrence, which
    callers rely on for deterministic tie-breaking.

    :param tokens: Token sequence to analyze.
    :return: Mapping of token pairs to their occurrence counts.
    """
    pairs: PairCounts = {}

    for pair in zip(tokens, tokens[1:]):
        pairs[pair] = pairs.get(pair, 0) + 1

    return pairs


def bpe_merge(
    tokens: list[Token],
    target: TokenPair,
    new_tok: Token,
    capacity: int | None = None,
) -> list[Token]:
    """
    Merge all occurrences of a target token pair into a single new token.

    Matching is greedy and leftmost-first, and a merged position is never
    reused, so ``[5, 5, 5]`` with target ``(5, 5)`` becomes ``[new_tok, 5]``.

    Note that merged tokens may represent partial UTF-8 sequences. Use
    ``errors="replace"`` when turning decoded bytes into a string.

    :param tokens: Original token sequence.
    :param target: The consecutive pair of tokens to merge.
    :param new_tok: The token that replaces every occurrence of ``target``.
    :param capacity: Optional bound on the output buffer. The output is never
        longer than the input, so the input length is checked against it.
    :return: New token list with all target pairs replaced by ``new_tok``.
    :raises CapacityExceededError: If ``capacity`` is smaller than ``len(tokens)``.
    """
    check_capacity(len(tokens), capacity)

    newtoks: list[Token] = []
    n = len(tokens)

    i = 0
    while i < n:
        # check if we can form a pair and it matches the target
        if i < n - 1 and tokens[i] == target[0] and tokens[i + 1] == target[1]:
            newtoks.append(new_tok)
            i += 2
        else:
            newtoks.append(tokens[i])
            i += 1

    return newtoks


__all__ = ["bpe_freqs", "bpe_merge", "check_capacity"]
