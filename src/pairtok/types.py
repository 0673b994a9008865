"""
Core types for tokenization.
"""

from typing import Final

type Token = int
type TokenBytes = bytes
type TokenPair = tuple[Token, Token]
type PairCounts = dict[TokenPair, int]
type Encoding = dict[TokenPair, Token]
type Vocabulary = dict[Token, TokenBytes]

# ids below this are raw bytes, ids at or above it are learned merges
N_BYTE_TOKENS: Final[int] = 256
