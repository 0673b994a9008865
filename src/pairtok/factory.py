"""Factory and functional helpers around ``Tokenizer``."""

from typing import Iterable

from ._progress import ProgressCallback
from .tokenizer import Tokenizer
from .types import Token


def create_tokenizer() -> Tokenizer:
    """
    Create an untrained tokenizer.

    The returned tokenizer knows the 256 byte tokens and has no merge rules, so
    it encodes text to its raw bytes until trained.

    .. code-block:: python

        tok = create_tokenizer()
        train(tok, "hello world the sky is blue", vocab_size=300)
        ids = encode(tok, "hello")
    """
    return Tokenizer()


def train(
    tokenizer: Tokenizer,
    text: str | bytes,
    vocab_size: int,
    verbose: bool = False,
    on_merge: ProgressCallback | None = None,
    capacity: int | None = None,
) -> None:
    """Train ``tokenizer`` in place. See ``Tokenizer.train``."""
    tokenizer.train(
        text, vocab_size, verbose=verbose, on_merge=on_merge, capacity=capacity
    )


def encode(
    tokenizer: Tokenizer, text: str | bytes, capacity: int | None = None
) -> list[Token]:
    """Encode ``text`` with ``tokenizer``. See ``Tokenizer.encode``."""
    return tokenizer.encode(text, capacity=capacity)


def decode(
    tokenizer: Tokenizer, tokens: Iterable[Token], capacity: int | None = None
) -> bytes:
    """Decode ``tokens`` with ``tokenizer``. See ``Tokenizer.decode``."""
    return tokenizer.decode(tokens, capacity=capacity)


__all__ = ["create_tokenizer", "train", "encode", "decode"]
