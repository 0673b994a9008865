"""Custom exception hierarchy for pairtok errors."""

from .types import Token


class PairTokError(Exception):
    """Base exception for all pairtok errors."""


class VocabularyError(PairTokError):
    """Raised when vocabulary or merge table operations fail."""

    def __init__(
        self,
        message: str,
        *,
        vocab_size: int | None = None,
        invalid_tok: Token | None = None,
    ) -> None:
        """Initialize with optional token and vocab_size that get appended to the message."""
        extra = " "
        # training: vocab size <= 256
        if vocab_size is not None:
            extra += f"(vocab size: {vocab_size}) "
        # decoding: token not in model vocab
        if invalid_tok is not None:
            extra += f"(invalid token: {invalid_tok}) "
        super().__init__(message + extra.rstrip())
        self.vocab_size = vocab_size
        self.invalid_tok = invalid_tok


class InvalidVocabSizeError(VocabularyError):
    """Raised when a target vocabulary size leaves no room for merges."""

    def __init__(self, message: str, *, vocab_size: int) -> None:
        super().__init__(message, vocab_size=vocab_size)


class UnknownIdError(VocabularyError):
    """Raised when a token id was never assigned in the vocabulary."""

    def __init__(self, message: str, *, invalid_tok: Token) -> None:
        super().__init__(message, invalid_tok=invalid_tok)


class CapacityExceededError(PairTokError):
    """Raised when a token sequence does not fit the caller's buffer bound."""

    def __init__(self, message: str, *, capacity: int, length: int) -> None:
        """
        Initialize CapacityExceededError with the bound and the offending length.

        :param message: Error message.
        :param capacity: Maximum number of elements the caller allowed.
        :param length: Number of elements that would have been needed.
        """
        super().__init__(f"{message} (capacity: {capacity}) (length: {length})")
        self.capacity = capacity
        self.length = length
