"""pairtok: minimal byte-level BPE tokenizer."""

from ._bpe import bpe_freqs, bpe_merge
from ._merges import MergeRule, MergeTable
from ._progress import MergeEvent, disable_progress, enable_progress
from ._vocab import VocabStore
from .errors import (
    CapacityExceededError,
    InvalidVocabSizeError,
    PairTokError,
    UnknownIdError,
    VocabularyError,
)
from .factory import create_tokenizer, decode, encode, train
from .tokenizer import Tokenizer
from .trainer import BPETrainer, BPETrainingResult, TrainerState

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pairtok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Tokenizer",
    "VocabStore",
    "MergeTable",
    "MergeRule",
    "MergeEvent",
    "BPETrainer",
    "BPETrainingResult",
    "TrainerState",
    "PairTokError",
    "VocabularyError",
    "InvalidVocabSizeError",
    "UnknownIdError",
    "CapacityExceededError",
    "bpe_freqs",
    "bpe_merge",
    "create_tokenizer",
    "train",
    "encode",
    "decode",
    "enable_progress",
    "disable_progress",
]
