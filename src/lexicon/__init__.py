"""Word list indexing for petal-words."""

from .index import (
    DictionaryIndex,
    DictionaryStats,
    MIN_WORD_LENGTH,
    MAX_WORD_LENGTH,
    normalize_word,
)
from .loading import EMERGENCY_WORDS, load_dictionary, read_word_list, emergency_dictionary

__all__ = [
    # Index
    "DictionaryIndex",
    "DictionaryStats",
    "MIN_WORD_LENGTH",
    "MAX_WORD_LENGTH",
    "normalize_word",
    # Loading
    "EMERGENCY_WORDS",
    "load_dictionary",
    "read_word_list",
    "emergency_dictionary",
]
