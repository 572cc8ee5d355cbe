"""Immutable word index for fast membership and letter lookups."""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel


MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 9

SourceType = Literal["sowpods", "twl", "custom", "emergency"]


class DictionaryStats(BaseModel):
    """Summary of an indexed word list."""
    word_count: int = 0
    source: SourceType = "custom"
    min_length: int = 0
    max_length: int = 0


def normalize_word(word: str) -> Optional[str]:
    """Uppercase a word; None if it is not 3-9 ASCII letters."""
    word = word.strip().upper()
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        return None
    if not word.isascii() or not word.isalpha():
        return None
    return word


class DictionaryIndex:
    """
    Word list indexed for O(1) membership and bucketed lookups.

    Built once, never mutated afterwards: lookups hand out tuples, and the
    bucket maps are read-only views. Words outside 3-9 letters or containing
    anything but A-Z are dropped during the build.
    """

    __slots__ = ('_words', '_by_length', '_by_first_letter', '_by_letter', '_stats')

    def __init__(self, words: Iterable[str], source: SourceType = "custom"):
        all_words: Dict[str, None] = {}  # ordered set
        by_length: Dict[int, List[str]] = {}
        by_first_letter: Dict[str, List[str]] = {}
        by_letter: Dict[str, List[str]] = {}

        for raw in words:
            word = normalize_word(raw)
            if word is None or word in all_words:
                continue
            all_words[word] = None
            by_length.setdefault(len(word), []).append(word)
            by_first_letter.setdefault(word[0], []).append(word)
            for letter in set(word):
                by_letter.setdefault(letter, []).append(word)

        self._words: FrozenSet[str] = frozenset(all_words)
        self._by_length: Mapping[int, Tuple[str, ...]] = _freeze(by_length)
        self._by_first_letter: Mapping[str, Tuple[str, ...]] = _freeze(by_first_letter)
        self._by_letter: Mapping[str, Tuple[str, ...]] = _freeze(by_letter)
        self._stats = DictionaryStats(
            word_count=len(all_words),
            source=source,
            min_length=min(by_length) if by_length else 0,
            max_length=max(by_length) if by_length else 0,
        )

    def contains(self, word: str) -> bool:
        """Exact, case-insensitive membership test."""
        return word.strip().upper() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        return self._by_length.get(length, ())

    def words_containing(self, letter: str) -> Tuple[str, ...]:
        """Words that contain `letter` at least once."""
        return self._by_letter.get(letter.upper(), ())

    def words_starting_with(self, letter: str) -> Tuple[str, ...]:
        return self._by_first_letter.get(letter.upper(), ())

    @property
    def stats(self) -> DictionaryStats:
        return self._stats.model_copy()

    def __repr__(self) -> str:
        return f"DictionaryIndex({self._stats.word_count} words, source={self._stats.source!r})"


def _freeze(buckets: Dict) -> Mapping:
    return MappingProxyType({key: tuple(words) for key, words in buckets.items()})
