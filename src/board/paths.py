"""
Path validation: can a word be traced over adjacent tiles?

A word is formable when a depth-first search finds a path of adjacent,
non-repeating tiles spelling it, and that path passes the center rules:
1. The path must include the center tile.
2. Words longer than 6 letters: when the center is not an endpoint, the
   tiles on both sides of it in the path must be inner tiles.
"""

from collections import Counter
from typing import Iterable, List, Optional, Set, Tuple

from .adjacency import AdjacencyGraph, get_graph
from .models import CENTER, LetterArrangement, Path, Tier, TileId
from ..lexicon.index import MAX_WORD_LENGTH, MIN_WORD_LENGTH, DictionaryIndex


LONG_WORD_LENGTH = 6


def _search(
    word: str,
    tiles: List[Tuple[TileId, str]],
    graph: AdjacencyGraph,
) -> Optional[Path]:
    """Return the first path spelling `word`, trying start tiles in layout order."""
    for tile, letter in tiles:
        if letter != word[0]:
            continue
        found = _extend(word, (tile,), tiles, graph)
        if found is not None:
            return found
    return None


def _extend(
    word: str,
    path: Path,
    tiles: List[Tuple[TileId, str]],
    graph: AdjacencyGraph,
) -> Optional[Path]:
    if len(path) == len(word):
        return path

    wanted = word[len(path)]
    reachable = graph.neighbors(path[-1])

    for tile, letter in tiles:
        if letter != wanted or tile not in reachable or tile in path:
            continue
        # Each branch gets its own path tuple
        found = _extend(word, path + (tile,), tiles, graph)
        if found is not None:
            return found
    return None


def passes_center_rules(path: Path) -> bool:
    """Check the center tile rules on a traced path."""
    if CENTER not in path:
        return False

    if len(path) > LONG_WORD_LENGTH:
        center_idx = path.index(CENTER)
        if 0 < center_idx < len(path) - 1:
            before, after = path[center_idx - 1], path[center_idx + 1]
            if before.tier != Tier.INNER or after.tier != Tier.INNER:
                return False

    return True


def is_valid_path(path: Iterable[TileId], graph: Optional[AdjacencyGraph] = None) -> bool:
    """
    Whether a path is a chain of adjacent, distinct tiles through the center.

    Empty paths are invalid.
    """
    graph = graph or get_graph()
    path = tuple(path)
    if not path or len(set(path)) != len(path):
        return False
    for current, following in zip(path, path[1:]):
        if not graph.is_adjacent(current, following):
            return False
    return CENTER in path


def find_path(word: str, arrangement: LetterArrangement) -> Optional[Path]:
    """
    Find the path used to form `word` on the arrangement.

    Returns None when the word has the wrong length, lacks the center letter,
    cannot be traced, or its first traced path breaks the center rules.
    """
    word = word.strip().upper()

    if len(word) < MIN_WORD_LENGTH or len(word) > MAX_WORD_LENGTH:
        return None

    if arrangement.center not in word:
        return None

    path = _search(word, list(arrangement.tiles()), get_graph())
    if path is None or not passes_center_rules(path):
        return None
    return path


def can_form_word(word: str, arrangement: LetterArrangement) -> bool:
    """Check if a word can be formed along a valid path."""
    return find_path(word, arrangement) is not None


def fits_letters(word: str, available: Counter) -> bool:
    """Whether the word's letters are a sub-multiset of the available letters."""
    needed = Counter(word)
    return all(available[letter] >= count for letter, count in needed.items())


def find_possible_words(dictionary: DictionaryIndex, arrangement: LetterArrangement) -> List[str]:
    """
    Words the arrangement's letters could spell, ignoring tile positions.

    Keeps dictionary words that contain the center letter and whose letter
    counts fit within the arrangement's. No path search is done.
    """
    available = arrangement.letter_counts()
    return [
        word for word in dictionary.words_containing(arrangement.center)
        if MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH and fits_letters(word, available)
    ]


def count_possible_words(dictionary: DictionaryIndex, arrangement: LetterArrangement) -> int:
    return len(find_possible_words(dictionary, arrangement))


def find_formable_words(dictionary: DictionaryIndex, arrangement: LetterArrangement) -> Set[str]:
    """
    All dictionary words that can be traced on the arrangement.

    Only the letter-level candidates from find_possible_words are searched.
    """
    tiles = list(arrangement.tiles())
    graph = get_graph()

    formable: Set[str] = set()
    for word in find_possible_words(dictionary, arrangement):
        path = _search(word, tiles, graph)
        if path is not None and passes_center_rules(path):
            formable.add(word)

    return formable


def count_formable_words(dictionary: DictionaryIndex, arrangement: LetterArrangement) -> int:
    return len(find_formable_words(dictionary, arrangement))


def validate_arrangement(
    arrangement: LetterArrangement,
    dictionary: DictionaryIndex,
    min_word_count: int = 25,
) -> bool:
    """Whether the arrangement supports at least `min_word_count` words."""
    return count_formable_words(dictionary, arrangement) >= min_word_count
