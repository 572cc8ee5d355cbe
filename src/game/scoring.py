"""Word scoring based on letters, tiers and word length."""

import math
from typing import Dict, Iterable

from ..board.models import LetterArrangement, Tier, TileId


# Letter values by frequency and difficulty
LETTER_VALUES: Dict[str, int] = {
    "A": 1, "E": 1, "I": 1, "O": 1, "N": 1, "R": 1, "S": 1, "T": 1,
    "D": 2, "G": 2, "L": 2, "M": 2, "U": 2,
    "B": 3, "C": 3, "H": 3, "P": 3, "Y": 3,
    "F": 4, "K": 4, "W": 4,
    "J": 5, "Q": 5, "V": 5, "X": 5, "Z": 5,
}

TIER_MULTIPLIERS: Dict[Tier, float] = {
    Tier.CENTER: 1.0,
    Tier.INNER: 1.5,
    Tier.OUTER: 2.0,
}

# 6 letters and longer share the top multiplier
LENGTH_MULTIPLIERS: Dict[int, float] = {
    3: 1.0,
    4: 1.5,
    5: 2.0,
    6: 3.0,
}

ALL_TIERS_BONUS = 5


def length_multiplier(length: int) -> float:
    if length >= 6:
        return LENGTH_MULTIPLIERS[6]
    return LENGTH_MULTIPLIERS.get(length, 1.0)


def calculate_score(path: Iterable[TileId], arrangement: LetterArrangement) -> int:
    """
    Score a traced word.

    Sum of letter value x tier multiplier over the path, times the length
    multiplier (floored), plus a bonus for touching all three tiers.
    """
    path = list(path)
    base = sum(
        LETTER_VALUES.get(arrangement.letter_at(tile), 1) * TIER_MULTIPLIERS[tile.tier]
        for tile in path
    )
    score = math.floor(base * length_multiplier(len(path)))

    if {tile.tier for tile in path} == set(Tier):
        score += ALL_TIERS_BONUS

    return score
