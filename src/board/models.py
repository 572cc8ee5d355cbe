"""Data models for the flower board."""

from collections import Counter
from enum import IntEnum
from typing import Dict, Iterator, List, NamedTuple, Tuple

from pydantic import BaseModel, field_validator


class Tier(IntEnum):
    """Structural ring of a tile, counted outwards from the middle."""
    CENTER = 1
    INNER = 2
    OUTER = 3


# Standard flower: 1 center, 6 inner, 12 outer tiles
CENTER_COUNT = 1
INNER_COUNT = 6
OUTER_COUNT = 12

RING_SIZES: Dict[Tier, int] = {
    Tier.CENTER: CENTER_COUNT,
    Tier.INNER: INNER_COUNT,
    Tier.OUTER: OUTER_COUNT,
}

TILE_COUNT = CENTER_COUNT + INNER_COUNT + OUTER_COUNT


class _TileKey(NamedTuple):
    tier: Tier
    index: int


class TileId(_TileKey):
    """
    Positional identity of a tile: (tier, ring index).

    The index is checked against the ring size of its tier on construction,
    so out-of-range tiles cannot exist.
    """

    __slots__ = ()

    def __new__(cls, tier: int, index: int = 0) -> "TileId":
        tier = Tier(tier)
        if not isinstance(index, int) or not 0 <= index < RING_SIZES[tier]:
            raise ValueError(
                f"Ring index {index!r} out of range for {tier.name} "
                f"(size {RING_SIZES[tier]})"
            )
        return super().__new__(cls, tier, index)

    def __repr__(self) -> str:
        return f"TileId({self.tier.name}, {self.index})"


CENTER = TileId(Tier.CENTER, 0)

Path = Tuple[TileId, ...]


class LetterArrangement(BaseModel):
    """One uppercase letter for each of the 19 tiles."""
    center: str
    inner_ring: List[str]
    outer_ring: List[str]

    @field_validator('center')
    @classmethod
    def _check_center(cls, value: str) -> str:
        return _normalize_letter(value)

    @field_validator('inner_ring')
    @classmethod
    def _check_inner(cls, value: List[str]) -> List[str]:
        return _normalize_ring(value, INNER_COUNT, "inner")

    @field_validator('outer_ring')
    @classmethod
    def _check_outer(cls, value: List[str]) -> List[str]:
        return _normalize_ring(value, OUTER_COUNT, "outer")

    def letter_at(self, tile: TileId) -> str:
        """Letter shown on the given tile."""
        if tile.tier == Tier.CENTER:
            return self.center
        if tile.tier == Tier.INNER:
            return self.inner_ring[tile.index]
        return self.outer_ring[tile.index]

    def tiles(self) -> Iterator[Tuple[TileId, str]]:
        """Yield (tile, letter) pairs: center, then inner ring, then outer ring."""
        yield CENTER, self.center
        for i, letter in enumerate(self.inner_ring):
            yield TileId(Tier.INNER, i), letter
        for i, letter in enumerate(self.outer_ring):
            yield TileId(Tier.OUTER, i), letter

    def letters(self) -> List[str]:
        """All 19 letters in layout order."""
        return [self.center, *self.inner_ring, *self.outer_ring]

    def letter_counts(self) -> Counter:
        return Counter(self.letters())

    def spell(self, path: Path) -> str:
        """Concatenate the letters along a path."""
        return ''.join(self.letter_at(tile) for tile in path)


def _normalize_letter(value: str) -> str:
    letter = value.strip().upper()
    if len(letter) != 1 or not 'A' <= letter <= 'Z':
        raise ValueError(f"Expected a single letter A-Z, got {value!r}")
    return letter


def _normalize_ring(value: List[str], size: int, name: str) -> List[str]:
    if len(value) != size:
        raise ValueError(f"The {name} ring needs exactly {size} letters, got {len(value)}")
    return [_normalize_letter(letter) for letter in value]
