"""
Tile adjacency for the flower layout.

Adjacency is a property of the layout topology only; letters never matter.
Rules:
1. Center touches every inner tile and no outer tile.
2. Inner tiles touch their cyclic neighbors on the inner ring.
3. Outer tiles touch their cyclic neighbors on the outer ring, provided both
   sit under the same inner tile or under two adjacent inner tiles.
4. An inner tile touches an outer tile when it is the outer tile's parent,
   or the parent's cyclic neighbor.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, List

from .models import CENTER, INNER_COUNT, OUTER_COUNT, Tier, TileId


class AdjacencyGraph:
    """Neighbor relation for a 1 / inner_count / outer_count flower."""

    def __init__(self, inner_count: int = INNER_COUNT, outer_count: int = OUTER_COUNT):
        if inner_count < 3 or outer_count < 3:
            raise ValueError(f"Ring sizes too small: inner={inner_count}, outer={outer_count}")
        if inner_count > INNER_COUNT or outer_count > OUTER_COUNT:
            raise ValueError(
                f"Ring sizes inner={inner_count}, outer={outer_count} exceed the "
                f"{INNER_COUNT}/{OUTER_COUNT} tile range"
            )
        self.inner_count = inner_count
        self.outer_count = outer_count

    def parent_of(self, outer_index: int) -> int:
        """
        Inner ring index that an outer tile sits under.

        round(i / outer * inner) mod inner, with halves rounded up.
        """
        rounded = (2 * outer_index * self.inner_count + self.outer_count) // (2 * self.outer_count)
        return rounded % self.inner_count

    def _inner_neighbors(self, a: int, b: int) -> bool:
        return (a - b) % self.inner_count in (1, self.inner_count - 1)

    def _outer_neighbors(self, a: int, b: int) -> bool:
        return (a - b) % self.outer_count in (1, self.outer_count - 1)

    def is_adjacent(self, a: TileId, b: TileId) -> bool:
        """Whether two tiles are neighbors. Symmetric; a tile is never its own neighbor."""
        if a == b:
            return False

        # Order the pair so a.tier <= b.tier
        if a.tier > b.tier:
            a, b = b, a

        if a.tier == Tier.CENTER:
            return b.tier == Tier.INNER

        if a.tier == Tier.INNER and b.tier == Tier.INNER:
            return self._inner_neighbors(a.index, b.index)

        if a.tier == Tier.INNER:
            parent = self.parent_of(b.index)
            return a.index == parent or self._inner_neighbors(a.index, parent)

        # Both outer
        if not self._outer_neighbors(a.index, b.index):
            return False
        parent_a = self.parent_of(a.index)
        parent_b = self.parent_of(b.index)
        return parent_a == parent_b or self._inner_neighbors(parent_a, parent_b)

    def all_tiles(self) -> List[TileId]:
        tiles = [CENTER]
        tiles.extend(TileId(Tier.INNER, i) for i in range(self.inner_count))
        tiles.extend(TileId(Tier.OUTER, i) for i in range(self.outer_count))
        return tiles

    def neighbors(self, tile: TileId) -> FrozenSet[TileId]:
        """All tiles adjacent to `tile`."""
        return self.neighbor_table()[tile]

    def neighbor_table(self) -> Dict[TileId, FrozenSet[TileId]]:
        if not hasattr(self, '_table'):
            tiles = self.all_tiles()
            self._table = {
                tile: frozenset(other for other in tiles if self.is_adjacent(tile, other))
                for tile in tiles
            }
        return self._table


@lru_cache(maxsize=None)
def get_graph(inner_count: int = INNER_COUNT, outer_count: int = OUTER_COUNT) -> AdjacencyGraph:
    """Shared read-only graph for the given ring sizes."""
    return AdjacencyGraph(inner_count, outer_count)


def is_adjacent(a: TileId, b: TileId) -> bool:
    """Adjacency on the standard 1/6/12 flower."""
    return get_graph().is_adjacent(a, b)


def neighbors(tile: TileId) -> FrozenSet[TileId]:
    return get_graph().neighbors(tile)
