"""
Live tile selection for a play session.

Tiles are picked one at a time. A pick is accepted only when it keeps the
selection a sensible trace:
1. At most 9 tiles.
2. Never the last tile again, and always adjacent to it.
3. A tile already in the selection may not be picked again if it is the
   second- or third-to-last tile (no A-B-A ping-pong, no P-A-C-E-C-A detours).
4. The pick may not close a repeated run: the last k tiles equal to the k
   before them, for any 2 <= k <= half the length (H-A-N-I-H-A-N-I).
Rejected picks leave the selection untouched.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import SelectionStatus
from ..board.adjacency import get_graph
from ..board.models import LetterArrangement, Path, TileId
from ..lexicon.index import MAX_WORD_LENGTH


def closes_repeating_run(path: List[TileId]) -> bool:
    """Whether the path ends with some run of k >= 2 tiles repeated back to back."""
    length = len(path)
    for k in range(2, length // 2 + 1):
        if path[-k:] == path[-2 * k:-k]:
            return True
    return False


class SelectionState(BaseModel):
    """
    The word being traced on the board.

    Attributes:
        arrangement: Letters on the board
        tiles: Picked tiles, in order
        word: Letters of the picked tiles
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    arrangement: LetterArrangement
    tiles: List[TileId] = Field(default_factory=list)
    word: str = ""

    @property
    def status(self) -> SelectionStatus:
        return SelectionStatus.BUILDING if self.tiles else SelectionStatus.EMPTY

    @property
    def path(self) -> Path:
        return tuple(self.tiles)

    @property
    def last_tile(self) -> Optional[TileId]:
        return self.tiles[-1] if self.tiles else None

    def can_pick(self, tile: TileId) -> bool:
        """Whether picking `tile` would be accepted, without picking it."""
        if len(self.tiles) >= MAX_WORD_LENGTH:
            return False

        if not self.tiles:
            return True

        last = self.tiles[-1]
        if tile == last:
            return False
        if not get_graph().is_adjacent(last, tile):
            return False

        if tile in self.tiles:
            if len(self.tiles) >= 2 and self.tiles[-2] == tile:
                return False
            if len(self.tiles) >= 3 and self.tiles[-3] == tile:
                return False

        if len(self.tiles) >= 2 and closes_repeating_run(self.tiles + [tile]):
            return False

        return True

    def pick(self, tile: TileId) -> bool:
        """
        Try to extend the selection with `tile`.

        Returns True if the tile was appended, False if the pick was rejected.
        """
        if not self.can_pick(tile):
            return False

        self.tiles.append(tile)
        self.word += self.arrangement.letter_at(tile)
        return True

    def candidates(self) -> List[TileId]:
        """Tiles that could be picked next by adjacency: all of them when empty."""
        graph = get_graph()
        all_tiles = [tile for tile, _ in self.arrangement.tiles()]
        if not self.tiles:
            return all_tiles
        reachable = graph.neighbors(self.tiles[-1])
        return [tile for tile in all_tiles if tile in reachable]

    def pick_letter(self, letter: str) -> bool:
        """
        Keyboard entry: pick a tile showing `letter`.

        With an empty selection the first matching tile is used; otherwise
        the first matching tile next to the last pick that is accepted.
        """
        letter = letter.strip().upper()
        matching = [tile for tile in self.candidates() if self.arrangement.letter_at(tile) == letter]
        if not matching:
            return False

        if not self.tiles:
            return self.pick(matching[0])

        for tile in matching:
            if self.pick(tile):
                return True
        return False

    def reset(self) -> None:
        """Clear the selection."""
        self.tiles = []
        self.word = ""

    def take(self) -> Tuple[str, Path]:
        """Hand out the built word and path, leaving the selection empty."""
        word, path = self.word, self.path
        self.reset()
        return word, path
