"""Flower board: tiles, adjacency and path validation."""

from .models import (
    Tier,
    TileId,
    CENTER,
    LetterArrangement,
    Path,
    RING_SIZES,
    TILE_COUNT,
)
from .adjacency import AdjacencyGraph, get_graph, is_adjacent, neighbors
from .layout import parse_arrangement, format_arrangement, render_arrangement
from .paths import (
    can_form_word,
    find_path,
    find_possible_words,
    count_possible_words,
    find_formable_words,
    count_formable_words,
    validate_arrangement,
    is_valid_path,
)

__all__ = [
    # Models
    "Tier",
    "TileId",
    "CENTER",
    "LetterArrangement",
    "Path",
    "RING_SIZES",
    "TILE_COUNT",
    # Adjacency
    "AdjacencyGraph",
    "get_graph",
    "is_adjacent",
    "neighbors",
    # Layout
    "parse_arrangement",
    "format_arrangement",
    "render_arrangement",
    # Path validation
    "can_form_word",
    "find_path",
    "find_possible_words",
    "count_possible_words",
    "find_formable_words",
    "count_formable_words",
    "validate_arrangement",
    "is_valid_path",
]
