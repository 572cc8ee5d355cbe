"""
Test suite for board models, adjacency and layout helpers.

Covers:
- Tile identities and ring bounds
- Letter arrangement validation
- Adjacency rules (center, inner ring, outer ring, inner/outer)
- Arrangement parsing and rendering
"""

import pytest
from pydantic import ValidationError

from src.board import (
    CENTER,
    AdjacencyGraph,
    LetterArrangement,
    Tier,
    TileId,
    format_arrangement,
    get_graph,
    is_adjacent,
    neighbors,
    parse_arrangement,
    render_arrangement,
)


ALL_TILES = get_graph().all_tiles()
INNER = [TileId(Tier.INNER, i) for i in range(6)]
OUTER = [TileId(Tier.OUTER, i) for i in range(12)]


def make_arrangement() -> LetterArrangement:
    return LetterArrangement(
        center="R",
        inner_ring=list("UETOAD"),
        outer_ring=list("FIKTYNMDLCWS"),
    )


class TestTileId:
    """Test tile identity construction."""

    def test_valid_tiles(self):
        """Every standard tile can be built."""
        assert len(ALL_TILES) == 19
        assert len(set(ALL_TILES)) == 19

    def test_center_constant(self):
        """CENTER is the single center tile."""
        assert CENTER == TileId(Tier.CENTER, 0)
        assert CENTER.tier == Tier.CENTER

    def test_tier_from_int(self):
        """Tiers can be given as their integer values."""
        assert TileId(2, 3) == TileId(Tier.INNER, 3)

    @pytest.mark.parametrize("tier,index", [
        (Tier.CENTER, 1),
        (Tier.INNER, 6),
        (Tier.OUTER, 12),
        (Tier.INNER, -1),
    ])
    def test_out_of_range_index(self, tier, index):
        """Ring indexes outside the tier's ring are rejected."""
        with pytest.raises(ValueError):
            TileId(tier, index)

    def test_unknown_tier(self):
        """Tiers other than 1-3 are rejected."""
        with pytest.raises(ValueError):
            TileId(4, 0)

    def test_hashable(self):
        """Tiles work as set members and dict keys."""
        assert {TileId(Tier.OUTER, 5), TileId(Tier.OUTER, 5)} == {TileId(Tier.OUTER, 5)}


class TestLetterArrangement:
    """Test arrangement validation and accessors."""

    def test_letters_normalized(self):
        """Lowercase letters are uppercased."""
        arrangement = LetterArrangement(
            center="r",
            inner_ring=list("uetoad"),
            outer_ring=list("fiktynmdlcws"),
        )
        assert arrangement == make_arrangement()

    def test_wrong_inner_size(self):
        """The inner ring must have exactly 6 letters."""
        with pytest.raises(ValidationError):
            LetterArrangement(center="R", inner_ring=list("UETOA"), outer_ring=list("FIKTYNMDLCWS"))

    def test_wrong_outer_size(self):
        """The outer ring must have exactly 12 letters."""
        with pytest.raises(ValidationError):
            LetterArrangement(center="R", inner_ring=list("UETOAD"), outer_ring=list("FIKTYNMDLCWSX"))

    def test_invalid_letter(self):
        """Only single letters A-Z are allowed."""
        with pytest.raises(ValidationError):
            LetterArrangement(center="1", inner_ring=list("UETOAD"), outer_ring=list("FIKTYNMDLCWS"))
        with pytest.raises(ValidationError):
            LetterArrangement(center="RE", inner_ring=list("UETOAD"), outer_ring=list("FIKTYNMDLCWS"))

    def test_duplicates_allowed(self):
        """The same letter may appear on several tiles."""
        arrangement = LetterArrangement(center="S", inner_ring=list("SSSSSS"), outer_ring=list("S" * 12))
        assert arrangement.letter_counts()["S"] == 19

    def test_letter_at(self):
        """letter_at reads the right ring."""
        arrangement = make_arrangement()
        assert arrangement.letter_at(CENTER) == "R"
        assert arrangement.letter_at(TileId(Tier.INNER, 4)) == "A"
        assert arrangement.letter_at(TileId(Tier.OUTER, 11)) == "S"

    def test_tiles_order(self):
        """tiles() yields center, inner ring, then outer ring."""
        tiles = list(make_arrangement().tiles())
        assert len(tiles) == 19
        assert tiles[0] == (CENTER, "R")
        assert tiles[1] == (TileId(Tier.INNER, 0), "U")
        assert tiles[7] == (TileId(Tier.OUTER, 0), "F")

    def test_spell(self):
        """spell concatenates letters along a path."""
        path = (CENTER, TileId(Tier.INNER, 3), TileId(Tier.INNER, 2))
        assert make_arrangement().spell(path) == "ROT"


class TestAdjacencyRules:
    """Test the topology rules."""

    def test_symmetric(self):
        """Adjacency is symmetric for every pair."""
        for a in ALL_TILES:
            for b in ALL_TILES:
                assert is_adjacent(a, b) == is_adjacent(b, a)

    def test_irreflexive(self):
        """No tile is adjacent to itself."""
        for tile in ALL_TILES:
            assert is_adjacent(tile, tile) is False

    def test_center_touches_all_inner(self):
        """Center is adjacent to every inner tile."""
        for tile in INNER:
            assert is_adjacent(CENTER, tile)

    def test_center_never_touches_outer(self):
        """Center is adjacent to no outer tile."""
        for tile in OUTER:
            assert not is_adjacent(CENTER, tile)

    def test_inner_ring_cyclic_only(self):
        """Inner tiles touch only their cyclic neighbors on the inner ring."""
        assert is_adjacent(INNER[0], INNER[1])
        assert is_adjacent(INNER[0], INNER[5])
        assert not is_adjacent(INNER[0], INNER[2])
        assert not is_adjacent(INNER[0], INNER[3])

    def test_outer_ring_neighbors(self):
        """Outer tiles touch their cyclic neighbors, including across the wrap."""
        assert is_adjacent(OUTER[0], OUTER[1])
        assert is_adjacent(OUTER[11], OUTER[0])
        assert not is_adjacent(OUTER[0], OUTER[2])
        assert not is_adjacent(OUTER[3], OUTER[9])

    def test_parent_mapping(self):
        """Outer tiles map to inner parents by rounding halves up."""
        graph = get_graph()
        parents = [graph.parent_of(i) for i in range(12)]
        assert parents == [0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 0]

    def test_inner_outer(self):
        """An inner tile touches outer tiles under itself or its two neighbors."""
        expected = {OUTER[i] for i in (0, 1, 2, 9, 10, 11)}
        actual = {tile for tile in OUTER if is_adjacent(INNER[0], tile)}
        assert actual == expected

    def test_neighbors_of_inner(self):
        """An inner tile has center, two inner and six outer neighbors."""
        assert len(neighbors(INNER[0])) == 9
        assert CENTER in neighbors(INNER[0])

    def test_neighbors_of_outer(self):
        """An outer tile has two outer and three inner neighbors."""
        result = neighbors(OUTER[0])
        assert result == {OUTER[1], OUTER[11], INNER[0], INNER[1], INNER[5]}

    def test_graph_is_cached(self):
        """The same ring sizes share one graph."""
        assert get_graph() is get_graph()
        assert get_graph(4, 8) is get_graph(4, 8)

    def test_smaller_rings(self):
        """Graphs for smaller flowers follow the same rules."""
        graph = AdjacencyGraph(inner_count=4, outer_count=8)
        assert graph.is_adjacent(TileId(Tier.INNER, 0), TileId(Tier.INNER, 3))
        assert not graph.is_adjacent(TileId(Tier.INNER, 0), TileId(Tier.INNER, 2))
        assert len(graph.all_tiles()) == 13

    def test_ring_sizes_validated(self):
        """Ring sizes must fit the tile identity range."""
        with pytest.raises(ValueError):
            AdjacencyGraph(inner_count=8, outer_count=12)
        with pytest.raises(ValueError):
            AdjacencyGraph(inner_count=2, outer_count=12)


class TestLayout:
    """Test arrangement parsing and rendering."""

    def test_parse_spaces(self):
        """Whitespace-separated groups parse."""
        assert parse_arrangement("R UETOAD FIKTYNMDLCWS") == make_arrangement()

    def test_parse_separators_and_case(self):
        """Slashes and lowercase are accepted."""
        assert parse_arrangement("r/uetoad/fiktynmdlcws") == make_arrangement()

    def test_parse_colons_and_padding(self):
        """Surrounding whitespace is ignored."""
        assert parse_arrangement("  R:UETOAD:FIKTYNMDLCWS\n") == make_arrangement()

    @pytest.mark.parametrize("text", [
        "",
        "R UETOA FIKTYNMDLCWS",
        "R UETOAD FIKTYNMDLCW",
        "RS UETOAD FIKTYNMDLCWS",
        "R UET0AD FIKTYNMDLCWS",
    ])
    def test_parse_invalid(self, text):
        """Malformed arrangements raise ValueError."""
        with pytest.raises(ValueError):
            parse_arrangement(text)

    def test_format_round_trip(self):
        """format_arrangement output parses back to the same arrangement."""
        arrangement = make_arrangement()
        assert format_arrangement(arrangement) == "R UETOAD FIKTYNMDLCWS"
        assert parse_arrangement(format_arrangement(arrangement)) == arrangement

    def test_render(self):
        """Rendering lists each ring on its own line."""
        rendered = render_arrangement(make_arrangement())
        assert rendered.splitlines() == [
            "center: R",
            "inner:  U E T O A D",
            "outer:  F I K T Y N M D L C W S",
        ]
