"""Arrangement parsing and rendering utilities."""

import re

from .models import INNER_COUNT, OUTER_COUNT, LetterArrangement


_ARRANGEMENT_PATTERN = re.compile(
    r'^([A-Z])\s*[\s/:|]\s*([A-Z]{%d})\s*[\s/:|]\s*([A-Z]{%d})$' % (INNER_COUNT, OUTER_COUNT),
    re.IGNORECASE,
)


def parse_arrangement(text: str) -> LetterArrangement:
    """
    Parse a compact arrangement string.

    Format: CENTER INNER OUTER, e.g. "R UETOAD FIKTYNMDLCWS". The three
    groups may be separated by whitespace, '/', ':' or '|'.
    Raises ValueError if the string does not describe a full flower.
    """
    content = text.strip()
    match = _ARRANGEMENT_PATTERN.match(content)
    if not match:
        raise ValueError(
            f"Invalid arrangement '{content}': expected 1 center letter, "
            f"{INNER_COUNT} inner letters and {OUTER_COUNT} outer letters"
        )

    return LetterArrangement(
        center=match.group(1),
        inner_ring=list(match.group(2)),
        outer_ring=list(match.group(3)),
    )


def format_arrangement(arrangement: LetterArrangement) -> str:
    """Compact one-line form accepted by parse_arrangement."""
    return (
        f"{arrangement.center} "
        f"{''.join(arrangement.inner_ring)} "
        f"{''.join(arrangement.outer_ring)}"
    )


def render_arrangement(arrangement: LetterArrangement) -> str:
    """Render the arrangement ring by ring."""
    lines = [
        f"center: {arrangement.center}",
        f"inner:  {' '.join(arrangement.inner_ring)}",
        f"outer:  {' '.join(arrangement.outer_ring)}",
    ]
    return '\n'.join(lines)
