"""Game layer for petal-words: generation, live selection and play sessions."""

from .models import (
    Difficulty,
    SelectionStatus,
    RejectionReason,
    PuzzleConfig,
    GenerationReport,
    SubmissionResult,
    SessionStats,
    PuzzleResult,
)
from .generator import (
    ArrangementGenerator,
    generate_arrangement,
    count_common_patterns,
    min_word_count,
    MAX_ATTEMPTS,
)
from .selection import SelectionState
from .scoring import calculate_score, LETTER_VALUES
from .session import PlaySession

__all__ = [
    "Difficulty",
    "SelectionStatus",
    "RejectionReason",
    "PuzzleConfig",
    "GenerationReport",
    "SubmissionResult",
    "SessionStats",
    "PuzzleResult",
    "ArrangementGenerator",
    "generate_arrangement",
    "count_common_patterns",
    "min_word_count",
    "MAX_ATTEMPTS",
    "SelectionState",
    "calculate_score",
    "LETTER_VALUES",
    "PlaySession",
]
