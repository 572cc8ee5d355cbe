"""
Pydantic models for the game layer.

Configurations, generation reports and submission results live here; the
logic classes (ArrangementGenerator, SelectionState, PlaySession) remain in
their respective files.
"""

from enum import Enum, IntEnum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..board.models import LetterArrangement, TileId


class Difficulty(IntEnum):
    """Puzzle difficulty, ordered from easiest to hardest."""
    EASY = 1
    MEDIUM = 3
    HARD = 5

    @classmethod
    def parse(cls, value: "str | int | Difficulty") -> "Difficulty":
        """Accept a member, its value, or its name in any case."""
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown difficulty: {value!r}") from None
        return cls(value)


class SelectionStatus(str, Enum):
    EMPTY = "empty"
    BUILDING = "building"


class RejectionReason(str, Enum):
    """Why a submitted word was not accepted."""
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    MISSING_CENTER = "MISSING_CENTER"
    DUPLICATE = "DUPLICATE"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    NO_VALID_PATH = "NO_VALID_PATH"


class PuzzleConfig(BaseModel):
    """Configuration for a puzzle generation run."""
    difficulty: Difficulty = Difficulty.EASY
    seed: Optional[int] = None
    dictionary: Optional[str] = None
    count: int = Field(default=1, ge=1)

    @field_validator('difficulty', mode='before')
    @classmethod
    def _parse_difficulty(cls, value):
        return Difficulty.parse(value)


class GenerationReport(BaseModel):
    """Outcome of one generate() call."""
    arrangement: LetterArrangement
    difficulty: Difficulty
    word_count: int = 0
    pattern_score: int = 0
    attempts: int = 0
    accepted: bool = False  # met the difficulty threshold
    used_fallback: bool = False
    words: List[str] = Field(default_factory=list)


class SubmissionResult(BaseModel):
    """Result of submitting a word."""
    accepted: bool
    word: str
    reason: Optional[RejectionReason] = None
    message: str = ""
    points: int = 0
    path: List[TileId] = Field(default_factory=list)


class SessionStats(BaseModel):
    """Running statistics for a play session."""
    words_found: int = 0
    longest_word: str = ""
    avg_word_length: float = 0.0
    total_score: int = 0


class PuzzleResult(BaseModel):
    """Result of a generation run, as saved by the CLI."""
    config: PuzzleConfig
    dictionary: Dict = Field(default_factory=dict)
    puzzles: List[GenerationReport] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
