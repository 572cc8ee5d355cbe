"""
PlaySession class for managing one player's game on one arrangement.

Owns the live selection, classifies submitted words, and keeps the found
words, score and running statistics.
"""

from typing import Dict, List, Optional, Sequence, Set

from pydantic import BaseModel, ConfigDict, Field

from .models import RejectionReason, SessionStats, SubmissionResult
from .scoring import calculate_score
from .selection import SelectionState
from ..board.models import LetterArrangement, TileId
from ..board.paths import find_formable_words, find_path
from ..lexicon.index import MAX_WORD_LENGTH, MIN_WORD_LENGTH, DictionaryIndex


class PlaySession(BaseModel):
    """
    Manages a single play session.

    Attributes:
        arrangement: Letters on the board
        dictionary: Index used to check submitted words
        selection: The word currently being traced
        found_words: Accepted words, in submission order
        score: Total points so far
        stats: Running statistics
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    arrangement: LetterArrangement
    dictionary: DictionaryIndex
    selection: Optional[SelectionState] = None
    found_words: List[str] = Field(default_factory=list)
    score: int = 0
    stats: SessionStats = Field(default_factory=SessionStats)
    last_result: Optional[SubmissionResult] = None
    _possible_words: Optional[Set[str]] = None

    def model_post_init(self, __context) -> None:
        """Start with an empty selection on this arrangement."""
        if self.selection is None:
            self.selection = SelectionState(arrangement=self.arrangement)

    @property
    def current_word(self) -> str:
        return self.selection.word

    def select(self, tile: TileId) -> bool:
        """Pick a tile; False when the pick is rejected."""
        return self.selection.pick(tile)

    def select_letter(self, letter: str) -> bool:
        return self.selection.pick_letter(letter)

    def reset_selection(self) -> None:
        self.selection.reset()

    def check_word(self, word: str, path: Optional[Sequence[TileId]] = None) -> SubmissionResult:
        """
        Classify a word without changing the session.

        Checks, in order: length, center letter, already found, dictionary,
        traceable path. `path` is the player's own trace, used for scoring
        when given; otherwise the validator's path is scored.
        """
        word = word.strip().upper()

        if len(word) < MIN_WORD_LENGTH:
            return SubmissionResult(
                accepted=False,
                word=word,
                reason=RejectionReason.TOO_SHORT,
                message=f"'{word}' is too short (minimum {MIN_WORD_LENGTH} letters)",
            )

        if len(word) > MAX_WORD_LENGTH:
            return SubmissionResult(
                accepted=False,
                word=word,
                reason=RejectionReason.TOO_LONG,
                message=f"'{word}' is too long (maximum {MAX_WORD_LENGTH} letters)",
            )

        if self.arrangement.center not in word:
            return SubmissionResult(
                accepted=False,
                word=word,
                reason=RejectionReason.MISSING_CENTER,
                message=f"'{word}' must use the center letter '{self.arrangement.center}'",
            )

        if word in self.found_words:
            return SubmissionResult(
                accepted=False,
                word=word,
                reason=RejectionReason.DUPLICATE,
                message=f"'{word}' has already been found",
            )

        if not self.dictionary.contains(word):
            return SubmissionResult(
                accepted=False,
                word=word,
                reason=RejectionReason.NOT_IN_DICTIONARY,
                message=f"'{word}' is not a valid dictionary word",
            )

        traced = find_path(word, self.arrangement)
        if traced is None:
            return SubmissionResult(
                accepted=False,
                word=word,
                reason=RejectionReason.NO_VALID_PATH,
                message=f"'{word}' cannot be traced through connected tiles",
            )

        scored_path = list(path) if path else list(traced)
        return SubmissionResult(
            accepted=True,
            word=word,
            message=f"'{word}' accepted",
            points=calculate_score(scored_path, self.arrangement),
            path=scored_path,
        )

    def submit(self) -> SubmissionResult:
        """
        Submit the current selection.

        The selection is reset whatever the outcome.
        """
        word, path = self.selection.take()
        result = self.check_word(word, path)

        if result.accepted:
            self.found_words.append(result.word)
            self.score += result.points
            self._update_stats(result)

        self.last_result = result
        return result

    def _update_stats(self, result: SubmissionResult) -> None:
        longest = self.stats.longest_word
        self.stats = SessionStats(
            words_found=len(self.found_words),
            longest_word=result.word if len(result.word) > len(longest) else longest,
            avg_word_length=sum(len(w) for w in self.found_words) / len(self.found_words),
            total_score=self.stats.total_score + result.points,
        )

    def possible_words(self) -> Set[str]:
        """Every word the board supports (computed once)."""
        if self._possible_words is None:
            self._possible_words = find_formable_words(self.dictionary, self.arrangement)
        return set(self._possible_words)

    def missed_words(self) -> List[str]:
        """Supported words not found yet, shortest first."""
        missed = self.possible_words() - set(self.found_words)
        return sorted(missed, key=lambda w: (len(w), w))

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "arrangement": self.arrangement.model_dump(),
            "current_word": self.selection.word,
            "selection_status": self.selection.status.value,
            "found_words": list(self.found_words),
            "score": self.score,
            "stats": self.stats.model_dump(),
        }
