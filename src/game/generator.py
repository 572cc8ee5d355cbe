"""
Letter arrangement generation.

Candidates are built from letter-frequency heuristics, scored by tracing
every eligible dictionary word, and accepted once they clear the
difficulty's word-count threshold. After a fixed number of attempts the best
candidate wins, and if no candidate produced any word a hand-checked
fallback arrangement is returned. Generation never fails.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel

from .models import Difficulty, GenerationReport
from ..board.models import INNER_COUNT, OUTER_COUNT, LetterArrangement
from ..board.paths import find_formable_words
from ..lexicon.index import DictionaryIndex

log = logging.getLogger(__name__)


# Letter groups from word-list frequency analysis, tuned for 3-6 letter words
PRIMARY_CENTER_LETTERS = ["S", "R", "T"]  # highest-yield centers
SECONDARY_CENTER_LETTERS = ["A", "E", "N", "L"]
VOWELS = ["A", "E", "I", "O", "U"]
HIGH_FREQ_CONSONANTS = ["R", "S", "T", "N", "L"]  # in >35% of words
MED_FREQ_CONSONANTS = ["C", "D", "P", "M", "H"]  # 20-35%
LOW_FREQ_CONSONANTS = ["F", "W", "G", "B", "Y", "V", "K"]  # 10-20%
RARE_CONSONANTS = ["J", "X", "Q", "Z"]  # <5%

# Letter patterns that produce many words
PRODUCTIVE_PREFIXES = ["RE", "IN", "UN", "DI", "CO", "PR"]
PRODUCTIVE_SUFFIXES = ["ER", "ED", "ES", "ING", "LY"]
PRODUCTIVE_DIGRAPHS = ["TH", "HE", "IN", "ER", "AN", "RE", "ON", "AT", "ES", "OR"]

MAX_ATTEMPTS = 20
EXCELLENT_WORD_COUNT = 65
EASY_MIN_PATTERN_SCORE = 7

MIN_WORD_COUNTS: Dict[Difficulty, int] = {
    Difficulty.EASY: 50,
    Difficulty.MEDIUM: 30,
    Difficulty.HARD: 15,
}

# Chance of slipping a rare consonant into the outer ring
RARE_CONSONANT_CHANCE: Dict[Difficulty, float] = {
    Difficulty.EASY: 0.1,
    Difficulty.MEDIUM: 0.4,
    Difficulty.HARD: 0.7,
}

# Proven high-yield arrangements
FALLBACK_ARRANGEMENTS: List[Dict] = [
    {
        "center": "R",
        "inner_ring": ["U", "E", "T", "O", "A", "D"],
        "outer_ring": ["F", "I", "K", "T", "Y", "N", "M", "D", "L", "C", "W", "S"],
    },
    {
        "center": "S",
        "inner_ring": ["A", "U", "L", "E", "R", "O"],
        "outer_ring": ["T", "P", "M", "N", "W", "V", "I", "C", "G", "K", "D", "R"],
    },
    {
        "center": "R",
        "inner_ring": ["N", "L", "I", "E", "O", "A"],
        "outer_ring": ["S", "B", "F", "D", "U", "T", "H", "G", "W", "V", "S", "Y"],
    },
]


def min_word_count(difficulty: Difficulty) -> int:
    """Minimum formable words for a candidate to be accepted outright."""
    return MIN_WORD_COUNTS.get(difficulty, 30)


def _can_spell(pattern: str, letters: set) -> bool:
    return all(letter in letters for letter in pattern)


def count_common_patterns(arrangement: LetterArrangement) -> int:
    """
    Count productive prefixes, suffixes and digraphs whose letters are present.

    A cheap stand-in for word yield: letter presence only, no path search.
    """
    letters = set(arrangement.letters())
    count = sum(1 for prefix in PRODUCTIVE_PREFIXES if _can_spell(prefix, letters))
    count += sum(1 for suffix in PRODUCTIVE_SUFFIXES if _can_spell(suffix, letters))
    count += sum(1 for digraph in PRODUCTIVE_DIGRAPHS if _can_spell(digraph, letters))
    return count


def fallback_arrangements() -> List[LetterArrangement]:
    return [LetterArrangement(**data) for data in FALLBACK_ARRANGEMENTS]


class ArrangementGenerator(BaseModel):
    """
    Builds and scores candidate arrangements.

    Attributes:
        seed: Optional random seed for reproducibility
    """

    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    def _pick(self, options: Sequence[str]) -> str:
        return options[self._rng.randrange(len(options))]

    def _take(self, pool: List[str]) -> str:
        """Remove and return a random element of `pool`."""
        return pool.pop(self._rng.randrange(len(pool)))

    def _shuffled(self, letters: List[str]) -> List[str]:
        letters = list(letters)
        self._rng.shuffle(letters)
        return letters

    # ------------------------------------------------------------------
    # Candidate construction
    # ------------------------------------------------------------------

    def select_center_letter(self, difficulty: Difficulty) -> str:
        """Pick the center letter, favoring high-yield letters on easier settings."""
        if difficulty == Difficulty.EASY:
            if self._rng.random() < 0.8:
                return self._pick(PRIMARY_CENTER_LETTERS)
            return self._pick(SECONDARY_CENTER_LETTERS)

        if difficulty == Difficulty.MEDIUM:
            roll = self._rng.random()
            if roll < 0.5:
                return self._pick(PRIMARY_CENTER_LETTERS)
            if roll < 0.8:
                return self._pick(SECONDARY_CENTER_LETTERS)
            others = [
                c for c in HIGH_FREQ_CONSONANTS + MED_FREQ_CONSONANTS
                if c not in PRIMARY_CENTER_LETTERS and c not in SECONDARY_CENTER_LETTERS
            ]
            return self._pick(others)

        hard_options = (
            PRIMARY_CENTER_LETTERS + SECONDARY_CENTER_LETTERS + MED_FREQ_CONSONANTS + ["I", "O"]
        )
        return self._pick(hard_options)

    def build_inner_ring(self, center: str, difficulty: Difficulty) -> List[str]:
        """Six inner letters: a target number of vowels, then frequent consonants."""
        inner: List[str] = []

        if difficulty == Difficulty.EASY:
            target_vowels = 3
        elif difficulty == Difficulty.MEDIUM:
            target_vowels = 2
        else:
            target_vowels = self._rng.randint(1, 2)

        vowels = [v for v in VOWELS if v != center]
        for i in range(target_vowels):
            if not vowels:
                break
            priority = [v for v in vowels if v in ("A", "E")]
            if difficulty == Difficulty.EASY and i < 2 and priority:
                vowel = self._pick(priority)
                vowels.remove(vowel)
                inner.append(vowel)
            else:
                inner.append(self._take(vowels))

        # Easy puzzles always get R, S and T for RE-, -ER, -S, -ES and friends
        if difficulty == Difficulty.EASY:
            for letter in ("R", "S", "T"):
                if center != letter and len(inner) < INNER_COUNT and letter not in inner:
                    inner.append(letter)

        # Each draw shrinks the pool while the slot counter grows, so the
        # high-frequency pass stops at about three and leaves room for C/D/P/M/H
        remaining = INNER_COUNT - len(inner)
        pool = [c for c in HIGH_FREQ_CONSONANTS if c != center and c not in inner]
        for i in range(remaining):
            if i >= len(pool):
                break
            inner.append(self._take(pool))

        for group in (MED_FREQ_CONSONANTS, LOW_FREQ_CONSONANTS):
            pool = [c for c in group if c != center and c not in inner]
            while len(inner) < INNER_COUNT and pool:
                inner.append(self._take(pool))

        return self._shuffled(inner)

    def build_outer_ring(self, center: str, inner: List[str], difficulty: Difficulty) -> List[str]:
        """Twelve outer letters balancing total vowels and adding variety."""
        outer: List[str] = []
        used = [center, *inner]
        existing_vowels = [letter for letter in used if letter in VOWELS]

        if difficulty == Difficulty.EASY:
            target_total_vowels = 8 if self._rng.random() < 0.5 else 7
        elif difficulty == Difficulty.MEDIUM:
            target_total_vowels = 7 if self._rng.random() < 0.5 else 6
        else:
            target_total_vowels = 6 if self._rng.random() < 0.5 else 5

        target_outer_vowels = max(0, target_total_vowels - len(existing_vowels))

        unused_vowels = [v for v in VOWELS if v not in used]
        unique_count = min(target_outer_vowels, len(unused_vowels))
        outer.extend(unused_vowels[:unique_count])

        # Top up with repeats, preferring A and E
        for _ in range(target_outer_vowels - unique_count):
            preferred = [v for v in existing_vowels if v in ("A", "E")]
            outer.append(self._pick(preferred or existing_vowels or VOWELS))

        # Easy puzzles get D, N, G for -ED and -ING
        if difficulty == Difficulty.EASY:
            for letter in ("D", "N", "G"):
                if letter not in used and letter not in outer:
                    outer.append(letter)

        high = [c for c in HIGH_FREQ_CONSONANTS if c not in used and c not in outer]
        high_count = min(5 if difficulty == Difficulty.EASY else 3, len(high))
        outer.extend(high[:high_count])

        medium = [c for c in MED_FREQ_CONSONANTS if c not in used and c not in outer]
        medium_count = min(3 if difficulty == Difficulty.EASY else 4, len(medium))
        for letter in medium[:medium_count]:
            if len(outer) >= OUTER_COUNT - 1:
                break
            outer.append(letter)

        if len(outer) < OUTER_COUNT - 1:
            low = [c for c in LOW_FREQ_CONSONANTS if c not in used and c not in outer]
            for letter in low[:2]:
                if len(outer) >= OUTER_COUNT - 1:
                    break
                outer.append(letter)

        if self._rng.random() < RARE_CONSONANT_CHANCE[difficulty] and len(outer) < OUTER_COUNT:
            rare = [c for c in RARE_CONSONANTS if c not in used and c not in outer]
            if rare:
                outer.append(self._pick(rare))

        # Fill with repeats of frequent consonants already on the board
        while len(outer) < OUTER_COUNT:
            frequent = [c for c in used + outer if c in HIGH_FREQ_CONSONANTS]
            outer.append(self._pick(frequent or HIGH_FREQ_CONSONANTS))

        return self._shuffled(outer[:OUTER_COUNT])

    def optimize_positions(self, center: str, inner: List[str]) -> List[str]:
        """
        Reorder the inner ring so productive pairs sit side by side.

        Puts E first next to an R center (RE-) and R first next to an E center
        (-ER), then moves one productive digraph together if it is split.
        """
        inner = list(inner)

        if center == "R" and "E" in inner:
            e_idx = inner.index("E")
            inner[0], inner[e_idx] = inner[e_idx], inner[0]

        if center == "E" and "R" in inner:
            r_idx = inner.index("R")
            inner[0], inner[r_idx] = inner[r_idx], inner[0]

        for first, second in PRODUCTIVE_DIGRAPHS:
            if first not in inner or second not in inner:
                continue
            gap = abs(inner.index(first) - inner.index(second))
            if gap <= 1 or gap == len(inner) - 1:
                continue

            moved = inner.pop(inner.index(second))
            first_idx = inner.index(first)
            target = first_idx + 1 if first_idx < len(inner) - 1 else 0
            inner.insert(target, moved)
            break  # one adjustment per candidate

        return inner

    def build_candidate(self, difficulty: Difficulty) -> LetterArrangement:
        """Construct one candidate arrangement."""
        center = self.select_center_letter(difficulty)
        inner = self.build_inner_ring(center, difficulty)
        outer = self.build_outer_ring(center, inner, difficulty)
        inner = self.optimize_positions(center, inner)
        return LetterArrangement(center=center, inner_ring=inner, outer_ring=outer)

    def fallback(self) -> LetterArrangement:
        return self._rng.choice(fallback_arrangements())

    # ------------------------------------------------------------------
    # Generate and test
    # ------------------------------------------------------------------

    def generate_with_report(
        self,
        dictionary: DictionaryIndex,
        difficulty: Difficulty = Difficulty.EASY,
    ) -> GenerationReport:
        """
        Generate an arrangement and report how it was chosen.

        Tries up to MAX_ATTEMPTS candidates and returns the first that meets
        the difficulty threshold (for easy, also >= 7 productive patterns), or
        any with >= 65 words. Otherwise returns the best candidate seen, or a
        fallback arrangement when none formed a single word.
        """
        difficulty = Difficulty.parse(difficulty)
        threshold = min_word_count(difficulty)

        best: Optional[GenerationReport] = None
        attempts = 0

        while attempts < MAX_ATTEMPTS:
            attempts += 1
            try:
                arrangement = self.build_candidate(difficulty)
                words = find_formable_words(dictionary, arrangement)
                pattern_score = count_common_patterns(arrangement)
            except Exception as e:
                log.warning("Generation attempt #%d failed: %s", attempts, e)
                continue

            word_count = len(words)
            log.debug(
                "Attempt #%d: center=%s inner=%s outer=%s -> %d words, %d patterns",
                attempts,
                arrangement.center,
                ''.join(arrangement.inner_ring),
                ''.join(arrangement.outer_ring),
                word_count,
                pattern_score,
            )

            report = GenerationReport(
                arrangement=arrangement,
                difficulty=difficulty,
                word_count=word_count,
                pattern_score=pattern_score,
                attempts=attempts,
                words=sorted(words, key=lambda w: (len(w), w)),
            )

            if best is None or word_count > best.word_count:
                best = report

            meets_threshold = word_count >= threshold
            if difficulty == Difficulty.EASY:
                meets_threshold = meets_threshold and pattern_score >= EASY_MIN_PATTERN_SCORE

            if meets_threshold or word_count >= EXCELLENT_WORD_COUNT:
                report.accepted = True
                log.info(
                    "Accepted arrangement with %d words and %d patterns after %d attempt(s)",
                    word_count, pattern_score, attempts,
                )
                return report

        if best is not None and best.word_count > 0:
            log.info(
                "Best arrangement found has %d words after %d attempts",
                best.word_count, attempts,
            )
            best.attempts = attempts
            return best

        log.warning("No usable candidate after %d attempts -- using a fallback arrangement", attempts)
        arrangement = self.fallback()
        try:
            words = find_formable_words(dictionary, arrangement)
        except Exception as e:
            log.warning("Could not score fallback arrangement: %s", e)
            words = set()
        return GenerationReport(
            arrangement=arrangement,
            difficulty=difficulty,
            word_count=len(words),
            pattern_score=count_common_patterns(arrangement),
            attempts=attempts,
            used_fallback=True,
            words=sorted(words, key=lambda w: (len(w), w)),
        )

    def generate(
        self,
        dictionary: DictionaryIndex,
        difficulty: Difficulty = Difficulty.EASY,
    ) -> LetterArrangement:
        """Generate a playable arrangement for the given difficulty."""
        return self.generate_with_report(dictionary, difficulty).arrangement


def generate_arrangement(
    dictionary: DictionaryIndex,
    difficulty: Difficulty = Difficulty.EASY,
    seed: Optional[int] = None,
) -> LetterArrangement:
    """Convenience wrapper around ArrangementGenerator.generate."""
    return ArrangementGenerator(seed=seed).generate(dictionary, difficulty)
