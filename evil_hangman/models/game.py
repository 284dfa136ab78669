"""
Game Data Models

Contains all round-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

PLACEHOLDER = "-"


class Difficulty(Enum):
    """How often the engine grants the second-most-adversarial family."""
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class RoundStatus(Enum):
    """Round lifecycle states."""
    PREPARING = "PREPARING"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


def count_placeholders(pattern: str) -> int:
    return pattern.count(PLACEHOLDER)


@dataclass(frozen=True)
class WordFamily:
    """Live words that would all produce `pattern` for the current guess."""
    pattern: str
    words: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.words)

    @property
    def placeholders(self) -> int:
        return count_placeholders(self.pattern)


@dataclass(frozen=True)
class RoundState:
    """
    Immutable snapshot of one round.

    A guess never mutates a snapshot; the engine swaps in a new one built
    with `dataclasses.replace`.
    """
    word_length: int
    pattern: str
    live_words: Tuple[str, ...]
    guesses_left: int
    difficulty: Difficulty
    guessed_letters: FrozenSet[str] = frozenset()
    secret_word: Optional[str] = None

    @classmethod
    def initial(cls, words: Tuple[str, ...], word_length: int,
                wrong_guesses: int, difficulty: Difficulty) -> "RoundState":
        return cls(
            word_length=word_length,
            pattern=PLACEHOLDER * word_length,
            live_words=tuple(words),
            guesses_left=wrong_guesses,
            difficulty=difficulty,
        )

    @property
    def is_complete(self) -> bool:
        return PLACEHOLDER not in self.pattern

    @property
    def is_terminal(self) -> bool:
        return self.is_complete or self.guesses_left == 0

    @property
    def status(self) -> RoundStatus:
        # Completion wins over an exhausted budget.
        if self.is_complete:
            return RoundStatus.WON
        if self.guesses_left == 0:
            return RoundStatus.LOST
        return RoundStatus.IN_PROGRESS


@dataclass
class HangmanGameState:
    """Server-side round state representation (never lists live words)."""
    game_id: str
    word_length: int
    pattern: str
    guesses_left: int
    guessed_letters: List[str]
    live_word_count: int
    difficulty: str
    status: str
    game_over: bool
    won: bool
    answer: Optional[str] = None  # Only included when game is over


@dataclass
class GuessResult:
    """Round state after a guess plus the size of every family it induced."""
    state: HangmanGameState
    partitions: Dict[str, int] = field(default_factory=dict)
