"""
Hangman Engine

Runs one round of evil hangman at a time. The engine never commits to a
secret word: it keeps every word consistent with the guesses so far and
only picks the secret once the round is over.
"""

import logging
import random
from typing import Dict, Iterable, List, Optional

from ..errors import InvalidArgumentError, InvalidStateError
from ..models.dictionary import Dictionary
from ..models.game import Difficulty, RoundState, RoundStatus
from .round_transition import advance_round

logger = logging.getLogger('hangman_game.engine')


class HangmanEngine:
    """
    Adversarial hangman decision engine.

    This class handles:
    - Round setup from an immutable dictionary
    - Partitioning and ranking word families on each guess
    - Applying the difficulty policy and the wrong-guess budget
    - Deferred secret word selection at the end of the round
    """

    def __init__(self, dictionary: Iterable[str], rng: Optional[random.Random] = None,
                 debug: bool = False):
        """
        Args:
            dictionary: Words available to every round (already lowercased)
            rng: Random source for the final secret pick; a fresh
                `random.Random()` when omitted
            debug: Log the secret word whenever it is requested

        Raises:
            InvalidArgumentError: If the dictionary is missing or empty
        """
        if dictionary is None:
            raise InvalidArgumentError("Dictionary can't be None")
        if not isinstance(dictionary, Dictionary):
            dictionary = Dictionary(dictionary)
        if len(dictionary) == 0:
            raise InvalidArgumentError("Dictionary can't be empty")

        self.dictionary = dictionary
        self.rng = rng if rng is not None else random.Random()
        self.debug = debug
        self._state: Optional[RoundState] = None

    def count_words_of_length(self, length: int) -> int:
        return self.dictionary.count_words_of_length(length)

    def prepare_round(self, word_length: int, wrong_guesses: int, difficulty: Difficulty) -> None:
        """
        Start a new round, discarding any previous one.

        Raises:
            InvalidArgumentError: If no word has `word_length` letters or
                `wrong_guesses` is below 1
        """
        if self.count_words_of_length(word_length) <= 0:
            raise InvalidArgumentError(f"Dictionary has no words of length {word_length}")
        if wrong_guesses < 1:
            raise InvalidArgumentError("Number of wrong guesses must be at least 1")
        if not isinstance(difficulty, Difficulty):
            raise InvalidArgumentError(f"Unknown difficulty: {difficulty!r}")

        self._state = RoundState.initial(
            self.dictionary.words_of_length(word_length),
            word_length, wrong_guesses, difficulty
        )
        logger.debug("round prepared: length=%d guesses=%d difficulty=%s live=%d",
                     word_length, wrong_guesses, difficulty.value, len(self._state.live_words))

    @property
    def round_state(self) -> Optional[RoundState]:
        """Current immutable round snapshot, None before the first round."""
        return self._state

    @property
    def status(self) -> RoundStatus:
        if self._state is None:
            return RoundStatus.PREPARING
        return self._state.status

    def is_over(self) -> bool:
        return self.status in (RoundStatus.WON, RoundStatus.LOST)

    def live_word_count(self) -> int:
        return len(self._state.live_words) if self._state else 0

    def guesses_left(self) -> int:
        return self._state.guesses_left if self._state else 0

    def current_pattern(self) -> str:
        return self._state.pattern if self._state else ""

    def guessed_letters(self) -> List[str]:
        """Every letter guessed this round, sorted."""
        return sorted(self._state.guessed_letters) if self._state else []

    def is_already_guessed(self, letter: str) -> bool:
        return self._state is not None and letter in self._state.guessed_letters

    def apply_guess(self, letter: str) -> Dict[str, int]:
        """
        Update the round for a guessed letter.

        Args:
            letter: Single character, not guessed before this round

        Returns:
            Dict mapping every pattern the guess could have produced to the
            number of live words producing it (for testing and debugging)

        Raises:
            InvalidArgumentError: If `letter` is not a single character
            InvalidStateError: If no round is in progress or the letter was
                already guessed
        """
        if not isinstance(letter, str) or len(letter) != 1:
            raise InvalidArgumentError(f"Guess must be a single character, got {letter!r}")
        if self._state is None:
            raise InvalidStateError("Call prepare_round() before guessing")
        if self._state.is_terminal:
            raise InvalidStateError("Round is already over")

        self._state, frequencies = advance_round(self._state, letter, self.rng)
        return frequencies

    def secret_word(self) -> Optional[str]:
        """
        The word the engine settled on, or None while the round is still
        in progress.

        Raises:
            InvalidStateError: If there are no live words
        """
        if self.live_word_count() <= 0:
            raise InvalidStateError("No live words to pick a secret word from")

        secret = self._state.secret_word
        if self.debug:
            logger.debug("SECRET WORD: %s", secret)
        return secret
