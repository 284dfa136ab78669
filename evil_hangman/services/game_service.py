"""
Game Service

Keeps the active hangman rounds in memory, one engine per game id.
"""

import random
import uuid
from typing import Dict, Iterable, Optional, Tuple

from ..config.game_settings import (
    DEFAULT_DIFFICULTY, DEFAULT_WORD_LENGTH, DEFAULT_WRONG_GUESSES, MAX_WRONG_GUESSES,
    load_word_list
)
from ..errors import InvalidArgumentError
from ..models.dictionary import Dictionary
from ..models.game import Difficulty, GuessResult, HangmanGameState, RoundStatus
from .hangman_engine import HangmanEngine


class GameService:
    """
    Core game service managing multiple rounds.

    This class handles:
    - Round management with unique game IDs
    - Guess validation before it reaches the engine
    - Round state snapshots that never expose live words, and only expose
      the secret word once the round is over
    """

    def __init__(self, dictionary: Iterable[str], rng: Optional[random.Random] = None,
                 engine_debug: bool = False):
        self.dictionary = dictionary if isinstance(dictionary, Dictionary) else Dictionary(dictionary)
        if len(self.dictionary) == 0:
            raise InvalidArgumentError("Dictionary can't be empty")
        self.rng = rng
        self.engine_debug = engine_debug
        self.games: Dict[str, HangmanEngine] = {}

    def count_words(self, word_length: int) -> int:
        return self.dictionary.count_words_of_length(word_length)

    def create_new_game(self,
                        word_length: int = DEFAULT_WORD_LENGTH,
                        wrong_guesses: int = DEFAULT_WRONG_GUESSES,
                        difficulty: Difficulty = DEFAULT_DIFFICULTY) -> str:
        """
        Creates a new round.

        Args:
            word_length: Length of the word to play for
            wrong_guesses: Wrong guesses allowed before the round is lost
            difficulty: Difficulty enum or its name (case-insensitive)

        Returns:
            str: Unique game ID for this round

        Raises:
            InvalidArgumentError: If the settings can't start a round
        """
        difficulty = parse_difficulty(difficulty)
        if wrong_guesses > MAX_WRONG_GUESSES:
            raise InvalidArgumentError(f"Number of wrong guesses must be at most {MAX_WRONG_GUESSES}")

        engine = HangmanEngine(self.dictionary, rng=self.rng, debug=self.engine_debug)
        engine.prepare_round(word_length, wrong_guesses, difficulty)

        game_id = str(uuid.uuid4())
        self.games[game_id] = engine
        return game_id

    def get_game_state(self, game_id: str) -> Optional[HangmanGameState]:
        """
        Returns the current round state (without revealing the answer
        while the round is in progress).
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        state = engine.round_state
        status = engine.status
        game_over = status in (RoundStatus.WON, RoundStatus.LOST)

        return HangmanGameState(
            game_id=game_id,
            word_length=state.word_length,
            pattern=engine.current_pattern(),
            guesses_left=engine.guesses_left(),
            guessed_letters=engine.guessed_letters(),
            live_word_count=engine.live_word_count(),
            difficulty=state.difficulty.value,
            status=status.value,
            game_over=game_over,
            won=status == RoundStatus.WON,
            answer=engine.secret_word() if game_over else None
        )

    def is_valid_guess(self, game_id: str, guess) -> Tuple[bool, str]:
        """
        Validates the shape of a guess for a specific round.

        Round-state checks (round over, letter already guessed) are left to
        the engine, which raises InvalidStateError for them.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if game_id not in self.games:
            return False, "Game not found"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        letter = guess.strip().lower()
        if len(letter) != 1:
            return False, "Guess must be exactly 1 letter"

        if not letter.isalpha():
            return False, "Guess must be a letter"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GuessResult]:
        """
        Processes a guess and updates the round.

        Returns:
            GuessResult or None if the guess is malformed

        Raises:
            InvalidStateError: If the round is over or the letter was
                already guessed
        """
        is_valid, _ = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        partitions = self.games[game_id].apply_guess(guess.strip().lower())
        return GuessResult(state=self.get_game_state(game_id), partitions=partitions)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a round from memory.

        Returns:
            bool: True if the round was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


def parse_difficulty(value) -> Difficulty:
    """Accepts a Difficulty or its name in any case."""
    if isinstance(value, Difficulty):
        return value
    if isinstance(value, str):
        try:
            return Difficulty[value.strip().upper()]
        except KeyError:
            pass
    names = ', '.join(d.value for d in Difficulty)
    raise InvalidArgumentError(f"Invalid difficulty {value!r}. Must be one of: {names}")


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[Iterable[str]] = None,
                            rng: Optional[random.Random] = None,
                            engine_debug: bool = False,
                            dictionary_path: Optional[str] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if dictionary is None:
        dictionary = load_word_list(dictionary_path)
    _game_service = GameService(dictionary, rng=rng, engine_debug=engine_debug)
    return _game_service
