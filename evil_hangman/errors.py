"""
Engine Errors

Precondition violations raised by the hangman engine. Neither kind is
recoverable; callers check `is_already_guessed` / `live_word_count` first.
"""


class HangmanError(Exception):
    """Base class for hangman engine errors."""


class InvalidArgumentError(HangmanError, ValueError):
    """Bad construction or round setup arguments."""


class InvalidStateError(HangmanError, RuntimeError):
    """Operation not allowed in the engine's current state."""
