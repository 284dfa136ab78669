"""
Round Transition

The per-guess state change of a round, written as a function from one
immutable RoundState snapshot to the next.
"""

import logging
from dataclasses import replace
from typing import Dict, Tuple

from ..errors import InvalidStateError
from ..models.game import RoundState
from .difficulty import select_family
from .partition import partition, rank_families

logger = logging.getLogger('hangman_game.engine')


def advance_round(state: RoundState, letter: str, rng) -> Tuple[RoundState, Dict[str, int]]:
    """
    Apply one guessed letter to a round.

    Args:
        state: Current round snapshot
        letter: Guessed letter, not guessed before in this round
        rng: Random source exposing `choice`, used for the terminal secret pick

    Returns:
        Tuple of (next snapshot, size of every family the guess induced)

    Raises:
        InvalidStateError: If `letter` was already guessed this round
    """
    if letter in state.guessed_letters:
        raise InvalidStateError(f"Letter '{letter}' has already been guessed")

    families = partition(state.live_words, state.pattern, letter)
    frequencies = {key: family.size for key, family in families.items()}
    ranked = rank_families(families.values())

    # Mercy cadence is keyed off the guesses made before this one.
    guesses_made = len(state.guessed_letters)
    chosen = select_family(ranked, guesses_made, state.difficulty)

    guesses_left = state.guesses_left
    if chosen.pattern == state.pattern:
        guesses_left -= 1

    next_state = replace(
        state,
        pattern=chosen.pattern,
        live_words=chosen.words,
        guesses_left=guesses_left,
        guessed_letters=state.guessed_letters | {letter},
    )

    logger.debug("guess=%s families=%s chosen=%s live=%d guesses_left=%d",
                 letter, frequencies, chosen.pattern, chosen.size, guesses_left)

    # Pattern completion is checked first: a correct final guess never costs
    # budget, so a completed pattern always ends the round as a win.
    if next_state.is_complete or next_state.guesses_left == 0:
        next_state = replace(next_state, secret_word=rng.choice(next_state.live_words))
        logger.debug("round over: status=%s", next_state.status.value)

    return next_state, frequencies
