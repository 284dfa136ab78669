"""
Difficulty Policy

Chooses which ranked family survives a guess.
"""

from types import MappingProxyType
from typing import Final, Mapping, Sequence

from ..models.game import Difficulty, WordFamily

# Guess-count cadence on which the second-ranked family is granted.
MERCY_CADENCE: Final[Mapping[Difficulty, int]] = MappingProxyType({
    Difficulty.EASY: 2,
    Difficulty.MEDIUM: 4,
})


def grants_mercy(guesses_made: int, difficulty: Difficulty) -> bool:
    """True when `difficulty` gives the player a break on this guess.

    `guesses_made` counts the guesses made before the current one, so the
    very first guess (0) qualifies under EASY and MEDIUM.
    """
    cadence = MERCY_CADENCE.get(difficulty)
    if cadence is None:
        return False
    return guesses_made >= 0 and guesses_made % cadence == 0


def select_family(ranked: Sequence[WordFamily], guesses_made: int,
                  difficulty: Difficulty) -> WordFamily:
    """
    Pick the family that becomes the new live set.

    HARD always takes the most adversarial family. EASY and MEDIUM take the
    runner-up on their mercy cadence whenever there is one.
    """
    if not ranked:
        raise ValueError("select_family needs at least one family")

    if len(ranked) > 1 and grants_mercy(guesses_made, difficulty):
        return ranked[1]
    return ranked[0]
