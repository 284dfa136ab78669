import pytest

from evil_hangman.models import Difficulty, WordFamily
from evil_hangman.services.difficulty import MERCY_CADENCE, grants_mercy, select_family

RANKED = [
    WordFamily("---", ("bed", "bad", "bid")),
    WordFamily("--d", ("dad", "bud")),
    WordFamily("d--", ("dab",)),
]


def test_hard_always_takes_the_worst_family():
    for guesses_made in range(10):
        assert select_family(RANKED, guesses_made, Difficulty.HARD) is RANKED[0]


def test_medium_grants_mercy_every_fourth_guess():
    picks = [select_family(RANKED, n, Difficulty.MEDIUM).pattern for n in range(9)]

    assert picks == ["--d", "---", "---", "---", "--d", "---", "---", "---", "--d"]


def test_easy_grants_mercy_every_other_guess():
    picks = [select_family(RANKED, n, Difficulty.EASY).pattern for n in range(5)]

    assert picks == ["--d", "---", "--d", "---", "--d"]


def test_first_guess_qualifies_for_mercy():
    assert grants_mercy(0, Difficulty.EASY)
    assert grants_mercy(0, Difficulty.MEDIUM)
    assert not grants_mercy(0, Difficulty.HARD)


def test_single_family_is_taken_regardless_of_difficulty():
    only = RANKED[:1]

    for difficulty in Difficulty:
        assert select_family(only, 0, difficulty) is only[0]


def test_empty_ranking_is_rejected():
    with pytest.raises(ValueError):
        select_family([], 0, Difficulty.HARD)


def test_mercy_cadence_is_read_only():
    with pytest.raises(TypeError):
        MERCY_CADENCE[Difficulty.HARD] = 1

    assert dict(MERCY_CADENCE) == {Difficulty.EASY: 2, Difficulty.MEDIUM: 4}
