import pytest

from evil_hangman.errors import InvalidArgumentError, InvalidStateError
from evil_hangman.models import Difficulty
from evil_hangman.services.game_service import GameService, get_game_service, parse_difficulty


def test_initialize_sets_global_service(game_service):
    assert get_game_service() is game_service
    assert game_service.count_words(4) == 9
    assert game_service.count_words(3) == 8


def test_empty_dictionary_is_rejected():
    with pytest.raises(InvalidArgumentError):
        GameService([])


def test_new_game_state_hides_answer(game_service):
    game_id = game_service.create_new_game(4, 6, "medium")
    state = game_service.get_game_state(game_id)

    assert state.pattern == "----"
    assert state.live_word_count == 9
    assert state.difficulty == "MEDIUM"
    assert state.status == "IN_PROGRESS"
    assert not state.game_over
    assert state.answer is None


def test_create_rejects_bad_settings(game_service):
    with pytest.raises(InvalidArgumentError):
        game_service.create_new_game(7, 6, Difficulty.HARD)
    with pytest.raises(InvalidArgumentError):
        game_service.create_new_game(4, 0, Difficulty.HARD)
    with pytest.raises(InvalidArgumentError):
        game_service.create_new_game(4, 27, Difficulty.HARD)
    with pytest.raises(InvalidArgumentError):
        game_service.create_new_game(4, 6, "brutal")


def test_parse_difficulty():
    assert parse_difficulty(" easy ") is Difficulty.EASY
    assert parse_difficulty(Difficulty.HARD) is Difficulty.HARD
    with pytest.raises(InvalidArgumentError):
        parse_difficulty(3)


def test_guess_validation(game_service):
    game_id = game_service.create_new_game(3, 6, Difficulty.HARD)
    game_service.make_guess(game_id, "e")

    assert game_service.is_valid_guess("missing", "a") == (False, "Game not found")
    assert not game_service.is_valid_guess(game_id, "")[0]
    assert not game_service.is_valid_guess(game_id, "ab")[0]
    assert not game_service.is_valid_guess(game_id, "7")[0]
    assert game_service.make_guess(game_id, "ab") is None
    assert game_service.is_valid_guess(game_id, "A") == (True, "")


def test_make_guess_reports_partitions(game_service):
    game_id = game_service.create_new_game(3, 6, Difficulty.HARD)

    result = game_service.make_guess(game_id, "d")

    assert sum(result.partitions.values()) == 8
    assert result.state.live_word_count == max(result.partitions.values())
    assert result.state.guessed_letters == ["d"]
    with pytest.raises(InvalidStateError, match="already been guessed"):
        game_service.make_guess(game_id, "D")


def test_lost_round_reveals_answer(game_service):
    game_id = game_service.create_new_game(3, 1, Difficulty.HARD)

    result = game_service.make_guess(game_id, "z")

    assert result.partitions == {"---": 8}
    assert result.state.game_over
    assert not result.state.won
    assert result.state.status == "LOST"
    assert result.state.answer in {"bed", "bad", "bid", "bud", "dab", "dad", "ear", "era"}
    with pytest.raises(InvalidStateError, match="already over"):
        game_service.make_guess(game_id, "a")


def test_delete_game(game_service):
    game_id = game_service.create_new_game()

    assert game_service.delete_game(game_id)
    assert not game_service.delete_game(game_id)
    assert game_service.get_game_state(game_id) is None
