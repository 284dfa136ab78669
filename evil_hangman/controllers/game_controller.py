"""
Game Controller

Handles all round-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import DEFAULT_DIFFICULTY, DEFAULT_WORD_LENGTH, DEFAULT_WRONG_GUESSES
from ..errors import InvalidArgumentError, InvalidStateError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _json_object(default=None):
    data = request.get_json(silent=True)
    if data is None and default is not None:
        return default
    if not isinstance(data, dict):
        raise InvalidArgumentError("Request body must be a JSON object")
    return data


def _int_setting(data, key, default):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"'{key}' must be an integer")
    return value


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = _json_object(default={})
        word_length = _int_setting(data, 'word_length', DEFAULT_WORD_LENGTH)
        wrong_guesses = _int_setting(data, 'wrong_guesses', DEFAULT_WRONG_GUESSES)
        difficulty = data.get('difficulty', DEFAULT_DIFFICULTY.value)

        game_logger.log_user_action(
            request, 'new_game',
            word_length=word_length, wrong_guesses=wrong_guesses, difficulty=difficulty
        )

        game_id = game_service.create_new_game(word_length, wrong_guesses, difficulty)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, live_word_count=state.live_word_count
        )

        return jsonify(response_data)

    except InvalidArgumentError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current round state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guesses_left=state.guesses_left, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a letter guess."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        if game_id not in game_service.games:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 404

        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        result = game_service.make_guess(game_id, guess)
        if result is None:
            error_response = {
                'success': False,
                'error': 'Failed to process guess'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 500

        state = result.state
        response_data = {
            'success': True,
            'state': asdict(state),
            'partitions': result.partitions
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, pattern=state.pattern, guesses_left=state.guesses_left
        )

        if state.game_over:
            event = 'game_won' if state.won else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                guesses_made=len(state.guessed_letters), secret_word=state.answer,
                final_guess=guess, difficulty=state.difficulty
            )

        return jsonify(response_data)

    except InvalidStateError as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 409

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/dictionary/<int:length>/count', methods=['GET'])
def count_words(length):
    """Number of dictionary words of a given length."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'count_words', word_length=length)

        response_data = {
            'success': True,
            'word_length': length,
            'count': game_service.count_words(length)
        }

        game_logger.log_server_response(request, 'count_words', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'count_words')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'count_words', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'dictionary_size': len(game_service.dictionary) if game_service else 0,
            'word_lengths': game_service.dictionary.lengths() if game_service else [],
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
