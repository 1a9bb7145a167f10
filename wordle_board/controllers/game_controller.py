"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import KEYBOARD_ROWS, NUM_TRIES, WORD_LENGTH
from ..models.game import GameStatus
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _log_game_end(game_id, game, final_guess):
    """Log a win or loss right after the submit that caused it."""
    if game.status == GameStatus.WON:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            tries_used=game.num_submitted_tries, target_word=game.target_word,
            winning_guess=final_guess
        )
    elif game.status == GameStatus.LOST:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            tries_used=game.num_submitted_tries, target_word=game.target_word,
            final_guess=final_guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'keyboard_rows': KEYBOARD_ROWS,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH, num_tries=NUM_TRIES
        )
        game_logger.log_game_event(game_id, 'game_created', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(game.snapshot())
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            num_submitted_tries=game.num_submitted_tries, status=game.status.value
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


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id, game=None):
    """Forward one key press (letter, Backspace or Enter) to the game."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('key'), str):
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key', game_id, key=key)

        pending_guess = game.active_try.word if game.active_try else None
        changed = game.handle_key(key)
        if changed and game.is_over:
            _log_game_end(game_id, game, pending_guess)

        response_data = {
            'success': True,
            'changed': changed,
            'state': asdict(game.snapshot())
        }

        game_logger.log_server_response(request, 'key', True, response_data, game_id, key=key)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game
def submit_guess(game_id, game=None):
    """Submit the active row for validation and evaluation."""
    try:
        pending_guess = game.active_try.word if game.active_try else None
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=pending_guess)

        was_over = game.is_over
        outcome = game.submit()
        if not was_over and game.is_over:
            _log_game_end(game_id, game, pending_guess)

        response_data = {
            'success': True,
            'outcome': outcome.to_dict(),
            'state': asdict(game.snapshot())
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            outcome=outcome.kind.value, num_submitted_tries=game.num_submitted_tries
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/share', methods=['GET'])
@require_game
def share_result(game_id, game=None):
    """Emoji grid of the submitted rows for the client's share dialog."""
    try:
        game_logger.log_user_action(request, 'share', game_id)

        response_data = {
            'success': True,
            'result': game.share_result()
        }

        game_logger.log_server_response(request, 'share', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'share', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'share', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        log_stats = game_logger.get_log_stats()

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'dictionary_size': len(game_service.word_source) if game_service else 0,
            'log_stats': log_stats
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
