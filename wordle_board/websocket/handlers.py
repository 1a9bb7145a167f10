"""
WebSocket Event Handlers

Real-time channel for key presses: the client emits each key and gets the
updated board back without polling.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game=None):
        """Join a game room and receive the current state."""
        game_id = data['game_id']
        join_room(_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)

        emit('game_state_update', {
            'success': True,
            'state': asdict(game.snapshot())
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return
        leave_room(_room(data['game_id']))

    @socketio.on('key_press')
    @websocket_game_required
    def handle_key_press(data, game=None):
        """Apply one key press and broadcast the new state to the room."""
        game_id = data['game_id']
        key = data.get('key')
        if not isinstance(key, str):
            emit('error', {'error': 'Key is required'})
            return

        try:
            game_logger.log_user_action(request, 'key_press', game_id, key=key)

            pending_guess = game.active_try.word if game.active_try else None
            changed = game.handle_key(key)
            if changed and game.is_over:
                game_logger.log_game_event(
                    game_id, f"game_{game.status.value.lower()}", request.remote_addr,
                    tries_used=game.num_submitted_tries, target_word=game.target_word,
                    final_guess=pending_guess
                )

            payload = {
                'success': True,
                'changed': changed,
                'state': asdict(game.snapshot())
            }
            emit('game_state_update', payload)
            # Other views of the same game (e.g. a second tab)
            emit('game_state_update', payload, to=_room(game_id), include_self=False)

        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', {'error': str(e)})
