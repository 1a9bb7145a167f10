"""
Session Lookup Decorators

Contains decorators that resolve a game session for HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game(f):
    """
    Decorator for HTTP endpoints taking a <game_id> route argument.
    Passes the session's GameController as the `game` keyword argument.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game = game_service.get_game(game_id)
        if game is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['game'] = game
        return f(game_id, *args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload carries a game_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not args or not isinstance(args[0], dict) or 'game_id' not in args[0]:
            emit('error', {'error': 'Game ID is required'})
            return

        game = game_service.get_game(args[0]['game_id'])
        if game is None:
            emit('error', {'error': 'Game not found'})
            return

        kwargs['game'] = game
        return f(*args, **kwargs)

    return decorated_function
