"""
Game Service

Keeps one GameController per game session, keyed by game id.
"""

import uuid
from typing import Dict, Optional

from ..models.game import GameSnapshot
from .state_machine import GameController
from .word_source import WordSource


class GameService:
    """
    In-memory registry of game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target selection through the shared word source
    - Lookup and removal of sessions
    Sessions are never shared; each id maps to its own controller.
    """

    def __init__(self, word_source: Optional[WordSource] = None):
        self.word_source = word_source or WordSource()
        self.games: Dict[str, GameController] = {}

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameController(self.word_source, game_id=game_id)
        return game_id

    def get_game(self, game_id: str) -> Optional[GameController]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current snapshot for a session (answer hidden until the game ends).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.snapshot()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: Optional[WordSource] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source)
    return _game_service
