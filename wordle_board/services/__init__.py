"""
Services Package

Contains the game engine and the session registry.
"""

from .evaluator import count_letters, evaluate_guess
from .game_service import GameService, get_game_service, initialize_game_service
from .keyboard import KeyboardAggregator
from .state_machine import GameController
from .word_source import WordSource

__all__ = [
    'count_letters', 'evaluate_guess',
    'GameService', 'get_game_service', 'initialize_game_service',
    'KeyboardAggregator', 'GameController', 'WordSource'
]
