"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Board dimensions, keyboard layout and word list (game rules)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, NUM_TRIES, ALPHABET, KEYBOARD_ROWS, WORD_LIST,
    load_word_list, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'NUM_TRIES', 'ALPHABET', 'KEYBOARD_ROWS', 'WORD_LIST',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics'
]
