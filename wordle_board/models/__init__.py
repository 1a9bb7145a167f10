"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .errors import PreconditionViolation
from .game import (
    GameSnapshot, GameStatus, Letter, LetterState, OutcomeKind, SubmitOutcome, Try, new_board
)

__all__ = [
    'GameSnapshot', 'GameStatus', 'Letter', 'LetterState', 'OutcomeKind',
    'PreconditionViolation', 'SubmitOutcome', 'Try', 'new_board'
]
