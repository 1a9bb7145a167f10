"""
Guess Evaluator

Pure scoring of a guess against the target word.
"""

from collections import Counter
from typing import Dict, List, Optional

from ..config.game_settings import WORD_LENGTH
from ..models.errors import PreconditionViolation
from ..models.game import LetterState


def count_letters(word: str) -> Dict[str, int]:
    """
    Occurrence count of each letter in a word.

    For the target "happy" this is {'h': 1, 'a': 1, 'p': 2, 'y': 1}.
    """
    return dict(Counter(word))


def evaluate_guess(guess: str, target: str,
                   letter_counts: Optional[Dict[str, int]] = None) -> List[LetterState]:
    """
    Scores a guess letter by letter in a single left-to-right pass.

    Each position consumes one occurrence of its letter from a working copy
    of the target's letter counts, so an earlier PARTIAL can use up a letter
    that a later position would have matched exactly:

        evaluate_guess("apply", "happy")
        -> [PARTIAL, PARTIAL, FULL, WRONG, FULL]

    Args:
        guess: WORD_LENGTH letters, any case
        target: Lowercase target word of WORD_LENGTH letters
        letter_counts: Precomputed count_letters(target). Copied, never mutated.

    Returns:
        List[LetterState]: One of FULL, PARTIAL or WRONG per position

    Raises:
        PreconditionViolation: If guess or target is not WORD_LENGTH long
    """
    if len(guess) != WORD_LENGTH or len(target) != WORD_LENGTH:
        raise PreconditionViolation(
            f"Cannot evaluate '{guess}' against a {len(target)}-letter target; "
            f"both must be {WORD_LENGTH} letters"
        )

    guess = guess.lower()
    remaining = dict(letter_counts) if letter_counts is not None else count_letters(target)

    states: List[LetterState] = []
    for expected, got in zip(target, guess):
        state = LetterState.WRONG
        if expected == got and remaining.get(got, 0) > 0:
            remaining[got] -= 1
            state = LetterState.FULL
        elif got in target and remaining.get(got, 0) > 0:
            remaining[got] -= 1
            state = LetterState.PARTIAL
        states.append(state)

    return states


def is_winning(states: List[LetterState]) -> bool:
    return len(states) == WORD_LENGTH and all(state == LetterState.FULL for state in states)
