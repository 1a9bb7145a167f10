"""
Keyboard Aggregator

Tracks the best outcome seen so far for every letter the player has
submitted, for colouring the on-screen keyboard.
"""

from typing import Dict, Iterable, Optional

from ..models.errors import PreconditionViolation
from ..models.game import LetterState

# Explicit ranking; LetterState values are strings and carry no order.
STATE_RANK: Dict[LetterState, int] = {
    LetterState.WRONG: 0,
    LetterState.PARTIAL: 1,
    LetterState.FULL: 2,
}


class KeyboardAggregator:
    """
    Letter -> best known state. A stored state is only ever replaced by a
    higher-ranked one, so a key that turned FULL stays FULL.
    """

    def __init__(self):
        self._states: Dict[str, LetterState] = {}

    def update(self, letter: str, new_state: LetterState) -> bool:
        """
        Merges one letter outcome.

        Returns:
            bool: True if the stored state changed

        Raises:
            PreconditionViolation: If new_state is PENDING
        """
        if new_state not in STATE_RANK:
            raise PreconditionViolation(f"Cannot record {new_state.name} for key '{letter}'")

        letter = letter.lower()
        current = self._states.get(letter)
        if current is None or STATE_RANK[new_state] > STATE_RANK[current]:
            self._states[letter] = new_state
            return True
        return False

    def merge(self, letters: Iterable[str], states: Iterable[LetterState]) -> None:
        """Merges every letter/state pair of one submitted try."""
        for letter, state in zip(letters, states):
            self.update(letter, state)

    def get(self, letter: str) -> Optional[LetterState]:
        return self._states.get(letter.lower())

    def snapshot(self) -> Dict[str, str]:
        return {letter: state.value for letter, state in sorted(self._states.items())}
