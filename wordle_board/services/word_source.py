"""
Word Source

Supplies target words and the dictionary used to validate guesses.
"""

import random
from typing import Iterable, List, Optional

from ..config.game_settings import ALPHABET, WORD_LENGTH, WORD_LIST


def _is_playable(word: str) -> bool:
    return len(word) == WORD_LENGTH and all(char in ALPHABET for char in word)


class WordSource:
    """
    Word list filtered once to playable WORD_LENGTH words.

    Targets are sampled directly from the filtered list, so every target
    has the right length and is itself a valid guess.
    """

    def __init__(self, words: Optional[Iterable[str]] = None,
                 targets: Optional[Iterable[str]] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            words: Dictionary of allowed guesses. Defaults to the bundled WORD_LIST.
            targets: Optional subset to draw targets from. Defaults to all words.
            rng: Random generator, injectable for reproducible games
        """
        words = WORD_LIST if words is None else words
        self.words: List[str] = sorted({w.strip().lower() for w in words if _is_playable(w.strip().lower())})
        self._dictionary = frozenset(self.words)

        if targets is None:
            self.targets = list(self.words)
        else:
            self.targets = sorted({w.strip().lower() for w in targets} & self._dictionary)

        if not self.targets:
            raise ValueError(f"No {WORD_LENGTH}-letter target words available")

        self.rng = rng or random.Random()

    def pick_target(self) -> str:
        """Returns a random lowercase target word."""
        return self.rng.choice(self.targets)

    def is_valid_guess(self, word: str) -> bool:
        """Case-insensitive dictionary membership."""
        if not isinstance(word, str):
            return False
        return word.strip().lower() in self._dictionary

    def __len__(self) -> int:
        return len(self.words)
