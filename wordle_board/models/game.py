"""
Game Data Models

Contains the board data structures, enums and the read-only snapshot
handed to the presentation layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..config.game_settings import WORD_LENGTH, NUM_TRIES


class LetterState(Enum):
    """Per-letter outcome. PENDING until the letter's try is submitted."""
    WRONG = "WRONG"
    PARTIAL = "PARTIAL"
    FULL = "FULL"
    PENDING = "PENDING"


class GameStatus(Enum):
    """State machine states. WON and LOST are terminal."""
    EDITING = "EDITING"
    WON = "WON"
    LOST = "LOST"


class OutcomeKind(Enum):
    """Result of the most recent submit."""
    NONE = "NONE"
    INCOMPLETE_GUESS = "INCOMPLETE_GUESS"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    WON = "WON"
    LOST = "LOST"


# Messages shown by the client's info panel
OUTCOME_MESSAGES: Dict[OutcomeKind, str] = {
    OutcomeKind.NONE: "",
    OutcomeKind.INCOMPLETE_GUESS: "Not enough letters",
    OutcomeKind.NOT_IN_DICTIONARY: "Not in word list",
    OutcomeKind.WON: "NICE!",
}


@dataclass
class Letter:
    """One cell on the board."""
    text: str = ""
    state: LetterState = LetterState.PENDING


@dataclass
class Try:
    """One row on the board."""
    letters: List[Letter] = field(default_factory=lambda: [Letter() for _ in range(WORD_LENGTH)])

    @property
    def word(self) -> str:
        return "".join(letter.text for letter in self.letters)

    @property
    def is_complete(self) -> bool:
        return all(letter.text != "" for letter in self.letters)


def new_board() -> List[Try]:
    """Creates an empty board of NUM_TRIES rows."""
    return [Try() for _ in range(NUM_TRIES)]


@dataclass(frozen=True)
class SubmitOutcome:
    """What happened on the last submit; revealed_word is set only on a loss."""
    kind: OutcomeKind = OutcomeKind.NONE
    revealed_word: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind == OutcomeKind.LOST:
            return (self.revealed_word or "").upper()
        return OUTCOME_MESSAGES[self.kind]

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "kind": self.kind.value,
            "revealed_word": self.revealed_word,
            "message": self.message,
        }


@dataclass
class GameSnapshot:
    """Read-only, JSON-serializable view of one session."""
    game_id: Optional[str]
    status: str
    word_length: int
    num_tries: int
    num_submitted_tries: int
    cursor: int
    board: List[List[Dict[str, str]]]
    keyboard: Dict[str, str]
    last_outcome: Dict[str, Optional[str]]
    answer: Optional[str] = None  # Only included when game is over
