"""
Game Controller

Turn state machine for one game session: letter input, submission,
evaluation and the EDITING -> WON / LOST transitions.
"""

from typing import Dict, List, Optional

from ..config.game_settings import ALPHABET, BACKSPACE_KEY, ENTER_KEY, NUM_TRIES, WORD_LENGTH
from ..models.errors import PreconditionViolation
from ..models.game import (
    GameSnapshot, GameStatus, LetterState, OutcomeKind, SubmitOutcome, Try, new_board
)
from ..utils.game_logger import game_logger
from .evaluator import count_letters, evaluate_guess, is_winning
from .keyboard import KeyboardAggregator
from .word_source import WordSource

SHARE_GLYPHS: Dict[LetterState, str] = {
    LetterState.FULL: '\U0001F7E9',     # green square
    LetterState.PARTIAL: '\U0001F7E8',  # yellow square
    LetterState.WRONG: '\u2B1C',       # white square
}


class GameController:
    """
    Owns the state of a single game.

    The cursor is a flat index over the board (row * WORD_LENGTH + column).
    Only the active row, the one at index num_submitted_tries, accepts
    input. Every operation runs to completion synchronously.
    """

    def __init__(self, word_source: WordSource, target_word: Optional[str] = None,
                 game_id: Optional[str] = None):
        """
        Args:
            word_source: Dictionary and target provider
            target_word: Fixed target (must be a dictionary word); picked from
                word_source when omitted
            game_id: Identifier used in logs and snapshots
        """
        self.word_source = word_source
        self.game_id = game_id
        self.target_word = (target_word or word_source.pick_target()).lower()
        if not word_source.is_valid_guess(self.target_word):
            raise ValueError(f"Target word '{self.target_word}' is not a {WORD_LENGTH}-letter dictionary word")

        # Canonical counts; evaluate_guess copies them on every call
        self._target_letter_counts = count_letters(self.target_word)

        self.tries: List[Try] = new_board()
        self.keyboard = KeyboardAggregator()
        self.status = GameStatus.EDITING
        self.last_outcome = SubmitOutcome()
        self.cur_letter_index = 0
        self.num_submitted_tries = 0

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.EDITING

    @property
    def active_try(self) -> Optional[Try]:
        if self.is_over:
            return None
        return self.tries[self.num_submitted_tries]

    def _set_letter(self, text: str) -> None:
        try_index, letter_index = divmod(self.cur_letter_index, WORD_LENGTH)
        if try_index != self.num_submitted_tries:
            raise PreconditionViolation(
                f"Cursor {self.cur_letter_index} is outside active try {self.num_submitted_tries}"
            )
        self.tries[try_index].letters[letter_index].text = text

    def _report_breach(self, operation: str, error: PreconditionViolation) -> None:
        game_logger.log_invariant_breach(
            self.game_id, operation, error,
            cursor=self.cur_letter_index,
            num_submitted_tries=self.num_submitted_tries,
            status=self.status.value
        )

    def insert_letter(self, char: str) -> bool:
        """
        Types a letter into the active try.

        Returns:
            bool: True if the board changed. Non-letters, a full row and a
            finished game are all no-ops.
        """
        if self.is_over or not isinstance(char, str) or len(char) != 1:
            return False

        char = char.lower()
        if char not in ALPHABET:
            return False

        # Don't spill over into the next row before this one is submitted
        if self.cur_letter_index >= (self.num_submitted_tries + 1) * WORD_LENGTH:
            return False

        try:
            self._set_letter(char)
        except PreconditionViolation as e:
            self._report_breach('insert_letter', e)
            return False

        self.cur_letter_index += 1
        return True

    def delete_letter(self) -> bool:
        """Erases the last typed letter. Submitted rows are never touched."""
        if self.is_over:
            return False

        if self.cur_letter_index <= self.num_submitted_tries * WORD_LENGTH:
            return False

        self.cur_letter_index -= 1
        try:
            self._set_letter('')
        except PreconditionViolation as e:
            self.cur_letter_index += 1
            self._report_breach('delete_letter', e)
            return False

        return True

    def submit(self) -> SubmitOutcome:
        """
        Submits the active try.

        Validation failures leave the board untouched and return
        INCOMPLETE_GUESS or NOT_IN_DICTIONARY. An accepted guess is
        evaluated, written into the row and the keyboard, and may end the
        game. Calling this after the game ended returns the final outcome
        again without changing anything.
        """
        if self.is_over:
            return self.last_outcome

        cur_try = self.tries[self.num_submitted_tries]

        if not cur_try.is_complete:
            self.last_outcome = SubmitOutcome(OutcomeKind.INCOMPLETE_GUESS)
            return self.last_outcome

        guess = cur_try.word.lower()
        if not self.word_source.is_valid_guess(guess):
            self.last_outcome = SubmitOutcome(OutcomeKind.NOT_IN_DICTIONARY)
            return self.last_outcome

        try:
            states = evaluate_guess(guess, self.target_word, self._target_letter_counts)
        except PreconditionViolation as e:
            self._report_breach('submit', e)
            return self.last_outcome

        for letter, state in zip(cur_try.letters, states):
            letter.state = state
        self.keyboard.merge(guess, states)
        self.num_submitted_tries += 1

        if is_winning(states):
            self.status = GameStatus.WON
            self.last_outcome = SubmitOutcome(OutcomeKind.WON)
        elif self.num_submitted_tries == NUM_TRIES:
            self.status = GameStatus.LOST
            self.last_outcome = SubmitOutcome(OutcomeKind.LOST, revealed_word=self.target_word)
        else:
            self.last_outcome = SubmitOutcome(OutcomeKind.NONE)

        return self.last_outcome

    def handle_key(self, key: str) -> bool:
        """
        Dispatches a raw key name from the client keyboard.

        A single letter types it, "Backspace" deletes and "Enter" submits.
        Anything else is ignored.

        Returns:
            bool: True if the game state changed
        """
        if not isinstance(key, str):
            return False

        if key == ENTER_KEY:
            before = self.num_submitted_tries
            self.submit()
            return self.num_submitted_tries != before
        if key == BACKSPACE_KEY:
            return self.delete_letter()
        if len(key) == 1:
            return self.insert_letter(key)
        return False

    def share_result(self) -> str:
        """
        Emoji grid of the submitted tries, one row per try, rows joined by
        a single newline. Depends only on the board.
        """
        rows = []
        for cur_try in self.tries[:self.num_submitted_tries]:
            rows.append(''.join(SHARE_GLYPHS[letter.state] for letter in cur_try.letters))
        return '\n'.join(rows)

    def snapshot(self) -> GameSnapshot:
        """Copies the state out for the presentation layer."""
        return GameSnapshot(
            game_id=self.game_id,
            status=self.status.value,
            word_length=WORD_LENGTH,
            num_tries=NUM_TRIES,
            num_submitted_tries=self.num_submitted_tries,
            cursor=self.cur_letter_index,
            board=[
                [{'text': letter.text, 'state': letter.state.value} for letter in cur_try.letters]
                for cur_try in self.tries
            ],
            keyboard=self.keyboard.snapshot(),
            last_outcome=self.last_outcome.to_dict(),
            answer=self.target_word if self.is_over else None
        )
