import json

import pytest

from wordle_board.config import game_settings
from wordle_board.config.game_settings import (
    ALPHABET, KEYBOARD_ROWS, NUM_TRIES, WORD_LENGTH, WORD_LIST,
    get_word_statistics, load_word_list, validate_word_list_integrity
)


def test_board_constants():
    assert WORD_LENGTH == 5
    assert NUM_TRIES == 6
    assert ALPHABET == "abcdefghijklmnopqrstuvwxyz"


def test_keyboard_rows_cover_alphabet():
    keys = {key.lower() for row in KEYBOARD_ROWS for key in row if len(key) == 1}
    assert keys == set(ALPHABET)
    assert 'Enter' in KEYBOARD_ROWS[2] and 'Backspace' in KEYBOARD_ROWS[2]


def test_bundled_word_list_is_valid():
    assert validate_word_list_integrity() is True
    assert "happy" in WORD_LIST and "crane" in WORD_LIST


@pytest.mark.parametrize("words", [
    [],
    ["crane", "crane"],
    ["crane", "cranes"],
    ["crane", "CANDY"],
    ["cr4ne"],
])
def test_validate_rejects_bad_lists(words):
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)


def test_word_statistics():
    stats = get_word_statistics(["happy", "apply"])
    assert stats["total_words"] == 2
    assert stats["avg_vowel_count"] == 1.0
    assert stats["letter_frequency"]["p"] == 4
    assert stats["most_common_letters"][0] == ("p", 4)
    assert get_word_statistics([]) == {"error": "Word list is empty"}


def test_load_word_list_lowercases(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["Crane", "HAPPY", "toolong"]), encoding="utf-8")
    assert load_word_list(str(path)) == ["crane", "happy", "toolong"]


@pytest.mark.parametrize("content", ['{"a": 1}', '[]', '["cr4ne"]', 'not json'])
def test_load_word_list_rejects_bad_files(tmp_path, content):
    path = tmp_path / "words.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_word_list(str(path))


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.json"))


def test_default_path_points_at_bundled_file():
    assert load_word_list() == load_word_list(game_settings.DEFAULT_WORD_LIST_PATH)
