"""
Game Configuration Constants Module

Board dimensions, alphabet, keyboard layout and the bundled word list.
All game parameters are centralized here so the engine never hardcodes them.
"""

import json
import os
import string
from typing import Dict, List, Final, Optional

WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and in the target word."""

NUM_TRIES: Final[int] = 6
"""
Number of rows on the board, i.e. guesses allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = string.ascii_lowercase

ENTER_KEY: Final[str] = 'Enter'
BACKSPACE_KEY: Final[str] = 'Backspace'

# On-screen keyboard layout handed to the client
KEYBOARD_ROWS: Final[List[List[str]]] = [
    ['Q', 'W', 'E', 'R', 'T', 'Y', 'U', 'I', 'O', 'P'],
    ['A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L'],
    [ENTER_KEY, 'Z', 'X', 'C', 'V', 'B', 'N', 'M', BACKSPACE_KEY],
]

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load a word list from a JSON file.

    Words of any length are accepted here; filtering down to WORD_LENGTH
    is the word source's job.

    Args:
        json_file_path: Path to a JSON array of words. Defaults to the
            bundled words.json.

    Returns:
        List[str]: Lowercase words in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON is malformed, empty, or contains non-alphabetic entries
    """
    json_file_path = json_file_path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = []
    for word in word_list:
        if not isinstance(word, str) or not word.strip().isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        lowercase_words.append(word.strip().lower())

    return lowercase_words


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()


def validate_word_list_integrity(words: Optional[List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only ASCII a-z allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = WORD_LIST if words is None else words

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if any(char not in ALPHABET for char in word.lower()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Optional[List[str]] = None) -> dict:
    """
    Analyzes the word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    words = WORD_LIST if words is None else words

    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
