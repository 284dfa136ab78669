"""
Game Configuration Constants Module

This module defines the round defaults and loads the dictionary that every
round draws its candidate words from.
"""

import json
import os
from collections import Counter
from typing import Final, List, Optional

from ..models.game import Difficulty

# Core Round Configuration Constants
DEFAULT_WORD_LENGTH: Final[int] = 5
DEFAULT_WRONG_GUESSES: Final[int] = 6
DEFAULT_DIFFICULTY: Final[Difficulty] = Difficulty.HARD
MAX_WRONG_GUESSES: Final[int] = 26
"""
Upper bound on the wrong-guess budget accepted from clients.
Type: Final[int] - one wrong guess per letter of the alphabet
"""

DEFAULT_DICTIONARY_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'dictionary.json'
)


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a JSON file.

    Args:
        path: JSON file holding an array of words; the bundled
            dictionary.json when omitted

    Returns:
        List[str]: Lowercased words, duplicates removed, in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    json_file_path = path or DEFAULT_DICTIONARY_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = []
    seen = set()
    for word in word_list:
        if not isinstance(word, str):
            raise ValueError(f"Word {word!r} is not a string")
        normalized = word.strip().lower()
        if not normalized.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        if normalized not in seen:
            seen.add(normalized)
            words.append(normalized)

    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks that the list is non-empty, every word is alphabetic and
    lowercase, and there are no duplicates.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        counts = Counter(words)
        duplicates = sorted(word for word, count in counts.items() if count > 1)
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information for round setup.

    Returns:
        dict: total_words, words_per_length, letter_frequency and the five
        most common letters
    """
    if not words:
        return {"error": "Word list is empty"}

    letter_frequency = Counter(char for word in words for char in word)
    words_per_length = Counter(len(word) for word in words)

    return {
        "total_words": len(words),
        "words_per_length": dict(sorted(words_per_length.items())),
        "letter_frequency": dict(letter_frequency),
        "most_common_letters": letter_frequency.most_common(5)
    }


if __name__ == "__main__":

    try:
        bundled = load_word_list()
        validate_word_list_integrity(bundled)
        print(" Word list validation passed")
        print(f" Word statistics: {get_word_statistics(bundled)}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
