"""
Dictionary Model

Immutable word source queried by length.
"""

from collections import Counter
from typing import Iterable, List, Tuple


class Dictionary:
    """
    Immutable collection of candidate words.

    Words are kept in sorted order so every round seeded from the same
    dictionary iterates its live words identically.
    """

    def __init__(self, words: Iterable[str]):
        self._words: Tuple[str, ...] = tuple(sorted(set(words)))
        self._length_counts = Counter(len(word) for word in self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return word in self._words

    def count_words_of_length(self, length: int) -> int:
        """Number of words with exactly `length` characters (0 if none)."""
        return self._length_counts.get(length, 0)

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        """All words with exactly `length` characters, in sorted order."""
        return tuple(word for word in self._words if len(word) == length)

    def lengths(self) -> List[int]:
        return sorted(self._length_counts)
