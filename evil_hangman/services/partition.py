"""
Word Family Partitioning

Splits the live words by the pattern each would produce for a guessed
letter and orders the resulting families from most to least adversarial.
"""

from typing import Dict, Iterable, List, Tuple

from ..models.game import WordFamily


def reveal(word: str, pattern: str, letter: str) -> str:
    """
    Pattern `word` would produce if `letter` were guessed now.

    Every position holding `letter` is revealed; all other positions keep
    what `pattern` already shows.
    """
    return ''.join(letter if char == letter else shown
                   for char, shown in zip(word, pattern))


def partition(live_words: Iterable[str], pattern: str, letter: str) -> Dict[str, WordFamily]:
    """
    Group the live words by the pattern the guess would produce.

    Args:
        live_words: Words still consistent with the round so far
        pattern: Current revealed pattern
        letter: Letter being guessed (not guessed before)

    Returns:
        Dict mapping each resulting pattern to its family, keyed in pattern
        order. Families are disjoint and together hold every live word.
    """
    groups: Dict[str, List[str]] = {}
    for word in live_words:
        groups.setdefault(reveal(word, pattern, letter), []).append(word)

    return {key: WordFamily(key, tuple(groups[key])) for key in sorted(groups)}


def family_rank_key(size: int, placeholders: int, pattern: str) -> Tuple[int, int, str]:
    """
    Sort key placing the most adversarial family first.

    Larger families first, then patterns hiding more positions, then the
    lexicographically smaller pattern.
    """
    return -size, -placeholders, pattern


def rank_families(families: Iterable[WordFamily]) -> List[WordFamily]:
    """Families ordered most adversarial first."""
    return sorted(
        families,
        key=lambda family: family_rank_key(family.size,
                                           family.placeholders,
                                           family.pattern)
    )
