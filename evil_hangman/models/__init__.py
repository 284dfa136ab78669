"""
Data Models Package

Contains all data models used throughout the application.
"""

from .dictionary import Dictionary
from .game import (
    PLACEHOLDER, Difficulty, GuessResult, HangmanGameState, RoundState,
    RoundStatus, WordFamily, count_placeholders
)

__all__ = [
    'Dictionary', 'PLACEHOLDER', 'Difficulty', 'GuessResult', 'HangmanGameState',
    'RoundState', 'RoundStatus', 'WordFamily', 'count_placeholders'
]
