"""
Services Package

Contains the hangman engine and the services built on it.
"""

from .difficulty import grants_mercy, select_family
from .game_service import GameService, get_game_service, initialize_game_service
from .hangman_engine import HangmanEngine
from .partition import family_rank_key, partition, rank_families
from .round_transition import advance_round

__all__ = [
    'HangmanEngine', 'advance_round',
    'partition', 'rank_families', 'family_rank_key',
    'select_family', 'grants_mercy',
    'GameService', 'get_game_service', 'initialize_game_service'
]
