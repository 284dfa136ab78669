"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Round defaults and the bundled dictionary
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_DIFFICULTY, DEFAULT_WORD_LENGTH, DEFAULT_WRONG_GUESSES, MAX_WRONG_GUESSES,
    get_word_statistics, load_word_list, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Round settings
    'DEFAULT_DIFFICULTY', 'DEFAULT_WORD_LENGTH', 'DEFAULT_WRONG_GUESSES', 'MAX_WRONG_GUESSES',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics'
]
