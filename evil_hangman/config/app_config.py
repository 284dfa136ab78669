"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(name):
    value = os.getenv(name)
    return int(value) if value not in (None, '') else None


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Engine Settings
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH')
    ENGINE_DEBUG = os.getenv('ENGINE_DEBUG', 'False').lower() == 'true'
    RANDOM_SEED = _optional_int('RANDOM_SEED')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    RANDOM_SEED = 0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
