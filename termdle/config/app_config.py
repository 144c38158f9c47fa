"""
Configuration Management Module

Runtime settings for the terminal game. Values are loaded from environment
variables (optionally through a .env file) with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from an optional .env file
load_dotenv()

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class with all settings."""

    # Game Settings
    DEBUG = os.getenv('TERMDLE_DEBUG', 'False').lower() == 'true'
    WORD_LIST_PATH = os.getenv('TERMDLE_WORD_LIST', os.path.join(_CONFIG_DIR, 'words.txt'))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Return the configuration class selected by name or TERMDLE_ENV."""
    name = name or os.getenv('TERMDLE_ENV', 'default')
    return config.get(name, config['default'])
