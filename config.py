"""
config.py - Application configuration

Everything is read from environment variables (optionally from a .env file
next to the app) with defaults good enough for local play.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'bulls-cows-word-secret-2024')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    # Seed for the secret-word RNG; unset means a fresh random secret every round
    SECRET_SEED = _optional_int('SECRET_SEED')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR') or None


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = True
    SECRET_KEY = 'testing'
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}


def get_config(name=None):
    """
    Look up a config class by name ('development', 'production', 'testing').
    None or '' gives the default; anything else unknown is a ValueError.
    """
    if not name:
        return config['default']
    try:
        return config[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown APP_ENV '{name}'. Expected one of: {', '.join(sorted(config))}"
        ) from None
