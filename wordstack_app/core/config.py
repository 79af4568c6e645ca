# File: wordstack_app/core/config.py
# Core Infrastructure Layer: application configuration

import os
from dotenv import load_dotenv

load_dotenv()

# This file lives in wordstack_app/core/, the project root is two levels up.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "wordstack.db")


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """WordStack application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Generation client
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
    # Comma separated list, tried in order.
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.0-flash-lite-001')

    # Vocabulary deck
    WORD_DEFAULT_LANGUAGE = os.environ.get('WORD_DEFAULT_LANGUAGE', 'en-US')
    SENTENCES_PER_WORD = int(os.environ.get('SENTENCES_PER_WORD', 5))
    WORD_DETAILS_ENABLED = _env_bool('WORD_DETAILS_ENABLED', True)
    LEARNER_LANGUAGE = os.environ.get('LEARNER_LANGUAGE', 'Portuguese')

    # Listening exercise
    LISTENING_MAX_CHARS = int(os.environ.get('LISTENING_MAX_CHARS', 300))
    LISTENING_QUESTION_COUNT = 3

    # HTTP
    API_URL_PREFIX = os.environ.get('API_URL_PREFIX', '/api')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = _env_bool('LOG_JSON', False)

    @classmethod
    def init_app(cls, app):
        """Create the directories the configuration points to."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
