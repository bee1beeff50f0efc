"""
Configuration Module for Studio.
Centralizes all app settings with environment variable support.
"""

import hashlib
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration with sensible defaults."""

    # Paths
    BASE_DIR = Path(__file__).parent.parent
    DATA_DIR = Path(os.getenv('STUDIO_DATA_DIR', BASE_DIR / 'data'))
    DATABASE_PATH = Path(os.getenv('STUDIO_DATABASE_PATH', DATA_DIR / 'studio.db'))

    # Flask — stable fallback key derived from the DB path so it survives restarts
    _fallback_key = hashlib.sha256(
        f'studio-secret-{DATABASE_PATH}'.encode()
    ).hexdigest()
    SECRET_KEY = os.getenv('SECRET_KEY', _fallback_key)
    DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'

    # Database
    SQLALCHEMY_DATABASE_URI = f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server
    HOST = os.getenv('STUDIO_HOST', '0.0.0.0')
    PORT = int(os.getenv('STUDIO_PORT', '5001'))
    BASE_URL = os.getenv('STUDIO_BASE_URL', '')

    # Rate limits
    SIGNUP_RATE_LIMIT = os.getenv('STUDIO_SIGNUP_RATE_LIMIT', '3 per minute')
    LOGIN_RATE_LIMIT = os.getenv('STUDIO_LOGIN_RATE_LIMIT', '5 per minute')
    LIKE_RATE_LIMIT = os.getenv('STUDIO_LIKE_RATE_LIMIT', '60 per minute')

    # Content rules
    PROJECT_TYPES = ('video', 'song', 'album-cover')
    TITLE_MAX_LENGTH = 200
    DESCRIPTION_MAX_LENGTH = 1000

    @classmethod
    def ensure_dirs(cls):
        """Ensure required directories exist."""
        if cls.SQLALCHEMY_DATABASE_URI.startswith('sqlite:///'):
            Path(cls.DATABASE_PATH).parent.mkdir(parents=True, exist_ok=True)


# Create default instance
config = Config()
