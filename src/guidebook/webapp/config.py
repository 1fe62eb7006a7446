"""Flask configuration."""

import os
from pathlib import Path

from ..preferences import DEFAULT_THEME, THEME_COOKIE


class Config:
    """Base configuration."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-change-in-prod")

    # Guides - directory is at project root
    PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
    GUIDES_PATH = Path(os.environ.get("GUIDEBOOK_GUIDES_PATH", PROJECT_ROOT / "guides"))
    GUIDE_INDEX_FILE = os.environ.get("GUIDEBOOK_INDEX_FILE") or None

    # Display preference
    DEFAULT_THEME = os.environ.get("GUIDEBOOK_DEFAULT_THEME", DEFAULT_THEME)
    THEME_COOKIE = THEME_COOKIE
    THEME_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # one year


class TestConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEFAULT_THEME = DEFAULT_THEME
