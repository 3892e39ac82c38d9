# ABOUTME: Loads environment variables from .env and system for config.
# ABOUTME: Holds server settings, data file locations and blog display options.

import os
from dotenv import load_dotenv

load_dotenv()  # Loads .env if present (local dev)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    FLASK_SECRET_KEY = os.environ.get("FLASK_SECRET_KEY")
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))
    FLASK_DEBUG = _env_bool("FLASK_DEBUG")

    # Editorial posts ship with the app; community posts are written at runtime
    POSTS_FILE = os.environ.get("POSTS_FILE", os.path.join(DATA_DIR, "posts.json"))
    USER_POSTS_FILE = os.environ.get("USER_POSTS_FILE", os.path.join(DATA_DIR, "user-posts.json"))

    SITE_NAME = os.environ.get("SITE_NAME", "CleanLife Blog")
    OFFICIAL_AUTHOR = os.environ.get("OFFICIAL_AUTHOR", "CleanLife")
    SUMMARY_LENGTH = int(os.environ.get("SUMMARY_LENGTH", "150"))
    RELATED_POSTS_LIMIT = int(os.environ.get("RELATED_POSTS_LIMIT", "3"))

    @classmethod
    def page_title(cls, heading):
        """Build a <title> value with the site name appended."""
        return f"{heading} | {cls.SITE_NAME}"

# Usage: from config import Config; Config.USER_POSTS_FILE
