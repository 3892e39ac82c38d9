# ABOUTME: Provides JSON file storage for the editorial and community post sets.
# ABOUTME: Used by the route handlers to read bundled posts and read/write user posts.

import os
import json
import logging
import tempfile
from functools import lru_cache

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


@lru_cache(maxsize=None)
def _read_builtin_posts(path):
    with open(path, 'r', encoding='utf-8') as f:
        posts = json.load(f)
    if not isinstance(posts, list):
        raise ValueError(f"Expected a list of posts in {path}, got {type(posts).__name__}")
    logging.info(f"Loaded {len(posts)} built-in posts from {path}")
    return tuple(posts)


def load_builtin_posts(path):
    """Return the bundled editorial posts, reading the file only once per path."""
    return list(_read_builtin_posts(path))


def load_user_posts(path):
    """Read community posts from disk. Any read or parse problem yields an empty list."""
    if not os.path.exists(path):
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            posts = json.load(f)
    except (OSError, ValueError) as e:
        logging.error(f"Error reading user posts from {path}: {e}")
        return []

    if not isinstance(posts, list):
        logging.error(f"User posts file {path} does not contain a list, ignoring it")
        return []

    return posts


def save_user_posts(path, posts):
    """Replace the community posts file with the given list.

    The JSON is written to a temporary file next to the target and moved into
    place, so a failed write leaves the previous file untouched.
    """
    directory = os.path.dirname(path) or '.'
    os.makedirs(directory, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(dir=directory, prefix='.user-posts-', suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(posts, f, ensure_ascii=False, indent=2)
        os.replace(temp_path, path)
    except BaseException:
        # Clean up the partial temp file, then let the caller see the error
        try:
            os.remove(temp_path)
        except OSError as e:
            logging.warning(f"Could not remove temporary file {temp_path}: {e}")
        raise

    logging.info(f"Saved {len(posts)} user posts to {path}")
