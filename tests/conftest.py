import json

import pytest

from routes import app

BUILTIN_POSTS = [
    {
        "title": "Air Filters 101",
        "slug": "air-filters-101",
        "author": "CleanLife Team",
        "summary": "All about HEPA media",
        "content": "HEPA filters trap **fine particles**.",
        "date": "2024-03-01",
        "tags": ["air", "filters"],
    },
    {
        "title": "Water Basics",
        "slug": "water-basics",
        "summary": "Tap water explained",
        "content": "Your tap water report, explained.",
        "date": "2024-01-01",
        "tags": ["water"],
    },
    {
        "title": "Undated Note",
        "slug": "undated-note",
        "summary": "No date here",
        "content": "An editorial note without a date.",
        "tags": [],
    },
]


@pytest.fixture
def builtin_posts():
    return [dict(post) for post in BUILTIN_POSTS]


@pytest.fixture
def posts_file(tmp_path, builtin_posts):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(builtin_posts), encoding="utf-8")
    return str(path)


@pytest.fixture
def user_posts_file(tmp_path):
    return str(tmp_path / "data" / "user-posts.json")


@pytest.fixture
def client(posts_file, user_posts_file):
    app.config.update(TESTING=True, POSTS_FILE=posts_file, USER_POSTS_FILE=user_posts_file)
    with app.test_client() as test_client:
        yield test_client
