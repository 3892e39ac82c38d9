# ABOUTME: Post collection logic: merging, sorting, filtering, tags, stats and slugs.
# ABOUTME: Also validates and builds community submissions before they are stored.

import re
import logging
from datetime import datetime, timezone

from content import summarize

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 20


def generate_slug(title: str) -> str:
    """Turns a title into a URL-safe identifier, e.g. 'Clean Air 101!' -> 'clean-air-101'."""
    slug = title.lower().strip()
    slug = re.sub(r'[^\w\s-]', '', slug, flags=re.ASCII)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug


def unique_slug(title: str, existing) -> str:
    """Like generate_slug, but never empty and never equal to a slug in `existing`."""
    base = generate_slug(title) or 'post'
    taken = set(existing)
    slug = base
    counter = 2
    while slug in taken:
        slug = f"{base}-{counter}"
        counter += 1
    return slug


def parse_date(value) -> datetime:
    """Parses an ISO date or datetime; missing or malformed values become the epoch."""
    if not value or not isinstance(value, str):
        return EPOCH
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logging.warning(f"Unparseable post date: {value!r}")
        return EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def merge_posts(builtin, user):
    return list(builtin) + list(user)


def sort_by_date(posts):
    return sorted(posts, key=lambda post: parse_date(post.get('date')), reverse=True)


def filter_by_tag(posts, tag):
    return [post for post in posts if tag in (post.get('tags') or [])]


def search_posts(posts, query):
    """Case-insensitive substring match on title, summary and author."""
    needle = (query or '').lower()
    if not needle:
        return list(posts)

    results = []
    for post in posts:
        fields = (post.get('title'), post.get('summary'), post.get('author'))
        if any(field and needle in field.lower() for field in fields):
            results.append(post)
    return results


def get_all_tags(posts):
    tags = set()
    for post in posts:
        tags.update(post.get('tags') or [])
    return sorted(tags)


def get_blog_stats(builtin, user, official_author='CleanLife'):
    """Counts posts, authors and tags across both collections.

    Every editorial post is credited to the single official author, whatever
    its own author field says. Community posts count by their author.
    """
    authors = set()
    if builtin:
        authors.add(official_author)
    authors.update(post.get('author') for post in user)

    return {
        'total_posts': len(builtin) + len(user),
        'official_posts': len(builtin),
        'community_posts': len(user),
        'unique_authors': len(authors),
        'total_tags': len(get_all_tags(merge_posts(builtin, user))),
    }


def find_post(builtin, user, slug):
    """Looks a slug up in the editorial set first, then in the community set."""
    for collection in (builtin, user):
        for post in collection:
            if post.get('slug') == slug:
                return post
    return None


def related_posts(post, posts, limit=3):
    tags = set(post.get('tags') or [])
    if not tags:
        return []

    related = [
        other for other in posts
        if other.get('slug') != post.get('slug') and tags.intersection(other.get('tags') or [])
    ]
    return related[:limit]


def parse_tags(raw):
    """Splits a comma separated tag string into trimmed, lower-case tags."""
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        raw = ','.join(item for item in raw if isinstance(item, str))
    return [tag.strip().lower() for tag in raw.split(',') if tag.strip()]


def _is_tag_input(tags):
    if tags is None or isinstance(tags, str):
        return True
    return isinstance(tags, (list, tuple)) and all(isinstance(tag, str) for tag in tags)


def validate_submission(title, author, content, tags=None) -> str | None:
    """Returns a message describing the first problem with a submission, or None."""
    fields = (title, author, content)
    if any(field is not None and not isinstance(field, str) for field in fields):
        return "Title, author and content must be text."
    if not _is_tag_input(tags):
        return "Tags must be a comma separated list."

    title, author, content = ((field or '').strip() for field in fields)

    if not title or not author or not content:
        return "All fields are required!"
    if len(title) < TITLE_MIN_LENGTH or len(title) > TITLE_MAX_LENGTH:
        return f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters."
    if len(content) < CONTENT_MIN_LENGTH:
        return f"Content must be at least {CONTENT_MIN_LENGTH} characters long."
    return None


def utc_timestamp(now=None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


def build_user_post(title, author, content, tags, existing_slugs, summary_length=150, now=None):
    title = title.strip()
    content = content.strip()
    return {
        'title': title,
        'slug': unique_slug(title, existing_slugs),
        'author': author.strip(),
        'summary': summarize(content, summary_length),
        'content': content,
        'date': utc_timestamp(now),
        'tags': parse_tags(tags),
        'isUserPost': True,
    }
