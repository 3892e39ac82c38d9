# ABOUTME: Contains all Flask route handlers for the application.
# ABOUTME: Handles post listing, tag/search filtering, post pages and community submissions.

import os
import logging
from datetime import datetime
from flask import Flask, request, render_template, flash, redirect, url_for
from config import Config
from content import render_content
from helpers import load_builtin_posts, load_user_posts, save_user_posts
from posts import (
    build_user_post,
    filter_by_tag,
    find_post,
    get_all_tags,
    get_blog_stats,
    merge_posts,
    related_posts,
    search_posts,
    sort_by_date,
    validate_submission,
)

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# Initialize Flask app
app = Flask(__name__)

# Configure Flask app
app.secret_key = Config.FLASK_SECRET_KEY or os.urandom(24)
app.config['POSTS_FILE'] = Config.POSTS_FILE
app.config['USER_POSTS_FILE'] = Config.USER_POSTS_FILE

CREATE_POST_DESCRIPTION = "Share your knowledge about air quality and water filtration with our community."


def get_builtin_posts():
    return load_builtin_posts(app.config['POSTS_FILE'])


def get_user_posts():
    return load_user_posts(app.config['USER_POSTS_FILE'])


def render_post_list(posts, heading, description, selected_tag=None, search_query=''):
    builtin, user = get_builtin_posts(), get_user_posts()
    return render_template(
        'index.html',
        title=heading,
        description=description,
        posts=posts,
        stats=get_blog_stats(builtin, user, Config.OFFICIAL_AUTHOR),
        all_tags=get_all_tags(merge_posts(builtin, user)),
        selected_tag=selected_tag,
        search_query=search_query,
    )


def render_create_form(error=None, form=None, status=200):
    return render_template(
        'create-post.html',
        title=Config.page_title("Create a New Post"),
        description=CREATE_POST_DESCRIPTION,
        error=error,
        form=form or {},
    ), status


def _form_value(value):
    """Text to echo back into the form; JSON bodies may carry lists or other types."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ', '.join(item for item in value if isinstance(item, str))
    return ''


@app.context_processor
def inject_globals():
    return {'current_year': datetime.now().year, 'site_name': Config.SITE_NAME}


@app.route('/', methods=['GET'])
def index():
    """Lists every post, newest first, optionally narrowed by ?tag= and ?search=."""
    posts = sort_by_date(merge_posts(get_builtin_posts(), get_user_posts()))

    selected_tag = request.args.get('tag') or None
    if selected_tag:
        posts = filter_by_tag(posts, selected_tag)

    search_query = (request.args.get('search') or '').lower()
    if search_query:
        logging.info(f"Searching posts for: {search_query}")
        posts = search_posts(posts, search_query)

    return render_post_list(
        posts,
        Config.page_title("Expert Articles on Air & Water Quality"),
        "Read expert articles about clean air, water filtration, and healthy living solutions.",
        selected_tag=selected_tag,
        search_query=search_query,
    )


@app.route('/create-post', methods=['GET'])
def create_post_form():
    return render_create_form()


@app.route('/create-post', methods=['POST'])
def create_post():
    """Validates a community submission, stores it and redirects to its page."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = request.form

    title = data.get('title') or ''
    author = data.get('author') or ''
    content = data.get('content') or ''
    tags = data.get('tags') or ''
    form = {'title': _form_value(title), 'author': _form_value(author),
            'content': _form_value(content), 'tags': _form_value(tags)}

    error = validate_submission(title, author, content, tags)
    if error:
        logging.warning(f"Rejected post submission: {error}")
        return render_create_form(error=error, form=form, status=400)

    user_posts = get_user_posts()
    existing_slugs = [post.get('slug') for post in merge_posts(get_builtin_posts(), user_posts)]
    new_post = build_user_post(title, author, content, tags, existing_slugs, Config.SUMMARY_LENGTH)

    user_posts.insert(0, new_post)
    try:
        save_user_posts(app.config['USER_POSTS_FILE'], user_posts)
    except OSError as e:
        logging.error(f"Failed to save user post '{new_post['slug']}': {e}", exc_info=True)
        return render_create_form(
            error="Your post could not be saved. Please try again later.", form=form, status=500
        )

    logging.info(f"Created user post '{new_post['slug']}' by {new_post['author']}")
    flash("Your post has been published!", "success")
    return redirect(url_for('show_post', slug=new_post['slug']))


@app.route('/post/<slug>')
def show_post(slug):
    builtin, user = get_builtin_posts(), get_user_posts()
    post = find_post(builtin, user, slug)

    if post is None:
        logging.warning(f"Post not found: {slug}")
        return render_template(
            '404.html',
            title=Config.page_title("Post Not Found"),
            description="The article you're looking for doesn't exist.",
            requested_slug=slug,
        ), 404

    return render_template(
        'post.html',
        title=Config.page_title(post.get('title', '')),
        description=post.get('summary', ''),
        post=post,
        content_html=render_content(post.get('content')),
        related_posts=related_posts(post, merge_posts(builtin, user), Config.RELATED_POSTS_LIMIT),
    )


@app.route('/user-posts')
def user_posts():
    return render_template(
        'user-posts.html',
        title=Config.page_title("Community Posts"),
        description="Read posts shared by our community members.",
        posts=get_user_posts(),
    )


@app.route('/tag/<tag>')
def posts_by_tag(tag):
    posts = sort_by_date(filter_by_tag(merge_posts(get_builtin_posts(), get_user_posts()), tag))
    return render_post_list(
        posts,
        Config.page_title(f'Posts Tagged with "{tag}"'),
        f"All articles tagged with {tag}",
        selected_tag=tag,
    )


@app.route('/about')
def about():
    return render_template(
        'about.html',
        title=f"About {Config.SITE_NAME} | Community for Healthy Living",
        description="Learn about our mission to promote clean air and water quality.",
        stats=get_blog_stats(get_builtin_posts(), get_user_posts(), Config.OFFICIAL_AUTHOR),
    )


@app.route('/health')
def health_check():
    return "OK", 200


@app.errorhandler(404)
def page_not_found(e):
    return render_template(
        '404.html',
        title=Config.page_title("Page Not Found"),
        description="The page you're looking for doesn't exist.",
    ), 404
