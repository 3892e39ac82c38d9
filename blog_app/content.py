# ABOUTME: Handles post body rendering from Markdown and plain-text summary extraction.
# ABOUTME: Used for displaying community content safely and deriving post teasers.

import markdown
from bs4 import BeautifulSoup
from markupsafe import Markup

UNSAFE_TAGS = ["script", "style", "iframe", "object", "embed", "form"]
UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")
URL_ATTRIBUTES = {"href", "src", "xlink:href", "action", "formaction", "poster", "background"}


def _is_unsafe_url(value: str) -> bool:
    """Checks the scheme the way browsers read it, ignoring whitespace and control characters."""
    compact = ''.join(ch for ch in value if ord(ch) > 32 and ord(ch) != 127)
    return compact.lower().startswith(UNSAFE_URL_SCHEMES)


def _clean_html(html: str) -> BeautifulSoup:
    """Parses HTML with lxml and strips elements and attributes that can run code."""
    soup = BeautifulSoup(html, 'lxml')
    for element in soup(UNSAFE_TAGS):
        element.decompose()

    for tag in soup.find_all(True):
        for attr in list(tag.attrs):
            name = attr.lower()
            if name.startswith('on'):
                del tag.attrs[attr]
            elif name in URL_ATTRIBUTES or name.endswith(':href'):
                value = tag.attrs[attr]
                if isinstance(value, str) and _is_unsafe_url(value):
                    del tag.attrs[attr]
    return soup


def render_content(text: str | None) -> Markup:
    """Converts a Markdown post body to sanitized HTML ready for the template."""
    if not text:
        return Markup('')

    soup = _clean_html(markdown.markdown(text))
    body = soup.find('body')
    if body is None:
        return Markup('')
    return Markup(body.decode_contents())


def summarize(text: str | None, limit: int = 150) -> str:
    """Returns the plain text of a Markdown body, cut to `limit` characters."""
    if not text:
        return ''

    soup = _clean_html(markdown.markdown(text))
    plain = soup.get_text(separator=' ', strip=True)
    plain = ' '.join(plain.split())

    if len(plain) > limit:
        plain = plain[:limit].rstrip() + '...'
    return plain
