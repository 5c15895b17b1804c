"""URL slugs for products."""

import re

MAX_SLUG_LENGTH = 45

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def generate_slug(phrase: str) -> str:
    """
    Turn a product name into a URL slug.

    Lower-cases the phrase, drops anything that is not a letter, digit,
    space or hyphen, collapses whitespace, caps the length and joins the
    words with hyphens.

    Example:
        generate_slug("Red  Running Shoes!") == "red-running-shoes"
    """
    slug = _INVALID_CHARS.sub("", phrase.lower())
    slug = _WHITESPACE.sub(" ", slug).strip()
    slug = slug[:MAX_SLUG_LENGTH].strip()
    return _WHITESPACE.sub("-", slug)
