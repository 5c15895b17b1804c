"""Unique slugs for vacations."""

from collections.abc import Collection

from bizhub.domain.products import generate_slug


def unique_slug(name: str, taken: Collection[str]) -> str:
    """
    Slug a vacation name, numbering it when the plain slug is in use.

    Example:
        unique_slug("Beach Week", {"beach-week"}) == "beach-week-2"
    """
    base = generate_slug(name) or "vacation"
    if base not in taken:
        return base
    counter = 2
    while f"{base}-{counter}" in taken:
        counter += 1
    return f"{base}-{counter}"
