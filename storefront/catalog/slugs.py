"""Slug derivation for brand and category names.

Slugs are never stored. A link is built by slugifying the display name,
and a query-string filter is matched by slugifying every candidate name
and comparing tokens. Two names that fold to the same token cannot be
told apart.
"""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Derive a URL token from a display name.

    Lower-cases the name and replaces each whitespace run with a single
    hyphen. Empty or blank names are not guarded against.

    Args:
        name: Display name (e.g. "Toggle Clamps").

    Returns:
        Slug token (e.g. "toggle-clamps").
    """
    return _WHITESPACE_RUN.sub("-", name.lower())


def matches_slug(name: str | None, token: str) -> bool:
    """Check whether a display name derives the given token.

    Args:
        name: Display name, or None for a missing association.
        token: Slug from the query string.

    Returns:
        True if the name slugifies to the (lower-cased) token.
    """
    if name is None:
        return False
    return slugify(name) == token.lower()
