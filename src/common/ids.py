"""Identifier utilities."""

import uuid
from string import ascii_lowercase


def generate_article_id() -> str:
    """Generate a new, never reused article ID."""
    return uuid.uuid4().hex


def slug_suffix(index: int) -> str:
    """Convert a zero-based index to a letter suffix: a..z, aa, ab, ..."""
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")

    letters = []
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters.append(ascii_lowercase[remainder])
    return "".join(reversed(letters))


def generate_slug(prefix: str, index: int) -> str:
    """Build the run-scoped slug for the `index`-th article, e.g. `news-a`."""
    return f"{prefix}-{slug_suffix(index)}"
