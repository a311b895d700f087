"""Summarizable records."""

from .article import Article
from .base import Summary
from .post import ShortPost

__all__ = [
    "Article",
    "RECORD_TYPES",
    "ShortPost",
    "Summary",
    "is_summarizable",
]

# Concrete records shipped with the package
RECORD_TYPES: tuple[type[Summary], ...] = (
    Article,
    ShortPost,
)


def is_summarizable(value: object) -> bool:
    """Check whether a value offers the Summary capability.

    Args:
        value: Any object.

    Returns:
        True if the value has a ``summarize`` method, False otherwise.
    """
    return isinstance(value, Summary)
