"""Breaking-news announcements for summarizable records."""

from .announce import ANNOUNCE_PREFIX, announce, make_summarizable
from .records import Article, ShortPost, Summary, is_summarizable
from .version import __version__

__all__ = [
    "ANNOUNCE_PREFIX",
    "Article",
    "ShortPost",
    "Summary",
    "__version__",
    "announce",
    "is_summarizable",
    "make_summarizable",
]
