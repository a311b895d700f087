"""Short social post record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShortPost:
    """A short post, e.g. a tweet."""

    author: str  # handle, without the leading "@"
    content: str
    is_reply: bool = False
    is_retweet: bool = False

    def summarize(self) -> str:
        return f"{self.author}: {self.content}"
