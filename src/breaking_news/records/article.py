"""News article record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """A news article with a headline and a dateline location."""

    headline: str
    location: str
    author: str
    content: str

    def summarize(self) -> str:
        """Summarize as ``<headline> by <author> (<location>)``.

        The article body is left out of the summary.
        """
        return f"{self.headline} by {self.author} ({self.location})"
