"""Base protocol for summarizable records."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Summary(Protocol):
    """Protocol for anything that can produce a one-line summary.

    Records don't inherit from Summary - they only need a ``summarize``
    method. The @runtime_checkable decorator allows isinstance() checks.
    """

    def summarize(self) -> str:
        """Build a short textual digest of the record.

        Returns:
            The summary text. Never fails and has no side effects.
        """
        ...
