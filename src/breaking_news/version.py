"""Version information for the package."""

__version__ = "0.1.0"


def get_version_string() -> str:
    """Get the display version string.

    Returns:
        Version string like 'breaking-news 0.1.0'.
    """
    return f"breaking-news {__version__}"
