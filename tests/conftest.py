"""Shared pytest fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def log_events():
    """Capture structlog events so nothing is rendered to stdout."""
    structlog.reset_defaults()
    with structlog.testing.capture_logs() as events:
        yield events
    structlog.reset_defaults()


@pytest.fixture
def sample_article():
    """Create a sample Article for testing."""
    from breaking_news.records import Article

    return Article(
        headline="Penguins win the Stanley Cup Championship!",
        location="Pittsburgh, PA, USA",
        author="Iceburgh",
        content="The Pittsburgh Penguins once again are the best hockey team in the NHL.",
    )


@pytest.fixture
def sample_post():
    """Create a sample ShortPost for testing."""
    from breaking_news.records import ShortPost

    return ShortPost(
        author="horse_ebooks",
        content="of course, as your probably already know, people",
        is_reply=False,
        is_retweet=False,
    )


@pytest.fixture
def fresh_config():
    """Clear the config singleton before and after a test."""
    import breaking_news.config as config_module

    config_module._config_instance = None
    yield
    config_module._config_instance = None
