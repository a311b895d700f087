"""Demo entry point announcing a few sample records."""

import structlog

from .announce import announce, make_summarizable
from .config import get_config
from .logging import configure_logging
from .records import RECORD_TYPES, Article, ShortPost, Summary
from .version import get_version_string

log = structlog.get_logger()


def sample_records() -> list[Summary]:
    """Build the records announced by the demo, in order."""
    return [
        Article(
            headline="Penguins win the Stanley Cup Championship!",
            location="Pittsburgh, PA, USA",
            author="Iceburgh",
            content=(
                "The Pittsburgh Penguins once again are the best "
                "hockey team in the NHL."
            ),
        ),
        ShortPost(
            author="horse_ebooks",
            content="of course, as your probably already know, people",
            is_reply=False,
            is_retweet=False,
        ),
        make_summarizable(),
    ]


def main() -> None:
    """Announce the sample records on stdout."""
    config = get_config()
    configure_logging(json_output=config.json_logging, level=config.log_level)
    log.info(
        "demo_started",
        version=get_version_string(),
        record_types=[record_type.__name__ for record_type in RECORD_TYPES],
    )

    records = sample_records()
    for record in records:
        announce(record)

    log.info("demo_finished", count=len(records))


if __name__ == "__main__":
    main()
