"""CLI for scraping an author's articles into PostgreSQL."""

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from scrape_articles.helpers import load_scrape_config, parse_scrape_articles_args
from scrape_articles.scrape_articles import scrape_articles

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = parse_scrape_articles_args(argv)

    try:
        config = load_scrape_config(args.config)
        logger.info("Scraping %s for %s", config.listing_url, config.resource)
        scrape_articles(config)
    except Exception:
        logger.exception("Scrape failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
