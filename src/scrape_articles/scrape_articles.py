"""Scrape an author's articles and replace the stored copies for the resource."""

import logging
from functools import partial

from common.db import connect
from common.local_io import save_json_records_local
from scrape_articles.fetch_articles.browser import open_page
from scrape_articles.fetch_articles.fetch_articles import fetch_articles
from scrape_articles.load_articles.load_articles import (
    ensure_article_table,
    insert_article,
    purge_articles,
)
from scrape_articles.models import ArticleRecord, ScrapeConfig

logger = logging.getLogger(__name__)


def scrape_articles(config: ScrapeConfig) -> list[ArticleRecord]:
    """
    Run one scrape: purge old rows, fetch and insert articles, write snapshot.

    The browser and database connection are released on every exit path.
    Connection and listing-page failures propagate to the caller.

    Returns:
        All articles found on the listing page, including partial ones.
    """
    with connect() as conn:
        if config.create_table:
            ensure_article_table(conn)

        purge_articles(conn, config.resource)

        with open_page(headless=config.headless) as page:
            articles = fetch_articles(page, config, save=partial(insert_article, conn))
            save_json_records_local(articles, config.snapshot_path)

    logger.info("Scraped %d articles for %s", len(articles), config.resource)
    return articles
