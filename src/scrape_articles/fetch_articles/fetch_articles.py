"""Fetch the listing page and every article it links to."""

import logging
from typing import Callable

from playwright.sync_api import Page

from common.ids import generate_article_id, generate_slug
from scrape_articles.fetch_articles.browser import load_html
from scrape_articles.fetch_articles.extract import extract_content
from scrape_articles.fetch_articles.listing import parse_listing
from scrape_articles.helpers import format_body, summarize_body
from scrape_articles.models import ArticleRecord, ArticleStub, PageContent, ScrapeConfig

logger = logging.getLogger(__name__)

SaveArticle = Callable[[ArticleRecord], None]


def build_articles(stubs: list[ArticleStub], config: ScrapeConfig) -> list[ArticleRecord]:
    """Turn listing stubs into records with fresh ids and run-scoped slugs."""
    articles = []
    for index, stub in enumerate(stubs):
        articles.append(
            ArticleRecord(
                id=generate_article_id(),
                slug=generate_slug(config.slug_prefix, index),
                headline=stub.headline,
                link=stub.link,
                date=stub.date,
                summary=stub.summary,
                body="",
                author=config.author,
                resource=config.resource,
                media="",
            )
        )
    return articles


def apply_content(article: ArticleRecord, content: PageContent, resource: str) -> None:
    """Fill media, body and (if missing) summary from the article page."""
    article.media = content.media
    if not article.summary:
        article.summary = summarize_body(content.body)
    article.body = format_body(content.body, article.link, resource)


def visit_article(
    page: Page,
    article: ArticleRecord,
    config: ScrapeConfig,
    save: SaveArticle,
    attempt: int,
) -> bool:
    """Run one navigate, extract and save attempt. Returns True on success."""
    try:
        page_html = load_html(page, article.link, config.page_timeout_ms, config.settle_ms)
    except Exception as e:
        logger.warning(
            "Error loading article: %s, attempt %d: %s", article.headline, attempt, e
        )
        return False

    try:
        apply_content(article, extract_content(page_html), config.resource)
    except Exception as e:
        logger.warning(
            "Error extracting article: %s, attempt %d: %s", article.headline, attempt, e
        )
        return False

    try:
        save(article)
    except Exception as e:
        logger.warning(
            "Error saving article: %s, attempt %d: %s", article.headline, attempt, e
        )
        return False

    return True


def fetch_article(
    page: Page,
    article: ArticleRecord,
    config: ScrapeConfig,
    save: SaveArticle,
) -> bool:
    """
    Visit an article page with bounded retries, saving it once it loads.

    Each attempt re-navigates; there is no delay between attempts. After
    `config.max_attempts` failures the article keeps whatever partial data
    was gathered and is left unsaved.

    Returns:
        True if the article was loaded and saved.
    """
    if not article.link:
        logger.warning("Skipping article without a link: %s", article.headline)
        return False

    logger.info("Visiting article: %s", article.headline)
    for attempt in range(1, config.max_attempts + 1):
        if visit_article(page, article, config, save, attempt):
            logger.info("Collected and saved data for article: %s", article.headline)
            return True

    logger.error(
        "Failed to process article after %d attempts: %s", config.max_attempts, article.link
    )
    return False


def fetch_articles(page: Page, config: ScrapeConfig, save: SaveArticle) -> list[ArticleRecord]:
    """
    Scrape the listing page, then fetch and save each linked article in order.

    A listing page that fails to load is fatal and the error propagates.
    Per-article failures never abort the run; every listing item appears in
    the returned list.

    Args:
        page: Browser page used for all navigation
        config: Run configuration
        save: Called once per successfully loaded article

    Returns:
        One ArticleRecord per listing item, in listing order.
    """
    logger.info("Navigating to listing page: %s", config.listing_url)
    listing_html = load_html(page, config.listing_url, config.page_timeout_ms)
    logger.info("Listing page loaded successfully")

    articles = build_articles(parse_listing(listing_html, config.listing_url), config)
    logger.info("Collected %d headlines and links", len(articles))

    saved = 0
    for article in articles:
        if fetch_article(page, article, config, save):
            saved += 1

    logger.info("Saved %d of %d articles", saved, len(articles))
    return articles
