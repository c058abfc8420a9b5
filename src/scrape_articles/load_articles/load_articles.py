"""Write scraped articles to the Article table in PostgreSQL."""

import logging

from psycopg2.extensions import connection as Connection

from common.db import transaction
from scrape_articles.models import ArticleRecord

logger = logging.getLogger(__name__)

ARTICLE_COLUMNS = (
    "id",
    "slug",
    "headline",
    "summary",
    "body",
    "author",
    "resource",
    "media",
    "link",
    "date",
)

INSERT_ARTICLE_SQL = (
    f'INSERT INTO "Article" ({", ".join(ARTICLE_COLUMNS)}) '
    f'VALUES ({", ".join(["%s"] * len(ARTICLE_COLUMNS))})'
)

DELETE_ARTICLES_SQL = 'DELETE FROM "Article" WHERE resource = %s'


def ensure_article_table(conn: Connection) -> None:
    """Create the Article table if it doesn't exist."""
    with transaction(conn) as cur:
        cur.execute("""
            CREATE TABLE IF NOT EXISTS "Article" (
                id TEXT PRIMARY KEY,
                slug TEXT NOT NULL,
                headline TEXT,
                summary TEXT NOT NULL DEFAULT '',
                body TEXT NOT NULL DEFAULT '',
                author TEXT NOT NULL,
                resource TEXT NOT NULL,
                media TEXT NOT NULL DEFAULT '',
                link TEXT,
                date TIMESTAMP WITH TIME ZONE
            )
        """)


def article_params(article: ArticleRecord) -> tuple:
    """Map an ArticleRecord to INSERT parameters, in ARTICLE_COLUMNS order."""
    return (
        article.id,
        article.slug,
        article.headline,
        article.summary or "",
        article.body or "",
        article.author,
        article.resource,
        article.media,
        article.link,
        article.date,
    )


def purge_articles(conn: Connection, resource: str) -> int:
    """Delete every stored article for `resource`. Returns the rows deleted."""
    with transaction(conn) as cur:
        cur.execute(DELETE_ARTICLES_SQL, (resource,))
        deleted = cur.rowcount

    logger.info('Deleted %d existing articles with resource "%s"', deleted, resource)
    return deleted


def insert_article(conn: Connection, article: ArticleRecord) -> None:
    """Insert one article as a new row.

    There is no upsert: a duplicate id fails the insert and the transaction
    is rolled back before the error propagates.
    """
    with transaction(conn) as cur:
        cur.execute(INSERT_ARTICLE_SQL, article_params(article))
