"""Data models for scrape_articles pipeline stage."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ScrapeConfig:
    """Run parameters loaded from configs/<name>.yaml."""
    listing_url: str
    resource: str
    author: str
    slug_prefix: str
    snapshot_path: str = "articles.json"
    page_timeout_ms: int = 6000
    settle_ms: int = 1000
    max_attempts: int = 3
    headless: bool = True
    create_table: bool = False


@dataclass
class ArticleStub:
    """Partial article read from one item of the listing page."""
    headline: Optional[str]
    link: Optional[str]
    date: Optional[datetime]
    summary: str


@dataclass
class PageContent:
    """Media and body text extracted from a loaded article page."""
    media: str
    body: str


@dataclass
class ArticleRecord:
    """Article as persisted to the Article table and the snapshot file."""
    id: str
    slug: str
    headline: Optional[str]
    link: Optional[str]
    date: Optional[datetime]
    summary: str
    body: str
    author: str
    resource: str
    media: str
