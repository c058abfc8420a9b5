"""Parse article stubs from an author listing page."""

import logging
import re
from typing import Optional
from urllib.parse import urljoin

from lxml import html as lxml_html

from common.datetime import parse_datetime
from scrape_articles.models import ArticleStub

logger = logging.getLogger(__name__)

ITEM_SELECTOR = ".item"
HEADLINE_SELECTOR = "h2 a"
DATE_SELECTOR = ".author-date span"
SUMMARY_SELECTOR = "div.excerpt p.small"

DATE_SEPARATOR_PATTERN = re.compile(r"^/\s*")


def _first_text(element, selector: str) -> Optional[str]:
    matches = element.cssselect(selector)
    if not matches:
        return None
    return matches[0].text_content().strip()


def _first_attr(element, selector: str, attr: str) -> Optional[str]:
    matches = element.cssselect(selector)
    if not matches:
        return None
    value = matches[0].get(attr)
    return value.strip() if value is not None else None


def parse_listing_date(text: Optional[str]) -> Optional[str]:
    """Strip the leading "/ " separator from a listing date label."""
    if text is None:
        return None
    return DATE_SEPARATOR_PATTERN.sub("", text.strip())


def parse_listing_item(item, base_url: str) -> ArticleStub:
    """Build an ArticleStub from one listing item element.

    Missing fields are tolerated: headline and link become None, summary
    becomes an empty string and an unparseable date becomes None.
    """
    href = _first_attr(item, HEADLINE_SELECTOR, "href")
    link = urljoin(base_url, href) if href else None

    date_text = parse_listing_date(_first_text(item, DATE_SELECTOR))
    date = parse_datetime(date_text)
    if date is None:
        logger.warning("Could not parse listing date %r for %s", date_text, link)

    return ArticleStub(
        headline=_first_text(item, HEADLINE_SELECTOR),
        link=link,
        date=date,
        summary=_first_text(item, SUMMARY_SELECTOR) or "",
    )


def parse_listing(page_html: str, base_url: str) -> list[ArticleStub]:
    """Return one ArticleStub per listing item, in document order."""
    if not page_html.strip():
        return []
    tree = lxml_html.fromstring(page_html)
    return [parse_listing_item(item, base_url) for item in tree.cssselect(ITEM_SELECTOR)]
