"""Extract media and body text from a loaded article page.

Every extractor here returns a default instead of raising, so a malformed
page degrades to empty fields rather than failing the article.
"""

import logging

from lxml import etree, html as lxml_html

from scrape_articles.helpers import strip_dateline
from scrape_articles.models import PageContent

logger = logging.getLogger(__name__)

FEATURED_IMAGE_SELECTOR = "figure.featured-image img"
BODY_PARAGRAPH_SELECTOR = ".article-content p"
PLACEHOLDER_IMAGE = "placeholder.png"


def parse_document(page_html: str):
    """Parse page HTML, returning None when it is empty or unparseable."""
    if not page_html or not page_html.strip():
        return None
    try:
        return lxml_html.fromstring(page_html)
    except (etree.ParserError, ValueError) as e:
        logger.warning("Failed to parse article page: %s", e)
        return None


def extract_media(doc) -> str:
    """Return the featured image URL, or "" if missing or a placeholder."""
    if doc is None:
        return ""

    images = doc.cssselect(FEATURED_IMAGE_SELECTOR)
    if not images:
        logger.warning("No featured image found")
        return ""

    src = (images[0].get("src") or "").strip()
    if PLACEHOLDER_IMAGE in src:
        return ""
    return src


def extract_body(doc) -> str:
    """Join the content paragraphs with blank lines and strip the dateline."""
    if doc is None:
        return ""

    paragraphs = [p.text_content().strip() for p in doc.cssselect(BODY_PARAGRAPH_SELECTOR)]
    return strip_dateline("\n\n".join(paragraphs))


def extract_content(page_html: str) -> PageContent:
    """Extract media and cleaned body text from an article page's HTML."""
    doc = parse_document(page_html)
    return PageContent(media=extract_media(doc), body=extract_body(doc))
