"""Headless browser session and page loading."""

import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright

logger = logging.getLogger(__name__)


@contextmanager
def open_page(headless: bool = True) -> Iterator[Page]:
    """Launch Chromium and yield a single page; the browser is always closed."""
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        logger.info("Browser launched (headless=%s)", headless)
        try:
            yield browser.new_page()
        finally:
            browser.close()
            logger.info("Browser closed")


def load_html(page: Page, url: str, timeout_ms: int, settle_ms: int = 0) -> str:
    """
    Navigate `page` to `url` and return the loaded document's HTML.

    Navigation waits for DOMContentLoaded with a hard `timeout_ms` deadline;
    `settle_ms` gives client-side scripts time to fill in content before the
    snapshot is taken. Navigation errors propagate to the caller.
    """
    page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
    if settle_ms:
        page.wait_for_timeout(settle_ms)
    return page.content()
