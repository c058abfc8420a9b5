"""Tests for scrape_articles.fetch_articles.browser module."""

from unittest.mock import MagicMock, patch

import pytest

from scrape_articles.fetch_articles.browser import load_html, open_page


@pytest.fixture
def mock_playwright():
    with patch("scrape_articles.fetch_articles.browser.sync_playwright") as mock_sync:
        p = mock_sync.return_value.__enter__.return_value
        yield p


class TestOpenPage:
    def test_yields_new_page(self, mock_playwright) -> None:
        browser = mock_playwright.chromium.launch.return_value

        with open_page(headless=True) as page:
            assert page is browser.new_page.return_value

        mock_playwright.chromium.launch.assert_called_once_with(headless=True)
        browser.close.assert_called_once()

    def test_passes_headless_flag(self, mock_playwright) -> None:
        with open_page(headless=False):
            pass

        mock_playwright.chromium.launch.assert_called_once_with(headless=False)

    def test_closes_browser_when_body_raises(self, mock_playwright) -> None:
        browser = mock_playwright.chromium.launch.return_value

        with pytest.raises(TimeoutError):
            with open_page():
                raise TimeoutError("listing timeout")

        browser.close.assert_called_once()

    def test_closes_browser_when_new_page_fails(self, mock_playwright) -> None:
        browser = mock_playwright.chromium.launch.return_value
        browser.new_page.side_effect = RuntimeError("target closed")

        with pytest.raises(RuntimeError):
            with open_page():
                pass

        browser.close.assert_called_once()


class TestLoadHtml:
    def test_navigates_and_returns_content(self) -> None:
        page = MagicMock()
        page.content.return_value = "<html></html>"

        result = load_html(page, "https://example.com/a", 6000)

        assert result == "<html></html>"
        page.goto.assert_called_once_with(
            "https://example.com/a", wait_until="domcontentloaded", timeout=6000
        )

    def test_skips_settle_wait_when_zero(self) -> None:
        page = MagicMock()

        load_html(page, "https://example.com/a", 6000, settle_ms=0)

        page.wait_for_timeout.assert_not_called()

    def test_waits_settle_time_before_snapshot(self) -> None:
        page = MagicMock()

        load_html(page, "https://example.com/a", 6000, settle_ms=1000)

        page.wait_for_timeout.assert_called_once_with(1000)
        page.content.assert_called_once()

    def test_navigation_error_propagates(self) -> None:
        page = MagicMock()
        page.goto.side_effect = TimeoutError("Timeout 6000ms exceeded")

        with pytest.raises(TimeoutError):
            load_html(page, "https://example.com/a", 6000)

        page.content.assert_not_called()
