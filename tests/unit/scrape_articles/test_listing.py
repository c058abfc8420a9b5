"""Tests for scrape_articles.fetch_articles.listing module."""

from datetime import datetime, timezone

from scrape_articles.fetch_articles.listing import parse_listing, parse_listing_date

BASE_URL = "https://www.courthousenews.com/author/william-savinar/"

LISTING_HTML = """
<html><body>
  <div class="item">
    <h2><a href="https://www.courthousenews.com/first/">  First headline </a></h2>
    <div class="author-date"><span>/ Jan 2, 2024</span></div>
    <div class="excerpt"><p class="small"> First summary. </p></div>
  </div>
  <div class="item">
    <h2><a href="/second/">Second headline</a></h2>
    <div class="author-date"><span>/ Feb 10, 2024</span></div>
  </div>
  <div class="item">
    <p>Malformed item</p>
  </div>
</body></html>
"""


class TestParseListingDate:
    def test_strips_leading_separator(self) -> None:
        assert parse_listing_date("/ Jan 2, 2024") == "Jan 2, 2024"

    def test_without_separator(self) -> None:
        assert parse_listing_date(" Jan 2, 2024 ") == "Jan 2, 2024"

    def test_none(self) -> None:
        assert parse_listing_date(None) is None


class TestParseListing:
    def test_one_stub_per_item_in_order(self) -> None:
        stubs = parse_listing(LISTING_HTML, BASE_URL)
        assert [s.headline for s in stubs] == ["First headline", "Second headline", None]

    def test_reads_fields(self) -> None:
        first = parse_listing(LISTING_HTML, BASE_URL)[0]
        assert first.link == "https://www.courthousenews.com/first/"
        assert first.date == datetime(2024, 1, 2, tzinfo=timezone.utc)
        assert first.summary == "First summary."

    def test_missing_summary_is_empty(self) -> None:
        second = parse_listing(LISTING_HTML, BASE_URL)[1]
        assert second.summary == ""

    def test_relative_link_resolved(self) -> None:
        second = parse_listing(LISTING_HTML, BASE_URL)[1]
        assert second.link == "https://www.courthousenews.com/second/"

    def test_malformed_item_still_emitted(self) -> None:
        malformed = parse_listing(LISTING_HTML, BASE_URL)[2]
        assert malformed.headline is None
        assert malformed.link is None
        assert malformed.date is None
        assert malformed.summary == ""

    def test_no_items(self) -> None:
        assert parse_listing("<html><body><p>Nothing here</p></body></html>", BASE_URL) == []

    def test_empty_page(self) -> None:
        assert parse_listing("", BASE_URL) == []
