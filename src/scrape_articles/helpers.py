"""Helper functions for scrape_articles."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

from common.config import find_config_path, load_yaml
from scrape_articles.models import ScrapeConfig

CONFIG_DIR = Path(__file__).parent / "configs"

DATELINE_PATTERN = re.compile(r"^MEXICO CITY \(CN\) —\s*")

SUMMARY_WORDS = 20


def strip_dateline(text: str) -> str:
    '''Remove a leading "MEXICO CITY (CN) — " dateline, if present.'''
    return DATELINE_PATTERN.sub("", text, count=1)


def summarize_body(body: str, max_words: int = SUMMARY_WORDS) -> str:
    '''Build a fallback summary from the first words of the article body.'''
    words = body.split()
    if not words:
        return ""
    return " ".join(words[:max_words]) + "..."


def format_body(body: str, link: str | None, resource: str) -> str:
    '''Wrap body text as HTML with a call-to-action link back to the source.'''
    if body:
        return (
            f"<p>{body}</p><br><br><ul><li>"
            f"<a href='{link}'>Visit {resource}</a></li></ul>"
        )
    if link:
        return (
            f"<br><br><ul><li>"
            f"<a href='{link}'>Visit article @ {resource}</a></li></ul>"
        )
    return ""


def load_scrape_config(config_name: str | None = None) -> ScrapeConfig:
    '''Load a ScrapeConfig by name (prod/test) or YAML path.'''
    path = find_config_path(config_name, CONFIG_DIR, env_var="SCRAPE_CONFIG")
    return ScrapeConfig(**load_yaml(path))


def parse_scrape_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for scrape_articles.'''

    parser = argparse.ArgumentParser(
        description="Scrape an author's article listing into the Article table"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file. Defaults to $SCRAPE_CONFIG or 'prod'",
    )
    return parser.parse_args(argv)
