"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime


def serialize_record(record) -> dict:
    """Convert a dataclass record to a JSON-ready dict with ISO-8601 datetimes."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in asdict(record).items()
    }
