"""Tests for common.serialization module."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from common.serialization import serialize_record


@dataclass
class SampleRecord:
    name: str
    published_at: Optional[datetime]


class TestSerializeRecord:
    def test_plain_fields_pass_through(self) -> None:
        result = serialize_record(SampleRecord(name="test", published_at=None))
        assert result == {"name": "test", "published_at": None}

    def test_datetime_field_to_iso_string(self) -> None:
        dt = datetime(2024, 1, 2, 12, 0, 0, tzinfo=timezone.utc)
        result = serialize_record(SampleRecord(name="test", published_at=dt))
        assert result["published_at"] == "2024-01-02T12:00:00+00:00"

    def test_preserves_field_order(self) -> None:
        result = serialize_record(SampleRecord(name="test", published_at=None))
        assert list(result) == ["name", "published_at"]
