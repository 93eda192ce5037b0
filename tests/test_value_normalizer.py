"""Tests for value normalization."""
from datetime import date, datetime

import pytest

from prestashop_connector.builder import normalize_payload, normalize_value


class TestNormalizeValue:
    """Test single value encoding."""

    def test_booleans(self):
        assert normalize_value(True) == "1"
        assert normalize_value(False) == "0"

    def test_iso_datetime_string(self):
        assert normalize_value("2024-05-01T10:00:00") == "2024-05-01 10:00:00"

    def test_sql_datetime_unchanged(self):
        assert normalize_value("2024-05-01 10:00:00") == "2024-05-01 10:00:00"

    def test_datetime_object(self):
        assert normalize_value(datetime(2024, 5, 1, 10, 0, 0)) == "2024-05-01 10:00:00"

    def test_date_object(self):
        assert normalize_value(date(1990, 2, 3)) == "1990-02-03"

    def test_date_only_keeps_date_part(self):
        assert normalize_value("1990-02-03T00:00:00", date_only=True) == "1990-02-03"
        assert normalize_value(datetime(1990, 2, 3, 8, 30), date_only=True) == "1990-02-03"

    @pytest.mark.parametrize("value", [0, 1, 19.9, "Shoe", "", None])
    def test_other_values_unchanged(self, value):
        assert normalize_value(value) == value

    def test_text_containing_t_is_not_a_date(self):
        assert normalize_value("T-shirt") == "T-shirt"

    @pytest.mark.parametrize(
        "value", ["2024-05-01T10:00:00\n", "2024-05-01T10:00:00Z", "x2024-05-01T10:00:00"]
    )
    def test_only_exact_iso_datetimes_rewritten(self, value):
        assert normalize_value(value) == value


class TestNormalizePayload:
    """Test whole payload normalization."""

    @pytest.fixture
    def payload(self):
        return {
            "active": True,
            "newsletter": False,
            "birthday": "1990-02-03T00:00:00",
            "date_add": "2024-05-01T10:00:00",
            "price": 19.9,
        }

    def test_normalizes_in_place(self, payload):
        result = normalize_payload(payload, date_only_fields=("birthday",))

        assert result is payload
        assert payload == {
            "active": "1",
            "newsletter": "0",
            "birthday": "1990-02-03",
            "date_add": "2024-05-01 10:00:00",
            "price": 19.9,
        }

    def test_idempotent(self, payload):
        once = normalize_payload(dict(payload), ("birthday",))
        twice = normalize_payload(normalize_payload(dict(payload), ("birthday",)), ("birthday",))

        assert once == twice
