"""Tests for raw value parsers"""

import math
import pytest
from datetime import datetime, timezone
from decimal import Decimal
from fractions import Fraction

from refchart.data.parsers import (
    InvalidPriceError,
    InvalidTimestampError,
    ParseError,
    extract_records,
    parse_json_payload,
    parse_price,
    parse_timestamp,
)


class TestParseTimestamp:
    """Test ISO-8601 timestamp parsing"""

    def test_zulu_suffix(self):
        ts = parse_timestamp("2024-05-01T00:00:00Z")
        assert ts == datetime(2024, 5, 1, tzinfo=timezone.utc)
        assert ts.utcoffset().total_seconds() == 0

    def test_offset_converted_to_utc(self):
        ts = parse_timestamp("2024-05-01T02:00:00+02:00")
        assert ts == datetime(2024, 5, 1, 0, 0, tzinfo=timezone.utc)
        assert ts.tzinfo is not None
        assert ts.hour == 0

    def test_naive_timestamp_is_utc(self):
        ts = parse_timestamp("2024-05-01T12:30:00")
        assert ts == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    def test_surrounding_whitespace(self):
        assert parse_timestamp(" 2024-05-01T00:00:00Z ") == datetime(2024, 5, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", ["not-a-date", "", "   ", "2024-13-01T00:00:00Z", "2024-05-32"])
    def test_invalid_strings(self, raw):
        with pytest.raises(InvalidTimestampError):
            parse_timestamp(raw)

    @pytest.mark.parametrize("raw", [None, 1714521600, 1714521600.0, ["2024-05-01"]])
    def test_non_string_rejected(self, raw):
        with pytest.raises(InvalidTimestampError):
            parse_timestamp(raw)

    @pytest.mark.parametrize("raw", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:00:00-05:00"])
    def test_utc_conversion_out_of_range(self, raw):
        with pytest.raises(InvalidTimestampError):
            parse_timestamp(raw)

    def test_invalid_timestamp_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_timestamp("garbage")


class TestParsePrice:
    """Test price coercion"""

    @pytest.mark.parametrize("raw, expected", [
        (100, 100.0),
        (105.5, 105.5),
        ("102", 102.0),
        (" 99.25 ", 99.25),
        ("-3.5", -3.5),
        ("1e2", 100.0),
        (0, 0.0),
    ])
    def test_valid_prices(self, raw, expected):
        price = parse_price(raw)
        assert isinstance(price, float)
        assert price == expected

    @pytest.mark.parametrize("raw", ["abc", "", "10,5", None, True, False, [1], {"p": 1}])
    def test_non_numeric_rejected(self, raw):
        with pytest.raises(InvalidPriceError):
            parse_price(raw)

    @pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, "nan", "inf", "-Infinity"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(InvalidPriceError):
            parse_price(raw)

    @pytest.mark.parametrize("raw, expected", [
        (Decimal("102.5"), 102.5),
        (Fraction(1, 4), 0.25),
    ])
    def test_other_real_numbers(self, raw, expected):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize("raw", [10**400, -10**400, Fraction(10**400, 3)])
    def test_out_of_range_rejected(self, raw):
        with pytest.raises(InvalidPriceError):
            parse_price(raw)

    @pytest.mark.parametrize("raw", [Decimal("NaN"), Decimal("sNaN"), Decimal("1e400")])
    def test_non_finite_decimal_rejected(self, raw):
        with pytest.raises(InvalidPriceError):
            parse_price(raw)


class TestJsonPayload:
    """Test JSON payload parsing and record extraction"""

    def test_parse_bytes(self):
        payload = parse_json_payload(b'[{"timestamp": "2024-05-01T00:00:00Z", "price": 100}]')
        assert payload == [{"timestamp": "2024-05-01T00:00:00Z", "price": 100}]

    def test_parse_str(self):
        assert parse_json_payload('{"data": []}') == {"data": []}

    def test_invalid_json(self):
        with pytest.raises(ParseError, match="Invalid JSON"):
            parse_json_payload("{not json")

    def test_extract_bare_list(self):
        records = [{"timestamp": "2024-05-01T00:00:00Z", "price": 100}]
        assert extract_records(records) == records

    def test_extract_data_field(self):
        records = [{"timestamp": "2024-05-01T00:00:00Z", "price": "100"}]
        assert extract_records({"data": records}) == records

    def test_missing_data_field(self):
        with pytest.raises(ParseError, match="Missing 'data'"):
            extract_records({"records": []})

    def test_records_must_be_list(self):
        with pytest.raises(ParseError):
            extract_records({"data": "nope"})

    def test_record_must_be_object(self):
        with pytest.raises(ParseError, match="index 1"):
            extract_records([{"timestamp": "x", "price": 1}, [1, 2]])
