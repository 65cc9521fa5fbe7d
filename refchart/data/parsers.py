"""
Parsers for converting raw price records to typed values.

This module handles parsing of ISO-8601 timestamps, numeric-or-string prices
and JSON record payloads with proper type conversion and error handling.
"""

import math
import numbers
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

import orjson


class ParseError(Exception):
    """Raised when parsing fails due to invalid data format."""
    pass


class InvalidPriceError(ParseError):
    """Raised when price data is invalid."""
    pass


class InvalidTimestampError(ParseError):
    """Raised when timestamp data is invalid."""
    pass


def parse_timestamp(raw: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp string into a UTC datetime.

    Accepts a trailing ``Z`` designator and explicit offsets; naive
    timestamps are taken to be UTC.

    Args:
        raw: Timestamp string, e.g. "2024-05-01T00:00:00Z"

    Returns:
        Timezone-aware UTC datetime

    Raises:
        InvalidTimestampError: If the value is not a parseable string
    """
    if not isinstance(raw, str):
        raise InvalidTimestampError(f"Timestamp must be a string, got {type(raw).__name__}")

    text = raw.strip()
    if not text:
        raise InvalidTimestampError("Timestamp is empty")

    try:
        ts = datetime.fromisoformat(text)
        if ts.tzinfo is None:
            return ts.replace(tzinfo=UTC)
        return ts.astimezone(UTC)
    except (ValueError, OverflowError) as e:
        raise InvalidTimestampError(f"Invalid timestamp '{raw}': {e}")


def parse_price(raw: Any) -> float:
    """
    Coerce a number or numeric string into a finite float.

    Args:
        raw: Price as a real number or numeric string

    Returns:
        Price as float

    Raises:
        InvalidPriceError: If the value is not numeric, NaN or infinite
    """
    if isinstance(raw, bool) or raw is None:
        raise InvalidPriceError(f"Price must be numeric, got {raw!r}")

    if isinstance(raw, (numbers.Real, Decimal)):
        try:
            price = float(raw)
        except (ValueError, OverflowError) as e:
            raise InvalidPriceError(f"Invalid price {raw!r}: {e}")
    elif isinstance(raw, str):
        try:
            price = float(raw.strip())
        except ValueError as e:
            raise InvalidPriceError(f"Invalid price '{raw}': {e}")
    else:
        raise InvalidPriceError(f"Price must be numeric, got {type(raw).__name__}")

    if not math.isfinite(price):
        raise InvalidPriceError(f"Price must be finite, got {raw!r}")

    return price


def parse_json_payload(raw_data: str | bytes) -> Any:
    """
    Parse raw JSON text into Python objects.

    Args:
        raw_data: Raw JSON string or bytes

    Returns:
        Parsed object

    Raises:
        ParseError: If JSON parsing fails
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}")


def extract_records(payload: Any) -> list[dict[str, Any]]:
    """
    Extract the record list from a parsed payload.

    Accepts either a bare list of records or an object with a ``data`` list.

    Raises:
        ParseError: If no record list can be found
    """
    if isinstance(payload, dict):
        if "data" not in payload:
            raise ParseError("Missing 'data' field in payload")
        payload = payload["data"]

    if not isinstance(payload, list):
        raise ParseError("Records must be a list")

    for i, record in enumerate(payload):
        if not isinstance(record, dict):
            raise ParseError(f"Record at index {i} must be an object")

    return payload
