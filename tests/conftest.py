"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from refchart.config.defaults import get_default_config
from refchart.data.models import Sample

START = datetime(2024, 5, 1, tzinfo=timezone.utc)


def day(n: float) -> datetime:
    """Timestamp n days after the first sample."""
    return START + timedelta(days=n)


def make_samples(prices: List[float], step: timedelta = timedelta(days=1)) -> List[Sample]:
    """Daily samples starting at START."""
    return [Sample(ts=START + step * i, price=p) for i, p in enumerate(prices)]


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Eight days of raw price records."""
    prices = [100, 105, 102, 108, 110, 108, 99, 115]
    return [
        {"timestamp": f"2024-05-0{i + 1}T00:00:00Z", "price": price}
        for i, price in enumerate(prices)
    ]


@pytest.fixture
def sample_series() -> List[Sample]:
    """The sample records as prepared samples."""
    return make_samples([100, 105, 102, 108, 110, 108, 99, 115])


@pytest.fixture
def default_config():
    """Default chart configuration."""
    return get_default_config()


@pytest.fixture
def make_series():
    """Factory for daily samples from a list of prices."""
    return make_samples


@pytest.fixture
def at_day():
    """Factory for timestamps n days after the first sample."""
    return day
