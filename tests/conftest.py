"""Shared fixtures: series builders, settings and seeded generators."""

from datetime import date, datetime, timedelta

import numpy as np
import pytest

from stockcast.core.config import Settings
from stockcast.schemas.market import PriceSeries

START = datetime(2024, 1, 1)


def make_points(closes, volumes=None, highs=None, lows=None):
    points = []
    for i, close in enumerate(closes):
        point = {"timestamp": START + timedelta(days=i), "close": float(close)}
        if volumes is not None:
            point["volume"] = float(volumes[i])
        if highs is not None:
            point["high"] = float(highs[i])
        if lows is not None:
            point["low"] = float(lows[i])
        points.append(point)
    return points


def make_series(closes, volumes=None, highs=None, lows=None) -> PriceSeries:
    return PriceSeries.from_points(make_points(closes, volumes, highs, lows))


@pytest.fixture
def points_factory():
    return make_points


@pytest.fixture
def series_factory():
    return make_series


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def start_date():
    return date(2024, 6, 3)


@pytest.fixture
def flat_series():
    """60 identical closes on identical volume."""
    return make_series([100.0] * 60, volumes=[1000.0] * 60)


@pytest.fixture
def rising_series():
    """60 closes rising by 1 per day on identical volume."""
    return make_series([100.0 + i for i in range(60)], volumes=[1000.0] * 60)


@pytest.fixture
def falling_series():
    """60 closes falling by 1 per day on identical volume."""
    return make_series([200.0 - i for i in range(60)], volumes=[1000.0] * 60)


@pytest.fixture
def random_walk():
    """Reproducible random walk of 120 closes with noisy volume."""
    gen = np.random.default_rng(7)
    closes = 100 * np.cumprod(1 + gen.normal(0, 0.02, size=120))
    volumes = gen.uniform(500, 1500, size=120)
    return make_series(closes, volumes=volumes)
