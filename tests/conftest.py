"""Shared fixtures for indicator tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from streamta import DataItem


@pytest.fixture
def prices():
    """A deterministic random walk of closing prices."""
    rng = np.random.default_rng(42)
    return [float(p) for p in 100.0 + np.cumsum(rng.normal(0.0, 1.5, size=60))]


@pytest.fixture
def bars(prices):
    """OHLCV bars built around the closing prices."""
    return [
        DataItem(open=p, high=p + 1.0, low=p - 1.0, close=p, volume=1000.0)
        for p in prices
    ]


@pytest.fixture
def feed():
    """Push every sample through an indicator and collect the outputs."""
    def _feed(indicator, samples):
        return [indicator.update(sample) for sample in samples]
    return _feed
