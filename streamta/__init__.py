"""
Streaming Technical Analysis Library

Moving averages that consume one price at a time and answer immediately,
for event-driven backtesting and live trading loops.

This library provides:
- A common streaming interface: update, period, reset and a display label
- Simple, exponential, relative (Wilder's) and linearly weighted averages
- A moving average whose algorithm is chosen at runtime from configuration
- Factory functions for creating indicators by name
- O(1) updates over fixed-size state allocated at construction

Example Usage:
    import streamta as ta

    # Factory pattern
    lwma = ta.create('lwma', period=20)

    # Direct class access
    rma = ta.RMA(period=14)
    ma = ta.MovingAverage('exponential', period=9)

    for close in prices:
        ma.update(close)

    # Bars work as well as raw prices
    lwma.update(ta.DataItem(open=10, high=12, low=9, close=11, volume=100))
"""

__version__ = "1.0.0"

from .base import BaseIndicator, Close, closing_value_of
from .data_item import DataItem
from .exceptions import (
    IndicatorError,
    InvalidParameterError,
    IndicatorNotFoundError,
)
from .indicators import (
    SMA, EMA, LWMA, RMA,
    LinearlyWeightedMovingAverage,
    RelativeMovingAverage,
    MovingAverage,
    MovingAverageType,
)
from .factory import (
    create,
    list_indicators,
    describe,
    validate_period,
    validate_alpha,
)
from .configloader import (
    ConfigLoader,
    setup_logging,
    moving_average_from_config,
    build_indicators,
)

__all__ = [
    # Core classes
    "BaseIndicator",
    "Close",
    "closing_value_of",
    "DataItem",

    # Factory functions
    "create",
    "list_indicators",
    "describe",

    # Moving averages
    "SMA",
    "EMA",
    "LWMA",
    "RMA",
    "LinearlyWeightedMovingAverage",
    "RelativeMovingAverage",
    "MovingAverage",
    "MovingAverageType",

    # Configuration
    "ConfigLoader",
    "setup_logging",
    "moving_average_from_config",
    "build_indicators",

    # Validation utilities
    "validate_period",
    "validate_alpha",

    # Exceptions
    "IndicatorError",
    "InvalidParameterError",
    "IndicatorNotFoundError",

    # Metadata
    "__version__",
]
