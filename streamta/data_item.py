"""OHLCV bar record consumed by indicators."""

from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import InvalidParameterError


@dataclass(frozen=True)
class DataItem:
    """
    A single market bar.

    Implements the ``Close`` capability, so it can be passed to any
    indicator's ``update`` in place of a raw price.

    Raises:
        InvalidParameterError: If a price or the volume is negative, or the
            open/close prices fall outside the [low, high] range.
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    def __post_init__(self):
        for field_name in ('open', 'high', 'low', 'close', 'volume'):
            if getattr(self, field_name) < 0:
                raise InvalidParameterError(field_name, getattr(self, field_name), "non-negative value", "DataItem")

        if self.low > self.high:
            raise InvalidParameterError("low", self.low, f"value <= high ({self.high})", "DataItem")

        for field_name in ('open', 'close'):
            price = getattr(self, field_name)
            if not self.low <= price <= self.high:
                raise InvalidParameterError(
                    field_name, price, f"value within [low, high] = [{self.low}, {self.high}]", "DataItem"
                )

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "DataItem":
        """Build a bar from an OHLCV dictionary; volume defaults to 0."""
        return cls(
            open=float(row['open']),
            high=float(row['high']),
            low=float(row['low']),
            close=float(row['close']),
            volume=float(row.get('volume', 0.0)),
        )

    def closing_value(self) -> float:
        return self.close
