"""Relative moving average tests"""

import pandas as pd
import pytest

from streamta import RMA, EMA, RelativeMovingAverage, DataItem, InvalidParameterError


class TestRMA:
    """RMA indicator tests"""

    def test_new(self):
        with pytest.raises(InvalidParameterError):
            RMA(0)
        assert RMA(1).period == 1

    def test_alpha_is_reciprocal_of_period(self):
        assert RMA(4).alpha == 0.25
        assert RMA(1).alpha == 1.0

    def test_next(self):
        rma = RMA(3)
        assert rma.update(2.0) == pytest.approx(2.0)
        assert rma.update(5.0) == pytest.approx(3.0)
        assert rma.update(1.0) == pytest.approx(7.0 / 3.0)
        assert rma.update(6.25) == pytest.approx(14.0 / 9.0 + 25.0 / 12.0)

    def test_next_with_bars(self):
        rma = RMA(3)
        assert rma.update(DataItem(open=2, high=2, low=2, close=2)) == 2.0
        assert rma.update(DataItem(open=5, high=5, low=5, close=5)) == pytest.approx(3.0)

    def test_equals_ema_with_custom_smoothing(self, prices, feed):
        for period in (1, 3, 14):
            rma_out = feed(RMA(period), prices)
            ema_out = feed(EMA.with_custom_smoothing_constant(period, 1.0 / period), prices)
            assert rma_out == ema_out

    def test_matches_wilders_smoothing(self, prices, feed):
        expected = pd.Series(prices).ewm(alpha=1.0 / 14, adjust=False).mean().tolist()
        assert feed(RMA(14), prices) == pytest.approx(expected, rel=1e-9)

    def test_reset(self):
        rma = RMA(5)
        assert rma.update(4.0) == 4.0
        rma.update(10.0)
        rma.update(15.0)
        rma.update(20.0)
        assert rma.update(4.0) != 4.0

        rma.reset()
        assert not rma.is_ready
        assert rma.update(4.0) == 4.0

    def test_display(self):
        assert str(RMA(7)) == "RMA(7)"
        assert RelativeMovingAverage is RMA
