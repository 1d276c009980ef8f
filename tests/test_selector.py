"""Runtime-selectable moving average tests"""

import copy

import pytest

from streamta import (
    MovingAverage, MovingAverageType,
    SMA, EMA, RMA, LWMA,
    InvalidParameterError,
)

VARIANTS = [
    (MovingAverageType.SIMPLE, SMA),
    (MovingAverageType.EXPONENTIAL, EMA),
    (MovingAverageType.RELATIVE, RMA),
    (MovingAverageType.LINEAR, LWMA),
]


class TestMovingAverage:
    """MovingAverage selector tests"""

    @pytest.mark.parametrize("ma_type", list(MovingAverageType))
    def test_new(self, ma_type):
        with pytest.raises(InvalidParameterError):
            MovingAverage(ma_type, 0)
        assert MovingAverage(ma_type, 1).period == 1

    @pytest.mark.parametrize("ma_type, variant", VARIANTS)
    def test_propagates_variant_error(self, ma_type, variant):
        with pytest.raises(InvalidParameterError) as excinfo:
            MovingAverage(ma_type, 0)
        assert excinfo.value.indicator_name == variant.__name__

    def test_default(self):
        ma = MovingAverage()
        assert ma.ma_type is MovingAverageType.SIMPLE
        assert ma.period == 9

    @pytest.mark.parametrize("ma_type, variant", VARIANTS)
    def test_forwards_to_variant(self, prices, feed, ma_type, variant):
        assert feed(MovingAverage(ma_type, 7), prices) == feed(variant(7), prices)

    @pytest.mark.parametrize("ma_type, variant", VARIANTS)
    def test_forwards_bars(self, prices, bars, feed, ma_type, variant):
        assert feed(MovingAverage(ma_type, 5), bars) == feed(variant(5), prices)

    def test_linear_scenario(self, feed):
        ma = MovingAverage(MovingAverageType.LINEAR, 4)
        outputs = feed(ma, [4.0, 5.0, 6.0, 6.0, 6.0, 6.0, 2.0])
        assert outputs[3:] == [5.6, 5.9, 6.0, 4.4]

    @pytest.mark.parametrize("ma_type", list(MovingAverageType))
    def test_reset(self, prices, feed, ma_type):
        ma = MovingAverage(ma_type, 6)
        fresh = feed(ma, prices)

        ma.reset()
        assert not ma.is_ready
        assert feed(ma, prices) == fresh
        assert ma.ma_type is ma_type

    def test_value(self):
        ma = MovingAverage(MovingAverageType.EXPONENTIAL, 3)
        ma.update(2.0)
        assert ma.update(5.0) == ma.value == 3.5

    def test_copy_is_independent(self):
        ma = MovingAverage(MovingAverageType.LINEAR, 3)
        ma.update(1.0)
        clone = copy.deepcopy(ma)

        assert clone.update(4.0) == ma.update(4.0)
        clone.update(100.0)
        assert ma.value == 3.0

    @pytest.mark.parametrize("name, expected", [
        ("simple", MovingAverageType.SIMPLE),
        ("EMA", MovingAverageType.EXPONENTIAL),
        ("Relative", MovingAverageType.RELATIVE),
        ("lwma", MovingAverageType.LINEAR),
        ("wma", MovingAverageType.LINEAR),
        (" linear ", MovingAverageType.LINEAR),
    ])
    def test_type_from_name(self, name, expected):
        assert MovingAverageType.parse(name) is expected
        assert MovingAverage(name, 3).ma_type is expected

    @pytest.mark.parametrize("name", ["hull", "", 3, None])
    def test_unknown_type(self, name):
        with pytest.raises(InvalidParameterError) as excinfo:
            MovingAverage(name, 3)
        assert excinfo.value.parameter_name == "ma_type"

    def test_display(self):
        for ma_type in MovingAverageType:
            assert str(MovingAverage(ma_type, 9)) == "MA(9)"
        assert "LINEAR" in repr(MovingAverage(MovingAverageType.LINEAR, 3))
