"""
Unit tests for single and two-candle pattern recognition.

Covers Doji, Hammer, Shooting Star and the engulfing detectors, including
zero-range candles that must never divide by zero.
"""

import pytest

from candlescope.models.signals import PatternBias, PatternType
from candlescope.strategies.patterns.multi_candlestick import (
    BearishEngulfingDetector,
    BullishEngulfingDetector,
)
from candlescope.strategies.patterns.pattern_config import DojiConfig, PatternDetectionConfig
from candlescope.strategies.patterns.single_candlestick import (
    DojiDetector,
    HammerDetector,
    ShootingStarDetector,
)
from factories import create_test_candle


def hammer_candle(index: int = 0):
    # range 0.0125, body 16%, lower shadow 80%
    return create_test_candle(open_price=1.0, close=1.002, high=1.0025, low=0.99, index=index)


def shooting_star_candle(index: int = 0):
    # range 0.013, body 15%, upper shadow 81%
    return create_test_candle(open_price=1.002, close=1.0, high=1.0125, low=0.9995, index=index)


class TestDojiDetector:
    """Test Doji pattern detection."""

    def setup_method(self):
        self.detector = DojiDetector()

    def test_small_body_detected(self):
        candle = create_test_candle(open_price=1.0, close=1.0005, high=1.01, low=0.99)

        pattern = self.detector.detect([candle])

        assert pattern is not None
        assert pattern.name == "Doji"
        assert pattern.type == PatternType.REVERSAL
        assert pattern.bias == PatternBias.NEUTRAL
        assert pattern.description == "Indecision in market"

    def test_large_body_rejected(self):
        candle = create_test_candle(open_price=1.0, close=1.008, high=1.01, low=0.99)
        assert self.detector.detect([candle]) is None

    def test_zero_range_rejected(self):
        candle = create_test_candle(open_price=1.05, close=1.05, high=1.05, low=1.05)
        assert self.detector.detect([candle]) is None

    def test_only_last_candle_examined(self):
        doji = create_test_candle(open_price=1.0, close=1.0005, high=1.01, low=0.99, index=0)
        marubozu = create_test_candle(open_price=0.99, close=1.01, high=1.01, low=0.99, index=1)

        assert self.detector.detect([doji, marubozu]) is None

    def test_empty_window(self):
        assert self.detector.detect([]) is None

    def test_threshold_from_config(self):
        config = PatternDetectionConfig(doji=DojiConfig(max_body_ratio=0.5))
        candle = create_test_candle(open_price=1.0, close=1.008, high=1.01, low=0.99)

        assert DojiDetector(config).detect([candle]) is not None


class TestHammerDetector:
    """Test Hammer pattern detection."""

    def setup_method(self):
        self.detector = HammerDetector()

    def test_bullish_hammer(self):
        pattern = self.detector.detect([hammer_candle()])

        assert pattern is not None
        assert pattern.name == "Hammer"
        assert pattern.type == PatternType.REVERSAL
        assert pattern.bias == PatternBias.BULLISH

    def test_bearish_body_rejected(self):
        candle = create_test_candle(open_price=1.002, close=1.0, high=1.0025, low=0.99)
        assert self.detector.detect([candle]) is None

    def test_short_lower_shadow_rejected(self):
        candle = create_test_candle(open_price=1.0, close=1.002, high=1.006, low=0.996)
        assert self.detector.detect([candle]) is None

    def test_zero_range_rejected(self):
        candle = create_test_candle(open_price=1.0, close=1.0, high=1.0, low=1.0)
        assert self.detector.detect([candle]) is None

    def test_shooting_star_is_not_a_hammer(self):
        assert self.detector.detect([shooting_star_candle()]) is None


class TestShootingStarDetector:
    """Test Shooting Star pattern detection."""

    def setup_method(self):
        self.detector = ShootingStarDetector()

    def test_bearish_shooting_star(self):
        pattern = self.detector.detect([shooting_star_candle()])

        assert pattern is not None
        assert pattern.name == "Shooting Star"
        assert pattern.type == PatternType.REVERSAL
        assert pattern.bias == PatternBias.BEARISH
        assert pattern.description == "Potential bearish reversal"

    def test_bullish_body_rejected(self):
        candle = create_test_candle(open_price=1.0, close=1.002, high=1.0125, low=0.9995)
        assert self.detector.detect([candle]) is None

    def test_hammer_is_not_a_shooting_star(self):
        assert self.detector.detect([hammer_candle()]) is None


class TestEngulfingDetectors:
    """Test bullish and bearish engulfing detection."""

    def test_bullish_engulfing(self):
        prior = create_test_candle(open_price=1.002, close=1.0, high=1.003, low=0.999, index=0)
        current = create_test_candle(open_price=0.999, close=1.003, high=1.004, low=0.998, index=1)

        pattern = BullishEngulfingDetector().detect([prior, current])

        assert pattern is not None
        assert pattern.name == "Bullish Engulfing"
        assert pattern.type == PatternType.BULLISH
        assert pattern.bias == PatternBias.BULLISH
        assert BearishEngulfingDetector().detect([prior, current]) is None

    def test_bearish_engulfing(self):
        prior = create_test_candle(open_price=1.0, close=1.002, high=1.003, low=0.999, index=0)
        current = create_test_candle(open_price=1.003, close=0.999, high=1.004, low=0.998, index=1)

        pattern = BearishEngulfingDetector().detect([prior, current])

        assert pattern is not None
        assert pattern.name == "Bearish Engulfing"
        assert pattern.type == PatternType.BEARISH
        assert pattern.bias == PatternBias.BEARISH
        assert BullishEngulfingDetector().detect([prior, current]) is None

    def test_body_must_extend_past_prior_body(self):
        # Opens exactly at the prior close: containment is strict
        prior = create_test_candle(open_price=1.002, close=1.0, high=1.003, low=0.999, index=0)
        current = create_test_candle(open_price=1.0, close=1.003, high=1.004, low=0.998, index=1)

        assert BullishEngulfingDetector().detect([prior, current]) is None

    def test_same_direction_rejected(self):
        prior = create_test_candle(open_price=1.001, close=1.002, high=1.003, low=1.0, index=0)
        current = create_test_candle(open_price=0.999, close=1.003, high=1.004, low=0.998, index=1)

        assert BullishEngulfingDetector().detect([prior, current]) is None

    @pytest.mark.parametrize("detector_cls", [BullishEngulfingDetector, BearishEngulfingDetector])
    def test_needs_two_candles(self, detector_cls):
        assert detector_cls().detect([hammer_candle()]) is None
