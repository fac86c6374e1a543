"""
Single Candlestick Pattern Recognition

This module implements recognition of patterns formed by the last candle of
the window:
- Doji: body smaller than 10% of the range (indecision)
- Hammer: small bullish body with a long lower shadow
- Shooting Star: small bearish body with a long upper shadow

Candles with a zero (or inverted) range never match, so flat markets do not
divide by zero.
"""

from abc import abstractmethod
from typing import Optional, Sequence

from ...models.market_data import Candle
from ...models.signals import PatternBias, PatternType, TradingPattern
from .base import PatternDetector


class SinglePatternDetector(PatternDetector):
    """
    Abstract base class for single candlestick pattern detectors.

    Subclasses implement ``matches`` for one candle; ``detect`` applies it
    to the most recent candle of the window.
    """

    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        if not candles:
            return None

        candle = candles[-1]
        if candle.total_range <= 0:
            return None

        if not self.matches(candle):
            return None

        return self._create_pattern()

    @abstractmethod
    def matches(self, candle: Candle) -> bool:
        """Check a candle with a positive range against the pattern."""

    @staticmethod
    def _body_ratio(candle: Candle) -> float:
        return candle.body_size / candle.total_range

    @staticmethod
    def _upper_shadow_ratio(candle: Candle) -> float:
        return candle.upper_shadow / candle.total_range

    @staticmethod
    def _lower_shadow_ratio(candle: Candle) -> float:
        return candle.lower_shadow / candle.total_range


class DojiDetector(SinglePatternDetector):
    """
    Doji pattern detector.

    A Doji occurs when open and close are very close relative to the range,
    indicating market indecision.
    """

    name = "Doji"
    pattern_type = PatternType.REVERSAL
    bias = PatternBias.NEUTRAL
    description = "Indecision in market"

    def matches(self, candle: Candle) -> bool:
        return self._body_ratio(candle) < self.config.doji.max_body_ratio


class HammerDetector(SinglePatternDetector):
    """
    Hammer pattern detector.

    A Hammer is a bullish reversal candle with:
    - Small real body
    - Long lower shadow
    - Close above open
    """

    name = "Hammer"
    pattern_type = PatternType.REVERSAL
    bias = PatternBias.BULLISH
    description = "Potential bullish reversal"

    def matches(self, candle: Candle) -> bool:
        config = self.config.hammer
        return (
            self._body_ratio(candle) < config.max_body_ratio
            and self._lower_shadow_ratio(candle) > config.min_lower_shadow_ratio
            and candle.is_bullish
        )


class ShootingStarDetector(SinglePatternDetector):
    """
    Shooting Star pattern detector.

    Mirror image of the Hammer: small bearish body with a long upper shadow.
    """

    name = "Shooting Star"
    pattern_type = PatternType.REVERSAL
    bias = PatternBias.BEARISH
    description = "Potential bearish reversal"

    def matches(self, candle: Candle) -> bool:
        config = self.config.shooting_star
        return (
            self._body_ratio(candle) < config.max_body_ratio
            and self._upper_shadow_ratio(candle) > config.min_upper_shadow_ratio
            and candle.is_bearish
        )
