"""
Multi-Candlestick Pattern Recognition

Engulfing patterns formed by the last two candles of the window. The second
candle's body must open beyond the first candle's close and close beyond its
open, in the opposite direction.
"""

from abc import abstractmethod
from typing import Optional, Sequence

from ...models.market_data import Candle
from ...models.signals import PatternBias, PatternType, TradingPattern
from .base import PatternDetector


class EngulfingDetector(PatternDetector):
    """Base for two-candle engulfing detectors."""

    required_candles = 2

    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        if len(candles) < self.required_candles:
            return None

        first_candle, second_candle = candles[-2], candles[-1]
        if not self.engulfs(first_candle, second_candle):
            return None

        return self._create_pattern()

    @abstractmethod
    def engulfs(self, first_candle: Candle, second_candle: Candle) -> bool:
        """Check whether the second candle engulfs the first."""


class BullishEngulfingDetector(EngulfingDetector):
    """Bearish candle followed by a bullish candle whose body contains it."""

    name = "Bullish Engulfing"
    pattern_type = PatternType.BULLISH
    bias = PatternBias.BULLISH
    description = "Strong buying pressure"

    def engulfs(self, first_candle: Candle, second_candle: Candle) -> bool:
        return (
            first_candle.is_bearish
            and second_candle.is_bullish
            and second_candle.open < first_candle.close
            and second_candle.close > first_candle.open
        )


class BearishEngulfingDetector(EngulfingDetector):
    """Bullish candle followed by a bearish candle whose body contains it."""

    name = "Bearish Engulfing"
    pattern_type = PatternType.BEARISH
    bias = PatternBias.BEARISH
    description = "Strong selling pressure"

    def engulfs(self, first_candle: Candle, second_candle: Candle) -> bool:
        return (
            first_candle.is_bullish
            and second_candle.is_bearish
            and second_candle.open > first_candle.close
            and second_candle.close < first_candle.open
        )
