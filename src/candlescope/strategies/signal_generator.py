"""
Trading Signal Generation

This module turns a candle sequence into a directional signal using a dual
simple moving average crossover (fast 6, slow 14 by default).

The "previous bar" averages are recomputed over the sequence with its last
candle dropped rather than kept as a rolling history.

Decision order (first match wins):
- fast crossed above slow on the last bar  -> BUY, crossover strength
- fast crossed below slow on the last bar  -> SELL, crossover strength
- fast above slow                          -> BUY, trend strength
- fast below slow                          -> SELL, trend strength
- averages exactly equal                   -> NEUTRAL, neutral strength
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.market_data import Candle
from ..models.signals import AnalysisResult, Indicator, Signal
from .indicators import calculate_sma

logger = logging.getLogger(__name__)


class SignalConfiguration(BaseModel):
    """Configuration for signal generation parameters."""

    fast_period: int = Field(default=6, description="Fast SMA period", ge=1)
    slow_period: int = Field(default=14, description="Slow SMA period", ge=1)
    min_candles: int = Field(
        default=15,
        description="Minimum history before a signal is produced",
        ge=2
    )
    crossover_strength: int = Field(default=80, ge=0, le=100)
    trend_strength: int = Field(default=60, ge=0, le=100)
    neutral_strength: int = Field(default=50, ge=0, le=100)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_periods(self):
        """Fast average must be shorter than the slow one."""
        if self.fast_period >= self.slow_period:
            raise ValueError(
                f"fast_period ({self.fast_period}) must be < slow_period ({self.slow_period})"
            )
        return self


class SignalGenerator:
    """
    Moving-average crossover signal engine.

    Stateless apart from its configuration; ``analyze`` is safe to call
    concurrently with different inputs.
    """

    def __init__(self, config: Optional[SignalConfiguration] = None):
        self.config = config or SignalConfiguration()

    def analyze(self, candles: Sequence[Candle]) -> AnalysisResult:
        """
        Analyze a candle sequence (oldest first) and produce a signal.

        Sequences shorter than ``min_candles`` yield a NEUTRAL result with
        zero strength and no indicators.
        """
        config = self.config

        if len(candles) < config.min_candles:
            logger.debug(
                "Insufficient history for signal: %d candles, need %d",
                len(candles), config.min_candles
            )
            return AnalysisResult.neutral()

        fast = calculate_sma(candles, config.fast_period)
        slow = calculate_sma(candles, config.slow_period)

        previous = candles[:-1]
        prev_fast = calculate_sma(previous, config.fast_period)
        prev_slow = calculate_sma(previous, config.slow_period)

        signal = Signal.NEUTRAL
        strength = config.neutral_strength

        if prev_fast < prev_slow and fast > slow:
            signal = Signal.BUY
            strength = config.crossover_strength
            logger.debug("Bullish crossover: fast %.6f > slow %.6f", fast, slow)
        elif prev_fast > prev_slow and fast < slow:
            signal = Signal.SELL
            strength = config.crossover_strength
            logger.debug("Bearish crossover: fast %.6f < slow %.6f", fast, slow)
        elif fast > slow:
            signal = Signal.BUY
            strength = config.trend_strength
        elif fast < slow:
            signal = Signal.SELL
            strength = config.trend_strength

        return AnalysisResult(
            signal=signal,
            strength=strength,
            indicators=self._build_indicators(fast, slow)
        )

    def _build_indicators(self, fast: float, slow: float) -> List[Indicator]:
        # Zero spread reads as Bearish
        return [
            Indicator(
                name=f"MA ({self.config.fast_period})",
                value=fast,
                interpretation="Fast moving average (green)"
            ),
            Indicator(
                name=f"MA ({self.config.slow_period})",
                value=slow,
                interpretation="Slow moving average (red)"
            ),
            Indicator(
                name="Crossover",
                value=fast - slow,
                interpretation="Bullish" if fast > slow else "Bearish"
            ),
        ]


_default_generator = SignalGenerator()


def analyze(candles: Sequence[Candle]) -> AnalysisResult:
    """Analyze ``candles`` with the default crossover configuration."""
    return _default_generator.analyze(candles)
