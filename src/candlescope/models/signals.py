"""
Trading Signal Models

This module contains Pydantic models for analysis output:
- Signal: Directional trading signal
- PatternType / PatternBias: Pattern classification
- Indicator: Named indicator value with a human readable interpretation
- AnalysisResult: Moving-average crossover signal with supporting indicators
- TradingPattern: One detected chart or candlestick pattern
- MarketReport: Signal and patterns combined for display

Every result is produced fresh per call and has no identity beyond it.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Signal(str, Enum):
    """Trading signal direction enumeration."""
    BUY = "BUY"
    SELL = "SELL"
    NEUTRAL = "NEUTRAL"


class PatternType(str, Enum):
    """Pattern family."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    REVERSAL = "reversal"
    CONTINUATION = "continuation"


class PatternBias(str, Enum):
    """Directional bias implied by a pattern."""
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class Indicator(BaseModel):
    """Indicator value reported alongside a signal."""

    name: str = Field(..., description="Indicator display name")
    value: float = Field(..., description="Indicator value")
    interpretation: str = Field(..., description="Human readable reading")

    model_config = ConfigDict(frozen=True)


class AnalysisResult(BaseModel):
    """
    Moving-average crossover analysis of a candle sequence.

    Strength is a 0-100 confidence figure: 80 for a fresh crossover, 60 for a
    sustained bias, 50 when the averages are exactly equal and 0 when the
    history is too short to judge.
    """

    signal: Signal = Field(..., description="Directional signal")
    strength: int = Field(..., description="Signal confidence (0-100)", ge=0, le=100)
    indicators: List[Indicator] = Field(default_factory=list, description="Supporting indicator values")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def neutral(cls) -> 'AnalysisResult':
        """Result returned when there is not enough history."""
        return cls(signal=Signal.NEUTRAL, strength=0, indicators=[])

    def get_indicator(self, name: str) -> Indicator:
        """Look up an indicator by display name."""
        for indicator in self.indicators:
            if indicator.name == name:
                return indicator
        raise KeyError(name)


class TradingPattern(BaseModel):
    """A detected chart or candlestick pattern."""

    name: str = Field(..., description="Pattern name, e.g. 'Double Top'")
    type: PatternType = Field(..., description="Pattern family")
    bias: PatternBias = Field(..., description="Directional bias")
    description: str = Field(..., description="Short explanation for display")

    model_config = ConfigDict(frozen=True)


class MarketReport(BaseModel):
    """Signal analysis and detected patterns for one candle sequence."""

    analysis: AnalysisResult
    patterns: List[TradingPattern] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def bullish_patterns(self) -> int:
        """Number of patterns with a bullish bias."""
        return sum(1 for p in self.patterns if p.bias == PatternBias.BULLISH)

    @computed_field
    @property
    def bearish_patterns(self) -> int:
        """Number of patterns with a bearish bias."""
        return sum(1 for p in self.patterns if p.bias == PatternBias.BEARISH)
