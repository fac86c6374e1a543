"""
Data models for candlescope.

Market data (candles, timeframes) and analysis output (signals, patterns).
"""

from .market_data import (
    Candle,
    CandleDataError,
    Timeframe,
    load_candles,
    parse_candles,
)
from .signals import (
    AnalysisResult,
    Indicator,
    MarketReport,
    PatternBias,
    PatternType,
    Signal,
    TradingPattern,
)

__all__ = [
    # Market data
    "Candle",
    "CandleDataError",
    "Timeframe",
    "load_candles",
    "parse_candles",
    # Analysis output
    "AnalysisResult",
    "Indicator",
    "MarketReport",
    "PatternBias",
    "PatternType",
    "Signal",
    "TradingPattern",
]
