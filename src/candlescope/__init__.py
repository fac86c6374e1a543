"""
candlescope: Candlestick Signal and Pattern Analysis

Analyzes an ordered OHLCV candle sequence and produces a dual moving-average
crossover signal together with independently detected chart patterns.
"""

__version__ = "0.1.0"
__author__ = "candlescope Team"
__description__ = "Candlestick signal and pattern analysis"

# Package-level imports for convenience
from .config import Config
from .logger import get_logger
from .models import AnalysisResult, Candle, MarketReport, Signal, TradingPattern
from .strategies import analyze, analyze_market, detect

__all__ = [
    "Config",
    "get_logger",
    "AnalysisResult",
    "Candle",
    "MarketReport",
    "Signal",
    "TradingPattern",
    "analyze",
    "analyze_market",
    "detect",
    "__version__",
]
