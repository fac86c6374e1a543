"""
candlescope analysis strategies

Includes:
- Moving average indicators
- Dual SMA crossover signal generation
- Candlestick and chart pattern recognition
"""

from .indicators import calculate_ema, calculate_ema_from_prices, calculate_sma
from .pattern_engine import PatternRecognizer, analyze_market, detect
from .signal_generator import SignalConfiguration, SignalGenerator, analyze

__all__ = [
    "calculate_ema",
    "calculate_ema_from_prices",
    "calculate_sma",
    "PatternRecognizer",
    "analyze_market",
    "detect",
    "SignalConfiguration",
    "SignalGenerator",
    "analyze",
]
