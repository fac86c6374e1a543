"""Market data sources for candlescope."""

from .synthetic import align_to_timeframe, generate_candles

__all__ = ["align_to_timeframe", "generate_candles"]
