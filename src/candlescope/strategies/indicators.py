"""
Moving Average Indicators

Simple and exponential moving averages over candle closes. Both return a
single value for the end of the sequence rather than a rolling series.
"""

from typing import Sequence

from ..models.market_data import Candle


def _check_period(period: int) -> None:
    if period <= 0:
        raise ValueError(f"Period must be positive, got {period}")


def calculate_sma(candles: Sequence[Candle], period: int) -> float:
    """
    Simple moving average of the last ``period`` closes.

    With fewer than ``period`` candles the most recent close is returned
    (a one-point average) instead of failing.

    Raises:
        ValueError: if ``candles`` is empty or ``period`` is not positive
    """
    _check_period(period)
    if not candles:
        raise ValueError("Cannot compute an average of an empty candle sequence")

    if len(candles) < period:
        return candles[-1].close

    return sum(candle.close for candle in candles[-period:]) / period


def calculate_ema_from_prices(prices: Sequence[float], period: int) -> float:
    """
    Exponential moving average of ``prices``.

    Seeded with the SMA of the first ``period`` prices, then smoothed with
    ``k = 2 / (period + 1)`` over the remainder.
    """
    _check_period(period)
    if not prices:
        raise ValueError("Cannot compute an average of an empty price sequence")

    if len(prices) < period:
        return prices[-1]

    k = 2 / (period + 1)
    ema = sum(prices[:period]) / period
    for price in prices[period:]:
        ema = price * k + ema * (1 - k)

    return ema


def calculate_ema(candles: Sequence[Candle], period: int) -> float:
    """Exponential moving average of candle closes."""
    return calculate_ema_from_prices([candle.close for candle in candles], period)
