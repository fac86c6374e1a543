"""
Core Market Data Models

This module contains Pydantic models for the price bars consumed by the
analysis engines:
- Timeframe: Enumeration of supported bar intervals
- Candle: Immutable OHLCV bar
- parse_candles / load_candles: Helpers turning provider payloads into an
  oldest-first candle sequence

Candles deliberately skip OHLC relationship validation. Callers sanitize
provider data; the engines work best-effort over whatever they are given.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandleDataError(ValueError):
    """Raised when a market data payload cannot be turned into candles."""


class Timeframe(str, Enum):
    """Supported candle intervals."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"

    @property
    def minutes(self) -> int:
        """Interval length in minutes."""
        return int(self.value.rstrip("m"))

    @property
    def seconds(self) -> int:
        """Interval length in seconds."""
        return self.minutes * 60


class Candle(BaseModel):
    """
    OHLCV price bar for a fixed time interval.

    Timestamps are normalized to timezone-aware UTC. ISO-8601 strings and
    epoch milliseconds are accepted on input.
    """

    time: datetime = Field(..., description="Bar open time in UTC")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="Highest price")
    low: float = Field(..., description="Lowest price")
    close: float = Field(..., description="Closing price")
    volume: int = Field(default=0, description="Traded volume", ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator('time', mode='before')
    @classmethod
    def validate_time(cls, v) -> datetime:
        """Ensure the timestamp is timezone-aware UTC."""
        if isinstance(v, str):
            if v.endswith('Z'):
                v = v[:-1] + '+00:00'
            dt = datetime.fromisoformat(v)
        elif isinstance(v, (int, float)):
            dt = datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        elif isinstance(v, datetime):
            dt = v
        else:
            raise ValueError(f"Invalid timestamp format: {type(v)}")

        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        elif dt.tzinfo != timezone.utc:
            dt = dt.astimezone(timezone.utc)

        return dt

    @classmethod
    def from_twelve_data(cls, item: Dict[str, Any]) -> 'Candle':
        """
        Create a Candle from one Twelve Data time_series value.

        Expected format: {'datetime': '2024-01-02 10:05:00', 'open': '1.0951',
        'high': '1.0955', 'low': '1.0949', 'close': '1.0953', 'volume': '0'}
        Forex series often omit volume, which maps to zero.
        """
        try:
            return cls(
                time=item['datetime'],
                open=float(item['open']),
                high=float(item['high']),
                low=float(item['low']),
                close=float(item['close']),
                volume=int(float(item.get('volume') or 0)),
            )
        except KeyError as e:
            raise CandleDataError(f"Twelve Data value is missing field {e}") from e

    @property
    def body_size(self) -> float:
        """Absolute difference between open and close."""
        return abs(self.close - self.open)

    @property
    def total_range(self) -> float:
        """Distance from low to high."""
        return self.high - self.low

    @property
    def upper_shadow(self) -> float:
        """Calculate upper shadow length."""
        return self.high - max(self.open, self.close)

    @property
    def lower_shadow(self) -> float:
        """Calculate lower shadow length."""
        return min(self.open, self.close) - self.low

    @property
    def is_bullish(self) -> bool:
        """Check if candle is bullish (close > open)."""
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        """Check if candle is bearish (close < open)."""
        return self.close < self.open


def parse_candles(payload: Union[Dict[str, Any], Sequence[Dict[str, Any]]]) -> List[Candle]:
    """
    Build an oldest-first candle sequence from a provider payload.

    Accepts either a plain list of candle dicts (already oldest first) or a
    Twelve Data time_series response, whose ``values`` are newest first.
    """
    if isinstance(payload, dict):
        if payload.get('status') == 'error':
            raise CandleDataError(payload.get('message') or "Provider returned an error")

        values = payload.get('values')
        if not isinstance(values, list) or not values:
            raise CandleDataError("No data values found in the payload")

        candles = [Candle.from_twelve_data(item) for item in values]
        candles.reverse()
        return candles

    if isinstance(payload, (list, tuple)):
        return [Candle.model_validate(item) for item in payload]

    raise CandleDataError(f"Unsupported candle payload: {type(payload).__name__}")


def load_candles(path: Union[str, Path]) -> List[Candle]:
    """Read a JSON file and parse it with :func:`parse_candles`."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise CandleDataError(f"Invalid JSON in {path}: {e}") from e

    return parse_candles(payload)
