"""
Synthetic Market Data

Random-walk candle generator used as a fallback data source and for demos.
Bars are aligned to the timeframe boundary and end just before the current
interval. Larger timeframes get proportionally more volatility
(``sqrt(minutes) / 10``).
"""

import logging
import math
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..models.market_data import Candle, Timeframe

logger = logging.getLogger(__name__)


def align_to_timeframe(moment: datetime, timeframe: Timeframe) -> datetime:
    """Floor ``moment`` to the start of its timeframe interval (UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    epoch_seconds = int(moment.timestamp())
    return datetime.fromtimestamp(epoch_seconds - epoch_seconds % timeframe.seconds, tz=timezone.utc)


def generate_candles(
    count: int,
    timeframe: Timeframe,
    base_price: float = 1.05,
    now: Optional[datetime] = None,
    seed: Optional[int] = None
) -> List[Candle]:
    """
    Generate ``count`` oldest-first candles as a random walk.

    Args:
        count: Number of candles
        timeframe: Bar interval
        base_price: Starting price, jittered by up to +/-0.01
        now: Reference time, defaults to the current UTC time
        seed: Seed for reproducible output

    Returns:
        Candle list with each open equal to the previous close
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)
    step = timedelta(seconds=timeframe.seconds)
    time = align_to_timeframe(now, timeframe) - count * step

    volatility = math.sqrt(timeframe.minutes) / 10
    prev_close = base_price + (rng.random() * 0.02 - 0.01)

    candles = []
    for _ in range(count):
        change = (rng.random() - 0.5) * 0.01 * volatility
        open_price = prev_close
        close = open_price * (1 + change)
        high = max(open_price, close) * (1 + rng.random() * 0.003 * volatility)
        low = min(open_price, close) * (1 - rng.random() * 0.003 * volatility)
        volume = math.floor(rng.random() * 1000 * volatility) + 500

        candles.append(Candle(
            time=time,
            open=open_price,
            high=high,
            low=low,
            close=close,
            volume=volume,
        ))

        time += step
        prev_close = close

    logger.debug("Generated %d synthetic %s candles from %.5f", count, timeframe.value, base_price)
    return candles
