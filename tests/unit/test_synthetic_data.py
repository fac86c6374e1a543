"""
Unit tests for the synthetic candle generator.
"""

from datetime import datetime, timedelta, timezone

import pytest

from candlescope.data.synthetic import align_to_timeframe, generate_candles
from candlescope.models.market_data import Timeframe

NOW = datetime(2024, 1, 2, 10, 7, 30, tzinfo=timezone.utc)


class TestAlignToTimeframe:
    """Test interval flooring."""

    @pytest.mark.parametrize("timeframe,expected", [
        (Timeframe.ONE_MINUTE, datetime(2024, 1, 2, 10, 7, tzinfo=timezone.utc)),
        (Timeframe.FIVE_MINUTES, datetime(2024, 1, 2, 10, 5, tzinfo=timezone.utc)),
        (Timeframe.FIFTEEN_MINUTES, datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)),
        (Timeframe.THIRTY_MINUTES, datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)),
    ])
    def test_floors_to_interval(self, timeframe, expected):
        assert align_to_timeframe(NOW, timeframe) == expected

    def test_naive_time_treated_as_utc(self):
        naive = datetime(2024, 1, 2, 10, 7, 30)
        assert align_to_timeframe(naive, Timeframe.FIVE_MINUTES) == datetime(2024, 1, 2, 10, 5, tzinfo=timezone.utc)


class TestGenerateCandles:
    """Test random-walk candle generation."""

    def test_count_and_spacing(self):
        candles = generate_candles(50, Timeframe.FIVE_MINUTES, now=NOW, seed=3)

        assert len(candles) == 50
        steps = {b.time - a.time for a, b in zip(candles, candles[1:])}
        assert steps == {timedelta(minutes=5)}

    def test_last_candle_precedes_current_interval(self):
        candles = generate_candles(10, Timeframe.FIVE_MINUTES, now=NOW, seed=3)
        assert candles[-1].time == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)

    def test_open_continues_previous_close(self):
        candles = generate_candles(30, Timeframe.ONE_MINUTE, now=NOW, seed=5)

        for previous, current in zip(candles, candles[1:]):
            assert current.open == previous.close

    def test_starts_near_base_price(self):
        candles = generate_candles(1, Timeframe.ONE_MINUTE, base_price=2.0, now=NOW, seed=5)
        assert abs(candles[0].open - 2.0) <= 0.01

    def test_ohlc_consistency(self):
        candles = generate_candles(200, Timeframe.THIRTY_MINUTES, now=NOW, seed=11)

        for candle in candles:
            assert candle.high >= max(candle.open, candle.close)
            assert candle.low <= min(candle.open, candle.close)

    def test_volume_range(self):
        volatility = Timeframe.FIFTEEN_MINUTES.minutes ** 0.5 / 10
        candles = generate_candles(200, Timeframe.FIFTEEN_MINUTES, now=NOW, seed=13)

        for candle in candles:
            assert 500 <= candle.volume < 500 + 1000 * volatility

    def test_seed_is_reproducible(self):
        first = generate_candles(40, Timeframe.FIVE_MINUTES, now=NOW, seed=99)
        second = generate_candles(40, Timeframe.FIVE_MINUTES, now=NOW, seed=99)

        assert first == second

    def test_different_seeds_differ(self):
        first = generate_candles(40, Timeframe.FIVE_MINUTES, now=NOW, seed=1)
        second = generate_candles(40, Timeframe.FIVE_MINUTES, now=NOW, seed=2)

        assert first != second

    def test_zero_count(self):
        assert generate_candles(0, Timeframe.FIVE_MINUTES, now=NOW) == []

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            generate_candles(-1, Timeframe.FIVE_MINUTES, now=NOW)
