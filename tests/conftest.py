"""
Pytest configuration and fixtures for candlescope tests.
"""

import os
from typing import Generator, List

import pytest
from unittest.mock import patch

from candlescope.models.market_data import Candle
from candlescope.strategies.patterns.pattern_config import reset_pattern_config
from factories import candles_from_closes


@pytest.fixture(autouse=True)
def default_pattern_config() -> Generator[None, None, None]:
    """Every test starts and ends with the default pattern thresholds."""
    reset_pattern_config()
    yield
    reset_pattern_config()


@pytest.fixture
def flat_candles() -> List[Candle]:
    """Twenty identical candles with zero range."""
    return candles_from_closes([1.05] * 20)


@pytest.fixture
def mock_env_vars() -> Generator[dict, None, None]:
    """Mock environment variables for testing."""
    test_env = {
        "LOG_LEVEL": "DEBUG",
        "LOG_MAX_SIZE": "5MB",
        "LOG_BACKUP_COUNT": "2",
        "DEFAULT_TIMEFRAME": "15m",
        "SYNTHETIC_CANDLE_COUNT": "60",
        "SYNTHETIC_BASE_PRICE": "1.25",
    }

    with patch.dict(os.environ, test_env, clear=False):
        yield test_env
