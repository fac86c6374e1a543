"""
Pattern detector base class.

Every detector looks at the trailing analysis window (oldest first) and
either returns one TradingPattern or None. Detectors are independent of each
other and keep no state between calls.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...models.market_data import Candle
from ...models.signals import PatternBias, PatternType, TradingPattern
from .pattern_config import PatternDetectionConfig, get_pattern_config


class PatternDetector(ABC):
    """Abstract base class for all pattern detectors."""

    name: str = ""
    pattern_type: PatternType = PatternType.REVERSAL
    bias: PatternBias = PatternBias.NEUTRAL
    description: str = ""

    def __init__(self, config: Optional[PatternDetectionConfig] = None):
        self.config = config or get_pattern_config()

    @abstractmethod
    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        """
        Detect the pattern in the analysis window.

        Args:
            candles: Trailing window of the candle sequence, oldest first

        Returns:
            TradingPattern if detected, None otherwise
        """

    def _create_pattern(self, description: Optional[str] = None) -> TradingPattern:
        """Create a TradingPattern with this detector's classification."""
        return TradingPattern(
            name=self.name,
            type=self.pattern_type,
            bias=self.bias,
            description=description or self.description,
        )
