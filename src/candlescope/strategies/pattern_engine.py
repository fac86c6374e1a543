"""
Pattern Engine

Runs every pattern detector against the trailing window of a candle
sequence and collects whatever matched. Detectors never suppress each other,
so one call can report contradictory patterns (e.g. a Hammer next to a
Resistance Level); reconciling them is up to the display layer.
"""

import logging
from typing import List, Optional, Sequence

from ..models.market_data import Candle
from ..models.signals import MarketReport, TradingPattern
from .patterns import (
    BearishEngulfingDetector,
    BullishEngulfingDetector,
    DojiDetector,
    DoubleBottomDetector,
    DoubleTopDetector,
    HammerDetector,
    PatternDetectionConfig,
    ResistanceLevelDetector,
    ShootingStarDetector,
    SupportLevelDetector,
    get_pattern_config,
)
from .signal_generator import SignalGenerator

logger = logging.getLogger(__name__)


class PatternRecognizer:
    """
    Main class for pattern recognition.

    Coordinates all detectors in a fixed evaluation order; the output keeps
    that order.
    """

    def __init__(self, config: Optional[PatternDetectionConfig] = None):
        """Initialize with all pattern detectors."""
        self.config = config or get_pattern_config()
        self.detectors = [
            DojiDetector(self.config),
            BullishEngulfingDetector(self.config),
            BearishEngulfingDetector(self.config),
            SupportLevelDetector(self.config),
            ResistanceLevelDetector(self.config),
            HammerDetector(self.config),
            ShootingStarDetector(self.config),
            DoubleTopDetector(self.config),
            DoubleBottomDetector(self.config),
        ]

    def detect(self, candles: Sequence[Candle]) -> List[TradingPattern]:
        """
        Detect patterns in a candle sequence (oldest first).

        Args:
            candles: Full candle sequence; only the trailing window is examined

        Returns:
            Detected patterns in detector order, empty for short sequences
        """
        if len(candles) < self.config.min_candles:
            logger.debug(
                "Insufficient history for patterns: %d candles, need %d",
                len(candles), self.config.min_candles
            )
            return []

        window = list(candles[-self.config.window_size:])

        patterns = []
        for detector in self.detectors:
            pattern = detector.detect(window)
            if pattern is not None:
                patterns.append(pattern)

        logger.debug("Detected %d patterns: %s", len(patterns), [p.name for p in patterns])
        return patterns


def detect(candles: Sequence[Candle]) -> List[TradingPattern]:
    """Detect patterns in ``candles`` with the active pattern configuration."""
    return PatternRecognizer().detect(candles)


def analyze_market(
    candles: Sequence[Candle],
    signal_generator: Optional[SignalGenerator] = None,
    recognizer: Optional[PatternRecognizer] = None
) -> MarketReport:
    """Run the signal engine, then the pattern engine, over the same candles."""
    signal_generator = signal_generator or SignalGenerator()
    recognizer = recognizer or PatternRecognizer()

    return MarketReport(
        analysis=signal_generator.analyze(candles),
        patterns=recognizer.detect(candles)
    )
