"""
Chart Pattern Recognition

Patterns that need a run of candles rather than the last one or two:
- Support / Resistance levels from clustered local extrema
- Double Top / Double Bottom from matched peaks and troughs

The two families scan for extrema differently. Level clustering treats ties
as extrema (``<=``/``>=``), so a flat stretch can contribute several
adjacent points; peak matching requires strict extrema (``<``/``>``).
"""

import logging
import operator
from typing import Callable, List, Optional, Sequence

from ...models.market_data import Candle
from ...models.signals import PatternBias, PatternType, TradingPattern
from .base import PatternDetector
from .pattern_config import PatternDetectionConfig, get_pattern_config

logger = logging.getLogger(__name__)

Comparison = Callable[[float, float], bool]


def find_local_extrema(values: Sequence[float], neighbors: int, compare: Comparison) -> List[int]:
    """
    Indices whose value beats every neighbour within ``neighbors`` positions.

    ``compare(value, neighbour)`` decides what "beats" means, e.g.
    ``operator.le`` for inclusive minima or ``operator.gt`` for strict maxima.
    The first and last ``neighbors`` positions are never extrema.
    """
    extrema = []
    for i in range(neighbors, len(values) - neighbors):
        value = values[i]
        if all(
            compare(value, values[i + offset])
            for offset in range(-neighbors, neighbors + 1)
            if offset != 0
        ):
            extrema.append(i)
    return extrema


def cluster_levels(levels: Sequence[float], tolerance: float) -> List[float]:
    """
    Greedily merge price levels that lie within ``tolerance`` of each other.

    Each level joins the first existing cluster whose relative distance is
    below ``tolerance`` (the cluster becomes the average of the two), or
    starts a new cluster.
    """
    clusters: List[float] = []
    for level in levels:
        for i, cluster in enumerate(clusters):
            if level and abs(level - cluster) / level < tolerance:
                clusters[i] = (cluster + level) / 2
                break
        else:
            clusters.append(level)
    return clusters


def find_support_level(
    candles: Sequence[Candle],
    config: Optional[PatternDetectionConfig] = None
) -> Optional[float]:
    """
    Nearest clustered support strictly below the last close.

    Returns None for fewer than ``levels.min_candles`` candles or when no
    clustered low sits below the current price.
    """
    config = config or get_pattern_config()
    level_config = config.levels
    if len(candles) < level_config.min_candles:
        return None

    lows = [candle.low for candle in candles]
    minima = find_local_extrema(lows, level_config.extremum_neighbors, operator.le)
    if not minima:
        return None

    clusters = cluster_levels([lows[i] for i in minima], level_config.tolerance)
    current_price = candles[-1].close
    supports = [level for level in clusters if level < current_price]

    logger.debug("Support clusters %s, %d below %.5f", clusters, len(supports), current_price)
    return max(supports) if supports else None


def find_resistance_level(
    candles: Sequence[Candle],
    config: Optional[PatternDetectionConfig] = None
) -> Optional[float]:
    """Nearest clustered resistance strictly above the last close."""
    config = config or get_pattern_config()
    level_config = config.levels
    if len(candles) < level_config.min_candles:
        return None

    highs = [candle.high for candle in candles]
    maxima = find_local_extrema(highs, level_config.extremum_neighbors, operator.ge)
    if not maxima:
        return None

    clusters = cluster_levels([highs[i] for i in maxima], level_config.tolerance)
    current_price = candles[-1].close
    resistances = [level for level in clusters if level > current_price]

    logger.debug("Resistance clusters %s, %d above %.5f", clusters, len(resistances), current_price)
    return min(resistances) if resistances else None


def is_double_top(candles: Sequence[Candle], config: Optional[PatternDetectionConfig] = None) -> bool:
    """Two similar strict peaks, far enough apart, in the last candles."""
    config = config or get_pattern_config()
    highs = [candle.high for candle in candles]
    return _matches_double_extreme(highs, config, operator.gt, highest=True)


def is_double_bottom(candles: Sequence[Candle], config: Optional[PatternDetectionConfig] = None) -> bool:
    """Two similar strict troughs, far enough apart, in the last candles."""
    config = config or get_pattern_config()
    lows = [candle.low for candle in candles]
    return _matches_double_extreme(lows, config, operator.lt, highest=False)


def _matches_double_extreme(
    values: Sequence[float],
    config: PatternDetectionConfig,
    compare: Comparison,
    highest: bool
) -> bool:
    double_config = config.double_pattern
    if len(values) < double_config.window:
        return False

    values = values[-double_config.window:]
    extrema = find_local_extrema(values, double_config.extremum_neighbors, compare)
    if len(extrema) < 2:
        return False

    # Stable sort keeps the earlier index first on equal values
    ranked = sorted(extrema, key=lambda i: values[i], reverse=highest)
    first, second = ranked[0], ranked[1]

    if abs(first - second) < double_config.min_separation:
        return False
    if values[first] == 0:
        return False

    difference = abs(values[first] - values[second]) / values[first]
    return difference < double_config.max_difference


class SupportLevelDetector(PatternDetector):
    """Clustered support below the current price."""

    name = "Support Level"
    pattern_type = PatternType.BULLISH
    bias = PatternBias.BULLISH

    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        level = find_support_level(candles, self.config)
        if level is None:
            return None

        close = candles[-1].close
        if close == 0:
            return self._create_pattern(f"Price above support at {level:.5f}")

        distance_pct = (close - level) / close * 100
        return self._create_pattern(
            f"Price {distance_pct:.2f}% above support at {level:.5f}"
        )


class ResistanceLevelDetector(PatternDetector):
    """Clustered resistance above the current price."""

    name = "Resistance Level"
    pattern_type = PatternType.BEARISH
    bias = PatternBias.BEARISH

    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        level = find_resistance_level(candles, self.config)
        if level is None:
            return None

        close = candles[-1].close
        if close == 0:
            return self._create_pattern(f"Price below resistance at {level:.5f}")

        distance_pct = (level - close) / close * 100
        return self._create_pattern(
            f"Price {distance_pct:.2f}% below resistance at {level:.5f}"
        )


class DoubleTopDetector(PatternDetector):
    """Two peaks of similar height separated by a valley."""

    name = "Double Top"
    pattern_type = PatternType.REVERSAL
    bias = PatternBias.BEARISH
    description = "Bearish reversal pattern"

    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        if not is_double_top(candles, self.config):
            return None
        return self._create_pattern()


class DoubleBottomDetector(PatternDetector):
    """Two troughs of similar depth separated by a peak."""

    name = "Double Bottom"
    pattern_type = PatternType.REVERSAL
    bias = PatternBias.BULLISH
    description = "Bullish reversal pattern"

    def detect(self, candles: Sequence[Candle]) -> Optional[TradingPattern]:
        if not is_double_bottom(candles, self.config):
            return None
        return self._create_pattern()
