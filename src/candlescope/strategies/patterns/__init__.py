"""
Candlestick and Chart Pattern Recognition Module

Pattern Types:
- Single candlestick patterns (Doji, Hammer, Shooting Star)
- Multi-candlestick patterns (Bullish/Bearish Engulfing)
- Chart patterns (Support/Resistance levels, Double Top/Bottom)
"""

from .base import PatternDetector
from .chart_patterns import (
    DoubleBottomDetector,
    DoubleTopDetector,
    ResistanceLevelDetector,
    SupportLevelDetector,
    cluster_levels,
    find_local_extrema,
    find_resistance_level,
    find_support_level,
    is_double_bottom,
    is_double_top,
)
from .multi_candlestick import BearishEngulfingDetector, BullishEngulfingDetector
from .pattern_config import (
    PatternDetectionConfig,
    get_pattern_config,
    load_pattern_config,
    reset_pattern_config,
    set_pattern_config,
)
from .single_candlestick import DojiDetector, HammerDetector, ShootingStarDetector

__all__ = [
    "PatternDetector",
    "DojiDetector",
    "BullishEngulfingDetector",
    "BearishEngulfingDetector",
    "SupportLevelDetector",
    "ResistanceLevelDetector",
    "HammerDetector",
    "ShootingStarDetector",
    "DoubleTopDetector",
    "DoubleBottomDetector",
    "cluster_levels",
    "find_local_extrema",
    "find_support_level",
    "find_resistance_level",
    "is_double_top",
    "is_double_bottom",
    "PatternDetectionConfig",
    "get_pattern_config",
    "load_pattern_config",
    "reset_pattern_config",
    "set_pattern_config",
]
