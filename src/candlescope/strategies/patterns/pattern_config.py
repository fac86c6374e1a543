"""
Pattern Detection Configuration

This module defines the thresholds used by the pattern detectors. All ratios
and window sizes are centralized here; the defaults are the detection
constants the engine is calibrated for.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class DojiConfig:
    """Configuration for Doji pattern detection."""
    max_body_ratio: float = 0.1  # 10% of range


@dataclass
class HammerConfig:
    """Configuration for Hammer pattern detection."""
    max_body_ratio: float = 0.3         # 30% of range
    min_lower_shadow_ratio: float = 0.6  # 60% of range


@dataclass
class ShootingStarConfig:
    """Configuration for Shooting Star pattern detection."""
    max_body_ratio: float = 0.3         # 30% of range
    min_upper_shadow_ratio: float = 0.6  # 60% of range


@dataclass
class LevelConfig:
    """Configuration for support/resistance level clustering."""
    min_candles: int = 10
    extremum_neighbors: int = 2  # candles compared on each side
    tolerance: float = 0.0005   # relative distance for merging levels (5 bp)


@dataclass
class DoublePatternConfig:
    """Configuration for Double Top / Double Bottom detection."""
    window: int = 15
    extremum_neighbors: int = 2
    min_separation: int = 3     # candles between the two extremes
    max_difference: float = 0.01  # 1% relative height difference


@dataclass
class PatternDetectionConfig:
    """Master configuration for all pattern detection parameters."""

    # Global settings
    min_candles: int = 10
    window_size: int = 20

    doji: DojiConfig = field(default_factory=DojiConfig)
    hammer: HammerConfig = field(default_factory=HammerConfig)
    shooting_star: ShootingStarConfig = field(default_factory=ShootingStarConfig)
    levels: LevelConfig = field(default_factory=LevelConfig)
    double_pattern: DoublePatternConfig = field(default_factory=DoublePatternConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PatternDetectionConfig':
        """Create configuration from a (possibly partial) dictionary."""
        config_classes = {
            'doji': DojiConfig,
            'hammer': HammerConfig,
            'shooting_star': ShootingStarConfig,
            'levels': LevelConfig,
            'double_pattern': DoublePatternConfig,
        }

        main_config_data = {}
        for key, value in data.items():
            if key in config_classes:
                main_config_data[key] = config_classes[key](**value)
            else:
                main_config_data[key] = value

        return cls(**main_config_data)

    def save_to_file(self, filepath: Path):
        """Save configuration to JSON file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: Path) -> 'PatternDetectionConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)


# Global configuration instance
_config: Optional[PatternDetectionConfig] = None


def get_pattern_config() -> PatternDetectionConfig:
    """Get the global pattern detection configuration."""
    global _config
    if _config is None:
        _config = PatternDetectionConfig()
    return _config


def set_pattern_config(config: PatternDetectionConfig):
    """Set the global pattern detection configuration."""
    global _config
    _config = config


def load_pattern_config(filepath: Path):
    """Load pattern configuration from file and set it as global."""
    set_pattern_config(PatternDetectionConfig.load_from_file(filepath))


def reset_pattern_config():
    """Reset to default configuration."""
    global _config
    _config = None
