"""
Configuration management for the candlescope analysis toolkit.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .models.market_data import Timeframe


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default=None)
    max_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=0)

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        v = v.upper().strip()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown logging level: {v}")
        return v


class AnalysisConfig(BaseModel):
    """Defaults for analysis runs driven from the command line."""

    default_timeframe: Timeframe = Field(default=Timeframe.FIVE_MINUTES)
    synthetic_candle_count: int = Field(default=100, ge=1, le=5000)
    synthetic_base_price: float = Field(default=1.05, gt=0)


class Config(BaseModel):
    """Main configuration class."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Try to load from .env file in current directory
            env_path = Path(".env")
            if env_path.exists():
                load_dotenv(env_path)

        logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            file_path=os.getenv("LOG_FILE_PATH") or None,
            max_size=os.getenv("LOG_MAX_SIZE", "10MB"),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5"))
        )

        analysis = AnalysisConfig(
            default_timeframe=Timeframe(os.getenv("DEFAULT_TIMEFRAME", "5m")),
            synthetic_candle_count=int(os.getenv("SYNTHETIC_CANDLE_COUNT", "100")),
            synthetic_base_price=float(os.getenv("SYNTHETIC_BASE_PRICE", "1.05"))
        )

        return cls(logging=logging, analysis=analysis)
