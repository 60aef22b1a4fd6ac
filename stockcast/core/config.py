"""
Engine Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings from environment variables."""

    # Application
    app_name: str = "StockCast Engine"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Indicator periods
    rsi_period: int = 14
    sma_short_period: int = 20
    sma_long_period: int = 50
    macd_fast_period: int = 12
    macd_slow_period: int = 26
    macd_signal_period: int = 9
    volume_period: int = 20
    levels_lookback: int = 20
    bollinger_period: int = 20
    bollinger_std_dev: float = 2.0

    # Minimum series lengths
    min_macd_points: int = 35
    min_score_points: int = 50

    # Volume confirmation
    high_volume_multiplier: float = 1.5
    low_volume_multiplier: float = 0.7
    high_volume_weight: float = 1.0
    low_volume_weight: float = -0.5

    # Signal scoring
    sma_upper_band: float = 1.005
    sma_lower_band: float = 0.995
    buy_threshold: float = 3.0
    sell_threshold: float = -3.0
    max_score: float = 6.0

    # Forecast
    default_days_ahead: int = 7
    forecast_confidence_floor: float = 50.0
    forecast_confidence_ceiling: float = 95.0
    volatility_penalty_cap: float = 30.0
    default_volatility: float = 0.05
    forecast_seed: Optional[int] = None  # None = fresh entropy per engine

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
