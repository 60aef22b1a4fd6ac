"""
Indicator Library

CONTRACT:
    Input:  PriceSeries (closes, optional volume/high/low)
    Output: IndicatorSnapshot

RESPONSIBILITIES:
    - Moving averages (SMA, EMA, exponential smoothing)
    - Momentum (RSI with Wilder smoothing, MACD with crossover history)
    - Volume confirmation against its moving average
    - Volatility of simple returns, Bollinger Bands
    - Support/resistance tiers

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from stockcast.services.indicators.interface import IndicatorServiceInterface
from stockcast.services.indicators.service import IndicatorService, get_indicator_service
from stockcast.services.indicators.calculations import (
    sma,
    ema,
    exponential_smoothing,
    rsi,
    macd,
    volume_analysis,
    volatility,
    bollinger_bands,
    support_resistance,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
    "sma",
    "ema",
    "exponential_smoothing",
    "rsi",
    "macd",
    "volume_analysis",
    "volatility",
    "bollinger_bands",
    "support_resistance",
]
