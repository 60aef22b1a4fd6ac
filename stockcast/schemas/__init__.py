"""
StockCast Schema Contracts

This module defines all records exchanged between engine components.
Every record is immutable once constructed.
"""

from stockcast.schemas.market import HistoricalPoint, PriceSeries, ensure_series
from stockcast.schemas.indicators import (
    IndicatorResult,
    IndicatorSnapshot,
    InsufficientData,
    SMAValue,
    RSIValue,
    MACDValue,
    VolumeLabel,
    VolumeClass,
    BollingerBands,
    SupportResistance,
)
from stockcast.schemas.signals import (
    Signal,
    IndicatorVote,
    ScoreAnalysis,
    ScoreBreakdown,
    ScoreResult,
)
from stockcast.schemas.forecast import (
    Direction,
    RiskLevel,
    RegressionFit,
    PathPoint,
    ForecastResult,
)
from stockcast.schemas.trend import Sentiment, TrendStrength, TrendSummary
from stockcast.schemas.analysis import AnalysisRequest, AnalysisResult

__all__ = [
    # Market
    "HistoricalPoint",
    "PriceSeries",
    "ensure_series",
    # Indicators
    "IndicatorResult",
    "IndicatorSnapshot",
    "InsufficientData",
    "SMAValue",
    "RSIValue",
    "MACDValue",
    "VolumeLabel",
    "VolumeClass",
    "BollingerBands",
    "SupportResistance",
    # Signals
    "Signal",
    "IndicatorVote",
    "ScoreAnalysis",
    "ScoreBreakdown",
    "ScoreResult",
    # Forecast
    "Direction",
    "RiskLevel",
    "RegressionFit",
    "PathPoint",
    "ForecastResult",
    # Trend
    "Sentiment",
    "TrendStrength",
    "TrendSummary",
    # Analysis
    "AnalysisRequest",
    "AnalysisResult",
]
