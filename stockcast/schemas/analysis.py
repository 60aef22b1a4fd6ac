"""
CONTRACT 6: Combined Analysis

Input: AnalysisRequest
Output: AnalysisResult (score + forecast + levels + trend)
"""

from datetime import date
from typing import Optional

import numpy as np
from pydantic import BaseModel, Field

from stockcast.schemas.forecast import ForecastResult
from stockcast.schemas.indicators import SupportResistance
from stockcast.schemas.market import PriceSeries
from stockcast.schemas.signals import ScoreResult
from stockcast.schemas.trend import TrendSummary


class AnalysisRequest(BaseModel):
    """Series plus forecast horizon and path noise source."""

    series: PriceSeries
    days_ahead: Optional[int] = Field(
        default=None,
        ge=1,
        description="Forecast horizon; defaults to the configured value",
    )
    start_date: Optional[date] = Field(
        default=None, description="Date of forecast path day 0; defaults to today"
    )
    rng: Optional[np.random.Generator] = Field(
        default=None,
        description="Noise generator for the forecast path; defaults to forecast_seed",
        exclude=True,
    )

    class Config:
        arbitrary_types_allowed = True


class AnalysisResult(BaseModel):
    """Everything the engine knows about one series."""

    score: ScoreResult
    forecast: ForecastResult
    levels: SupportResistance
    trend: TrendSummary

    class Config:
        frozen = True
