"""
Forecast Engine Service Interface

Defines the contract for the price forecast layer.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

import numpy as np

from stockcast.services.base import BaseService
from stockcast.schemas.market import PriceSeries, SeriesInput
from stockcast.schemas.forecast import ForecastResult


@dataclass
class ForecastInput:
    """Input for a forecast."""

    series: SeriesInput
    days_ahead: Optional[int] = None
    start_date: Optional[date] = None
    rng: Optional[np.random.Generator] = None


class ForecastEngineInterface(BaseService[ForecastInput, ForecastResult]):
    """
    Forecast Engine Service Contract.

    INPUT: ForecastInput
        - series: ordered price series (2+ points for a real fit)
        - days_ahead: forecast horizon in days (defaults to settings)
        - start_date: date of path day 0 (defaults to today)
        - rng: noise generator for the path (defaults to a seeded one)

    OUTPUT: ForecastResult
        - target_price / direction / confidence: from the regression fit
        - prediction_path: interpolated path with seeded uniform noise
        - risk_level: Low / Medium / High from volatility and horizon

    The noise generator is injected; it never influences target_price,
    direction or confidence.
    """

    @property
    def name(self) -> str:
        return "ForecastEngine"

    @abstractmethod
    def execute(self, input_data: ForecastInput) -> ForecastResult:
        """Validate the input and forecast."""
        pass

    @abstractmethod
    def predict(
        self,
        series: PriceSeries,
        days_ahead: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        start_date: Optional[date] = None,
    ) -> ForecastResult:
        """Forecast an already validated series."""
        pass
