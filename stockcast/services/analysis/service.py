"""
Analysis Service Implementation

Runs the whole engine on one series:
    Validation → Signal Scorer → Forecast Engine → Levels → Trend Analyzer

Owns no math; every number comes from the component services.
"""

import logging
from datetime import date
from typing import Optional

import numpy as np

from stockcast.core.config import Settings, get_settings
from stockcast.schemas.analysis import AnalysisRequest, AnalysisResult
from stockcast.schemas.market import PriceSeries, SeriesInput, ensure_series
from stockcast.services.base import BaseService
from stockcast.services.forecast.service import ForecastEngine
from stockcast.services.indicators.calculations import support_resistance
from stockcast.services.signals.service import SignalScorer
from stockcast.services.trend.service import TrendAnalyzer

logger = logging.getLogger(__name__)


class AnalysisService(BaseService[AnalysisRequest, AnalysisResult]):
    """
    Analysis Service.

    Validates the series once and hands the same immutable series to
    every component.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._scorer = SignalScorer(self._settings)
        self._forecaster = ForecastEngine(self._settings)
        self._trend = TrendAnalyzer()

    @property
    def name(self) -> str:
        return "AnalysisService"

    def execute(self, input_data: AnalysisRequest) -> AnalysisResult:
        return self.analyze(
            input_data.series,
            days_ahead=input_data.days_ahead,
            rng=input_data.rng,
            start_date=input_data.start_date,
        )

    def analyze(
        self,
        data: SeriesInput,
        days_ahead: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        start_date: Optional[date] = None,
    ) -> AnalysisResult:
        """Score, forecast and summarize one series."""
        series: PriceSeries = ensure_series(data)
        logger.info(f"Analyzing series of {len(series)} points")

        score = self._scorer.score(series)
        forecast = self._forecaster.predict(
            series, days_ahead=days_ahead, rng=rng, start_date=start_date
        )
        levels = support_resistance(
            series.highs,
            series.lows,
            series.closes,
            lookback=self._settings.levels_lookback,
        )
        trend = self._trend.from_score(score)

        logger.info(
            f"Analysis complete: {score.signal.value} ({score.confidence:.1f}%), "
            f"forecast {forecast.direction.value} {forecast.price_change_percent:+.2f}% "
            f"over {forecast.days}d, trend {trend.sentiment.value}"
        )

        return AnalysisResult(score=score, forecast=forecast, levels=levels, trend=trend)


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
