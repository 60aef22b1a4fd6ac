"""
Indicator Library Service Implementation

Calculates all technical indicators for a price series.
Pure NumPy calculations; settings decide the periods and thresholds.
"""

import logging
from typing import Optional

from stockcast.core.config import Settings, get_settings
from stockcast.schemas.market import PriceSeries, SeriesInput, ensure_series
from stockcast.schemas.indicators import InsufficientData, IndicatorSnapshot, VolumeLabel
from stockcast.services.indicators.interface import IndicatorServiceInterface
from stockcast.services.indicators.calculations import (
    sma,
    rsi,
    macd,
    volume_analysis,
    volatility,
    bollinger_bands,
    support_resistance,
)

logger = logging.getLogger(__name__)


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Library Service.

    Holds only configuration; every call works on its own copy of the data.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def execute(self, input_data: SeriesInput) -> IndicatorSnapshot:
        """Validate the series and calculate every indicator."""
        return self.calculate(ensure_series(input_data))

    def calculate(self, series: PriceSeries) -> IndicatorSnapshot:
        """Calculate all indicators for a validated series."""
        s = self._settings
        closes = series.closes

        sma_short = sma(closes, s.sma_short_period)
        sma_long = sma(closes, s.sma_long_period)
        for value in (sma_short, sma_long):
            if isinstance(value, InsufficientData):
                logger.warning(
                    f"Insufficient data for {value.indicator}: "
                    f"{value.available} of {value.required} points"
                )

        snapshot = IndicatorSnapshot(
            sma_short=sma_short,
            sma_long=sma_long,
            rsi=rsi(closes, s.rsi_period),
            macd=macd(
                closes,
                s.macd_fast_period,
                s.macd_slow_period,
                s.macd_signal_period,
                min_points=s.min_macd_points,
            ),
            volume=self.volume(series),
            volatility=volatility(closes, default=s.default_volatility),
            bollinger=bollinger_bands(closes, s.bollinger_period, s.bollinger_std_dev),
            levels=support_resistance(
                series.highs, series.lows, closes, lookback=s.levels_lookback
            ),
        )

        logger.debug(
            f"Indicators for {len(series)} points: rsi={snapshot.rsi.value:.2f} "
            f"macd_hist={snapshot.macd.histogram:.4f} vol={snapshot.volatility:.4f}"
        )
        return snapshot

    def volume(self, series: PriceSeries) -> VolumeLabel:
        """Volume confirmation label using the configured multipliers."""
        s = self._settings
        return volume_analysis(
            series.volumes,
            s.volume_period,
            high_multiplier=s.high_volume_multiplier,
            low_multiplier=s.low_volume_multiplier,
            high_weight=s.high_volume_weight,
            low_weight=s.low_volume_weight,
        )


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
