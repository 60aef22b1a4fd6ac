"""
Indicator Library Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from stockcast.services.base import BaseService
from stockcast.schemas.market import PriceSeries, SeriesInput
from stockcast.schemas.indicators import IndicatorSnapshot


class IndicatorServiceInterface(BaseService[SeriesInput, IndicatorSnapshot]):
    """
    Indicator Library Service Contract.

    INPUT: PriceSeries (or raw points, validated on entry)
        - ordered historical closes, optional volume/high/low

    OUTPUT: IndicatorSnapshot
        - sma_short / sma_long: SMAValue or InsufficientData
        - rsi: RSIValue (neutral 50 when too short)
        - macd: MACDValue (zero sentinel below the minimum length)
        - volume: VolumeLabel
        - volatility: std-dev of simple returns
        - bollinger: BollingerBands or InsufficientData
        - levels: SupportResistance
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    def execute(self, input_data: SeriesInput) -> IndicatorSnapshot:
        """Calculate every indicator for one series."""
        pass

    @abstractmethod
    def calculate(self, series: PriceSeries) -> IndicatorSnapshot:
        """Calculate every indicator for an already validated series."""
        pass
