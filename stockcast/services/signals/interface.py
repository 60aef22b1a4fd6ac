"""
Signal Scorer Service Interface

Defines the contract for the signal scoring layer.
"""

from abc import abstractmethod
from typing import Union

from stockcast.services.base import BaseService
from stockcast.schemas.market import PriceSeries, SeriesInput
from stockcast.schemas.indicators import (
    InsufficientData,
    MACDValue,
    RSIValue,
    SMAValue,
    VolumeLabel,
)
from stockcast.schemas.signals import ScoreBreakdown, ScoreResult


class SignalScorerInterface(BaseService[SeriesInput, ScoreResult]):
    """
    Signal Scorer Service Contract.

    INPUT: PriceSeries (at least 50 points for a full score)

    OUTPUT: ScoreResult
        - signal: Buy / Sell / Hold
        - confidence: 0-100
        - analysis: text per indicator (sma, rsi, macd, volume)
        - breakdown: votes and totals (None when the series is too short)

    DECISION RULES:
        score >= +3  -> Buy
        score <= -3  -> Sell
        otherwise    -> Hold
    """

    @property
    def name(self) -> str:
        return "SignalScorer"

    @abstractmethod
    def execute(self, input_data: SeriesInput) -> ScoreResult:
        """Validate the series and score it."""
        pass

    @abstractmethod
    def score(self, series: PriceSeries) -> ScoreResult:
        """Score an already validated series."""
        pass

    @abstractmethod
    def score_indicators(
        self,
        sma_short: Union[SMAValue, InsufficientData],
        sma_long: Union[SMAValue, InsufficientData],
        rsi: RSIValue,
        macd: MACDValue,
        volume: VolumeLabel,
    ) -> ScoreBreakdown:
        """Combine precomputed indicator values into a scored breakdown."""
        pass
