"""
Signal Scorer Service Implementation

Combines SMA crossover, RSI level, MACD state and volume confirmation
into one directional score, a discrete signal and a confidence.
"""

import logging
from typing import Optional, Union

from stockcast.core.config import Settings, get_settings
from stockcast.schemas.market import PriceSeries, SeriesInput, ensure_series
from stockcast.schemas.indicators import (
    InsufficientData,
    MACDValue,
    RSIValue,
    SMAValue,
    VolumeLabel,
)
from stockcast.schemas.signals import ScoreAnalysis, ScoreBreakdown, ScoreResult, Signal
from stockcast.services.indicators.calculations import macd, rsi, sma
from stockcast.services.indicators.service import IndicatorService
from stockcast.services.signals.interface import SignalScorerInterface
from stockcast.services.signals.scoring import (
    apply_volume,
    decide,
    macd_vote,
    rsi_vote,
    sma_vote,
)

logger = logging.getLogger(__name__)


class SignalScorer(SignalScorerInterface):
    """
    Signal Scorer.

    Weighted vote of four indicators. Deterministic: the same series
    always produces the same result.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._indicators = IndicatorService(self._settings)

    def execute(self, input_data: SeriesInput) -> ScoreResult:
        """Validate the series and score it."""
        return self.score(ensure_series(input_data))

    def score(self, series: PriceSeries) -> ScoreResult:
        """Score a validated series."""
        s = self._settings

        if len(series) < s.min_score_points:
            logger.warning(
                f"Not enough data to score: {len(series)} of {s.min_score_points} points"
            )
            return ScoreResult(
                signal=Signal.HOLD,
                confidence=50.0,
                analysis=ScoreAnalysis.insufficient(),
            )

        closes = series.closes
        breakdown = self.score_indicators(
            sma_short=sma(closes, s.sma_short_period),
            sma_long=sma(closes, s.sma_long_period),
            rsi=rsi(closes, s.rsi_period),
            macd=macd(
                closes,
                s.macd_fast_period,
                s.macd_slow_period,
                s.macd_signal_period,
                min_points=s.min_macd_points,
            ),
            volume=self._indicators.volume(series),
        )

        return ScoreResult(
            signal=breakdown.signal,
            confidence=breakdown.confidence,
            analysis=ScoreAnalysis(
                sma=breakdown.sma_signal.description,
                rsi=breakdown.rsi_signal.description,
                macd=breakdown.macd_signal.description,
                volume=breakdown.volume_label,
            ),
            breakdown=breakdown,
        )

    def score_indicators(
        self,
        sma_short: Union[SMAValue, InsufficientData],
        sma_long: Union[SMAValue, InsufficientData],
        rsi: RSIValue,
        macd: MACDValue,
        volume: VolumeLabel,
    ) -> ScoreBreakdown:
        """Combine precomputed indicator values into a scored breakdown."""
        s = self._settings

        sma_signal = sma_vote(sma_short, sma_long, s.sma_upper_band, s.sma_lower_band)
        rsi_signal = rsi_vote(rsi)
        macd_signal = macd_vote(macd)

        trend_score = sma_signal.score + rsi_signal.score + macd_signal.score
        total_score = apply_volume(trend_score, volume)
        signal, confidence = decide(
            total_score, s.buy_threshold, s.sell_threshold, s.max_score
        )

        logger.debug(
            f"Score: sma={sma_signal.score} rsi={rsi_signal.score} "
            f"macd={macd_signal.score} volume={volume.classification.value} "
            f"total={total_score} -> {signal.value} ({confidence:.1f}%)"
        )

        return ScoreBreakdown(
            sma_signal=sma_signal,
            rsi_signal=rsi_signal,
            macd_signal=macd_signal,
            volume_label=volume.classification.value,
            volume_weight=volume.weight,
            trend_score=trend_score,
            total_score=total_score,
            signal=signal,
            confidence=confidence,
        )


# Singleton instance
_service_instance: Optional[SignalScorer] = None


def get_signal_scorer() -> SignalScorer:
    """Get or create signal scorer instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SignalScorer()
    return _service_instance
