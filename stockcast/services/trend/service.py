"""
Trend Analyzer Implementation

Counts bullish against bearish indicator signals for a quick
qualitative summary.
"""

import logging
from typing import Any, Mapping, Optional

from stockcast.schemas.signals import ScoreResult, Signal
from stockcast.schemas.trend import Sentiment, TrendStrength, TrendSummary
from stockcast.services.base import BaseService, ValidationError

logger = logging.getLogger(__name__)

# Strength reported when no signal is directional
NO_SIGNAL_STRENGTH = 0.5


def _as_signal(name: str, value: Any) -> Signal:
    """Accept a Signal, its string value, a mapping or an object exposing `signal`."""
    if isinstance(value, Mapping):
        value = value.get("signal")
    elif hasattr(value, "signal") and not isinstance(value, str):
        value = value.signal
    if isinstance(value, Signal):
        return value
    if isinstance(value, str):
        for signal in Signal:
            if value.strip().lower() == signal.value.lower():
                return signal
    raise ValidationError(
        "TrendAnalyzer",
        f"Unknown signal for {name!r}",
        details={"indicator": name, "signal": repr(value)},
    )


def classify_strength(strength: float) -> TrendStrength:
    if strength > 0.6:
        return TrendStrength.STRONG
    if strength > 0.3:
        return TrendStrength.MODERATE
    return TrendStrength.WEAK


class TrendAnalyzer(BaseService[Mapping[str, Any], TrendSummary]):
    """
    Trend Analyzer.

    INPUT: {indicator name: Buy / Sell / Hold}
    OUTPUT: TrendSummary with sentiment, strength label and counts
    """

    @property
    def name(self) -> str:
        return "TrendAnalyzer"

    def execute(self, input_data: Mapping[str, Any]) -> TrendSummary:
        """Summarize a map of indicator signals."""
        return self.analyze(input_data)

    def analyze(self, signals: Mapping[str, Any]) -> TrendSummary:
        resolved = [_as_signal(name, value) for name, value in signals.items()]
        bullish = sum(1 for s in resolved if s == Signal.BUY)
        bearish = sum(1 for s in resolved if s == Signal.SELL)
        total = bullish + bearish

        if bullish > bearish:
            sentiment = Sentiment.BULLISH
        elif bearish > bullish:
            sentiment = Sentiment.BEARISH
        else:
            sentiment = Sentiment.NEUTRAL

        strength = abs(bullish - bearish) / total if total > 0 else NO_SIGNAL_STRENGTH

        logger.debug(f"Trend: {bullish} bullish / {bearish} bearish -> {sentiment.value}")

        return TrendSummary(
            sentiment=sentiment,
            strength=classify_strength(strength),
            strength_value=strength,
            bullish_signals=bullish,
            bearish_signals=bearish,
            total_signals=total,
        )

    def from_score(self, score: ScoreResult) -> TrendSummary:
        """Summarize the per-indicator votes of a scored signal."""
        if score.breakdown is None:
            return self.analyze({})

        b = score.breakdown
        return self.analyze(
            {
                "sma": b.sma_signal.signal,
                "rsi": b.rsi_signal.signal,
                "macd": b.macd_signal.signal,
            }
        )


# Singleton instance
_service_instance: Optional[TrendAnalyzer] = None


def get_trend_analyzer() -> TrendAnalyzer:
    """Get or create trend analyzer instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = TrendAnalyzer()
    return _service_instance
