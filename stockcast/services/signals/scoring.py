"""
Signal Scoring Rules

Turns indicator values into weighted votes and a final decision.

Weights:
    SMA crossover   +1 / -1
    RSI level       +2 / +1 / -1 / -2
    MACD state      +2 (crossover) / +1 (trend) and the mirror for sells
    Volume          amplifies a non-zero score on high volume,
                    dampens it on low volume
"""

from typing import Union

from stockcast.schemas.indicators import (
    InsufficientData,
    MACDValue,
    RSIValue,
    SMAValue,
    VolumeLabel,
)
from stockcast.schemas.signals import NOT_ENOUGH_DATA, IndicatorVote, Signal


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def sma_vote(
    sma_short: Union[SMAValue, InsufficientData],
    sma_long: Union[SMAValue, InsufficientData],
    upper_band: float = 1.005,
    lower_band: float = 0.995,
) -> IndicatorVote:
    """Short SMA against long SMA, with a small band to ignore noise."""
    if isinstance(sma_short, InsufficientData) or isinstance(sma_long, InsufficientData):
        return IndicatorVote(indicator="sma", score=0, description=NOT_ENOUGH_DATA)

    short, long_ = sma_short.value, sma_long.value
    short_label = f"SMA{sma_short.period}"
    long_label = f"SMA{sma_long.period}"

    if short > long_ * upper_band:
        return IndicatorVote(
            indicator="sma",
            score=1,
            description=f"Bullish Crossover ({short_label} > {long_label})",
        )
    if short < long_ * lower_band:
        return IndicatorVote(
            indicator="sma",
            score=-1,
            description=f"Bearish Crossover ({short_label} < {long_label})",
        )
    return IndicatorVote(indicator="sma", score=0, description="Neutral (SMAs Close)")


def rsi_vote(rsi: RSIValue) -> IndicatorVote:
    """Oversold readings vote buy, overbought readings vote sell."""
    value = rsi.value

    if value < 30:
        score, label = 2, "Oversold"
    elif value < 40:
        score, label = 1, "Approaching Oversold"
    elif value > 70:
        score, label = -2, "Overbought"
    elif value > 60:
        score, label = -1, "Approaching Overbought"
    else:
        score, label = 0, "Neutral"

    return IndicatorVote(indicator="rsi", score=score, description=f"{label} ({value:.1f})")


def macd_vote(macd: MACDValue) -> IndicatorVote:
    """Histogram zero-crossings vote strongly; a sustained side votes weakly."""
    hist, prev = macd.histogram, macd.previous_histogram

    if hist > 0 and prev <= 0:
        return IndicatorVote(
            indicator="macd", score=2, description="Bullish Crossover (Histogram crossed Zero)"
        )
    if hist < 0 and prev >= 0:
        return IndicatorVote(
            indicator="macd", score=-2, description="Bearish Crossover (Histogram crossed Zero)"
        )
    if hist > 0 and macd.macd_line > macd.signal_line:
        return IndicatorVote(indicator="macd", score=1, description="Bullish (MACD > Signal Line)")
    if hist < 0 and macd.macd_line < macd.signal_line:
        return IndicatorVote(indicator="macd", score=-1, description="Bearish (MACD < Signal Line)")
    return IndicatorVote(indicator="macd", score=0, description="Neutral")


def apply_volume(score: float, volume: VolumeLabel) -> float:
    """Push the score away from zero on high volume, towards zero on low."""
    if score > 0:
        return score + volume.weight
    if score < 0:
        return score - volume.weight
    return score


def decide(
    score: float,
    buy_threshold: float = 3.0,
    sell_threshold: float = -3.0,
    max_score: float = 6.0,
) -> tuple[Signal, float]:
    """
    Map a total score to a signal and a confidence in [0, 100].

    Buy/Sell confidence scales from 75 at the threshold to 100 at max_score.
    Hold confidence is 70 at a score of zero and falls towards the thresholds.
    """
    if score >= buy_threshold:
        signal = Signal.BUY
        confidence = 75 + (score - buy_threshold) / (max_score - buy_threshold) * 25
    elif score <= sell_threshold:
        signal = Signal.SELL
        confidence = 75 + (abs(score) - abs(sell_threshold)) / (max_score - abs(sell_threshold)) * 25
    else:
        signal = Signal.HOLD
        confidence = 70 - (abs(score) / max(buy_threshold, abs(sell_threshold))) * 20

    return signal, _clamp(confidence, 0, 100)
