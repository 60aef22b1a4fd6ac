"""
Technical Indicator Calculations

Pure NumPy implementations of the engine's indicators.
All math is deterministic: the same input always yields the same output.

Data-adequacy is never an error here: short inputs produce the documented
sentinel (InsufficientData, neutral RSI 50, zero MACD, default volatility).
Malformed inputs (non-numeric or non-finite values, bad periods) raise
ValidationError.
"""

from typing import Sequence, Union

import numpy as np

from stockcast.schemas.indicators import (
    BollingerBands,
    InsufficientData,
    MACDValue,
    RSIValue,
    SMAValue,
    SupportResistance,
    VolumeClass,
    VolumeLabel,
)
from stockcast.services.base import ValidationError

ArrayLike = Union[np.ndarray, Sequence[float]]

NEUTRAL_RSI = 50.0
DEFAULT_VOLATILITY = 0.05


# =============================================================================
# INPUT HELPERS
# =============================================================================


def as_array(values: ArrayLike, label: str = "values", allow_missing: bool = False) -> np.ndarray:
    """
    Convert input to a 1-D float array, rejecting non-numeric data.

    With allow_missing, NaN marks a missing value and is kept; infinities
    are still rejected.
    """
    try:
        data = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValidationError("IndicatorLibrary", f"{label} must be numeric") from e

    if data.ndim != 1:
        raise ValidationError("IndicatorLibrary", f"{label} must be one-dimensional")
    valid = np.isfinite(data)
    if allow_missing:
        valid |= np.isnan(data)
    if not np.all(valid):
        raise ValidationError("IndicatorLibrary", f"{label} must be finite numbers")
    return data


def _check_period(period: int, indicator: str) -> None:
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)) or period < 1:
        raise ValidationError(
            "IndicatorLibrary",
            f"{indicator} period must be a positive integer",
            details={"period": period},
        )


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(values: ArrayLike, period: int) -> Union[SMAValue, InsufficientData]:
    """Simple Moving Average of the last `period` values."""
    _check_period(period, "SMA")
    data = as_array(values)

    if len(data) < period:
        return InsufficientData(indicator="SMA", required=period, available=len(data))

    return SMAValue(period=period, value=float(np.mean(data[-period:])))


def ema(values: ArrayLike, period: int) -> np.ndarray:
    """
    Exponential Moving Average, seeded with the first value.

    E[i] = price[i] * k + E[i-1] * (1 - k), k = 2 / (period + 1).

    Returns an array the same length as the input, or an empty array
    when there are fewer than `period` values.
    """
    _check_period(period, "EMA")
    data = as_array(values)

    if len(data) < period:
        return np.array([], dtype=float)

    multiplier = 2 / (period + 1)
    result = np.empty(len(data))
    result[0] = data[0]

    for i in range(1, len(data)):
        if data[i] == result[i - 1]:
            # the recurrence is the identity here
            result[i] = result[i - 1]
        else:
            result[i] = data[i] * multiplier + result[i - 1] * (1 - multiplier)

    return result


def exponential_smoothing(values: ArrayLike, alpha: float = 0.3) -> np.ndarray:
    """Single exponential smoothing with factor alpha in (0, 1]."""
    if not 0 < alpha <= 1:
        raise ValidationError(
            "IndicatorLibrary", "alpha must be in (0, 1]", details={"alpha": alpha}
        )
    data = as_array(values)

    if len(data) == 0:
        return np.array([], dtype=float)

    result = np.empty(len(data))
    result[0] = data[0]
    for i in range(1, len(data)):
        result[i] = alpha * data[i] + (1 - alpha) * result[i - 1]

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: ArrayLike, period: int = 14) -> RSIValue:
    """
    Relative Strength Index with Wilder smoothing.

    Needs more than `period` closes; otherwise neutral (50).
    A series with no movement at all is also neutral.
    """
    _check_period(period, "RSI")
    data = as_array(closes, "closes")

    if len(data) <= period:
        return RSIValue(value=NEUTRAL_RSI)

    deltas = np.diff(data)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    # First average over the first `period` changes
    avg_gain = float(np.mean(gains[:period]))
    avg_loss = float(np.mean(losses[:period]))

    # Wilder smoothing for the rest
    for i in range(period, len(deltas)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period

    if avg_loss == 0:
        return RSIValue(value=NEUTRAL_RSI if avg_gain == 0 else 100.0)

    rs = avg_gain / avg_loss
    value = 100 - (100 / (1 + rs))
    return RSIValue(value=min(100.0, max(0.0, value)))


def macd(
    closes: ArrayLike,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    min_points: int = 35,
) -> MACDValue:
    """
    MACD (Moving Average Convergence Divergence).

    Returns the latest MACD line, signal line and histogram, plus the
    histogram one step earlier for crossover detection. Series shorter
    than `min_points` get the all-zero sentinel.
    """
    data = as_array(closes, "closes")

    if len(data) < max(min_points, 2):
        return MACDValue.zero()

    fast_ema = ema(data, fast_period)
    slow_ema = ema(data, slow_period)

    # Align the fast series onto the slow one
    offset = len(fast_ema) - len(slow_ema)
    macd_line = fast_ema[offset:] - slow_ema

    signal_line = ema(macd_line, signal_period)
    if len(signal_line) < 2:
        return MACDValue.zero()

    return MACDValue(
        macd_line=float(macd_line[-1]),
        signal_line=float(signal_line[-1]),
        histogram=float(macd_line[-1] - signal_line[-1]),
        previous_histogram=float(macd_line[-2] - signal_line[-2]),
    )


# =============================================================================
# VOLUME
# =============================================================================


def volume_analysis(
    volumes: ArrayLike,
    period: int = 20,
    high_multiplier: float = 1.5,
    low_multiplier: float = 0.7,
    high_weight: float = 1.0,
    low_weight: float = -0.5,
) -> VolumeLabel:
    """
    Classify the latest volume against its moving average.

    High volume confirms a trend (positive weight), low volume weakens it.
    Missing volumes are NaN. The average covers only the points of the
    last `period` that have a volume. Without a latest volume or a usable
    average the label is Normal with zero weight.
    """
    _check_period(period, "Volume")
    data = as_array(volumes, "volumes", allow_missing=True)

    if not len(data) or np.isnan(data[-1]):
        return VolumeLabel(classification=VolumeClass.NORMAL, weight=0.0)

    latest = float(data[-1])
    if len(data) < period:
        return VolumeLabel(classification=VolumeClass.NORMAL, weight=0.0, latest=latest)

    window = data[-period:]
    average = float(np.mean(window[~np.isnan(window)]))
    if average <= 0:
        return VolumeLabel(classification=VolumeClass.NORMAL, weight=0.0, latest=latest)

    if latest > average * high_multiplier:
        classification, weight = VolumeClass.HIGH, high_weight
    elif latest < average * low_multiplier:
        classification, weight = VolumeClass.LOW, low_weight
    else:
        classification, weight = VolumeClass.NORMAL, 0.0

    return VolumeLabel(
        classification=classification, weight=weight, latest=latest, average=average
    )


# =============================================================================
# VOLATILITY
# =============================================================================


def volatility(closes: ArrayLike, default: float = DEFAULT_VOLATILITY) -> float:
    """Population standard deviation of simple returns."""
    data = as_array(closes, "closes")

    if len(data) < 2:
        return default

    if np.any(data[:-1] == 0):
        raise ValidationError("IndicatorLibrary", "closes must be non-zero to compute returns")

    returns = np.diff(data) / data[:-1]
    return float(np.std(returns))


def bollinger_bands(
    closes: ArrayLike, period: int = 20, std_dev: float = 2.0
) -> Union[BollingerBands, InsufficientData]:
    """Bollinger Bands over the last `period` closes."""
    _check_period(period, "Bollinger")
    data = as_array(closes, "closes")

    if len(data) < period:
        return InsufficientData(indicator="Bollinger", required=period, available=len(data))

    window = data[-period:]
    middle = float(np.mean(window))
    std = float(np.std(window))

    return BollingerBands(
        upper=middle + std_dev * std,
        middle=middle,
        lower=middle - std_dev * std,
    )


# =============================================================================
# SUPPORT/RESISTANCE
# =============================================================================


def support_resistance(
    highs: ArrayLike, lows: ArrayLike, closes: ArrayLike, lookback: int = 20
) -> SupportResistance:
    """
    Support and resistance tiers from the recent highs and lows.

    Highs are ranked descending and lows ascending; tier 1 is the extreme,
    tier 2 sits a third of the way into the ranking.
    """
    _check_period(lookback, "Support/resistance lookback")
    high_arr = as_array(highs, "highs")
    low_arr = as_array(lows, "lows")
    close_arr = as_array(closes, "closes")

    if len(close_arr) == 0 or len(high_arr) == 0 or len(low_arr) == 0:
        raise ValidationError("IndicatorLibrary", "support/resistance needs at least one point")

    recent_highs = np.sort(high_arr[-lookback:])[::-1]
    recent_lows = np.sort(low_arr[-lookback:])

    return SupportResistance(
        resistance1=float(recent_highs[0]),
        resistance2=float(recent_highs[len(recent_highs) // 3]),
        support1=float(recent_lows[0]),
        support2=float(recent_lows[len(recent_lows) // 3]),
        current=float(close_arr[-1]),
    )
