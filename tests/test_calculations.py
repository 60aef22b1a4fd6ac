"""Indicator library calculations."""

import numpy as np
import pytest

from stockcast.schemas.indicators import (
    BollingerBands,
    InsufficientData,
    MACDValue,
    SMAValue,
    VolumeClass,
)
from stockcast.services.base import ValidationError
from stockcast.services.indicators.calculations import (
    bollinger_bands,
    ema,
    exponential_smoothing,
    macd,
    rsi,
    sma,
    support_resistance,
    volatility,
    volume_analysis,
)


# =============================================================================
# SMA / EMA
# =============================================================================


def test_sma_over_whole_series_is_the_mean():
    values = [3.0, 5.0, 7.0, 9.0]
    result = sma(values, 4)
    assert isinstance(result, SMAValue)
    assert result.value == pytest.approx(6.0)


def test_sma_uses_the_last_period_values():
    assert sma([1, 2, 3, 4, 5], 2).value == pytest.approx(4.5)


def test_sma_reports_insufficient_data_instead_of_zero():
    result = sma([1.0, 2.0], 5)
    assert isinstance(result, InsufficientData)
    assert result.required == 5
    assert result.available == 2


def test_sma_zero_is_a_real_value():
    result = sma([0.0, 0.0, 0.0], 3)
    assert isinstance(result, SMAValue)
    assert result.value == 0.0


@pytest.mark.parametrize("period", [0, -3, 2.5, True])
def test_sma_rejects_bad_period(period):
    with pytest.raises(ValidationError):
        sma([1.0, 2.0, 3.0], period)


def test_sma_rejects_non_numeric_values():
    with pytest.raises(ValidationError):
        sma(["a", "b"], 1)


def test_sma_rejects_nan():
    with pytest.raises(ValidationError):
        sma([1.0, float("nan"), 3.0], 2)


def test_ema_starts_at_first_value_and_keeps_length():
    values = [10.0, 11.0, 9.0, 12.0, 13.0]
    result = ema(values, 3)
    assert len(result) == len(values)
    assert result[0] == values[0]


def test_ema_recurrence():
    result = ema([1.0, 2.0, 3.0], 2)
    assert result[1] == pytest.approx(5 / 3)
    assert result[2] == pytest.approx(23 / 9)


def test_ema_follows_weighted_recurrence_exactly():
    gen = np.random.default_rng(11)
    values = 100 + np.cumsum(gen.normal(0, 1, size=40))
    k = 2 / (10 + 1)
    expected = [values[0]]
    for price in values[1:]:
        expected.append(price * k + expected[-1] * (1 - k))
    assert list(ema(values, 10)) == expected


def test_ema_insufficient_data_is_empty():
    assert len(ema([1.0, 2.0], 5)) == 0


def test_ema_of_constant_series_is_exact():
    assert np.all(ema([42.0] * 30, 12) == 42.0)


def test_exponential_smoothing():
    result = exponential_smoothing([10.0, 20.0, 20.0], alpha=0.5)
    assert list(result) == pytest.approx([10.0, 15.0, 17.5])
    assert len(exponential_smoothing([])) == 0


def test_exponential_smoothing_rejects_bad_alpha():
    with pytest.raises(ValidationError):
        exponential_smoothing([1.0, 2.0], alpha=0)


# =============================================================================
# RSI
# =============================================================================


@pytest.mark.parametrize("length", [0, 1, 5, 13, 14])
def test_rsi_is_neutral_without_enough_data(length):
    closes = [100.0 + (i % 3) for i in range(length)]
    assert rsi(closes).value == 50.0


def test_rsi_only_gains_is_100():
    assert rsi([100.0 + i for i in range(30)]).value == 100.0


def test_rsi_only_losses_is_0():
    assert rsi([200.0 - i for i in range(30)]).value == 0.0


def test_rsi_flat_series_is_neutral():
    assert rsi([100.0] * 30).value == 50.0


def test_rsi_wilder_smoothing():
    # deltas +1 -1 +1 -1 with period 2:
    # start 0.5/0.5, then 0.75/0.25, then 0.375/0.625 -> RS 0.6
    assert rsi([1.0, 2.0, 1.0, 2.0, 1.0], period=2).value == pytest.approx(37.5)


@pytest.mark.parametrize("seed", range(10))
def test_rsi_is_bounded(seed):
    gen = np.random.default_rng(seed)
    closes = 100 * np.cumprod(1 + gen.normal(0, 0.05, size=80))
    value = rsi(closes).value
    assert 0 <= value <= 100


# =============================================================================
# MACD
# =============================================================================


def test_macd_short_series_returns_zero_sentinel():
    result = macd([100.0 + i for i in range(34)])
    assert result == MACDValue.zero()
    assert result.previous_histogram == 0


def test_macd_flat_series_is_zero():
    result = macd([100.0] * 50)
    assert result.macd_line == 0
    assert result.signal_line == 0
    assert result.histogram == 0


def test_macd_rising_series_stays_above_signal():
    result = macd([100.0 + i for i in range(60)])
    assert result.macd_line > result.signal_line
    assert result.histogram > 0
    assert result.previous_histogram > 0


def test_macd_histogram_matches_lines():
    gen = np.random.default_rng(3)
    closes = 100 + np.cumsum(gen.normal(0, 1, size=70))
    result = macd(closes)
    assert result.histogram == pytest.approx(result.macd_line - result.signal_line)


# =============================================================================
# VOLUME
# =============================================================================


def test_volume_high():
    result = volume_analysis([100.0] * 19 + [200.0])
    assert result.classification == VolumeClass.HIGH
    assert result.weight == 1.0
    assert result.average == pytest.approx(105.0)


def test_volume_low():
    result = volume_analysis([100.0] * 19 + [50.0])
    assert result.classification == VolumeClass.LOW
    assert result.weight == -0.5


def test_volume_normal():
    result = volume_analysis([100.0] * 20)
    assert result.classification == VolumeClass.NORMAL
    assert result.weight == 0.0


def test_volume_zero_average_skips_ratio():
    result = volume_analysis([0.0] * 25)
    assert result.classification == VolumeClass.NORMAL
    assert result.weight == 0.0


def test_volume_missing_latest_is_normal():
    result = volume_analysis([100.0] * 19 + [float("nan")])
    assert result.classification == VolumeClass.NORMAL
    assert result.weight == 0.0
    assert result.latest is None


def test_volume_average_skips_missing_points():
    volumes = [float("nan")] * 4 + [100.0] * 15 + [200.0]
    result = volume_analysis(volumes)
    assert result.average == pytest.approx(1700 / 16)
    assert result.classification == VolumeClass.HIGH


def test_volume_rejects_infinity():
    with pytest.raises(ValidationError):
        volume_analysis([100.0] * 19 + [float("inf")])


def test_volume_short_series_is_normal():
    result = volume_analysis([10.0, 500.0])
    assert result.classification == VolumeClass.NORMAL
    assert result.average is None


# =============================================================================
# VOLATILITY / BANDS / LEVELS
# =============================================================================


def test_volatility_of_flat_series_is_zero():
    assert volatility([100.0] * 10) == 0.0


def test_volatility_is_population_std_of_returns():
    # returns +0.1 and -0.1
    assert volatility([100.0, 110.0, 99.0]) == pytest.approx(0.1)


def test_volatility_single_point_uses_default():
    assert volatility([100.0]) == 0.05
    assert volatility([100.0], default=0.02) == 0.02


def test_bollinger_flat_series_collapses():
    result = bollinger_bands([10.0] * 20)
    assert isinstance(result, BollingerBands)
    assert result.upper == result.middle == result.lower == 10.0


def test_bollinger_band_width():
    # last 20 values alternate 9/11: mean 10, population std 1
    result = bollinger_bands([9.0, 11.0] * 10, period=20, std_dev=2.0)
    assert result.middle == pytest.approx(10.0)
    assert result.upper == pytest.approx(12.0)
    assert result.lower == pytest.approx(8.0)


def test_bollinger_insufficient():
    assert isinstance(bollinger_bands([1.0] * 5), InsufficientData)


def test_support_resistance_tiers():
    highs = np.arange(1.0, 26.0)
    lows = np.arange(1.0, 26.0)
    closes = np.arange(1.0, 26.0)
    levels = support_resistance(highs, lows, closes)
    # last 20 values are 6..25; n // 3 == 6
    assert levels.resistance1 == 25.0
    assert levels.resistance2 == 19.0
    assert levels.support1 == 6.0
    assert levels.support2 == 12.0
    assert levels.current == 25.0


def test_support_resistance_short_series():
    levels = support_resistance([5.0, 7.0], [4.0, 6.0], [4.5, 6.5])
    assert levels.resistance1 == 7.0
    assert levels.resistance2 == 7.0
    assert levels.support1 == 4.0
    assert levels.current == 6.5


def test_support_resistance_empty_is_rejected():
    with pytest.raises(ValidationError):
        support_resistance([], [], [])
