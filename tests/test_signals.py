"""Signal scorer: votes, volume adjustment, decision and confidence."""

import itertools

import pytest

from stockcast.schemas.indicators import (
    InsufficientData,
    MACDValue,
    RSIValue,
    SMAValue,
    VolumeClass,
    VolumeLabel,
)
from stockcast.schemas.signals import Signal
from stockcast.services.signals import SignalScorer
from stockcast.services.signals.scoring import apply_volume, decide, macd_vote, rsi_vote, sma_vote

NORMAL = VolumeLabel(classification=VolumeClass.NORMAL, weight=0.0)
HIGH = VolumeLabel(classification=VolumeClass.HIGH, weight=1.0)
LOW = VolumeLabel(classification=VolumeClass.LOW, weight=-0.5)


def _sma(value, period):
    return SMAValue(period=period, value=value)


def _macd(macd_line, signal_line, histogram, previous):
    return MACDValue(
        macd_line=macd_line,
        signal_line=signal_line,
        histogram=histogram,
        previous_histogram=previous,
    )


@pytest.fixture
def scorer(settings):
    return SignalScorer(settings)


# =============================================================================
# Votes
# =============================================================================


def test_sma_vote_band():
    assert sma_vote(_sma(101, 20), _sma(100, 50)).score == 1
    assert sma_vote(_sma(99, 20), _sma(100, 50)).score == -1
    neutral = sma_vote(_sma(100.4, 20), _sma(100, 50))
    assert neutral.score == 0
    assert neutral.description == "Neutral (SMAs Close)"


def test_sma_vote_explains_crossover():
    vote = sma_vote(_sma(110, 20), _sma(100, 50))
    assert vote.description == "Bullish Crossover (SMA20 > SMA50)"


def test_sma_vote_without_data():
    missing = InsufficientData(indicator="SMA", required=50, available=10)
    assert sma_vote(_sma(10, 20), missing).score == 0


@pytest.mark.parametrize(
    "value,score,label",
    [
        (25.0, 2, "Oversold (25.0)"),
        (30.0, 1, "Approaching Oversold (30.0)"),
        (39.9, 1, "Approaching Oversold (39.9)"),
        (40.0, 0, "Neutral (40.0)"),
        (60.0, 0, "Neutral (60.0)"),
        (65.0, -1, "Approaching Overbought (65.0)"),
        (70.0, -1, "Approaching Overbought (70.0)"),
        (75.0, -2, "Overbought (75.0)"),
    ],
)
def test_rsi_vote(value, score, label):
    vote = rsi_vote(RSIValue(value=value))
    assert vote.score == score
    assert vote.description == label


@pytest.mark.parametrize(
    "macd,score",
    [
        (_macd(1.0, 0.5, 0.5, -0.1), 2),
        (_macd(1.0, 0.5, 0.5, 0.0), 2),
        (_macd(-1.0, -0.5, -0.5, 0.1), -2),
        (_macd(-1.0, -0.5, -0.5, 0.0), -2),
        (_macd(1.0, 0.5, 0.5, 0.3), 1),
        (_macd(-1.0, -0.5, -0.5, -0.3), -1),
        (MACDValue.zero(), 0),
    ],
)
def test_macd_vote(macd, score):
    assert macd_vote(macd).score == score


def test_volume_amplifies_and_dampens():
    assert apply_volume(2, HIGH) == 3
    assert apply_volume(-2, HIGH) == -3
    assert apply_volume(2, LOW) == 1.5
    assert apply_volume(-2, LOW) == -1.5
    assert apply_volume(0, HIGH) == 0


# =============================================================================
# Decision
# =============================================================================


def test_decide_thresholds():
    assert decide(3) == (Signal.BUY, 75.0)
    assert decide(6) == (Signal.BUY, 100.0)
    assert decide(-3) == (Signal.SELL, 75.0)
    assert decide(-6) == (Signal.SELL, 100.0)
    assert decide(0) == (Signal.HOLD, 70.0)


def test_decide_hold_confidence_falls_towards_thresholds():
    signal, confidence = decide(2.5)
    assert signal == Signal.HOLD
    assert confidence == pytest.approx(70 - 2.5 / 3 * 20)


def test_decide_clamps_confidence():
    assert decide(9)[1] == 100.0
    assert decide(-9)[1] == 100.0


def test_score_indicators_buy(scorer):
    breakdown = scorer.score_indicators(
        sma_short=_sma(110, 20),
        sma_long=_sma(100, 50),
        rsi=RSIValue(value=35.0),
        macd=_macd(1.0, 0.5, 0.5, -0.2),
        volume=NORMAL,
    )
    assert breakdown.trend_score == 4
    assert breakdown.signal == Signal.BUY
    assert breakdown.confidence == pytest.approx(75 + 1 / 3 * 25)


def test_score_indicators_strong_buy_on_high_volume(scorer):
    breakdown = scorer.score_indicators(
        sma_short=_sma(110, 20),
        sma_long=_sma(100, 50),
        rsi=RSIValue(value=25.0),
        macd=_macd(1.0, 0.5, 0.5, -0.2),
        volume=HIGH,
    )
    assert breakdown.total_score == 6
    assert breakdown.signal == Signal.BUY
    assert breakdown.confidence == 100.0


def test_score_indicators_sell(scorer):
    breakdown = scorer.score_indicators(
        sma_short=_sma(90, 20),
        sma_long=_sma(100, 50),
        rsi=RSIValue(value=75.0),
        macd=_macd(-1.0, -0.5, -0.5, 0.2),
        volume=HIGH,
    )
    assert breakdown.total_score == -6
    assert breakdown.signal == Signal.SELL
    assert breakdown.confidence == 100.0


def test_low_volume_turns_weak_buy_into_hold(scorer):
    breakdown = scorer.score_indicators(
        sma_short=_sma(110, 20),
        sma_long=_sma(100, 50),
        rsi=RSIValue(value=35.0),
        macd=_macd(1.0, 0.5, 0.5, 0.3),
        volume=LOW,
    )
    assert breakdown.trend_score == 3
    assert breakdown.total_score == 2.5
    assert breakdown.signal == Signal.HOLD
    assert breakdown.volume_label == "Low"


@pytest.mark.parametrize(
    "short,rsi_value,macd,volume",
    list(
        itertools.product(
            [90.0, 100.0, 110.0],
            [10.0, 35.0, 50.0, 65.0, 90.0],
            [_macd(1, 0.5, 0.5, -0.1), _macd(1, 0.5, 0.5, 0.2), MACDValue.zero(), _macd(-1, -0.5, -0.5, 0.1)],
            [NORMAL, HIGH, LOW],
        )
    ),
)
def test_confidence_is_always_bounded(scorer, short, rsi_value, macd, volume):
    breakdown = scorer.score_indicators(
        _sma(short, 20), _sma(100.0, 50), RSIValue(value=rsi_value), macd, volume
    )
    assert 0 <= breakdown.confidence <= 100


# =============================================================================
# Whole series
# =============================================================================


def test_short_series_is_hold_with_insufficient_analysis(scorer, series_factory):
    result = scorer.execute(series_factory([100.0 + i for i in range(49)]))
    assert result.signal == Signal.HOLD
    assert result.confidence == 50
    assert result.breakdown is None
    assert result.analysis.model_dump() == {
        "sma": "Not enough data",
        "rsi": "Not enough data",
        "macd": "Not enough data",
        "volume": "Not enough data",
    }


def test_flat_series_is_confident_hold(scorer, flat_series):
    result = scorer.score(flat_series)
    assert result.signal == Signal.HOLD
    assert result.breakdown.total_score == 0
    assert result.confidence == pytest.approx(70)


def test_steady_rise_is_held_because_rsi_is_overbought(scorer, rising_series):
    result = scorer.score(rising_series)
    b = result.breakdown
    assert b.sma_signal.score == 1
    assert b.rsi_signal.score == -2
    assert b.macd_signal.score == 1
    assert b.total_score == 0
    assert result.signal == Signal.HOLD
    assert result.analysis.sma == "Bullish Crossover (SMA20 > SMA50)"
    assert result.analysis.rsi == "Overbought (100.0)"


def test_steady_fall_is_mirrored(scorer, falling_series):
    b = scorer.score(falling_series).breakdown
    assert b.sma_signal.score == -1
    assert b.rsi_signal.score == 2
    assert b.macd_signal.score == -1


def test_scoring_is_idempotent(scorer, random_walk):
    first = scorer.score(random_walk)
    second = scorer.score(random_walk)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert 0 <= first.confidence <= 100


def test_execute_accepts_raw_points(scorer, points_factory):
    result = scorer.execute(points_factory([100.0] * 60, volumes=[10.0] * 60))
    assert result.signal == Signal.HOLD


def test_missing_latest_volume_does_not_dampen_score(scorer, points_factory):
    points = points_factory([100.0 + i for i in range(60)], volumes=[1000.0] * 60)
    del points[-1]["volume"]
    b = scorer.execute(points).breakdown
    assert b.volume_label == "Normal"
    assert b.volume_weight == 0.0
    assert b.total_score == b.trend_score
