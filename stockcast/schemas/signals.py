"""
CONTRACT 3: Scored Signal

Input: IndicatorSnapshot values (SMA20/50, RSI, MACD, volume)
Output: ScoreResult

Every indicator contributes a vote with a human-readable explanation;
the explanation is part of the contract, not telemetry.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Signal(str, Enum):
    BUY = "Buy"
    SELL = "Sell"
    HOLD = "Hold"


NOT_ENOUGH_DATA = "Not enough data"


# =============================================================================
# Components
# =============================================================================


class IndicatorVote(BaseModel):
    """Contribution of a single indicator to the total score."""

    indicator: str
    score: float
    description: str

    class Config:
        frozen = True

    @property
    def signal(self) -> Signal:
        if self.score > 0:
            return Signal.BUY
        if self.score < 0:
            return Signal.SELL
        return Signal.HOLD


class ScoreAnalysis(BaseModel):
    """Per-indicator explanation shown to the user."""

    sma: str
    rsi: str
    macd: str
    volume: str

    class Config:
        frozen = True

    @classmethod
    def insufficient(cls) -> "ScoreAnalysis":
        return cls(sma=NOT_ENOUGH_DATA, rsi=NOT_ENOUGH_DATA, macd=NOT_ENOUGH_DATA, volume=NOT_ENOUGH_DATA)


class ScoreBreakdown(BaseModel):
    """How the total score was assembled."""

    sma_signal: IndicatorVote
    rsi_signal: IndicatorVote
    macd_signal: IndicatorVote
    volume_label: str
    volume_weight: float
    trend_score: float = Field(..., description="Score before volume adjustment")
    total_score: float
    signal: Signal
    confidence: float = Field(..., ge=0, le=100)

    class Config:
        frozen = True


# =============================================================================
# OUTPUT: ScoreResult
# =============================================================================


class ScoreResult(BaseModel):
    """
    Discrete trading signal with confidence.
    Returned by: Signal Scorer
    Consumed by: hosting services, Trend Analyzer
    """

    signal: Signal
    confidence: float = Field(..., ge=0, le=100)
    analysis: ScoreAnalysis
    breakdown: Optional[ScoreBreakdown] = Field(
        default=None,
        description="Absent when the series is too short to score",
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "signal": "Buy",
                "confidence": 83.33,
                "analysis": {
                    "sma": "Bullish Crossover (SMA20 > SMA50)",
                    "rsi": "Approaching Oversold (36.2)",
                    "macd": "Bullish Crossover (Histogram crossed Zero)",
                    "volume": "High",
                },
            }
        }
