"""
CONTRACT 5: Trend Summary

Input: map of indicator name -> Buy/Sell/Hold signal
Output: TrendSummary
"""

from enum import Enum
from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class TrendStrength(str, Enum):
    STRONG = "Strong"
    MODERATE = "Moderate"
    WEAK = "Weak"


class TrendSummary(BaseModel):
    """Qualitative summary of a set of indicator signals."""

    sentiment: Sentiment
    strength: TrendStrength
    strength_value: float = Field(..., ge=0, le=1)
    bullish_signals: int = Field(..., ge=0)
    bearish_signals: int = Field(..., ge=0)
    total_signals: int = Field(..., ge=0, description="Bullish + bearish signals")

    class Config:
        frozen = True
