"""
Trend Analyzer

CONTRACT:
    Input:  {indicator name: Buy / Sell / Hold}
    Output: TrendSummary (sentiment, strength, counts)
"""

from stockcast.services.trend.service import (
    TrendAnalyzer,
    classify_strength,
    get_trend_analyzer,
)

__all__ = [
    "TrendAnalyzer",
    "classify_strength",
    "get_trend_analyzer",
]
