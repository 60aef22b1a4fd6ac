"""
Signal Scorer

CONTRACT:
    Input:  PriceSeries
    Output: ScoreResult

RESPONSIBILITIES:
    - Vote SMA crossover, RSI level and MACD state
    - Confirm or dampen the vote with volume
    - Decide Buy / Sell / Hold with a confidence
    - Explain every indicator's contribution in text

PURE PYTHON - deterministic, no state between calls.
"""

from stockcast.services.signals.interface import SignalScorerInterface
from stockcast.services.signals.service import SignalScorer, get_signal_scorer

__all__ = [
    "SignalScorerInterface",
    "SignalScorer",
    "get_signal_scorer",
]
