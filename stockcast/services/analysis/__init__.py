"""
Analysis Service

CONTRACT:
    Input:  AnalysisRequest (PriceSeries + days ahead)
    Output: AnalysisResult (score, forecast, levels, trend)

Orchestrates the engine components for callers that want everything
about one series in a single call.
"""

from stockcast.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "AnalysisService",
    "get_analysis_service",
]
