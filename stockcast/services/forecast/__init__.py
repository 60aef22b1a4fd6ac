"""
Forecast Engine

CONTRACT:
    Input:  ForecastInput (PriceSeries + days ahead)
    Output: ForecastResult

RESPONSIBILITIES:
    - Fit a least-squares line over (index, close)
    - Project the target price and direction
    - Derive confidence from R² and volatility
    - Build a seeded noisy path for charting
    - Classify risk from volatility and horizon

PURE PYTHON - Uses NumPy for the fit and the noise generator.
"""

from stockcast.services.forecast.interface import ForecastEngineInterface, ForecastInput
from stockcast.services.forecast.regression import fit_linear_regression
from stockcast.services.forecast.service import (
    ForecastEngine,
    classify_risk,
    forecast_confidence,
    generate_path,
    get_forecast_engine,
)

__all__ = [
    "ForecastEngineInterface",
    "ForecastInput",
    "ForecastEngine",
    "fit_linear_regression",
    "classify_risk",
    "forecast_confidence",
    "generate_path",
    "get_forecast_engine",
]
