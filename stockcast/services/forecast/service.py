"""
Forecast Engine Implementation

Projects a price N days ahead from a linear fit over the whole series.
Confidence rewards fit quality and penalizes volatility; the charting
path adds seeded uniform noise that never touches the forecast itself.
"""

import logging
from datetime import date, timedelta
from typing import Optional

import numpy as np

from stockcast.core.config import Settings, get_settings
from stockcast.schemas.market import PriceSeries, ensure_series
from stockcast.schemas.forecast import (
    Direction,
    ForecastResult,
    PathPoint,
    RegressionFit,
    RiskLevel,
)
from stockcast.services.base import RegressionError, ValidationError
from stockcast.services.forecast.interface import ForecastEngineInterface, ForecastInput
from stockcast.services.forecast.regression import fit_linear_regression
from stockcast.services.indicators.calculations import volatility

logger = logging.getLogger(__name__)


def classify_risk(volatility_value: float, days_ahead: int) -> RiskLevel:
    """Longer horizons and higher volatility mean higher risk."""
    risk_score = (volatility_value * 100 + days_ahead / 30) / 2

    if risk_score > 5:
        return RiskLevel.HIGH
    if risk_score > 3:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def forecast_confidence(
    r_squared: float,
    volatility_value: float,
    penalty_cap: float = 30.0,
    floor: float = 50.0,
    ceiling: float = 95.0,
) -> float:
    """R² as a percentage minus a capped volatility penalty, kept in [floor, ceiling]."""
    penalty = min(volatility_value * 100, penalty_cap)
    return min(ceiling, max(floor, r_squared * 100 - penalty))


def generate_path(
    current_price: float,
    target_price: float,
    days_ahead: int,
    volatility_value: float,
    rng: np.random.Generator,
    start_date: date,
) -> tuple[PathPoint, ...]:
    """
    Linear path from current to target with uniform noise.

    Noise is drawn from [-price*vol, +price*vol] for every day 0..days_ahead.
    """
    amplitude = current_price * volatility_value
    noise = rng.uniform(-amplitude, amplitude, size=days_ahead + 1)
    change = target_price - current_price

    return tuple(
        PathPoint(
            day=day,
            price=round(float(current_price + change * (day / days_ahead) + noise[day]), 2),
            date=start_date + timedelta(days=day),
        )
        for day in range(days_ahead + 1)
    )


class ForecastEngine(ForecastEngineInterface):
    """
    Forecast Engine.

    Holds only configuration. Each call gets its own noise generator:
    the one passed in, or a fresh one seeded from settings.forecast_seed.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def execute(self, input_data: ForecastInput) -> ForecastResult:
        """Validate the input and forecast."""
        return self.predict(
            ensure_series(input_data.series),
            days_ahead=input_data.days_ahead,
            rng=input_data.rng,
            start_date=input_data.start_date,
        )

    def predict(
        self,
        series: PriceSeries,
        days_ahead: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        start_date: Optional[date] = None,
    ) -> ForecastResult:
        """Forecast a validated series `days_ahead` days past its last point."""
        s = self._settings
        days = s.default_days_ahead if days_ahead is None else days_ahead
        if isinstance(days, bool) or not isinstance(days, (int, np.integer)) or days < 1:
            raise ValidationError(
                self.name, "days_ahead must be a positive integer", details={"days_ahead": days}
            )
        days = int(days)

        closes = series.closes
        current_price = float(closes[-1])
        vol = volatility(closes, default=s.default_volatility)
        fit = self._fit(closes)

        target_price = fit.predict(len(closes) + days - 1)
        direction = Direction.UP if target_price > current_price else Direction.DOWN
        confidence = forecast_confidence(
            fit.r_squared,
            vol,
            penalty_cap=s.volatility_penalty_cap,
            floor=s.forecast_confidence_floor,
            ceiling=s.forecast_confidence_ceiling,
        )
        price_change = target_price - current_price

        path = generate_path(
            current_price,
            target_price,
            days,
            vol,
            rng if rng is not None else np.random.default_rng(s.forecast_seed),
            start_date or date.today(),
        )

        logger.debug(
            f"Forecast {days}d: {current_price:.2f} -> {target_price:.2f} "
            f"(r2={fit.r_squared:.3f}, vol={vol:.4f}, confidence={confidence:.1f})"
        )

        return ForecastResult(
            current_price=current_price,
            target_price=target_price,
            direction=direction,
            price_change=price_change,
            price_change_percent=price_change / current_price * 100,
            confidence=confidence,
            days=days,
            trend_strength=abs(fit.slope),
            r_squared=fit.r_squared,
            volatility=vol,
            risk_level=classify_risk(vol, days),
            prediction_path=path,
        )

    def _fit(self, closes: np.ndarray) -> RegressionFit:
        """Fit closes against their index; a single point gives a flat line."""
        if len(closes) < 2:
            logger.warning("Single-point series: forecasting a flat line")
            return RegressionFit(slope=0.0, intercept=float(closes[-1]), r_squared=0.0)

        try:
            return fit_linear_regression(np.arange(len(closes)), closes)
        except RegressionError as e:
            logger.error(f"Regression failed: {e.message}")
            raise


# Singleton instance
_service_instance: Optional[ForecastEngine] = None


def get_forecast_engine() -> ForecastEngine:
    """Get or create forecast engine instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ForecastEngine()
    return _service_instance
