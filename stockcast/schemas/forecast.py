"""
CONTRACT 4: Price Forecast

Input: PriceSeries + days ahead
Output: ForecastResult

target_price, direction and confidence come from the regression fit only;
prediction_path carries cosmetic noise for charting.
"""

import datetime
from enum import Enum
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# =============================================================================
# Components
# =============================================================================


class RegressionFit(BaseModel):
    """Ordinary least squares fit y = intercept + slope * x."""

    slope: float
    intercept: float
    r_squared: float = Field(..., ge=0, le=1)

    class Config:
        frozen = True

    def predict(self, x: float) -> float:
        return self.intercept + self.slope * x


class PathPoint(BaseModel):
    """Single point of the projected path."""

    day: int = Field(..., ge=0)
    price: float
    date: datetime.date

    class Config:
        frozen = True


# =============================================================================
# OUTPUT: ForecastResult
# =============================================================================


class ForecastResult(BaseModel):
    """
    Multi-day price forecast.
    Returned by: Forecast Engine
    Consumed by: hosting services (charting, prediction pages)
    """

    current_price: float
    target_price: float
    direction: Direction
    price_change: float
    price_change_percent: float
    confidence: float = Field(..., ge=0, le=100)
    days: int = Field(..., ge=1)
    trend_strength: float = Field(..., ge=0, description="Absolute regression slope")
    r_squared: float = Field(..., ge=0, le=1)
    volatility: float = Field(..., ge=0)
    risk_level: RiskLevel
    prediction_path: tuple[PathPoint, ...]

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "current_price": 298.0,
                "target_price": 312.0,
                "direction": "UP",
                "price_change": 14.0,
                "price_change_percent": 4.7,
                "confidence": 95.0,
                "days": 7,
                "trend_strength": 2.0,
                "r_squared": 1.0,
                "volatility": 0.0068,
                "risk_level": "Low",
                "prediction_path": [
                    {"day": 0, "price": 298.4, "date": "2024-02-04"},
                ],
            }
        }
