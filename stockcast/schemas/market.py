"""
CONTRACT 1: Price Series Input

Input to every engine component: an ordered series of historical points.

The caller owns data fetching; the engine only validates the series
and exposes it as read-only numpy arrays.
"""

from datetime import datetime
from typing import Any, Iterable, Optional, Union

import numpy as np
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from stockcast.services.base import ValidationError


# =============================================================================
# HistoricalPoint
# =============================================================================


class HistoricalPoint(BaseModel):
    """Single historical price point."""

    timestamp: datetime
    close: float = Field(..., gt=0, allow_inf_nan=False, strict=True)
    volume: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False, strict=True)
    open: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, strict=True)
    high: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, strict=True)
    low: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, strict=True)

    class Config:
        frozen = True


# =============================================================================
# PriceSeries
# =============================================================================


def _readonly(values: list[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    arr.setflags(write=False)
    return arr


class PriceSeries(BaseModel):
    """
    Ordered, validated price series.

    Invariants:
        - at least one point
        - timestamps strictly ascending (no duplicates)
    """

    points: tuple[HistoricalPoint, ...] = Field(..., min_length=1)

    class Config:
        frozen = True

    @field_validator("points")
    @classmethod
    def _check_ascending(
        cls, points: tuple[HistoricalPoint, ...]
    ) -> tuple[HistoricalPoint, ...]:
        for prev, curr in zip(points, points[1:]):
            try:
                ascending = curr.timestamp > prev.timestamp
            except TypeError:
                raise ValueError("timestamps mix timezone-aware and naive values")
            if not ascending:
                raise ValueError(
                    f"timestamps must be strictly ascending: "
                    f"{curr.timestamp.isoformat()} follows {prev.timestamp.isoformat()}"
                )
        return points

    @classmethod
    def from_points(
        cls, points: Iterable[Union[HistoricalPoint, dict[str, Any]]]
    ) -> "PriceSeries":
        """
        Build a series from points or raw mappings.

        Raises:
            ValidationError: If the series is empty or any point is malformed.
        """
        try:
            return cls(points=tuple(points))
        except PydanticValidationError as e:
            raise ValidationError(
                "PriceSeries",
                "Malformed price series",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def __len__(self) -> int:
        return len(self.points)

    @property
    def closes(self) -> np.ndarray:
        return _readonly([p.close for p in self.points])

    @property
    def volumes(self) -> np.ndarray:
        """Volumes; points without a volume are NaN."""
        return _readonly([np.nan if p.volume is None else p.volume for p in self.points])

    @property
    def highs(self) -> np.ndarray:
        """Highs; points without a high fall back to the close."""
        return _readonly([p.high or p.close for p in self.points])

    @property
    def lows(self) -> np.ndarray:
        """Lows; points without a low fall back to the close."""
        return _readonly([p.low or p.close for p in self.points])

    @property
    def current_price(self) -> float:
        return self.points[-1].close


SeriesInput = Union[PriceSeries, Iterable[Union[HistoricalPoint, dict[str, Any]]]]


def ensure_series(data: SeriesInput) -> PriceSeries:
    """Return data as a validated PriceSeries."""
    if isinstance(data, PriceSeries):
        return data
    return PriceSeries.from_points(data)
