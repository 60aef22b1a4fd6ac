"""
Ordinary Least Squares

Closed-form fit of y = intercept + slope * x with its coefficient of
determination. No model training involved.
"""

import numpy as np

from stockcast.schemas.forecast import RegressionFit
from stockcast.services.base import RegressionError
from stockcast.services.indicators.calculations import ArrayLike, as_array


def fit_linear_regression(x: ArrayLike, y: ArrayLike) -> RegressionFit:
    """
    Fit y = a + b*x by least squares.

    R² is clipped to [0, 1]. When y has no variance and the fit leaves no
    residual, the fit is perfect (R² = 1).

    Raises:
        RegressionError: If x and y differ in length, fewer than two points
            are given, or x has no variance.
    """
    x_arr = as_array(x, "x")
    y_arr = as_array(y, "y")

    if len(x_arr) != len(y_arr):
        raise RegressionError(
            "LinearRegression",
            "x and y must have the same length",
            details={"x": len(x_arr), "y": len(y_arr)},
        )
    if len(x_arr) < 2:
        raise RegressionError(
            "LinearRegression", "At least two points are required", details={"points": len(x_arr)}
        )

    x_mean = float(np.mean(x_arr))
    y_mean = float(np.mean(y_arr))
    dx = x_arr - x_mean
    dy = y_arr - y_mean

    sxx = float(np.sum(dx * dx))
    if sxx == 0:
        raise RegressionError("LinearRegression", "x values are all identical")

    slope = float(np.sum(dx * dy)) / sxx
    intercept = y_mean - slope * x_mean

    residuals = y_arr - (intercept + slope * x_arr)
    ss_res = float(np.sum(residuals * residuals))
    ss_tot = float(np.sum(dy * dy))

    if ss_tot == 0:
        r_squared = 1.0
    else:
        r_squared = 1 - ss_res / ss_tot

    if not (np.isfinite(slope) and np.isfinite(intercept) and np.isfinite(r_squared)):
        raise RegressionError("LinearRegression", "Fit produced non-finite coefficients")

    return RegressionFit(
        slope=slope,
        intercept=intercept,
        r_squared=min(1.0, max(0.0, r_squared)),
    )
