"""
StockCast Services

Service layer containing all engine computations.
Each service has a defined interface (contract) and implementation.
"""

from stockcast.services.base import (
    BaseService,
    ServiceError,
    ValidationError,
    ComputationError,
    RegressionError,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "ValidationError",
    "ComputationError",
    "RegressionError",
]
