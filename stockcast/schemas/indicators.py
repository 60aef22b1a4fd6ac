"""
CONTRACT 2: Indicator Results

Output of the indicator library. Each indicator returns a tagged record;
an explicit InsufficientData record replaces the "0 means no data"
convention so a computed zero is never confused with a missing value.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class VolumeClass(str, Enum):
    HIGH = "High"
    LOW = "Low"
    NORMAL = "Normal"


# =============================================================================
# Tagged indicator values
# =============================================================================


class _Frozen(BaseModel):
    class Config:
        frozen = True


class InsufficientData(_Frozen):
    """Series too short for the requested indicator."""

    kind: Literal["insufficient_data"] = "insufficient_data"
    indicator: str
    required: int = Field(..., ge=0)
    available: int = Field(..., ge=0)


class SMAValue(_Frozen):
    kind: Literal["sma"] = "sma"
    period: int = Field(..., ge=1)
    value: float


class RSIValue(_Frozen):
    kind: Literal["rsi"] = "rsi"
    value: float = Field(..., ge=0, le=100)


class MACDValue(_Frozen):
    """Latest MACD values; previous_histogram supports crossover detection."""

    kind: Literal["macd"] = "macd"
    macd_line: float
    signal_line: float
    histogram: float
    previous_histogram: float

    @classmethod
    def zero(cls) -> "MACDValue":
        """Sentinel returned when the series is too short."""
        return cls(macd_line=0.0, signal_line=0.0, histogram=0.0, previous_histogram=0.0)


class VolumeLabel(_Frozen):
    kind: Literal["volume"] = "volume"
    classification: VolumeClass
    weight: float
    latest: Optional[float] = None
    average: Optional[float] = None


class BollingerBands(_Frozen):
    kind: Literal["bollinger"] = "bollinger"
    upper: float
    middle: float
    lower: float


IndicatorResult = Annotated[
    Union[InsufficientData, SMAValue, RSIValue, MACDValue, VolumeLabel, BollingerBands],
    Field(discriminator="kind"),
]


# =============================================================================
# Levels
# =============================================================================


class SupportResistance(_Frozen):
    """Support/resistance tiers from the recent high/low distribution."""

    resistance1: float
    resistance2: float
    support1: float
    support2: float
    current: float


# =============================================================================
# OUTPUT: IndicatorSnapshot (all indicators for one series)
# =============================================================================


class IndicatorSnapshot(_Frozen):
    """
    Every indicator computed for one series.
    Returned by: Indicator Service
    Consumed by: Signal Scorer, hosting services
    """

    sma_short: Union[SMAValue, InsufficientData]
    sma_long: Union[SMAValue, InsufficientData]
    rsi: RSIValue
    macd: MACDValue
    volume: VolumeLabel
    volatility: float = Field(..., ge=0)
    bollinger: Union[BollingerBands, InsufficientData]
    levels: SupportResistance
