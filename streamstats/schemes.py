import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .config import MACHINE_EPSILON

# Fields checked by validate(), in order.
STAT_FIELDS = ("mean", "variance", "min", "max")


class Stats(BaseModel):
    """Basic statistics of a sample set. Immutable; ingestion builds a new one."""

    model_config = ConfigDict(frozen=True)

    mean: float
    variance: float
    min: float
    max: float
    count: int

    @property
    def std(self) -> float:
        return math.sqrt(self.variance) if self.variance >= 0 else math.nan

    @property
    def is_null(self) -> bool:
        """True for the placeholder returned before any sample was seen."""
        return self.count == 0 and math.isnan(self.mean)


class CovarianceStats(BaseModel):
    """Joint statistics of two aligned sample sets."""

    model_config = ConfigDict(frozen=True)

    x: Stats
    y: Stats
    covariance: float

    @property
    def count(self) -> int:
        return self.x.count

    @property
    def is_null(self) -> bool:
        return self.x.is_null


class Validation(BaseModel):
    """Optional expected values to check in validate(), plus accepted absolute tolerance."""

    model_config = ConfigDict(extra="forbid")

    tolerance: float = MACHINE_EPSILON
    mean: Optional[float] = None
    variance: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None

    @field_validator("tolerance", mode="before")
    @classmethod
    def _default_tolerance(cls, v: Optional[float]) -> float:
        # An explicit None means "not given".
        return MACHINE_EPSILON if v is None else v


class CovarianceValidation(BaseModel):
    """
    Expected values for validate_covariance().

    `tolerance`, when set, overrides the tolerances of `x` and `y`.
    """

    model_config = ConfigDict(extra="forbid")

    tolerance: Optional[float] = None
    x: Optional[Validation] = None
    y: Optional[Validation] = None
    covariance: Optional[float] = None


def null_stats() -> Stats:
    """Stats placeholder for "no samples yet"; every float field is NaN."""
    return Stats(
        mean=math.nan, variance=math.nan, min=math.nan, max=math.nan, count=0
    )


def null_covariance_stats() -> CovarianceStats:
    return CovarianceStats(x=null_stats(), y=null_stats(), covariance=math.nan)
