from typing import Any, Mapping, Optional, Union

from .config import MACHINE_EPSILON
from .schemes import (
    STAT_FIELDS,
    CovarianceStats,
    CovarianceValidation,
    Stats,
    Validation,
)


def _within(observed: float, expected: Optional[float], tolerance: float) -> bool:
    # NaN observed values fail any present check.
    return expected is None or abs(observed - expected) <= tolerance


def validate(observed: Stats, expected: Union[Validation, Mapping[str, Any]]) -> bool:
    """Check the fields present in `expected` against `observed`, within tolerance."""
    if not isinstance(expected, Validation):
        expected = Validation.model_validate(expected)
    return all(
        _within(getattr(observed, name), getattr(expected, name), expected.tolerance)
        for name in STAT_FIELDS
    )


def validate_covariance(
    observed: CovarianceStats,
    expected: Union[CovarianceValidation, Mapping[str, Any]],
) -> bool:
    """
    Validate both marginals and the covariance.

    A top-level tolerance overrides the x/y tolerances; the covariance uses the
    top-level tolerance, or machine epsilon when it is absent.
    """
    if not isinstance(expected, CovarianceValidation):
        expected = CovarianceValidation.model_validate(expected)

    def _marginal(stats: Stats, spec: Optional[Validation]) -> bool:
        if spec is None:
            return True
        if expected.tolerance is not None:
            spec = spec.model_copy(update={"tolerance": expected.tolerance})
        return validate(stats, spec)

    tolerance = MACHINE_EPSILON if expected.tolerance is None else expected.tolerance
    return (
        _marginal(observed.x, expected.x)
        and _marginal(observed.y, expected.y)
        and _within(observed.covariance, expected.covariance, tolerance)
    )
