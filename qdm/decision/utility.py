"""
QDM Decision: Utility functions.

Scalar transforms that turn an outcome (a payoff, possibly <= 0) into a
utility value.

    linear       u(x) = x
    logarithmic  u(x) = ln(x)        (x > 0)
    power        u(x) = x ** gamma   (x > 0)

Non-positive outcomes are NOT an error for the log / power transforms.
They map to a large negative sentinel (INVALID_UTILITY = -1000.0), so an
expected-utility sum over a bad outcome still completes and simply
scores terribly.

Outcomes large enough to overflow a double give +inf rather than an
OverflowError, so every transform stays total.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Optional, Union

from qdm.core.config import get_config


INVALID_UTILITY = -1000.0

UtilityFn = Callable[[float], float]


class UtilityKind(Enum):
    """Which utility transform to apply to an outcome."""
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    POWER = "power"

    @classmethod
    def coerce(cls, value: Union["UtilityKind", str]) -> "UtilityKind":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = [k.value for k in cls]
            raise ValueError(f"Unknown utility kind {value!r}; expected one of {valid}") from None


def linear_utility(x: float) -> float:
    return x


def log_utility(x: float) -> float:
    """Natural log for x > 0, INVALID_UTILITY otherwise."""
    if x > 0:
        return math.log(x)
    return INVALID_UTILITY


def power_utility(x: float, gamma: float = 0.5) -> float:
    """
    x ** gamma for x > 0, INVALID_UTILITY otherwise.

    gamma < 1 is risk-averse (concave), gamma == 1 reduces to linear,
    gamma > 1 is risk-seeking (convex).
    """
    if x > 0:
        try:
            return x ** gamma
        except OverflowError:
            return math.inf
    return INVALID_UTILITY


def get_utility_function(
    kind: Union[UtilityKind, str] = UtilityKind.LINEAR,
    gamma: Optional[float] = None,
) -> UtilityFn:
    """
    Return a one-argument utility callable for `kind`.

    gamma is only used for POWER; if None the configured default
    (UtilityConfig.default_power_gamma) is used.
    """
    kind = UtilityKind.coerce(kind)

    if kind is UtilityKind.LINEAR:
        return linear_utility
    if kind is UtilityKind.LOGARITHMIC:
        return log_utility

    g = get_config().utility.default_power_gamma if gamma is None else float(gamma)
    return lambda x: power_utility(x, g)


def evaluate_utility(
    x: float,
    kind: Union[UtilityKind, str] = UtilityKind.LINEAR,
    gamma: Optional[float] = None,
) -> float:
    return get_utility_function(kind, gamma)(x)


def certainty_equivalent(
    eu: float,
    kind: Union[UtilityKind, str] = UtilityKind.LINEAR,
    gamma: Optional[float] = None,
) -> float:
    """
    Outcome whose utility equals `eu` (inverse of the utility transform).

    For POWER, a non-positive expected utility (or gamma == 0) has no
    unique positive preimage; 0.0 is returned.
    """
    kind = UtilityKind.coerce(kind)

    if kind is UtilityKind.LINEAR:
        return float(eu)
    if kind is UtilityKind.LOGARITHMIC:
        try:
            return math.exp(eu)
        except OverflowError:
            return math.inf

    g = get_config().utility.default_power_gamma if gamma is None else float(gamma)
    if eu <= 0 or g == 0:
        return 0.0
    try:
        return float(eu ** (1.0 / g))
    except OverflowError:
        return math.inf
