"""
QDM Quantum: Correlated probabilistic logic gates.

Combine two event probabilities when the events are not independent.
The correlation rho shifts the joint probability by

    rho * sqrt(p1 (1 - p1) p2 (1 - p2))

i.e. rho times the product of the two Bernoulli standard deviations.

Preconditions (not checked): p1, p2 in [0, 1] and rho in [-1, 1].
Outside those ranges the results can leave [0, 1]; that is the caller's
problem, not an error.

At rho = 0 the correlation term is skipped entirely, so out-of-range
probabilities still give the independent formulas (e.g. AND = p1 * p2)
rather than nan. With rho != 0 a negative variance product under the
root gives nan.
"""

from __future__ import annotations

import math


def _bernoulli_covariance(p1: float, p2: float, rho: float) -> float:
    if rho == 0:
        return 0.0
    variance_product = p1 * (1.0 - p1) * p2 * (1.0 - p2)
    if variance_product < 0:
        # out-of-range inputs; no real covariance
        return float("nan")
    return rho * math.sqrt(variance_product)


def probabilistic_and(p1: float, p2: float, rho: float = 0.0) -> float:
    """P(A and B); reduces to p1 * p2 at rho = 0."""
    return p1 * p2 + _bernoulli_covariance(p1, p2, rho)


def probabilistic_or(p1: float, p2: float, rho: float = 0.0) -> float:
    """P(A or B) by inclusion-exclusion with the same correlation adjustment."""
    return p1 + p2 - probabilistic_and(p1, p2, rho)


def probabilistic_xor(p1: float, p2: float, rho: float = 0.0) -> float:
    """P(exactly one of A, B)."""
    return p1 + p2 - 2.0 * probabilistic_and(p1, p2, rho)


def probabilistic_not(p: float) -> float:
    return 1.0 - p
