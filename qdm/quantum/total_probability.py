"""
QDM Quantum: Law of total probability, classical and quantum-like.

Two mutually exclusive branches B1, B2 and a target event A:

    classical:  P(A) = P(B1) P(A|B1) + P(B2) P(A|B2)
    quantum:    P(A) = classical + sqrt(P(B1) P(B2) P(A|B1) P(A|B2)) * cos(theta)

The extra term is the interference between the two branches:
    theta = 0      -> maximal (constructive) interference
    theta = pi / 2 -> no interference, classical result
    theta = pi     -> minimal (destructive) interference

No range validation: feed probabilities in [0, 1] if you want the
result to read as a probability.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np


def classical_ltp(
    pb1: float,
    pb2: float,
    pa_given_b1: float,
    pa_given_b2: float,
) -> float:
    return pb1 * pa_given_b1 + pb2 * pa_given_b2


def interference_term(
    pb1: float,
    pb2: float,
    pa_given_b1: float,
    pa_given_b2: float,
    theta: float,
) -> float:
    """
    sqrt(pb1 * pb2 * pa_given_b1 * pa_given_b2) * cos(theta).

    A negative product under the root (only possible with invalid
    probabilities) gives nan instead of raising.
    """
    product = pb1 * pb2 * pa_given_b1 * pa_given_b2
    if product < 0:
        return float("nan")
    return math.sqrt(product) * math.cos(theta)


def quantum_ltp(
    pb1: float,
    pb2: float,
    pa_given_b1: float,
    pa_given_b2: float,
    theta: float,
) -> float:
    """Classical LTP plus the phase-dependent interference term."""
    return classical_ltp(pb1, pb2, pa_given_b1, pa_given_b2) + interference_term(
        pb1, pb2, pa_given_b1, pa_given_b2, theta
    )


def quantum_ltp_curve(
    pb1: float,
    pb2: float,
    pa_given_b1: float,
    pa_given_b2: float,
    thetas: Union[Sequence[float], np.ndarray],
) -> np.ndarray:
    """
    Evaluate quantum_ltp over an array of phases in one shot.

    Handy for sweeping theta in [0, 2 pi] to see the interference band
    around the classical value.
    """
    theta_arr = np.asarray(thetas, dtype=float)
    base = classical_ltp(pb1, pb2, pa_given_b1, pa_given_b2)
    product = pb1 * pb2 * pa_given_b1 * pa_given_b2
    amplitude = math.sqrt(product) if product >= 0 else float("nan")
    return base + amplitude * np.cos(theta_arr)
