"""
QDM Quantum: Amplitude / neural-population interference.

Two populations (e.g. firing-rate vectors) px and py are collapsed to
their Euclidean norms and combined like two interfering amplitudes
with real coefficients c1, c2 and relative phase theta:

    |c1 nx + c2 ny e^{i theta}|^2
        = c1^2 nx^2 + c2^2 ny^2 + 2 c1 c2 nx ny cos(theta)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from qdm.core.errors import check_same_length


def vector_norm(v: Sequence[float]) -> float:
    """Euclidean norm; 0.0 for an empty vector."""
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def neural_population_interference(
    px: Sequence[float],
    py: Sequence[float],
    c1: float,
    c2: float,
    theta: float,
) -> float:
    """
    Interference score of two amplitude vectors.

    Parameters
    ----------
    px, py : sequence of float
        Amplitude vectors; must be the same length.
    c1, c2 : float
        Real mixing coefficients.
    theta : float
        Relative phase in radians.

    Raises
    ------
    LengthMismatchError
        If px and py differ in length.
    """
    check_same_length(px, py, "px", "py")

    nx = vector_norm(px)
    ny = vector_norm(py)
    return float(
        c1 * c1 * nx * nx
        + c2 * c2 * ny * ny
        + 2.0 * c1 * c2 * nx * ny * np.cos(theta)
    )


def interference_visibility(
    px: Sequence[float],
    py: Sequence[float],
    c1: float,
    c2: float,
) -> float:
    """
    Fringe visibility (max - min) / (max + min) over theta.

    Equals 2 |c1 c2| nx ny / (c1^2 nx^2 + c2^2 ny^2); 0.0 when both
    weighted amplitudes vanish.
    """
    check_same_length(px, py, "px", "py")

    nx = vector_norm(px)
    ny = vector_norm(py)
    denom = c1 * c1 * nx * nx + c2 * c2 * ny * ny
    if denom <= 0:
        return 0.0
    return float(2.0 * abs(c1 * c2) * nx * ny / denom)
