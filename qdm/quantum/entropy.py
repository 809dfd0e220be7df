"""
QDM Quantum: Entropy and information measures.

These tools quantify how *sharp* or *fuzzy* a belief distribution is,
and how far an update moved it.

Higher entropy ~ beliefs spread over many hypotheses.
Lower entropy ~ beliefs concentrated on a few.
"""

from __future__ import annotations

import numpy as np
from scipy import stats


def discrete_entropy(
    probs: np.ndarray,
    base: float = 2.0,
) -> float:
    """
    Compute entropy of a discrete distribution.

    Parameters
    ----------
    probs : array-like
        Non-negative weights. They are normalized first, so raw
        unnormalized beliefs are fine.
    base : float
        Logarithm base. base=2 -> bits; base=e -> nats.

    Returns
    -------
    float entropy value. An all-zero (or empty) vector has entropy 0.0.
    """
    p = np.asarray(probs, dtype=float)
    total = p.sum()
    if p.size == 0 or total <= 0:
        return 0.0

    p = p[p > 0.0] / total  # ignore zero-probability bins
    h = -np.sum(p * np.log(p)) / np.log(base)
    return float(h)


def relative_entropy(
    p: np.ndarray,
    q: np.ndarray,
    base: float = 2.0,
) -> float:
    """
    Kullback-Leibler divergence D(p || q).

    Both inputs are normalized by scipy. Returns 0.0 when either side is
    all-zero (nothing to compare) and inf when p puts mass where q has none.
    """
    p_arr = np.asarray(p, dtype=float)
    q_arr = np.asarray(q, dtype=float)
    if p_arr.sum() <= 0 or q_arr.sum() <= 0:
        return 0.0
    return float(stats.entropy(p_arr, q_arr, base=base))
