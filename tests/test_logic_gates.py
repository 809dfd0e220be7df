"""
QDM Tests: logic_gates
Correlated AND / OR / XOR / NOT.
"""

from __future__ import annotations

import math

import pytest

from qdm.quantum.logic_gates import (
    probabilistic_and,
    probabilistic_not,
    probabilistic_or,
    probabilistic_xor,
)


@pytest.mark.parametrize("p", [0.0, 0.1, 0.5, 0.93, 1.0])
def test_independent_and_is_product(p: float) -> None:
    assert probabilistic_and(p, p, 0.0) == pytest.approx(p * p)


@pytest.mark.parametrize("p1,p2", [(0.2, 0.7), (0.5, 0.5), (0.0, 0.4)])
def test_independent_or_is_inclusion_exclusion(p1: float, p2: float) -> None:
    assert probabilistic_or(p1, p2, 0.0) == pytest.approx(p1 + p2 - p1 * p2)


def test_positive_correlation_raises_joint_probability() -> None:
    p1, p2 = 0.4, 0.6
    base = probabilistic_and(p1, p2)
    shift = math.sqrt(p1 * (1 - p1) * p2 * (1 - p2))

    assert probabilistic_and(p1, p2, 0.5) == pytest.approx(base + 0.5 * shift)
    assert probabilistic_and(p1, p2, -0.5) == pytest.approx(base - 0.5 * shift)
    assert probabilistic_or(p1, p2, 0.5) < probabilistic_or(p1, p2, 0.0)


def test_perfect_correlation_of_identical_events() -> None:
    """rho = 1 on the same event: A and A == A, A or A == A."""
    p = 0.3
    assert probabilistic_and(p, p, 1.0) == pytest.approx(p)
    assert probabilistic_or(p, p, 1.0) == pytest.approx(p)


def test_out_of_range_inputs_do_not_raise() -> None:
    assert probabilistic_and(1.5, 0.5, 0.0) == pytest.approx(0.75)
    assert math.isnan(probabilistic_and(1.5, 0.5, 0.3))
    # Invalid rho just produces a value outside [0, 1]
    assert probabilistic_and(0.5, 0.5, 3.0) > 0.5


def test_xor_and_not() -> None:
    assert probabilistic_xor(0.3, 0.6) == pytest.approx(0.3 + 0.6 - 2 * 0.18)
    assert probabilistic_not(0.25) == pytest.approx(0.75)
