"""
QDM Tests: multi_criteria
Seeded multi-criteria scoring, ranking and simulation.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from qdm.core.errors import EmptyInputError, LengthMismatchError
from qdm.decision.multi_criteria import (
    multi_criteria_decision,
    rank_alternatives,
    simulate_multi_criteria,
)


ALTERNATIVES = ["Option A", "Option B", "Option C"]
WEIGHTS = [0.4, 0.3, 0.3]
SCORES = [
    [8.0, 6.0, 7.0],
    [7.0, 8.0, 6.0],
    [6.0, 7.0, 9.0],
]


def _weighted_sums() -> list[float]:
    return [sum(w * s for w, s in zip(WEIGHTS, row)) for row in SCORES]


def test_empty_alternatives_raise() -> None:
    with pytest.raises(EmptyInputError):
        multi_criteria_decision([], WEIGHTS, [])


def test_row_length_mismatch_raises() -> None:
    scores = [[8.0, 6.0, 7.0], [7.0, 8.0]]
    with pytest.raises(LengthMismatchError):
        multi_criteria_decision(["a", "b"], WEIGHTS, scores)


def test_row_count_mismatch_raises() -> None:
    with pytest.raises(LengthMismatchError):
        multi_criteria_decision(ALTERNATIVES, WEIGHTS, SCORES[:2])


def test_zero_uncertainty_is_exact_weighted_sum() -> None:
    result = multi_criteria_decision(ALTERNATIVES, WEIGHTS, SCORES, uncertainty_factor=0.0, rng=42)
    assert list(result.index) == ALTERNATIVES
    assert list(result.values) == pytest.approx(_weighted_sums())


def test_same_seed_same_scores() -> None:
    first = multi_criteria_decision(ALTERNATIVES, WEIGHTS, SCORES, rng=np.random.default_rng(7))
    second = multi_criteria_decision(ALTERNATIVES, WEIGHTS, SCORES, rng=np.random.default_rng(7))
    pd.testing.assert_series_equal(first, second)


def test_draw_order_is_alternative_then_criterion() -> None:
    factor = 0.2
    draws = np.random.default_rng(3).uniform(-1.0, 1.0, size=(3, 3))
    expected = [
        sum(w * s * (1.0 + r * factor) for w, s, r in zip(WEIGHTS, row, draw_row))
        for row, draw_row in zip(SCORES, draws)
    ]

    result = multi_criteria_decision(ALTERNATIVES, WEIGHTS, SCORES, uncertainty_factor=factor, rng=3)
    assert list(result.values) == pytest.approx(expected)


def test_perturbation_stays_within_band() -> None:
    factor = 0.1
    result = multi_criteria_decision(ALTERNATIVES, WEIGHTS, SCORES, uncertainty_factor=factor, rng=11)
    for value, base in zip(result.values, _weighted_sums()):
        assert base * (1 - factor) <= value <= base * (1 + factor)


def test_weights_need_not_sum_to_one() -> None:
    result = multi_criteria_decision(["x"], [2.0, 3.0], [[1.0, 1.0]], uncertainty_factor=0.0)
    assert result["x"] == pytest.approx(5.0)


def test_dataframe_scores_accepted() -> None:
    frame = pd.DataFrame(SCORES, index=ALTERNATIVES, columns=["cost", "quality", "speed"])
    result = multi_criteria_decision(ALTERNATIVES, WEIGHTS, frame, uncertainty_factor=0.0)
    assert list(result.values) == pytest.approx(_weighted_sums())


def test_rank_alternatives_sorted_best_first() -> None:
    ranked = rank_alternatives(ALTERNATIVES, WEIGHTS, SCORES, uncertainty_factor=0.0)
    # sums: A = 7.1, B = 7.0, C = 7.2
    assert list(ranked["alternative"]) == ["Option C", "Option A", "Option B"]
    assert list(ranked["rank"]) == [1, 2, 3]


def test_simulation_summary() -> None:
    summary = simulate_multi_criteria(
        ALTERNATIVES, WEIGHTS, SCORES, uncertainty_factor=0.1, n_sims=4000, rng=123
    )

    assert list(summary["alternative"]) == ALTERNATIVES
    assert list(summary["base_score"]) == pytest.approx(_weighted_sums())
    assert summary["prob_best"].sum() == pytest.approx(1.0)
    assert (summary["std_score"] > 0).all()
    for mean, base in zip(summary["mean_score"], summary["base_score"]):
        assert mean == pytest.approx(base, rel=0.01)


def test_simulation_without_uncertainty_is_degenerate() -> None:
    summary = simulate_multi_criteria(
        ALTERNATIVES, WEIGHTS, SCORES, uncertainty_factor=0.0, n_sims=10, rng=0
    )
    assert list(summary["std_score"]) == pytest.approx([0.0, 0.0, 0.0])
    assert list(summary["prob_best"]) == pytest.approx([0.0, 0.0, 1.0])


def test_simulation_rejects_non_positive_runs() -> None:
    with pytest.raises(ValueError):
        simulate_multi_criteria(ALTERNATIVES, WEIGHTS, SCORES, n_sims=0)


def test_dataframe_rows_matched_by_label() -> None:
    frame = pd.DataFrame([[1.0], [9.0]], index=["b", "a"], columns=["quality"])
    result = multi_criteria_decision(["a", "b"], [1.0], frame, uncertainty_factor=0.0)

    assert result["a"] == pytest.approx(9.0)
    assert result["b"] == pytest.approx(1.0)


def test_dataframe_with_range_index_is_positional() -> None:
    frame = pd.DataFrame(SCORES)
    result = multi_criteria_decision(ALTERNATIVES, WEIGHTS, frame, uncertainty_factor=0.0)
    assert list(result.values) == pytest.approx(_weighted_sums())


def test_dataframe_missing_alternative_raises() -> None:
    frame = pd.DataFrame([[1.0], [9.0]], index=["b", "z"])
    with pytest.raises(KeyError):
        multi_criteria_decision(["a", "b"], [1.0], frame)
