"""
QDM Decision: Multi-criteria scoring under uncertainty.

Each alternative has one score per criterion. Every score is perturbed
by an independent uniform draw before weighting:

    adj_ij   = U[-1, 1] * uncertainty_factor
    score_i  = sum_j  weight_j * scores_ij * (1 + adj_ij)

The draws come from an explicitly passed numpy Generator (or an int
seed), so two calls with the same seed give the same scores and
uncertainty_factor=0 gives the plain weighted sum.

`simulate_multi_criteria` repeats the perturbed scoring many times in
one vectorized pass to show how stable a ranking is.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from qdm.core.config import get_config
from qdm.core.errors import check_not_empty, check_same_length
from qdm.logging_utils import qstep


RandomState = Union[np.random.Generator, int, None]


def _as_generator(rng: RandomState) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _align_frame(frame: pd.DataFrame, names: list[str]) -> np.ndarray:
    """
    Rows of `frame` in the order of `names`.

    A frame with a default RangeIndex is read positionally. Any other
    index must label every alternative; rows are picked by label.
    """
    check_same_length(names, frame, "alternatives", "scores")
    if isinstance(frame.index, pd.RangeIndex):
        return frame.to_numpy()

    labelled = frame.set_axis(frame.index.astype(str), axis=0)
    missing = [n for n in names if n not in labelled.index]
    if missing:
        raise KeyError(f"scores index is missing alternatives: {missing}")
    return labelled.loc[names].to_numpy()


def _validated_matrix(
    alternatives: Sequence[str],
    criteria_weights: Sequence[float],
    scores,
) -> tuple[list[str], np.ndarray, np.ndarray]:
    """
    Check shapes and return (names, weights, score_matrix).

    Raises EmptyInputError for no alternatives and LengthMismatchError
    for a score table that does not line up with names / weights.
    """
    names = [str(a) for a in alternatives]
    check_not_empty(names, "alternatives")

    if isinstance(scores, pd.DataFrame):
        scores = _align_frame(scores, names)

    weights = np.asarray(criteria_weights, dtype=float)
    check_same_length(names, scores, "alternatives", "scores")

    rows = []
    for name, row in zip(names, scores):
        check_same_length(row, weights, f"scores[{name!r}]", "criteria_weights")
        rows.append(np.asarray(row, dtype=float))

    matrix = np.vstack(rows)
    return names, weights, matrix


def multi_criteria_decision(
    alternatives: Sequence[str],
    criteria_weights: Sequence[float],
    scores,
    uncertainty_factor: Optional[float] = None,
    rng: RandomState = None,
) -> pd.Series:
    """
    Weighted multi-criteria score per alternative with random perturbation.

    Parameters
    ----------
    alternatives : sequence of str
        Alternative names; output order follows this order.
    criteria_weights : sequence of float
        Non-negative weights, one per criterion (need not sum to 1).
    scores : 2D array-like
        scores[i][j] = score of alternative i on criterion j. A DataFrame
        indexed by alternative name is matched by label, not position.
    uncertainty_factor : float, optional
        Half-width of the fractional perturbation. Defaults to
        MultiCriteriaConfig.uncertainty_factor (0.1).
    rng : numpy Generator, int or None
        Random source. Draws are consumed alternative by alternative,
        criterion by criterion.

    Returns
    -------
    pandas.Series of float scores indexed by alternative name.

    Raises
    ------
    EmptyInputError
        If there are no alternatives.
    LengthMismatchError
        If the score table does not match alternatives / weights.
    """
    names, weights, matrix = _validated_matrix(alternatives, criteria_weights, scores)

    if uncertainty_factor is None:
        uncertainty_factor = get_config().multi_criteria.uncertainty_factor
    gen = _as_generator(rng)

    draws = gen.uniform(-1.0, 1.0, size=matrix.shape)
    adjustment = draws * float(uncertainty_factor)

    totals = (matrix * (1.0 + adjustment) * weights[None, :]).sum(axis=1)
    return pd.Series(totals, index=names, name="score")


def rank_alternatives(
    alternatives: Sequence[str],
    criteria_weights: Sequence[float],
    scores,
    uncertainty_factor: Optional[float] = None,
    rng: RandomState = None,
) -> pd.DataFrame:
    """
    Same as multi_criteria_decision, returned as a ranked table.

    Returns
    -------
    DataFrame with columns:
        - alternative
        - score
        - rank        (1 = best; ties keep input order)
    sorted best first.
    """
    series = multi_criteria_decision(
        alternatives,
        criteria_weights,
        scores,
        uncertainty_factor=uncertainty_factor,
        rng=rng,
    )
    out = pd.DataFrame({"alternative": series.index, "score": series.values})
    out = out.sort_values("score", ascending=False, kind="mergesort").reset_index(drop=True)
    out["rank"] = np.arange(1, len(out) + 1)
    return out


def simulate_multi_criteria(
    alternatives: Sequence[str],
    criteria_weights: Sequence[float],
    scores,
    uncertainty_factor: Optional[float] = None,
    n_sims: Optional[int] = None,
    rng: RandomState = None,
) -> pd.DataFrame:
    """
    Repeat the perturbed scoring `n_sims` times.

    Returns
    -------
    DataFrame with one row per alternative (input order):
        - alternative
        - base_score    (unperturbed weighted sum)
        - mean_score
        - std_score
        - prob_best     (share of universes where it scored highest)
    """
    names, weights, matrix = _validated_matrix(alternatives, criteria_weights, scores)

    cfg = get_config().multi_criteria
    if uncertainty_factor is None:
        uncertainty_factor = cfg.uncertainty_factor
    if n_sims is None:
        n_sims = cfg.default_simulations
    if n_sims <= 0:
        raise ValueError(f"n_sims must be > 0, got {n_sims}")
    gen = _as_generator(rng)

    n_alt, n_crit = matrix.shape
    draws = gen.uniform(-1.0, 1.0, size=(n_sims, n_alt, n_crit))
    perturbed = matrix[None, :, :] * (1.0 + draws * float(uncertainty_factor))
    totals = (perturbed * weights[None, None, :]).sum(axis=2)  # (n_sims, n_alt)

    winners = np.argmax(totals, axis=1)
    prob_best = np.bincount(winners, minlength=n_alt) / float(n_sims)

    out = pd.DataFrame(
        {
            "alternative": names,
            "base_score": (matrix * weights[None, :]).sum(axis=1),
            "mean_score": totals.mean(axis=0),
            "std_score": totals.std(axis=0, ddof=0),
            "prob_best": prob_best,
        }
    )

    leader = out.loc[out["prob_best"].idxmax()]
    qstep(
        f"Simulated {n_sims} universes for {n_alt} alternatives; "
        f"{leader['alternative']} best in {leader['prob_best']:.1%}"
    )
    return out
