"""
QDM Module: expected_utility.py
-------------------------------
Expected-utility scoring of a single decision, plus a small helper for
comparing several decisions side by side.

Takes:
  - outcomes:      payoffs of each possible result of the decision
  - probabilities: parallel (not necessarily normalized) weights
  - kind / gamma:  which utility transform to apply

Produces:
  - EU = sum(w_i * u(x_i)) / sum(w_i)   when sum(w_i) > 0
  - EU = sum(w_i * u(x_i))              otherwise (raw, unnormalized)
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from qdm.core.config import get_config
from qdm.core.errors import check_not_empty, check_same_length
from qdm.decision.utility import UtilityKind, certainty_equivalent, get_utility_function


DecisionOptions = Mapping[str, Tuple[Sequence[float], Sequence[float]]]


def expected_utility_decision(
    outcomes: Sequence[float],
    probabilities: Sequence[float],
    kind: Union[UtilityKind, str] = UtilityKind.LINEAR,
    gamma: Optional[float] = None,
) -> float:
    """
    Probability-weighted average utility of a decision.

    Parameters
    ----------
    outcomes : sequence of float
        Outcome values. Non-positive outcomes are allowed; log/power
        utilities map them to the invalid-outcome sentinel.
    probabilities : sequence of float
        Weights parallel to `outcomes`. They are renormalized by their
        sum, so raw frequencies or odds-style weights work too.
    kind : UtilityKind or str
        Utility transform applied to each outcome.
    gamma : float, optional
        Exponent for POWER. Defaults to UtilityConfig.expected_utility_gamma.

    Returns
    -------
    float expected utility.

    Raises
    ------
    LengthMismatchError
        If outcomes and probabilities differ in length.
    """
    check_same_length(outcomes, probabilities, "outcomes", "probabilities")

    if gamma is None:
        gamma = get_config().utility.expected_utility_gamma
    u = get_utility_function(kind, gamma)

    total_utility = 0.0
    total_prob = 0.0
    for x, p in zip(outcomes, probabilities):
        total_utility += float(p) * u(float(x))
        total_prob += float(p)

    # Renormalize so unnormalized weights still give a weighted average
    if total_prob > 0:
        return total_utility / total_prob
    return total_utility


def compare_decisions(
    options: DecisionOptions,
    kind: Union[UtilityKind, str] = UtilityKind.LINEAR,
    gamma: Optional[float] = None,
) -> pd.DataFrame:
    """
    Score several decisions and rank them by expected utility.

    Parameters
    ----------
    options : mapping
        decision name -> (outcomes, probabilities)

    Returns
    -------
    DataFrame with columns:
        - decision
        - expected_utility
        - certainty_equivalent
        - rank          (1 = best)
    sorted best first. Ties keep the input order.
    """
    check_not_empty(options, "options")

    if gamma is None:
        gamma = get_config().utility.expected_utility_gamma

    rows = []
    for name, (outcomes, probabilities) in options.items():
        eu = expected_utility_decision(outcomes, probabilities, kind=kind, gamma=gamma)
        rows.append(
            {
                "decision": name,
                "expected_utility": eu,
                "certainty_equivalent": certainty_equivalent(eu, kind=kind, gamma=gamma),
            }
        )

    out = pd.DataFrame(rows)
    out = out.sort_values("expected_utility", ascending=False, kind="mergesort").reset_index(drop=True)
    out["rank"] = np.arange(1, len(out) + 1)
    return out


def best_decision(
    options: DecisionOptions,
    kind: Union[UtilityKind, str] = UtilityKind.LINEAR,
    gamma: Optional[float] = None,
) -> str:
    """Name of the decision with the highest expected utility."""
    ranked = compare_decisions(options, kind=kind, gamma=gamma)
    return str(ranked.loc[0, "decision"])
