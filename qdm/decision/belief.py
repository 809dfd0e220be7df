"""
QDM Decision: Bayesian belief model.

Holds a prior over a fixed, ordered set of hypotheses and revises it
with evidence:

    unnormalized_i = prior_i * evidence_i * evidence_weight
    posterior_i    = unnormalized_i / sum(unnormalized)

evidence_weight is a uniform sensitivity multiplier. Because it scales
every hypothesis equally it cancels out after normalization; it only
shows up in the unnormalized vector (see `unnormalized_posterior`).

Zero total evidence is a degenerate case, not an error: the all-zero
vector comes back unchanged (it is NOT replaced by a uniform
distribution), and callers should check for it.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from qdm.core.config import get_config
from qdm.core.errors import check_not_empty, check_same_length
from qdm.logging_utils import qwarn
from qdm.quantum.entropy import discrete_entropy, relative_entropy


class BayesianBeliefModel:
    """
    Prior beliefs plus an evidence weight.

    Usage:
        model = BayesianBeliefModel([0.3, 0.4, 0.3], evidence_weight=1.2)
        posterior = model.update_beliefs([0.8, 0.2, 0.5])

    `update_beliefs` never touches the stored prior. Use `observe` (or
    assign `model.prior = posterior`) to carry a posterior forward.
    """

    def __init__(
        self,
        prior: Sequence[float],
        evidence_weight: Optional[float] = None,
        hypotheses: Optional[Sequence[str]] = None,
    ):
        check_not_empty(prior, "prior")
        if evidence_weight is None:
            evidence_weight = get_config().belief.default_evidence_weight

        self.prior = np.array(prior, dtype=float)
        self.evidence_weight = float(evidence_weight)
        self._initial_prior = self.prior.copy()

        if hypotheses is None:
            hypotheses = [f"h{i}" for i in range(len(self.prior))]
        check_same_length(hypotheses, self.prior, "hypotheses", "prior")
        self.hypotheses: List[str] = [str(h) for h in hypotheses]

    def __len__(self) -> int:
        return len(self.prior)

    def __repr__(self) -> str:
        return (
            f"BayesianBeliefModel(prior={self.prior.tolist()}, "
            f"evidence_weight={self.evidence_weight})"
        )

    def unnormalized_posterior(self, evidence: Sequence[float]) -> np.ndarray:
        """prior * evidence * evidence_weight, element-wise."""
        check_same_length(self.prior, evidence, "prior", "evidence")
        ev = np.asarray(evidence, dtype=float)
        return self.prior * ev * self.evidence_weight

    def update_beliefs(self, evidence: Sequence[float]) -> np.ndarray:
        """
        Posterior beliefs given `evidence`.

        Parameters
        ----------
        evidence : sequence of float
            Likelihood-style weights, one per hypothesis.

        Returns
        -------
        numpy array, summing to 1 when the normalization constant is
        positive, otherwise the (all-zero) unnormalized vector.

        Raises
        ------
        LengthMismatchError
            If len(evidence) != len(prior).
        """
        posterior = self.unnormalized_posterior(evidence)
        normalization = posterior.sum()

        if normalization > 0:
            return posterior / normalization

        qwarn("Belief update has zero normalization constant; returning unnormalized posterior.")
        return posterior

    update = update_beliefs

    def observe(self, evidence: Sequence[float]) -> np.ndarray:
        """Update and adopt the posterior as the new prior."""
        posterior = self.update_beliefs(evidence)
        self.prior = posterior.copy()
        return posterior

    def reset(self) -> None:
        """Restore the prior supplied at construction."""
        self.prior = self._initial_prior.copy()

    def entropy(self, beliefs: Optional[Sequence[float]] = None) -> float:
        """Shannon entropy of `beliefs` (default: current prior)."""
        target = self.prior if beliefs is None else beliefs
        return discrete_entropy(target, base=get_config().belief.entropy_base)

    def information_gain(self, evidence: Sequence[float]) -> float:
        """
        KL divergence D(posterior || prior) for `evidence`.

        0.0 when the posterior is degenerate (all zero).
        """
        posterior = self.update_beliefs(evidence)
        return relative_entropy(posterior, self.prior, base=get_config().belief.entropy_base)

    def most_likely(self) -> str:
        """Label of the hypothesis with the largest current belief."""
        return self.hypotheses[int(np.argmax(self.prior))]

    def as_series(self) -> pd.Series:
        return pd.Series(self.prior, index=self.hypotheses, name="belief")
