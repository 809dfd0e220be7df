"""
QDM Configuration
=================
All tunable defaults in one place.

Function signatures across the package mirror these values; change them
here if you want a different house style (e.g. a more risk-averse
default gamma or a wider uncertainty band). The invalid-outcome
sentinel is fixed at -1000.0 (qdm.decision.utility.INVALID_UTILITY).
"""

from dataclasses import dataclass, field


@dataclass
class UtilityConfig:
    """Utility transform settings."""

    # gamma < 1 = risk-averse, 1 = linear, > 1 = risk-seeking
    default_power_gamma: float = 0.5

    # Exponent used by the expected-utility evaluator for POWER
    expected_utility_gamma: float = 0.7


@dataclass
class BeliefConfig:
    """Bayesian belief model settings."""

    # Uniform sensitivity multiplier applied to every evidence value
    default_evidence_weight: float = 1.0

    # Logarithm base for belief entropy (2 -> bits)
    entropy_base: float = 2.0


@dataclass
class MultiCriteriaConfig:
    """Multi-criteria evaluator settings."""

    # Half-width of the fractional score perturbation: (1 + U[-1, 1] * factor)
    uncertainty_factor: float = 0.1

    # Number of perturbed universes for simulate_multi_criteria
    default_simulations: int = 10_000


@dataclass
class QDMConfig:
    """Master configuration combining all settings."""

    utility: UtilityConfig = field(default_factory=UtilityConfig)
    belief: BeliefConfig = field(default_factory=BeliefConfig)
    multi_criteria: MultiCriteriaConfig = field(default_factory=MultiCriteriaConfig)

    # Print qstep progress lines
    verbose: bool = False


# Global default config
DEFAULT_CONFIG = QDMConfig()


def get_config() -> QDMConfig:
    """Get the default configuration."""
    return DEFAULT_CONFIG
