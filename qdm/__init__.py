"""
QDM - Quantum Decision Modeling
===============================

Probabilistic and quantum-inspired decision primitives.

Quick Start:
    import math
    from qdm import expected_utility_decision, BayesianBeliefModel, quantum_ltp

    # Risk-averse expected utility
    eu = expected_utility_decision([100, 50, -20], [0.5, 0.3, 0.2], kind="power")

    # Bayesian update
    model = BayesianBeliefModel([0.3, 0.4, 0.3], evidence_weight=1.2)
    posterior = model.update_beliefs([0.8, 0.2, 0.5])

    # Interference-augmented total probability
    p = quantum_ltp(0.5, 0.5, 0.2, 0.8, theta=math.pi / 3)
"""

__version__ = "1.0.0"

# Core imports
from qdm.core.config import get_config, QDMConfig
from qdm.core.errors import QDMError, LengthMismatchError, EmptyInputError

# Decision imports
from qdm.decision.utility import (
    INVALID_UTILITY,
    UtilityKind,
    linear_utility,
    log_utility,
    power_utility,
    get_utility_function,
)
from qdm.decision.expected_utility import (
    expected_utility_decision,
    compare_decisions,
    best_decision,
)
from qdm.decision.belief import BayesianBeliefModel
from qdm.decision.multi_criteria import (
    multi_criteria_decision,
    rank_alternatives,
    simulate_multi_criteria,
)

# Quantum imports
from qdm.quantum.logic_gates import probabilistic_and, probabilistic_or
from qdm.quantum.total_probability import classical_ltp, quantum_ltp
from qdm.quantum.amplitude import neural_population_interference, vector_norm

__all__ = [
    # Version
    '__version__',

    # Config / errors
    'get_config',
    'QDMConfig',
    'QDMError',
    'LengthMismatchError',
    'EmptyInputError',

    # Utility
    'INVALID_UTILITY',
    'UtilityKind',
    'linear_utility',
    'log_utility',
    'power_utility',
    'get_utility_function',

    # Expected utility
    'expected_utility_decision',
    'compare_decisions',
    'best_decision',

    # Beliefs
    'BayesianBeliefModel',

    # Multi-criteria
    'multi_criteria_decision',
    'rank_alternatives',
    'simulate_multi_criteria',

    # Quantum
    'probabilistic_and',
    'probabilistic_or',
    'classical_ltp',
    'quantum_ltp',
    'neural_population_interference',
    'vector_norm',
]
