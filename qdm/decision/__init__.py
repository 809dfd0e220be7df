"""QDM Decision - utilities, expected utility, beliefs and multi-criteria scoring."""

from qdm.decision.utility import (
    INVALID_UTILITY,
    UtilityKind,
    linear_utility,
    log_utility,
    power_utility,
    get_utility_function,
    evaluate_utility,
    certainty_equivalent,
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

__all__ = [
    'INVALID_UTILITY',
    'UtilityKind',
    'linear_utility',
    'log_utility',
    'power_utility',
    'get_utility_function',
    'evaluate_utility',
    'certainty_equivalent',
    'expected_utility_decision',
    'compare_decisions',
    'best_decision',
    'BayesianBeliefModel',
    'multi_criteria_decision',
    'rank_alternatives',
    'simulate_multi_criteria',
]
