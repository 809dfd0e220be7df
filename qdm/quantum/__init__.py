"""
QDM quantum-inspired utilities.

This package holds small, focused tools for the "quantum-flavored"
parts of the library:

- logic_gates: AND / OR / XOR / NOT for correlated event probabilities
- total_probability: classical vs interference law of total probability
- amplitude: interference of two amplitude (population) vectors
- entropy: uncertainty / information measures for belief vectors
"""

from . import amplitude
from . import entropy
from . import logic_gates
from . import total_probability

__all__ = ["amplitude", "entropy", "logic_gates", "total_probability"]
