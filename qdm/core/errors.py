"""
QDM Module: errors.py
Checked failure conditions shared by every evaluator.

Only two things are treated as errors: parallel inputs of different
lengths, and an empty input where at least one element is required.
Everything else (non-positive outcomes, zero-sum posteriors, odd rho or
theta values) comes back as a sentinel or degenerate value instead.
"""

from __future__ import annotations

from typing import Sized


class QDMError(ValueError):
    """Base class for QDM input errors."""


class LengthMismatchError(QDMError):
    """Parallel sequences were supplied with different lengths."""

    def __init__(self, left_name: str, left_len: int, right_name: str, right_len: int):
        self.left_name = left_name
        self.left_len = left_len
        self.right_name = right_name
        self.right_len = right_len
        super().__init__(
            f"{left_name} and {right_name} must have the same length, "
            f"got {left_len} and {right_len}."
        )


class EmptyInputError(QDMError):
    """An input that needs at least one element was empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} must not be empty.")


def check_same_length(left: Sized, right: Sized, left_name: str, right_name: str) -> int:
    """Raise LengthMismatchError unless len(left) == len(right); return the length."""
    n_left = len(left)
    n_right = len(right)
    if n_left != n_right:
        raise LengthMismatchError(left_name, n_left, right_name, n_right)
    return n_left


def check_not_empty(values: Sized, name: str) -> None:
    if len(values) == 0:
        raise EmptyInputError(name)
