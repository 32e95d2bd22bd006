"""Exception types for the StableSwap engine.

Both failure kinds subclass ``ValueError`` so callers that already guard
quoting with ``except ValueError`` keep working.
"""

from __future__ import annotations


class StableSwapError(ValueError):
    """Base class for expected, recoverable pricing failures."""


class ConvergenceFailure(StableSwapError):
    """Raised when Newton's method does not converge or a denominator degenerates."""

    def __init__(self, routine: str, reason: str, iterations: int) -> None:
        self.routine = routine
        self.reason = reason
        self.iterations = iterations
        super().__init__(f"{routine}: {reason} after {iterations} iterations")


class DomainFailure(StableSwapError):
    """Raised when a precondition checked by the engine itself is violated."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
