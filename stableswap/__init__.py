"""
StableSwap invariant engine: pure integer math for StableSwap pools.
"""

from .errors import ConvergenceFailure, DomainFailure, StableSwapError

__version__ = "0.1.0"

__all__ = [
    "ConvergenceFailure",
    "DomainFailure",
    "StableSwapError",
]
