"""
Kernel layer.

This package groups the deterministic integer kernels behind the StableSwap
functional core. `stableswap/kernels/python/` holds the human-readable
Python kernels; `stableswap/core/` wraps them in a positional, int-returning API.
"""
