"""
Pool state and configuration for StableSwap pools.
"""

from .pools import StableSwapPool
from .config import load_pool_configs, parse_pool_config, parse_pool_configs

__all__ = [
    "StableSwapPool",
    "load_pool_configs",
    "parse_pool_config",
    "parse_pool_configs",
]
