"""
Core StableSwap algorithms
"""

from ..kernels.python.stableswap_invariant_v1 import (
    CONVERGENCE_TOLERANCE,
    MAX_ITERATIONS,
    calc_d,
    calc_d_n,
    calc_y,
    calc_y_n,
    isqrt,
)
from .swap import simulate_swap, simulate_swap_no_fee, simulate_swap_n
from .liquidity import calc_lp_tokens, calc_lp_tokens_n, calc_withdraw, calc_withdraw_n
from .amp_ramp import AmpRamp, get_current_amp, start_ramp, stop_ramp
from .pricing import calc_min_output, calc_price_impact, calc_virtual_price, check_imbalance

__all__ = [
    "CONVERGENCE_TOLERANCE",
    "MAX_ITERATIONS",
    "calc_d",
    "calc_d_n",
    "calc_y",
    "calc_y_n",
    "isqrt",
    "simulate_swap",
    "simulate_swap_no_fee",
    "simulate_swap_n",
    "calc_lp_tokens",
    "calc_lp_tokens_n",
    "calc_withdraw",
    "calc_withdraw_n",
    "AmpRamp",
    "get_current_amp",
    "start_ramp",
    "stop_ramp",
    "calc_min_output",
    "calc_price_impact",
    "calc_virtual_price",
    "check_imbalance",
]
