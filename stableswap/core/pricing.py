"""Derived pricing quantities built on the invariant solver.

Every function is stateless and operates on plain Python ints.
"""

from __future__ import annotations

from ..errors import DomainFailure
from ..kernels.python.stableswap_invariant_v1 import calc_d
from .swap import simulate_swap

BPS_SCALE: int = 10_000
PRICE_IMPACT_SCALE: int = 1_000_000_000  # 1e9
VIRTUAL_PRICE_SCALE: int = 1_000_000_000_000_000_000  # 1e18


def calc_min_output(expected: int, slippage_bps: int) -> int:
    """Minimum acceptable output: ``expected * (10000 - slippage_bps) / 10000``."""
    return expected * (BPS_SCALE - slippage_bps) // BPS_SCALE


def calc_price_impact(bal_in: int, bal_out: int, amount_in: int, amp: int, fee_bps: int) -> int:
    """Price impact scaled by 1e9: ``1e9 - amount_out * 1e9 / amount_in``.

    A zero ``amount_in`` has no execution price and is rejected up front.
    """
    if amount_in == 0:
        raise DomainFailure("amount_in must be positive for price impact")
    amount_out = simulate_swap(bal_in, bal_out, amount_in, amp, fee_bps)
    return PRICE_IMPACT_SCALE - amount_out * PRICE_IMPACT_SCALE // amount_in


def calc_virtual_price(bal0: int, bal1: int, lp_supply: int, amp: int) -> int:
    """Value of one LP token in invariant units, scaled by 1e18."""
    if lp_supply == 0:
        raise DomainFailure("lp_supply is zero")
    d = calc_d(bal0, bal1, amp)
    return d * VIRTUAL_PRICE_SCALE // lp_supply


def check_imbalance(bal0: int, bal1: int, max_ratio: int) -> bool:
    """True when the larger balance is at most ``max_ratio`` times the smaller.

    Compared at percent resolution: ``max * 100 // min <= max_ratio * 100``.
    """
    if bal0 == 0 or bal1 == 0:
        return False
    hi, lo = max(bal0, bal1), min(bal0, bal1)
    return hi * 100 // lo <= max_ratio * 100
