"""
StableSwap swap simulation.

This module exposes the swap kernel as plain int-returning functions.

Algorithm Design:
- Type: Fixed-Point Integer Arithmetic / Newton Root Finding
- Time Complexity: O(MAX_ITERATIONS * n) per swap
- Space Complexity: O(n) auxiliary
- Invariant: D is recomputed from the pre-swap balances on every call
"""

from typing import Sequence

from ..kernels.python.stableswap_swap_v1 import swap_exact_in as _kernel_swap_exact_in_v1
from ..kernels.python.stableswap_swap_v1 import swap_exact_in_n as _kernel_swap_exact_in_n_v1


def simulate_swap(
    bal_in: int,
    bal_out: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> int:
    """
    Compute the output of an exact-in swap on a two-asset pool, net of fee.

    This implements:
        D = calc_d(bal_in, bal_out, amp)
        new_bal_out = calc_y(bal_in + amount_in, D, amp)
        gross_out = bal_out - new_bal_out
        fee = floor(gross_out * fee_bps / 10_000)
        amount_out = gross_out - fee

    Args:
        bal_in: Current balance of the input asset
        bal_out: Current balance of the output asset
        amount_in: Exact input amount
        amp: Amplification coefficient
        fee_bps: Fee in basis points (0-10000)

    Returns:
        amount_out

    Raises:
        ConvergenceFailure: If either solver fails
        DomainFailure: If the swap would produce a negative output
    """
    return _kernel_swap_exact_in_v1(
        balance_in=bal_in,
        balance_out=bal_out,
        amount_in=amount_in,
        amp=amp,
        fee_bps=fee_bps,
    ).amount_out


def simulate_swap_no_fee(bal_in: int, bal_out: int, amount_in: int, amp: int) -> int:
    """
    Fee-exempt variant of `simulate_swap` (returns the gross output).
    """
    return _kernel_swap_exact_in_v1(
        balance_in=bal_in,
        balance_out=bal_out,
        amount_in=amount_in,
        amp=amp,
        fee_bps=0,
    ).amount_out


def simulate_swap_n(
    balances: Sequence[int],
    i: int,
    j: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> int:
    """
    Exact-in swap of asset `i` for asset `j` on an n-asset pool, net of fee.

    Raises:
        DomainFailure: If `i == j` or either index is out of range
        ConvergenceFailure: If either solver fails
    """
    return _kernel_swap_exact_in_n_v1(
        balances=balances,
        i=i,
        j=j,
        amount_in=amount_in,
        amp=amp,
        fee_bps=fee_bps,
    ).amount_out
