"""
Liquidity operations: LP mint pricing and pro-rata withdrawal.
"""

from typing import Sequence, Tuple

from ..kernels.python.stableswap_lp_v1 import burn, mint_n, mint_pair


def calc_lp_tokens(
    amt0: int,
    amt1: int,
    bal0: int,
    bal1: int,
    lp_supply: int,
    amp: int,
) -> int:
    """
    Compute LP tokens to mint for a deposit into a two-asset pool.

    For the first deposit (lp_supply == 0):
        lp = floor(sqrt(amt0 * amt1))

    For subsequent deposits:
        D0 = calc_d(bal0, bal1, amp)
        D1 = calc_d(bal0 + amt0, bal1 + amt1, amp)
        lp = floor(lp_supply * (D1 - D0) / D0)

    Args:
        amt0: Amount of asset0 being deposited
        amt1: Amount of asset1 being deposited
        bal0: Current balance of asset0
        bal1: Current balance of asset1
        lp_supply: Current LP token supply
        amp: Amplification coefficient

    Returns:
        Amount of LP tokens to mint

    Raises:
        DomainFailure: If D0 is zero while lp_supply is positive
        ConvergenceFailure: If either invariant solve fails
    """
    return mint_pair(
        amount0=amt0,
        amount1=amt1,
        balance0=bal0,
        balance1=bal1,
        lp_supply=lp_supply,
        amp=amp,
    ).lp_minted


def calc_withdraw(lp_amount: int, bal0: int, bal1: int, lp_supply: int) -> Tuple[int, int]:
    """
    Compute asset amounts returned for burning `lp_amount` LP tokens.

    Formula:
        amount_i = floor(bal_i * lp_amount / lp_supply)

    Raises:
        DomainFailure: If lp_supply is zero
    """
    amount0, amount1 = burn(lp_amount=lp_amount, balances=(bal0, bal1), lp_supply=lp_supply).amounts
    return amount0, amount1


def calc_lp_tokens_n(amounts: Sequence[int], balances: Sequence[int], lp_supply: int, amp: int) -> int:
    """n-asset counterpart of `calc_lp_tokens`."""
    return mint_n(amounts=amounts, balances=balances, lp_supply=lp_supply, amp=amp).lp_minted


def calc_withdraw_n(lp_amount: int, balances: Sequence[int], lp_supply: int) -> Tuple[int, ...]:
    """n-asset counterpart of `calc_withdraw`."""
    return burn(lp_amount=lp_amount, balances=balances, lp_supply=lp_supply).amounts
