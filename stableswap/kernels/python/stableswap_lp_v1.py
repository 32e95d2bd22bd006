"""
StableSwap liquidity kernel (v1 semantics).

Mint:
- First deposit into a pair pool mints floor(sqrt(amount0 * amount1)).
- Later deposits mint in proportion to invariant growth:
      lp = floor(lp_supply * (D1 - D0) / D0)
  so imbalanced deposits are priced by the curve.

Burn:
- Pro-rata, floor rounding, no invariant solve (a proportional withdrawal
  never moves the price).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ...errors import DomainFailure
from .stableswap_invariant_v1 import calc_d, calc_d_n, isqrt


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_non_negative(name: str, value: int) -> None:
    _require_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")


@dataclass(frozen=True)
class MintResult:
    lp_minted: int
    new_lp_supply: int


@dataclass(frozen=True)
class BurnResult:
    amounts: Tuple[int, ...]
    new_lp_supply: int


def _mint_from_growth(*, d0: int, d1: int, lp_supply: int) -> MintResult:
    if d0 == 0:
        raise DomainFailure("invariant of existing balances is zero")
    minted = lp_supply * (d1 - d0) // d0
    return MintResult(lp_minted=minted, new_lp_supply=lp_supply + minted)


def mint_pair(
    *,
    amount0: int,
    amount1: int,
    balance0: int,
    balance1: int,
    lp_supply: int,
    amp: int,
) -> MintResult:
    for name, v in (
        ("amount0", amount0),
        ("amount1", amount1),
        ("balance0", balance0),
        ("balance1", balance1),
        ("lp_supply", lp_supply),
    ):
        _require_non_negative(name, v)

    if lp_supply == 0:
        minted = isqrt(amount0 * amount1)
        return MintResult(lp_minted=minted, new_lp_supply=minted)

    d0 = calc_d(balance0, balance1, amp)
    d1 = calc_d(balance0 + amount0, balance1 + amount1, amp)
    return _mint_from_growth(d0=d0, d1=d1, lp_supply=lp_supply)


def mint_n(*, amounts: Sequence[int], balances: Sequence[int], lp_supply: int, amp: int) -> MintResult:
    """
    n-asset mint.

    The first deposit mints D of the deposit itself: the pair rule's geometric
    mean has no integer closed form for n > 2, and D equals n times the common
    amount for a balanced deposit.
    """
    if len(amounts) != len(balances):
        raise ValueError(f"expected {len(balances)} amounts, got {len(amounts)}")
    for i, v in enumerate(amounts):
        _require_non_negative(f"amounts[{i}]", v)
    _require_non_negative("lp_supply", lp_supply)

    if lp_supply == 0:
        minted = calc_d_n(amounts, amp)
        return MintResult(lp_minted=minted, new_lp_supply=minted)

    d0 = calc_d_n(balances, amp)
    d1 = calc_d_n([b + a for b, a in zip(balances, amounts)], amp)
    return _mint_from_growth(d0=d0, d1=d1, lp_supply=lp_supply)


def burn(*, lp_amount: int, balances: Sequence[int], lp_supply: int) -> BurnResult:
    """
    Pro-rata withdrawal: amount_i = floor(balance_i * lp_amount / lp_supply).
    """
    _require_non_negative("lp_amount", lp_amount)
    _require_non_negative("lp_supply", lp_supply)
    for i, v in enumerate(balances):
        _require_non_negative(f"balances[{i}]", v)
    if lp_supply == 0:
        raise DomainFailure("lp_supply is zero")

    amounts = tuple(v * lp_amount // lp_supply for v in balances)
    return BurnResult(amounts=amounts, new_lp_supply=lp_supply - lp_amount)
