"""
StableSwap swap kernel (v1 semantics).

- D is recomputed from the pre-swap balances on every call.
- The post-swap output balance is solved from D with the input side credited
  by the full `amount_in`.
- The fee is charged on the *gross* output using floor rounding:
      fee = floor(gross_out * fee_bps / 10_000)
  and stays in the pool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...errors import DomainFailure
from .stableswap_invariant_v1 import calc_d, calc_d_n, calc_y, calc_y_n


BPS_DENOM = 10_000


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_fee_bps(fee_bps: int) -> None:
    _require_int("fee_bps", fee_bps)
    if not (0 <= fee_bps <= BPS_DENOM):
        raise ValueError(f"fee_bps must be in [0, {BPS_DENOM}]: {fee_bps}")


@dataclass(frozen=True)
class SwapQuote:
    amount_out: int
    gross_out: int
    fee: int
    d: int
    new_balance_in: int
    new_balance_out: int


def compute_fee(*, gross_out: int, fee_bps: int) -> int:
    """
    Compute `fee = floor(gross_out * fee_bps / 10_000)`.
    """
    _require_int("gross_out", gross_out)
    _require_fee_bps(fee_bps)
    if gross_out < 0:
        raise ValueError("gross_out must be non-negative")
    return gross_out * fee_bps // BPS_DENOM


def _quote(
    *, gross_out: int, fee_bps: int, d: int, balance_in: int, balance_out: int, amount_in: int
) -> SwapQuote:
    if gross_out < 0:
        raise DomainFailure(f"swap produces a negative output: {gross_out}")
    fee = compute_fee(gross_out=gross_out, fee_bps=fee_bps)
    amount_out = gross_out - fee
    return SwapQuote(
        amount_out=amount_out,
        gross_out=gross_out,
        fee=fee,
        d=d,
        new_balance_in=balance_in + amount_in,
        new_balance_out=balance_out - amount_out,
    )


def swap_exact_in(
    *,
    balance_in: int,
    balance_out: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> SwapQuote:
    """
    Exact-in quote for a two-asset pool.

    Solver failures (ConvergenceFailure) propagate unchanged.
    """
    for name, v in (
        ("balance_in", balance_in),
        ("balance_out", balance_out),
        ("amount_in", amount_in),
    ):
        _require_int(name, v)
        if v < 0:
            raise ValueError(f"{name} must be non-negative: {v}")
    _require_fee_bps(fee_bps)

    d = calc_d(balance_in, balance_out, amp)
    new_out = calc_y(balance_in + amount_in, d, amp)
    return _quote(
        gross_out=balance_out - new_out,
        fee_bps=fee_bps,
        d=d,
        balance_in=balance_in,
        balance_out=balance_out,
        amount_in=amount_in,
    )


def swap_exact_in_n(
    *,
    balances: Sequence[int],
    i: int,
    j: int,
    amount_in: int,
    amp: int,
    fee_bps: int,
) -> SwapQuote:
    """
    Exact-in quote for an n-asset pool, selling asset `i` for asset `j`.
    """
    _require_int("i", i)
    _require_int("j", j)
    _require_int("amount_in", amount_in)
    if amount_in < 0:
        raise ValueError(f"amount_in must be non-negative: {amount_in}")
    _require_fee_bps(fee_bps)
    n = len(balances)
    if not (0 <= i < n) or not (0 <= j < n):
        raise DomainFailure(f"asset index out of range for {n} balances: i={i} j={j}")
    if i == j:
        raise DomainFailure("cannot swap an asset for itself")

    d = calc_d_n(balances, amp)
    credited = list(balances)
    credited[i] += amount_in
    new_out = calc_y_n(credited, j, d, amp)
    return _quote(
        gross_out=balances[j] - new_out,
        fee_bps=fee_bps,
        d=d,
        balance_in=balances[i],
        balance_out=balances[j],
        amount_in=amount_in,
    )
