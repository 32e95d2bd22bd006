"""
Pool state for StableSwap pools.

A `StableSwapPool` is an immutable snapshot: quoting never mutates it, and the
`apply_*` helpers return a fresh pool alongside the quote.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from ..core.amp_ramp import AmpRamp
from ..core.pricing import VIRTUAL_PRICE_SCALE, calc_virtual_price
from ..errors import DomainFailure
from ..kernels.python.stableswap_invariant_v1 import calc_d, calc_d_n
from ..kernels.python.stableswap_lp_v1 import BurnResult, MintResult, burn, mint_n, mint_pair
from ..kernels.python.stableswap_swap_v1 import BPS_DENOM, SwapQuote, swap_exact_in, swap_exact_in_n


MIN_ASSETS = 2
MAX_ASSETS = 8


@dataclass(frozen=True)
class StableSwapPool:
    """Balances, amplification schedule, fee and LP supply of one pool."""

    balances: Tuple[int, ...]
    ramp: AmpRamp
    fee_bps: int = 0
    lp_supply: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.balances, tuple):
            raise TypeError("balances must be a tuple")
        if not (MIN_ASSETS <= len(self.balances) <= MAX_ASSETS):
            raise ValueError(f"pool must hold {MIN_ASSETS}-{MAX_ASSETS} assets, got {len(self.balances)}")
        for i, v in enumerate(self.balances):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"balances[{i}] must be an int")
            if v < 0:
                raise ValueError(f"balances[{i}] must be non-negative: {v}")
        if not isinstance(self.ramp, AmpRamp):
            raise TypeError("ramp must be an AmpRamp")
        for name, v in (("fee_bps", self.fee_bps), ("lp_supply", self.lp_supply)):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
        if not (0 <= self.fee_bps <= BPS_DENOM):
            raise ValueError(f"fee_bps must be in [0, {BPS_DENOM}]: {self.fee_bps}")
        if self.lp_supply < 0:
            raise ValueError(f"lp_supply must be non-negative: {self.lp_supply}")

    @property
    def n_assets(self) -> int:
        return len(self.balances)

    @property
    def is_pair(self) -> bool:
        return len(self.balances) == 2

    def amp_at(self, now: int) -> int:
        return self.ramp.current(now)

    def invariant(self, now: int) -> int:
        amp = self.amp_at(now)
        if self.is_pair:
            return calc_d(self.balances[0], self.balances[1], amp)
        return calc_d_n(self.balances, amp)

    def quote_swap(self, i: int, j: int, amount_in: int, now: int) -> SwapQuote:
        """
        Exact-in quote selling asset `i` for asset `j`.

        Pair pools use the two-asset solver so results match `simulate_swap`.
        """
        amp = self.amp_at(now)
        if self.is_pair and {i, j} == {0, 1}:
            return swap_exact_in(
                balance_in=self.balances[i],
                balance_out=self.balances[j],
                amount_in=amount_in,
                amp=amp,
                fee_bps=self.fee_bps,
            )
        return swap_exact_in_n(
            balances=self.balances,
            i=i,
            j=j,
            amount_in=amount_in,
            amp=amp,
            fee_bps=self.fee_bps,
        )

    def quote_deposit(self, amounts: Sequence[int], now: int) -> MintResult:
        if len(amounts) != self.n_assets:
            raise ValueError(f"expected {self.n_assets} amounts, got {len(amounts)}")
        amp = self.amp_at(now)
        if self.is_pair:
            return mint_pair(
                amount0=amounts[0],
                amount1=amounts[1],
                balance0=self.balances[0],
                balance1=self.balances[1],
                lp_supply=self.lp_supply,
                amp=amp,
            )
        return mint_n(amounts=amounts, balances=self.balances, lp_supply=self.lp_supply, amp=amp)

    def quote_withdraw(self, lp_amount: int) -> BurnResult:
        if lp_amount > self.lp_supply:
            raise DomainFailure(f"cannot burn more LP than supply: {lp_amount} > {self.lp_supply}")
        return burn(lp_amount=lp_amount, balances=self.balances, lp_supply=self.lp_supply)

    def virtual_price(self, now: int) -> int:
        if self.is_pair:
            return calc_virtual_price(self.balances[0], self.balances[1], self.lp_supply, self.amp_at(now))
        if self.lp_supply == 0:
            raise DomainFailure("lp_supply is zero")
        return self.invariant(now) * VIRTUAL_PRICE_SCALE // self.lp_supply

    def apply_swap(self, i: int, j: int, amount_in: int, now: int) -> Tuple[SwapQuote, "StableSwapPool"]:
        quote = self.quote_swap(i, j, amount_in, now)
        balances = list(self.balances)
        balances[i] = quote.new_balance_in
        balances[j] = quote.new_balance_out
        return quote, replace(self, balances=tuple(balances))

    def apply_deposit(self, amounts: Sequence[int], now: int) -> Tuple[MintResult, "StableSwapPool"]:
        result = self.quote_deposit(amounts, now)
        balances = tuple(b + a for b, a in zip(self.balances, amounts))
        return result, replace(self, balances=balances, lp_supply=result.new_lp_supply)

    def apply_withdraw(self, lp_amount: int) -> Tuple[BurnResult, "StableSwapPool"]:
        result = self.quote_withdraw(lp_amount)
        balances = tuple(b - a for b, a in zip(self.balances, result.amounts))
        return result, replace(self, balances=balances, lp_supply=result.new_lp_supply)
