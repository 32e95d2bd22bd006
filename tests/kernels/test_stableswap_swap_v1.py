# [TESTER] v1

from __future__ import annotations

import pytest

from stableswap.errors import DomainFailure
from stableswap.kernels.python.stableswap_swap_v1 import compute_fee, swap_exact_in, swap_exact_in_n


def test_compute_fee_rounds_down() -> None:
    assert compute_fee(gross_out=9_999, fee_bps=1) == 0
    assert compute_fee(gross_out=10_000, fee_bps=1) == 1
    assert compute_fee(gross_out=99_999_999, fee_bps=30) == 299_999


def test_compute_fee_rejects_out_of_range_bps() -> None:
    with pytest.raises(ValueError):
        compute_fee(gross_out=1, fee_bps=10_001)


def test_quote_accounts_for_fee_and_post_state() -> None:
    q = swap_exact_in(
        balance_in=1_000_000_000,
        balance_out=1_000_000_000,
        amount_in=100_000_000,
        amp=100,
        fee_bps=30,
    )
    assert q.d == 2_000_000_000
    assert q.amount_out == q.gross_out - q.fee
    assert q.fee == q.gross_out * 30 // 10_000
    assert q.new_balance_in == 1_100_000_000
    # The fee stays in the pool.
    assert q.new_balance_out == 1_000_000_000 - q.amount_out


def test_quote_rejects_negative_amount_in() -> None:
    with pytest.raises(ValueError):
        swap_exact_in(balance_in=10, balance_out=10, amount_in=-1, amp=100, fee_bps=0)


def test_n_quote_on_pair_matches_pair_quote() -> None:
    pair = swap_exact_in(balance_in=3_000_000, balance_out=5_000_000, amount_in=250_000, amp=60, fee_bps=4)
    n = swap_exact_in_n(balances=[3_000_000, 5_000_000], i=0, j=1, amount_in=250_000, amp=60, fee_bps=4)
    assert n == pair


@pytest.mark.parametrize("i,j", [(0, 0), (0, 3), (-1, 1)])
def test_n_quote_rejects_bad_indices(i: int, j: int) -> None:
    with pytest.raises(DomainFailure):
        swap_exact_in_n(balances=[10, 10, 10], i=i, j=j, amount_in=1, amp=100, fee_bps=0)
