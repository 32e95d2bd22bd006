# [TESTER] v1

from __future__ import annotations

import pytest

from stableswap.core.pricing import (
    PRICE_IMPACT_SCALE,
    VIRTUAL_PRICE_SCALE,
    calc_min_output,
    calc_price_impact,
    calc_virtual_price,
    check_imbalance,
)
from stableswap.core.swap import simulate_swap
from stableswap.errors import ConvergenceFailure, DomainFailure


def test_min_output() -> None:
    assert calc_min_output(1_000_000, 50) == 995_000
    assert calc_min_output(999, 1) == 998
    assert calc_min_output(1_000_000, 0) == 1_000_000


def test_price_impact_matches_swap() -> None:
    impact = calc_price_impact(1_000_000_000, 1_000_000_000, 100_000_000, 100, 30)
    out = simulate_swap(1_000_000_000, 1_000_000_000, 100_000_000, 100, 30)
    assert impact == PRICE_IMPACT_SCALE - out * PRICE_IMPACT_SCALE // 100_000_000
    # The 30 bps fee alone costs 0.3%.
    assert 2_900_000 < impact < 50_000_000


def test_price_impact_zero_input_fails() -> None:
    with pytest.raises(DomainFailure):
        calc_price_impact(1_000_000_000, 1_000_000_000, 0, 100, 30)


def test_price_impact_propagates_solver_failure() -> None:
    with pytest.raises(ConvergenceFailure):
        calc_price_impact(0, 1_000_000_000, 10, 100, 30)


def test_virtual_price_of_balanced_pool() -> None:
    assert calc_virtual_price(1_000_000_000, 1_000_000_000, 2_000_000_000, 100) == VIRTUAL_PRICE_SCALE


def test_virtual_price_zero_supply_fails() -> None:
    with pytest.raises(DomainFailure):
        calc_virtual_price(1, 1, 0, 100)


@pytest.mark.parametrize(
    "bal0,bal1,max_ratio,expected",
    [
        (15_000_000, 1_000_000, 10, False),
        (5_000_000, 1_000_000, 10, True),
        (1_000_000, 5_000_000, 10, True),
        (10_000_000, 1_000_000, 10, True),
        (0, 1_000_000, 10, False),
        (1_000_000, 0, 10, False),
    ],
)
def test_check_imbalance(bal0: int, bal1: int, max_ratio: int, expected: bool) -> None:
    assert check_imbalance(bal0, bal1, max_ratio) is expected
