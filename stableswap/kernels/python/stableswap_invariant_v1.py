"""
StableSwap invariant kernel (v1 semantics).

Invariant (n assets, Ann = A * n**n):
  Ann * sum(x_i) + D = Ann * D + D**(n+1) / (n**n * prod(x_i))

This kernel solves the invariant with integer Newton iterations:
- `calc_d` / `calc_d_n` compute D from balances.
- `calc_y` / `calc_y_n` compute one balance from the others and a known D.

Rounding and convergence are consensus-critical:
- Every division is Python floor division on non-negative operands, applied in
  the exact order written below (reordering changes the converged value).
- A result is accepted once two successive iterates differ by at most
  `CONVERGENCE_TOLERANCE`.
- At most `MAX_ITERATIONS` steps are taken; exhausting them is a failure.
- A zero or non-positive denominator is a failure, never a division.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...errors import ConvergenceFailure, DomainFailure


logger = logging.getLogger(__name__)

MAX_ITERATIONS = 255
CONVERGENCE_TOLERANCE = 1

# Pair-pool constants: n = 2, n**n = 4.
_PAIR_N = 2
_PAIR_N_POW_N = 4


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_non_negative(name: str, value: int) -> None:
    _require_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")


def _require_amp(amp: int) -> None:
    _require_int("amp", amp)
    if amp <= 0:
        raise ValueError(f"amp must be positive: {amp}")


def _failure(routine: str, reason: str, iterations: int) -> ConvergenceFailure:
    logger.debug("%s failed: %s (iterations=%d)", routine, reason, iterations)
    return ConvergenceFailure(routine, reason, iterations)


def _converged(new: int, old: int) -> bool:
    return abs(new - old) <= CONVERGENCE_TOLERANCE


def isqrt(n: int) -> int:
    """
    Floor square root by integer Newton iteration.

    Starts from x0 = n and stops as soon as an iterate fails to decrease.
    0..3 are returned directly (they are fixed points of the floor root).
    """
    _require_non_negative("n", n)
    if n == 0:
        return 0
    if n < 4:
        return 1

    x = n
    y = (x + n // x) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def calc_d(x: int, y: int, amp: int) -> int:
    """
    Invariant D of a two-asset pool.

    Newton step with Ann = amp * 4 and S = x + y:
        d_p   = (D*D // (2x)) * D // (2y)
        D'    = (Ann*S + 2*d_p) * D // ((Ann - 1)*D + 3*d_p)

    Returns 0 for an empty pool. Raises ConvergenceFailure when a balance is
    zero in a non-empty pool, when the denominator degenerates, or after
    MAX_ITERATIONS steps without convergence.
    """
    _require_non_negative("x", x)
    _require_non_negative("y", y)
    _require_amp(amp)

    s = x + y
    if s == 0:
        return 0
    if x == 0 or y == 0:
        raise _failure("calc_d", "zero_denominator", 0)

    ann = amp * _PAIR_N_POW_N
    d = s
    for i in range(MAX_ITERATIONS):
        d_p = d * d // (_PAIR_N * x) * d // (_PAIR_N * y)
        denominator = (ann - 1) * d + (_PAIR_N + 1) * d_p
        if denominator == 0:
            raise _failure("calc_d", "zero_denominator", i)
        if denominator < 0:
            raise _failure("calc_d", "non_positive_denominator", i)
        d_next = (ann * s + _PAIR_N * d_p) * d // denominator
        if _converged(d_next, d):
            return d_next
        d = d_next
    raise _failure("calc_d", "max_iterations", MAX_ITERATIONS)


def newton_y(*, d: int, c: int, b: int, seed: int, routine: str = "newton_y") -> int:
    """
    Shared Y iterator: y' = (y*y + c) // (2*y + b - d).

    Used by both the pair solver and the n-asset solver; only the
    precomputed `c`, `b` and the seed differ between them.
    """
    y = seed
    for i in range(MAX_ITERATIONS):
        denominator = 2 * y + b - d
        if denominator <= 0:
            raise _failure(routine, "non_positive_denominator", i)
        y_next = (y * y + c) // denominator
        if _converged(y_next, y):
            return y_next
        y = y_next
    raise _failure(routine, "max_iterations", MAX_ITERATIONS)


def calc_y(x_new: int, d: int, amp: int) -> int:
    """
    Counterpart balance of a two-asset pool given the other balance and D.

        c = (D*D // (2*x_new)) * D // (2*Ann)
        b = x_new + D // Ann
    """
    _require_non_negative("x_new", x_new)
    _require_non_negative("d", d)
    _require_amp(amp)
    if x_new == 0:
        raise _failure("calc_y", "zero_denominator", 0)

    ann = amp * _PAIR_N_POW_N
    c = d * d // (_PAIR_N * x_new) * d // (_PAIR_N * ann)
    b = x_new + d // ann
    return newton_y(d=d, c=c, b=b, seed=d, routine="calc_y")


def calc_d_n(balances: Sequence[int], amp: int) -> int:
    """
    Invariant D of an n-asset pool (n = len(balances)).

    d_p is accumulated by repeated division (acc = acc*D // (x_i*n)) so that
    no intermediate carries the full D**(n+1) product. For n == 2 this is
    step-for-step identical to `calc_d`.
    """
    for i, v in enumerate(balances):
        _require_non_negative(f"balances[{i}]", v)
    _require_amp(amp)

    n = len(balances)
    s = sum(balances)
    if s == 0:
        return 0
    if any(v == 0 for v in balances):
        raise _failure("calc_d_n", "zero_denominator", 0)

    ann = amp * n**n
    d = s
    for i in range(MAX_ITERATIONS):
        d_p = d
        for v in balances:
            d_p = d_p * d // (v * n)
        denominator = (ann - 1) * d + (n + 1) * d_p
        if denominator == 0:
            raise _failure("calc_d_n", "zero_denominator", i)
        if denominator < 0:
            raise _failure("calc_d_n", "non_positive_denominator", i)
        d_next = (ann * s + n * d_p) * d // denominator
        if _converged(d_next, d):
            return d_next
        d = d_next
    raise _failure("calc_d_n", "max_iterations", MAX_ITERATIONS)


def calc_y_n(balances: Sequence[int], out_index: int, d: int, amp: int) -> int:
    """
    Balance at `out_index` of an n-asset pool given every other balance and D.

    The value currently stored at `out_index` is ignored.

        c = D**(n+1) // (n**n * prod_without * Ann)   (by repeated division)
        b = sum_without + D // Ann
    """
    for i, v in enumerate(balances):
        _require_non_negative(f"balances[{i}]", v)
    _require_int("out_index", out_index)
    _require_non_negative("d", d)
    _require_amp(amp)

    n = len(balances)
    if not (0 <= out_index < n):
        raise DomainFailure(f"out_index {out_index} out of range for {n} balances")

    ann = amp * n**n
    # D**(n+1) numerator: the pair formula in calc_y generalised to n assets.
    c = d
    s_without = 0
    for k, v in enumerate(balances):
        if k == out_index:
            continue
        if v == 0:
            raise _failure("calc_y_n", "zero_denominator", 0)
        s_without += v
        c = c * d // (v * n)
    c = c * d // (ann * n)
    b = s_without + d // ann
    return newton_y(d=d, c=c, b=b, seed=d, routine="calc_y_n")
