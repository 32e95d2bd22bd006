#!/usr/bin/env python3
"""
Offline StableSwap quoting over a YAML pool config.

Examples:
  tools/stableswap_quote.py --config pools.yaml --pool usdc-usdt swap --in 0 --out 1 --amount 1000000
  tools/stableswap_quote.py --config pools.yaml --pool usdc-usdt deposit --amounts 100,100
  tools/stableswap_quote.py --config pools.yaml --pool usdc-usdt withdraw --lp 1000
  tools/stableswap_quote.py --config pools.yaml --pool usdc-usdt info --now 50000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any

import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stableswap.core.pricing import calc_min_output
from stableswap.errors import StableSwapError
from stableswap.state.config import load_pool_configs
from stableswap.state.pools import StableSwapPool


logger = logging.getLogger("stableswap.tools.quote")


def _parse_amounts(raw: str) -> list[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise SystemExit(f"invalid --amounts {raw!r}: {exc}") from exc


def _swap(pool: StableSwapPool, args: argparse.Namespace, now: int) -> dict[str, Any]:
    quote = pool.quote_swap(args.asset_in, args.asset_out, args.amount, now)
    out: dict[str, Any] = {
        "amount_out": quote.amount_out,
        "gross_out": quote.gross_out,
        "fee": quote.fee,
        "d": quote.d,
        "new_balance_in": quote.new_balance_in,
        "new_balance_out": quote.new_balance_out,
    }
    if args.slippage_bps is not None:
        out["min_amount_out"] = calc_min_output(quote.amount_out, args.slippage_bps)
    return out


def _deposit(pool: StableSwapPool, args: argparse.Namespace, now: int) -> dict[str, Any]:
    res = pool.quote_deposit(_parse_amounts(args.amounts), now)
    return {"lp_minted": res.lp_minted, "new_lp_supply": res.new_lp_supply}


def _withdraw(pool: StableSwapPool, args: argparse.Namespace, now: int) -> dict[str, Any]:
    _ = now
    res = pool.quote_withdraw(args.lp)
    return {"amounts": list(res.amounts), "new_lp_supply": res.new_lp_supply}


def _info(pool: StableSwapPool, args: argparse.Namespace, now: int) -> dict[str, Any]:
    _ = args
    out: dict[str, Any] = {
        "name": pool.name,
        "balances": list(pool.balances),
        "fee_bps": pool.fee_bps,
        "lp_supply": pool.lp_supply,
        "amp": pool.amp_at(now),
        "d": pool.invariant(now),
    }
    if pool.lp_supply > 0:
        out["virtual_price"] = pool.virtual_price(now)
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Quote swaps and LP operations against StableSwap pools.")
    ap.add_argument("--config", type=Path, required=True, help="YAML pool config")
    ap.add_argument("--pool", type=str, required=True, help="pool name (or index for unnamed pools)")
    ap.add_argument("--now", type=int, default=None, help="unix timestamp used for amp ramps (default: now)")
    ap.add_argument("--log-level", type=str, default="WARNING")
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("swap", help="exact-in swap quote")
    sp.add_argument("--in", dest="asset_in", type=int, required=True)
    sp.add_argument("--out", dest="asset_out", type=int, required=True)
    sp.add_argument("--amount", type=int, required=True)
    sp.add_argument("--slippage-bps", type=int, default=None)
    sp.set_defaults(handler=_swap)

    dp = sub.add_parser("deposit", help="LP tokens minted for a deposit")
    dp.add_argument("--amounts", type=str, required=True, help="comma-separated amounts, one per asset")
    dp.set_defaults(handler=_deposit)

    wp = sub.add_parser("withdraw", help="pro-rata withdrawal for burning LP tokens")
    wp.add_argument("--lp", type=int, required=True)
    wp.set_defaults(handler=_withdraw)

    ip = sub.add_parser("info", help="pool amp, invariant and virtual price")
    ip.set_defaults(handler=_info)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        pools = load_pool_configs(args.config)
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        print(f"[stableswap-quote] FAIL: invalid config {args.config}: {exc}", file=sys.stderr)
        return 1
    pool = pools.get(args.pool)
    if pool is None:
        print(f"unknown pool {args.pool!r}; available: {', '.join(sorted(pools))}", file=sys.stderr)
        return 2

    now = int(time.time()) if args.now is None else args.now
    try:
        result = args.handler(pool, args, now)
    except (StableSwapError, ValueError, TypeError) as exc:
        logger.debug("quote failed", exc_info=True)
        print(f"[stableswap-quote] FAIL: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
