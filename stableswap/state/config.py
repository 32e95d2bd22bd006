"""
YAML pool configuration.

Document shape:

    pools:
      - name: usdc-usdt
        balances: [1000000000, 1000000000]
        fee_bps: 4
        lp_supply: 2000000000
        amp: 100
      - name: tri
        balances: [10, 10, 10]
        ramp: {initial_amp: 100, target_amp: 200, ramp_start: 1000, ramp_end: 90000}

Exactly one of `amp` / `ramp` must be given per pool.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from ..core.amp_ramp import AmpRamp
from .pools import StableSwapPool


_RAMP_KEYS = ("initial_amp", "target_amp", "ramp_start", "ramp_end")


def _require_int_field(where: str, name: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{where}: {name} must be an int, got {type(value).__name__}")
    return value


def _parse_ramp(where: str, obj: Mapping[str, Any]) -> AmpRamp:
    has_amp = "amp" in obj
    has_ramp = "ramp" in obj
    if has_amp == has_ramp:
        raise ValueError(f"{where}: exactly one of 'amp' or 'ramp' is required")
    if has_amp:
        return AmpRamp.constant(_require_int_field(where, "amp", obj["amp"]))

    ramp = obj["ramp"]
    if not isinstance(ramp, Mapping):
        raise ValueError(f"{where}: ramp must be a mapping")
    unknown = set(ramp) - set(_RAMP_KEYS)
    if unknown:
        raise ValueError(f"{where}: unknown ramp keys: {sorted(unknown)}")
    missing = [k for k in ("initial_amp", "target_amp") if k not in ramp]
    if missing:
        raise ValueError(f"{where}: ramp is missing {missing}")
    return AmpRamp(**{k: _require_int_field(where, f"ramp.{k}", ramp[k]) for k in _RAMP_KEYS if k in ramp})


def parse_pool_config(obj: Mapping[str, Any], *, where: str = "pool") -> StableSwapPool:
    """Build a `StableSwapPool` from one decoded YAML mapping."""
    if not isinstance(obj, Mapping):
        raise ValueError(f"{where}: pool entry must be a mapping")
    name = obj.get("name", "")
    if not isinstance(name, str):
        raise TypeError(f"{where}: name must be a string")
    if name:
        where = f"pool {name!r}"

    balances = obj.get("balances")
    if not isinstance(balances, list):
        raise ValueError(f"{where}: balances must be a list")
    balances_t = tuple(_require_int_field(where, f"balances[{i}]", v) for i, v in enumerate(balances))

    return StableSwapPool(
        balances=balances_t,
        ramp=_parse_ramp(where, obj),
        fee_bps=_require_int_field(where, "fee_bps", obj.get("fee_bps", 0)),
        lp_supply=_require_int_field(where, "lp_supply", obj.get("lp_supply", 0)),
        name=name,
    )


def parse_pool_configs(doc: Any) -> Dict[str, StableSwapPool]:
    """Parse a decoded document into pools keyed by name (unnamed pools get their index)."""
    if not isinstance(doc, Mapping) or not isinstance(doc.get("pools"), list):
        raise ValueError("config must be a mapping with a 'pools' list")
    pools: Dict[str, StableSwapPool] = {}
    for idx, entry in enumerate(doc["pools"]):
        pool = parse_pool_config(entry, where=f"pools[{idx}]")
        key = pool.name or str(idx)
        if key in pools:
            raise ValueError(f"duplicate pool name: {key!r}")
        pools[key] = pool
    return pools


def load_pool_configs(path: Path | str) -> Dict[str, StableSwapPool]:
    """Load and validate every pool in a YAML config file."""
    doc = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    return parse_pool_configs(doc)
