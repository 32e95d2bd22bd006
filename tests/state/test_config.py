# [TESTER] v1

from __future__ import annotations

from pathlib import Path

import pytest

from stableswap.core.amp_ramp import AmpRamp
from stableswap.state.config import load_pool_configs, parse_pool_config, parse_pool_configs


EXAMPLE_CONFIG = Path(__file__).resolve().parents[2] / "config" / "pools.example.yaml"


def test_example_config_loads() -> None:
    pools = load_pool_configs(EXAMPLE_CONFIG)
    assert set(pools) == {"usdc-usdt", "usdc-usdt-ramping", "tri-stable"}
    assert pools["usdc-usdt"].ramp == AmpRamp.constant(100)
    assert pools["usdc-usdt-ramping"].amp_at(44_200) == 150
    assert pools["tri-stable"].n_assets == 3


def test_load_from_tmp_file(tmp_path: Path) -> None:
    path = tmp_path / "pools.yaml"
    path.write_text(
        "pools:\n"
        "  - balances: [10, 20]\n"
        "    amp: 5\n",
        encoding="utf-8",
    )
    pools = load_pool_configs(path)
    assert list(pools) == ["0"]
    assert pools["0"].balances == (10, 20)
    assert pools["0"].fee_bps == 0


def test_amp_and_ramp_are_exclusive() -> None:
    with pytest.raises(ValueError, match="exactly one"):
        parse_pool_config({"balances": [1, 1], "amp": 10, "ramp": {"initial_amp": 1, "target_amp": 2}})
    with pytest.raises(ValueError, match="exactly one"):
        parse_pool_config({"balances": [1, 1]})


def test_ramp_unknown_key() -> None:
    with pytest.raises(ValueError, match="unknown ramp keys"):
        parse_pool_config({"balances": [1, 1], "ramp": {"initial_amp": 1, "target_amp": 2, "speed": 3}})


def test_non_int_balance_names_field() -> None:
    with pytest.raises(TypeError, match=r"pool 'x': balances\[1\]"):
        parse_pool_config({"name": "x", "balances": [1, "2"], "amp": 10})


def test_bool_is_not_an_amount() -> None:
    with pytest.raises(TypeError):
        parse_pool_config({"balances": [1, 1], "amp": 10, "fee_bps": True})


def test_duplicate_names_rejected() -> None:
    doc = {"pools": [{"name": "a", "balances": [1, 1], "amp": 1}, {"name": "a", "balances": [2, 2], "amp": 1}]}
    with pytest.raises(ValueError, match="duplicate"):
        parse_pool_configs(doc)


def test_document_shape() -> None:
    with pytest.raises(ValueError):
        parse_pool_configs([1, 2, 3])
