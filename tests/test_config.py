"""Configuration loading: defaults, TOML sections, env overrides."""

from __future__ import annotations

import pytest

from taraxa_delegator.config import load_config
from taraxa_delegator.models.config import (
    DEFAULT_TARGET_VALIDATOR,
    DPOS_CONTRACT_ADDRESS,
)

ENV_VARS = [
    "PRIVATE_KEY", "RPC_URL", "DPOS_CONTRACT", "TARGET_VALIDATOR",
    "SETTLEMENT_TIMEOUT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(f"TARAXA_DELEGATOR_{name}", raising=False)


def test_defaults_without_file():
    cfg = load_config(None)
    assert cfg.private_key == ""
    assert cfg.rpc_url == "https://rpc.mainnet.taraxa.io"
    assert cfg.dpos_contract == DPOS_CONTRACT_ADDRESS
    assert cfg.target_validator == DEFAULT_TARGET_VALIDATOR
    assert cfg.min_delegation_whole_units == 1
    assert cfg.poll_interval == 0.5
    assert cfg.settlement_timeout is None
    assert cfg.gas_limit == 300_000


def test_missing_file_falls_back_to_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.toml")
    assert cfg.rpc_url == "https://rpc.mainnet.taraxa.io"


def test_toml_sections(tmp_path):
    path = tmp_path / "delegator.toml"
    path.write_text(
        '[account]\nprivate_key = "0xabc"\n'
        '[chain]\nrpc_url = "http://localhost:7777"\ngas_limit = 200000\nrequest_timeout = 9\n'
        '[delegation]\ntarget_validator = "0x1111111111111111111111111111111111111111"\n'
        "min_whole_units = 0\n"
        "[settlement]\npoll_interval = 2.5\ntimeout = 600\nblock_tag = \"pending\"\n"
        '[logging]\nlevel = "debug"\n'
    )

    cfg = load_config(path)

    assert cfg.private_key == "0xabc"
    assert cfg.rpc_url == "http://localhost:7777"
    assert cfg.gas_limit == 200_000
    assert cfg.request_timeout == 9
    assert cfg.target_validator == "0x1111111111111111111111111111111111111111"
    assert cfg.min_delegation_whole_units == 0
    assert cfg.poll_interval == 2.5
    assert cfg.settlement_timeout == 600.0
    assert cfg.settlement_block_tag == "pending"
    assert cfg.log_level == "debug"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "delegator.toml"
    path.write_text('[account]\nprivate_key = "0xfile"\n[chain]\nrpc_url = "http://file"\n')
    monkeypatch.setenv("TARAXA_DELEGATOR_PRIVATE_KEY", "0xenv")
    monkeypatch.setenv("TARAXA_DELEGATOR_RPC_URL", "http://env")
    monkeypatch.setenv("TARAXA_DELEGATOR_SETTLEMENT_TIMEOUT", "30")

    cfg = load_config(path)

    assert cfg.private_key == "0xenv"
    assert cfg.rpc_url == "http://env"
    assert cfg.settlement_timeout == 30.0


def test_zero_values_are_kept(tmp_path):
    path = tmp_path / "delegator.toml"
    path.write_text("[settlement]\npoll_interval = 0\ntimeout = 0\n")

    cfg = load_config(path)

    assert cfg.poll_interval == 0.0
    assert cfg.settlement_timeout == 0.0


def test_barrier_polls_pending_by_default():
    assert load_config(None).settlement_block_tag == "pending"
