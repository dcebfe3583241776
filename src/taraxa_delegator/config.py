"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from taraxa_delegator.models.config import DelegatorConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "TARAXA_DELEGATOR_",
) -> DelegatorConfig:
    """Load delegator configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (TARAXA_DELEGATOR_PRIVATE_KEY, etc.)
        2. TOML config file
        3. Defaults from DelegatorConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = DelegatorConfig()

    # ── Account section ────────────────────────────────────
    account = raw.get("account", {})
    if v := account.get("private_key"):
        cfg.private_key = str(v)

    # ── Chain section ──────────────────────────────────────
    chain = raw.get("chain", {})
    if v := chain.get("rpc_url"):
        cfg.rpc_url = str(v)
    if v := chain.get("dpos_contract"):
        cfg.dpos_contract = str(v)
    if (v := chain.get("request_timeout")) is not None:
        cfg.request_timeout = int(v)
    if (v := chain.get("gas_limit")) is not None:
        cfg.gas_limit = int(v)

    # ── Delegation section ─────────────────────────────────
    delegation = raw.get("delegation", {})
    if v := delegation.get("target_validator"):
        cfg.target_validator = str(v)
    if (v := delegation.get("min_whole_units")) is not None:
        cfg.min_delegation_whole_units = int(v)
    if v := delegation.get("decimals"):
        cfg.decimals = int(v)

    # ── Settlement section ─────────────────────────────────
    settlement = raw.get("settlement", {})
    if (v := settlement.get("poll_interval")) is not None:
        cfg.poll_interval = float(v)
    if (v := settlement.get("timeout")) is not None:
        cfg.settlement_timeout = float(v)
    if v := settlement.get("block_tag"):
        cfg.settlement_block_tag = str(v)

    # ── Logging section ────────────────────────────────────
    logging_raw = raw.get("logging", {})
    if v := logging_raw.get("level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if key := os.environ.get(f"{env_prefix}PRIVATE_KEY"):
        cfg.private_key = key
    if rpc := os.environ.get(f"{env_prefix}RPC_URL"):
        cfg.rpc_url = rpc
    if contract := os.environ.get(f"{env_prefix}DPOS_CONTRACT"):
        cfg.dpos_contract = contract
    if target := os.environ.get(f"{env_prefix}TARGET_VALIDATOR"):
        cfg.target_validator = target
    if timeout := os.environ.get(f"{env_prefix}SETTLEMENT_TIMEOUT"):
        cfg.settlement_timeout = float(timeout)
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level

    return cfg
