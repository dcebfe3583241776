"""CLI entry point for taraxa_delegator."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from taraxa_delegator.config import load_config
from taraxa_delegator.delegator import RewardDelegator, run_delegator
from taraxa_delegator.errors import DelegatorError
from taraxa_delegator.models.config import DelegatorConfig
from taraxa_delegator.models.records import RunReport
from taraxa_delegator.units import format_amount


def _require_key(cfg: DelegatorConfig) -> None:
    """Exit with error if no private key is configured."""
    if not cfg.private_key:
        click.echo("Error: No private key configured.", err=True)
        click.echo("Set TARAXA_DELEGATOR_PRIVATE_KEY or [account] private_key in config.", err=True)
        sys.exit(1)


def _fail(exc: DelegatorError) -> None:
    click.echo(f"Error: {exc.step}: {exc}", err=True)
    sys.exit(1)


def _echo_positions(report: RunReport, decimals: int) -> None:
    click.echo(f"Delegations ({len(report.delegations)}):")
    for d in report.delegations:
        click.echo(f"  {d.validator}  stake={format_amount(d.stake, scale=decimals)}  "
                   f"reward={format_amount(d.rewards, scale=decimals)}")
    click.echo(f"Validators ({len(report.validators)}):")
    for v in report.validators:
        click.echo(f"  {v.validator}  stake={format_amount(v.total_stake, scale=decimals)}  "
                   f"commission={format_amount(v.commission_reward, scale=decimals)}")


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """taraxa_delegator - claim DPOS rewards and re-delegate the balance."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg

    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Run ────────────────────────────────────────────────


@cli.command()
@click.option("--timeout", type=float, default=None,
              help="Give up waiting for settlement after this many seconds")
@click.pass_context
def run(ctx: click.Context, timeout: float | None) -> None:
    """Claim all rewards, wait for settlement, delegate the balance."""
    cfg: DelegatorConfig = ctx.obj["config"]
    _require_key(cfg)

    try:
        report = asyncio.run(run_delegator(cfg, timeout))
    except DelegatorError as exc:
        _fail(exc)
        return

    click.echo(f"Account:    {report.address}")
    click.echo(f"Claims:     {len(report.claims)}")
    for c in report.claims:
        click.echo(f"  [{c.nonce}] {c.action:25s} {c.validator}  tx={c.tx_hash}")
    click.echo(f"Settled at: nonce {report.settled_nonce}")
    if report.balance is not None:
        click.echo(f"Balance:    {format_amount(report.balance, scale=cfg.decimals)}")
    if report.delegation:
        d = report.delegation
        click.echo(f"Delegated:  {format_amount(d.value, scale=cfg.decimals)} to {d.validator} "
                   f"[{d.nonce}] tx={d.tx_hash}")
    else:
        click.echo("Delegated:  nothing (balance below threshold)")


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the effective configuration."""
    cfg: DelegatorConfig = ctx.obj["config"]
    click.echo(f"RPC URL:        {cfg.rpc_url}")
    click.echo(f"DPOS contract:  {cfg.dpos_contract}")
    click.echo(f"Target:         {cfg.target_validator}")
    click.echo(f"Min units:      > {cfg.min_delegation_whole_units}")
    click.echo(f"Gas limit:      {cfg.gas_limit}")
    click.echo(f"Poll interval:  {cfg.poll_interval}s")
    timeout = f"{cfg.settlement_timeout}s" if cfg.settlement_timeout is not None else "none"
    click.echo(f"Settle timeout: {timeout} ({cfg.settlement_block_tag})")
    click.echo(f"Private key:    {'***configured***' if cfg.private_key else '(not set)'}")


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show balance and reward positions without sending anything."""
    cfg: DelegatorConfig = ctx.obj["config"]
    _require_key(cfg)

    async def _info() -> RunReport:
        delegator = RewardDelegator(cfg)
        try:
            return await delegator.inspect()
        finally:
            await delegator.close()

    try:
        report = asyncio.run(_info())
    except DelegatorError as exc:
        _fail(exc)
        return

    click.echo(f"Address:    {report.address}")
    click.echo(f"Chain ID:   {report.chain_id}")
    click.echo(f"Block:      {report.block_number}")
    click.echo(f"Nonce:      {report.start_nonce}")
    click.echo(f"Balance:    {format_amount(report.balance or 0, scale=cfg.decimals)}")
    click.echo("")
    _echo_positions(report, cfg.decimals)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
