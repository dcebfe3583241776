"""One-shot run - wires discovery, claims, settlement and delegation together."""

from __future__ import annotations

import logging

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3

from taraxa_delegator.chain.queries import DposQueries
from taraxa_delegator.chain.session import load_account, open_session
from taraxa_delegator.chain.submitter import DposSubmitter
from taraxa_delegator.errors import ChainConnectionError, ConfigError
from taraxa_delegator.interfaces.discovery import PositionSource
from taraxa_delegator.models.config import DelegatorConfig
from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition
from taraxa_delegator.models.records import RunReport
from taraxa_delegator.units import format_amount
from taraxa_delegator.workflow.claims import ClaimOrchestrator
from taraxa_delegator.workflow.delegation import DelegationStep
from taraxa_delegator.workflow.settlement import SettlementBarrier

log = logging.getLogger(__name__)


def make_web3(cfg: DelegatorConfig) -> AsyncWeb3:
    """Async web3 client for the configured RPC endpoint."""
    provider = AsyncHTTPProvider(
        cfg.rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=cfg.request_timeout)},
    )
    return AsyncWeb3(provider)


def _checked_address(name: str, value: str) -> str:
    try:
        return AsyncWeb3.to_checksum_address(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} is not a valid address: {value!r}") from exc


async def discover_positions(
    source: PositionSource, address: str,
) -> tuple[list[DelegationPosition], list[ValidatorPosition]]:
    """Delegations and validator commissions of ``address``, read in that order."""
    delegations = await source.list_delegations(address)
    validators = await source.list_validator_positions(address)
    return delegations, validators


class RewardDelegator:
    """Claims every reward of one account, then re-delegates the balance.

    Steps run strictly in order: discover → claim → settle → delegate. Any
    error aborts the run; transactions already sent are left as they are.
    The chain-facing components are plain attributes so they can be
    replaced (tests swap in mocks).
    """

    def __init__(self, cfg: DelegatorConfig) -> None:
        _checked_address("dpos_contract", cfg.dpos_contract)
        _checked_address("target_validator", cfg.target_validator)
        self._cfg = cfg
        self.w3 = make_web3(cfg)
        self.queries = DposQueries(self.w3, cfg.dpos_contract)
        self.submitter = DposSubmitter(self.w3, cfg.dpos_contract)

    async def run(self, settlement_timeout: float | None = None) -> RunReport:
        """Execute a single pass and return what it observed and submitted."""
        cfg = self._cfg
        timeout = settlement_timeout if settlement_timeout is not None else cfg.settlement_timeout

        session = await open_session(self.queries, cfg.private_key, cfg.gas_limit)
        address = session.address
        log.info("Account address: %s", address)
        log.info("Chain ID: %d", session.chain_id)

        block_number = await self.queries.block_number()
        log.info("Block number: %d", block_number)

        report = RunReport(
            address=address,
            chain_id=session.chain_id,
            block_number=block_number,
            start_nonce=session.start_nonce,
        )

        # 1. Discover everything before sending anything
        report.delegations, report.validators = await discover_positions(self.queries, address)
        self._log_positions(report)

        # 2. Claim
        orchestrator = ClaimOrchestrator(self.submitter)
        report.claims = await orchestrator.claim_all(
            session, report.delegations, report.validators,
        )

        # 3. Wait until every claim is reflected in the account state
        barrier = SettlementBarrier(self.queries, cfg.poll_interval, cfg.settlement_block_tag)
        report.settled_nonce = await barrier.await_settlement(
            address, session.next_nonce(), timeout,
        )

        # 4. Delegate the whole-unit balance
        step = DelegationStep(
            self.queries,
            self.submitter,
            cfg.target_validator,
            cfg.min_delegation_whole_units,
            cfg.decimals,
        )
        report.balance, report.delegation = await step.run(session)

        log.info(
            "Run complete: %d claims, delegation %s",
            len(report.claims),
            "submitted" if report.delegation else "skipped",
        )
        return report

    async def inspect(self) -> RunReport:
        """Read-only view of the account; nothing is signed or sent."""
        account = load_account(self._cfg.private_key)
        address = account.address
        report = RunReport(
            address=address,
            chain_id=await self.queries.chain_id(),
            block_number=await self.queries.block_number(),
            start_nonce=await self.queries.pending_nonce(address, "pending"),
        )
        report.balance = await self.queries.balance(address)
        report.delegations, report.validators = await discover_positions(self.queries, address)
        return report

    async def close(self) -> None:
        """Close the provider's cached aiohttp sessions."""
        try:
            await self.w3.provider.disconnect()
        except Exception as exc:
            log.debug("Provider disconnect failed: %s", exc)

    def _log_positions(self, report: RunReport) -> None:
        decimals = self._cfg.decimals
        log.info("Your current delegations are:")
        for d in report.delegations:
            log.info(
                "  Validator account: %s Stake: %s Reward: %s",
                d.validator,
                format_amount(d.stake, scale=decimals),
                format_amount(d.rewards, scale=decimals),
            )
        log.info("Your current validators are:")
        for v in report.validators:
            log.info(
                "  Validator account: %s Stake: %s Reward: %s",
                v.validator,
                format_amount(v.total_stake, scale=decimals),
                format_amount(v.commission_reward, scale=decimals),
            )


async def run_delegator(
    cfg: DelegatorConfig, settlement_timeout: float | None = None,
) -> RunReport:
    """Run one pass with a fresh client, closing it afterwards."""
    delegator = RewardDelegator(cfg)
    log.info("Starting taraxa_delegator run")
    log.info("  RPC: %s", cfg.rpc_url)
    log.info("  DPOS contract: %s", cfg.dpos_contract)
    log.info("  Target validator: %s", cfg.target_validator)
    try:
        if not await delegator.w3.is_connected():
            raise ChainConnectionError(f"RPC endpoint {cfg.rpc_url} is not reachable")
        return await delegator.run(settlement_timeout)
    finally:
        await delegator.close()
