"""Delegation step: strict threshold and whole-unit amount."""

from __future__ import annotations

import pytest

from taraxa_delegator.errors import QueryError, SubmissionError
from taraxa_delegator.workflow.delegation import DelegationStep

from tests.conftest import TARGET
from tests.factories import make_session
from tests.mocks import MockChain, MockSubmitter


def _step(chain, submitter, **kwargs) -> DelegationStep:
    return DelegationStep(chain, submitter, TARGET, **kwargs)


async def test_below_threshold_is_noop():
    chain = MockChain(balance=1_900_000_000_000_000_000)  # 1.9 units
    submitter = MockSubmitter()
    session = make_session(nonce=8)

    balance, result = await _step(chain, submitter).run(session)

    assert balance == 1_900_000_000_000_000_000
    assert result is None
    assert submitter.attempts == 0
    assert session.next_nonce() == 8


async def test_two_units_delegates_exactly_two():
    chain = MockChain(balance=2_000_000_000_000_000_000)
    submitter = MockSubmitter()
    session = make_session(nonce=8)

    _, result = await _step(chain, submitter).run(session)

    assert result is not None
    assert submitter.calls == [("delegate", TARGET, 8, 2_000_000_000_000_000_000)]
    assert result.value == 2_000_000_000_000_000_000
    assert session.next_nonce() == 9
    assert session.value == 0


async def test_fraction_is_left_behind():
    chain = MockChain(balance=10_400_000_000_000_000_000)
    submitter = MockSubmitter()
    session = make_session(nonce=0)

    _, result = await _step(chain, submitter).run(session)

    assert result.value == 10_000_000_000_000_000_000


async def test_custom_threshold():
    chain = MockChain(balance=5 * 10**18)
    submitter = MockSubmitter()

    _, result = await _step(chain, submitter, min_whole_units=5).run(make_session())
    assert result is None

    chain.balance_value = 6 * 10**18
    _, result = await _step(chain, submitter, min_whole_units=5).run(make_session())
    assert result.value == 6 * 10**18


async def test_balance_query_failure_propagates():
    chain = MockChain()
    chain.fail_on.add("balance")

    with pytest.raises(QueryError):
        await _step(chain, MockSubmitter()).run(make_session())


async def test_rejected_delegation_propagates():
    chain = MockChain(balance=3 * 10**18)
    session = make_session(nonce=4)

    with pytest.raises(SubmissionError) as info:
        await _step(chain, MockSubmitter(fail_at=0)).run(session)

    assert info.value.action == "delegate"
    assert session.next_nonce() == 4
