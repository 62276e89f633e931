# tests/test_properties.py

"""
Property tests over random operation sequences.

After every step, whether it succeeded or was rejected:
  - each minted token's balances sum to its recorded supply
  - no balance or allowance is negative
  - a rejected step leaves balances, allowances and the id counter untouched
"""

from hypothesis import given, settings, strategies as st

from tokenledger.core.config import LedgerConfig
from tokenledger.core.errors import LedgerError
from tokenledger.core.events import EventLog
from tokenledger.core.ledger import Ledger

ACCOUNTS = ["alice", "bob", "carol", "dave"]

accounts = st.sampled_from(ACCOUNTS)
token_ids = st.integers(min_value=0, max_value=4)
amounts = st.integers(min_value=0, max_value=300)

operations = st.one_of(
    st.tuples(st.just("mint"), accounts, st.integers(min_value=0, max_value=1000)),
    st.tuples(st.just("transfer"), accounts, accounts, token_ids, amounts),
    st.tuples(st.just("approve"), accounts, accounts, token_ids, amounts),
    st.tuples(st.just("transfer_from"), accounts, token_ids, accounts, accounts, amounts),
)


def _snapshot(ledger):
    balances = {(t, a): ledger.balance_of(t, a) for t in range(5) for a in ACCOUNTS}
    allowances = {(t, o, s): ledger.allowance(t, o, s)
                  for t in range(5) for o in ACCOUNTS for s in ACCOUNTS}
    return ledger.last_token_id(), balances, allowances


def _apply(ledger, op):
    kind, args = op[0], op[1:]
    if kind == "mint":
        minter, supply = args
        ledger.mint(minter, "TOKEN", "TKN", supply)
    else:
        getattr(ledger, kind)(*args)


@settings(max_examples=200, deadline=None)
@given(st.lists(operations, max_size=40))
def test_conservation_holds_after_every_step(ops):
    ledger = Ledger(EventLog(), LedgerConfig())

    for op in ops:
        before = _snapshot(ledger)
        events_before = len(ledger.event_log)
        try:
            _apply(ledger, op)
        except LedgerError:
            assert _snapshot(ledger) == before
            assert len(ledger.event_log) == events_before

        last_id, balances, allowances = _snapshot(ledger)
        assert all(v >= 0 for v in balances.values())
        assert all(v >= 0 for v in allowances.values())
        for token_id in range(1, last_id + 1):
            held = sum(ledger.balance_of(token_id, a) for a in ACCOUNTS)
            assert held == ledger.tokens(token_id).supply


@settings(max_examples=50, deadline=None)
@given(st.integers(min_value=1, max_value=30))
def test_token_ids_strictly_increase(n):
    ledger = Ledger(EventLog(), LedgerConfig())
    ids = [ledger.mint("alice", "T", "T", 1) for _ in range(n)]
    assert ids == list(range(1, n + 1))
