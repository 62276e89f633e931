# tokenledger/core/ledger.py

import logging
import threading
from contextlib import contextmanager
from typing import Hashable, Optional

from .allowances import AllowanceStore
from .arithmetic import require_uint
from .balances import BalanceStore
from .config import LedgerConfig, get_config
from .errors import InsufficientBalance, NoneToken, NotApproved
from .events import (EventLog, EventSink, create_approved_event, create_token_minted_event,
                     create_transferred_event, create_transferred_from_event)
from .journal import Journal
from .registry import Metadata, TokenDetails, TokenRegistry

logger = logging.getLogger(__name__)


class Ledger:
    """
    Multi-asset token ledger. Similar to an ERC-20, but one instance tracks
    any number of tokens, each identified by the id assigned at mint.

    Every operation is atomic: store writes are journaled and undone if any
    step fails, and an event is emitted only once the operation has
    committed. Calls are serialized by an instance lock.
    """
    def __init__(self, event_log: Optional[EventSink] = None,
                 config: Optional[LedgerConfig] = None):
        self._config = config or get_config()
        self._event_log = event_log if event_log is not None else EventLog()
        self._journal = Journal()
        self._lock = threading.RLock()
        self._registry = TokenRegistry(self._config, self._journal)
        self._balances = BalanceStore(self._config.balance_bits, self._journal)
        self._allowances = AllowanceStore(self._config.balance_bits, self._journal)

    @property
    def config(self) -> LedgerConfig:
        return self._config

    @property
    def event_log(self) -> EventSink:
        return self._event_log

    @contextmanager
    def _atomic(self):
        with self._lock:
            if self._journal.active:
                yield
                return
            self._journal.begin()
            try:
                yield
            except BaseException:
                self._journal.rollback()
                raise
            self._journal.commit()

    def _amount(self, amount: int) -> int:
        return require_uint(amount, self._config.balance_bits)

    # Read accessors. They take the lock so an in-flight operation is never
    # observed half applied.

    def tokens(self, token_id: int) -> Optional[TokenDetails]:
        """Details of a minted token, or None."""
        with self._lock:
            return self._registry.get(token_id)

    def balance_of(self, token_id: int, account: Hashable) -> int:
        """Get the balance of an account for a token."""
        with self._lock:
            return self._balances.get(token_id, account)

    def allowance(self, token_id: int, owner: Hashable, spender: Hashable) -> int:
        with self._lock:
            return self._allowances.get(token_id, owner, spender)

    def last_token_id(self) -> int:
        with self._lock:
            return self._registry.last_token_id

    def total_supply(self, token_id: int) -> int:
        """Supply recorded at mint, zero for unknown tokens."""
        with self._lock:
            details = self._registry.get(token_id)
        return details.supply if details is not None else 0

    # Operations. Events are emitted after commit but before the lock is
    # released, so their order matches the order of state changes.

    def mint(self, minter: Hashable, name: Metadata, symbol: Metadata, supply: int) -> int:
        """
        Create a new token and credit its entire supply to the minter.
        Returns the new token id.
        """
        with self._lock:
            with self._atomic():
                token_id = self._registry.allocate_token(name, symbol, supply)
                self._balances.credit(token_id, minter, supply)

            logger.debug("minted token %d with supply %d to %r", token_id, supply, minter)
            self._event_log.emit(create_token_minted_event(token_id, minter))
        return token_id

    def transfer(self, from_account: Hashable, to_account: Hashable,
                 token_id: int, amount: int) -> bool:
        """
        Transfer tokens from one account to another.
        """
        with self._lock:
            with self._atomic():
                self._transfer(token_id, from_account, to_account, self._amount(amount))

            logger.debug("transferred %d of token %d from %r to %r",
                         amount, token_id, from_account, to_account)
            self._event_log.emit(create_transferred_event(from_account, to_account, amount))
        return True

    def approve(self, owner: Hashable, spender: Hashable, token_id: int, amount: int) -> bool:
        """
        Set the amount ``spender`` may move out of ``owner``'s balance,
        replacing any earlier grant.
        """
        with self._lock:
            with self._atomic():
                self._amount(amount)
                if not self._registry.exists(token_id):
                    raise NoneToken(f"token {token_id} does not exist")
                self._allowances.set(token_id, owner, spender, amount)

            self._event_log.emit(create_approved_event(token_id, owner, spender, amount))
        return True

    def transfer_from(self, spender: Hashable, token_id: int, owner: Hashable,
                      recipient: Hashable, amount: int) -> bool:
        """
        Move ``amount`` from ``owner`` to ``recipient`` on the owner's behalf,
        spending the allowance granted to ``spender``.
        """
        with self._lock:
            with self._atomic():
                self._amount(amount)
                allowance = self._allowances.get(token_id, owner, spender)
                if allowance == 0:
                    raise NotApproved(f"{spender!r} is not approved to spend for {owner!r}")
                if allowance < amount:
                    raise InsufficientBalance(
                        f"Insufficient allowance: {allowance} < {amount}",
                        data={"token_id": token_id, "available": allowance,
                              "requested": amount})

                self._transfer(token_id, owner, recipient, amount)
                self._allowances.decrease(token_id, owner, spender, amount)

            logger.debug("%r moved %d of token %d from %r to %r",
                         spender, amount, token_id, owner, recipient)
            self._event_log.emit(
                create_transferred_from_event(spender, owner, recipient, amount))
        return True

    def _transfer(self, token_id: int, from_account: Hashable, to_account: Hashable,
                  amount: int):
        # Debit before credit; the enclosing atomic scope undoes the debit if
        # the credit overflows.
        with self._atomic():
            self._balances.debit(token_id, from_account, amount)
            self._balances.credit(token_id, to_account, amount)
