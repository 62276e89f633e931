# tokenledger/core/balances.py

from typing import Dict, Hashable, List, Optional, Tuple

from .arithmetic import checked_add, checked_sub
from .errors import InsufficientBalance, TokenBalanceOverflow
from .journal import Journal


class BalanceStore:
    """
    Per-token balances keyed by (token_id, account).
    Reads of unseen keys return zero.
    """
    def __init__(self, balance_bits: int, journal: Optional[Journal] = None):
        self._bits = balance_bits
        self._journal = journal or Journal()
        self._balances: Dict[Tuple[int, Hashable], int] = {}

    def get(self, token_id: int, account: Hashable) -> int:
        return self._balances.get((token_id, account), 0)

    def credit(self, token_id: int, account: Hashable, amount: int):
        key = (token_id, account)
        new_balance = checked_add(self.get(token_id, account), amount, self._bits,
                                  TokenBalanceOverflow)
        self._journal.record_item(self._balances, key)
        self._balances[key] = new_balance

    def debit(self, token_id: int, account: Hashable, amount: int):
        key = (token_id, account)
        current = self.get(token_id, account)
        if amount > current:
            raise InsufficientBalance(
                f"Insufficient balance: {current} < {amount}",
                data={"token_id": token_id, "available": current, "requested": amount})
        new_balance = checked_sub(current, amount, InsufficientBalance)
        self._journal.record_item(self._balances, key)
        self._balances[key] = new_balance

    def total(self, token_id: int) -> int:
        """Sum of every account's holding of a token."""
        return sum(v for (t, _), v in self._balances.items() if t == token_id)

    def holders(self, token_id: int) -> List[Hashable]:
        """Accounts holding a nonzero balance of a token."""
        return [a for (t, a), v in self._balances.items() if t == token_id and v > 0]
