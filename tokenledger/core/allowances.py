# tokenledger/core/allowances.py

from typing import Dict, Hashable, Optional, Tuple

from .arithmetic import checked_sub, max_uint
from .errors import InsufficientBalance, TokenBalanceOverflow
from .journal import Journal


class AllowanceStore:
    """
    Amounts an owner lets a spender move, keyed by (token_id, owner, spender).

    ``set`` always replaces the previous grant; it never adds to it.
    """
    def __init__(self, balance_bits: int, journal: Optional[Journal] = None):
        self._bits = balance_bits
        self._journal = journal or Journal()
        self._allowances: Dict[Tuple[int, Hashable, Hashable], int] = {}

    def get(self, token_id: int, owner: Hashable, spender: Hashable) -> int:
        return self._allowances.get((token_id, owner, spender), 0)

    def set(self, token_id: int, owner: Hashable, spender: Hashable, amount: int):
        if amount > max_uint(self._bits):
            raise TokenBalanceOverflow(f"allowance exceeds {self._bits}-bit range")
        key = (token_id, owner, spender)
        self._journal.record_item(self._allowances, key)
        self._allowances[key] = amount

    def decrease(self, token_id: int, owner: Hashable, spender: Hashable, amount: int):
        # Whether any allowance exists at all is checked by the caller.
        key = (token_id, owner, spender)
        current = self.get(token_id, owner, spender)
        if amount > current:
            raise InsufficientBalance(
                f"Insufficient allowance: {current} < {amount}",
                data={"token_id": token_id, "available": current, "requested": amount})
        new_allowance = checked_sub(current, amount, InsufficientBalance)
        self._journal.record_item(self._allowances, key)
        self._allowances[key] = new_allowance
