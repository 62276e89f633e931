# tokenledger/core/errors.py

from typing import Any, Dict, Optional


class LedgerError(Exception):
    """
    Base class for every error the ledger raises.

    Each subclass carries a stable machine ``code``. A failed operation never
    leaves partial state behind, so callers can treat these as recoverable.
    """
    code = "LEDGER_ERROR"

    def __init__(self, message: str = "", data: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.code)
        self.message = message or self.code
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict for the dispatch layer."""
        out: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            out["data"] = self.data
        return out


class NoneValue(LedgerError):
    """Raised when a token is minted with zero supply."""
    code = "NONE_VALUE"


class NoneToken(LedgerError):
    """Raised when an operation references a token that was never minted."""
    code = "NONE_TOKEN"


class TokenIdOverflow(LedgerError):
    """Raised when the token-id counter cannot be advanced."""
    code = "TOKEN_ID_OVERFLOW"


class TokenBalanceOverflow(LedgerError):
    """Raised when a credit would exceed the balance range."""
    code = "TOKEN_BALANCE_OVERFLOW"


class InsufficientBalance(LedgerError):
    """Raised when a debit exceeds the available balance or allowance."""
    code = "INSUFFICIENT_BALANCE"


class NotApproved(LedgerError):
    """Raised when a spender has no allowance at all."""
    code = "NOT_APPROVED"


class LengthExceeded(LedgerError):
    code = "LENGTH_EXCEEDED"


class NameTooLong(LengthExceeded):
    code = "NAME_TOO_LONG"


class SymbolTooLong(LengthExceeded):
    code = "SYMBOL_TOO_LONG"


class InvalidAmount(LedgerError, ValueError):
    """Raised for negative or non-integer amounts."""
    code = "INVALID_AMOUNT"
