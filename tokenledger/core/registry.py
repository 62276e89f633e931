# tokenledger/core/registry.py

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .arithmetic import checked_add, require_uint
from .config import LedgerConfig
from .errors import NameTooLong, NoneValue, SymbolTooLong, TokenIdOverflow
from .journal import Journal

logger = logging.getLogger(__name__)

Metadata = Union[bytes, bytearray, str]


@dataclass(frozen=True)
class TokenDetails:
    """Metadata recorded for a token when it is minted."""
    name: bytes
    symbol: bytes
    supply: int


def _as_bytes(value: Metadata, field: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"{field} must be bytes or str, got {type(value).__name__}")


class TokenRegistry:
    """
    Maps token ids to their details and owns the token-id counter.
    Ids start at 1 and are never reused.
    """
    def __init__(self, config: LedgerConfig, journal: Optional[Journal] = None):
        self._config = config
        self._journal = journal or Journal()
        self._tokens: Dict[int, TokenDetails] = {}
        self._last_token_id: int = 0

    @property
    def last_token_id(self) -> int:
        return self._last_token_id

    def get(self, token_id: int) -> Optional[TokenDetails]:
        return self._tokens.get(token_id)

    def exists(self, token_id: int) -> bool:
        return token_id in self._tokens

    def token_ids(self) -> List[int]:
        return sorted(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def allocate_token(self, name: Metadata, symbol: Metadata, initial_supply: int) -> int:
        """
        Register a new token and return its id.
        Crediting the minter is left to the caller.
        """
        require_uint(initial_supply, self._config.balance_bits, "supply")
        if initial_supply == 0:
            raise NoneValue("token supply must be positive")

        name = _as_bytes(name, "name")
        symbol = _as_bytes(symbol, "symbol")
        if len(name) > self._config.max_name_len:
            raise NameTooLong(
                f"name is {len(name)} bytes, limit is {self._config.max_name_len}")
        if len(symbol) > self._config.max_symbol_len:
            raise SymbolTooLong(
                f"symbol is {len(symbol)} bytes, limit is {self._config.max_symbol_len}")

        token_id = checked_add(self._last_token_id, 1, self._config.token_id_bits,
                               TokenIdOverflow)

        self._journal.record_item(self._tokens, token_id)
        self._journal.record_attr(self, "_last_token_id")
        self._tokens[token_id] = TokenDetails(name=name, symbol=symbol, supply=initial_supply)
        self._last_token_id = token_id

        logger.debug("allocated token %d (%r)", token_id, symbol)
        return token_id
