# tokenledger/core/config.py

"""
Ledger configuration.

Limits default to values suitable for tests and local use and may be
overridden through environment variables:

  TOKENLEDGER_MAX_NAME_LEN    -> max token name length in bytes (default: 32)
  TOKENLEDGER_MAX_SYMBOL_LEN  -> max token symbol length in bytes (default: 8)
  TOKENLEDGER_TOKEN_ID_BITS   -> width of the token-id counter (default: 32)
  TOKENLEDGER_BALANCE_BITS    -> width of balances and allowances (default: 128)

Programmatic usage:
    from tokenledger.core.config import get_config
    cfg = get_config()
"""

import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Dict, Mapping, Optional

ENV_PREFIX = "TOKENLEDGER_"


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip(), 10)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX + key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class LedgerConfig:
    max_name_len: int = 32
    max_symbol_len: int = 8
    token_id_bits: int = 32
    balance_bits: int = 128

    def __post_init__(self):
        if self.max_name_len <= 0:
            raise ValueError("max_name_len must be > 0")
        if self.max_symbol_len <= 0:
            raise ValueError("max_symbol_len must be > 0")
        if self.token_id_bits <= 0:
            raise ValueError("token_id_bits must be > 0")
        if self.balance_bits <= 0:
            raise ValueError("balance_bits must be > 0")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "LedgerConfig":
        env = os.environ if env is None else env
        return cls(
            max_name_len=_int_env(env, "MAX_NAME_LEN", cls.max_name_len),
            max_symbol_len=_int_env(env, "MAX_SYMBOL_LEN", cls.max_symbol_len),
            token_id_bits=_int_env(env, "TOKEN_ID_BITS", cls.token_id_bits),
            balance_bits=_int_env(env, "BALANCE_BITS", cls.balance_bits),
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@lru_cache(maxsize=1)
def get_config() -> LedgerConfig:
    """Environment-derived config, resolved once per process."""
    return LedgerConfig.from_env()
