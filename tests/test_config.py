# tests/test_config.py

import pytest
from tokenledger.core.arithmetic import checked_add, checked_sub, max_uint, require_uint
from tokenledger.core.config import LedgerConfig, get_config
from tokenledger.core.errors import InsufficientBalance, InvalidAmount, TokenBalanceOverflow


def test_defaults():
    cfg = LedgerConfig()
    assert cfg.to_dict() == {
        "max_name_len": 32,
        "max_symbol_len": 8,
        "token_id_bits": 32,
        "balance_bits": 128,
    }


def test_from_env():
    cfg = LedgerConfig.from_env({
        "TOKENLEDGER_MAX_NAME_LEN": "64",
        "TOKENLEDGER_BALANCE_BITS": "064",
        "TOKENLEDGER_TOKEN_ID_BITS": "",
    })
    assert cfg.max_name_len == 64
    assert cfg.balance_bits == 64
    assert cfg.token_id_bits == 32
    assert cfg.max_symbol_len == 8


def test_from_env_invalid():
    with pytest.raises(ValueError):
        LedgerConfig.from_env({"TOKENLEDGER_MAX_SYMBOL_LEN": "eight"})
    with pytest.raises(ValueError):
        LedgerConfig.from_env({"TOKENLEDGER_BALANCE_BITS": "0"})


def test_get_config_cached(monkeypatch):
    get_config.cache_clear()
    monkeypatch.setenv("TOKENLEDGER_MAX_SYMBOL_LEN", "12")
    try:
        assert get_config().max_symbol_len == 12
        assert get_config() is get_config()
    finally:
        get_config.cache_clear()


def test_max_uint():
    assert max_uint(8) == 255
    with pytest.raises(ValueError):
        max_uint(0)


def test_checked_arithmetic():
    assert checked_add(250, 5, 8, TokenBalanceOverflow) == 255
    with pytest.raises(TokenBalanceOverflow):
        checked_add(250, 6, 8, TokenBalanceOverflow)
    assert checked_sub(5, 5, InsufficientBalance) == 0
    with pytest.raises(InsufficientBalance):
        checked_sub(5, 6, InsufficientBalance)


def test_require_uint():
    assert require_uint(0, 8) == 0
    for bad in (-1, 256, True, 1.0, "1"):
        with pytest.raises(InvalidAmount):
            require_uint(bad, 8)


def test_error_to_dict():
    err = InsufficientBalance("short", data={"available": 1})
    assert err.to_dict() == {"code": "INSUFFICIENT_BALANCE", "message": "short",
                             "data": {"available": 1}}
    assert isinstance(InvalidAmount("x"), ValueError)
