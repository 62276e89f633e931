# tokenledger/core/arithmetic.py

"""
Checked unsigned-integer helpers.

All ledger quantities are plain Python ints bounded to ``[0, 2**bits - 1]``.
Python ints never wrap, so the bound is enforced here explicitly: every
helper raises the caller-supplied error instead of producing an
out-of-range value.
"""

from typing import Type

from .errors import InvalidAmount, LedgerError


def max_uint(bits: int) -> int:
    """Largest value representable in an unsigned integer of ``bits`` width."""
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return (1 << bits) - 1


def require_uint(value, bits: int, name: str = "amount") -> int:
    """
    Validate that ``value`` is an int in range for ``bits``.
    Booleans are rejected even though they subclass int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {value}")
    if value > max_uint(bits):
        raise InvalidAmount(f"{name} exceeds {bits}-bit range")
    return value


def checked_add(a: int, b: int, bits: int, error: Type[LedgerError]) -> int:
    result = a + b
    if result > max_uint(bits):
        raise error(f"{a} + {b} overflows {bits}-bit range")
    return result


def checked_sub(a: int, b: int, error: Type[LedgerError]) -> int:
    result = a - b
    if result < 0:
        raise error(f"{a} - {b} underflows")
    return result
