"""Static typing helpers for fixed-width ledger integers.

This module provides NewType aliases, pydantic-ready annotated aliases and
checked arithmetic helpers for the unsigned integers the fee economics are
expressed in. Arithmetic never wraps: results outside the unsigned range
raise OverflowError.
"""

from typing import NewType, Annotated
from typing_extensions import TypeAlias
from pydantic import Field

U8_MAX = 2**8 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

# NewType aliases for the scalars the fee model works with
Lamports = NewType("Lamports", int)
SignatureCount = NewType("SignatureCount", int)
BurnPercent = NewType("BurnPercent", int)

# Annotated aliases used as pydantic field types
U64: TypeAlias = Annotated[int, Field(ge=0, le=U64_MAX, strict=True)]
Percent: TypeAlias = Annotated[int, Field(ge=0, le=100, strict=True)]


def _check_int(value: int, name: str) -> None:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def to_u64(value: int, name: str = "value") -> int:
    """Check that an int fits in an unsigned 64-bit integer.

    Args:
        value: Integer to check
        name: Name used in error messages

    Returns:
        The value unchanged

    Raises:
        TypeError: If value is not an int
        ValueError: If value is outside [0, 2**64 - 1]
    """
    _check_int(value, name)
    if not (0 <= value <= U64_MAX):
        raise ValueError(f"{name} must be in [0, {U64_MAX}], got {value}")
    return value


def to_u8(value: int, name: str = "value") -> int:
    """Check that an int fits in an unsigned 8-bit integer."""
    _check_int(value, name)
    if not (0 <= value <= U8_MAX):
        raise ValueError(f"{name} must be in [0, {U8_MAX}], got {value}")
    return value


def to_lamports(value: int) -> Lamports:
    """Convert an int to Lamports after a u64 range check."""
    return Lamports(to_u64(value, "lamports"))


def to_signature_count(value: int) -> SignatureCount:
    """Convert an int to a SignatureCount after a u64 range check."""
    return SignatureCount(to_u64(value, "signature count"))


def to_burn_percent(value: int) -> BurnPercent:
    """Convert an int to a BurnPercent.

    Raises:
        ValueError: If value is not in [0, 100]
    """
    _check_int(value, "burn percent")
    if not (0 <= value <= 100):
        raise ValueError(f"burn percent must be in [0, 100], got {value}")
    return BurnPercent(value)


def checked_add(a: int, b: int) -> int:
    """Add two u64 values, raising OverflowError instead of wrapping."""
    result = a + b
    if result > U64_MAX:
        raise OverflowError(f"u64 overflow: {a} + {b}")
    return result


def checked_mul(a: int, b: int) -> int:
    """Multiply two u64 values, raising OverflowError instead of wrapping."""
    result = a * b
    if result > U64_MAX:
        raise OverflowError(f"u64 overflow: {a} * {b}")
    return result
