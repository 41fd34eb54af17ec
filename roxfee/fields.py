"""Pydantic field validators for unit-aware fee configurations.

Provides field validators that parse user-friendly amount inputs
("0.00001 ROX", "10000 lamport", 10000, "50%") and convert them to the
integers the fee model stores.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import field_validator

from .types import U64_MAX
from .units import UnitManager


def lamports_field(
    default_unit: str = "lamport",
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Callable:
    """Create a Pydantic field validator for lamport amount inputs.

    Accepts strings with native token units, plain integers (interpreted in
    ``default_unit``) or pint Quantities and returns an integer lamport count.

    Args:
        default_unit: Unit applied to bare numbers
        min_value: Optional minimum in lamports
        max_value: Optional maximum in lamports (defaults to the u64 range)

    Returns:
        Validator function usable inside ``field_validator``

    Example:
        class MyConfig(BaseModel):
            fee: int

            @field_validator("fee", mode="before")
            @classmethod
            def _validate_fee(cls, v):
                return lamports_field()(v)
    """
    upper = U64_MAX if max_value is None else max_value

    def validator(value: Any, info: Optional[Any] = None) -> int:
        manager = UnitManager.instance()

        try:
            quantity = manager.ensure_quantity(value, default_unit)
            lamports = manager.to_lamports(quantity)
        except Exception as e:
            raise ValueError(f"Cannot parse lamport amount: {e}")

        if min_value is not None and lamports < min_value:
            raise ValueError(f"Value {lamports} below minimum {min_value} lamports")
        if lamports > upper:
            raise ValueError(f"Value {lamports} above maximum {upper} lamports")
        return lamports

    return validator


def percent_field(min_value: int = 0, max_value: int = 100) -> Callable:
    """Create a Pydantic field validator for whole-percent inputs.

    Bare numbers and numeric strings are read as percent (``50`` and ``"50"``
    mean 50%); strings may also carry units ("50%", "50 percent"). The
    result must be a whole number of percent.

    Args:
        min_value: Minimum percent
        max_value: Maximum percent

    Returns:
        Validator function usable inside ``field_validator``
    """
    def validator(value: Any, info: Optional[Any] = None) -> int:
        manager = UnitManager.instance()

        try:
            quantity = manager.ensure_quantity(value, "percent")
            percent = manager.to_percent(quantity)
        except Exception as e:
            raise ValueError(f"Cannot parse percentage: {e}")

        rounded = round(percent)
        if abs(percent - rounded) > 1e-9:
            raise ValueError(f"Percentage must be a whole number, got {percent}")
        if not (min_value <= rounded <= max_value):
            raise ValueError(
                f"Percentage must be between {min_value} and {max_value}, got {rounded}"
            )
        return rounded

    return validator


def create_lamports_validator(field_name: str, **kwargs) -> classmethod:
    """Create a field validator method for a lamport field of a Pydantic model.

    Example:
        class MyConfig(BaseModel):
            fee: int

            validate_fee = create_lamports_validator("fee")
    """
    validator_func = lamports_field(**kwargs)

    @field_validator(field_name, mode='before')
    @classmethod
    def field_validator_method(cls, v, info):
        return validator_func(v, info)

    return field_validator_method
