"""Unit management for roxfee using pint.

This module provides the registry the fee configuration parses amounts with:
- UnitManager: Singleton registry with the native token units defined
- Conversion utilities between pint quantities and integer lamports
"""

from __future__ import annotations

import re
import pint
from typing import Union, Optional, ClassVar

from .types import U64_MAX

# Type alias for inputs that can be converted to quantities
QuantityInput = Union[str, float, int, pint.Quantity]

# The whole-unit symbol only appears in display strings; pint gets "ROX"
ROX_SYMBOL = "◎"


class UnitManager:
    """Manages the unit registry and native token conversions.

    Provides:
    - Singleton pint.UnitRegistry access
    - ``lamport`` as the base unit of the ``[native_token]`` dimension
    - ``ROX`` as 10^9 lamports
    - Conversion of quantities to exact integer lamport counts
    """

    _instance: ClassVar[Optional[UnitManager]] = None

    def __init__(self, registry: Optional[pint.UnitRegistry] = None):
        """Initialize with optional custom registry.

        Args:
            registry: Custom pint registry. If None, creates default.
        """
        self.registry = registry or pint.UnitRegistry()
        self._setup_units()

    @classmethod
    def instance(cls) -> UnitManager:
        """Get or create the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _setup_units(self) -> None:
        """Define native token units and percentages on the registry."""
        try:
            _ = self.registry.lamport
        except (AttributeError, pint.UndefinedUnitError):
            self.registry.define('lamport = [native_token]')
            self.registry.define('ROX = 1000000000 * lamport = rox')

        try:
            if not hasattr(self.registry, 'percent'):
                self.registry.define('percent = 0.01 = pct')
        except (pint.DefinitionSyntaxError, pint.RedefinitionError):
            # May already be defined
            pass

    def ensure_quantity(
        self,
        value: QuantityInput,
        default_unit: Optional[str] = None
    ) -> pint.Quantity:
        """Convert input to a pint Quantity.

        Args:
            value: String, number, or Quantity to convert
            default_unit: Unit to use if value carries none

        Returns:
            pint.Quantity object

        Raises:
            ValueError: If string cannot be parsed as quantity
        """
        if isinstance(value, pint.Quantity):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Cannot parse {value!r} as quantity")
        if isinstance(value, str):
            # "50%" -> "50 percent", "◎1.5" -> "1.5 ROX"
            value = re.sub(r'\s*%\s*$', ' percent', value.strip())
            value = re.sub(rf'^{ROX_SYMBOL}\s*(.+)$', r'\g<1> ROX', value)
            try:
                q = self.registry(value)
            except Exception as e:
                raise ValueError(f"Cannot parse '{value}' as quantity: {e}")
            # A bare number parses as a plain number or a dimensionless
            # Quantity depending on the pint version; both take the default unit
            if not isinstance(q, pint.Quantity):
                q = self.registry.Quantity(q, default_unit or 'dimensionless')
            elif default_unit and q.units == self.registry.dimensionless:
                q = self.registry.Quantity(q.magnitude, default_unit)
            return q
        return self.registry.Quantity(value, default_unit or 'dimensionless')

    def to_lamports(self, quantity: pint.Quantity) -> int:
        """Convert a native token quantity to an integer lamport count.

        Fractional lamports are rounded to the nearest lamport.

        Args:
            quantity: pint Quantity with native token dimension

        Returns:
            Lamport count as int

        Raises:
            ValueError: If the quantity has the wrong dimension or does
                not fit in a u64
        """
        # Plain lamport ints skip the float conversion path
        if quantity.units == self.registry.lamport and isinstance(quantity.magnitude, int):
            lamports = quantity.magnitude
            if not (0 <= lamports <= U64_MAX):
                raise ValueError(f"{quantity} is outside the u64 lamport range")
            return lamports

        try:
            magnitude = quantity.to(self.registry.lamport).magnitude
        except pint.DimensionalityError as e:
            raise ValueError(f"Cannot convert {quantity} to lamports: {e}")

        lamports = round(magnitude)
        if not (0 <= lamports <= U64_MAX):
            raise ValueError(f"{quantity} is outside the u64 lamport range")
        return lamports

    def from_lamports(self, lamports: int, unit: str = "lamport") -> pint.Quantity:
        """Build a pint Quantity from a lamport count.

        Args:
            lamports: Lamport count
            unit: Unit to express the result in ("lamport" or "ROX")

        Returns:
            pint.Quantity in the requested unit
        """
        return self.registry.Quantity(lamports, self.registry.lamport).to(unit)

    def to_percent(self, quantity: pint.Quantity) -> float:
        """Convert a dimensionless quantity to a percentage value.

        Args:
            quantity: Dimensionless pint Quantity (e.g. "50 percent", 0.5)

        Returns:
            Value in percent

        Raises:
            ValueError: If the quantity is not dimensionless
        """
        try:
            return float(quantity.to(self.registry.percent).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(f"Cannot convert {quantity} to percent: {e}")
