"""Definitions for the native ROX token and its fractional lamports."""

from __future__ import annotations

import math
from functools import total_ordering

import pint

from .types import U64_MAX, to_lamports
from .units import UnitManager, ROX_SYMBOL

# There are 10^9 lamports in one ROX
LAMPORTS_PER_ROX = 1_000_000_000


def lamports_to_rox(lamports: int) -> float:
    """Approximately convert fractional native tokens (lamports) into ROX.

    Precision loss is acceptable for display, never for accounting.

    Raises:
        ValueError: If lamports is outside the u64 range
    """
    return to_lamports(lamports) / LAMPORTS_PER_ROX


def rox_to_lamports(rox: float) -> int:
    """Approximately convert ROX into fractional native tokens (lamports).

    The product is truncated toward zero. Out-of-range inputs saturate:
    NaN and non-positive values give 0, values at or beyond 2**64 give
    U64_MAX.
    """
    lamports = rox * LAMPORTS_PER_ROX
    if math.isnan(lamports) or lamports <= 0:
        return 0
    if lamports >= 2**64:
        return U64_MAX
    return int(lamports)


@total_ordering
class Rox:
    """A lamport amount that displays in whole ROX.

    ``str()`` and ``repr()`` render identically, e.g. ``◎1.500000000``.

    Example:
        >>> Rox(1_500_000_000)
        ◎1.500000000
    """

    __slots__ = ("lamports",)

    def __init__(self, lamports: int):
        self.lamports = to_lamports(lamports)

    @classmethod
    def from_rox(cls, rox: float) -> Rox:
        """Create from a whole-unit amount (saturating, see rox_to_lamports)."""
        return cls(rox_to_lamports(rox))

    @classmethod
    def from_quantity(cls, quantity: pint.Quantity, manager: UnitManager | None = None) -> Rox:
        """Create from a pint Quantity in any native token unit."""
        if manager is None:
            manager = UnitManager.instance()
        return cls(manager.to_lamports(quantity))

    def to_quantity(self, unit: str = "ROX", manager: UnitManager | None = None) -> pint.Quantity:
        """Express the amount as a pint Quantity ("ROX" or "lamport")."""
        if manager is None:
            manager = UnitManager.instance()
        return manager.from_lamports(self.lamports, unit)

    def to_rox(self) -> float:
        return lamports_to_rox(self.lamports)

    def _write_in_rox(self) -> str:
        whole, frac = divmod(self.lamports, LAMPORTS_PER_ROX)
        return f"{ROX_SYMBOL}{whole}.{frac:09d}"

    def __str__(self) -> str:
        return self._write_in_rox()

    def __repr__(self) -> str:
        return self._write_in_rox()

    def __int__(self) -> int:
        return self.lamports

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rox):
            return NotImplemented
        return self.lamports == other.lamports

    def __lt__(self, other: Rox) -> bool:
        if not isinstance(other, Rox):
            return NotImplemented
        return self.lamports < other.lamports

    def __hash__(self) -> int:
        return hash(self.lamports)
