"""Invariant validation for fee rate governors and their configuration.

Checks run on demand, outside the derivation path, and collect every
problem into a report instead of stopping at the first one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .fee.governor import FeeRateGovernor
from .fee.kernel import CONSTANT_TRANSACTION_FEE_LAMPORTS


@dataclass
class ValidationReport:
    """Report from governor validation."""
    success: bool
    values: Dict[str, int] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        """Format as readable report."""
        lines = ["=== Fee Governor Validation Report ==="]
        lines.append(f"Status: {'PASS' if self.success else 'FAIL'}")

        if self.values:
            lines.append("\nValues:")
            for key, value in self.values.items():
                lines.append(f"  {key}: {value}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  ⚠️  {w}")

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  ❌ {e}")

        return "\n".join(lines)


def validate_governor(governor: FeeRateGovernor, verbose: bool = False) -> ValidationReport:
    """Validate the invariants of a fee rate governor.

    Errors:
        - burn_percent above 100
        - current rate outside [min, max] while adjustment is active
        - min above max while adjustment is active

    Warnings:
        - adjustment disabled but the fee fields disagree
        - current rate of 0 (typical right after deserialization)
        - fee fields differ from the constant transaction fee

    Args:
        governor: Governor to check
        verbose: If True, print the report

    Returns:
        ValidationReport with results
    """
    report = ValidationReport(
        success=True,
        values=governor.model_dump(),
    )
    report.values["lamports_per_signature"] = governor.lamports_per_signature

    lps = governor.lamports_per_signature
    low = governor.min_lamports_per_signature
    high = governor.max_lamports_per_signature

    if governor.burn_percent > 100:
        report.errors.append(f"burn_percent {governor.burn_percent} exceeds 100")

    if governor.is_adjustment_enabled:
        if low > high:
            report.errors.append(
                f"min_lamports_per_signature {low} exceeds max_lamports_per_signature {high}"
            )
        elif not (low <= lps <= high):
            report.errors.append(
                f"lamports_per_signature {lps} outside [{low}, {high}]"
            )
    else:
        rates = {lps, governor.target_lamports_per_signature, low, high}
        if lps == 0:
            report.warnings.append(
                "lamports_per_signature is 0; reattach the current rate after deserializing"
            )
        elif len(rates) > 1:
            report.warnings.append(
                "adjustment is disabled but fee rate fields differ: "
                f"current={lps}, target={governor.target_lamports_per_signature}, "
                f"min={low}, max={high}"
            )
        if governor.target_lamports_per_signature != CONSTANT_TRANSACTION_FEE_LAMPORTS:
            report.warnings.append(
                f"target_lamports_per_signature {governor.target_lamports_per_signature} "
                f"differs from the constant fee {CONSTANT_TRANSACTION_FEE_LAMPORTS}"
            )

    report.success = not report.errors

    if verbose:
        print(report)

    return report


def validate_config(config: Any, verbose: bool = False) -> ValidationReport:
    """Build a governor from a config object and validate it.

    Args:
        config: Object with a ``to_governor()`` method
        verbose: If True, print the report

    Returns:
        ValidationReport with results
    """
    try:
        governor = config.to_governor()
    except (ValueError, OverflowError) as e:
        report = ValidationReport(
            success=False,
            errors=[f"Failed to build governor: {type(e).__name__}: {e}"],
        )
        if verbose:
            print(report)
        return report

    return validate_governor(governor, verbose=verbose)
