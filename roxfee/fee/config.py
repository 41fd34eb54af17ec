"""Fee rate governor configuration with unit-aware Pydantic models.

This module provides the user-facing configuration a governor is built
from: target rate, target throughput, burn percentage and the derivation
policy.
"""

from __future__ import annotations

from typing import Literal, Union, Dict, Any

from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..fields import create_lamports_validator, percent_field
from ..native_token import Rox
from ..types import U64
from .governor import FeeRateGovernor
from .kernel import (
    CONSTANT_TRANSACTION_FEE_LAMPORTS,
    DEFAULT_BURN_PERCENT,
    DEFAULT_TARGET_SIGNATURES_PER_SLOT,
    FeePolicy,
    FixedFeePolicy,
    get_policy,
)


class FeeRateGovernorConfig(BaseModel):
    """Configuration for the fee rate governor.

    Amount parameters support unit-aware inputs:
    - Fee rates: "0.00001 ROX", "10000 lamport", "◎0.00001", 10000
    - Burn share: "50%", "50 percent", 50

    With ``policy="fixed"`` (the default) every fee rate field is pinned to
    ``target_lamports_per_signature`` and throughput is ignored. With
    ``policy="adaptive"`` the rate follows observed throughput around
    ``target_signatures_per_slot``.

    Example:
        >>> config = FeeRateGovernorConfig(
        ...     target_lamports_per_signature="0.00001 ROX",
        ...     burn_percent="50%",
        ... )
        >>> config.to_governor().burn(10)
        (5, 5)
    """

    model_config = ConfigDict(frozen=True)

    target_lamports_per_signature: U64 = Field(
        default=CONSTANT_TRANSACTION_FEE_LAMPORTS,
        description="Target (or, for the fixed policy, constant) fee per signature in lamports"
    )

    target_signatures_per_slot: U64 = Field(
        default=DEFAULT_TARGET_SIGNATURES_PER_SLOT,
        description="Throughput the adaptive policy steers toward; 0 disables adjustment"
    )

    burn_percent: int = Field(
        default=DEFAULT_BURN_PERCENT,
        description="Share of collected fees destroyed, in percent"
    )

    policy: Literal["fixed", "adaptive"] = Field(
        default="fixed",
        description="Fee derivation policy"
    )

    _validate_target_lamports = create_lamports_validator("target_lamports_per_signature")

    @field_validator("burn_percent", mode="before")
    @classmethod
    def _validate_burn_percent(cls, v):
        return percent_field(0, 100)(v)

    def to_policy(self) -> FeePolicy:
        """Build the derivation policy this configuration selects."""
        if self.policy == "fixed":
            return FixedFeePolicy(fee=self.target_lamports_per_signature)
        return get_policy(self.policy)

    def to_governor(self) -> FeeRateGovernor:
        """Build the initial governor.

        Returns:
            Governor seeded by the configured policy, carrying the
            configured burn percentage
        """
        template = FeeRateGovernor.default().model_copy(
            update={"burn_percent": self.burn_percent}
        )
        return self.to_policy().seed(
            template,
            self.target_lamports_per_signature,
            self.target_signatures_per_slot,
        )

    def summary(self, format: str = "markdown") -> Union[str, Dict[str, Any]]:
        """Generate summary of fee rate governor configuration.

        Args:
            format: Output format ('markdown', 'text', or 'dict')

        Returns:
            Formatted summary string, or dict for format='dict'
        """
        if format == "dict":
            return self.model_dump()

        rows = [
            ("Policy", self.policy),
            ("Target fee per signature", str(Rox(self.target_lamports_per_signature))),
            ("Target signatures per slot", str(self.target_signatures_per_slot)),
            ("Burn percent", f"{self.burn_percent}%"),
        ]

        if format == "markdown":
            lines = [
                "# Fee Rate Governor Configuration\n",
                "| Parameter | Value |",
                "|-----------|-------|",
            ]
            lines.extend(f"| {name} | {value} |" for name, value in rows)
        else:  # text format
            lines = ["Fee Rate Governor Configuration", "-" * 40]
            lines.extend(f"  {name}: {value}" for name, value in rows)

        return "\n".join(lines)
