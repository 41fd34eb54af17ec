"""Fee rate governor and its serialized representation."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..types import U64, Percent, to_lamports
from .calculator import FeeCalculator
from .kernel import (
    CONSTANT_TRANSACTION_FEE_LAMPORTS,
    DEFAULT_BURN_PERCENT,
    FIXED_FEE,
    FeePolicy,
    burn_split,
)


class FeeRateGovernor(BaseModel):
    """Authoritative fee rate state for one slot.

    Governors are immutable; each slot's governor is derived from the
    previous one with ``new_derived``. The fixed-fee policy is the default
    everywhere; pass ``policy=THROUGHPUT_ADAPTIVE`` to run the throughput
    controller instead.

    The current rate ``lamports_per_signature`` is not part of the
    serialized form and comes back as 0 from ``from_json``; reattach it with
    ``clone_with_lamports_per_signature`` or re-derive.

    Example:
        >>> governor = FeeRateGovernor.default()
        >>> governor.burn(2)
        (2, 0)
        >>> governor.to_json()
        '{"targetLamportsPerSignature":10000,"targetSignaturesPerSlot":0,...}'
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # The current cost of a signature. This amount may increase/decrease over
    # time based on cluster processing load.
    lamports_per_signature: U64 = Field(default=0, exclude=True)

    # The target cost of a signature when the cluster is operating around
    # target_signatures_per_slot signatures
    target_lamports_per_signature: U64

    # Used to estimate the desired processing capacity of the cluster. As the
    # signatures for recent slots are fewer/greater than this value,
    # lamports_per_signature will decrease/increase for the next slot. A value
    # of 0 disables lamports_per_signature fee adjustments.
    target_signatures_per_slot: U64

    min_lamports_per_signature: U64
    max_lamports_per_signature: U64

    # What portion of collected fees are to be destroyed, in percent
    burn_percent: Percent

    @classmethod
    def default(cls) -> FeeRateGovernor:
        """Governor with every fee rate field at the constant fee."""
        return cls(
            lamports_per_signature=CONSTANT_TRANSACTION_FEE_LAMPORTS,
            target_lamports_per_signature=CONSTANT_TRANSACTION_FEE_LAMPORTS,
            target_signatures_per_slot=0,
            min_lamports_per_signature=CONSTANT_TRANSACTION_FEE_LAMPORTS,
            max_lamports_per_signature=CONSTANT_TRANSACTION_FEE_LAMPORTS,
            burn_percent=DEFAULT_BURN_PERCENT,
        )

    @classmethod
    def new(
        cls,
        target_lamports_per_signature: int,
        target_signatures_per_slot: int,
        policy: Optional[FeePolicy] = None,
    ) -> FeeRateGovernor:
        """Create a governor aiming at a target rate and throughput.

        Under the fixed-fee policy both targets are ignored and the result
        equals ``new_derived(default(), 0)``.
        """
        policy = policy or FIXED_FEE
        return policy.seed(cls.default(), target_lamports_per_signature, target_signatures_per_slot)

    @classmethod
    def new_derived(
        cls,
        base_fee_rate_governor: FeeRateGovernor,
        latest_signatures_per_slot: int,
        policy: Optional[FeePolicy] = None,
    ) -> FeeRateGovernor:
        """Derive the next slot's governor from this slot's signature count.

        Total over all u64 signature counts.

        Governors do not record the policy that built them. Pass the same
        ``policy`` on every call: with the default (``FIXED_FEE``) a
        governor built by ``FixedFeePolicy(fee=5000)`` or by the adaptive
        policy is pulled back to the constant fee. ``GovernorAdapter``
        carries its config's policy between slots.
        """
        policy = policy or FIXED_FEE
        return policy.derive(base_fee_rate_governor, latest_signatures_per_slot)

    def clone_with_lamports_per_signature(self, lamports_per_signature: int) -> FeeRateGovernor:
        """Copy with only the current rate replaced."""
        return self.model_copy(update={
            "lamports_per_signature": to_lamports(lamports_per_signature),
        })

    def burn(self, fees: int) -> Tuple[int, int]:
        """Calculate unburned fee from a fee total, returns (unburned, burned)."""
        return burn_split(fees, self.burn_percent)

    def create_fee_calculator(self) -> FeeCalculator:
        """Create a FeeCalculator based on current cluster signature throughput."""
        return FeeCalculator.new(self.lamports_per_signature)

    @property
    def is_adjustment_enabled(self) -> bool:
        return self.target_signatures_per_slot > 0

    def to_json(self) -> str:
        """Serialize to JSON with camelCase keys, without the current rate."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> FeeRateGovernor:
        """Deserialize from JSON; ``lamports_per_signature`` is 0."""
        return cls.model_validate_json(data)
