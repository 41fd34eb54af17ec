"""Fee rate derivation kernels.

This module holds the pure computations behind the fee rate governor:
the policies that project a successor governor from a slot's observed
signature count, and the burn split of collected fees. Everything here
takes immutable inputs and returns new values.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Tuple

from ..types import U32_MAX, checked_mul, to_burn_percent, to_lamports, to_signature_count

if TYPE_CHECKING:
    from .governor import FeeRateGovernor

_LOG = logging.getLogger(__name__)

# Constant transaction fee: 0.00001 ROX = 10,000 lamports
CONSTANT_TRANSACTION_FEE_LAMPORTS = 10_000

# Legacy names, both resolve to the constant fee policy
DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE = CONSTANT_TRANSACTION_FEE_LAMPORTS
DEFAULT_TARGET_SIGNATURES_PER_SLOT = 0

# Percentage of tx fees to burn
DEFAULT_BURN_PERCENT = 0


def _clamp(value: int, low: int, high: int) -> int:
    # high wins when the bounds cross (target 0 gives min 1, max 0)
    return min(high, max(low, value))


class FeePolicy(abc.ABC):
    """How a governor's fee rate evolves from slot to slot."""

    name: str = "abstract"

    @abc.abstractmethod
    def seed(
        self,
        template: FeeRateGovernor,
        target_lamports_per_signature: int,
        target_signatures_per_slot: int,
    ) -> FeeRateGovernor:
        """Build the initial governor for a target rate and throughput.

        Args:
            template: Governor supplying the fields the policy leaves alone
                (burn percent)
            target_lamports_per_signature: Requested target rate
            target_signatures_per_slot: Requested target throughput

        Returns:
            Seeded governor
        """

    @abc.abstractmethod
    def derive(
        self,
        base: FeeRateGovernor,
        latest_signatures_per_slot: int,
    ) -> FeeRateGovernor:
        """Project the successor of ``base`` given one slot's signature count."""


@dataclass(frozen=True)
class FixedFeePolicy(FeePolicy):
    """Pin every fee rate field to one constant and disable adjustment.

    Observed throughput and requested targets are ignored.
    """

    fee: int = CONSTANT_TRANSACTION_FEE_LAMPORTS
    name: str = "fixed"

    def __post_init__(self):
        to_lamports(self.fee)

    def seed(self, template, target_lamports_per_signature, target_signatures_per_slot):
        base = template.model_copy(update=self._pinned_fields())
        return self.derive(base, 0)

    def derive(self, base, latest_signatures_per_slot):
        to_signature_count(latest_signatures_per_slot)
        me = base.model_copy(update=self._pinned_fields())
        _LOG.debug(
            "new_derived(): lamports_per_signature: %d (constant fee)",
            me.lamports_per_signature,
        )
        return me

    def _pinned_fields(self) -> dict:
        return {
            "lamports_per_signature": self.fee,
            "target_lamports_per_signature": self.fee,
            "min_lamports_per_signature": self.fee,
            "max_lamports_per_signature": self.fee,
            "target_signatures_per_slot": 0,
        }


@dataclass(frozen=True)
class ThroughputAdaptivePolicy(FeePolicy):
    """Closed-loop adjustment toward a target signature throughput.

    The desired rate is the target rate scaled by observed/target
    throughput, clamped to ``[max(1, target/2), target*10]``. Each slot the
    current rate moves one step of ``max(1, target/20)`` toward it. A
    target throughput of 0 pins the rate to the target.
    """

    name: str = "adaptive"

    def seed(self, template, target_lamports_per_signature, target_signatures_per_slot):
        to_lamports(target_lamports_per_signature)
        to_signature_count(target_signatures_per_slot)
        base = template.model_copy(update={
            "target_lamports_per_signature": target_lamports_per_signature,
            "lamports_per_signature": target_lamports_per_signature // 2,
            "target_signatures_per_slot": target_signatures_per_slot,
        })
        return self.derive(base, 0)

    def derive(self, base, latest_signatures_per_slot):
        to_signature_count(latest_signatures_per_slot)
        target = base.target_lamports_per_signature

        if base.target_signatures_per_slot > 0:
            # lamports_per_signature can range from 50% to 1000% of
            # target_lamports_per_signature
            min_lps = max(1, target // 2)
            max_lps = checked_mul(target, 10)

            # What the cluster should charge at `latest_signatures_per_slot`
            desired = _clamp(
                checked_mul(target, min(latest_signatures_per_slot, U32_MAX))
                // base.target_signatures_per_slot,
                min_lps,
                max_lps,
            )

            gap = desired - base.lamports_per_signature
            if gap == 0:
                lamports_per_signature = desired
            else:
                # Adjust fee by 5% of target_lamports_per_signature to produce a smooth
                # increase/decrease in fees over time.
                step = max(1, target // 20)
                gap_adjust = step if gap > 0 else -step
                lamports_per_signature = _clamp(
                    base.lamports_per_signature + gap_adjust, min_lps, max_lps
                )

            _LOG.debug(
                "new_derived(): lamports_per_signature: %d (desired %d, gap %d)",
                lamports_per_signature, desired, gap,
            )
        else:
            lamports_per_signature = target
            min_lps = target
            max_lps = target

        return base.model_copy(update={
            "lamports_per_signature": lamports_per_signature,
            "min_lamports_per_signature": min_lps,
            "max_lamports_per_signature": max_lps,
        })


FIXED_FEE = FixedFeePolicy()
THROUGHPUT_ADAPTIVE = ThroughputAdaptivePolicy()

POLICIES = {
    FIXED_FEE.name: FIXED_FEE,
    THROUGHPUT_ADAPTIVE.name: THROUGHPUT_ADAPTIVE,
}


def get_policy(name: str) -> FeePolicy:
    """Look up a registered policy by name ("fixed" or "adaptive")."""
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown fee policy '{name}', expected one of {sorted(POLICIES)}")


def burn_split(fees: int, burn_percent: int) -> Tuple[int, int]:
    """Split a fee total into (unburned, burned).

    ``burned = fees * burn_percent // 100``; the product uses checked u64
    arithmetic.

    Args:
        fees: Collected fee total in lamports
        burn_percent: Share to destroy, in [0, 100]

    Returns:
        Tuple of (unburned, burned), summing to ``fees``

    Raises:
        ValueError: If either input is out of range
        OverflowError: If ``fees * burn_percent`` exceeds u64
    """
    to_lamports(fees)
    to_burn_percent(burn_percent)
    burned = checked_mul(fees, burn_percent) // 100
    return fees - burned, burned


def derive_sequence(
    base: FeeRateGovernor,
    observations: Iterable[int],
    policy: FeePolicy = FIXED_FEE,
) -> List[FeeRateGovernor]:
    """Derive one governor per observed slot, each from its predecessor.

    Args:
        base: Governor in effect before the first observation
        observations: Signature counts of consecutive slots
        policy: Derivation policy

    Returns:
        List of derived governors, one per observation
    """
    governors = []
    current = base
    for signatures in observations:
        current = policy.derive(current, signatures)
        governors.append(current)
    return governors
