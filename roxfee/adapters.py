"""High-level adapter for stateful slot-by-slot workflows.

The governor and its policies are pure values and functions. The adapter
wraps them with a stateful, user-friendly API for callers that process
slots one after another and just want the current fee.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, List

from .fee.calculator import FeeCalculator
from .fee.config import FeeRateGovernorConfig
from .fee.governor import FeeRateGovernor
from .fee.kernel import FeePolicy
from .validation import validate_governor

__all__ = [
    'GovernorAdapter',
]

_LOG = logging.getLogger(__name__)


class GovernorAdapter:
    """High-level adapter for the fee rate governor with stateful API.

    Holds the governor in effect for the current slot and replaces it with
    a derived successor on every ``step``. Governors themselves are never
    mutated.

    For direct use of the pure API, ``.governor`` and ``.policy`` are
    exposed:

    Example:
        >>> adapter = GovernorAdapter(FeeRateGovernorConfig(burn_percent="50%"))
        >>> adapter.step(signatures_per_slot=1200)
        10000
        >>> adapter.burn(10_000)
        (5000, 5000)

        # Pure API equivalent:
        >>> FeeRateGovernor.new_derived(adapter.governor, 1200, adapter.policy)

    Args:
        config: FeeRateGovernorConfig (defaults to the fixed constant fee)
        check_invariants: Validate the initial governor (default: True)
        keep_history: Record every derived governor (default: False)

    Attributes:
        config: The configuration the governor was built from
        policy: Derivation policy
        governor: Governor for the current slot
        slot: Number of slots stepped since construction or reset
    """

    def __init__(
        self,
        config: Optional[FeeRateGovernorConfig] = None,
        *,
        check_invariants: bool = True,
        keep_history: bool = False
    ):
        """Initialize the governor adapter.

        Raises:
            ValueError: If invariant validation fails
        """
        self.config = config or FeeRateGovernorConfig()
        self.policy: FeePolicy = self.config.to_policy()
        self.governor: FeeRateGovernor = self.config.to_governor()
        self.slot = 0
        self.keep_history = keep_history
        self.history: List[FeeRateGovernor] = []

        if check_invariants:
            report = validate_governor(self.governor)
            if not report.success:
                raise ValueError(f"Invalid initial governor:\n{report}")

    def step(self, signatures_per_slot: int) -> int:
        """Advance one slot given its observed signature count.

        Args:
            signatures_per_slot: Signatures processed in the slot just finished

        Returns:
            Lamports per signature for the next slot
        """
        self.governor = FeeRateGovernor.new_derived(
            self.governor, signatures_per_slot, self.policy
        )
        self.slot += 1
        if self.keep_history:
            self.history.append(self.governor)
        _LOG.debug(
            "slot %d: lamports_per_signature=%d",
            self.slot, self.governor.lamports_per_signature,
        )
        return self.governor.lamports_per_signature

    def fee_calculator(self) -> FeeCalculator:
        """Snapshot of the current fee rate."""
        return self.governor.create_fee_calculator()

    def burn(self, fees: int) -> Tuple[int, int]:
        """Split collected fees with the current burn percentage."""
        return self.governor.burn(fees)

    def reset(self):
        """Rebuild the initial governor from the config and clear history."""
        self.governor = self.config.to_governor()
        self.slot = 0
        self.history = []

    def get_state(self) -> dict:
        """Get current state as a dictionary of Python ints.

        Returns:
            Dictionary with:
            - slot: Slots stepped so far
            - lamports_per_signature: Current fee rate
            - target_lamports_per_signature, min_lamports_per_signature,
              max_lamports_per_signature, target_signatures_per_slot,
              burn_percent: Governor fields
        """
        state = {'slot': self.slot}
        state['lamports_per_signature'] = self.governor.lamports_per_signature
        state.update(self.governor.model_dump())
        return state
