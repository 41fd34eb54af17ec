"""Legacy per-message fee computation.

.. deprecated:: 1.9
   Fees are now a constant per transaction (see
   ``FeeCalculator.calculate_fee``). This module keeps the old
   per-signature computation for callers that still reconcile historical
   fees and will be removed together with ``calculate_fee``.

The old fee was ``lamports_per_signature`` times the number of signatures
the transaction needs verified: the message's required signatures plus, for
every signature-verification precompile instruction, the signature count in
the first byte of its data. Empty precompile data and a leading ``0`` (the
bypass value) add nothing.
"""

from __future__ import annotations

import warnings
from typing import Union

from ..message import MessageLike, is_precompile
from ..types import checked_add, checked_mul, to_lamports
from .calculator import FeeCalculator


def precompile_signature_count(message: MessageLike) -> int:
    """Number of signatures verified by the message's precompile instructions."""
    num_signatures = 0
    for program_id, instruction in message.program_instructions_iter():
        if is_precompile(program_id) and instruction.data:
            num_signatures = checked_add(num_signatures, instruction.data[0])
    return num_signatures


def legacy_calculate_fee(
    fee_rate: Union[FeeCalculator, int],
    message: MessageLike,
) -> int:
    """Per-signature fee for ``message``.

    Args:
        fee_rate: FeeCalculator or lamports per signature
        message: Message exposing required signatures and instructions

    Returns:
        Fee in lamports

    Raises:
        OverflowError: If the fee does not fit in a u64
    """
    warnings.warn(
        "legacy_calculate_fee is deprecated and will be removed. "
        "Use FeeCalculator.calculate_fee for the constant transaction fee.",
        DeprecationWarning,
        stacklevel=2
    )
    if isinstance(fee_rate, FeeCalculator):
        lamports_per_signature = fee_rate.lamports_per_signature
    else:
        lamports_per_signature = to_lamports(fee_rate)

    num_signatures = checked_add(
        message.num_required_signatures, precompile_signature_count(message)
    )
    return checked_mul(lamports_per_signature, num_signatures)
