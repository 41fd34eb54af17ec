"""Calculation of transaction fees."""

from __future__ import annotations

import warnings

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..message import MessageLike
from ..types import U64
from .kernel import DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE


class FeeCalculator(BaseModel):
    """Read-only snapshot of a governor's current fee rate.

    Attributes:
        lamports_per_signature: The current cost of a signature. This amount
            may increase/decrease over time based on cluster processing load.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    lamports_per_signature: U64 = 0

    @classmethod
    def new(cls, lamports_per_signature: int) -> FeeCalculator:
        return cls(lamports_per_signature=lamports_per_signature)

    @classmethod
    def default(cls) -> FeeCalculator:
        """Zero fee."""
        return cls()

    def calculate_fee(self, message: MessageLike) -> int:
        """Fee for submitting ``message``.

        .. deprecated:: 1.9
           Every transaction is charged the constant fee; the message is not
           inspected. The per-signature computation this method used to do
           is kept in ``roxfee.fee.legacy.legacy_calculate_fee``.
        """
        warnings.warn(
            "FeeCalculator.calculate_fee is deprecated and will be removed. "
            "Transactions pay DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE regardless "
            "of the message.",
            DeprecationWarning,
            stacklevel=2
        )
        return DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE
