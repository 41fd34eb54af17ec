"""Minimal message abstraction consumed by the per-message fee path.

Only the parts of a transaction message that fee computation reads are
modelled: the number of required signatures and, per instruction, the
target program id and the raw instruction data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol, Sequence, Tuple

from .types import to_u8

# Signature-verification precompiles
SECP256K1_PROGRAM_ID = "KeccakSecp256k11111111111111111111111111111"
ED25519_PROGRAM_ID = "Ed25519SigVerify111111111111111111111111111"

PRECOMPILE_PROGRAM_IDS = frozenset({SECP256K1_PROGRAM_ID, ED25519_PROGRAM_ID})


def is_precompile(program_id: str) -> bool:
    """Check if a program id is a signature-verification precompile."""
    return program_id in PRECOMPILE_PROGRAM_IDS


@dataclass(frozen=True)
class Instruction:
    """An instruction as seen by fee computation."""
    program_id: str
    data: bytes = b""


@dataclass(frozen=True)
class Message:
    """Transaction message with its signature requirement and instructions."""
    num_required_signatures: int = 0
    instructions: Tuple[Instruction, ...] = field(default_factory=tuple)

    def __post_init__(self):
        to_u8(self.num_required_signatures, "num_required_signatures")
        # Normalize to a tuple
        object.__setattr__(self, "instructions", tuple(self.instructions))

    def program_instructions_iter(self) -> Iterator[Tuple[str, Instruction]]:
        """Yield (program_id, instruction) pairs in order."""
        for instruction in self.instructions:
            yield instruction.program_id, instruction


class MessageLike(Protocol):
    """Structural type for messages supplied by callers."""
    num_required_signatures: int
    instructions: Sequence[Instruction]

    def program_instructions_iter(self) -> Iterator[Tuple[str, Instruction]]: ...
