"""roxfee: transaction fee economics for the ROX ledger."""

from .types import U8_MAX, U32_MAX, U64_MAX
from .units import UnitManager, QuantityInput
from .fields import lamports_field, percent_field
from .native_token import (
    LAMPORTS_PER_ROX,
    Rox,
    lamports_to_rox,
    rox_to_lamports,
)
from .message import (
    Instruction,
    Message,
    SECP256K1_PROGRAM_ID,
    ED25519_PROGRAM_ID,
)
from .fee import (
    CONSTANT_TRANSACTION_FEE_LAMPORTS,
    DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE,
    DEFAULT_TARGET_SIGNATURES_PER_SLOT,
    DEFAULT_BURN_PERCENT,
    FeeCalculator,
    FeeRateGovernor,
    FeeRateGovernorConfig,
    FeePolicy,
    FixedFeePolicy,
    ThroughputAdaptivePolicy,
    FIXED_FEE,
    THROUGHPUT_ADAPTIVE,
    burn_split,
    derive_sequence,
)
from .validation import ValidationReport, validate_governor, validate_config
from .adapters import GovernorAdapter

__all__ = [
    # Integer ranges
    'U8_MAX',
    'U32_MAX',
    'U64_MAX',
    # Units
    'UnitManager',
    'QuantityInput',
    'lamports_field',
    'percent_field',
    # Native token
    'LAMPORTS_PER_ROX',
    'Rox',
    'lamports_to_rox',
    'rox_to_lamports',
    # Message
    'Instruction',
    'Message',
    'SECP256K1_PROGRAM_ID',
    'ED25519_PROGRAM_ID',
    # Fee
    'CONSTANT_TRANSACTION_FEE_LAMPORTS',
    'DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE',
    'DEFAULT_TARGET_SIGNATURES_PER_SLOT',
    'DEFAULT_BURN_PERCENT',
    'FeeCalculator',
    'FeeRateGovernor',
    'FeeRateGovernorConfig',
    'FeePolicy',
    'FixedFeePolicy',
    'ThroughputAdaptivePolicy',
    'FIXED_FEE',
    'THROUGHPUT_ADAPTIVE',
    'burn_split',
    'derive_sequence',
    # Validation
    'ValidationReport',
    'validate_governor',
    'validate_config',
    # High-level adapter
    'GovernorAdapter',
]
