"""Fee module: fee calculator, fee rate governor and derivation policies."""

from .kernel import (
    CONSTANT_TRANSACTION_FEE_LAMPORTS,
    DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE,
    DEFAULT_TARGET_SIGNATURES_PER_SLOT,
    DEFAULT_BURN_PERCENT,
    FeePolicy,
    FixedFeePolicy,
    ThroughputAdaptivePolicy,
    FIXED_FEE,
    THROUGHPUT_ADAPTIVE,
    get_policy,
    burn_split,
    derive_sequence,
)
from .calculator import FeeCalculator
from .governor import FeeRateGovernor
from .config import FeeRateGovernorConfig
from .legacy import legacy_calculate_fee, precompile_signature_count

__all__ = [
    'CONSTANT_TRANSACTION_FEE_LAMPORTS',
    'DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE',
    'DEFAULT_TARGET_SIGNATURES_PER_SLOT',
    'DEFAULT_BURN_PERCENT',
    'FeePolicy',
    'FixedFeePolicy',
    'ThroughputAdaptivePolicy',
    'FIXED_FEE',
    'THROUGHPUT_ADAPTIVE',
    'get_policy',
    'burn_split',
    'derive_sequence',
    'FeeCalculator',
    'FeeRateGovernor',
    'FeeRateGovernorConfig',
    # Deprecated per-message computation
    'legacy_calculate_fee',
    'precompile_signature_count',
]
