"""Tests for FeeRateGovernor under the fixed-fee contract."""

import json

import pytest
from pydantic import ValidationError

from roxfee import (
    CONSTANT_TRANSACTION_FEE_LAMPORTS,
    DEFAULT_BURN_PERCENT,
    DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE,
    DEFAULT_TARGET_SIGNATURES_PER_SLOT,
    U64_MAX,
    FeeCalculator,
    FeeRateGovernor,
)

SIGNATURE_COUNTS = [0, 1, 2, 100, 20_000, 2**32, U64_MAX]


def fee_fields(governor):
    return (
        governor.lamports_per_signature,
        governor.target_lamports_per_signature,
        governor.min_lamports_per_signature,
        governor.max_lamports_per_signature,
    )


class TestConstants:
    def test_values(self):
        assert CONSTANT_TRANSACTION_FEE_LAMPORTS == 10_000
        assert DEFAULT_TARGET_LAMPORTS_PER_SIGNATURE == CONSTANT_TRANSACTION_FEE_LAMPORTS
        assert DEFAULT_TARGET_SIGNATURES_PER_SLOT == 0
        assert DEFAULT_BURN_PERCENT == 0


class TestDefault:
    """Tests for FeeRateGovernor.default()."""

    def test_fee_fields_pinned(self, default_governor):
        assert fee_fields(default_governor) == (CONSTANT_TRANSACTION_FEE_LAMPORTS,) * 4

    def test_adjustment_disabled(self, default_governor):
        assert default_governor.target_signatures_per_slot == DEFAULT_TARGET_SIGNATURES_PER_SLOT
        assert not default_governor.is_adjustment_enabled

    def test_no_burn(self, default_governor):
        assert default_governor.burn_percent == DEFAULT_BURN_PERCENT


class TestNew:
    """Tests for FeeRateGovernor.new() under the fixed-fee policy."""

    @pytest.mark.parametrize("target_lps,target_sps", [
        (0, 0), (1, 1), (100, 100), (10_000, 20_000), (U64_MAX, U64_MAX),
    ])
    def test_arguments_ignored(self, target_lps, target_sps):
        """Test the result equals deriving from default() with zero throughput."""
        governor = FeeRateGovernor.new(target_lps, target_sps)
        assert governor == FeeRateGovernor.new_derived(FeeRateGovernor.default(), 0)
        assert fee_fields(governor) == (CONSTANT_TRANSACTION_FEE_LAMPORTS,) * 4
        assert governor.target_signatures_per_slot == 0


class TestNewDerived:
    """Tests for FeeRateGovernor.new_derived() under the fixed-fee policy."""

    @pytest.mark.parametrize("signatures", SIGNATURE_COUNTS)
    def test_from_default(self, default_governor, signatures):
        derived = FeeRateGovernor.new_derived(default_governor, signatures)
        assert derived == default_governor

    @pytest.mark.parametrize("signatures", SIGNATURE_COUNTS)
    def test_input_independent(self, signatures):
        """Test any prior governor collapses to the constant fee."""
        prior = FeeRateGovernor(
            lamports_per_signature=123,
            target_lamports_per_signature=456,
            target_signatures_per_slot=789,
            min_lamports_per_signature=1,
            max_lamports_per_signature=5000,
            burn_percent=50,
        )
        derived = FeeRateGovernor.new_derived(prior, signatures)
        assert fee_fields(derived) == (CONSTANT_TRANSACTION_FEE_LAMPORTS,) * 4
        assert derived.target_signatures_per_slot == 0
        # burn_percent is not a fee rate field and carries over
        assert derived.burn_percent == 50

    def test_idempotent(self, default_governor):
        once = FeeRateGovernor.new_derived(default_governor, 7)
        twice = FeeRateGovernor.new_derived(once, 7)
        assert once == twice

    def test_does_not_mutate_base(self, default_governor):
        base = default_governor.clone_with_lamports_per_signature(1)
        FeeRateGovernor.new_derived(base, 10)
        assert base.lamports_per_signature == 1

    @pytest.mark.parametrize("signatures", [-1, U64_MAX + 1])
    def test_rejects_out_of_range_observation(self, default_governor, signatures):
        with pytest.raises(ValueError):
            FeeRateGovernor.new_derived(default_governor, signatures)

    def test_logs_rate(self, default_governor, caplog):
        with caplog.at_level("DEBUG", logger="roxfee.fee.kernel"):
            FeeRateGovernor.new_derived(default_governor, 0)
        assert "constant fee" in caplog.text


class TestCloneWithLamportsPerSignature:
    def test_only_rate_changes(self, default_governor):
        clone = default_governor.clone_with_lamports_per_signature(42)
        assert clone.lamports_per_signature == 42
        assert clone.model_dump() == default_governor.model_dump()
        assert default_governor.lamports_per_signature == CONSTANT_TRANSACTION_FEE_LAMPORTS

    def test_rejects_out_of_range(self, default_governor):
        with pytest.raises(ValueError):
            default_governor.clone_with_lamports_per_signature(-1)


class TestBurn:
    """Tests for the burn split."""

    def governor(self, burn_percent):
        return FeeRateGovernor.default().model_copy(update={"burn_percent": burn_percent})

    def test_examples(self):
        assert self.governor(50).burn(2) == (1, 1)
        assert self.governor(0).burn(2) == (2, 0)
        assert self.governor(100).burn(2) == (0, 2)

    def test_default_burns_nothing(self, default_governor):
        assert default_governor.burn(10_000) == (10_000, 0)

    @pytest.mark.parametrize("burn_percent", [0, 1, 33, 50, 99, 100])
    @pytest.mark.parametrize("fees", [0, 1, 2, 3, 99, 101, 10_000, 123_456_789, U64_MAX // 100])
    def test_split_sums_to_total(self, burn_percent, fees):
        unburned, burned = self.governor(burn_percent).burn(fees)
        assert unburned + burned == fees
        assert burned == fees * burn_percent // 100

    def test_extremes(self):
        fees = U64_MAX // 100
        assert self.governor(0).burn(U64_MAX) == (U64_MAX, 0)
        assert self.governor(100).burn(fees) == (0, fees)

    def test_overflow_raises(self):
        """Test the product is checked rather than wrapped."""
        with pytest.raises(OverflowError):
            self.governor(50).burn(U64_MAX)

    def test_rejects_negative_fees(self, default_governor):
        with pytest.raises(ValueError):
            default_governor.burn(-1)


class TestCreateFeeCalculator:
    def test_snapshot(self, default_governor):
        calculator = default_governor.create_fee_calculator()
        assert calculator == FeeCalculator.new(CONSTANT_TRANSACTION_FEE_LAMPORTS)

    def test_follows_current_rate(self, default_governor):
        calculator = default_governor.clone_with_lamports_per_signature(7).create_fee_calculator()
        assert calculator.lamports_per_signature == 7


class TestValidation:
    """Tests for field validation on construction."""

    def base_fields(self, **overrides):
        fields = dict(
            target_lamports_per_signature=1,
            target_signatures_per_slot=0,
            min_lamports_per_signature=1,
            max_lamports_per_signature=1,
            burn_percent=0,
        )
        fields.update(overrides)
        return fields

    @pytest.mark.parametrize("burn_percent", [-1, 101, 255])
    def test_burn_percent_range(self, burn_percent):
        with pytest.raises(ValidationError):
            FeeRateGovernor(**self.base_fields(burn_percent=burn_percent))

    def test_u64_range(self):
        with pytest.raises(ValidationError):
            FeeRateGovernor(**self.base_fields(max_lamports_per_signature=U64_MAX + 1))
        with pytest.raises(ValidationError):
            FeeRateGovernor(**self.base_fields(target_signatures_per_slot=-1))

    def test_rejects_floats(self):
        with pytest.raises(ValidationError):
            FeeRateGovernor(**self.base_fields(target_lamports_per_signature=1.0))

    def test_immutable(self, default_governor):
        with pytest.raises(ValidationError):
            default_governor.burn_percent = 50


class TestSerialization:
    """Tests for the serialized governor record."""

    def test_camel_case_keys_without_current_rate(self, default_governor):
        data = json.loads(default_governor.to_json())
        assert data == {
            "targetLamportsPerSignature": CONSTANT_TRANSACTION_FEE_LAMPORTS,
            "targetSignaturesPerSlot": 0,
            "minLamportsPerSignature": CONSTANT_TRANSACTION_FEE_LAMPORTS,
            "maxLamportsPerSignature": CONSTANT_TRANSACTION_FEE_LAMPORTS,
            "burnPercent": 0,
        }

    def test_model_dump_excludes_current_rate(self, default_governor):
        assert "lamportsPerSignature" not in default_governor.model_dump(by_alias=True)
        assert "lamports_per_signature" not in default_governor.model_dump()

    def test_round_trip_resets_current_rate(self, default_governor):
        """Test the current rate comes back as 0 and must be reattached."""
        restored = FeeRateGovernor.from_json(default_governor.to_json())
        assert restored.lamports_per_signature == 0
        assert restored == default_governor.clone_with_lamports_per_signature(0)
        reattached = restored.clone_with_lamports_per_signature(CONSTANT_TRANSACTION_FEE_LAMPORTS)
        assert reattached == default_governor

    def test_rederive_after_deserialization(self, default_governor):
        restored = FeeRateGovernor.from_json(default_governor.to_json())
        assert FeeRateGovernor.new_derived(restored, 0) == default_governor

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            FeeRateGovernor.from_json('{"targetLamportsPerSignature": 1}')

    def test_u64_max_survives(self):
        governor = FeeRateGovernor(
            target_lamports_per_signature=U64_MAX,
            target_signatures_per_slot=U64_MAX,
            min_lamports_per_signature=0,
            max_lamports_per_signature=U64_MAX,
            burn_percent=100,
        )
        assert FeeRateGovernor.from_json(governor.to_json()) == governor
