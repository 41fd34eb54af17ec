"""Pytest configuration and shared test utilities."""

import pytest

from roxfee import FeeRateGovernor, THROUGHPUT_ADAPTIVE


# Default tolerances for float comparisons of ROX display values
RTOL_DEFAULT = 1e-12  # Relative tolerance
ATOL_DEFAULT = 1e-12  # Absolute tolerance


def assert_close(
    actual: float,
    expected: float,
    rtol: float = RTOL_DEFAULT,
    atol: float = ATOL_DEFAULT,
    msg: str = ""
):
    """Assert that two floats are close within tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        rtol: Relative tolerance (default: 1e-12)
        atol: Absolute tolerance (default: 1e-12)
        msg: Optional message for assertion failure

    Example:
        >>> assert_close(lamports_to_rox(10_000), 0.00001)
    """
    # Use pytest.approx for nice error messages
    assert actual == pytest.approx(expected, rel=rtol, abs=atol), (
        f"{msg}\nExpected: {expected}\nActual: {actual}\n"
        f"Diff: {abs(actual - expected)}"
    )


@pytest.fixture
def close():
    """Fixture providing assert_close function.

    Usage:
        def test_something(close):
            close(actual, expected)
    """
    return assert_close


@pytest.fixture
def default_governor():
    """Governor pinned to the constant fee."""
    return FeeRateGovernor.default()


@pytest.fixture
def adaptive_governor():
    """Governor seeded by the throughput controller (target 100 lamports at 100 sigs/slot)."""
    return FeeRateGovernor.new(100, 100, THROUGHPUT_ADAPTIVE)
