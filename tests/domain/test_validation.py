"""
Tests for contract term validation (``contract_kernel.domain.validation``).

Boundary values for the start date, the 28-day minimum run and the amount
range, plus the order in which rules are checked.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contract_kernel.domain.policy import ContractPolicy
from contract_kernel.domain.validation import (
    check_amount,
    check_end_date,
    check_start_date,
    require_decimal,
    validate_contract_terms,
)
from contract_kernel.exceptions import (
    InputValidationError,
    InvalidAmountError,
    InvalidEndDateError,
    InvalidStartDateError,
)

TODAY = date(2024, 6, 1)
VALID_END = TODAY + timedelta(days=28)


class TestStartDate:

    def test_today_is_allowed(self):
        check_start_date(TODAY, TODAY)

    def test_yesterday_is_rejected(self):
        with pytest.raises(InvalidStartDateError) as exc_info:
            check_start_date(TODAY - timedelta(days=1), TODAY)
        assert exc_info.value.code == "INVALID_START_DATE"
        assert exc_info.value.today == TODAY


class TestEndDate:

    def test_exactly_28_days_is_allowed(self):
        check_end_date(TODAY, TODAY + timedelta(days=28))

    def test_27_days_is_rejected(self):
        with pytest.raises(InvalidEndDateError) as exc_info:
            check_end_date(TODAY, TODAY + timedelta(days=27))
        assert exc_info.value.min_days == 28
        assert "28 days" in str(exc_info.value)

    def test_end_before_start_is_rejected(self):
        with pytest.raises(InvalidEndDateError):
            check_end_date(TODAY, TODAY - timedelta(days=1))

    def test_custom_minimum(self):
        check_end_date(TODAY, TODAY + timedelta(days=7), min_days=7)


class TestAmount:

    @pytest.mark.parametrize("amount", ["10000", "10001", "500000", "1000000"])
    def test_in_range(self, amount):
        check_amount(Decimal(amount))

    def test_below_minimum(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            check_amount(Decimal("9999"))
        err = exc_info.value
        assert err.code == "INVALID_AMOUNT"
        assert err.reason == InvalidAmountError.BELOW_MINIMUM
        assert err.limit == Decimal("10000")
        assert "too low" in str(err)

    def test_above_maximum(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            check_amount(Decimal("1000001"))
        err = exc_info.value
        assert err.reason == InvalidAmountError.ABOVE_MAXIMUM
        assert "1,000,000" in str(err)


class TestRequireDecimal:

    def test_decimal_passes_through(self):
        value = Decimal("12345")
        assert require_decimal(value) is value

    def test_int_is_exact(self):
        assert require_decimal(50000) == Decimal("50000")

    @pytest.mark.parametrize("value", [50000.0, "50000", True, None])
    def test_other_types_rejected(self, value):
        with pytest.raises(TypeError):
            require_decimal(value)

    @pytest.mark.parametrize("value", ["10000.6", "0.5", "NaN", "sNaN", "Infinity"])
    def test_non_whole_or_non_finite_rejected(self, value):
        with pytest.raises(InputValidationError) as exc_info:
            require_decimal(Decimal(value))
        assert set(exc_info.value.details) == {"amount"}

    def test_zero_fraction_is_whole(self):
        assert require_decimal(Decimal("10000.00")) == Decimal("10000")

    def test_check_amount_rejects_nan(self):
        with pytest.raises(InputValidationError):
            check_amount(Decimal("NaN"))


class TestValidateContractTerms:

    def test_valid_terms(self):
        validate_contract_terms(TODAY, VALID_END, Decimal("500000"), TODAY)

    def test_start_date_checked_first(self):
        """All three rules broken: the start date error wins."""
        with pytest.raises(InvalidStartDateError):
            validate_contract_terms(
                TODAY - timedelta(days=1), TODAY, Decimal("1"), TODAY
            )

    def test_end_date_checked_before_amount(self):
        with pytest.raises(InvalidEndDateError):
            validate_contract_terms(
                TODAY, TODAY + timedelta(days=10), Decimal("1"), TODAY
            )

    def test_amount_checked_last(self):
        with pytest.raises(InvalidAmountError):
            validate_contract_terms(TODAY, VALID_END, Decimal("9999"), TODAY)

    def test_policy_overrides(self):
        policy = ContractPolicy(
            min_contract_days=7, min_amount=Decimal("100"), max_amount=Decimal("1000")
        )
        validate_contract_terms(
            TODAY, TODAY + timedelta(days=7), Decimal("100"), TODAY, policy
        )
        with pytest.raises(InvalidAmountError):
            validate_contract_terms(
                TODAY, TODAY + timedelta(days=7), Decimal("1001"), TODAY, policy
            )


class TestValidationProperties:

    @given(
        start_offset=st.integers(min_value=0, max_value=365),
        extra_days=st.integers(min_value=0, max_value=365),
        amount=st.integers(min_value=10_000, max_value=1_000_000),
    )
    def test_every_in_policy_proposal_passes(self, start_offset, extra_days, amount):
        start = TODAY + timedelta(days=start_offset)
        end = start + timedelta(days=28 + extra_days)
        validate_contract_terms(start, end, Decimal(amount), TODAY)

    @given(
        amount=st.one_of(
            st.integers(min_value=-10**9, max_value=9_999),
            st.integers(min_value=1_000_001, max_value=10**12),
        )
    )
    def test_every_out_of_range_amount_fails(self, amount):
        with pytest.raises(InvalidAmountError):
            validate_contract_terms(TODAY, VALID_END, Decimal(amount), TODAY)

    @given(short=st.integers(min_value=0, max_value=27))
    def test_every_short_run_fails(self, short):
        with pytest.raises(InvalidEndDateError):
            validate_contract_terms(
                TODAY, TODAY + timedelta(days=short), Decimal("500000"), TODAY
            )
