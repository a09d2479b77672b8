"""
Contract term validation.

Pure checks with no I/O over a proposed (start_date, end_date, amount)
triple plus "today".  Each check raises the matching typed error; the
combined ``validate_contract_terms`` runs them in a fixed order (start date,
end date, amount) and stops at the first failure.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Any

from contract_kernel.domain.policy import DEFAULT_POLICY, ContractPolicy
from contract_kernel.exceptions import (
    InputValidationError,
    InvalidAmountError,
    InvalidEndDateError,
    InvalidStartDateError,
)


def require_decimal(value: Any, name: str = "amount") -> Decimal:
    """
    Coerce ``value`` to a whole-unit Decimal without passing through float.

    ints are exact and accepted; floats and other types are rejected with
    TypeError.  NaN, infinities and fractional values raise
    InputValidationError, since amounts are stored in whole currency units.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int) and not isinstance(value, bool):
        result = Decimal(value)
    else:
        raise TypeError(f"{name} must be Decimal, not {type(value).__name__}")
    if not result.is_finite():
        raise InputValidationError(
            f"{name} must be a finite number",
            {name: f"{result} is not a finite number"},
        )
    if result != result.to_integral_value():
        raise InputValidationError(
            f"{name} must be in whole currency units",
            {name: f"{result} has a fractional part"},
        )
    return result


def check_start_date(start_date: date, today: date) -> None:
    if start_date < today:
        raise InvalidStartDateError(start_date, today)


def check_end_date(
    start_date: date,
    end_date: date,
    min_days: int = DEFAULT_POLICY.min_contract_days,
) -> None:
    # start + min_days itself is allowed
    if end_date < start_date + timedelta(days=min_days):
        raise InvalidEndDateError(start_date, end_date, min_days)


def check_amount(
    amount: Decimal,
    min_amount: Decimal = DEFAULT_POLICY.min_amount,
    max_amount: Decimal = DEFAULT_POLICY.max_amount,
) -> None:
    amount = require_decimal(amount)
    if amount < min_amount:
        raise InvalidAmountError(amount, min_amount, InvalidAmountError.BELOW_MINIMUM)
    if amount > max_amount:
        raise InvalidAmountError(amount, max_amount, InvalidAmountError.ABOVE_MAXIMUM)


def validate_contract_terms(
    start_date: date,
    end_date: date,
    amount: Decimal,
    today: date,
    policy: ContractPolicy = DEFAULT_POLICY,
) -> None:
    """
    Validate proposed contract terms against policy.

    Raises:
        InvalidStartDateError: start_date is before today.
        InvalidEndDateError: end_date is less than ``policy.min_contract_days``
            after start_date.
        InvalidAmountError: amount outside [policy.min_amount, policy.max_amount].
        TypeError: amount is not an exact number.
        InputValidationError: amount is not finite or not a whole number.
    """
    amount = require_decimal(amount)
    check_start_date(start_date, today)
    check_end_date(start_date, end_date, policy.min_contract_days)
    check_amount(amount, policy.min_amount, policy.max_amount)
