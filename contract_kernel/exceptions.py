"""
Typed Exception Hierarchy for the Contract Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers (the HTTP boundary, scripts, tests) branch on the exception TYPE or
its ``code`` attribute, never on message text.  Messages are for humans and
may be reworded freely.

Every exception:
  1. Is a subclass of ContractKernelError.
  2. Has a ``code`` CLASS attribute (machine-readable, API-safe).
  3. Carries structured data as attributes (ids, dates, amounts).

Example:
    try:
        service.create_contract(...)
    except InvalidAmountError as e:
        api_response(code=e.code, amount=str(e.amount), reason=e.reason)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    ContractKernelError (base)
    |
    +-- NotFoundError
    |   +-- CompanyNotFoundError
    |   +-- ProductNotFoundError
    |   +-- ContractNotFoundError
    |
    +-- ContractRuleError
    |   +-- InvalidStartDateError
    |   +-- InvalidEndDateError
    |   +-- InvalidAmountError
    |
    +-- ConflictError
    |   +-- DuplicateRequestError
    |   +-- InvalidStateError
    |
    +-- InputValidationError
    |
    +-- ConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category    | Code                | When Raised
------------|---------------------|--------------------------------------------
Not found   | COMPANY_NOT_FOUND   | Company id does not exist
            | PRODUCT_NOT_FOUND   | Product id does not exist
            | CONTRACT_NOT_FOUND  | Contract id does not exist
------------|---------------------|--------------------------------------------
Rules       | INVALID_START_DATE  | Start date before today
            | INVALID_END_DATE    | End date < start date + minimum days
            | INVALID_AMOUNT      | Amount outside [minimum, maximum]
------------|---------------------|--------------------------------------------
Conflict    | DUPLICATE_REQUEST   | Identical contract created moments ago
            | INVALID_STATE       | Cancelling a completed contract
------------|---------------------|--------------------------------------------
Input       | VALIDATION_ERROR    | Malformed request field (boundary layer)
------------|---------------------|--------------------------------------------
Config      | CONFIGURATION_ERROR | Bad settings file or environment value

There is no exception class for INTERNAL_ERROR: anything that is not a
ContractKernelError is, by definition, internal.
"""

from datetime import date
from decimal import Decimal


class ContractKernelError(Exception):
    """
    Base exception for all contract kernel errors.

    All subclasses must have a ``code`` class attribute.
    """

    code: str = "CONTRACT_KERNEL_ERROR"


# Not-found exceptions


class NotFoundError(ContractKernelError):
    """Base exception for missing entities."""

    code: str = "NOT_FOUND"


class CompanyNotFoundError(NotFoundError):
    """Company with given ID was not found."""

    code: str = "COMPANY_NOT_FOUND"

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(f"Company not found: {company_id}")


class ProductNotFoundError(NotFoundError):
    """Product with given ID was not found."""

    code: str = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class ContractNotFoundError(NotFoundError):
    """Contract with given ID was not found."""

    code: str = "CONTRACT_NOT_FOUND"

    def __init__(self, contract_id: str):
        self.contract_id = contract_id
        super().__init__(f"Contract not found: {contract_id}")


# Contract rule exceptions


class ContractRuleError(ContractKernelError):
    """Base exception for proposed contract terms that break policy."""

    code: str = "CONTRACT_RULE_ERROR"


class InvalidStartDateError(ContractRuleError):
    """Start date lies before the day the contract is created."""

    code: str = "INVALID_START_DATE"

    def __init__(self, start_date: date, today: date):
        self.start_date = start_date
        self.today = today
        super().__init__(
            f"Contract start date {start_date.isoformat()} must be today "
            f"({today.isoformat()}) or later"
        )


class InvalidEndDateError(ContractRuleError):
    """End date is closer to the start date than the minimum contract length."""

    code: str = "INVALID_END_DATE"

    def __init__(self, start_date: date, end_date: date, min_days: int):
        self.start_date = start_date
        self.end_date = end_date
        self.min_days = min_days
        super().__init__(
            f"Contract end date must be at least {min_days} days after the "
            f"start date (start {start_date.isoformat()}, "
            f"end {end_date.isoformat()})"
        )


class InvalidAmountError(ContractRuleError):
    """
    Amount outside the permitted range.

    Both directions share one code; ``reason`` tells them apart.
    """

    code: str = "INVALID_AMOUNT"

    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"

    def __init__(self, amount: Decimal, limit: Decimal, reason: str):
        self.amount = amount
        self.limit = limit
        self.reason = reason
        if reason == self.BELOW_MINIMUM:
            message = (
                f"Contract amount {amount} is too low: "
                f"the minimum is {limit:,}"
            )
        else:
            message = (
                f"Contract amount {amount} is too high: "
                f"the maximum is {limit:,}"
            )
        super().__init__(message)


# Conflict exceptions


class ConflictError(ContractKernelError):
    """Base exception for requests that clash with existing state."""

    code: str = "CONFLICT"


class DuplicateRequestError(ConflictError):
    """An identical contract was accepted within the duplicate window."""

    code: str = "DUPLICATE_REQUEST"

    def __init__(self, company_id: str, product_id: str, window_seconds: int):
        self.company_id = company_id
        self.product_id = product_id
        self.window_seconds = window_seconds
        super().__init__(
            "An identical contract request was processed in the last "
            f"{window_seconds} seconds; please retry shortly"
        )


class InvalidStateError(ConflictError):
    """Transition not allowed from the contract's current status."""

    code: str = "INVALID_STATE"

    def __init__(self, contract_id: str, status: str, action: str):
        self.contract_id = contract_id
        self.status = status
        self.action = action
        super().__init__(
            f"Cannot {action} contract {contract_id} in status {status}"
        )


# Boundary exceptions


class InputValidationError(ContractKernelError):
    """
    Structurally malformed input: a bad field shape or a non-whole amount.

    ``details`` maps field name to a human-readable problem.
    """

    code: str = "VALIDATION_ERROR"

    def __init__(self, message: str, details: dict[str, str] | None = None):
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ContractKernelError):
    """Settings file or environment value is invalid."""

    code: str = "CONFIGURATION_ERROR"

    def __init__(self, key: str, problem: str):
        self.key = key
        self.problem = problem
        super().__init__(f"Invalid configuration for {key}: {problem}")
