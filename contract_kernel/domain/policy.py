"""
Contract policy constants.

The numbers every rule in the kernel is measured against, gathered in one
frozen value so configuration can override them as a unit.
"""

from dataclasses import dataclass
from decimal import Decimal

MIN_CONTRACT_DAYS = 28
MIN_AMOUNT = Decimal("10000")
MAX_AMOUNT = Decimal("1000000")
DUPLICATE_WINDOW_SECONDS = 5
DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 100
COMPANY_SEARCH_LIMIT = 20


@dataclass(frozen=True)
class ContractPolicy:
    """
    Policy limits for contract creation and retrieval.

    Guarantees:
        - Defaults reproduce the production rules: 28-day minimum run,
          amounts in [10,000, 1,000,000], a 5-second duplicate window,
          pages of 5 capped at 100.
    """

    min_contract_days: int = MIN_CONTRACT_DAYS
    min_amount: Decimal = MIN_AMOUNT
    max_amount: Decimal = MAX_AMOUNT
    duplicate_window_seconds: int = DUPLICATE_WINDOW_SECONDS
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = MAX_PAGE_SIZE
    company_search_limit: int = COMPANY_SEARCH_LIMIT

    def __post_init__(self) -> None:
        if self.min_contract_days < 0:
            raise ValueError("min_contract_days must be >= 0")
        if self.min_amount > self.max_amount:
            raise ValueError("min_amount must not exceed max_amount")
        if self.duplicate_window_seconds < 0:
            raise ValueError("duplicate_window_seconds must be >= 0")
        if not 0 < self.default_page_size <= self.max_page_size:
            raise ValueError("default_page_size must be in (0, max_page_size]")
        if self.company_search_limit <= 0:
            raise ValueError("company_search_limit must be > 0")


DEFAULT_POLICY = ContractPolicy()
