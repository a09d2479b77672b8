"""
Pure domain layer.

This module contains pure data transfer objects and domain logic
with NO dependencies on:
- ORM (SQLAlchemy)
- Database
- Ambient time (the Clock is injected)
- I/O
"""

from contract_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from contract_kernel.domain.dtos import CompanyInfo, ContractInfo, ProductInfo
from contract_kernel.domain.paging import Page, PageRequest
from contract_kernel.domain.policy import DEFAULT_POLICY, ContractPolicy
from contract_kernel.domain.status import (
    TERMINAL_STATUSES,
    ContractStatus,
    derive_status,
    parse_status_list,
)
from contract_kernel.domain.validation import (
    check_amount,
    check_end_date,
    check_start_date,
    require_decimal,
    validate_contract_terms,
)

__all__ = [
    "Clock",
    "CompanyInfo",
    "ContractInfo",
    "ContractPolicy",
    "ContractStatus",
    "DEFAULT_POLICY",
    "DeterministicClock",
    "Page",
    "PageRequest",
    "ProductInfo",
    "SystemClock",
    "TERMINAL_STATUSES",
    "check_amount",
    "check_end_date",
    "check_start_date",
    "derive_status",
    "parse_status_list",
    "require_decimal",
    "validate_contract_terms",
]
