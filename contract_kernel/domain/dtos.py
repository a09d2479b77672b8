"""
Immutable DTOs returned by the kernel's services.

Services never hand ORM entities to callers; they convert to these frozen
dataclasses so nothing outside a session can lazy-load or mutate state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from contract_kernel.domain.status import ContractStatus


@dataclass(frozen=True)
class CompanyInfo:
    """Immutable DTO for company data."""

    id: UUID
    company_number: str
    name: str
    type: str


@dataclass(frozen=True)
class ProductInfo:
    """Immutable DTO for product data."""

    id: UUID
    name: str
    description: str | None


@dataclass(frozen=True)
class ContractInfo:
    """
    Immutable DTO for contract data.

    ``status`` is the value derived for the clock's "today" at the moment
    the DTO was built.
    """

    id: UUID
    contract_number: str
    company: CompanyInfo
    product: ProductInfo
    start_date: date
    end_date: date
    amount: Decimal
    status: ContractStatus
    created_at: datetime
    updated_at: datetime

    @property
    def status_description(self) -> str:
        return self.status.description

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days
