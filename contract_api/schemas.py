"""
Request and response models for the contract HTTP API.

Field-level shape checks (required fields, types, whole-unit amounts) live
here and fail with VALIDATION_ERROR.  Business rules (date window, amount
range) are NOT repeated here; they belong to the kernel and fail with their
own codes.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from contract_kernel.domain.dtos import CompanyInfo, ContractInfo, ProductInfo
from contract_kernel.domain.paging import Page
from contract_kernel.domain.status import ContractStatus

T = TypeVar("T")


class ContractCreateRequest(BaseModel):
    """Body of ``POST /contracts``."""

    model_config = ConfigDict(extra="forbid")

    company_id: UUID = Field(..., description="Company the contract is for")
    product_id: UUID = Field(..., description="Advertised product")
    start_date: date = Field(..., description="First day of the run")
    end_date: date = Field(..., description="Last day of the run")
    amount: Decimal = Field(
        ...,
        decimal_places=0,
        description="Contract value in whole currency units",
    )


class CompanyResponse(BaseModel):
    id: UUID
    company_number: str
    name: str
    type: str

    @classmethod
    def from_info(cls, info: CompanyInfo) -> "CompanyResponse":
        return cls(
            id=info.id,
            company_number=info.company_number,
            name=info.name,
            type=info.type,
        )


class ProductResponse(BaseModel):
    id: UUID
    name: str
    description: str | None = None

    @classmethod
    def from_info(cls, info: ProductInfo) -> "ProductResponse":
        return cls(id=info.id, name=info.name, description=info.description)


class ContractResponse(BaseModel):
    id: UUID
    contract_number: str
    company: CompanyResponse
    product: ProductResponse
    start_date: date
    end_date: date
    amount: Decimal
    status: ContractStatus
    status_description: str
    created_at: datetime

    @classmethod
    def from_info(cls, info: ContractInfo) -> "ContractResponse":
        return cls(
            id=info.id,
            contract_number=info.contract_number,
            company=CompanyResponse.from_info(info.company),
            product=ProductResponse.from_info(info.product),
            start_date=info.start_date,
            end_date=info.end_date,
            amount=info.amount,
            status=info.status,
            status_description=info.status_description,
            created_at=info.created_at,
        )


class PageResponse(BaseModel, Generic[T]):
    """Paged-result envelope."""

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_page(cls, page: Page[Any]) -> "PageResponse[T]":
        return cls(
            content=list(page.content),
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )


class ErrorResponse(BaseModel):
    """Uniform error body; clients branch on ``code``."""

    code: str
    message: str
    details: dict[str, Any] | None = None
    timestamp: datetime
    status: int


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
