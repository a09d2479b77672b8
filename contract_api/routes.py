"""HTTP routes: contracts, companies, products."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from contract_api.dependencies import (
    get_company_service,
    get_contract_service,
    get_product_service,
)
from contract_api.schemas import (
    CompanyResponse,
    ContractCreateRequest,
    ContractResponse,
    PageResponse,
    ProductResponse,
)
from contract_kernel.domain.status import parse_status_list
from contract_kernel.exceptions import InputValidationError
from contract_kernel.selectors.contract_selector import ContractFilter
from contract_kernel.services.company_service import CompanyService
from contract_kernel.services.contract_service import ContractService
from contract_kernel.services.product_service import ProductService

contracts_router = APIRouter(prefix="/contracts", tags=["contracts"])
companies_router = APIRouter(prefix="/companies", tags=["companies"])
products_router = APIRouter(prefix="/products", tags=["products"])


# ====================
# Contracts
# ====================


@contracts_router.post(
    "",
    response_model=ContractResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_contract(
    body: ContractCreateRequest,
    service: ContractService = Depends(get_contract_service),
) -> ContractResponse:
    info = service.create_contract(
        company_id=body.company_id,
        product_id=body.product_id,
        start_date=body.start_date,
        end_date=body.end_date,
        amount=body.amount,
    )
    return ContractResponse.from_info(info)


@contracts_router.get("", response_model=PageResponse[ContractResponse])
def list_contracts(
    company_name: str | None = Query(None, description="Company name contains"),
    statuses: str | None = Query(
        None, description="Comma-separated statuses, e.g. PENDING,IN_PROGRESS"
    ),
    start_date: date | None = Query(None, description="Runs ending on/after"),
    end_date: date | None = Query(None, description="Runs starting on/before"),
    page: int = Query(0, description="Zero-based page number"),
    size: int = Query(5, description="Page size (max 100)"),
    service: ContractService = Depends(get_contract_service),
) -> PageResponse[ContractResponse]:
    try:
        status_list = parse_status_list(statuses)
    except ValueError as exc:
        raise InputValidationError(
            "Invalid status filter", {"statuses": str(exc)}
        ) from None

    flt = ContractFilter(
        company_name=company_name,
        statuses=frozenset(status_list) if status_list else None,
        start_date=start_date,
        end_date=end_date,
    )
    result = service.list_contracts(flt, page=page, size=size)
    return PageResponse[ContractResponse].from_page(
        result.map(ContractResponse.from_info)
    )


@contracts_router.get("/{contract_id}", response_model=ContractResponse)
def get_contract(
    contract_id: UUID,
    service: ContractService = Depends(get_contract_service),
) -> ContractResponse:
    return ContractResponse.from_info(service.get_contract(contract_id))


@contracts_router.post("/{contract_id}/cancel", response_model=ContractResponse)
def cancel_contract(
    contract_id: UUID,
    service: ContractService = Depends(get_contract_service),
) -> ContractResponse:
    return ContractResponse.from_info(service.cancel_contract(contract_id))


# ====================
# Companies
# ====================


@companies_router.get("", response_model=list[CompanyResponse])
def list_companies(
    service: CompanyService = Depends(get_company_service),
) -> list[CompanyResponse]:
    return [CompanyResponse.from_info(c) for c in service.list_companies()]


@companies_router.get("/search", response_model=list[CompanyResponse])
def search_companies(
    keyword: str = Query("", description="Substring of the company name"),
    service: CompanyService = Depends(get_company_service),
) -> list[CompanyResponse]:
    return [CompanyResponse.from_info(c) for c in service.search_companies(keyword)]


@companies_router.get("/{company_id}", response_model=CompanyResponse)
def get_company(
    company_id: UUID,
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    return CompanyResponse.from_info(service.get_company(company_id))


# ====================
# Products
# ====================


@products_router.get("", response_model=list[ProductResponse])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    return [ProductResponse.from_info(p) for p in service.list_products()]


@products_router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return ProductResponse.from_info(service.get_product(product_id))
