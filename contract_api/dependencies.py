"""FastAPI dependencies: one transactional session per request, plus services."""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from contract_kernel.config import Settings
from contract_kernel.db.engine import session_scope
from contract_kernel.domain.clock import Clock
from contract_kernel.services.company_service import CompanyService
from contract_kernel.services.contract_service import ContractService
from contract_kernel.services.product_service import ProductService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_db_session() -> Generator[Session, None, None]:
    """Commit when the endpoint returns, roll back if it raises."""
    with session_scope() as session:
        yield session


def get_contract_service(
    session: Session = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> ContractService:
    return ContractService(session, clock, settings.policy)


def get_company_service(
    session: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> CompanyService:
    return CompanyService(session, settings.policy)


def get_product_service(
    session: Session = Depends(get_db_session),
) -> ProductService:
    return ProductService(session)
