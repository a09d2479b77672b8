"""
Service layer for Company lookups.

Companies are read-only reference data for the kernel: list, search by
name (autocomplete), and fetch by id.  Returns CompanyInfo DTOs.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from contract_kernel.domain.dtos import CompanyInfo
from contract_kernel.domain.policy import DEFAULT_POLICY, ContractPolicy
from contract_kernel.exceptions import CompanyNotFoundError
from contract_kernel.logging_config import get_logger
from contract_kernel.models.company import Company
from contract_kernel.selectors.reference_selector import ReferenceSelector
from contract_kernel.services.base import BaseService

logger = get_logger("services.company")


def company_to_dto(company: Company) -> CompanyInfo:
    """Convert ORM Company to CompanyInfo DTO."""
    return CompanyInfo(
        id=company.id,
        company_number=company.company_number,
        name=company.name,
        type=company.type,
    )


class CompanyService(BaseService[Company]):
    """Read access to client companies."""

    def __init__(self, session: Session, policy: ContractPolicy = DEFAULT_POLICY):
        super().__init__(session)
        self._policy = policy
        self._selector = ReferenceSelector(session)

    def list_companies(self) -> list[CompanyInfo]:
        return [company_to_dto(c) for c in self._selector.list_companies()]

    def search_companies(self, keyword: str | None) -> list[CompanyInfo]:
        """
        Autocomplete search on company name.

        A missing or blank keyword returns no results rather than every
        company.  At most ``policy.company_search_limit`` matches are
        returned.
        """
        if keyword is None or not keyword.strip():
            return []
        keyword = keyword.strip()
        companies = self._selector.find_companies_by_name(
            keyword, limit=self._policy.company_search_limit
        )
        logger.debug(
            "company_search",
            extra={"keyword": keyword, "count": len(companies)},
        )
        return [company_to_dto(c) for c in companies]

    def get_company(self, company_id: UUID) -> CompanyInfo:
        """
        Raises:
            CompanyNotFoundError: If the company doesn't exist.
        """
        company = self._selector.get_company(company_id)
        if company is None:
            raise CompanyNotFoundError(str(company_id))
        return company_to_dto(company)
