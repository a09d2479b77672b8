"""
ReferenceSelector -- read access to companies and products.

Companies and products are reference data: the kernel only ever reads them
(resolving contract references, populating pickers and autocomplete).
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from contract_kernel.models.company import Company
from contract_kernel.models.product import Product
from contract_kernel.selectors.base import BaseSelector


class ReferenceSelector(BaseSelector[Company]):
    """Read-only queries over companies and products."""

    def get_company(self, company_id: UUID) -> Company | None:
        return self.session.get(Company, company_id)

    def get_product(self, product_id: UUID) -> Product | None:
        return self.session.get(Product, product_id)

    def list_companies(self) -> list[Company]:
        stmt = select(Company).order_by(Company.name, Company.company_number)
        return list(self.session.execute(stmt).scalars())

    def find_companies_by_name(self, substring: str, limit: int | None = None) -> list[Company]:
        """Companies whose name contains ``substring``, ordered by name."""
        stmt = (
            select(Company)
            .where(Company.name.contains(substring, autoescape=True))
            .order_by(Company.name, Company.company_number)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars())

    def list_products(self) -> list[Product]:
        stmt = select(Product).order_by(Product.name)
        return list(self.session.execute(stmt).scalars())
