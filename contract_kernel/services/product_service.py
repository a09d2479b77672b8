"""Service layer for Product lookups."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from contract_kernel.domain.dtos import ProductInfo
from contract_kernel.exceptions import ProductNotFoundError
from contract_kernel.models.product import Product
from contract_kernel.selectors.reference_selector import ReferenceSelector
from contract_kernel.services.base import BaseService


def product_to_dto(product: Product) -> ProductInfo:
    """Convert ORM Product to ProductInfo DTO."""
    return ProductInfo(
        id=product.id,
        name=product.name,
        description=product.description,
    )


class ProductService(BaseService[Product]):
    """Read access to advertising products."""

    def __init__(self, session: Session):
        super().__init__(session)
        self._selector = ReferenceSelector(session)

    def list_products(self) -> list[ProductInfo]:
        return [product_to_dto(p) for p in self._selector.list_products()]

    def get_product(self, product_id: UUID) -> ProductInfo:
        product = self._selector.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))
        return product_to_dto(product)
