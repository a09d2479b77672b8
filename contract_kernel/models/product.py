"""ORM persistence for advertising products."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contract_kernel.db.base import TrackedBase


class Product(TrackedBase):
    """Advertising product a contract is sold for."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Product {self.name}>"
