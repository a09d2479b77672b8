"""
Module: contract_kernel.models.company
Responsibility: ORM persistence for client companies that buy advertising.
Architecture position: Kernel > Models.  May import from db/base.py only.

Invariants enforced:
    - company_number is unique (uq_company_number).

Failure modes:
    - IntegrityError on duplicate company_number.
"""

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from contract_kernel.db.base import TrackedBase


class Company(TrackedBase):
    """
    Client company, referenced by contracts through its id.

    Name and type may be edited; the company number never changes.
    """

    __tablename__ = "companies"

    __table_args__ = (
        UniqueConstraint("company_number", name="uq_company_number"),
        Index("idx_company_name", "name"),
    )

    company_number: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        doc="External company registration number",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Display name",
    )

    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        doc="Company category (e.g. AGENCY, ADVERTISER)",
    )

    def __repr__(self) -> str:
        return f"<Company {self.company_number}: {self.name}>"
