"""
Module: contract_kernel.models.contract
Responsibility: ORM persistence for advertising contracts between a client
    company and a product, and the entity-level lifecycle transitions
    (status refresh and cancellation).
Architecture position: Kernel > Models.  May import from db/base.py and the
    pure domain layer only.  MUST NOT import from services/ or selectors/.

Invariants enforced:
    - contract_number is unique (uq_contract_number) and never reassigned.
    - Status refresh never moves a CANCELLED or COMPLETED contract.
    - A COMPLETED contract cannot be cancelled.

Failure modes:
    - IntegrityError on duplicate contract_number (two creations racing on
      the same count-based sequence).
    - InvalidStateError from cancel() on a COMPLETED contract.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Date, Enum as SAEnum, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from contract_kernel.db.base import TrackedBase, UUIDString
from contract_kernel.domain.status import (
    CANCELLABLE_STATUSES,
    ContractStatus,
    derive_status,
)
from contract_kernel.exceptions import InvalidStateError

if TYPE_CHECKING:
    from contract_kernel.models.company import Company
    from contract_kernel.models.product import Product


class Contract(TrackedBase):
    """
    Advertising contract for one product, bought by one company.

    Contract:
        The stored ``status`` is a cache of ``derive_status`` for the day it
        was last refreshed.  Services call ``refresh_status`` with the
        clock's today before exposing a contract.

    Guarantees:
        - end_date >= start_date + minimum run and amount within policy
          (enforced by the service before the entity is built).
        - company and product are references, never copies.
    """

    __tablename__ = "contracts"

    __table_args__ = (
        UniqueConstraint("contract_number", name="uq_contract_number"),
        Index("idx_contract_status", "status"),
        Index("idx_contract_company", "company_id"),
        Index("idx_contract_dates", "start_date", "end_date"),
        Index(
            "idx_contract_duplicate_lookup",
            "company_id",
            "product_id",
            "start_date",
            "end_date",
        ),
    )

    contract_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        doc="Display number, e.g. CNT-20240101-0001",
    )

    company_id: Mapped[UUID] = mapped_column(
        UUIDString(),
        ForeignKey("companies.id"),
        nullable=False,
    )

    company: Mapped["Company"] = relationship(
        "Company",
        foreign_keys=[company_id],
        lazy="joined",
    )

    product_id: Mapped[UUID] = mapped_column(
        UUIDString(),
        ForeignKey("products.id"),
        nullable=False,
    )

    product: Mapped["Product"] = relationship(
        "Product",
        foreign_keys=[product_id],
        lazy="joined",
    )

    start_date: Mapped[date] = mapped_column(Date, nullable=False)

    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    amount: Mapped[Decimal] = mapped_column(
        nullable=False,
        doc="Contract value in whole currency units",
    )

    status: Mapped[ContractStatus] = mapped_column(
        SAEnum(
            ContractStatus,
            name="contract_status",
            native_enum=False,
            length=20,
        ),
        nullable=False,
        default=ContractStatus.PENDING,
    )

    def refresh_status(self, today: date) -> bool:
        """
        Re-derive the status for ``today``.

        Returns:
            True if the status changed (the caller decides whether to
            persist), False otherwise.
        """
        derived = derive_status(self.status, self.start_date, self.end_date, today)
        if derived is self.status:
            return False
        self.status = derived
        return True

    def cancel(self, now: datetime) -> None:
        """
        Cancel the contract.

        Raises:
            InvalidStateError: If the contract is COMPLETED.
        """
        if self.status not in CANCELLABLE_STATUSES:
            raise InvalidStateError(str(self.id), self.status.value, "cancel")
        self.status = ContractStatus.CANCELLED
        self.touch(now)

    def __repr__(self) -> str:
        return f"<Contract {self.contract_number} ({self.status.value})>"
