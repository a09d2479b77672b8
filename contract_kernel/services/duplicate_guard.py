"""
DuplicateGuard -- suppress accidental double submission of a contract.

Responsibility:
    Decides whether a contract request repeats one that was accepted a few
    seconds ago: same company, same product, same start and end dates and
    exactly the same amount, created within the duplicate window.

Architecture position:
    Kernel > Services -- read-only helper used by ContractService before it
    validates and inserts.

Limitations:
    Best effort only.  The lookup and the later INSERT are separate
    statements with no lock in between, so two identical requests that
    arrive together can both pass the lookup and both be inserted.  There is
    no storage-level constraint on the duplicate key.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from contract_kernel.domain.clock import Clock
from contract_kernel.domain.policy import DUPLICATE_WINDOW_SECONDS
from contract_kernel.models.contract import Contract


class DuplicateGuard:
    """
    Look up an identical contract created within ``window_seconds``.

    Amount equality is exact Decimal equality (``100000`` equals
    ``100000.00``; nothing is rounded).
    """

    def __init__(
        self,
        session: Session,
        clock: Clock,
        window_seconds: int = DUPLICATE_WINDOW_SECONDS,
    ):
        self.session = session
        self._clock = clock
        self._window = timedelta(seconds=window_seconds)

    def find_recent_duplicate(
        self,
        company_id: UUID,
        product_id: UUID,
        start_date: date,
        end_date: date,
        amount: Decimal,
    ) -> Contract | None:
        """Return the matching recent contract, or None."""
        cutoff = self._clock.now_utc() - self._window
        stmt = (
            select(Contract)
            .where(
                Contract.company_id == company_id,
                Contract.product_id == product_id,
                Contract.start_date == start_date,
                Contract.end_date == end_date,
                Contract.amount == amount,
                Contract.created_at > cutoff,
            )
            .order_by(Contract.created_at.desc())
            .limit(1)
        )
        return self.session.execute(stmt).unique().scalars().first()

    def is_duplicate(
        self,
        company_id: UUID,
        product_id: UUID,
        start_date: date,
        end_date: date,
        amount: Decimal,
    ) -> bool:
        return (
            self.find_recent_duplicate(
                company_id, product_id, start_date, end_date, amount
            )
            is not None
        )
