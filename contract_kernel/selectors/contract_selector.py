"""
ContractSelector -- filtered, sorted, paged contract queries.

Responsibility:
    Translates a structured ``ContractFilter`` into a single SQL query (plus
    a matching COUNT) over contracts joined to their company.  Callers never
    write query syntax.

Architecture position:
    Kernel > Selectors -- read-only.  Used by ContractService.list_contracts
    and by contract number generation for the running count.

Filtering rules:
    - company_name: substring of the company's name.  Case behaviour is the
      database's (PostgreSQL LIKE is case-sensitive; SQLite LIKE folds ASCII
      case).  ``%`` and ``_`` in the input match literally.
    - statuses: matched against the status DERIVED for ``today``, not the
      stored column, so a contract whose stored status is stale is filtered
      by the status it is about to be reported with.
    - start_date/end_date: interval overlap.  A contract matches when
      ``contract.end_date >= start_date`` and ``contract.start_date <=
      end_date``; either bound may be omitted.

Ordering:
    start_date DESC, end_date DESC, created_at DESC, id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import ColumnElement, Select, and_, case, func, literal, select

from contract_kernel.domain.paging import PageRequest
from contract_kernel.domain.status import TERMINAL_STATUSES, ContractStatus
from contract_kernel.logging_config import get_logger
from contract_kernel.models.company import Company
from contract_kernel.models.contract import Contract
from contract_kernel.selectors.base import BaseSelector

logger = get_logger("selectors.contract")


@dataclass(frozen=True)
class ContractFilter:
    """Optional criteria for contract listing; None means "no constraint"."""

    company_name: str | None = None
    statuses: frozenset[ContractStatus] | None = None
    start_date: date | None = None
    end_date: date | None = None

    def __post_init__(self) -> None:
        # Normalize blank text and empty sets to "no filter"
        if self.company_name is not None and not self.company_name.strip():
            object.__setattr__(self, "company_name", None)
        if self.statuses is not None:
            object.__setattr__(
                self, "statuses", frozenset(self.statuses) or None
            )

    @property
    def is_empty(self) -> bool:
        return (
            self.company_name is None
            and self.statuses is None
            and self.start_date is None
            and self.end_date is None
        )


@dataclass(frozen=True)
class ContractQueryResult:
    """One page of contract rows plus the total match count."""

    items: list[Contract] = field(default_factory=list)
    total: int = 0


def derived_status_expression(today: date) -> ColumnElement:
    """
    SQL rendering of ``derive_status`` for ``today``.

    Must stay in lock-step with contract_kernel.domain.status.derive_status.
    """
    status_type = Contract.__table__.c.status.type
    return case(
        (Contract.status.in_(list(TERMINAL_STATUSES)), Contract.status),
        (Contract.start_date > today, literal(ContractStatus.PENDING, status_type)),
        (Contract.end_date < today, literal(ContractStatus.COMPLETED, status_type)),
        else_=literal(ContractStatus.IN_PROGRESS, status_type),
    )


class ContractSelector(BaseSelector[Contract]):
    """Read-only queries over contracts."""

    def _conditions(self, flt: ContractFilter, today: date) -> list[ColumnElement]:
        conds: list[ColumnElement] = []
        if flt.company_name is not None:
            conds.append(Company.name.contains(flt.company_name, autoescape=True))
        if flt.statuses is not None:
            conds.append(
                derived_status_expression(today).in_(list(flt.statuses))
            )
        if flt.start_date is not None:
            conds.append(Contract.end_date >= flt.start_date)
        if flt.end_date is not None:
            conds.append(Contract.start_date <= flt.end_date)
        return conds

    def _filtered(self, stmt: Select, flt: ContractFilter, today: date) -> Select:
        stmt = stmt.join(Company, Contract.company_id == Company.id)
        conds = self._conditions(flt, today)
        if conds:
            stmt = stmt.where(and_(*conds))
        return stmt

    def find_contracts(
        self,
        flt: ContractFilter,
        page: PageRequest,
        today: date,
    ) -> ContractQueryResult:
        """
        Return one page of contracts matching ``flt`` and the total count.

        Args:
            flt: Filter criteria.
            page: Normalized page coordinates.
            today: The date statuses are derived for.
        """
        count_stmt = self._filtered(
            select(func.count(Contract.id)).select_from(Contract), flt, today
        )
        total = self.session.execute(count_stmt).scalar_one()

        items: list[Contract] = []
        if total and page.offset < total:
            stmt = (
                self._filtered(select(Contract), flt, today)
                .order_by(
                    Contract.start_date.desc(),
                    Contract.end_date.desc(),
                    Contract.created_at.desc(),
                    Contract.id,
                )
                .limit(page.size)
                .offset(page.offset)
            )
            items = list(self.session.execute(stmt).unique().scalars())

        logger.debug(
            "contracts_queried",
            extra={
                "filtered": not flt.is_empty,
                "page": page.page,
                "size": page.size,
                "total": total,
                "returned": len(items),
            },
        )
        return ContractQueryResult(items=items, total=total)

    def count(self) -> int:
        """Total number of stored contracts, regardless of status."""
        return self.session.execute(select(func.count(Contract.id))).scalar_one()
