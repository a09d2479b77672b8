"""
Tests for ContractSelector.

The SQL rendering of status derivation must agree with the Python one for
every stored status and every position of "today" relative to the run.
"""

from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from itertools import product as cartesian

from sqlalchemy import select

from contract_kernel.domain.paging import PageRequest
from contract_kernel.domain.status import ContractStatus, derive_status
from contract_kernel.models import Contract
from contract_kernel.selectors.contract_selector import (
    ContractFilter,
    ContractSelector,
    derived_status_expression,
)

TODAY = date(2024, 6, 1)
NOW = datetime(2024, 6, 1, 9, 0, tzinfo=UTC)

# (start offset, end offset) relative to TODAY
WINDOWS = [(1, 30), (0, 30), (-10, 0), (-30, -1), (-30, 10)]


def _seed_grid(session, company, product) -> list[Contract]:
    rows = []
    for n, (status, (start, end)) in enumerate(cartesian(ContractStatus, WINDOWS), 1):
        rows.append(
            Contract(
                contract_number=f"CNT-20240601-{n:04d}",
                company=company,
                product=product,
                start_date=TODAY + timedelta(days=start),
                end_date=TODAY + timedelta(days=end),
                amount=Decimal("100000"),
                status=status,
                created_at=NOW,
                updated_at=NOW,
            )
        )
    session.add_all(rows)
    session.flush()
    return rows


class TestDerivedStatusExpression:

    def test_matches_python_derivation(self, session, company, product):
        rows = _seed_grid(session, company, product)
        expected = {
            c.id: derive_status(c.status, c.start_date, c.end_date, TODAY) for c in rows
        }

        stmt = select(Contract.id, derived_status_expression(TODAY))
        actual = {cid: ContractStatus(status) for cid, status in session.execute(stmt)}

        assert actual == expected

    def test_filter_counts_match(self, session, company, product):
        rows = _seed_grid(session, company, product)
        selector = ContractSelector(session)

        for status in ContractStatus:
            expected = sum(
                1
                for c in rows
                if derive_status(c.status, c.start_date, c.end_date, TODAY) is status
            )
            result = selector.find_contracts(
                ContractFilter(statuses=frozenset({status})),
                PageRequest.of(0, 100),
                TODAY,
            )
            assert result.total == expected, status
            assert len(result.items) == expected


class TestCount:

    def test_count(self, session, company, product):
        selector = ContractSelector(session)
        assert selector.count() == 0
        _seed_grid(session, company, product)
        assert selector.count() == len(ContractStatus) * len(WINDOWS)
