"""
Fixtures for HTTP-level tests.

The app shares the per-test engine from the root conftest; requests run in
their own committed transactions, so reference rows are seeded through
``session_scope`` rather than the flush-only ``session`` fixture.
"""

import pytest
from fastapi.testclient import TestClient

from contract_api.app import create_app
from contract_kernel.config import Settings
from contract_kernel.db.engine import session_scope
from contract_kernel.models import Company, Product


@pytest.fixture
def app(db_engine, clock):
    return create_app(
        Settings(database_url=db_engine.url.render_as_string(hide_password=False)),
        clock=clock,
        initialize_database=False,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def refs(db_engine):
    """Committed reference rows; returns their ids as strings."""
    with session_scope() as s:
        blue = Company(company_number="123-45-67890", name="Blue Harbor Media", type="AGENCY")
        north = Company(company_number="234-56-78901", name="Northwind Foods", type="ADVERTISER")
        banner = Product(name="Homepage Banner", description="Top-of-page display banner")
        s.add_all([blue, north, banner])
        s.flush()
        ids = {
            "company_id": str(blue.id),
            "other_company_id": str(north.id),
            "product_id": str(banner.id),
        }
    return ids
