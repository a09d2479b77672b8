#!/usr/bin/env python3
"""
Seed the database with reference companies, products and a few contracts.

Creates missing tables, inserts the companies and products the contract
form selects from, then books sample contracts through ContractService so
numbers, statuses and validation follow the normal path.  Companies and
products already present (matched by company number / product name) are
left untouched, so the script can be re-run.

Usage:
    python3 scripts/seed_data.py [--config settings.yaml] [--no-contracts]
"""

import argparse
import sys
from datetime import timedelta
from decimal import Decimal
from pathlib import Path

from sqlalchemy import select

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from contract_kernel.config import load_settings  # noqa: E402
from contract_kernel.db.engine import (  # noqa: E402
    create_tables,
    init_engine_from_url,
    session_scope,
)
from contract_kernel.exceptions import ContractKernelError  # noqa: E402
from contract_kernel.logging_config import configure_logging  # noqa: E402
from contract_kernel.models import Company, Product  # noqa: E402
from contract_kernel.services.contract_service import ContractService  # noqa: E402

# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------
COMPANIES = [
    ("123-45-67890", "Blue Harbor Media", "AGENCY"),
    ("234-56-78901", "Northwind Foods", "ADVERTISER"),
    ("345-67-89012", "Summit Outdoor Gear", "ADVERTISER"),
    ("456-78-90123", "Brightline Creative", "AGENCY"),
    ("567-89-01234", "Maple Street Bakery", "ADVERTISER"),
]

PRODUCTS = [
    ("Homepage Banner", "Top-of-page display banner on the portal homepage"),
    ("Search Keyword", "Sponsored placement on keyword search results"),
    ("Video Pre-roll", "15-second pre-roll spot before hosted video content"),
    ("Newsletter Slot", None),
]

# (company index, product index, start offset days, duration days, amount)
SAMPLE_CONTRACTS = [
    (0, 0, 0, 30, Decimal("500000")),
    (1, 1, 7, 60, Decimal("120000")),
    (2, 2, 14, 28, Decimal("1000000")),
    (3, 3, 1, 90, Decimal("10000")),
]


def _seed_companies(session) -> list[Company]:
    existing = {
        c.company_number: c for c in session.execute(select(Company)).scalars()
    }
    companies = []
    for number, name, kind in COMPANIES:
        company = existing.get(number)
        if company is None:
            company = Company(company_number=number, name=name, type=kind)
            session.add(company)
        companies.append(company)
    session.flush()
    return companies


def _seed_products(session) -> list[Product]:
    existing = {p.name: p for p in session.execute(select(Product)).scalars()}
    products = []
    for name, description in PRODUCTS:
        product = existing.get(name)
        if product is None:
            product = Product(name=name, description=description)
            session.add(product)
        products.append(product)
    session.flush()
    return products


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument(
        "--no-contracts", action="store_true", help="Seed reference data only"
    )
    args = parser.parse_args()

    settings = load_settings(args.config)
    configure_logging(level=settings.log_level)
    clock = settings.make_clock()

    print()
    print(f"  [1/3] Connecting to {settings.database_url} ...")
    init_engine_from_url(settings.database_url, echo=settings.sql_echo)
    create_tables()

    print("  [2/3] Seeding companies and products...")
    with session_scope() as session:
        companies = _seed_companies(session)
        products = _seed_products(session)
        company_ids = [c.id for c in companies]
        product_ids = [p.id for p in products]
    print(f"        {len(company_ids)} companies, {len(product_ids)} products")

    if args.no_contracts:
        print("  [3/3] Skipping sample contracts.")
        return 0

    print("  [3/3] Booking sample contracts...")
    today = clock.today()
    failures = 0
    for ci, pi, offset, duration, amount in SAMPLE_CONTRACTS:
        start = today + timedelta(days=offset)
        end = start + timedelta(days=duration)
        try:
            with session_scope() as session:
                info = ContractService(session, clock, settings.policy).create_contract(
                    company_ids[ci], product_ids[pi], start, end, amount
                )
        except ContractKernelError as exc:
            failures += 1
            print(f"        FAILED [{exc.code}] {exc}", file=sys.stderr)
            continue
        print(
            f"        {info.contract_number}  {info.company.name:<22} "
            f"{info.product.name:<16} {info.start_date} .. {info.end_date}  "
            f"{info.amount:>10,}  {info.status.value}"
        )

    print()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
