"""Kernel services (flush-only, caller owns the transaction)."""

from contract_kernel.services.base import BaseService
from contract_kernel.services.company_service import CompanyService
from contract_kernel.services.contract_service import (
    ContractService,
    format_contract_number,
)
from contract_kernel.services.duplicate_guard import DuplicateGuard
from contract_kernel.services.product_service import ProductService

__all__ = [
    "BaseService",
    "CompanyService",
    "ContractService",
    "DuplicateGuard",
    "ProductService",
    "format_contract_number",
]
