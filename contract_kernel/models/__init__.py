"""ORM models for the contract kernel."""

from contract_kernel.domain.status import ContractStatus
from contract_kernel.models.company import Company
from contract_kernel.models.contract import Contract
from contract_kernel.models.product import Product

__all__ = [
    "Company",
    "Contract",
    "ContractStatus",
    "Product",
]
