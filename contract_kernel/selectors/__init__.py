"""Read-only query selectors."""

from contract_kernel.selectors.base import BaseSelector
from contract_kernel.selectors.contract_selector import (
    ContractFilter,
    ContractQueryResult,
    ContractSelector,
    derived_status_expression,
)
from contract_kernel.selectors.reference_selector import ReferenceSelector

__all__ = [
    "BaseSelector",
    "ContractFilter",
    "ContractQueryResult",
    "ContractSelector",
    "ReferenceSelector",
    "derived_status_expression",
]
