"""
Module: contract_kernel.selectors.base
Responsibility: Abstract base class for all read-only query selectors.
    Selectors form the query side of the kernel: structured read access to
    companies, products and contracts without mutation capability.
Architecture position: Kernel > Selectors.  May import from db/, models/ and
    the pure domain layer.  MUST NOT import from services/.

Invariants enforced:
    - Read-only access: selectors never call session.add(), flush() or
      commit().
    - Session ownership: the caller owns the session and its transaction.
"""

from abc import ABC
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from contract_kernel.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseSelector(ABC, Generic[ModelType]):
    """
    Abstract base class for all selectors.

    Contract:
        Selectors accept a Session from the caller, perform read-only
        queries, and return ORM rows or computed results to the service
        layer (which converts them to DTOs).
    """

    def __init__(self, session: Session):
        self.session = session
