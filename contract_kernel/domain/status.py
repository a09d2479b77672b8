"""
Contract status state machine.

Responsibility:
    Defines the four contract statuses and the pure derivation that maps a
    contract's date window onto a status for a given "today".

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.  The ORM entity
    (models/contract.py) and the listing selector both delegate here so the
    derivation is identical at creation, single read and list time.

Transitions:
    PENDING     -> IN_PROGRESS | CANCELLED
    IN_PROGRESS -> COMPLETED   | CANCELLED
    CANCELLED, COMPLETED: terminal for automatic recomputation.
    Cancellation happens only through an explicit user action and never
    from COMPLETED.
"""

from datetime import date
from enum import Enum


class ContractStatus(str, Enum):
    """Contract lifecycle status."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    @classmethod
    def parse(cls, token: str) -> "ContractStatus":
        """
        Parse a status name such as ``"IN_PROGRESS"``.

        Surrounding whitespace is ignored.  Names are case-sensitive.

        Raises:
            ValueError: If the token is not a known status name.
        """
        name = token.strip()
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown contract status: {name!r}") from None


_DESCRIPTIONS = {
    ContractStatus.PENDING: "Scheduled",
    ContractStatus.IN_PROGRESS: "Running",
    ContractStatus.CANCELLED: "Cancelled",
    ContractStatus.COMPLETED: "Finished",
}

TERMINAL_STATUSES: frozenset[ContractStatus] = frozenset(
    {ContractStatus.CANCELLED, ContractStatus.COMPLETED}
)

CANCELLABLE_STATUSES: frozenset[ContractStatus] = frozenset(
    {ContractStatus.PENDING, ContractStatus.IN_PROGRESS, ContractStatus.CANCELLED}
)


def derive_status(
    current: ContractStatus,
    start_date: date,
    end_date: date,
    today: date,
) -> ContractStatus:
    """
    Recompute a contract's status from its date window.

    Terminal statuses are returned unchanged.  Otherwise the result is
    PENDING before the start date, COMPLETED after the end date, and
    IN_PROGRESS on any day in between (both ends inclusive).
    """
    if current in TERMINAL_STATUSES:
        return current
    if start_date > today:
        return ContractStatus.PENDING
    if end_date < today:
        return ContractStatus.COMPLETED
    return ContractStatus.IN_PROGRESS


def parse_status_list(raw: str | None) -> list[ContractStatus] | None:
    """
    Parse a comma-separated status token list.

    Returns None for a missing or blank value (no filter).  Empty tokens
    between commas are ignored.

    Raises:
        ValueError: If any token is not a known status name; the whole
            list is rejected.
    """
    if raw is None or not raw.strip():
        return None
    return [ContractStatus.parse(token) for token in raw.split(",") if token.strip()]
