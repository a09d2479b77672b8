"""
ContractService -- advertising contract creation, retrieval and cancellation.

Responsibility:
    Orchestrates the contract lifecycle: resolves the referenced company and
    product, suppresses duplicate submissions, validates the proposed terms,
    assigns a contract number, derives the status for today and persists.
    Every read re-derives the status before returning.

Architecture position:
    Kernel > Services -- imperative shell.
    Called by the HTTP boundary (contract_api) and by scripts.

Invariants enforced:
    - Returns frozen ``ContractInfo`` DTOs, never ORM entities.
    - Flush-only: never commits or rolls back the session.
    - Status is re-derived from the injected clock at create, get, list and
      cancel time.  When the derived value differs from the stored one the
      entity is updated and flushed (reads can therefore write).

Failure modes:
    - CompanyNotFoundError / ProductNotFoundError: unknown reference.
    - DuplicateRequestError: identical contract accepted moments ago.
    - InvalidStartDateError / InvalidEndDateError / InvalidAmountError:
      proposed terms break policy.
    - ContractNotFoundError: unknown contract id.
    - InvalidStateError: cancelling a COMPLETED contract.
    - IntegrityError (from flush): two concurrent creations computed the
      same contract number.  The count-based sequence is not safe under
      concurrency; the unique constraint on contract_number is the only
      backstop.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from contract_kernel.domain.clock import Clock
from contract_kernel.domain.dtos import ContractInfo
from contract_kernel.domain.paging import Page, PageRequest
from contract_kernel.domain.policy import DEFAULT_POLICY, ContractPolicy
from contract_kernel.domain.status import ContractStatus
from contract_kernel.domain.validation import require_decimal, validate_contract_terms
from contract_kernel.exceptions import (
    CompanyNotFoundError,
    ContractNotFoundError,
    ContractRuleError,
    DuplicateRequestError,
    ProductNotFoundError,
)
from contract_kernel.logging_config import get_logger
from contract_kernel.models.contract import Contract
from contract_kernel.selectors.contract_selector import ContractFilter, ContractSelector
from contract_kernel.selectors.reference_selector import ReferenceSelector
from contract_kernel.services.base import BaseService
from contract_kernel.services.company_service import company_to_dto
from contract_kernel.services.duplicate_guard import DuplicateGuard
from contract_kernel.services.product_service import product_to_dto

logger = get_logger("services.contract")

CONTRACT_NUMBER_PREFIX = "CNT"


def format_contract_number(creation_date: date, sequence: int) -> str:
    """``CNT-<YYYYMMDD>-<sequence zero-padded to 4 digits>``."""
    return f"{CONTRACT_NUMBER_PREFIX}-{creation_date:%Y%m%d}-{sequence:04d}"


class ContractService(BaseService[Contract]):
    """
    Service for managing advertising contracts.

    Contract:
        Accepts ids as UUIDs and returns frozen ``ContractInfo`` DTOs (or a
        ``Page`` of them).  All "now"/"today" values come from the injected
        Clock.

    Non-goals:
        - Does NOT manage the transaction boundary (caller's responsibility).
        - Does NOT serialize concurrent creations; the duplicate check and
          number sequence are best effort.
    """

    def __init__(
        self,
        session: Session,
        clock: Clock,
        policy: ContractPolicy = DEFAULT_POLICY,
    ):
        super().__init__(session)
        self._clock = clock
        self._policy = policy
        self._contracts = ContractSelector(session)
        self._references = ReferenceSelector(session)
        self._duplicate_guard = DuplicateGuard(
            session, clock, policy.duplicate_window_seconds
        )

    def _to_dto(self, contract: Contract) -> ContractInfo:
        """Convert ORM Contract to ContractInfo DTO."""
        return ContractInfo(
            id=contract.id,
            contract_number=contract.contract_number,
            company=company_to_dto(contract.company),
            product=product_to_dto(contract.product),
            start_date=contract.start_date,
            end_date=contract.end_date,
            amount=contract.amount,
            status=contract.status,
            created_at=contract.created_at,
            updated_at=contract.updated_at,
        )

    def _get_by_id(self, contract_id: UUID) -> Contract:
        """Get contract by ID, raising if not found."""
        contract = self.session.get(Contract, contract_id)
        if contract is None:
            raise ContractNotFoundError(str(contract_id))
        return contract

    def _refresh(self, contract: Contract, today: date) -> None:
        """Re-derive status for today; persist only if it changed."""
        previous = contract.status
        if contract.refresh_status(today):
            contract.touch(self._clock.now_utc())
            self.session.flush()
            logger.info(
                "contract_status_refreshed",
                extra={
                    "contract_id": str(contract.id),
                    "contract_number": contract.contract_number,
                    "from_status": previous.value,
                    "to_status": contract.status.value,
                },
            )

    def _next_contract_number(self, creation_date: date) -> str:
        # Not concurrency safe: two creations can read the same count.
        return format_contract_number(creation_date, self._contracts.count() + 1)

    # =========================================================================
    # Commands
    # =========================================================================

    def create_contract(
        self,
        company_id: UUID,
        product_id: UUID,
        start_date: date,
        end_date: date,
        amount: Decimal,
    ) -> ContractInfo:
        """
        Create a contract after validation.

        Steps, in order: resolve company, resolve product, duplicate check,
        term validation, number assignment, status derivation, flush.

        Raises:
            CompanyNotFoundError: company_id is unknown.
            ProductNotFoundError: product_id is unknown.
            DuplicateRequestError: identical request within the window.
            InvalidStartDateError, InvalidEndDateError, InvalidAmountError:
                terms break policy (first failing rule wins).
        """
        amount = require_decimal(amount)
        logger.info(
            "contract_create_requested",
            extra={
                "company_id": str(company_id),
                "product_id": str(product_id),
                "start_date": start_date,
                "end_date": end_date,
                "amount": amount,
            },
        )

        company = self._references.get_company(company_id)
        if company is None:
            raise CompanyNotFoundError(str(company_id))

        product = self._references.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))

        if self._duplicate_guard.is_duplicate(
            company_id, product_id, start_date, end_date, amount
        ):
            logger.warning(
                "contract_duplicate_rejected",
                extra={
                    "company_id": str(company_id),
                    "product_id": str(product_id),
                    "window_seconds": self._policy.duplicate_window_seconds,
                },
            )
            raise DuplicateRequestError(
                str(company_id),
                str(product_id),
                self._policy.duplicate_window_seconds,
            )

        now = self._clock.now_utc()
        today = self._clock.today()

        try:
            validate_contract_terms(start_date, end_date, amount, today, self._policy)
        except ContractRuleError as exc:
            logger.info(
                "contract_validation_failed",
                extra={"error_code": exc.code, "reason": str(exc)},
            )
            raise

        contract = Contract(
            contract_number=self._next_contract_number(today),
            company=company,
            product=product,
            start_date=start_date,
            end_date=end_date,
            amount=amount,
            status=ContractStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        contract.refresh_status(today)

        self.session.add(contract)
        self.session.flush()

        logger.info(
            "contract_created",
            extra={
                "contract_id": str(contract.id),
                "contract_number": contract.contract_number,
                "status": contract.status.value,
            },
        )
        return self._to_dto(contract)

    def cancel_contract(self, contract_id: UUID) -> ContractInfo:
        """
        Cancel a contract.

        The status is refreshed first, so a contract whose end date has
        already passed is treated as COMPLETED even if not yet stored so.

        Raises:
            ContractNotFoundError: If contract doesn't exist.
            InvalidStateError: If the contract is COMPLETED.
        """
        contract = self._get_by_id(contract_id)
        self._refresh(contract, self._clock.today())
        previous = contract.status

        contract.cancel(self._clock.now_utc())
        self.session.flush()

        logger.info(
            "contract_cancelled",
            extra={
                "contract_id": str(contract.id),
                "contract_number": contract.contract_number,
                "from_status": previous.value,
            },
        )
        return self._to_dto(contract)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_contract(self, contract_id: UUID) -> ContractInfo:
        """
        Get a contract by ID with its status derived for today.

        Raises:
            ContractNotFoundError: If contract doesn't exist.
        """
        contract = self._get_by_id(contract_id)
        self._refresh(contract, self._clock.today())
        return self._to_dto(contract)

    def list_contracts(
        self,
        flt: ContractFilter | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> Page[ContractInfo]:
        """
        List contracts matching ``flt``, newest run first.

        Page and size are normalized (negative page -> 0, non-positive
        size -> default, size capped at the policy maximum).  Every
        returned contract has its status re-derived for today.
        """
        request = PageRequest.of(page, size, self._policy)
        today = self._clock.today()

        result = self._contracts.find_contracts(flt or ContractFilter(), request, today)
        for contract in result.items:
            self._refresh(contract, today)

        return Page.build(
            [self._to_dto(c) for c in result.items], request, result.total
        )
