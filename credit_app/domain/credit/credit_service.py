"""
Domain service: Credit applications.

Holds the business rules gating credit creation and lookup:
    - A credit always has an existing owner
    - The first installment falls in (today, today + N months]
    - The installment count is within [1, max_installments]
    - The credit value is a positive amount in cents
    - A credit is only returned to the customer that owns it

No framework imports. IO only through ports and CustomerService.
"""

import logging
from dataclasses import replace
from datetime import date
from typing import Callable
from uuid import UUID, uuid4

from credit_app.domain.credit.customer_service import CustomerService
from credit_app.domain.credit.entities import Credit, CreditStatus, Customer
from credit_app.domain.credit.errors import CreditNotFoundError, CreditOwnershipError
from credit_app.domain.credit.ports import CreditRepository
from credit_app.domain.credit.validation import (
    DEFAULT_MAX_INSTALLMENTS,
    DEFAULT_WINDOW_MONTHS,
    validate_credit_value,
    validate_first_installment_date,
    validate_number_of_installments,
)

logger = logging.getLogger(__name__)


class CreditService:
    """Creates credit applications and resolves them for their owners."""

    def __init__(
        self,
        credit_repo: CreditRepository,
        customer_service: CustomerService,
        clock: Callable[[], date] = date.today,
        window_months: int = DEFAULT_WINDOW_MONTHS,
        window_inclusive: bool = True,
        max_installments: int = DEFAULT_MAX_INSTALLMENTS,
    ) -> None:
        """Initialize the credit service.

        Args:
            credit_repo: Credit store port.
            customer_service: Used to resolve the owning customer.
            clock: Returns the current date.
            window_months: Months after today the first installment may fall.
            window_inclusive: Whether the exact last day of the window is allowed.
            max_installments: Upper bound on the number of installments.
        """
        self._credit_repo = credit_repo
        self._customer_service = customer_service
        self._clock = clock
        self._window_months = window_months
        self._window_inclusive = window_inclusive
        self._max_installments = max_installments

    def save(self, credit: Credit) -> Credit:
        """Validate and persist a new credit application.

        Args:
            credit: The credit to create. Left untouched; the persisted
                copy gets its own status and code.

        Returns:
            The persisted credit, IN_PROGRESS with a fresh code.

        Raises:
            CustomerNotFoundError: If the owner does not exist.
            InvalidInstallmentDateError: If the first installment is outside the window.
            InvalidInstallmentCountError: If the installment count is out of range.
            InvalidCreditValueError: If the credit value is not a positive amount in cents.
        """
        saved, _owner = self.save_for_owner(credit)
        return saved

    def save_for_owner(self, credit: Credit) -> tuple[Credit, Customer]:
        """Same as save, also returning the owner resolved on the way.

        Lets callers that need owner data avoid a second lookup.
        """
        owner = self._customer_service.find_by_id(credit.customer_id)

        validate_first_installment_date(
            credit.day_first_installment,
            today=self._clock(),
            window_months=self._window_months,
            inclusive=self._window_inclusive,
        )
        validate_number_of_installments(
            credit.number_of_installments, maximum=self._max_installments
        )
        validate_credit_value(credit.credit_value)

        saved = self._credit_repo.insert(
            replace(credit, status=CreditStatus.IN_PROGRESS, credit_code=uuid4())
        )

        logger.info(
            "Created credit code=%s for customer id=%d",
            saved.credit_code,
            saved.customer_id,
        )
        return saved, owner

    def find_all_by_customer(self, customer_id: int) -> list[Credit]:
        """Return all credits owned by the customer.

        The customer's existence is not checked: an unknown id yields
        an empty list.
        """
        return self._credit_repo.get_all_by_customer_id(customer_id)

    def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        """Return the credit with the given code if the customer owns it.

        Raises:
            CreditNotFoundError: If no credit has that code.
            CreditOwnershipError: If the credit belongs to another customer.
        """
        credit = self._credit_repo.get_by_code(credit_code)
        if credit is None:
            raise CreditNotFoundError(credit_code)
        if credit.customer_id != customer_id:
            raise CreditOwnershipError(credit_code, customer_id)
        return credit
