"""
Use case: Retrieve a single credit on behalf of its owner.

Input: GetCreditQuery (customer_id, credit_code)
Output: CreditResult
Side effects: None.
Failure cases: CreditNotFoundError, CreditOwnershipError.
"""

import logging

from credit_app.application.credit.dtos import CreditResult, GetCreditQuery
from credit_app.application.credit.mappers import to_credit_result
from credit_app.domain.credit.credit_service import CreditService
from credit_app.domain.credit.customer_service import CustomerService

logger = logging.getLogger(__name__)


class GetCreditUseCase:
    """Resolves a credit by code and checks it belongs to the caller."""

    def __init__(
        self,
        credit_service: CreditService,
        customer_service: CustomerService,
    ) -> None:
        self._credit_service = credit_service
        self._customer_service = customer_service

    def execute(self, query: GetCreditQuery) -> CreditResult:
        """Run the credit lookup use case.

        Raises:
            CreditNotFoundError: If no credit has the code.
            CreditOwnershipError: If the credit belongs to another customer.
        """
        logger.info(
            "Retrieving credit code=%s for customer id=%d",
            query.credit_code,
            query.customer_id,
        )

        credit = self._credit_service.find_by_credit_code(
            query.customer_id, query.credit_code
        )
        owner = self._customer_service.find_by_id(credit.customer_id)
        return to_credit_result(credit, owner)
