"""
Use case: Request a new credit for a customer.

Input: RequestCreditCommand
Output: CreditResult
Side effects: Inserts a credit row in IN_PROGRESS status.
Failure cases: CustomerNotFoundError, InvalidInstallmentDateError,
    InvalidInstallmentCountError, InvalidCreditValueError.
"""

import logging

from credit_app.application.credit.dtos import CreditResult, RequestCreditCommand
from credit_app.application.credit.mappers import to_credit_result
from credit_app.domain.credit.credit_service import CreditService
from credit_app.domain.credit.entities import Credit

logger = logging.getLogger(__name__)


class RequestCreditUseCase:
    """Orchestrates credit creation.

    Delegates every business rule to the CreditService and uses the
    owner it resolved to include contact data in the result.
    """

    def __init__(self, credit_service: CreditService) -> None:
        self._credit_service = credit_service

    def execute(self, command: RequestCreditCommand) -> CreditResult:
        """Run the credit request use case.

        Args:
            command: Owner id, value and installment plan.

        Returns:
            The created credit with its generated code.
        """
        logger.info("Requesting credit for customer id=%d", command.customer_id)

        credit, owner = self._credit_service.save_for_owner(
            Credit(
                credit_value=command.credit_value,
                day_first_installment=command.day_first_installment,
                number_of_installments=command.number_of_installments,
                customer_id=command.customer_id,
            )
        )
        return to_credit_result(credit, owner)
