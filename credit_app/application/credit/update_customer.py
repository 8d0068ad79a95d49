"""
Use case: Update an existing customer.

Input: UpdateCustomerCommand
Output: CustomerResult
Side effects: Updates the customer row.
Failure cases: CustomerNotFoundError.
"""

import logging
from dataclasses import replace

from credit_app.application.credit.dtos import CustomerResult, UpdateCustomerCommand
from credit_app.application.credit.mappers import to_customer_result
from credit_app.domain.credit.customer_service import CustomerService
from credit_app.domain.credit.entities import Address

logger = logging.getLogger(__name__)


class UpdateCustomerUseCase:
    """Orchestrates a customer update.

    Fetches the existing record, merges the permitted fields into it
    and saves it again under the same id.
    """

    def __init__(self, customer_service: CustomerService) -> None:
        self._customer_service = customer_service

    def execute(self, command: UpdateCustomerCommand) -> CustomerResult:
        """Run the update use case.

        Args:
            command: New names, income and address for the customer.

        Returns:
            The updated customer.

        Raises:
            CustomerNotFoundError: If the customer does not exist.
        """
        logger.info("Updating customer id=%d", command.customer_id)

        existing = self._customer_service.find_by_id(command.customer_id)
        merged = replace(
            existing,
            first_name=command.first_name,
            last_name=command.last_name,
            income=command.income,
            address=Address(zip_code=command.zip_code, street=command.street),
        )
        return to_customer_result(self._customer_service.save(merged))
