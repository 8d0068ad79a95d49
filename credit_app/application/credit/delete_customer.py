"""
Use case: Delete a customer.

Input: DeleteCustomerCommand
Output: None
Side effects: Removes the customer row and the credits it owns.
Failure cases: CustomerNotFoundError.
"""

from credit_app.application.credit.dtos import DeleteCustomerCommand
from credit_app.domain.credit.customer_service import CustomerService


class DeleteCustomerUseCase:
    """Deletes a customer through the CustomerService."""

    def __init__(self, customer_service: CustomerService) -> None:
        self._customer_service = customer_service

    def execute(self, command: DeleteCustomerCommand) -> None:
        self._customer_service.delete(command.customer_id)
