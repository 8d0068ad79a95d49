"""
Use case: Retrieve a customer by id.

Input: GetCustomerQuery
Output: CustomerResult
Side effects: None.
Failure cases: CustomerNotFoundError.
"""

from credit_app.application.credit.dtos import CustomerResult, GetCustomerQuery
from credit_app.application.credit.mappers import to_customer_result
from credit_app.domain.credit.customer_service import CustomerService


class GetCustomerUseCase:
    """Fetches a single customer through the CustomerService."""

    def __init__(self, customer_service: CustomerService) -> None:
        self._customer_service = customer_service

    def execute(self, query: GetCustomerQuery) -> CustomerResult:
        """Return the customer, or raise CustomerNotFoundError."""
        customer = self._customer_service.find_by_id(query.customer_id)
        return to_customer_result(customer)
