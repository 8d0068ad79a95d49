"""
Use case: List the credits of a customer.

Input: ListCustomerCreditsQuery
Output: list[CreditSummaryResult]
Side effects: None.
Failure cases: None. Unknown customers have no credits.
"""

from credit_app.application.credit.dtos import (
    CreditSummaryResult,
    ListCustomerCreditsQuery,
)
from credit_app.application.credit.mappers import to_credit_summary
from credit_app.domain.credit.credit_service import CreditService


class ListCustomerCreditsUseCase:
    """Lists a customer's credits through the CreditService."""

    def __init__(self, credit_service: CreditService) -> None:
        self._credit_service = credit_service

    def execute(self, query: ListCustomerCreditsQuery) -> list[CreditSummaryResult]:
        credits = self._credit_service.find_all_by_customer(query.customer_id)
        return [to_credit_summary(credit) for credit in credits]
