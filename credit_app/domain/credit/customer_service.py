"""
Domain service: Customer lifecycle.

The sole authority on whether a customer exists. Every operation
that depends on an existing customer goes through find_by_id.
No framework imports. IO only through the CustomerRepository port.
"""

import logging

from credit_app.domain.credit.entities import Customer
from credit_app.domain.credit.errors import CustomerNotFoundError
from credit_app.domain.credit.ports import CustomerRepository
from credit_app.domain.credit.validation import validate_income

logger = logging.getLogger(__name__)


class CustomerService:
    """Creates, retrieves, updates and deletes customers."""

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def save(self, customer: Customer) -> Customer:
        """Persist a new customer, or update an existing one by id.

        A duplicate CPF surfaces as TaxIdAlreadyRegisteredError from
        the repository and is propagated as-is.

        Raises:
            InvalidIncomeError: If the income would not be stored exactly.
            CustomerNotFoundError: If the id is set but has no record.
            TaxIdAlreadyRegisteredError: If the CPF is already taken.
        """
        validate_income(customer.income)
        saved = self._customer_repo.save(customer)
        logger.info("Saved customer id=%s", saved.id)
        return saved

    def find_by_id(self, customer_id: int) -> Customer:
        """Return the customer with the given id.

        Raises:
            CustomerNotFoundError: If no customer has that id.
        """
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def delete(self, customer_id: int) -> None:
        """Delete the customer with the given id.

        Not idempotent: deleting an id twice fails the second time.

        Raises:
            CustomerNotFoundError: If no customer has that id.
        """
        if not self._customer_repo.delete_by_id(customer_id):
            raise CustomerNotFoundError(customer_id)
        logger.info("Deleted customer id=%d", customer_id)
