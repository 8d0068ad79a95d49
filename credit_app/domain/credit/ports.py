"""
Port interfaces (ABCs) for the credit bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from credit_app.domain.credit.entities import Credit, Customer


class CustomerRepository(ABC):
    """Port for persisting and retrieving customers."""

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Insert the customer when it has no id, otherwise update it.

        Args:
            customer: Customer entity to persist.

        Returns:
            The persisted customer, carrying its store-assigned id.

        Raises:
            CustomerNotFoundError: If the id is set but has no record.
            TaxIdAlreadyRegisteredError: If another customer has the same CPF.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Return a customer by id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, customer_id: int) -> bool:
        """Delete a customer and the credits it owns.

        Returns:
            True if a record was removed, False if none existed.
        """
        raise NotImplementedError


class CreditRepository(ABC):
    """Port for persisting and retrieving credit applications."""

    @abstractmethod
    def insert(self, credit: Credit) -> Credit:
        """Persist a new credit and return it with its store-assigned id."""
        raise NotImplementedError

    @abstractmethod
    def get_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        """Return every credit owned by the customer, oldest first."""
        raise NotImplementedError

    @abstractmethod
    def get_by_code(self, credit_code: UUID) -> Optional[Credit]:
        """Return a credit by its code, or None if absent."""
        raise NotImplementedError
