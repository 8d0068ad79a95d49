"""
Adapter: Customer repository.

Implements CustomerRepository port.
Responsible for persisting and retrieving customers from the customers table.
"""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from credit_app.domain.credit.entities import Address, Customer
from credit_app.domain.credit.errors import (
    CustomerNotFoundError,
    TaxIdAlreadyRegisteredError,
)
from credit_app.domain.credit.ports import CustomerRepository
from credit_app.infrastructure.credit.tables import CPF_CONSTRAINT, credits, customers

logger = logging.getLogger(__name__)

SQLITE_CPF_UNIQUE_MESSAGE = "UNIQUE constraint failed: customers.cpf"


def _to_values(customer: Customer) -> dict:
    return {
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "cpf": customer.cpf,
        "email": customer.email,
        "income": customer.income,
        "password": customer.password,
        "zip_code": customer.address.zip_code,
        "street": customer.address.street,
    }


def _is_cpf_conflict(exc: IntegrityError) -> bool:
    """Return True if the violation is the CPF unique constraint.

    PostgreSQL reports the constraint name. SQLite only names the
    column in its message, prefixed by the kind of constraint.
    """
    diag = getattr(exc.orig, "diag", None)
    if diag is not None:
        return diag.constraint_name == CPF_CONSTRAINT
    return SQLITE_CPF_UNIQUE_MESSAGE in str(exc.orig)


def _to_entity(row: Row) -> Customer:
    return Customer(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        cpf=row.cpf,
        email=row.email,
        income=Decimal(str(row.income)),
        password=row.password,
        address=Address(zip_code=row.zip_code, street=row.street),
    )


class CustomerRepositoryAdapter(CustomerRepository):
    """Relational implementation of the customer store.

    The CPF uniqueness constraint is enforced by the database, so
    concurrent registrations with the same CPF are serialized there.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, customer: Customer) -> Customer:
        """Upsert the customer keyed by id.

        A customer without an id is inserted and receives one from the
        store. A customer with an id updates that row.

        Args:
            customer: Customer entity to persist.

        Returns:
            The persisted customer with its id set.

        Raises:
            CustomerNotFoundError: If the id is set but has no row.
            TaxIdAlreadyRegisteredError: If the CPF is already taken.
        """
        values = _to_values(customer)
        try:
            with self._engine.begin() as conn:
                if customer.id is not None:
                    result = conn.execute(
                        update(customers)
                        .where(customers.c.id == customer.id)
                        .values(**values)
                    )
                    if result.rowcount == 0:
                        raise CustomerNotFoundError(customer.id)
                else:
                    result = conn.execute(insert(customers).values(**values))
                    customer.id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            if not _is_cpf_conflict(exc):
                raise
            logger.warning("Rejected customer write: CPF already registered")
            raise TaxIdAlreadyRegisteredError() from exc
        return customer

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Return a customer by id, or None if not found."""
        with self._engine.connect() as conn:
            row = conn.execute(
                select(customers).where(customers.c.id == customer_id)
            ).first()
        return _to_entity(row) if row is not None else None

    def delete_by_id(self, customer_id: int) -> bool:
        """Delete a customer and its credits in one transaction.

        Returns:
            True if the customer existed.
        """
        with self._engine.begin() as conn:
            conn.execute(delete(credits).where(credits.c.customer_id == customer_id))
            result = conn.execute(
                delete(customers).where(customers.c.id == customer_id)
            )
            deleted = result.rowcount > 0
        return deleted
