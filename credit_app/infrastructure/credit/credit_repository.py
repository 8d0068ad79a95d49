"""
Adapter: Credit repository.

Implements CreditRepository port.
Responsible for persisting and retrieving credit applications from the credits table.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine, Row

from credit_app.domain.credit.entities import Credit, CreditStatus
from credit_app.domain.credit.ports import CreditRepository
from credit_app.infrastructure.credit.tables import credits


def _to_entity(row: Row) -> Credit:
    return Credit(
        id=row.id,
        credit_code=UUID(row.credit_code),
        credit_value=Decimal(str(row.credit_value)),
        day_first_installment=row.day_first_installment,
        number_of_installments=row.number_of_installments,
        status=CreditStatus(row.status),
        customer_id=row.customer_id,
    )


class CreditRepositoryAdapter(CreditRepository):
    """Relational implementation of the credit store."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert(self, credit: Credit) -> Credit:
        """Persist a new credit.

        Args:
            credit: Credit entity to insert.

        Returns:
            The same credit with its id set.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(credits).values(
                    credit_code=str(credit.credit_code),
                    credit_value=credit.credit_value,
                    day_first_installment=credit.day_first_installment,
                    number_of_installments=credit.number_of_installments,
                    status=credit.status.value,
                    customer_id=credit.customer_id,
                )
            )
            credit.id = result.inserted_primary_key[0]
        return credit

    def get_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        """Return the customer's credits ordered by creation."""
        query = (
            select(credits)
            .where(credits.c.customer_id == customer_id)
            .order_by(credits.c.id)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_to_entity(row) for row in rows]

    def get_by_code(self, credit_code: UUID) -> Optional[Credit]:
        """Return a credit by its code, or None if not found."""
        with self._engine.connect() as conn:
            row = conn.execute(
                select(credits).where(credits.c.credit_code == str(credit_code))
            ).first()
        return _to_entity(row) if row is not None else None
