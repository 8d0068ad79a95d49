"""
Domain entities for the credit bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
Relations are explicit foreign keys; there is no lazy loading.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class CreditStatus(Enum):
    """Lifecycle status of a credit application.

    Only IN_PROGRESS is assigned by the service layer. The terminal
    states are reached through external approval processes.
    """

    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer record."""

    zip_code: str
    street: str


@dataclass
class Customer:
    """A person who may submit credit applications.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        cpf: National tax identifier. Unique across all customers.
        email: Contact email.
        income: Declared income. Never negative.
        password: Opaque credential, already hashed by the caller.
        address: Embedded postal address.
        id: Store-assigned identity. None until first persisted.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    password: str
    address: Address
    id: Optional[int] = None


@dataclass
class Credit:
    """A credit application owned by exactly one customer.

    The credit code is generated at construction and is never
    supplied by the caller.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int
    status: CreditStatus = CreditStatus.IN_PROGRESS
    credit_code: UUID = field(default_factory=uuid4)
    id: Optional[int] = None
