"""
Data Transfer Objects for the credit application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class RegisterCustomerCommand:
    """Input DTO for registering a new customer.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        cpf: National tax identifier, digits only.
        email: Contact email.
        income: Declared income.
        password: Plain password. Hashed before it reaches the domain.
        zip_code: Address zip code.
        street: Address street line.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    password: str
    zip_code: str
    street: str


@dataclass(frozen=True)
class GetCustomerQuery:
    """Input DTO for fetching a customer by id."""

    customer_id: int


@dataclass(frozen=True)
class UpdateCustomerCommand:
    """Input DTO for updating the mutable fields of a customer.

    CPF, email and password are not updatable through this command.
    """

    customer_id: int
    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str


@dataclass(frozen=True)
class DeleteCustomerCommand:
    """Input DTO for deleting a customer."""

    customer_id: int


@dataclass(frozen=True)
class CustomerResult:
    """Output DTO for a customer. Never carries the password."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    zip_code: str
    street: str


@dataclass(frozen=True)
class RequestCreditCommand:
    """Input DTO for requesting a new credit.

    Attributes:
        customer_id: Id of the owning customer.
        credit_value: Requested principal.
        day_first_installment: Date of the first installment.
        number_of_installments: Number of monthly installments.
    """

    customer_id: int
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int


@dataclass(frozen=True)
class ListCustomerCreditsQuery:
    """Input DTO for listing the credits of a customer."""

    customer_id: int


@dataclass(frozen=True)
class GetCreditQuery:
    """Input DTO for fetching a single credit on behalf of a customer."""

    customer_id: int
    credit_code: UUID


@dataclass(frozen=True)
class CreditResult:
    """Output DTO for a credit, with owner contact data.

    Attributes:
        credit_code: Generated credit code.
        credit_value: Principal.
        number_of_installments: Number of installments.
        status: Lifecycle status label.
        email_customer: Owner's email.
        income_customer: Owner's declared income.
    """

    credit_code: UUID
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    status: str
    email_customer: str
    income_customer: Decimal


@dataclass(frozen=True)
class CreditSummaryResult:
    """Output DTO for one entry of a customer's credit list."""

    credit_code: UUID
    credit_value: Decimal
    number_of_installments: int
