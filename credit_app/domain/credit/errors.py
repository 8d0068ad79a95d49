"""
Domain-specific errors for the credit bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID


class CreditDomainError(Exception):
    """Base error for all credit domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(CreditDomainError):
    """Raised when a requested entity has no record."""


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when no customer exists for the given id."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id


class CreditNotFoundError(EntityNotFoundError):
    """Raised when no credit exists for the given code."""

    def __init__(self, credit_code: UUID) -> None:
        super().__init__(f"Credit not found: {credit_code}")
        self.credit_code = credit_code


class InvalidInstallmentDateError(CreditDomainError):
    """Raised when the first installment date falls outside the allowed window."""

    def __init__(self, day_first_installment: date, latest_allowed: date) -> None:
        super().__init__(
            f"Invalid first installment date: {day_first_installment.isoformat()}. "
            f"Must be after today and no later than {latest_allowed.isoformat()}."
        )
        self.day_first_installment = day_first_installment
        self.latest_allowed = latest_allowed


class InvalidInstallmentCountError(CreditDomainError):
    """Raised when the number of installments is outside the allowed range."""

    def __init__(self, number_of_installments: int, maximum: int) -> None:
        super().__init__(
            f"Invalid number of installments: {number_of_installments}. "
            f"Must be between 1 and {maximum}."
        )
        self.number_of_installments = number_of_installments
        self.maximum = maximum


class InvalidCreditValueError(CreditDomainError):
    """Raised when the requested credit value is not a positive amount in cents."""

    def __init__(self, credit_value: Decimal) -> None:
        super().__init__(
            f"Invalid credit value: {credit_value}. Must be greater than zero, "
            "with at most 12 integer digits and 2 decimal places."
        )
        self.credit_value = credit_value


class InvalidIncomeError(CreditDomainError):
    """Raised when a declared income is negative or not an amount in cents."""

    def __init__(self, income: Decimal) -> None:
        super().__init__(
            "Invalid income. Must not be negative, "
            "with at most 12 integer digits and 2 decimal places."
        )
        self.income = income


class CreditOwnershipError(CreditDomainError):
    """Raised when a credit exists but belongs to a different customer."""

    def __init__(self, credit_code: UUID, customer_id: int) -> None:
        super().__init__(
            f"Credit {credit_code} does not belong to customer {customer_id}"
        )
        self.credit_code = credit_code
        self.customer_id = customer_id


class TaxIdAlreadyRegisteredError(CreditDomainError):
    """Raised by the customer store when a CPF is already registered.

    The CPF itself is not kept on the error so it never reaches logs.
    """

    def __init__(self) -> None:
        super().__init__("A customer with this CPF is already registered")
