"""
Pydantic schemas for credit API request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from credit_app.core.config import settings
from credit_app.domain.credit.passwords import MAX_PASSWORD_BYTES
from credit_app.domain.credit.validation import (
    MONEY_DECIMAL_PLACES,
    MONEY_MAX_DIGITS,
    is_valid_cpf,
    normalize_cpf,
)

NAME_MAX_LEN = 255


class CustomerRequest(BaseModel):
    """Request schema for customer registration.

    Attributes:
        first_name: Given name, non-empty.
        last_name: Family name, non-empty.
        cpf: Brazilian CPF with valid check digits. Punctuation allowed.
        email: Contact email.
        income: Declared income, never negative.
        password: Plain password, hashed before storage.
        zip_code: Address zip code.
        street: Address street line.
    """

    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    cpf: str = Field(..., description="Brazilian national tax identifier")
    email: EmailStr
    income: Decimal = Field(
        ..., ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    password: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1, max_length=20)
    street: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)

    @field_validator("cpf")
    @classmethod
    def cpf_must_be_valid(cls, value: str) -> str:
        if not is_valid_cpf(value):
            raise ValueError("Invalid CPF")
        return normalize_cpf(value)

    @field_validator("password")
    @classmethod
    def password_must_fit_hash(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class CustomerUpdateRequest(BaseModel):
    """Request schema for customer update. CPF and email are immutable."""

    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    income: Decimal = Field(
        ..., ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    zip_code: str = Field(..., min_length=1, max_length=20)
    street: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)


class CustomerResponse(BaseModel):
    """Response schema for a customer. Never includes the password."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    zip_code: str
    street: str


class CreditRequest(BaseModel):
    """Request schema for a credit application.

    The first installment window is checked by the domain, not here,
    so a date outside it is answered with 400 rather than 422.
    """

    credit_value: Decimal = Field(
        ..., gt=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    day_first_installment: date
    number_of_installments: int = Field(..., ge=1, le=settings.max_installments)
    customer_id: int = Field(..., ge=1)


class CreditResponse(BaseModel):
    """Response schema for a single credit with owner contact data."""

    credit_code: UUID
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    status: str
    email_customer: str
    income_customer: Decimal


class CreditSummaryItem(BaseModel):
    """One entry of a customer's credit list."""

    credit_code: UUID
    credit_value: Decimal
    number_of_installments: int


class ErrorResponse(BaseModel):
    """Standard error response. Never exposes internals."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
