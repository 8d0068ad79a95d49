"""
Explicit validation rules for credit applications and customer identity.

Pure functions. Each rule raises a typed domain error on failure
and returns nothing on success.
"""

import re
from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from credit_app.domain.credit.errors import (
    InvalidCreditValueError,
    InvalidIncomeError,
    InvalidInstallmentCountError,
    InvalidInstallmentDateError,
)

DEFAULT_WINDOW_MONTHS = 2
DEFAULT_MAX_INSTALLMENTS = 48

# Matches the Numeric(14, 2) money columns.
MONEY_MAX_DIGITS = 14
MONEY_DECIMAL_PLACES = 2

_CENT = Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)
_MONEY_LIMIT = Decimal(10) ** (MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES)

_NON_DIGITS = re.compile(r"\D")


def latest_first_installment(today: date, window_months: int = DEFAULT_WINDOW_MONTHS) -> date:
    """Return the last date of the first-installment window.

    Month arithmetic clamps to the end of shorter months, so
    2023-12-31 plus two months is 2024-02-29.
    """
    return today + relativedelta(months=window_months)


def validate_first_installment_date(
    day_first_installment: date,
    today: date,
    window_months: int = DEFAULT_WINDOW_MONTHS,
    inclusive: bool = True,
) -> None:
    """Check the first installment date is in (today, today + window].

    Args:
        day_first_installment: Requested first installment date.
        today: Reference date for the check.
        window_months: Width of the window in months.
        inclusive: Whether the exact upper bound date is accepted.

    Raises:
        InvalidInstallmentDateError: If the date is outside the window.
    """
    latest = latest_first_installment(today, window_months)
    if day_first_installment <= today:
        raise InvalidInstallmentDateError(day_first_installment, latest)
    if day_first_installment > latest or (
        not inclusive and day_first_installment == latest
    ):
        raise InvalidInstallmentDateError(day_first_installment, latest)


def validate_number_of_installments(
    number_of_installments: int, maximum: int = DEFAULT_MAX_INSTALLMENTS
) -> None:
    """Check the installment count is within [1, maximum]."""
    if not 1 <= number_of_installments <= maximum:
        raise InvalidInstallmentCountError(number_of_installments, maximum)


def is_storable_amount(value: Decimal) -> bool:
    """Return True if the value is stored exactly by a money column.

    Trailing zeros do not count against the scale, so 10.500 is
    accepted while 10.505 is not.
    """
    if not value.is_finite() or abs(value) >= _MONEY_LIMIT:
        return False
    return value.quantize(_CENT) == value


def validate_credit_value(credit_value: Decimal) -> None:
    """Check the requested principal is a positive amount in cents."""
    if not is_storable_amount(credit_value) or credit_value <= 0:
        raise InvalidCreditValueError(credit_value)


def validate_income(income: Decimal) -> None:
    """Check a declared income is a non-negative amount in cents."""
    if not is_storable_amount(income) or income < 0:
        raise InvalidIncomeError(income)


def normalize_cpf(cpf: str) -> str:
    """Strip punctuation from a CPF, keeping only its digits."""
    return _NON_DIGITS.sub("", cpf)


def is_valid_cpf(cpf: str) -> bool:
    """Return True if the CPF has 11 digits and valid check digits.

    Sequences of a single repeated digit pass the checksum but are
    rejected, as the Receita Federal does.
    """
    digits = normalize_cpf(cpf)
    if len(digits) != 11 or digits == digits[0] * 11:
        return False

    numbers = [int(d) for d in digits]
    for position in (9, 10):
        total = sum(
            value * weight
            for value, weight in zip(numbers[:position], range(position + 1, 1, -1))
        )
        check = (total * 10) % 11 % 10
        if check != numbers[position]:
            return False
    return True
