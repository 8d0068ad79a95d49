"""
Centralized error handlers for FastAPI.

Maps credit domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from credit_app.domain.credit.errors import (
    CreditDomainError,
    CreditNotFoundError,
    CreditOwnershipError,
    CustomerNotFoundError,
    InvalidCreditValueError,
    InvalidIncomeError,
    InvalidInstallmentCountError,
    InvalidInstallmentDateError,
    TaxIdAlreadyRegisteredError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(CustomerNotFoundError)
    async def handle_customer_not_found(
        _request: Request, exc: CustomerNotFoundError
    ) -> JSONResponse:
        """Handle missing customer errors."""
        logger.warning("Customer not found: %s", exc.customer_id)
        return _error_response(HTTP_404, "Customer not found", exc.message)

    @app.exception_handler(CreditNotFoundError)
    async def handle_credit_not_found(
        _request: Request, exc: CreditNotFoundError
    ) -> JSONResponse:
        """Handle missing credit errors."""
        logger.warning("Credit not found: %s", exc.credit_code)
        return _error_response(HTTP_404, "Credit not found", exc.message)

    @app.exception_handler(CreditOwnershipError)
    async def handle_credit_ownership(
        _request: Request, exc: CreditOwnershipError
    ) -> JSONResponse:
        """Handle credit lookups by a customer that does not own the credit."""
        logger.warning(
            "Credit %s requested by non-owner customer %s",
            exc.credit_code,
            exc.customer_id,
        )
        return _error_response(HTTP_400, "Credit does not belong to customer")

    @app.exception_handler(InvalidInstallmentDateError)
    async def handle_invalid_installment_date(
        _request: Request, exc: InvalidInstallmentDateError
    ) -> JSONResponse:
        """Handle first installment dates outside the allowed window."""
        logger.warning("Invalid first installment date: %s", exc.day_first_installment)
        return _error_response(HTTP_400, "Invalid first installment date", exc.message)

    @app.exception_handler(InvalidInstallmentCountError)
    async def handle_invalid_installment_count(
        _request: Request, exc: InvalidInstallmentCountError
    ) -> JSONResponse:
        """Handle installment counts outside the allowed range."""
        logger.warning("Invalid number of installments: %d", exc.number_of_installments)
        return _error_response(HTTP_400, "Invalid number of installments", exc.message)

    @app.exception_handler(InvalidCreditValueError)
    async def handle_invalid_credit_value(
        _request: Request, exc: InvalidCreditValueError
    ) -> JSONResponse:
        """Handle non-positive credit values."""
        logger.warning("Invalid credit value")
        return _error_response(HTTP_400, "Invalid credit value", exc.message)

    @app.exception_handler(InvalidIncomeError)
    async def handle_invalid_income(
        _request: Request, exc: InvalidIncomeError
    ) -> JSONResponse:
        """Handle incomes that are negative or finer than cents."""
        logger.warning("Invalid customer income")
        return _error_response(HTTP_400, "Invalid income", exc.message)

    @app.exception_handler(TaxIdAlreadyRegisteredError)
    async def handle_tax_id_conflict(
        _request: Request, exc: TaxIdAlreadyRegisteredError
    ) -> JSONResponse:
        """Handle duplicate CPF registrations."""
        logger.warning("Duplicate CPF registration rejected")
        return _error_response(HTTP_409, "CPF already registered")

    @app.exception_handler(CreditDomainError)
    async def handle_credit_domain(
        _request: Request, exc: CreditDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled credit domain errors."""
        logger.error("Unhandled credit domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
