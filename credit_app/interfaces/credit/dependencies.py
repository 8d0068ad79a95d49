"""
Dependency injection for the credit bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into domain services and use cases via constructor injection.
These are the composition root for the credit context.
"""

from datetime import date
from functools import lru_cache
from typing import Callable

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from credit_app.application.credit.delete_customer import DeleteCustomerUseCase
from credit_app.application.credit.get_credit import GetCreditUseCase
from credit_app.application.credit.get_customer import GetCustomerUseCase
from credit_app.application.credit.list_customer_credits import (
    ListCustomerCreditsUseCase,
)
from credit_app.application.credit.register_customer import RegisterCustomerUseCase
from credit_app.application.credit.request_credit import RequestCreditUseCase
from credit_app.application.credit.update_customer import UpdateCustomerUseCase
from credit_app.core.config import settings
from credit_app.domain.credit.credit_service import CreditService
from credit_app.domain.credit.customer_service import CustomerService
from credit_app.infrastructure.credit.credit_repository import CreditRepositoryAdapter
from credit_app.infrastructure.credit.customer_repository import (
    CustomerRepositoryAdapter,
)


@lru_cache
def get_engine() -> Engine:
    """Build the SQLAlchemy engine once from application settings."""
    return create_engine(settings.get_database_url(), pool_pre_ping=True)


def get_clock() -> Callable[[], date]:
    """Return the clock used for date-based business rules."""
    return date.today


def get_customer_service(engine: Engine = Depends(get_engine)) -> CustomerService:
    """Build CustomerService on top of the customer store."""
    return CustomerService(customer_repo=CustomerRepositoryAdapter(engine=engine))


def get_credit_service(
    engine: Engine = Depends(get_engine),
    customer_service: CustomerService = Depends(get_customer_service),
    clock: Callable[[], date] = Depends(get_clock),
) -> CreditService:
    """Build CreditService with the configured installment policy."""
    return CreditService(
        credit_repo=CreditRepositoryAdapter(engine=engine),
        customer_service=customer_service,
        clock=clock,
        window_months=settings.installment_window_months,
        window_inclusive=settings.installment_window_inclusive,
        max_installments=settings.max_installments,
    )


def get_register_customer_use_case(
    customer_service: CustomerService = Depends(get_customer_service),
) -> RegisterCustomerUseCase:
    return RegisterCustomerUseCase(
        customer_service=customer_service,
        hash_rounds=settings.password_hash_rounds,
    )


def get_customer_use_case(
    customer_service: CustomerService = Depends(get_customer_service),
) -> GetCustomerUseCase:
    return GetCustomerUseCase(customer_service=customer_service)


def get_update_customer_use_case(
    customer_service: CustomerService = Depends(get_customer_service),
) -> UpdateCustomerUseCase:
    return UpdateCustomerUseCase(customer_service=customer_service)


def get_delete_customer_use_case(
    customer_service: CustomerService = Depends(get_customer_service),
) -> DeleteCustomerUseCase:
    return DeleteCustomerUseCase(customer_service=customer_service)


def get_request_credit_use_case(
    credit_service: CreditService = Depends(get_credit_service),
) -> RequestCreditUseCase:
    return RequestCreditUseCase(credit_service=credit_service)


def get_list_customer_credits_use_case(
    credit_service: CreditService = Depends(get_credit_service),
) -> ListCustomerCreditsUseCase:
    return ListCustomerCreditsUseCase(credit_service=credit_service)


def get_credit_use_case(
    credit_service: CreditService = Depends(get_credit_service),
    customer_service: CustomerService = Depends(get_customer_service),
) -> GetCreditUseCase:
    return GetCreditUseCase(
        credit_service=credit_service, customer_service=customer_service
    )
