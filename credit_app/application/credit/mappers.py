"""Entity-to-DTO mapping shared by the credit use cases."""

from credit_app.application.credit.dtos import (
    CreditResult,
    CreditSummaryResult,
    CustomerResult,
)
from credit_app.domain.credit.entities import Credit, Customer


def to_customer_result(customer: Customer) -> CustomerResult:
    return CustomerResult(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        cpf=customer.cpf,
        email=customer.email,
        income=customer.income,
        zip_code=customer.address.zip_code,
        street=customer.address.street,
    )


def to_credit_result(credit: Credit, owner: Customer) -> CreditResult:
    return CreditResult(
        credit_code=credit.credit_code,
        credit_value=credit.credit_value,
        day_first_installment=credit.day_first_installment,
        number_of_installments=credit.number_of_installments,
        status=credit.status.value,
        email_customer=owner.email,
        income_customer=owner.income,
    )


def to_credit_summary(credit: Credit) -> CreditSummaryResult:
    return CreditSummaryResult(
        credit_code=credit.credit_code,
        credit_value=credit.credit_value,
        number_of_installments=credit.number_of_installments,
    )
