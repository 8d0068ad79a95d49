"""
FastAPI routers for the credit bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from credit_app.application.credit.delete_customer import DeleteCustomerUseCase
from credit_app.application.credit.dtos import (
    CreditResult,
    CustomerResult,
    DeleteCustomerCommand,
    GetCreditQuery,
    GetCustomerQuery,
    ListCustomerCreditsQuery,
    RegisterCustomerCommand,
    RequestCreditCommand,
    UpdateCustomerCommand,
)
from credit_app.application.credit.get_credit import GetCreditUseCase
from credit_app.application.credit.get_customer import GetCustomerUseCase
from credit_app.application.credit.list_customer_credits import (
    ListCustomerCreditsUseCase,
)
from credit_app.application.credit.register_customer import RegisterCustomerUseCase
from credit_app.application.credit.request_credit import RequestCreditUseCase
from credit_app.application.credit.update_customer import UpdateCustomerUseCase
from credit_app.interfaces.credit.dependencies import (
    get_credit_use_case,
    get_customer_use_case,
    get_delete_customer_use_case,
    get_list_customer_credits_use_case,
    get_register_customer_use_case,
    get_request_credit_use_case,
    get_update_customer_use_case,
)
from credit_app.interfaces.credit.schemas import (
    CreditRequest,
    CreditResponse,
    CreditSummaryItem,
    CustomerRequest,
    CustomerResponse,
    CustomerUpdateRequest,
    ErrorResponse,
)

customer_router = APIRouter(prefix="/customers", tags=["customers"])
credit_router = APIRouter(prefix="/credits", tags=["credits"])


def _customer_response(result: CustomerResult) -> CustomerResponse:
    return CustomerResponse(
        id=result.id,
        first_name=result.first_name,
        last_name=result.last_name,
        cpf=result.cpf,
        email=result.email,
        income=result.income,
        zip_code=result.zip_code,
        street=result.street,
    )


def _credit_response(result: CreditResult) -> CreditResponse:
    return CreditResponse(
        credit_code=result.credit_code,
        credit_value=result.credit_value,
        day_first_installment=result.day_first_installment,
        number_of_installments=result.number_of_installments,
        status=result.status,
        email_customer=result.email_customer,
        income_customer=result.income_customer,
    )


@customer_router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Register a customer",
    description="Create a customer. The CPF must not be registered yet.",
)
def register_customer(
    request: CustomerRequest,
    use_case: RegisterCustomerUseCase = Depends(get_register_customer_use_case),
) -> CustomerResponse:
    """Register a new customer."""
    command = RegisterCustomerCommand(
        first_name=request.first_name,
        last_name=request.last_name,
        cpf=request.cpf,
        email=request.email,
        income=request.income,
        password=request.password,
        zip_code=request.zip_code,
        street=request.street,
    )
    return _customer_response(use_case.execute(command))


@customer_router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a customer",
)
def get_customer(
    customer_id: int,
    use_case: GetCustomerUseCase = Depends(get_customer_use_case),
) -> CustomerResponse:
    """Return a customer by id."""
    return _customer_response(use_case.execute(GetCustomerQuery(customer_id=customer_id)))


@customer_router.patch(
    "",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Update a customer",
    description="Update names, income and address of an existing customer.",
)
def update_customer(
    request: CustomerUpdateRequest,
    customer_id: int = Query(..., ge=1),
    use_case: UpdateCustomerUseCase = Depends(get_update_customer_use_case),
) -> CustomerResponse:
    """Update an existing customer."""
    command = UpdateCustomerCommand(
        customer_id=customer_id,
        first_name=request.first_name,
        last_name=request.last_name,
        income=request.income,
        zip_code=request.zip_code,
        street=request.street,
    )
    return _customer_response(use_case.execute(command))


@customer_router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a customer",
    description="Delete a customer together with its credits.",
)
def delete_customer(
    customer_id: int,
    use_case: DeleteCustomerUseCase = Depends(get_delete_customer_use_case),
) -> Response:
    """Delete a customer by id."""
    use_case.execute(DeleteCustomerCommand(customer_id=customer_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@credit_router.post(
    "",
    response_model=CreditResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Request a credit",
    description="Create a credit application in IN_PROGRESS status.",
)
def request_credit(
    request: CreditRequest,
    use_case: RequestCreditUseCase = Depends(get_request_credit_use_case),
) -> CreditResponse:
    """Request a new credit for an existing customer."""
    command = RequestCreditCommand(
        customer_id=request.customer_id,
        credit_value=request.credit_value,
        day_first_installment=request.day_first_installment,
        number_of_installments=request.number_of_installments,
    )
    return _credit_response(use_case.execute(command))


@credit_router.get(
    "",
    response_model=list[CreditSummaryItem],
    summary="List a customer's credits",
    description="Unknown customers yield an empty list.",
)
def list_customer_credits(
    customer_id: int = Query(...),
    use_case: ListCustomerCreditsUseCase = Depends(get_list_customer_credits_use_case),
) -> list[CreditSummaryItem]:
    """List every credit owned by the customer."""
    results = use_case.execute(ListCustomerCreditsQuery(customer_id=customer_id))
    return [
        CreditSummaryItem(
            credit_code=r.credit_code,
            credit_value=r.credit_value,
            number_of_installments=r.number_of_installments,
        )
        for r in results
    ]


@credit_router.get(
    "/{credit_code}",
    response_model=CreditResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a credit",
    description="Return a credit if it belongs to the given customer.",
)
def get_credit(
    credit_code: UUID,
    customer_id: int = Query(...),
    use_case: GetCreditUseCase = Depends(get_credit_use_case),
) -> CreditResponse:
    """Return a single credit on behalf of its owner."""
    query = GetCreditQuery(customer_id=customer_id, credit_code=credit_code)
    return _credit_response(use_case.execute(query))
