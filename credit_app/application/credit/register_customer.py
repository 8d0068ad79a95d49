"""
Use case: Register a new customer.

Input: RegisterCustomerCommand
Output: CustomerResult
Side effects: Inserts a customer row.
Failure cases: TaxIdAlreadyRegisteredError.
"""

import logging

from credit_app.application.credit.dtos import CustomerResult, RegisterCustomerCommand
from credit_app.application.credit.mappers import to_customer_result
from credit_app.domain.credit.customer_service import CustomerService
from credit_app.domain.credit.entities import Address, Customer
from credit_app.domain.credit.passwords import DEFAULT_ROUNDS, hash_password
from credit_app.domain.credit.validation import normalize_cpf

logger = logging.getLogger(__name__)


class RegisterCustomerUseCase:
    """Orchestrates customer registration.

    Hashes the password and normalizes the CPF before handing
    the new entity to the CustomerService.
    """

    def __init__(
        self,
        customer_service: CustomerService,
        hash_rounds: int = DEFAULT_ROUNDS,
    ) -> None:
        self._customer_service = customer_service
        self._hash_rounds = hash_rounds

    def execute(self, command: RegisterCustomerCommand) -> CustomerResult:
        """Run the registration use case.

        Args:
            command: Personal data, credential and address of the customer.

        Returns:
            The registered customer with its assigned id.

        Raises:
            TaxIdAlreadyRegisteredError: If the CPF is already registered.
        """
        logger.info("Registering new customer")

        customer = Customer(
            first_name=command.first_name,
            last_name=command.last_name,
            cpf=normalize_cpf(command.cpf),
            email=command.email,
            income=command.income,
            password=hash_password(command.password, self._hash_rounds),
            address=Address(zip_code=command.zip_code, street=command.street),
        )
        return to_customer_result(self._customer_service.save(customer))
