"""
Tests for the credit domain services.

CustomerService and CreditService run against mocked ports.
Each test verifies a business rule and the store calls it implies.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, create_autospec
from uuid import uuid4

import pytest

from credit_app.domain.credit.credit_service import CreditService
from credit_app.domain.credit.customer_service import CustomerService
from credit_app.domain.credit.entities import CreditStatus
from credit_app.domain.credit.errors import (
    CreditNotFoundError,
    CreditOwnershipError,
    CustomerNotFoundError,
    InvalidCreditValueError,
    InvalidIncomeError,
    InvalidInstallmentCountError,
    InvalidInstallmentDateError,
    TaxIdAlreadyRegisteredError,
)
from credit_app.domain.credit.ports import CreditRepository, CustomerRepository
from tests.conftest import TODAY, build_credit, build_customer


@pytest.fixture
def customer_repo() -> MagicMock:
    return create_autospec(CustomerRepository, instance=True)


@pytest.fixture
def credit_repo() -> MagicMock:
    repo = create_autospec(CreditRepository, instance=True)
    repo.insert.side_effect = lambda credit: credit
    return repo


@pytest.fixture
def customer_service(customer_repo: MagicMock) -> CustomerService:
    return CustomerService(customer_repo=customer_repo)


@pytest.fixture
def credit_service(
    credit_repo: MagicMock, customer_service: CustomerService
) -> CreditService:
    return CreditService(
        credit_repo=credit_repo,
        customer_service=customer_service,
        clock=lambda: TODAY,
    )


class TestCustomerService:
    """Tests for CustomerService."""

    def test_save_delegates_to_repository(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer = build_customer()
        customer_repo.save.return_value = build_customer(id=1)

        saved = customer_service.save(customer)

        customer_repo.save.assert_called_once_with(customer)
        assert saved.id == 1

    def test_save_propagates_uniqueness_violation(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer_repo.save.side_effect = TaxIdAlreadyRegisteredError()

        with pytest.raises(TaxIdAlreadyRegisteredError):
            customer_service.save(build_customer())

    @pytest.mark.parametrize("income", [Decimal("-1.00"), Decimal("1234.567")])
    def test_save_rejects_income_not_stored_exactly(
        self,
        customer_service: CustomerService,
        customer_repo: MagicMock,
        income: Decimal,
    ) -> None:
        with pytest.raises(InvalidIncomeError):
            customer_service.save(build_customer(income=income))
        customer_repo.save.assert_not_called()

    def test_find_by_id_returns_customer(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer = build_customer(id=1)
        customer_repo.get_by_id.return_value = customer

        assert customer_service.find_by_id(1) is customer
        customer_repo.get_by_id.assert_called_once_with(1)

    def test_find_by_id_raises_when_absent(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFoundError) as exc_info:
            customer_service.find_by_id(99)
        assert exc_info.value.customer_id == 99

    def test_delete_existing_customer(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer_repo.delete_by_id.return_value = True

        customer_service.delete(1)

        customer_repo.delete_by_id.assert_called_once_with(1)

    def test_delete_missing_customer_raises(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer_repo.delete_by_id.return_value = False

        with pytest.raises(CustomerNotFoundError):
            customer_service.delete(2)

    def test_second_delete_fails(
        self, customer_service: CustomerService, customer_repo: MagicMock
    ) -> None:
        customer_repo.delete_by_id.side_effect = [True, False]

        customer_service.delete(1)
        with pytest.raises(CustomerNotFoundError):
            customer_service.delete(1)


class TestCreditServiceSave:
    """Tests for CreditService.save."""

    def test_creates_credit_for_existing_customer(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)
        credit = build_credit()

        saved = credit_service.save(credit)

        customer_repo.get_by_id.assert_called_once_with(1)
        credit_repo.insert.assert_called_once()
        assert saved.credit_value == credit.credit_value
        assert saved.day_first_installment == credit.day_first_installment
        assert saved.customer_id == 1
        assert saved.status is CreditStatus.IN_PROGRESS

    def test_caller_credit_is_untouched_when_store_fails(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)
        credit_repo.insert.side_effect = RuntimeError("store down")
        supplied_code = uuid4()
        credit = build_credit(credit_code=supplied_code, status=CreditStatus.APPROVED)

        with pytest.raises(RuntimeError):
            credit_service.save(credit)

        assert credit.credit_code == supplied_code
        assert credit.status is CreditStatus.APPROVED

    def test_save_for_owner_resolves_owner_once(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
    ) -> None:
        owner = build_customer(id=1)
        customer_repo.get_by_id.return_value = owner

        saved, resolved = credit_service.save_for_owner(build_credit())

        assert resolved is owner
        assert saved.customer_id == owner.id
        customer_repo.get_by_id.assert_called_once_with(1)

    def test_assigns_fresh_code_and_resets_status(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)
        supplied_code = uuid4()
        credit = build_credit(credit_code=supplied_code, status=CreditStatus.APPROVED)

        saved = credit_service.save(credit)

        assert saved.credit_code != supplied_code
        assert saved.status is CreditStatus.IN_PROGRESS

    def test_unknown_customer_propagates_not_found(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFoundError):
            credit_service.save(build_credit(customer_id=2))
        credit_repo.insert.assert_not_called()

    @pytest.mark.parametrize(
        "day_first_installment",
        [date(2023, 7, 25), date(2023, 7, 1), date(2023, 10, 25), date(2023, 12, 25)],
    )
    def test_date_outside_window_is_not_persisted(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
        day_first_installment: date,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)

        with pytest.raises(InvalidInstallmentDateError):
            credit_service.save(build_credit(day_first_installment=day_first_installment))
        credit_repo.insert.assert_not_called()

    def test_customer_resolved_before_date_check(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFoundError):
            credit_service.save(build_credit(day_first_installment=date(2024, 1, 1)))

    def test_exclusive_window_rejects_exact_bound(
        self,
        credit_repo: MagicMock,
        customer_service: CustomerService,
        customer_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)
        service = CreditService(
            credit_repo=credit_repo,
            customer_service=customer_service,
            clock=lambda: TODAY,
            window_inclusive=False,
        )

        with pytest.raises(InvalidInstallmentDateError):
            service.save(build_credit(day_first_installment=date(2023, 9, 25)))

    @pytest.mark.parametrize("count", [0, 49])
    def test_installment_count_out_of_range_is_not_persisted(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
        count: int,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)

        with pytest.raises(InvalidInstallmentCountError):
            credit_service.save(build_credit(number_of_installments=count))
        credit_repo.insert.assert_not_called()

    def test_non_positive_value_is_not_persisted(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)

        with pytest.raises(InvalidCreditValueError):
            credit_service.save(build_credit(credit_value=Decimal("0")))
        credit_repo.insert.assert_not_called()

    @pytest.mark.parametrize("value", [Decimal("0.001"), Decimal("1500.125")])
    def test_value_finer_than_cents_is_not_persisted(
        self,
        credit_service: CreditService,
        customer_repo: MagicMock,
        credit_repo: MagicMock,
        value: Decimal,
    ) -> None:
        customer_repo.get_by_id.return_value = build_customer(id=1)

        with pytest.raises(InvalidCreditValueError):
            credit_service.save(build_credit(credit_value=value))
        credit_repo.insert.assert_not_called()


class TestCreditServiceLookup:
    """Tests for CreditService lookups."""

    def test_find_all_by_customer_returns_repository_list(
        self, credit_service: CreditService, credit_repo: MagicMock
    ) -> None:
        expected = [build_credit(), build_credit(), build_credit()]
        credit_repo.get_all_by_customer_id.return_value = expected

        assert credit_service.find_all_by_customer(1) is expected
        credit_repo.get_all_by_customer_id.assert_called_once_with(1)

    def test_find_all_for_unknown_customer_is_empty(
        self,
        credit_service: CreditService,
        credit_repo: MagicMock,
        customer_repo: MagicMock,
    ) -> None:
        credit_repo.get_all_by_customer_id.return_value = []

        assert credit_service.find_all_by_customer(2) == []
        customer_repo.get_by_id.assert_not_called()

    def test_find_by_credit_code_for_owner(
        self, credit_service: CreditService, credit_repo: MagicMock
    ) -> None:
        credit = build_credit(customer_id=1)
        credit_repo.get_by_code.return_value = credit

        assert credit_service.find_by_credit_code(1, credit.credit_code) is credit
        credit_repo.get_by_code.assert_called_once_with(credit.credit_code)

    def test_find_by_credit_code_unknown_code(
        self, credit_service: CreditService, credit_repo: MagicMock
    ) -> None:
        code = uuid4()
        credit_repo.get_by_code.return_value = None

        with pytest.raises(CreditNotFoundError) as exc_info:
            credit_service.find_by_credit_code(1, code)
        assert exc_info.value.credit_code == code

    def test_find_by_credit_code_other_owner(
        self, credit_service: CreditService, credit_repo: MagicMock
    ) -> None:
        credit = build_credit(customer_id=2)
        credit_repo.get_by_code.return_value = credit

        with pytest.raises(CreditOwnershipError) as exc_info:
            credit_service.find_by_credit_code(1, credit.credit_code)
        assert exc_info.value.customer_id == 1
