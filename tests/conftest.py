"""
Shared pytest fixtures for the credit application tests.

Environment overrides are applied before the application package is
imported so the module-level settings pick them up.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from credit_app.domain.credit.entities import Address, Credit, Customer
from credit_app.infrastructure.credit.tables import create_schema
from credit_app.interfaces.credit.dependencies import get_clock, get_engine
from credit_app.main import app

TODAY = date(2023, 7, 25)
VALID_CPF = "70287329836"
OTHER_VALID_CPF = "52998224725"


def build_customer(**overrides) -> Customer:
    """Build an unsaved customer with sensible defaults."""
    values = dict(
        first_name="Wilson",
        last_name="Silva",
        cpf=VALID_CPF,
        email="wilson@email.com",
        income=Decimal("1000.00"),
        password="hashed-password",
        address=Address(zip_code="000000", street="Rua da Wilson, 222"),
    )
    values.update(overrides)
    return Customer(**values)


def build_credit(**overrides) -> Credit:
    """Build an unsaved credit owned by customer 1, inside the window."""
    values = dict(
        credit_value=Decimal("1000.00"),
        day_first_installment=date(2023, 9, 24),
        number_of_installments=15,
        customer_id=1,
    )
    values.update(overrides)
    return Credit(**values)


@pytest.fixture
def engine() -> Engine:
    """In-memory SQLite engine shared across connections, schema created."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine: Engine) -> TestClient:
    """Test client wired to the in-memory engine and a fixed clock."""
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_clock] = lambda: (lambda: TODAY)
    yield TestClient(app)
    app.dependency_overrides.clear()
