"""
SQLAlchemy table definitions for the credit bounded context.

Customers embed their address as plain columns. Credits reference
their owner through a foreign key; deleting a customer removes its
credits in the same transaction (see CustomerRepositoryAdapter).
"""

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

CPF_CONSTRAINT = "uix_customers_cpf"

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("cpf", String(11), nullable=False),
    Column("email", String(255), nullable=False),
    Column("income", Numeric(14, 2), nullable=False),
    Column("password", String(255), nullable=False),
    Column("zip_code", String(20), nullable=False),
    Column("street", String(255), nullable=False),
    UniqueConstraint("cpf", name=CPF_CONSTRAINT),
)

credits = Table(
    "credits",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("credit_code", String(36), nullable=False, unique=True),
    Column("credit_value", Numeric(14, 2), nullable=False),
    Column("day_first_installment", Date, nullable=False),
    Column("number_of_installments", Integer, nullable=False),
    Column("status", String(20), nullable=False),
    Column(
        "customer_id",
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
)


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    metadata.create_all(engine)
