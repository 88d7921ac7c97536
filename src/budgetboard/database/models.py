"""SQLAlchemy models for budgetboard database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Float,
    Boolean,
    Enum,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from budgetboard.domain.entities import CategoryType, TransactionStatus

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    category_type = Column(
        Enum(CategoryType, values_callable=lambda e: [m.value for m in e], name="category_type"),
        nullable=False,
    )
    user_id = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    items = relationship("Item", back_populates="category", order_by="Item.id")


class Item(Base):
    """Item model (a line within a category)."""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    is_recurring = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    category = relationship("Category", back_populates="items")
    transactions = relationship("Transaction", back_populates="item")


class Transaction(Base):
    """Monthly transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    amount = Column(Numeric(14, 2), nullable=False, default=0)
    projected_amount = Column(Numeric(14, 2), nullable=True)
    due_date = Column(Date, nullable=False, index=True)
    status = Column(
        Enum(TransactionStatus, name="transaction_status"),
        nullable=False,
        default=TransactionStatus.ESTIMATED,
    )
    is_investment = Column(Boolean, default=False, nullable=False)
    installment_number = Column(Integer, nullable=True)
    total_installments = Column(Integer, nullable=True)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True, onupdate=_utcnow)

    # Relationships
    item = relationship("Item", back_populates="transactions")


class SavingsConfig(Base):
    """Savings allocation rule model."""

    __tablename__ = "savings_configs"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    percentage = Column(Float, nullable=False)
    user_id = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
