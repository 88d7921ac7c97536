"""Mapper functions to convert SQLAlchemy models into domain entities.

Keeping the conversion here means services and the board never see ORM
objects, so lazy loading cannot leak past a closed session.
"""

from budgetboard.domain import entities as domain
from budgetboard.database.models import (
    Category as ORMCategory,
    Item as ORMItem,
    Transaction as ORMTransaction,
    SavingsConfig as ORMSavingsConfig,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        category_type=domain.CategoryType(orm_category.category_type),
        user_id=orm_category.user_id,
        created_at=orm_category.created_at,
    )


def item_to_domain(orm_item: ORMItem) -> domain.Item:
    """Convert SQLAlchemy Item model to domain Item entity."""
    return domain.Item(
        id=orm_item.id,
        name=orm_item.name,
        category_id=orm_item.category_id,
        is_recurring=bool(orm_item.is_recurring),
        created_at=orm_item.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        item_id=orm_transaction.item_id,
        amount=orm_transaction.amount,
        projected_amount=orm_transaction.projected_amount,
        due_date=orm_transaction.due_date,
        status=domain.TransactionStatus(orm_transaction.status),
        installment_number=orm_transaction.installment_number,
        total_installments=orm_transaction.total_installments,
        description=orm_transaction.description,
        is_investment=bool(orm_transaction.is_investment),
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def savings_config_to_domain(orm_config: ORMSavingsConfig) -> domain.SavingsConfig:
    """Convert SQLAlchemy SavingsConfig model to domain SavingsConfig entity."""
    return domain.SavingsConfig(
        id=orm_config.id,
        name=orm_config.name,
        percentage=orm_config.percentage,
        user_id=orm_config.user_id,
        created_at=orm_config.created_at,
    )
