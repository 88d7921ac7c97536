"""Domain model entities for budgetboard.

These are pure data classes representing business concepts, independent of
the database schema. The board tree types nest them the way the board query
returns them: categories, their items, and the items' transactions.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class CategoryType(str, Enum):
    """Kind of money flow a category tracks."""

    INCOME = "income"
    EXPENSE = "expense"
    SAVINGS = "savings"


class TransactionStatus(str, Enum):
    """Lifecycle status of a monthly transaction.

    ESTIMATED is the entry state. Any status may change to any other.
    """

    PENDING = "PENDING"
    ESTIMATED = "ESTIMATED"
    CONFIRMED = "CONFIRMED"
    PAID = "PAID"


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    name: str
    category_type: CategoryType
    user_id: str
    created_at: datetime


@dataclass(frozen=True)
class Item:
    """Item domain entity, a line within a category."""

    id: int
    name: str
    category_id: int
    is_recurring: bool
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity for one item in one month."""

    id: int
    item_id: int
    amount: Decimal
    projected_amount: Optional[Decimal]
    due_date: date
    status: TransactionStatus
    installment_number: Optional[int]
    total_installments: Optional[int]
    description: Optional[str]
    is_investment: bool
    created_at: datetime
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class SavingsConfig:
    """Savings allocation rule (percentage stored as a fraction)."""

    id: int
    name: str
    percentage: float
    user_id: str
    created_at: datetime


@dataclass(frozen=True)
class CategoryWithItems:
    """Category together with all of its items."""

    category: Category
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class TransactionDetail:
    """Transaction joined with its item and the item's category."""

    transaction: Transaction
    item: Item
    category: Category


@dataclass(frozen=True)
class BoardItem:
    """Item with the transactions that fall inside the board window."""

    item: Item
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class BoardCategory:
    """Category node of the board tree."""

    category: Category
    items: tuple[BoardItem, ...] = ()


@dataclass(frozen=True)
class BoardData:
    """Result of the board query: the window bounds and the nested tree."""

    start_date: date
    end_date: date
    categories: tuple[BoardCategory, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NewTransaction:
    """Values for a transaction row that has not been stored yet."""

    item_id: int
    due_date: date
    amount: Decimal = Decimal("0")
    projected_amount: Optional[Decimal] = None
    status: TransactionStatus = TransactionStatus.ESTIMATED
    installment_number: Optional[int] = 1
    total_installments: Optional[int] = 1
    description: Optional[str] = None
    is_investment: bool = False
