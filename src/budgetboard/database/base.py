"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly so the database layer never imports services
from budgetboard.domain.entities import (
    BoardCategory,
    Category,
    CategoryType,
    CategoryWithItems,
    Item,
    NewTransaction,
    SavingsConfig,
    Transaction,
    TransactionDetail,
    TransactionStatus,
)


class Database(ABC):
    """Abstract database interface for budgetboard."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str, category_type: CategoryType, user_id: str) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get the first category with exactly this name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories ordered by ID."""
        pass

    @abstractmethod
    def list_categories_with_items(self) -> list[CategoryWithItems]:
        """List all categories with their items nested."""
        pass

    # Item operations
    @abstractmethod
    def create_item(self, name: str, category_id: int, is_recurring: bool = True) -> int:
        """Create an item. Returns item ID."""
        pass

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[Item]:
        """Get item by ID."""
        pass

    @abstractmethod
    def find_item(self, category_id: int, name: str) -> Optional[Item]:
        """Get the earliest item in a category with exactly this name."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transactions(self, rows: Sequence[NewTransaction]) -> list[int]:
        """Insert all rows in one commit. Returns the new IDs in row order."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        projected_amount: Optional[Decimal] = None,
        status: Optional[TransactionStatus] = None,
        due_date: Optional[date] = None,
        description: Optional[str] = None,
        clear_projected_amount: bool = False,
        clear_description: bool = False,
    ) -> None:
        """Update the supplied transaction fields.

        Fields left as None are unchanged; the clear flags set the matching
        nullable column to NULL.
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Delete a transaction. Returns the deleted row, or None if absent."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionDetail]:
        """List transactions with due dates in [start_date, end_date], joined with item and category."""
        pass

    @abstractmethod
    def get_board_tree(self, start_date: date, end_date: date) -> list[BoardCategory]:
        """Get every category with nested items and the items' transactions in range.

        The range is inclusive on both ends. Transactions are ordered by due
        date, then ID.
        """
        pass

    # Savings config operations
    @abstractmethod
    def create_savings_config(self, name: str, percentage: float, user_id: str) -> int:
        """Create a savings config. Returns its ID."""
        pass

    @abstractmethod
    def get_savings_config(self, config_id: int) -> Optional[SavingsConfig]:
        """Get savings config by ID."""
        pass

    @abstractmethod
    def list_savings_configs(self, user_id: Optional[str] = None) -> list[SavingsConfig]:
        """List savings configs, optionally filtered by user."""
        pass

    @abstractmethod
    def delete_savings_config(self, config_id: int) -> None:
        """Delete a savings config."""
        pass
