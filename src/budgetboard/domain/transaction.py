"""Transaction domain service."""

import logging
from typing import Optional
from datetime import date
from decimal import Decimal
from budgetboard.database.base import Database
from budgetboard.domain.entities import (
    NewTransaction,
    Transaction,
    TransactionDetail,
    TransactionStatus,
)
from budgetboard.domain.errors import (
    NotFoundError,
    ValidationError,
    item_not_found,
    transaction_not_found,
)
from budgetboard.utils.date_parser import add_months, start_of_month

logger = logging.getLogger(__name__)


def parse_status(value: TransactionStatus | str) -> TransactionStatus:
    """Coerce a string such as 'paid' into a TransactionStatus.

    Raises:
        ValidationError: If the value is not a known status
    """
    if isinstance(value, TransactionStatus):
        return value
    try:
        return TransactionStatus(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(s.value for s in TransactionStatus)
        raise ValidationError(f"Invalid status '{value}' (expected one of: {allowed})", field="status")


def expand_installments(
    item_id: int,
    due_date: date,
    amount: Decimal,
    projected_amount: Optional[Decimal],
    status: TransactionStatus,
    total_installments: int,
    description: Optional[str],
    is_investment: bool = False,
) -> list[NewTransaction]:
    """Build the rows for a transaction paid over total_installments months.

    Row i (0-based) is due i months after the start of due_date's month and
    carries installment number i + 1. A single payment is one row numbered 1/1.
    """
    first_month = start_of_month(due_date)
    return [
        NewTransaction(
            item_id=item_id,
            due_date=add_months(first_month, offset),
            amount=amount,
            projected_amount=projected_amount,
            status=status,
            installment_number=offset + 1,
            total_installments=total_installments,
            description=description,
            is_investment=is_investment,
        )
        for offset in range(total_installments)
    ]


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        item_id: int,
        due_date: date,
        amount: Decimal = Decimal("0"),
        projected_amount: Optional[Decimal] = None,
        status: TransactionStatus | str = TransactionStatus.ESTIMATED,
        total_installments: int = 1,
        description: Optional[str] = None,
        is_investment: bool = False,
    ) -> list[Transaction]:
        """Create a transaction, expanding it into monthly installments if needed.

        Args:
            item_id: Item the transaction belongs to
            due_date: Any day in the first month; stored as the first of the month
            amount: Actual amount
            projected_amount: Optional projected amount
            status: Initial status (ESTIMATED by default)
            total_installments: Number of monthly rows to create
            description: Optional free text
            is_investment: Marks the transaction as an investment

        Returns:
            The created rows in month order

        Raises:
            ValidationError: If total_installments is below 1 or status is unknown
            NotFoundError: If the item doesn't exist
        """
        status = parse_status(status)
        if total_installments is None:
            total_installments = 1
        if total_installments < 1:
            raise ValidationError("total_installments must be at least 1", field="total_installments")

        if self.db.get_item(item_id) is None:
            raise NotFoundError(item_not_found(item_id))

        rows = expand_installments(
            item_id=item_id,
            due_date=due_date,
            amount=amount,
            projected_amount=projected_amount,
            status=status,
            total_installments=total_installments,
            description=description,
            is_investment=is_investment,
        )
        ids = self.db.create_transactions(rows)
        logger.info(
            "Created %d transaction row(s) for item %d starting %s",
            len(ids),
            item_id,
            rows[0].due_date.isoformat(),
        )
        return [self.db.get_transaction(txn_id) for txn_id in ids]

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        projected_amount: Optional[Decimal] = None,
        status: Optional[TransactionStatus | str] = None,
        due_date: Optional[date] = None,
        description: Optional[str] = None,
        clear_projected_amount: bool = False,
        clear_description: bool = False,
    ) -> Transaction:
        """Update only the supplied fields of a transaction.

        Any status may move to any other status. A new due date is stored as
        the first of its month.

        Args:
            clear_projected_amount: If True, remove the projected amount
            clear_description: If True, remove the description

        Returns:
            The updated transaction

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.update_transaction(
            transaction_id=transaction_id,
            amount=amount,
            projected_amount=projected_amount,
            status=parse_status(status) if status is not None else None,
            due_date=start_of_month(due_date) if due_date is not None else None,
            description=description,
            clear_projected_amount=clear_projected_amount,
            clear_description=clear_description,
        )
        logger.info("Updated transaction %d", transaction_id)
        return self.db.get_transaction(transaction_id)

    def delete_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Delete a transaction.

        Returns:
            The deleted transaction, or None if it did not exist
        """
        deleted = self.db.delete_transaction(transaction_id)
        if deleted is None:
            logger.info("Transaction %d not found, nothing deleted", transaction_id)
        else:
            logger.info("Deleted transaction %d", transaction_id)
        return deleted

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionDetail]:
        """List transactions due in [start_date, end_date] with item and category."""
        return self.db.list_transactions(start_date=start_date, end_date=end_date)
