"""Board shaping: month columns, cells, category totals and net balance.

This turns the nested tree from BoardService into the matrix shown to the
user. A (item, month) cell shows one transaction. When several rows share a
month, the earliest-created one (lowest ID) is shown and the rest are only
counted in hidden_duplicates.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from budgetboard.domain.entities import (
    BoardCategory,
    BoardItem,
    Category,
    CategoryType,
    Item,
    Transaction,
    TransactionStatus,
)
from budgetboard.domain.board import board_window
from budgetboard.utils.date_parser import month_key, month_range

STATUS_BANDS = {
    TransactionStatus.PENDING: "red",
    TransactionStatus.ESTIMATED: "orange",
    TransactionStatus.CONFIRMED: "light-green",
    TransactionStatus.PAID: "green",
}

SECTION_ORDER = (CategoryType.INCOME, CategoryType.EXPENSE, CategoryType.SAVINGS)

ZERO = Decimal("0")


@dataclass(frozen=True)
class BoardCell:
    """One (item, month) cell of the board."""

    month: date
    transaction: Optional[Transaction]
    amount: Decimal
    projected_amount: Optional[Decimal]
    status: TransactionStatus
    description: Optional[str]
    installment: Optional[str]
    hidden_duplicates: int = 0

    @property
    def is_existing(self) -> bool:
        return self.transaction is not None

    @property
    def status_band(self) -> Optional[str]:
        """Display color for the cell; empty cells have none."""
        if not self.is_existing:
            return None
        return STATUS_BANDS[self.status]

    @property
    def shows_projection(self) -> bool:
        """True when a projected amount exists and differs from the actual amount."""
        return self.projected_amount is not None and self.projected_amount != self.amount


@dataclass(frozen=True)
class ItemRow:
    item: Item
    cells: tuple[BoardCell, ...]


@dataclass(frozen=True)
class CategoryRow:
    category: Category
    totals: tuple[Decimal, ...]
    items: tuple[ItemRow, ...]


@dataclass(frozen=True)
class BoardSection:
    """All categories of one type, in fetch order."""

    category_type: CategoryType
    categories: tuple[CategoryRow, ...]

    def month_totals(self, month_count: int) -> tuple[Decimal, ...]:
        return tuple(
            sum((row.totals[i] for row in self.categories), ZERO) for i in range(month_count)
        )


@dataclass(frozen=True)
class MonthTotals:
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class BoardView:
    months: tuple[date, ...]
    current_month: date
    sections: tuple[BoardSection, ...]
    current_totals: MonthTotals
    net_balance: tuple[Decimal, ...]

    def section(self, category_type: CategoryType) -> BoardSection:
        for section in self.sections:
            if section.category_type == category_type:
                return section
        return BoardSection(category_type=category_type, categories=())


def find_cell(board_item: BoardItem, month: date) -> BoardCell:
    """Look up the transaction shown for an item in a month."""
    key = month_key(month)
    matches = [t for t in board_item.transactions if month_key(t.due_date) == key]
    if not matches:
        return BoardCell(
            month=month,
            transaction=None,
            amount=ZERO,
            projected_amount=None,
            status=TransactionStatus.ESTIMATED,
            description=None,
            installment=None,
        )

    txn = min(matches, key=lambda t: t.id)
    installment = None
    if txn.total_installments and txn.total_installments > 1:
        installment = f"{txn.installment_number}/{txn.total_installments}"
    return BoardCell(
        month=month,
        transaction=txn,
        amount=txn.amount if txn.amount is not None else ZERO,
        projected_amount=txn.projected_amount,
        status=txn.status,
        description=txn.description,
        installment=installment,
        hidden_duplicates=len(matches) - 1,
    )


def build_category_row(board_category: BoardCategory, months: Sequence[date]) -> CategoryRow:
    item_rows = tuple(
        ItemRow(item=bi.item, cells=tuple(find_cell(bi, month) for month in months))
        for bi in board_category.items
    )
    totals = tuple(
        sum((row.cells[i].amount for row in item_rows), ZERO) for i in range(len(months))
    )
    return CategoryRow(category=board_category.category, totals=totals, items=item_rows)


def build_board_view(
    categories: Sequence[BoardCategory],
    months_back: int,
    months_forward: int,
    today: Optional[date] = None,
) -> BoardView:
    """Shape the board tree into month columns, sections and totals.

    The net balance of a month is income minus expense; savings categories
    never contribute to it.
    """
    start_date, _ = board_window(months_back, months_forward, today)
    months = tuple(month_range(start_date, 0, months_back + months_forward))
    current_month = months[months_back]

    sections = tuple(
        BoardSection(
            category_type=category_type,
            categories=tuple(
                build_category_row(bc, months)
                for bc in categories
                if bc.category.category_type == category_type
            ),
        )
        for category_type in SECTION_ORDER
    )

    view_sections = {s.category_type: s for s in sections}
    income = view_sections[CategoryType.INCOME].month_totals(len(months))
    expense = view_sections[CategoryType.EXPENSE].month_totals(len(months))
    net_balance = tuple(i - e for i, e in zip(income, expense))

    return BoardView(
        months=months,
        current_month=current_month,
        sections=sections,
        current_totals=MonthTotals(income=income[months_back], expense=expense[months_back]),
        net_balance=net_balance,
    )
