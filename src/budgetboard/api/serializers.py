"""Convert domain entities into JSON-ready dicts with camelCase keys."""

from decimal import Decimal
from typing import Any, Optional

from budgetboard.domain import entities
from budgetboard.domain.board_view import BoardCell, BoardView


def _money(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def category_to_dict(category: entities.Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "type": category.category_type.value,
        "userId": category.user_id,
        "createdAt": category.created_at.isoformat(),
    }


def item_to_dict(item: entities.Item) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "categoryId": item.category_id,
        "isRecurring": item.is_recurring,
        "createdAt": item.created_at.isoformat(),
    }


def transaction_to_dict(txn: entities.Transaction) -> dict[str, Any]:
    return {
        "id": txn.id,
        "itemId": txn.item_id,
        "amount": _money(txn.amount),
        "projectedAmount": _money(txn.projected_amount),
        "dueDate": txn.due_date.isoformat(),
        "status": txn.status.value,
        "isInvestment": txn.is_investment,
        "installmentNumber": txn.installment_number,
        "totalInstallments": txn.total_installments,
        "description": txn.description,
        "createdAt": txn.created_at.isoformat(),
        "updatedAt": txn.updated_at.isoformat() if txn.updated_at else None,
    }


def category_with_items_to_dict(entry: entities.CategoryWithItems) -> dict[str, Any]:
    data = category_to_dict(entry.category)
    data["items"] = [item_to_dict(item) for item in entry.items]
    return data


def transaction_detail_to_dict(detail: entities.TransactionDetail) -> dict[str, Any]:
    data = transaction_to_dict(detail.transaction)
    data["item"] = item_to_dict(detail.item)
    data["item"]["category"] = category_to_dict(detail.category)
    return data


def board_category_to_dict(node: entities.BoardCategory) -> dict[str, Any]:
    data = category_to_dict(node.category)
    data["items"] = []
    for board_item in node.items:
        item_data = item_to_dict(board_item.item)
        item_data["transactions"] = [transaction_to_dict(t) for t in board_item.transactions]
        data["items"].append(item_data)
    return data


def savings_config_to_dict(config: entities.SavingsConfig) -> dict[str, Any]:
    return {
        "id": config.id,
        "name": config.name,
        "percentage": config.percentage,
        "userId": config.user_id,
        "createdAt": config.created_at.isoformat(),
    }


def _cell_to_dict(cell: BoardCell) -> dict[str, Any]:
    return {
        "month": cell.month.isoformat(),
        "transactionId": cell.transaction.id if cell.transaction else None,
        "amount": _money(cell.amount),
        "projectedAmount": _money(cell.projected_amount),
        "status": cell.status.value,
        "statusBand": cell.status_band,
        "showsProjection": cell.shows_projection,
        "installment": cell.installment,
        "description": cell.description,
        "hiddenDuplicates": cell.hidden_duplicates,
    }


def board_view_to_dict(view: BoardView) -> dict[str, Any]:
    return {
        "months": [m.isoformat() for m in view.months],
        "currentMonth": view.current_month.isoformat(),
        "currentTotals": {
            "income": _money(view.current_totals.income),
            "expense": _money(view.current_totals.expense),
            "balance": _money(view.current_totals.balance),
        },
        "sections": [
            {
                "type": section.category_type.value,
                "categories": [
                    {
                        **category_to_dict(row.category),
                        "totals": [_money(t) for t in row.totals],
                        "items": [
                            {**item_to_dict(item_row.item), "cells": [_cell_to_dict(c) for c in item_row.cells]}
                            for item_row in row.items
                        ],
                    }
                    for row in section.categories
                ],
            }
            for section in view.sections
        ],
        "netBalance": [_money(b) for b in view.net_balance],
    }
