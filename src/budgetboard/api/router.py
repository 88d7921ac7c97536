"""Named procedures taking JSON-like payloads and returning JSON-ready data."""

import logging
from datetime import date
from typing import Any, Callable, Optional, Type

import pydantic

from budgetboard.api import schemas
from budgetboard.api import serializers
from budgetboard.database.base import Database
from budgetboard.domain.board import BoardService
from budgetboard.domain.board_view import build_board_view
from budgetboard.domain.category import CategoryService
from budgetboard.domain.errors import NotFoundError, ValidationError
from budgetboard.domain.savings import SavingsService
from budgetboard.domain.transaction import TransactionService

logger = logging.getLogger(__name__)


def validate_payload(model: Type[schemas.ProcedureInput], payload: Optional[dict]) -> Any:
    """Validate a payload, converting pydantic errors into a ValidationError.

    The raised error names the first offending field using the payload's
    own spelling (e.g. 'itemId').
    """
    try:
        return model.model_validate(payload or {})
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        message = f"{field}: {first['msg']}" if field else first["msg"]
        raise ValidationError(message, field=field) from e


class ProjectionRouter:
    """Procedure surface of the projection board.

    Each procedure is callable directly as a method, or by name through
    call(), which is what the CLI `call` command uses.
    """

    def __init__(self, db: Database, today: Optional[date] = None):
        """Initialize the router.

        Args:
            db: Database instance
            today: Pins the current month for board procedures (defaults to the real date)
        """
        self.today = today
        self.categories = CategoryService(db)
        self.transactions = TransactionService(db)
        self.board = BoardService(db)
        self.savings = SavingsService(db)
        self._procedures: dict[str, Callable[[Optional[dict]], Any]] = {
            "getCategories": self.get_categories,
            "createCategory": self.create_category,
            "createItem": self.create_item,
            "getTransactions": self.get_transactions,
            "createTransaction": self.create_transaction,
            "updateTransaction": self.update_transaction,
            "deleteTransaction": self.delete_transaction,
            "getBoardData": self.get_board_data,
            "getBoardView": self.get_board_view,
            "createSavingsConfig": self.create_savings_config,
            "getSavingsConfigs": self.get_savings_configs,
        }

    @property
    def procedure_names(self) -> list[str]:
        return sorted(self._procedures)

    def call(self, name: str, payload: Optional[dict] = None) -> Any:
        """Run a procedure by name.

        Raises:
            NotFoundError: If no procedure has this name
            ValidationError: If the payload is invalid
        """
        handler = self._procedures.get(name)
        if handler is None:
            raise NotFoundError(f"Unknown procedure '{name}'")
        logger.debug("Calling procedure %s", name)
        return handler(payload)

    # Categories and items
    def get_categories(self, payload: Optional[dict] = None) -> list[dict]:
        return [serializers.category_with_items_to_dict(c) for c in self.categories.list_categories()]

    def create_category(self, payload: Optional[dict]) -> dict:
        data = validate_payload(schemas.CreateCategoryInput, payload)
        category = self.categories.create_category(
            name=data.name, category_type=data.type, user_id=data.user_id
        )
        return serializers.category_to_dict(category)

    def create_item(self, payload: Optional[dict]) -> dict:
        data = validate_payload(schemas.CreateItemInput, payload)
        item = self.categories.create_item(name=data.name, category_id=data.category_id)
        return serializers.item_to_dict(item)

    # Transactions
    def get_transactions(self, payload: Optional[dict]) -> list[dict]:
        data = validate_payload(schemas.TransactionRangeInput, payload)
        details = self.transactions.list_transactions(start_date=data.start, end_date=data.end)
        return [serializers.transaction_detail_to_dict(d) for d in details]

    def create_transaction(self, payload: Optional[dict]) -> list[dict]:
        data = validate_payload(schemas.CreateTransactionInput, payload)
        created = self.transactions.create_transaction(
            item_id=data.item_id,
            due_date=data.due_date,
            amount=data.amount,
            projected_amount=data.projected_amount,
            status=data.status,
            total_installments=data.total_installments,
            description=data.description,
        )
        return [serializers.transaction_to_dict(t) for t in created]

    def update_transaction(self, payload: Optional[dict]) -> dict:
        data = validate_payload(schemas.UpdateTransactionInput, payload)
        supplied = data.model_fields_set
        updated = self.transactions.update_transaction(
            transaction_id=data.id,
            amount=data.amount,
            projected_amount=data.projected_amount,
            status=data.status,
            due_date=data.due_date,
            description=data.description,
            clear_projected_amount="projected_amount" in supplied and data.projected_amount is None,
            clear_description="description" in supplied and data.description is None,
        )
        return serializers.transaction_to_dict(updated)

    def delete_transaction(self, payload: Optional[dict]) -> list[dict]:
        data = validate_payload(schemas.TransactionIdInput, payload)
        deleted = self.transactions.delete_transaction(data.id)
        return [serializers.transaction_to_dict(deleted)] if deleted is not None else []

    # Board
    def get_board_data(self, payload: Optional[dict] = None) -> list[dict]:
        data = validate_payload(schemas.BoardWindowInput, payload)
        board = self.board.get_board_data(
            months_back=data.months_back, months_forward=data.months_forward, today=self.today
        )
        return [serializers.board_category_to_dict(c) for c in board.categories]

    def get_board_view(self, payload: Optional[dict] = None) -> dict:
        data = validate_payload(schemas.BoardWindowInput, payload)
        board = self.board.get_board_data(
            months_back=data.months_back, months_forward=data.months_forward, today=self.today
        )
        view = build_board_view(board.categories, data.months_back, data.months_forward, today=self.today)
        return serializers.board_view_to_dict(view)

    # Savings
    def create_savings_config(self, payload: Optional[dict]) -> dict:
        data = validate_payload(schemas.CreateSavingsConfigInput, payload)
        config = self.savings.create_savings_config(
            name=data.name, percentage=data.percentage, user_id=data.user_id
        )
        return serializers.savings_config_to_dict(config)

    def get_savings_configs(self, payload: Optional[dict] = None) -> list[dict]:
        return [serializers.savings_config_to_dict(c) for c in self.savings.list_savings_configs()]
