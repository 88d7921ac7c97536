"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StorageError(DomainError):
    """The storage layer rejected or failed to apply a change."""


def category_not_found(category_id: int | str) -> str:
    """Return message for missing category by ID or name."""
    if isinstance(category_id, int):
        return f"Category {category_id} not found"
    return f"Category '{category_id}' not found"


def item_not_found(item_id: int) -> str:
    """Return message for missing item."""
    return f"Item {item_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def savings_config_not_found(config_id: int) -> str:
    """Return message for missing savings config."""
    return f"Savings config {config_id} not found"


def require_name(value: Optional[str], field: str = "name") -> str:
    """Return the stripped name or raise ValidationError naming the field."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} must not be empty", field=field)
    return value.strip()
