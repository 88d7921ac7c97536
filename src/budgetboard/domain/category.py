"""Category and item domain service."""

import logging
from typing import Optional
from budgetboard.database.base import Database
from budgetboard.domain.entities import Category, CategoryType, CategoryWithItems, Item
from budgetboard.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    require_name,
)

logger = logging.getLogger(__name__)


def parse_category_type(value: CategoryType | str) -> CategoryType:
    """Coerce a string such as 'income' into a CategoryType.

    Raises:
        ValidationError: If the value is not a known type
    """
    if isinstance(value, CategoryType):
        return value
    try:
        return CategoryType(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(t.value for t in CategoryType)
        raise ValidationError(f"Invalid category type '{value}' (expected one of: {allowed})", field="type")


class CategoryService:
    """Service for managing categories and their items."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, name: str, category_type: CategoryType | str, user_id: str) -> Category:
        """Create a category.

        The type is fixed at creation; there is no operation to change it.

        Args:
            name: Category name
            category_type: income, expense or savings
            user_id: Owning user

        Returns:
            The created category

        Raises:
            ValidationError: If the name is empty or the type is unknown
        """
        name = require_name(name)
        category_type = parse_category_type(category_type)
        user_id = require_name(user_id, field="user_id")

        category_id = self.db.create_category(name=name, category_type=category_type, user_id=user_id)
        logger.info("Created %s category %d '%s'", category_type.value, category_id, name)
        return self.require_category(category_id)

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> Category:
        """Get category by ID or raise NotFoundError."""
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def resolve_category(self, category: str | int) -> Category:
        """Resolve a category name or ID to a category.

        Numeric strings are tried as IDs first, then matched by name like
        anything else.

        Raises:
            NotFoundError: If no category matches
        """
        if isinstance(category, int):
            return self.require_category(category)

        try:
            category_id = int(category)
        except (ValueError, TypeError):
            category_id = None
        if category_id is not None:
            found = self.db.get_category(category_id)
            if found is not None:
                return found

        found = self.db.get_category_by_name(category)
        if found is None:
            raise NotFoundError(category_not_found(category))
        return found

    def list_categories(self) -> list[CategoryWithItems]:
        """List all categories with their items nested."""
        return self.db.list_categories_with_items()

    def create_item(self, name: str, category_id: int, is_recurring: bool = True) -> Item:
        """Create an item inside a category.

        No uniqueness is enforced; use get_or_create_item to reuse an
        existing item with the same name.

        Raises:
            ValidationError: If the name is empty
            NotFoundError: If the category doesn't exist
        """
        name = require_name(name)
        self.require_category(category_id)

        item_id = self.db.create_item(name=name, category_id=category_id, is_recurring=is_recurring)
        logger.info("Created item %d '%s' in category %d", item_id, name, category_id)
        return self.db.get_item(item_id)

    def get_item(self, item_id: int) -> Optional[Item]:
        """Get item by ID."""
        return self.db.get_item(item_id)

    def get_or_create_item(self, category_id: int, name: str) -> tuple[Item, bool]:
        """Return the item with this exact name in the category, creating it if missing.

        Returns:
            Tuple of (item, created)
        """
        name = require_name(name)
        self.require_category(category_id)

        existing = self.db.find_item(category_id, name)
        if existing is not None:
            return existing, False
        return self.create_item(name=name, category_id=category_id), True
