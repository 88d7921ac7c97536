"""Savings config domain service."""

import logging
from typing import Optional
from budgetboard.database.base import Database
from budgetboard.domain.entities import SavingsConfig
from budgetboard.domain.errors import (
    NotFoundError,
    ValidationError,
    require_name,
    savings_config_not_found,
)

logger = logging.getLogger(__name__)


class SavingsService:
    """Service for managing savings allocation rules."""

    def __init__(self, db: Database):
        self.db = db

    def create_savings_config(self, name: str, percentage: float, user_id: str) -> SavingsConfig:
        """Create a savings config.

        Args:
            name: Rule name
            percentage: Fraction of income to set aside (0.2 means 20%)
            user_id: Owning user

        Raises:
            ValidationError: If the name is empty or percentage is outside [0, 1]
        """
        name = require_name(name)
        user_id = require_name(user_id, field="user_id")
        if percentage is None or not 0 <= percentage <= 1:
            raise ValidationError("percentage must be a fraction between 0 and 1", field="percentage")

        config_id = self.db.create_savings_config(name=name, percentage=float(percentage), user_id=user_id)
        logger.info("Created savings config %d '%s' (%.2f)", config_id, name, percentage)
        return self.db.get_savings_config(config_id)

    def list_savings_configs(self, user_id: Optional[str] = None) -> list[SavingsConfig]:
        """List savings configs, optionally for one user."""
        return self.db.list_savings_configs(user_id=user_id)

    def delete_savings_config(self, config_id: int) -> None:
        """Delete a savings config.

        Raises:
            NotFoundError: If the config doesn't exist
        """
        if self.db.get_savings_config(config_id) is None:
            raise NotFoundError(savings_config_not_found(config_id))
        self.db.delete_savings_config(config_id)
        logger.info("Deleted savings config %d", config_id)
