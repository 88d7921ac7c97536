"""Database layer for budgetboard."""

from budgetboard.database.base import Database
from budgetboard.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
