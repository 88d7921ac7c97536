"""Shared pytest fixtures for budgetboard tests."""

import tempfile
import os
from datetime import date
import pytest

from budgetboard.database.factories import create_sqlite_database
from budgetboard.domain.board import BoardService
from budgetboard.domain.category import CategoryService
from budgetboard.domain.savings import SavingsService
from budgetboard.domain.transaction import TransactionService

# Board tests pin "today" to this date
MARCH_2024 = date(2024, 3, 20)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def board_service(temp_db):
    """Create a BoardService with a temporary database."""
    return BoardService(temp_db)


@pytest.fixture
def savings_service(temp_db):
    """Create a SavingsService with a temporary database."""
    return SavingsService(temp_db)


@pytest.fixture
def sample_categories(category_service):
    """Create one category of each type, each with one item.

    Returns a dict with the created categories and items keyed by name.
    """
    salary = category_service.create_category("Salary", "income", "user-1")
    housing = category_service.create_category("Housing", "expense", "user-1")
    emergency = category_service.create_category("Emergency Fund", "savings", "user-1")
    return {
        "Salary": salary,
        "Housing": housing,
        "Emergency Fund": emergency,
        "Paycheck": category_service.create_item("Paycheck", salary.id),
        "Rent": category_service.create_item("Rent", housing.id),
        "Deposit": category_service.create_item("Deposit", emergency.id),
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
