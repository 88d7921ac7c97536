"""Tests for the transaction service."""

import pytest
from datetime import date
from decimal import Decimal

from budgetboard.domain.entities import TransactionStatus
from budgetboard.domain.errors import NotFoundError, ValidationError
from budgetboard.domain.transaction import expand_installments


@pytest.fixture
def paycheck(sample_categories):
    return sample_categories["Paycheck"]


def test_single_transaction_is_one_of_one(transaction_service, paycheck):
    rows = transaction_service.create_transaction(
        item_id=paycheck.id, due_date=date(2024, 3, 15), amount=Decimal("1000000")
    )

    assert len(rows) == 1
    txn = rows[0]
    assert txn.due_date == date(2024, 3, 1)
    assert txn.installment_number == 1
    assert txn.total_installments == 1
    assert txn.status is TransactionStatus.ESTIMATED
    assert txn.amount == Decimal("1000000")
    assert txn.projected_amount is None


@pytest.mark.parametrize("day", [1, 15, 31])
def test_due_date_is_truncated_to_month(transaction_service, paycheck, day):
    [txn] = transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 1, day))
    assert txn.due_date == date(2024, 1, 1)


def test_installments_cover_consecutive_months(transaction_service, paycheck):
    rows = transaction_service.create_transaction(
        item_id=paycheck.id,
        due_date=date(2024, 11, 20),
        amount=Decimal("250"),
        projected_amount=Decimal("260"),
        status="CONFIRMED",
        total_installments=4,
        description="Laptop",
    )

    assert len(rows) == 4
    assert [r.due_date for r in rows] == [
        date(2024, 11, 1),
        date(2024, 12, 1),
        date(2025, 1, 1),
        date(2025, 2, 1),
    ]
    assert [r.installment_number for r in rows] == [1, 2, 3, 4]
    assert {r.total_installments for r in rows} == {4}
    assert {r.amount for r in rows} == {Decimal("250")}
    assert {r.projected_amount for r in rows} == {Decimal("260")}
    assert {r.status for r in rows} == {TransactionStatus.CONFIRMED}
    assert {r.description for r in rows} == {"Laptop"}


def test_expand_installments_single_row():
    rows = expand_installments(
        item_id=1,
        due_date=date(2024, 5, 9),
        amount=Decimal("1"),
        projected_amount=None,
        status=TransactionStatus.ESTIMATED,
        total_installments=1,
        description=None,
    )
    assert len(rows) == 1
    assert rows[0].due_date == date(2024, 5, 1)
    assert (rows[0].installment_number, rows[0].total_installments) == (1, 1)


def test_zero_installments_rejected(transaction_service, paycheck):
    with pytest.raises(ValidationError) as excinfo:
        transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 1, 1), total_installments=0)
    assert excinfo.value.field == "total_installments"


def test_unknown_status_rejected(transaction_service, paycheck):
    with pytest.raises(ValidationError) as excinfo:
        transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 1, 1), status="LATE")
    assert excinfo.value.field == "status"


def test_unknown_item_rejected(transaction_service):
    with pytest.raises(NotFoundError):
        transaction_service.create_transaction(item_id=999, due_date=date(2024, 1, 1))


def test_negative_amount_and_duplicates_allowed(transaction_service, paycheck):
    transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 1, 1), amount=Decimal("-5"))
    transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 1, 20), amount=Decimal("7"))

    details = transaction_service.list_transactions(date(2024, 1, 1), date(2024, 1, 31))
    assert [d.transaction.amount for d in details] == [Decimal("-5"), Decimal("7")]


def test_update_changes_only_supplied_fields(transaction_service, paycheck):
    [txn] = transaction_service.create_transaction(
        item_id=paycheck.id,
        due_date=date(2024, 3, 1),
        amount=Decimal("100"),
        projected_amount=Decimal("120"),
        description="March",
    )

    updated = transaction_service.update_transaction(txn.id, status="PAID")

    assert updated.status is TransactionStatus.PAID
    assert updated.amount == Decimal("100")
    assert updated.projected_amount == Decimal("120")
    assert updated.description == "March"
    assert updated.due_date == date(2024, 3, 1)
    assert updated.updated_at is not None


def test_update_normalizes_due_date(transaction_service, paycheck):
    [txn] = transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 3, 1))

    updated = transaction_service.update_transaction(txn.id, due_date=date(2024, 6, 18))

    assert updated.due_date == date(2024, 6, 1)


def test_update_can_clear_nullable_fields(transaction_service, paycheck):
    [txn] = transaction_service.create_transaction(
        item_id=paycheck.id, due_date=date(2024, 3, 1), projected_amount=Decimal("5"), description="x"
    )

    updated = transaction_service.update_transaction(txn.id, clear_projected_amount=True, clear_description=True)

    assert updated.projected_amount is None
    assert updated.description is None


def test_any_status_transition_is_allowed(transaction_service, paycheck):
    [txn] = transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 3, 1))

    for status in ("PAID", "PENDING", "CONFIRMED", "ESTIMATED", "PAID"):
        assert transaction_service.update_transaction(txn.id, status=status).status.value == status


def test_update_missing_transaction(transaction_service):
    with pytest.raises(NotFoundError):
        transaction_service.update_transaction(999, amount=Decimal("1"))


def test_delete_transaction(transaction_service, paycheck):
    [txn] = transaction_service.create_transaction(item_id=paycheck.id, due_date=date(2024, 3, 1))

    deleted = transaction_service.delete_transaction(txn.id)

    assert deleted.id == txn.id
    assert transaction_service.get_transaction(txn.id) is None
    assert transaction_service.delete_transaction(txn.id) is None
