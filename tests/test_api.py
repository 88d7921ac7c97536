"""Tests for the procedure router."""

import pytest

from budgetboard.api import ProjectionRouter
from budgetboard.domain.errors import NotFoundError, ValidationError

from conftest import MARCH_2024


@pytest.fixture
def router(temp_db):
    return ProjectionRouter(temp_db, today=MARCH_2024)


@pytest.fixture
def paycheck(router):
    category = router.call("createCategory", {"name": "Salary", "type": "income", "userId": "user-1"})
    return router.call("createItem", {"name": "Paycheck", "categoryId": category["id"]})


def test_unknown_procedure(router):
    with pytest.raises(NotFoundError, match="Unknown procedure 'nope'"):
        router.call("nope", {})


def test_procedure_names(router):
    assert "getBoardData" in router.procedure_names
    assert "createTransaction" in router.procedure_names


def test_create_category_and_list(router, paycheck):
    categories = router.call("getCategories")

    assert len(categories) == 1
    assert categories[0]["name"] == "Salary"
    assert categories[0]["type"] == "income"
    assert categories[0]["userId"] == "user-1"
    assert [i["name"] for i in categories[0]["items"]] == ["Paycheck"]


def test_create_category_empty_name(router):
    with pytest.raises(ValidationError) as excinfo:
        router.call("createCategory", {"name": "", "type": "income", "userId": "user-1"})
    assert excinfo.value.field == "name"


def test_create_category_unknown_type(router):
    with pytest.raises(ValidationError) as excinfo:
        router.call("createCategory", {"name": "Misc", "type": "other", "userId": "user-1"})
    assert excinfo.value.field == "type"


def test_create_item_missing_category_id(router):
    with pytest.raises(ValidationError) as excinfo:
        router.call("createItem", {"name": "Rent"})
    assert excinfo.value.field == "categoryId"


def test_unexpected_key_rejected(router, paycheck):
    with pytest.raises(ValidationError):
        router.call("createItem", {"name": "Rent", "categoryId": paycheck["categoryId"], "color": "red"})


def test_create_transaction_normalizes_and_expands(router, paycheck):
    created = router.call(
        "createTransaction",
        {"itemId": paycheck["id"], "amount": 100, "dueDate": "2024-03-15", "totalInstallments": 3},
    )

    assert [t["dueDate"] for t in created] == ["2024-03-01", "2024-04-01", "2024-05-01"]
    assert [t["installmentNumber"] for t in created] == [1, 2, 3]
    assert all(t["status"] == "ESTIMATED" for t in created)
    assert created[0]["amount"] == 100.0


def test_create_transaction_invalid_installments(router, paycheck):
    with pytest.raises(ValidationError) as excinfo:
        router.call(
            "createTransaction",
            {"itemId": paycheck["id"], "dueDate": "2024-03-01", "totalInstallments": 0},
        )
    assert excinfo.value.field == "totalInstallments"


def test_create_transaction_missing_item_id(router):
    with pytest.raises(ValidationError) as excinfo:
        router.call("createTransaction", {"dueDate": "2024-03-01"})
    assert excinfo.value.field == "itemId"


def test_create_transaction_unknown_item(router):
    with pytest.raises(NotFoundError):
        router.call("createTransaction", {"itemId": 999, "dueDate": "2024-03-01"})


def test_update_transaction_partial_and_clear(router, paycheck):
    [txn] = router.call(
        "createTransaction",
        {
            "itemId": paycheck["id"],
            "amount": 100,
            "projectedAmount": 120,
            "dueDate": "2024-03-01",
            "description": "March pay",
        },
    )

    updated = router.call("updateTransaction", {"id": txn["id"], "status": "PAID"})
    assert updated["status"] == "PAID"
    assert updated["projectedAmount"] == 120.0
    assert updated["description"] == "March pay"

    cleared = router.call("updateTransaction", {"id": txn["id"], "projectedAmount": None, "description": None})
    assert cleared["projectedAmount"] is None
    assert cleared["description"] is None
    assert cleared["status"] == "PAID"


def test_update_transaction_missing(router):
    with pytest.raises(NotFoundError):
        router.call("updateTransaction", {"id": 42, "amount": 1})


def test_delete_transaction(router, paycheck):
    [txn] = router.call("createTransaction", {"itemId": paycheck["id"], "dueDate": "2024-03-01"})

    deleted = router.call("deleteTransaction", {"id": txn["id"]})
    assert [t["id"] for t in deleted] == [txn["id"]]

    assert router.call("deleteTransaction", {"id": txn["id"]}) == []


def test_get_transactions_range(router, paycheck):
    router.call(
        "createTransaction",
        {"itemId": paycheck["id"], "dueDate": "2024-01-10", "totalInstallments": 5},
    )

    found = router.call("getTransactions", {"from": "2024-02-01", "to": "2024-04-01"})

    assert [t["dueDate"] for t in found] == ["2024-02-01", "2024-03-01", "2024-04-01"]
    assert found[0]["item"]["name"] == "Paycheck"
    assert found[0]["item"]["category"]["name"] == "Salary"


def test_get_board_data(router, paycheck):
    router.call("createTransaction", {"itemId": paycheck["id"], "amount": 1000000, "dueDate": "2024-03-15"})
    router.call("createTransaction", {"itemId": paycheck["id"], "amount": 5, "dueDate": "2023-12-01"})

    board = router.call("getBoardData", {"monthsBack": 1, "monthsForward": 1})

    [salary] = board
    [item] = salary["items"]
    assert [t["dueDate"] for t in item["transactions"]] == ["2024-03-01"]
    assert item["transactions"][0]["amount"] == 1000000.0


def test_get_board_data_negative_window(router):
    with pytest.raises(ValidationError) as excinfo:
        router.call("getBoardData", {"monthsBack": -1})
    assert excinfo.value.field == "monthsBack"


def test_get_board_view_totals(router, paycheck):
    router.call("createTransaction", {"itemId": paycheck["id"], "amount": 1000000, "dueDate": "2024-03-15"})

    view = router.call("getBoardView", {"monthsBack": 1, "monthsForward": 1})

    assert view["months"] == ["2024-02-01", "2024-03-01", "2024-04-01"]
    assert view["currentMonth"] == "2024-03-01"
    assert view["currentTotals"] == {"income": 1000000.0, "expense": 0.0, "balance": 1000000.0}
    assert view["netBalance"] == [0.0, 1000000.0, 0.0]
    income = view["sections"][0]
    assert income["type"] == "income"
    cells = income["categories"][0]["items"][0]["cells"]
    assert cells[1]["statusBand"] == "orange"
    assert cells[0]["transactionId"] is None


def test_savings_configs(router):
    created = router.call("createSavingsConfig", {"name": "Emergency", "percentage": 0.2, "userId": "user-1"})
    assert created["percentage"] == pytest.approx(0.2)

    assert [c["name"] for c in router.call("getSavingsConfigs")] == ["Emergency"]

    with pytest.raises(ValidationError) as excinfo:
        router.call("createSavingsConfig", {"name": "Too much", "percentage": 2, "userId": "user-1"})
    assert excinfo.value.field == "percentage"


def test_create_transaction_accepts_timestamp_due_date(router, paycheck):
    [txn] = router.call(
        "createTransaction", {"itemId": paycheck["id"], "amount": 5, "dueDate": "2024-03-15T10:30:00Z"}
    )

    assert txn["dueDate"] == "2024-03-01"


def test_get_transactions_accepts_timestamp_range(router, paycheck):
    router.call("createTransaction", {"itemId": paycheck["id"], "dueDate": "2024-02-10", "totalInstallments": 3})

    found = router.call("getTransactions", {"from": "2024-03-01T00:00:00Z", "to": "2024-03-31T23:59:59Z"})

    assert [t["dueDate"] for t in found] == ["2024-03-01"]


def test_update_transaction_moves_to_timestamp_month(router, paycheck):
    [txn] = router.call("createTransaction", {"itemId": paycheck["id"], "dueDate": "2024-03-01"})

    updated = router.call("updateTransaction", {"id": txn["id"], "dueDate": "2024-07-20T08:00:00+02:00"})

    assert updated["dueDate"] == "2024-07-01"


def test_invalid_timestamp_names_field(router, paycheck):
    with pytest.raises(ValidationError) as excinfo:
        router.call("createTransaction", {"itemId": paycheck["id"], "dueDate": "2024-03-15T99:99"})
    assert excinfo.value.field == "dueDate"


@pytest.mark.parametrize("key", ["amount", "status", "dueDate"])
def test_update_transaction_rejects_null(router, paycheck, key):
    [txn] = router.call(
        "createTransaction", {"itemId": paycheck["id"], "amount": 5, "dueDate": "2024-03-01"}
    )

    with pytest.raises(ValidationError) as excinfo:
        router.call("updateTransaction", {"id": txn["id"], key: None})
    assert excinfo.value.field == key

    [detail] = router.call("getTransactions", {"from": "2024-03-01", "to": "2024-03-01"})
    assert detail["amount"] == 5.0
    assert detail["status"] == "ESTIMATED"


def test_blank_user_id_reported_in_camel_case(router):
    with pytest.raises(ValidationError) as excinfo:
        router.call("createCategory", {"name": "Salary", "type": "income", "userId": "   "})
    assert excinfo.value.field == "userId"

    with pytest.raises(ValidationError) as excinfo:
        router.call("createSavingsConfig", {"name": "Emergency", "percentage": 0.1, "userId": " "})
    assert excinfo.value.field == "userId"


def test_names_are_stripped(router):
    category = router.call("createCategory", {"name": "  Salary ", "type": "income", "userId": "user-1"})
    assert category["name"] == "Salary"
