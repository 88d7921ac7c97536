"""Pydantic schemas for procedure payloads.

Keys use the camelCase spelling of the JSON wire format; Python code reads
the snake_case attribute names.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from budgetboard.domain.board import DEFAULT_MONTHS_BACK, DEFAULT_MONTHS_FORWARD
from budgetboard.domain.entities import CategoryType, TransactionStatus


def _drop_time(value):
    """Reduce a timestamp to its calendar date; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return datetime.fromisoformat(value).date()
    return value


# Accepts "2024-03-15" as well as full timestamps like "2024-03-15T10:30:00Z"
DueDate = Annotated[date, BeforeValidator(_drop_time)]


class ProcedureInput(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class CreateCategoryInput(ProcedureInput):
    name: str = Field(min_length=1)
    type: CategoryType
    user_id: str = Field(min_length=1)


class CreateItemInput(ProcedureInput):
    name: str = Field(min_length=1)
    category_id: int


class TransactionRangeInput(ProcedureInput):
    start: DueDate = Field(alias="from")
    end: DueDate = Field(alias="to")


class CreateTransactionInput(ProcedureInput):
    item_id: int
    amount: Decimal = Decimal("0")
    projected_amount: Optional[Decimal] = None
    due_date: DueDate
    status: TransactionStatus = TransactionStatus.ESTIMATED
    total_installments: int = Field(default=1, ge=1)
    description: Optional[str] = None


class UpdateTransactionInput(ProcedureInput):
    """Partial update; only keys present in the payload are applied.

    An explicit null for projectedAmount or description clears the field;
    amount, status and dueDate may be left out but never set to null.
    """

    id: int
    amount: Optional[Decimal] = None
    projected_amount: Optional[Decimal] = None
    status: Optional[TransactionStatus] = None
    due_date: Optional[DueDate] = None
    description: Optional[str] = None

    @field_validator("amount", "status", "due_date", mode="before")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TransactionIdInput(ProcedureInput):
    id: int


class BoardWindowInput(ProcedureInput):
    months_back: int = Field(default=DEFAULT_MONTHS_BACK, ge=0)
    months_forward: int = Field(default=DEFAULT_MONTHS_FORWARD, ge=0)


class CreateSavingsConfigInput(ProcedureInput):
    name: str = Field(min_length=1)
    percentage: float = Field(ge=0, le=1)
    user_id: str = Field(min_length=1)
