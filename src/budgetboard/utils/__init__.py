"""Utility functions for budgetboard."""

from budgetboard.utils.date_parser import parse_date, start_of_month, add_months, month_key
from budgetboard.utils.amount_parser import parse_amount

__all__ = ["parse_date", "start_of_month", "add_months", "month_key", "parse_amount"]
