"""Date parsing and month arithmetic utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def start_of_month(value: date | datetime) -> date:
    """Return the first day of the month containing value."""
    if isinstance(value, datetime):
        value = value.date()
    return value.replace(day=1)


def add_months(value: date, months: int) -> date:
    """Shift a date by a number of months (negative moves backwards).

    Day-of-month is clamped to the end of shorter months.
    """
    return value + relativedelta(months=months)


def month_key(value: date | datetime) -> str:
    """Return the 'YYYY-MM' key used to match transactions to month columns."""
    return value.strftime("%Y-%m")


def month_range(anchor: date, months_back: int, months_forward: int) -> list[date]:
    """Return month starts from -months_back to +months_forward around anchor's month."""
    first = start_of_month(anchor)
    return [add_months(first, offset) for offset in range(-months_back, months_forward + 1)]


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "March 2024", "15/03/2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow",
      "this month", "last month", "next month"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": start_of_month(today),
        "last month": add_months(start_of_month(today), -1),
        "next month": add_months(start_of_month(today), 1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # "March 2024" would otherwise pick up today's day-of-month
    default = datetime(today.year, today.month, 1)
    try:
        return date_parser.parse(date_str, default=default).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
