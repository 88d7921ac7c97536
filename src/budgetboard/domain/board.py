"""Board query service: the bounded month window and the nested tree."""

import logging
from datetime import date
from typing import Optional

from budgetboard.database.base import Database
from budgetboard.domain.entities import BoardData
from budgetboard.domain.errors import ValidationError
from budgetboard.utils.date_parser import add_months, start_of_month

logger = logging.getLogger(__name__)

DEFAULT_MONTHS_BACK = 1
DEFAULT_MONTHS_FORWARD = 8


def board_window(
    months_back: int, months_forward: int, today: Optional[date] = None
) -> tuple[date, date]:
    """Return the inclusive (start, end) dates of the board window.

    Both bounds are month starts relative to the first of today's month.

    Raises:
        ValidationError: If either window size is negative
    """
    if months_back < 0:
        raise ValidationError("months_back must not be negative", field="months_back")
    if months_forward < 0:
        raise ValidationError("months_forward must not be negative", field="months_forward")

    anchor = start_of_month(today or date.today())
    return add_months(anchor, -months_back), add_months(anchor, months_forward)


class BoardService:
    """Service that fetches board data for a window of months."""

    def __init__(self, db: Database):
        """Initialize board service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_board_data(
        self,
        months_back: int = DEFAULT_MONTHS_BACK,
        months_forward: int = DEFAULT_MONTHS_FORWARD,
        today: Optional[date] = None,
    ) -> BoardData:
        """Get every category with items and the transactions due inside the window.

        Nothing is summed here; totals are computed when the board is shaped.
        """
        start_date, end_date = board_window(months_back, months_forward, today)
        logger.debug("Loading board window %s..%s", start_date, end_date)
        categories = self.db.get_board_tree(start_date, end_date)
        return BoardData(start_date=start_date, end_date=end_date, categories=tuple(categories))
