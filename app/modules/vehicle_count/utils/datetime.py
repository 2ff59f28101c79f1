"""
datetime.py - Date operations
-----------------------------
Single responsibility: Turn user supplied dates into calendar days
"""

from datetime import date
from typing import Any

import pendulum


class DateTimeService:
    """Handle date conversions following SRP"""

    @staticmethod
    def today(timezone: str) -> date:
        """Current calendar day in the given timezone"""
        now = pendulum.now(timezone)
        return date(now.year, now.month, now.day)

    @staticmethod
    def to_date(value: Any) -> date:
        """
        Truncate a date, datetime or ISO-8601 string to its calendar day.

        Raises:
            ValueError: if the value can't be interpreted as a date.
        """
        if isinstance(value, date):
            return date(value.year, value.month, value.day)
        if isinstance(value, str) and value.strip():
            parsed = pendulum.parse(value.strip(), exact=True)
            if isinstance(parsed, date):
                return date(parsed.year, parsed.month, parsed.day)
        raise ValueError(f"Invalid date value: {value!r}")

    @staticmethod
    def to_date_string(value: Any) -> str:
        """Format a value as YYYY-MM-DD"""
        return DateTimeService.to_date(value).isoformat()
