"""This module provides centralized date-related utilities."""

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from caritas_sobral.providers.config import ConfigProvider

_CALENDAR_DATE_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")


class DateProvider:
    """Provides centralized constants and methods for date handling.

    Calendar dates (publication dates, deadlines, movement dates) are never
    treated as instants: they are parsed from their `YYYY-MM-DD` part and
    compared against "today" evaluated in one fixed reference timezone.
    """

    DATE_FORMAT = "%Y-%m-%d"
    DISPLAY_FORMAT = "%d/%m/%Y"
    PLACEHOLDER = "—"

    def __init__(self, timezone_name: str | None = None) -> None:
        """Initializes the provider.

        Args:
            timezone_name: An IANA timezone name. Defaults to the configured
                REFERENCE_TIMEZONE.
        """
        self.timezone = ZoneInfo(timezone_name or ConfigProvider.get_config().REFERENCE_TIMEZONE)

    def now(self) -> datetime:
        """Returns the current instant in the reference timezone.

        Returns:
            An aware datetime.
        """
        return datetime.now(self.timezone)

    def today(self) -> date:
        """Returns today's calendar date in the reference timezone.

        Returns:
            The current date, with no time-of-day component.
        """
        return self.now().date()

    @staticmethod
    def parse_calendar_date(value: date | datetime | str | None) -> date | None:
        """Parses a calendar date, ignoring any time or timezone component.

        Accepts `date` objects, `datetime` objects (their date part is kept)
        and strings starting with `YYYY-MM-DD`, such as ISO timestamps.

        Args:
            value: The value to parse.

        Returns:
            The parsed date, or None when the value is empty or malformed.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value

        match = _CALENDAR_DATE_PATTERN.match(str(value))
        if not match:
            return None
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    @classmethod
    def format_date(cls, value: date | datetime | str | None) -> str:
        """Formats a calendar date for display (dd/mm/yyyy).

        Args:
            value: The value to format.

        Returns:
            The formatted date, or a placeholder when the value is missing or
            malformed.
        """
        parsed = cls.parse_calendar_date(value)
        if parsed is None:
            return cls.PLACEHOLDER
        return parsed.strftime(cls.DISPLAY_FORMAT)
