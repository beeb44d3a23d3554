"""Time sources for timestamping writers."""

from datetime import datetime
from typing import Callable, Optional

import pytz
from dateutil import parser as date_parser

from surrogate.config.settings import get_settings

EASTERN_TZ = pytz.timezone("US/Eastern")

Clock = Callable[[], datetime]


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def parse_datetime(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string into an aware datetime.

    If no timezone is provided in the string, assumes US/Eastern.
    The offset of the string is preserved otherwise.
    """
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        tz = default_tz or EASTERN_TZ
        dt = tz.localize(dt)
    return dt


def frozen_clock(instant: datetime) -> Clock:
    """Return a clock that always reports the same instant."""

    def clock() -> datetime:
        return instant

    return clock


def get_clock() -> Clock:
    """Return the configured clock: frozen if `frozen_time` is set, else live."""
    settings = get_settings()
    if settings.frozen_time:
        return frozen_clock(parse_datetime(settings.frozen_time))
    return now_eastern


def format_timestamp(dt: datetime, fmt: Optional[str] = None) -> str:
    """Format an instant; ISO-8601 to the second when no pattern is given."""
    if fmt:
        return dt.strftime(fmt)
    return dt.isoformat(timespec="seconds")
