# -*- coding: utf-8 -*-
"""
Time Utilities - Calendar and time-of-day conversions for CEOS fields.

CEOS dataset summary records carry times as fixed-width digit strings
in ``YYYYMMDDhhmmssttt`` layout (``ttt`` = milliseconds). These helpers
convert them to ``datetime`` objects and to seconds of day.

Author
------
ceosmeta developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from datetime import datetime, timedelta


def _field(text: str, start: int, length: int) -> int:
    chunk = text[start:start + length].strip()
    return int(chunk) if chunk else 0


def date_dssr2time(text: str) -> float:
    """Seconds of day from a ``YYYYMMDDhhmmssttt`` string.

    Only the time-of-day portion (characters 8-16) is decoded.

    Parameters
    ----------
    text : str
        DSSR time string.

    Returns
    -------
    float
        Seconds since midnight, with millisecond resolution.
    """
    hour = _field(text, 8, 2)
    minute = _field(text, 10, 2)
    sec = _field(text, 12, 2)
    msec = _field(text, 14, 3)
    return hour * 3600.0 + minute * 60.0 + sec + msec / 1000.0


def date_dssr2date(text: str) -> datetime:
    """Full UTC date and time from a ``YYYYMMDDhhmmssttt`` string.

    Parameters
    ----------
    text : str
        DSSR time string.

    Returns
    -------
    datetime
        Naive datetime (UTC).

    Raises
    ------
    ValueError
        If the date portion is not a valid calendar date.
    """
    day = datetime(_field(text, 0, 4), _field(text, 4, 2), _field(text, 6, 2))
    return day + timedelta(seconds=date_dssr2time(text))


def date_hms2sec(moment: datetime) -> float:
    """Seconds of day of a datetime."""
    return (moment.hour * 3600.0 + moment.minute * 60.0 + moment.second
            + moment.microsecond / 1e6)


def date_ymd2datetime(
    year: int, month: int, day: int, seconds_of_day: float,
) -> datetime:
    """Combine a calendar date and seconds of day into a datetime."""
    return datetime(year, month, day) + timedelta(seconds=seconds_of_day)


def seconds_between(later: datetime, earlier: datetime) -> float:
    """Signed difference ``later - earlier`` in seconds."""
    return (later - earlier).total_seconds()
