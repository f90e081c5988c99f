"""
Decoding of SIS schedule tokens.

SIS renders scheduling information as short Czech strings:
- day + start time, e.g. "Út 12:20"
- duration in minutes with an optional week parity, e.g. "90" or
  "240 Liché týdny (sudé kalendářní)"

Every function raises a DecodeError subclass on unexpected input.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Tuple

from sisparse.config import DAY_TOKENS, ODD_WEEKS_MARKER
from sisparse.errors import MalformedDurationError, MalformedTimeError, UnknownDayError
from sisparse.model import WeekParity

_REFERENCE_DATE = date(2000, 1, 1)

TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}")


def decode_day(token: str) -> int:
    """
    Map a day abbreviation ("Po".."Pá") to 0..4.
    """
    try:
        return DAY_TOKENS.index(token)
    except ValueError:
        raise UnknownDayError(token) from None


def decode_time_of_day(token: str) -> time:
    """
    Parse 'HH:MM' into a time of day.

    The hour may have one digit, the minutes always have two.
    """
    if not TIME_PATTERN.fullmatch(token):
        raise MalformedTimeError(token)
    try:
        return datetime.strptime(token, "%H:%M").time()
    except ValueError:
        raise MalformedTimeError(token) from None


def decode_day_and_time(token: str) -> Tuple[int, time]:
    """
    Split a day+time cell such as "Út 12:20" into (day index, start time).
    """
    # the day is always the first two characters, the time follows a separator
    return decode_day(token[:2]), decode_time_of_day(token[3:])


def decode_duration_and_parity(token: str) -> Tuple[int, WeekParity]:
    """
    Parse "90" or "240 Liché týdny ..." into (minutes, week parity).

    Any second word other than the odd-weeks marker means even weeks.
    """
    fields = token.split()
    if not fields:
        raise MalformedDurationError(token)
    try:
        minutes = int(fields[0])
    except ValueError:
        raise MalformedDurationError(token) from None

    parity = WeekParity.EVERY
    if len(fields) > 1:
        parity = WeekParity.ODD if fields[1] == ODD_WEEKS_MARKER else WeekParity.EVEN
    return minutes, parity


def add_minutes(start: time, minutes: int) -> time:
    """
    Wall-clock addition; wraps around midnight.
    """
    return (datetime.combine(_REFERENCE_DATE, start) + timedelta(minutes=minutes)).time()
