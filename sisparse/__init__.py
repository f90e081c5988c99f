"""
sisparse: course timetables from the Charles University SIS.

    from sisparse import get_course_events

    for group in get_course_events("NSWI177"):
        ...
"""

from pathlib import Path

from sisparse.errors import (
    DecodeError,
    NavigationError,
    RetrievalError,
    ScheduleLinkNotFoundError,
    SisParseError,
)
from sisparse.model import Event, EventGroup, WeekParity
from sisparse.parse import parse_course_events
from sisparse.scrape import get_course_events

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()

__all__ = [
    "__version__",
    "DecodeError",
    "Event",
    "EventGroup",
    "NavigationError",
    "RetrievalError",
    "ScheduleLinkNotFoundError",
    "SisParseError",
    "WeekParity",
    "get_course_events",
    "parse_course_events",
]
