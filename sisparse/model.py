"""
Central data model definitions used across the project.

An Event is one weekly timetable slot of a course (lecture, seminar, ...).
Events that must be enrolled together form an EventGroup; a course schedule
is a list of such groups in the order they appear on the SIS page.

"No event" is always expressed as None, never as an empty Event.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import IntEnum
from typing import Any, Dict, List


class WeekParity(IntEnum):
    EVERY = 0
    ODD = 1
    EVEN = 2


@dataclass
class Event:
    """
    Represents one scheduled occurrence of a course activity.

    `day` is 0..4 (Monday..Friday). Times carry no date component.
    """

    type: str
    name: str
    teacher: str
    day: int
    time_from: time
    time_to: time
    week_parity: WeekParity = WeekParity.EVERY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "teacher": self.teacher,
            "day": self.day,
            "time_from": self.time_from.strftime("%H:%M"),
            "time_to": self.time_to.strftime("%H:%M"),
            "week_parity": int(self.week_parity),
        }


EventGroup = List[Event]


def groups_to_dicts(groups: List[EventGroup]) -> List[List[Dict[str, Any]]]:
    """
    Convert grouped events into plain JSON-ready structures.
    """
    return [[ev.to_dict() for ev in group] for group in groups]
