"""
Parsing (SIS HTML -> grouped events).

- Finds the "Rozvrh" link on a course landing page
- Finds the rows of the schedule table on the schedule page
- Turns each row into at most ONE event
- Reconstructs event groups from the row order

Important rules (DO NOT CHANGE):
- Rows with an empty teacher column are not events (headers, spacers)
- A non-empty name starts a new group
- Rows without a name continue the current group and inherit its name/teacher
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from sisparse.config import EVENT_TABLE_ID, HEADER_ROW_CLASS, SCHEDULE_LINK_TEXT
from sisparse.decode import add_minutes, decode_day_and_time, decode_duration_and_parity
from sisparse.errors import MalformedRowError, OrphanRowError, ScheduleLinkNotFoundError
from sisparse.model import Event, EventGroup


# ---------------------------------------------------------------------------
# Page navigation
# ---------------------------------------------------------------------------


def make_soup(html: Union[str, bytes]) -> BeautifulSoup:
    # HTML5 tree building: optional end tags and the implicit <tbody> are
    # handled the same way a browser does
    return BeautifulSoup(html, "html5lib")


def find_schedule_link(soup: BeautifulSoup) -> str:
    """
    Return the href of the first <a> whose text is exactly "Rozvrh".
    """
    link = soup.find(lambda tag: tag.name == "a" and tag.get_text(" ", strip=True) == SCHEDULE_LINK_TEXT)
    if link is None:
        raise ScheduleLinkNotFoundError()

    href = link.get("href")
    if not href:
        raise ScheduleLinkNotFoundError()
    return href


def _is_event_table(tag: Optional[Tag]) -> bool:
    return tag is not None and tag.get("id") == EVENT_TABLE_ID


def _is_event_row(tag: Tag) -> bool:
    if tag.name != "tr":
        return False
    # ignore table header (exact class value only)
    if " ".join(tag.get("class") or []) == HEADER_ROW_CLASS:
        return False

    parent = tag.parent
    return parent is not None and _is_event_table(parent.parent)


def find_event_table(soup: BeautifulSoup) -> List[Tag]:
    """
    Return the data rows of the schedule table.

    An empty list means the table is not present at all (e.g. SIS shows an
    error message or the schedule is not published yet).
    """
    return soup.find_all(_is_event_row)


# ---------------------------------------------------------------------------
# Row parsing
# ---------------------------------------------------------------------------


def row_cells(row: Tag) -> List[str]:
    """
    Extract the text of every cell of a table row.

    Empty cells are kept so that column positions stay stable; only the
    whitespace between cells is dropped.
    """
    cells: List[str] = []
    for child in row.children:
        if isinstance(child, Tag):
            cells.append(child.get_text(" ", strip=True))
        elif isinstance(child, NavigableString) and not isinstance(child, Comment):
            text = child.strip()
            if text:
                cells.append(text)
    return cells


class ScheduleRow(NamedTuple):
    """
    The columns of one schedule table row that we care about.

    Columns 0 (event code) and 5 (room) are not used.
    """

    type: str
    name: str
    teacher: str
    day_time: str
    duration: str

    @classmethod
    def from_cells(cls, cells: Sequence[str]) -> "ScheduleRow":
        if len(cells) < 4:
            raise MalformedRowError(list(cells), 4)

        teacher = cells[3]
        if not teacher:
            # not an event row; scheduling columns are irrelevant
            return cls(cells[1], cells[2], teacher, "", "")

        if len(cells) < 7:
            raise MalformedRowError(list(cells), 7)
        return cls(cells[1], cells[2], teacher, cells[4], cells[6])


def parse_event(cells: Sequence[str]) -> Optional[Event]:
    """
    Parse one row into an Event, or None if the row is not an event.
    """
    row = ScheduleRow.from_cells(cells)
    if not row.teacher:
        return None

    day, time_from = decode_day_and_time(row.day_time)
    minutes, parity = decode_duration_and_parity(row.duration)

    return Event(
        type=row.type,
        name=row.name,
        teacher=row.teacher,
        day=day,
        time_from=time_from,
        time_to=add_minutes(time_from, minutes),
        week_parity=parity,
    )


# ---------------------------------------------------------------------------
# Grouping (CORE LOGIC)
# ---------------------------------------------------------------------------


def group_events(rows: Iterable[Sequence[str]]) -> List[EventGroup]:
    """
    Group the events of consecutive rows.

    Names are omitted in all but the first event of a group, so a non-empty
    name marks the start of a new group.
    """
    groups: List[EventGroup] = []
    group: EventGroup = []

    for cells in rows:
        event = parse_event(cells)
        if event is None:
            continue

        if event.name:
            if group:
                groups.append(group)
            group = []
        else:
            if not group:
                raise OrphanRowError()
            # add the missing fields based on the group's first event
            event.name = group[0].name
            event.teacher = group[0].teacher

        group.append(event)

    if group:
        groups.append(group)
    return groups


def schedule_events(soup: BeautifulSoup) -> List[EventGroup]:
    """
    Event groups of an already parsed schedule page ([] if it has no table).
    """
    return group_events(row_cells(row) for row in find_event_table(soup))


def parse_course_events(html: Union[str, bytes]) -> List[EventGroup]:
    """
    Parse a schedule page into event groups.
    """
    return schedule_events(make_soup(html))
