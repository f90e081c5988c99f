from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from sisparse.config import REQUEST_TIMEOUT, SIS_URL
from sisparse.errors import RetrievalError
from sisparse.model import EventGroup
from sisparse.parse import find_schedule_link, make_soup, schedule_events

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


def course_url(course_code: str) -> str:
    """
    Landing page of a course in the SIS "Subjects" module.
    """
    return SIS_URL % course_code


def absolute_url(base: str, relative: str) -> str:
    return urljoin(base, relative)


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def _fetch_soup(url: str, session: Any) -> BeautifulSoup:
    """
    Fetch a page and parse it; the response is closed on every exit path.
    """
    logger.debug("GET %s", url)
    try:
        with session.get(url, timeout=REQUEST_TIMEOUT) as resp:
            resp.raise_for_status()
            return make_soup(resp.content)
    except requests.RequestException as exc:
        raise RetrievalError(url, exc) from exc


def get_course_events(course_code: str, session: Optional[Any] = None) -> List[EventGroup]:
    """
    Return the timetable of one course as a list of event groups.

    Each group is a list of events which must be enrolled together; the
    groups represent different times/teachers of the same course. Lectures
    and seminars/practicals are in separate groups.

    `session` may be a requests.Session (or anything with the same `get`);
    the requests module is used by default.
    """
    http = session if session is not None else requests

    # Going from a course code straight to its schedule needs the faculty
    # number, so we open the course page first and follow its "Rozvrh" link.
    landing_url = course_url(course_code)
    relative = find_schedule_link(_fetch_soup(landing_url, http))
    schedule_url = absolute_url(landing_url, relative)

    groups = schedule_events(_fetch_soup(schedule_url, http))
    if not groups:
        logger.info("No schedule events for %s", course_code)
        return groups

    logger.info("Found %d event groups for %s", len(groups), course_code)
    return groups
