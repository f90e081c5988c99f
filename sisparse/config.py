"""
Fixed constants used when talking to SIS (Studijní informační systém).

The values below must match the live site exactly:
- the course landing page URL (hardcoded academic year 2018, term 1)
- the text of the link leading to the schedule
- the id of the schedule table and the class of its header row
- the Czech day abbreviations and the odd-weeks marker
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

SIS_URL = "https://is.cuni.cz/studium/predmety/index.php?do=predmet&kod=%s&skr=2018&sem=1"


# ---------------------------------------------------------------------------
# Page markers
# ---------------------------------------------------------------------------

SCHEDULE_LINK_TEXT = "Rozvrh"
EVENT_TABLE_ID = "table1"
HEADER_ROW_CLASS = "head1"


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

# Monday..Friday, index == day number
DAY_TOKENS = ("Po", "Út", "St", "Čt", "Pá")

# e.g. "240 Liché týdny (sudé kalendářní)"
ODD_WEEKS_MARKER = "Liché"


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

# same value for every request; no retries
REQUEST_TIMEOUT = 30
