import logging
import re
from typing import Iterable

from bs4 import BeautifulSoup, Tag

from ffcal.models import CalendarDay, CalendarEvent, Impact
from ffcal.utils.timeutil import parse_time_to_utc, server_offset

log = logging.getLogger("parser.calendar")

TIMEZONE_RE = re.compile(r"timezone_name:\s*'([^']+)'")

# First substring hit wins.
IMPACT_PATTERNS: tuple[tuple[str, Impact], ...] = (
    ("icon--ff-impact-gra", "Non-Economic"),
    ("icon--ff-impact-yel", "Low"),
    ("icon--ff-impact-ora", "Medium"),
    ("icon--ff-impact-red", "High"),
)

ROW_SELECTOR = ".calendar__row"
IMPACT_SELECTOR = ".calendar__cell.calendar__impact > span"

def classify_impact(marker: str) -> Impact:
    for pattern, impact in IMPACT_PATTERNS:
        if pattern in marker:
            return impact
    return "Unknown"

def extract_server_timezone(text: str) -> str | None:
    m = TIMEZONE_RE.search(text or "")
    return m.group(1) if m else None

def _cell(row: Tag, selector: str) -> str:
    el = row.select_one(selector)
    return el.get_text(" ", strip=True) if el else ""

def _impact_marker(row: Tag) -> str:
    el = row.select_one(IMPACT_SELECTOR)
    if el is None:
        return ""
    classes = el.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)

def extract_events(rows: Iterable[Tag], offset_hours: int) -> list[tuple[str, CalendarEvent]]:
    """
    Rebuild full events from calendar rows.

    The site prints the date only on the first row of each day and the time
    only on the first row of each time slot, so both are carried forward
    through the whole pass. Rows without an id, a title or a known date are
    skipped.

    Returns (date, event) pairs in row order.
    """
    out: list[tuple[str, CalendarEvent]] = []
    last_date = ""
    last_time = ""

    for row in rows:
        event_id = (row.get("data-event-id") or "").strip()
        if not event_id:
            continue

        date = _cell(row, ".calendar__date")
        time = _cell(row, ".calendar__time")
        title = _cell(row, ".calendar__event-title")

        if date and date != last_date:
            last_date = date
        if time and time != last_time:
            last_time = time

        if not (last_date and title):
            continue

        out.append(
            (
                last_date,
                CalendarEvent(
                    event_id=event_id,
                    time=last_time,
                    currency=_cell(row, ".calendar__currency"),
                    title=title,
                    actual=_cell(row, ".calendar__actual"),
                    previous=_cell(row, ".calendar__previous"),
                    forecast=_cell(row, ".calendar__forecast"),
                    impact=classify_impact(_impact_marker(row)),
                    timestamp=parse_time_to_utc(last_time, last_date, offset_hours),
                ),
            )
        )

    return out

def group_by_day(dated_events: Iterable[tuple[str, CalendarEvent]]) -> list[CalendarDay]:
    """
    Stable grouping: days in first-seen order, events in extraction order.
    """
    buckets: dict[str, list[CalendarEvent]] = {}
    for date, event in dated_events:
        buckets.setdefault(date, []).append(event)
    return [CalendarDay(date=date, events=events) for date, events in buckets.items()]

def parse_calendar(html: str, *, fallback_timezone: str) -> tuple[str, list[CalendarDay]]:
    tz_name = extract_server_timezone(html)
    if tz_name is None:
        log.warning("Calendar page has no timezone_name; falling back to %s", fallback_timezone)
        tz_name = fallback_timezone

    soup = BeautifulSoup(html, "lxml")
    dated = extract_events(soup.select(ROW_SELECTOR), server_offset(tz_name))
    days = group_by_day(dated)

    log.info("Calendar: parsed %d events over %d days (tz=%s)", len(dated), len(days), tz_name)
    return tz_name, days
