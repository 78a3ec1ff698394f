import logging
import re
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from dateutil import parser as dateparser

log = logging.getLogger("timeutil")

# Whole-hour UTC offsets, standard time only (no DST rules).
TIMEZONE_OFFSETS: dict[str, int] = {
    "Asia/Jakarta": 7,
    "Asia/Singapore": 8,
    "Asia/Tokyo": 9,
    "Asia/Hong_Kong": 8,
    "Asia/Shanghai": 8,
    "Asia/Seoul": 9,
    "Asia/Bangkok": 7,
    "Asia/Dubai": 4,
    "Europe/London": 0,
    "Europe/Paris": 1,
    "Europe/Berlin": 1,
    "Europe/Moscow": 3,
    "Europe/Zurich": 1,
    "America/New_York": -5,
    "America/Chicago": -6,
    "America/Los_Angeles": -8,
    "America/Toronto": -5,
    "Australia/Sydney": 11,
    "Pacific/Auckland": 13,
}

MONTH_MAP = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}
MONTH_ABBR = [m.lower() for m in MONTH_MAP]

# "1:10am", "11:45PM"
CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})(am|pm)", re.IGNORECASE)

def server_offset(tz_name: str) -> int:
    if tz_name not in TIMEZONE_OFFSETS:
        log.warning("No offset known for zone %r; assuming UTC", tz_name)
        return 0
    return TIMEZONE_OFFSETS[tz_name]

def is_unscheduled(time_str: str) -> bool:
    return not time_str or time_str in ("Tentative", "All Day") or time_str.startswith("Day")

def parse_time_to_utc(time_str: str, date_str: str, offset_hours: int, *, year: int | None = None) -> int:
    """
    Turn a display time ("3:30pm") and display date ("Mon Jan 6") shown in the
    server zone into UTC epoch millis.

    The page never shows a year, so the current year is assumed. Anything that
    can't be read returns 0, which means "no specific time", never the epoch.
    """
    if is_unscheduled(time_str):
        return 0

    m = CLOCK_RE.search(time_str)
    if not m:
        return 0

    hour = int(m.group(1))
    minute = int(m.group(2))
    period = m.group(3).lower()
    if hour > 12 or minute > 59:
        return 0

    if period == "pm" and hour != 12:
        hour += 12
    if period == "am" and hour == 12:
        hour = 0

    parts = date_str.split()
    if len(parts) < 3:
        return 0

    month = MONTH_MAP.get(parts[1])
    if month is None or not parts[2].isdigit():
        return 0

    if year is None:
        year = datetime.now().year

    try:
        local = datetime(year, month, int(parts[2]), hour, minute, tzinfo=timezone.utc)
    except ValueError:
        return 0

    # server time = UTC + offset
    utc = local - timedelta(hours=offset_hours)
    return int(utc.timestamp()) * 1000

def format_timestamp(timestamp_ms: int, tz_name: str) -> str:
    """
    Render UTC millis in tz_name the way en-US locales do: "1/6/2024, 11:00:00 PM".
    """
    if timestamp_ms == 0:
        return "N/A"
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=ZoneInfo(tz_name))
    hour12 = dt.hour % 12 or 12
    period = "PM" if dt.hour >= 12 else "AM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour12}:{dt.minute:02d}:{dt.second:02d} {period}"

def to_ff_date(value: date | datetime | str) -> str:
    """
    Site range format: dec19.2025
    """
    if isinstance(value, str):
        try:
            value = dateparser.parse(value)
        except (ValueError, OverflowError) as ex:
            raise ValueError(f"Invalid date string: {value}") from ex
    elif not isinstance(value, date):
        raise ValueError("Date must be a date, datetime or string")

    month = MONTH_ABBR[value.month - 1]
    return f"{month}{value.day}.{value.year}"

def week_bounds(anchor: datetime) -> tuple[datetime, datetime]:
    """
    Returns [Sun 00:00, Sat 23:59:59.999999] around anchor, in anchor's own clock.
    """
    # Monday=0 ... Sunday=6
    days_since_sunday = (anchor.weekday() + 1) % 7
    start = (anchor - timedelta(days=days_since_sunday)).replace(hour=0, minute=0, second=0, microsecond=0)
    end = (start + timedelta(days=6)).replace(hour=23, minute=59, second=59, microsecond=999999)
    return start, end
