from dataclasses import dataclass, field
from typing import Any, Literal

Impact = Literal["High", "Medium", "Low", "Non-Economic", "Unknown"]

@dataclass(frozen=True)
class CalendarEvent:
    # data-event-id of the source row, unique within one fetch
    event_id: str

    # display time in server zone: "1:30am", "Tentative", "All Day", "Day 1"
    time: str
    currency: str
    title: str

    # empty until released
    actual: str
    previous: str
    forecast: str

    impact: Impact

    # UTC millis, 0 when the event has no specific time
    timestamp: int

@dataclass(frozen=True)
class CalendarDay:
    # display date used as grouping key, e.g. "Mon Jan 6"
    date: str
    events: list[CalendarEvent] = field(default_factory=list)

@dataclass(frozen=True)
class CalendarResult:
    server_timezone: str
    days: list[CalendarDay]

    # range bounds in site format, e.g. "jan5.2025"
    from_date: str
    to_date: str

@dataclass(frozen=True)
class EventSpec:
    order: int
    title: str
    html: str

@dataclass(frozen=True)
class EventHistoryItem:
    event_id: int
    impact: str
    impact_class: str
    date: str
    url: str
    description: str

@dataclass(frozen=True)
class EventHistory:
    has_data_values: bool
    events: list[EventHistoryItem]
    has_more: bool
    can_show_more: bool

@dataclass(frozen=True)
class EventDetail:
    event_id: int
    specs: list[EventSpec]
    history: EventHistory
    show_linked: bool
    linked_threads: Any

@dataclass(frozen=True)
class Article:
    # path on the site, e.g. "/news/1234567-gold-climbs"
    url: str
    title: str
    content: str

    # e.g. "fxstreet.com"
    source: str
    source_url: str
    image: str | None = None
