from abc import ABC, abstractmethod
from datetime import date, datetime

from ffcal.models import Article, CalendarResult, EventDetail

DateLike = date | datetime | str

class CalendarProvider(ABC):
    name: str

    @abstractmethod
    async def server_timezone(self) -> str:
        """
        Zone name the site renders times in.
        Raises TimezoneUnresolved when the page doesn't declare one.
        """
        raise NotImplementedError

    @abstractmethod
    async def fetch_calendar(self, start: DateLike | None = None, end: DateLike | None = None) -> CalendarResult:
        """
        Events in [start, end] grouped by display day.
        Without both bounds, the current Sunday-Saturday week is used.
        """
        raise NotImplementedError

    @abstractmethod
    async def fetch_event_detail(self, event_id: str | int) -> EventDetail:
        raise NotImplementedError

    @abstractmethod
    async def fetch_news(self, batch_size: int = 5, batch_delay_ms: int = 500) -> list[Article]:
        raise NotImplementedError
