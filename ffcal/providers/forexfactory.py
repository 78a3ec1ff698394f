import logging
from datetime import datetime

from ffcal.errors import TimezoneUnresolved
from ffcal.models import Article, CalendarResult, EventDetail
from ffcal.parsers.calendar import extract_server_timezone, parse_calendar
from ffcal.parsers.detail import normalize_event_detail
from ffcal.parsers.news import extract_news_urls, parse_news_article
from ffcal.providers.base import CalendarProvider, DateLike
from ffcal.services.batch import fetch_in_batches
from ffcal.utils.http import HttpClient
from ffcal.utils.timeutil import format_timestamp, to_ff_date, week_bounds

log = logging.getLogger("provider.forexfactory")

class ForexFactoryProvider(CalendarProvider):
    """
    Scrapes the ForexFactory calendar, event details and news.

    NOTE: times on the calendar page are rendered in the site's server zone,
    which is declared in the page source as `timezone_name: '...'`.
    """

    name = "FOREXFACTORY"

    def __init__(self, http: HttpClient, *, fallback_timezone: str = "America/New_York") -> None:
        self.http = http
        self.fallback_timezone = fallback_timezone

    async def server_timezone(self) -> str:
        text = await self.http.get_text("/")
        tz_name = extract_server_timezone(text)
        if tz_name is None:
            raise TimezoneUnresolved("Timezone not found in response")
        return tz_name

    async def fetch_calendar(self, start: DateLike | None = None, end: DateLike | None = None) -> CalendarResult:
        if start is not None and end is not None:
            from_date, to_date = to_ff_date(start), to_ff_date(end)
        else:
            week_start, week_end = week_bounds(datetime.now())
            from_date, to_date = to_ff_date(week_start), to_ff_date(week_end)

        html = await self.http.get_text(f"/calendar?range={from_date}-{to_date}")
        tz_name, days = parse_calendar(html, fallback_timezone=self.fallback_timezone)

        return CalendarResult(server_timezone=tz_name, days=days, from_date=from_date, to_date=to_date)

    async def fetch_event_detail(self, event_id: str | int) -> EventDetail:
        document = await self.http.get_json(f"/calendar/details/1-{event_id}")
        return normalize_event_detail(document)

    async def fetch_news(self, batch_size: int = 5, batch_delay_ms: int = 500) -> list[Article]:
        """
        Fetch the news listing, then every linked article in paced batches so
        the site isn't hit with all requests at once.
        """
        listing = await self.http.get_text("/news")
        urls = extract_news_urls(listing)
        log.info("News: found %d article links", len(urls))

        return await fetch_in_batches(
            urls,
            self.fetch_news_article,
            batch_size=batch_size,
            delay_ms=batch_delay_ms,
        )

    async def fetch_news_article(self, url: str) -> Article:
        html = await self.http.get_text(url)
        return parse_news_article(url, html)

    @staticmethod
    def format_timestamp(timestamp_ms: int, tz_name: str) -> str:
        return format_timestamp(timestamp_ms, tz_name)
