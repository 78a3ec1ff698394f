import logging
from dataclasses import asdict
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from ffcal.errors import MalformedResponse, NetworkError, TimezoneUnresolved
from ffcal.providers.base import CalendarProvider
from ffcal.utils.timeutil import format_timestamp

log = logging.getLogger("web")

def _check_zone(tz_name: str) -> str:
    try:
        ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Unknown timezone: {tz_name}") from None
    return tz_name

def _error(status: int, ex: Exception) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": type(ex).__name__, "detail": str(ex)})

def create_app(
    provider: CalendarProvider,
    *,
    display_timezone: str = "Asia/Jakarta",
    news_batch_size: int = 5,
    news_batch_delay_ms: int = 500,
) -> FastAPI:
    app = FastAPI(title="ffcal")

    @app.exception_handler(NetworkError)
    async def network_error(_: Request, ex: NetworkError):
        log.warning("Upstream request failed: %s", ex)
        return _error(502, ex)

    @app.exception_handler(MalformedResponse)
    async def malformed(_: Request, ex: MalformedResponse):
        log.warning("Upstream returned an unexpected document: %s", ex)
        return _error(502, ex)

    @app.exception_handler(TimezoneUnresolved)
    async def tz_unresolved(_: Request, ex: TimezoneUnresolved):
        return _error(503, ex)

    @app.exception_handler(ValueError)
    async def bad_value(_: Request, ex: ValueError):
        return _error(400, ex)

    @app.get("/health")
    async def health():
        return {"ok": True}

    @app.get("/timezone")
    async def timezone():
        return {"timezone": await provider.server_timezone()}

    @app.get("/calendar")
    async def calendar(
        start: str | None = Query(None, alias="from"),
        end: str | None = Query(None, alias="to"),
        tz: str | None = Query(None, alias="timezone"),
    ) -> dict[str, Any]:
        tz_name = _check_zone(tz or display_timezone)
        result = await provider.fetch_calendar(start, end)

        payload = asdict(result)
        for day in payload["days"]:
            for event in day["events"]:
                event["local_time"] = format_timestamp(event["timestamp"], tz_name)
        payload["display_timezone"] = tz_name
        return payload

    @app.get("/calendar/{event_id}")
    async def calendar_event(event_id: int) -> dict[str, Any]:
        return asdict(await provider.fetch_event_detail(event_id))

    @app.get("/news")
    async def news(
        batch_size: int = Query(news_batch_size, ge=1),
        batch_delay_ms: int = Query(news_batch_delay_ms, ge=0),
    ) -> list[dict[str, Any]]:
        articles = await provider.fetch_news(batch_size=batch_size, batch_delay_ms=batch_delay_ms)
        return [asdict(a) for a in articles]

    return app
