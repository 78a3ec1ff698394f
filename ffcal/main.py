import asyncio
import logging

import uvicorn

from ffcal.config import load_settings
from ffcal.logging_config import setup_logging
from ffcal.providers import ForexFactoryProvider
from ffcal.utils.http import HttpClient, HttpPolicy
from ffcal.web.server import create_app

log = logging.getLogger("main")

async def main() -> None:
    s = load_settings()
    setup_logging(s.log_level)

    http = HttpClient(
        HttpPolicy(
            base_url=s.base_url,
            user_agent=s.user_agent,
            timeout_seconds=s.http_timeout_seconds,
        )
    )
    provider = ForexFactoryProvider(http, fallback_timezone=s.fallback_timezone)
    app = create_app(
        provider,
        display_timezone=s.display_timezone,
        news_batch_size=s.news_batch_size,
        news_batch_delay_ms=s.news_batch_delay_ms,
    )

    log.info("Serving %s on %s:%d", s.base_url, s.host, s.port)
    config = uvicorn.Config(app, host=s.host, port=s.port, log_level=s.log_level.lower())
    server = uvicorn.Server(config)
    try:
        await server.serve()
    finally:
        await http.aclose()

def run() -> None:
    asyncio.run(main())

if __name__ == "__main__":
    run()
