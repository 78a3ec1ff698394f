import os
from dataclasses import dataclass
from dotenv import load_dotenv

from ffcal.utils.http import DEFAULT_BASE_URL

def _get_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {v!r}") from None

def _get_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {v!r}") from None

@dataclass(frozen=True)
class Settings:
    base_url: str
    user_agent: str
    http_timeout_seconds: float

    # used when the calendar page doesn't declare timezone_name
    fallback_timezone: str
    # zone for the human-readable times served over HTTP
    display_timezone: str

    news_batch_size: int
    news_batch_delay_ms: int

    host: str
    port: int
    log_level: str

def load_settings() -> Settings:
    load_dotenv()

    batch_size = _get_int("NEWS_BATCH_SIZE", 5)
    if batch_size < 1:
        raise RuntimeError("NEWS_BATCH_SIZE must be at least 1")

    batch_delay_ms = _get_int("NEWS_BATCH_DELAY_MS", 500)
    if batch_delay_ms < 0:
        raise RuntimeError("NEWS_BATCH_DELAY_MS must not be negative")

    return Settings(
        base_url=os.getenv("FF_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL,
        user_agent=os.getenv("FF_USER_AGENT", "Mozilla/5.0 (compatible; ffcal/1.0)"),
        http_timeout_seconds=_get_float("FF_HTTP_TIMEOUT_SECONDS", 20.0),
        fallback_timezone=os.getenv("FF_FALLBACK_TIMEZONE", "America/New_York"),
        display_timezone=os.getenv("FF_DISPLAY_TIMEZONE", "Asia/Jakarta"),
        news_batch_size=batch_size,
        news_batch_delay_ms=batch_delay_ms,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 8080),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
