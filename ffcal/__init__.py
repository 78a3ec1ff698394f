from ffcal.errors import FFError, MalformedResponse, NetworkError, TimezoneUnresolved
from ffcal.providers import ForexFactoryProvider
from ffcal.utils.http import HttpClient, HttpPolicy
from ffcal.utils.timeutil import format_timestamp

__all__ = [
    "FFError",
    "ForexFactoryProvider",
    "HttpClient",
    "HttpPolicy",
    "MalformedResponse",
    "NetworkError",
    "TimezoneUnresolved",
    "format_timestamp",
]
