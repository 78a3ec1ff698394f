class FFError(Exception):
    """Base error for everything raised by ffcal."""


class NetworkError(FFError):
    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedResponse(FFError):
    """The fetched document does not have the shape we expect."""


class TimezoneUnresolved(FFError):
    """The page carries no `timezone_name` declaration."""
