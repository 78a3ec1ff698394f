from ffcal.providers.base import CalendarProvider
from ffcal.providers.forexfactory import ForexFactoryProvider

__all__ = ["CalendarProvider", "ForexFactoryProvider"]
