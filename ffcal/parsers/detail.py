from typing import Any

from ffcal.errors import MalformedResponse
from ffcal.models import EventDetail, EventHistory, EventHistoryItem, EventSpec

def normalize_event_detail(document: Any) -> EventDetail:
    """
    Reshape the site's snake_case detail payload:

        {"data": {"event_id": ..., "specs": [...], "history": {...},
                  "show_linked": ..., "linked_threads": [...]}}

    Every field is required. Empty lists are fine; missing keys or wrong
    container types raise MalformedResponse.
    """
    try:
        data = document["data"]
        history = data["history"]
        return EventDetail(
            event_id=int(data["event_id"]),
            specs=[
                EventSpec(order=s["order"], title=s["title"], html=s["html"])
                for s in data["specs"]
            ],
            history=EventHistory(
                has_data_values=history["has_data_values"],
                events=[
                    EventHistoryItem(
                        event_id=e["event_id"],
                        impact=e["impact"],
                        impact_class=e["impact_class"],
                        date=e["date"],
                        url=e["url"],
                        description=e["description"],
                    )
                    for e in history["events"]
                ],
                has_more=history["has_more"],
                can_show_more=history["can_show_more"],
            ),
            show_linked=data["show_linked"],
            linked_threads=data["linked_threads"],
        )
    except (KeyError, TypeError, ValueError) as ex:
        raise MalformedResponse(f"unexpected event detail shape: {ex!r}") from ex
