import copy

import httpx
import pytest

from ffcal.utils.http import HttpClient, HttpPolicy

BASE_URL = "https://ff.test"

CALENDAR_HTML = """
<html>
<head>
<script>
  window.FF = { settings: { timezone_name: 'America/New_York', timeformat: '12h' } };
</script>
</head>
<body>
<table class="calendar__table">
  <tr class="calendar__row calendar__row--day-breaker">
    <td class="calendar__cell" colspan="8"><span>Mon <span>Jan 6</span></span></td>
  </tr>
  <tr class="calendar__row calendar__row--new-day" data-event-id="141001">
    <td class="calendar__cell calendar__date"><span class="date">Mon <span>Jan 6</span></span></td>
    <td class="calendar__cell calendar__time"><div>1:00am</div></td>
    <td class="calendar__cell calendar__currency">EUR</td>
    <td class="calendar__cell calendar__impact"><span class="icon icon--ff-impact-red" title="High Impact Expected"></span></td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title">German Prelim CPI m/m</span></td>
    <td class="calendar__cell calendar__actual">0.4%</td>
    <td class="calendar__cell calendar__forecast">0.3%</td>
    <td class="calendar__cell calendar__previous">-0.2%</td>
  </tr>
  <tr class="calendar__row" data-event-id="141002">
    <td class="calendar__cell calendar__date"></td>
    <td class="calendar__cell calendar__time"></td>
    <td class="calendar__cell calendar__currency">USD</td>
    <td class="calendar__cell calendar__impact"><span class="icon icon--ff-impact-ora"></span></td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title">ISM Services PMI</span></td>
    <td class="calendar__cell calendar__actual"></td>
    <td class="calendar__cell calendar__forecast">53.3</td>
    <td class="calendar__cell calendar__previous">52.1</td>
  </tr>
  <tr class="calendar__row" data-event-id="141003">
    <td class="calendar__cell calendar__date"></td>
    <td class="calendar__cell calendar__time">All Day</td>
    <td class="calendar__cell calendar__currency">JPY</td>
    <td class="calendar__cell calendar__impact"><span class="icon icon--ff-impact-gra"></span></td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title">Bank Holiday</span></td>
    <td class="calendar__cell calendar__actual"></td>
    <td class="calendar__cell calendar__forecast"></td>
    <td class="calendar__cell calendar__previous"></td>
  </tr>
  <tr class="calendar__row calendar__row--new-day" data-event-id="141004">
    <td class="calendar__cell calendar__date"><span class="date">Tue <span>Jan 7</span></span></td>
    <td class="calendar__cell calendar__time">8:30pm</td>
    <td class="calendar__cell calendar__currency">AUD</td>
    <td class="calendar__cell calendar__impact"><span class="icon icon--ff-impact-yel"></span></td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title">Building Approvals m/m</span></td>
    <td class="calendar__cell calendar__actual"></td>
    <td class="calendar__cell calendar__forecast">-1.1%</td>
    <td class="calendar__cell calendar__previous">4.2%</td>
  </tr>
  <tr class="calendar__row calendar__row--ad">
    <td class="calendar__cell calendar__date">Wed Jan 8</td>
    <td class="calendar__cell calendar__time">9:00am</td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title">Sponsored</span></td>
  </tr>
  <tr class="calendar__row" data-event-id="141005">
    <td class="calendar__cell calendar__date"></td>
    <td class="calendar__cell calendar__time">Tentative</td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title"></span></td>
  </tr>
  <tr class="calendar__row" data-event-id="141006">
    <td class="calendar__cell calendar__date"></td>
    <td class="calendar__cell calendar__time"></td>
    <td class="calendar__cell calendar__currency">CNY</td>
    <td class="calendar__cell calendar__impact"><span class="icon"></span></td>
    <td class="calendar__cell calendar__event"><span class="calendar__event-title">Trade Balance</span></td>
    <td class="calendar__cell calendar__actual"></td>
    <td class="calendar__cell calendar__forecast"></td>
    <td class="calendar__cell calendar__previous"></td>
  </tr>
</table>
</body>
</html>
"""

HOME_HTML = """
<html><head><script>var cfg = {timezone_name: 'Asia/Singapore'};</script></head><body></body></html>
"""

DETAIL_DOCUMENT = {
    "data": {
        "event_id": 141001,
        "specs": [
            {"order": 1, "title": "Source", "html": "<a href=\"https://destatis.de\">Destatis</a>"},
            {"order": 2, "title": "Measures", "html": "Change in the price of goods and services"},
        ],
        "history": {
            "has_data_values": True,
            "events": [
                {
                    "event_id": 139876,
                    "impact": "High",
                    "impact_class": "icon--ff-impact-red",
                    "date": "Dec 2, 2024",
                    "url": "/calendar?day=dec2.2024#detail=139876",
                    "description": "German Prelim CPI m/m",
                },
                {
                    "event_id": 138001,
                    "impact": "High",
                    "impact_class": "icon--ff-impact-red",
                    "date": "Nov 1, 2024",
                    "url": "/calendar?day=nov1.2024#detail=138001",
                    "description": "German Prelim CPI m/m",
                },
            ],
            "has_more": True,
            "can_show_more": False,
        },
        "show_linked": False,
        "linked_threads": [],
    }
}

NEWS_LISTING_HTML = """
<html><body>
  <a href="/news/1300001-gold-climbs-to-record">Gold climbs</a>
  <a href="/news/1300002-dollar-slips">Dollar slips</a>
  <a href="/news/1300001-gold-climbs-to-record">Gold climbs (again)</a>
  <a href="/news/1300003-ecb-holds">ECB holds</a>
  <a href="/news">All news</a>
  <a href="/news/latest">Latest</a>
  <a href="https://example.com/news/1300004-external">External</a>
</body></html>
"""

def news_article_html(title: str, *, image: str | None = None) -> str:
    img = f'<div class="news__image"><img src="{image}"></div>' if image else ""
    return f"""
<html><body>
<div class="news__article">
  <h1>{title}</h1>
  <div class="news__caption">From <a data-story-source="fxstreet.com" href="https://www.fxstreet.com/news/{title.lower().replace(' ', '-')}">fxstreet.com</a></div>
  {img}
  <div class="news__copy">{title} according to <a href="/x">analysts</a>.<span class="nowrap"> | 3 comments</span></div>
</div>
</body></html>
"""

@pytest.fixture
def detail_document():
    return copy.deepcopy(DETAIL_DOCUMENT)

def make_http(handler) -> HttpClient:
    return HttpClient(HttpPolicy(base_url=BASE_URL), transport=httpx.MockTransport(handler))
