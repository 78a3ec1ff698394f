import re

from bs4 import BeautifulSoup

from ffcal.models import Article

# /news/{number}-{slug}
NEWS_PATH_RE = re.compile(r"^/news/\d+-[\w-]+$")

def extract_news_urls(html: str) -> list[str]:
    soup = BeautifulSoup(html, "lxml")
    urls: list[str] = []
    for a in soup.select("a[href]"):
        href = a["href"]
        if NEWS_PATH_RE.match(href) and href not in urls:
            urls.append(href)
    return urls

def parse_news_article(url: str, html: str) -> Article:
    soup = BeautifulSoup(html, "lxml")
    article = soup.select_one(".news__article")
    if article is None:
        return Article(url=url, title="", content="", source="", source_url="")

    h1 = article.select_one("h1")
    title = h1.get_text(strip=True) if h1 else ""

    source_link = article.select_one(".news__caption a")
    source = source_link.get("data-story-source", "") if source_link else ""
    source_url = source_link.get("href", "") if source_link else ""

    img = article.select_one(".news__image img")
    image = (img.get("src") or None) if img else None

    content = ""
    copy = article.select_one(".news__copy")
    if copy is not None:
        # inline links and the trailing "nowrap" byline are noise
        for el in copy.select("a, span.nowrap"):
            el.decompose()
        content = copy.get_text().strip()

    return Article(url=url, title=title, content=content, source=source, source_url=source_url, image=image)
