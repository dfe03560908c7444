from bs4 import BeautifulSoup, FeatureNotFound
import re
from dataclasses import dataclass
import logging
from curl_cffi import requests

import config

logger = logging.getLogger(__name__)

# Create a session object
session = requests.Session()

# IMDb blocks non-browser agents on the parental guide page
IMPERSONATE = "chrome110"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/110.0.0.0 Safari/537.36"

# Label normalization table. Rules run in order and each one rewrites the
# label produced by the previous rule. Bump the version whenever IMDb renames
# a category and the table changes.
GUIDE_LABEL_RULES_VERSION = 1
GUIDE_LABEL_RULES = [
    (re.compile(r" & Gore$"), ""),
    (re.compile(r" & Nudity$"), ""),
    (re.compile(r", Drugs & Smoking$"), ""),
]


class GuideParseError(Exception):
    pass


@dataclass(frozen=True)
class GuideEntry:
    category: str
    severity: str


def parentsguide_url(tid):
    return f"{config.IMDB_BASE_URL}/title/{tid}/parentalguide"


def normalize_label(label):
    for pattern, replacement in GUIDE_LABEL_RULES:
        label = pattern.sub(replacement, label)
    return label.strip()


def fetch_url(url):
    response = session.get(
        url,
        headers={"User-Agent": USER_AGENT},
        impersonate=IMPERSONATE,
        timeout=config.REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    return response.text


def make_soup(html):
    try:
        return BeautifulSoup(html, 'lxml')
    except FeatureNotFound:
        return BeautifulSoup(html, 'html.parser')


def parse_parents_guide(html):
    """
    Turn a parental guide page into GuideEntry values.

    Rating items are matched on their data-testid attribute; a page without
    any rating item has no guide. Entries come back raw:
    labels are not normalized and "None" severities are kept.
    Raises GuideParseError when the document is empty.
    """
    if not html or not html.strip():
        raise GuideParseError("Empty document")

    soup = make_soup(html)

    items = soup.find_all("li", attrs={"data-testid": "rating-item"})
    logger.info(f"Found {len(items)} rating items")
    return [process_rating_item(item) for item in items]


def process_rating_item(item):
    label_node = item.find("a", class_="ipc-metadata-list-item__label")
    severity_node = item.find("div", class_="ipc-html-content-inner-div")
    label = label_node.get_text().strip() if label_node else ""
    severity = severity_node.get_text().strip() if severity_node else ""
    return GuideEntry(label.rstrip(":").strip(), severity)


def collapse_entries(entries):
    """Drop empty and "None" entries and key the rest by normalized label.

    Later entries win when two labels normalize to the same key.
    """
    sections = {}
    for entry in entries:
        if not entry.category or not entry.severity or entry.severity == "None":
            continue
        sections[normalize_label(entry.category)] = entry.severity
    return sections


def summarize_guide(entries):
    sections = collapse_entries(entries)
    text = " | ".join(f"{name}: {severity}" for name, severity in sections.items())
    return text or None


def get_parents_guide_summary(tid):
    """Parents guide summary for an IMDb id, or None when nothing usable was found."""
    pg_url = parentsguide_url(tid)
    logger.info(f"Fetching IMDb parents guide for {tid}")
    try:
        html = fetch_url(pg_url)
        entries = parse_parents_guide(html)
    except GuideParseError as e:
        logger.error(f"Failed to parse Parental Guide for {tid}: {e}")
        return None
    except Exception as e:
        logger.error(f"Failed to scrape Parental Guide for {tid}: {e}")
        return None

    summary = summarize_guide(entries)
    if summary is None:
        logger.info(f"No parents guide categories found for {tid}")
    return summary
