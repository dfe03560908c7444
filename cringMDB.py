import requests
from bs4 import BeautifulSoup
import re
import logging

import config

logger = logging.getLogger(__name__)

BASE_URL = 'https://cringemdb.com'

FLAG_EMOJIS = {
    "Sex Scene": "🔞",
    "Nudity": "👁️‍🗨️",
    "Sexual Violence": "⛔",
}


def clean_name(name):
    name = re.sub(r'\(\d*\)', '', name)
    return re.sub(r'[^a-z0-9 ]', '', name.lower()).strip()


def find_slug(videoName):
    term = videoName.replace(":", "").strip()
    r = requests.get(f'{BASE_URL}/search', params={"term": term}, timeout=config.REQUEST_TIMEOUT)
    r.raise_for_status()

    wanted = clean_name(videoName)
    for res in r.json() or []:
        if clean_name(res.get("movie", "")) == wanted:
            return res.get("slug")
    return None


def parse_flags(html):
    """Warnings flagged "yes" on a CringeMDB movie page, in page order."""
    soup = BeautifulSoup(html, "html.parser")
    sections_soup = soup.find("div", {"class": "content-warnings"})
    if not sections_soup:
        return None

    flagged = []
    for sec in sections_soup.find_all("div", {"class": "content-flag"}):
        if not sec.h3 or not sec.h4:
            continue
        if sec.h4.text.lower().strip() == "yes":
            flagged.append(sec.h3.text.strip())
    return flagged


def format_flags(flagged):
    if not flagged:
        return "✅ Parent Safe"
    lines = ["⚠️ Not Parent Safe"]
    for name in flagged:
        lines.append(f"{FLAG_EMOJIS.get(name, '⚠️')} {name}")
    return "\n".join(lines)


def get_content_flags(videoName):
    """Multi-line CringeMDB verdict for a title, None when CringeMDB does not list it."""
    slug = find_slug(videoName)
    if not slug:
        logger.warning(f"No CringeMDB match for {videoName}")
        return None

    movie_url = f'{BASE_URL}/movie/{slug}'
    logger.info(f"CringeMDB trying .. {movie_url}")
    r = requests.get(movie_url, timeout=config.REQUEST_TIMEOUT)
    r.raise_for_status()

    flagged = parse_flags(r.text)
    if flagged is None:
        logger.warning(f"No content warnings section on {movie_url}")
        return None
    return format_flags(flagged)
