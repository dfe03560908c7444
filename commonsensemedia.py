import requests
from bs4 import BeautifulSoup
import re
import logging

import config

logger = logging.getLogger(__name__)

BASE_URL = "https://www.commonsensemedia.org"


def review_url(videoName, media_type="movie"):
    section = "tv-reviews" if media_type == "series" else "movie-reviews"
    slug = re.sub(r"[^a-z0-9]+", "-", videoName.lower().replace("'", "")).strip("-")
    return f"{BASE_URL}/{section}/{slug}"


def parse_age(html):
    soup = BeautifulSoup(html, "html.parser")
    age_tag = soup.find("span", {"class": "rating__age"})
    if not age_tag:
        return None
    age = age_tag.text.strip()
    # "age 14+" -> "14+"
    return re.sub(r"^age\s*", "", age, flags=re.IGNORECASE) or None


def get_age_rating(videoName, media_type="movie"):
    """Recommended age from the Common Sense Media review page, None when there is no review."""
    movie_url = review_url(videoName, media_type)
    logger.info(f"CommonSenseMedia trying .. {movie_url}")
    response = requests.get(movie_url, timeout=config.REQUEST_TIMEOUT)

    if response.status_code == 404:
        logger.warning(f"No Common Sense Media review for {videoName}")
        return None
    response.raise_for_status()
    return parse_age(response.text)
