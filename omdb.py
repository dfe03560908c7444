import requests
import logging

import config
from ratings import Rating, RatingSource

logger = logging.getLogger(__name__)

OMDB_URL = "https://www.omdbapi.com/"

# OMDb "Ratings" entries we map onto our sources
SOURCES_MAP = {
    "Rotten Tomatoes": RatingSource.RT,
    "Metacritic": RatingSource.MC,
}


def get_title(imdb_id):
    """Raw OMDb record for an IMDb id, or None when OMDb has nothing for it."""
    omdb_api_key = config.OMDB_API_KEY
    if not omdb_api_key:
        logger.error("OMDB API key not found in environment variables")
        return None

    response = requests.get(
        OMDB_URL,
        params={"i": imdb_id, "apikey": omdb_api_key, "r": "json"},
        timeout=config.REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    data = response.json()

    if data.get('Response') != 'True':
        logger.warning(f"No title found for IMDb ID: {imdb_id}")
        return None
    return data


def has_value(value):
    return bool(value) and str(value).strip().upper() != "N/A"


def extract_ratings(data):
    ratings = []
    if has_value(data.get('imdbRating')):
        ratings.append(Rating(RatingSource.IMDB, f"{data['imdbRating']}/10"))

    for item in data.get('Ratings') or []:
        source = SOURCES_MAP.get(item.get('Source'))
        if source and has_value(item.get('Value')):
            ratings.append(Rating(source, item['Value']))
    return ratings


def extract_certification(data):
    rated = data.get('Rated')
    if not has_value(rated):
        return None
    return Rating(RatingSource.CERTIFICATION, f"Rated {rated}")
