import requests
import logging

import config

logger = logging.getLogger(__name__)

BASE_URL = "https://api.themoviedb.org/3"


def _get(path, params=None):
    api_key = config.TMDB_API_KEY
    if not api_key:
        raise RuntimeError("TMDB_API_KEY environment variable not set.")
    params = dict(params or {})
    params["api_key"] = api_key
    resp = requests.get(f"{BASE_URL}{path}", params=params, timeout=config.REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def find_by_imdb_id(imdb_id):
    return _get(f"/find/{imdb_id}", {"external_source": "imdb_id"})


def get_vote_average(media_type, imdb_id):
    """TMDb score as "x.x/10", or None when the title is unknown or unrated."""
    data = find_by_imdb_id(imdb_id)
    key = "tv_results" if media_type == "series" else "movie_results"
    results = data.get(key) or []
    if not results:
        logger.warning(f"No TMDb {key} for {imdb_id}")
        return None

    hit = results[0]
    if not hit.get("vote_count") or hit.get("vote_average") is None:
        return None
    return f"{float(hit['vote_average']):.1f}/10"
