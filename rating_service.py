import logging

import cringMDB
import commonsensemedia
import omdb
import tmdb
from ratings import Rating, RatingSource

logger = logging.getLogger(__name__)


def get_ratings(media_type, imdb_id):
    """
    Collect every rating we can find for an IMDb id.

    Each provider is tried on its own; a provider that fails is logged and
    skipped so the others still contribute. Common Sense Media and CringeMDB
    look titles up by name, so they only run when OMDb knows the title.
    Raises ValueError for ids that are not IMDb title ids.
    """
    if not imdb_id or not imdb_id.startswith("tt"):
        raise ValueError(f"Not an IMDb title id: {imdb_id!r}")

    ratings = []
    certification = None
    title = None

    try:
        data = omdb.get_title(imdb_id)
        if data:
            title = data.get("Title")
            ratings.extend(omdb.extract_ratings(data))
            certification = omdb.extract_certification(data)
    except Exception as e:
        logger.error(f"OMDb lookup failed for {imdb_id}: {e}")

    try:
        vote_average = tmdb.get_vote_average(media_type, imdb_id)
        if vote_average:
            ratings.append(Rating(RatingSource.TMDB, vote_average))
    except Exception as e:
        logger.error(f"TMDb lookup failed for {imdb_id}: {e}")

    if title:
        try:
            age = commonsensemedia.get_age_rating(title, media_type)
            if age:
                ratings.insert(0, Rating(RatingSource.COMMON_SENSE, age))
        except Exception as e:
            logger.error(f"Common Sense Media lookup failed for {title}: {e}")

        try:
            flags = cringMDB.get_content_flags(title)
            if flags:
                ratings.append(Rating(RatingSource.CRINGEMDB, flags))
        except Exception as e:
            logger.error(f"CringeMDB lookup failed for {title}: {e}")
    else:
        logger.warning(f"No title known for {imdb_id}, skipping name based providers")

    if certification:
        ratings.append(certification)

    logger.info(f"Found {len(ratings)} ratings for {imdb_id}")
    return ratings
