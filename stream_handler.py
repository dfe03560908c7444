from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging

import config
import imdb
import rating_service
from formatter import format_ratings_card

logger = logging.getLogger(__name__)

STREAM_NAME = "🎯 Ratings Aggregator"


@dataclass(frozen=True)
class StreamResult:
    name: str
    description: str
    external_url: str

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "externalUrl": self.external_url,
            "behaviorHints": {"notWebReady": True},
        }


def base_imdb_id(media_id):
    # Series episodes come in as tt<digits>:<season>:<episode>
    return media_id.split(":")[0]


def stream_handler(args):
    media_type = args.get("type")
    media_id = args.get("id")
    logger.info(f"Received stream request for: type={media_type}, id={media_id}")

    if not media_id or not media_id.startswith("tt"):
        logger.warning(f"Invalid or unsupported ID format: {media_id}")
        return {"streams": []}

    imdb_id = base_imdb_id(media_id)
    try:
        with ThreadPoolExecutor(max_workers=2) as executor:
            guide_future = executor.submit(imdb.get_parents_guide_summary, imdb_id)
            ratings_future = executor.submit(rating_service.get_ratings, media_type, imdb_id)
            try:
                ratings = ratings_future.result() or []
            except Exception as e:
                logger.error(f"Failed to fetch ratings for {media_id}: {e}")
                return {"streams": []}
            guide_text = guide_future.result()

        if not ratings and not guide_text:
            logger.info(f"No ratings or guide found for: {media_id}")
            return {"streams": []}

        stream = StreamResult(
            name=STREAM_NAME,
            description=format_ratings_card(ratings, guide_text),
            external_url=f"{config.IMDB_BASE_URL}/title/{imdb_id}/",
        )
        logger.info(f"Returning 1 rating stream for {media_id}")
        return {"streams": [stream.to_dict()]}

    except Exception as e:
        logger.error(f"Error in stream_handler for {media_id}: {e}")
        return {"streams": []}
