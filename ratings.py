from dataclasses import dataclass
from enum import Enum


class RatingSource(Enum):
    """Rating providers known to the add-on. Values are the display labels."""

    IMDB = "IMDb"
    TMDB = "TMDb"
    MC = "MC"
    MC_USERS = "MC Users"
    RT = "RT"
    RT_USERS = "RT Users"
    COMMON_SENSE = "Common Sense"
    CRINGEMDB = "CringeMDB"
    CERTIFICATION = "Certification"

    @property
    def rank(self):
        """Position in the standard score listing, None for the other sources."""
        return _RANKS.get(self)


STANDARD_ORDER = (
    RatingSource.IMDB,
    RatingSource.TMDB,
    RatingSource.MC,
    RatingSource.MC_USERS,
    RatingSource.RT,
    RatingSource.RT_USERS,
)
_RANKS = {source: position for position, source in enumerate(STANDARD_ORDER)}


@dataclass(frozen=True)
class Rating:
    source: RatingSource
    value: str
