"""Tests for the stream request handler."""

import pytest
from unittest.mock import MagicMock, patch

import config
from ratings import Rating, RatingSource
from stream_handler import StreamResult, base_imdb_id, stream_handler


@pytest.fixture
def sources():
    """Patch both upstream fetchers; tests set return values or side effects."""
    with patch("stream_handler.rating_service.get_ratings", return_value=[]) as get_ratings, \
            patch("stream_handler.imdb.get_parents_guide_summary", return_value=None) as get_guide:
        yield get_ratings, get_guide


@pytest.mark.parametrize("media_id", ["nm0000001", "", None, "kitsu:123", "TT0111161"])
def test_non_imdb_ids_return_no_streams(sources, media_id):
    get_ratings, get_guide = sources
    assert stream_handler({"type": "movie", "id": media_id}) == {"streams": []}
    get_ratings.assert_not_called()
    get_guide.assert_not_called()


def test_missing_id_returns_no_streams(sources):
    assert stream_handler({"type": "movie"}) == {"streams": []}


def test_nothing_found_returns_no_streams(sources):
    assert stream_handler({"type": "movie", "id": "tt0111161"}) == {"streams": []}


def test_ratings_only(sources):
    get_ratings, _ = sources
    get_ratings.return_value = [Rating(RatingSource.IMDB, "9.3/10")]

    result = stream_handler({"type": "movie", "id": "tt0111161"})

    assert len(result["streams"]) == 1
    stream = result["streams"][0]
    assert stream["name"] == "🎯 Ratings Aggregator"
    assert "⭐ IMDb     : 9.3/10" in stream["description"]
    assert "Parents Guide" not in stream["description"]
    assert stream["externalUrl"] == f"{config.IMDB_BASE_URL}/title/tt0111161/"
    assert stream["behaviorHints"] == {"notWebReady": True}


def test_guide_only(sources):
    _, get_guide = sources
    get_guide.return_value = "Violence: Severe"

    result = stream_handler({"type": "movie", "id": "tt0111161"})

    assert len(result["streams"]) == 1
    assert "ℹ️  Parents Guide\nViolence: Severe" in result["streams"][0]["description"]


def test_rating_service_failure_returns_no_streams(sources):
    get_ratings, get_guide = sources
    get_ratings.side_effect = RuntimeError("rating service down")
    get_guide.return_value = "Violence: Severe"

    assert stream_handler({"type": "movie", "id": "tt0111161"}) == {"streams": []}


def test_none_ratings_are_treated_as_empty(sources):
    get_ratings, get_guide = sources
    get_ratings.return_value = None
    get_guide.return_value = "Profanity: Mild"

    result = stream_handler({"type": "movie", "id": "tt0111161"})
    assert "Profanity: Mild" in result["streams"][0]["description"]


def test_episode_ids_use_the_title_id(sources):
    get_ratings, get_guide = sources
    get_ratings.return_value = [Rating(RatingSource.TMDB, "8.9/10")]

    result = stream_handler({"type": "series", "id": "tt0903747:1:2"})

    get_ratings.assert_called_once_with("series", "tt0903747")
    get_guide.assert_called_once_with("tt0903747")
    assert result["streams"][0]["externalUrl"] == f"{config.IMDB_BASE_URL}/title/tt0903747/"


def test_formatter_failure_is_contained(sources):
    get_ratings, _ = sources
    get_ratings.return_value = [Rating(RatingSource.IMDB, "9.3/10")]
    with patch("stream_handler.format_ratings_card", side_effect=ValueError("boom")):
        assert stream_handler({"type": "movie", "id": "tt0111161"}) == {"streams": []}


def test_base_imdb_id():
    assert base_imdb_id("tt0903747:1:2") == "tt0903747"
    assert base_imdb_id("tt0111161") == "tt0111161"


def test_stream_result_is_frozen():
    result = StreamResult("name", "description", "https://www.imdb.com/title/tt1/")
    with pytest.raises(AttributeError):
        result.name = "other"


def test_guide_page_without_rating_items_adds_no_guide_section():
    """Embedded page data alone must not produce a Parents Guide section."""
    page = MagicMock()
    page.text = (
        '<html><body><ul></ul><script id="__NEXT_DATA__" type="application/json">'
        '{"props": {"pageProps": {"contentData": {"categories": ['
        '{"title": "Violence & Gore", "severitySummary": {"text": "Severe"}}]}}}}'
        '</script></body></html>'
    )
    with patch("stream_handler.rating_service.get_ratings", return_value=[Rating(RatingSource.IMDB, "9.3/10")]), \
            patch("imdb.session") as mock_session:
        mock_session.get.return_value = page
        result = stream_handler({"type": "movie", "id": "tt0111161"})

    description = result["streams"][0]["description"]
    assert "⭐ IMDb     : 9.3/10" in description
    assert "Parents Guide" not in description
