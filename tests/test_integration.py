"""
Live tests against omdbapi.com. They need a key in OMDB_API_KEY (or
OMDBAPI_KEY) and network access, and are skipped otherwise.
"""
import pytest

from omdbapi import OMDbClient, Settings
from omdbapi.exceptions import (
    INCORRECT_IMDB_ID,
    INVALID_API_KEY,
    MOVIE_NOT_FOUND,
    IncorrectIDError,
    InvalidAPIKeyError,
    MovieNotFoundError,
)

API_KEY = Settings().OMDB_API_KEY

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not API_KEY, reason="OMDB_API_KEY is not set"),
]

TITLES = [
    "The Shawshank Redemption",
    "The Godfather",
    "The Dark Knight",
    "The Good, the Bad and the Ugly",
]

IDS = [
    "tt0111161",
    "tt0068646",
    "tt0468569",
    "tt0060196",
]


@pytest.fixture
def client():
    return OMDbClient(API_KEY, timeout=15.0)


def test_invalid_api_key():
    with pytest.raises(InvalidAPIKeyError) as exc_info:
        OMDbClient("INVALID_API_KEY").get_by_title("MOVIE_TITLE")
    assert str(exc_info.value) == INVALID_API_KEY


@pytest.mark.parametrize("title", TITLES)
def test_valid_movie_title(client, title):
    assert client.get_by_title(title).imdb_id


def test_invalid_movie_title(client):
    with pytest.raises(MovieNotFoundError) as exc_info:
        client.get_by_title("INVALID_MOVIE_TITLE")
    assert str(exc_info.value) == MOVIE_NOT_FOUND


@pytest.mark.parametrize("imdb_id", IDS)
def test_valid_movie_id(client, imdb_id):
    assert client.get_by_id(imdb_id).title


def test_invalid_movie_id(client):
    with pytest.raises(IncorrectIDError) as exc_info:
        client.get_by_id("INVALID_MOVIE_ID")
    assert str(exc_info.value) == INCORRECT_IMDB_ID


def test_search_valid_movie(client):
    assert client.search("Shawshank").search


def test_search_invalid_movie(client):
    with pytest.raises(MovieNotFoundError) as exc_info:
        client.search("INVALID_MOVIE_TITLE")
    assert str(exc_info.value) == MOVIE_NOT_FOUND


@pytest.mark.parametrize("imdb_id", IDS)
def test_poster_valid_movie_id(client, imdb_id):
    assert len(client.poster_by_id(imdb_id)) > 0


def test_poster_invalid_movie_id(client):
    with pytest.raises(IncorrectIDError) as exc_info:
        client.poster_by_id("INVALID_MOVIE_ID")
    assert str(exc_info.value) == INCORRECT_IMDB_ID
