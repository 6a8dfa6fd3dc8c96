from .clients.omdb_client import OMDbClient
from .config import Settings, get_settings
from .exceptions import (
    INCORRECT_IMDB_ID,
    INVALID_API_KEY,
    MOVIE_NOT_FOUND,
    NO_API_KEY,
    IncorrectIDError,
    InvalidAPIKeyError,
    MovieNotFoundError,
    NoAPIKeyError,
    OMDbAPIError,
    OMDbDecodeError,
    OMDbError,
    OMDbTransportError,
)
from .schemas.omdb_schemas import (
    APIParam,
    MovieInfo,
    Poster,
    Rating,
    SearchInfo,
    SearchItem,
)

__all__ = [
    'OMDbClient',
    'Settings',
    'get_settings',
    'APIParam',
    'MovieInfo',
    'Poster',
    'Rating',
    'SearchInfo',
    'SearchItem',
    'OMDbError',
    'OMDbTransportError',
    'OMDbDecodeError',
    'OMDbAPIError',
    'NoAPIKeyError',
    'InvalidAPIKeyError',
    'MovieNotFoundError',
    'IncorrectIDError',
    'NO_API_KEY',
    'INVALID_API_KEY',
    'MOVIE_NOT_FOUND',
    'INCORRECT_IMDB_ID',
]
