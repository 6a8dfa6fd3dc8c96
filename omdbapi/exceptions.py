from typing import Dict, Optional, Type


NO_API_KEY = 'No API key provided.'
INVALID_API_KEY = 'Invalid API key!'
MOVIE_NOT_FOUND = 'Movie not found!'
INCORRECT_IMDB_ID = 'Incorrect IMDb ID.'


class OMDbError(Exception):
    """Base class for every error raised by the client."""


class OMDbTransportError(OMDbError):
    """
    The request could not be completed: a network failure, or a non-2xx
    status on the poster endpoint.

    :param message: Status text such as '500 Internal Server Error', or the
        network error description.
    :param status_code: HTTP status when a response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OMDbDecodeError(OMDbError):
    """The response body was not JSON of the expected shape."""


class OMDbAPIError(OMDbError):
    """
    Failure reported by OMDb through the 'Error' field of its response.
    The message is kept exactly as the service sent it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoAPIKeyError(OMDbAPIError):
    pass


class InvalidAPIKeyError(OMDbAPIError):
    pass


class MovieNotFoundError(OMDbAPIError):
    pass


class IncorrectIDError(OMDbAPIError):
    pass


_KNOWN_MESSAGES: Dict[str, Type[OMDbAPIError]] = {
    NO_API_KEY: NoAPIKeyError,
    INVALID_API_KEY: InvalidAPIKeyError,
    MOVIE_NOT_FOUND: MovieNotFoundError,
    INCORRECT_IMDB_ID: IncorrectIDError,
}


def api_error(message: str) -> OMDbAPIError:
    """
    Build the error for an upstream message. Known messages get their own
    subclass, anything else is a plain OMDbAPIError.

    :param message: Value of the 'Error' field.
    :return: Exception instance whose str() is the message unchanged.
    """
    return _KNOWN_MESSAGES.get(message, OMDbAPIError)(message)
