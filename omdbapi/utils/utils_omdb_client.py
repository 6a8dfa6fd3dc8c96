import logging
import httpx
from typing import Optional, Sequence, Type, TypeVar
from pydantic import BaseModel, ValidationError
from ..exceptions import (
    INCORRECT_IMDB_ID,
    IncorrectIDError,
    OMDbDecodeError,
    OMDbTransportError,
    api_error,
)
from ..schemas.omdb_schemas import APIParam, ErrorEnvelope

logger = logging.getLogger(__name__)

MOVIE_API = 'https://www.omdbapi.com'
POSTER_API = 'https://img.omdbapi.com'

API_KEY_PARAM = 'apikey'
SEARCH_PARAM = 's'
TITLE_PARAM = 't'
ID_PARAM = 'i'

ModelT = TypeVar('ModelT', bound=BaseModel)


def build_url(
    base_url: str,
    api_key: str,
    params: Sequence[APIParam]
) -> httpx.URL:
    """
    Build the request URL for an OMDb endpoint.

    The API key is set first, then every parameter in order. A name that
    appears more than once keeps the last value written, so a trailing
    parameter overrides anything before it (including 'apikey').

    :param base_url: Endpoint base URL, any query it carries is kept
        unless a parameter of the same name replaces it.
    :param api_key: OMDb API key.
    :param params: Ordered query parameters.
    :return: URL with the merged query string.
    """
    url = httpx.URL(base_url)
    query = url.params.set(API_KEY_PARAM, api_key)
    for param in params:
        query = query.set(param.name, param.value)
    return url.copy_with(params=query)


def send_request(
    url: httpx.URL,
    http_client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None
) -> httpx.Response:
    """
    Issue a single GET. Without an http_client a short-lived one is opened
    for this request only, following redirects.

    :param url: Fully built request URL.
    :param http_client: Caller owned client to send through.
    :param timeout: Timeout for the short-lived client, httpx default if None.
    :return: The response, whatever its status.
    """
    logger.debug('GET %s', url.copy_set_param(API_KEY_PARAM, '***'))
    try:
        if http_client is not None:
            return http_client.get(url)
        options = {'follow_redirects': True}
        if timeout is not None:
            options['timeout'] = timeout
        with httpx.Client(**options) as client:
            return client.get(url)
    except httpx.RequestError as exc:
        logger.warning('OMDb request to %s failed: %s', url.host, exc)
        raise OMDbTransportError(str(exc)) from exc


def decode(body: bytes, model: Type[ModelT]) -> ModelT:
    """
    Decode a JSON body into model.

    :raises OMDbDecodeError: body is not JSON or does not fit the model.
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        logger.warning('Could not decode OMDb response as %s', model.__name__)
        raise OMDbDecodeError(
            f'Invalid {model.__name__} response: {exc}') from exc


def check_error_envelope(body: bytes) -> None:
    """
    Raise the domain error carried by an OMDb error envelope, if any.
    A missing or empty 'Error' field means success.
    """
    envelope = decode(body, ErrorEnvelope)
    if envelope.error:
        logger.info('OMDb returned error: %s', envelope.error)
        raise api_error(envelope.error)


def poster_content(response: httpx.Response, remap_not_found: bool) -> bytes:
    """
    Return the image bytes of a poster response.

    :param response: Poster endpoint response.
    :param remap_not_found: Turn a 404 into IncorrectIDError, used when the
        poster was requested by IMDb ID.
    :return: Raw body, not parsed.
    """
    if response.is_success:
        return response.content
    if remap_not_found and response.status_code == httpx.codes.NOT_FOUND:
        logger.info('OMDb poster not found, treating ID as incorrect')
        raise IncorrectIDError(INCORRECT_IMDB_ID)
    status = f'{response.status_code} {response.reason_phrase}'
    logger.warning('OMDb poster request failed: %s', status)
    raise OMDbTransportError(status, status_code=response.status_code)
