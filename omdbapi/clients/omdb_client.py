import httpx
from typing import List, Optional, Sequence
from ..config import Settings, get_settings
from ..schemas.omdb_schemas import APIParam, MovieInfo, Poster, SearchInfo
from ..utils.utils_omdb_client import (
    ID_PARAM,
    MOVIE_API,
    POSTER_API,
    SEARCH_PARAM,
    TITLE_PARAM,
    build_url,
    check_error_envelope,
    decode,
    poster_content,
    send_request,
)


class OMDbClient:
    """
    Synchronous OMDb API client. Every method issues exactly one GET and
    either returns a typed result or raises an OMDbError.

    Extra query parameters are passed as an ordered sequence of APIParam.
    When a name repeats, the later value wins, and the lookup parameter
    (title, ID or search term) is always applied last.
    """

    __slots__ = ('_api_key', '_http_client', '_timeout')

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None
    ) -> None:
        """
        :param api_key: OMDb API key, fixed for the life of the client.
        :param http_client: Optional caller owned httpx.Client, used for
            timeouts, proxies or test transports. Never closed here.
        :param timeout: Timeout for the per-request client used when no
            http_client is given.
        """
        self._api_key = api_key
        self._http_client = http_client
        self._timeout = timeout

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None
    ) -> 'OMDbClient':
        settings = settings or get_settings()
        return cls(
            settings.OMDB_API_KEY,
            http_client=http_client,
            timeout=settings.OMDB_TIMEOUT
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def get_by_title(
        self,
        title: str,
        params: Optional[Sequence[APIParam]] = None
    ) -> MovieInfo:
        """
        Find a movie by its title.

        :param title: Movie title.
        :param params: Extra query parameters, e.g. year or plot length.
        :return: MovieInfo for the best match.
        """
        return self._find(_with_param(params, TITLE_PARAM, title))

    def get_by_id(
        self,
        imdb_id: str,
        params: Optional[Sequence[APIParam]] = None
    ) -> MovieInfo:
        """
        Find a movie by its IMDb ID.

        :param imdb_id: IMDb ID such as 'tt0111161'.
        :param params: Extra query parameters.
        :return: MovieInfo for the title.
        """
        return self._find(_with_param(params, ID_PARAM, imdb_id))

    def search(
        self,
        title: str,
        params: Optional[Sequence[APIParam]] = None
    ) -> SearchInfo:
        """
        Search movies by title.

        :param title: Search term.
        :param params: Extra query parameters, e.g. type or page.
        :return: SearchInfo with the matching summaries and total count.
        """
        body = self._get(MOVIE_API, _with_param(params, SEARCH_PARAM, title))
        check_error_envelope(body)
        return decode(body, SearchInfo)

    def poster_by_id(self, imdb_id: str) -> Poster:
        """
        Fetch the poster image for an IMDb ID.

        A 404 from the poster endpoint is reported as IncorrectIDError.
        """
        url = build_url(
            POSTER_API, self._api_key, [APIParam(name=ID_PARAM, value=imdb_id)])
        return poster_content(self._send(url), remap_not_found=True)

    def poster_by_title(self, title: str) -> Poster:
        url = build_url(
            POSTER_API, self._api_key, [APIParam(name=TITLE_PARAM, value=title)])
        return poster_content(self._send(url), remap_not_found=False)

    def _find(self, params: List[APIParam]) -> MovieInfo:
        body = self._get(MOVIE_API, params)
        check_error_envelope(body)
        return decode(body, MovieInfo)

    def _get(self, base_url: str, params: Sequence[APIParam]) -> bytes:
        # the metadata endpoint reports failures in the body, status is ignored
        response = self._send(build_url(base_url, self._api_key, params))
        return response.content

    def _send(self, url: httpx.URL) -> httpx.Response:
        return send_request(url, self._http_client, self._timeout)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(api_key=***)'


def _with_param(
    params: Optional[Sequence[APIParam]],
    name: str,
    value: str
) -> List[APIParam]:
    return list(params or []) + [APIParam(name=name, value=value)]
