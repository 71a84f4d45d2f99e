import logging
import pydantic
import requests
from typing import Optional

from .models import MovieListResponse


BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_TIMEOUT = 10

logger = logging.getLogger(__name__)


class TMDBError(RuntimeError):
    pass


class TMDBNotFoundError(TMDBError):
    def __init__(self, type_of_movie: str):
        super().__init__(f"TMDB resource for '{type_of_movie}' not found.")
        self.type_of_movie = type_of_movie


class TMDBAuthorizationError(TMDBError):
    def __init__(self):
        super().__init__("TMDB API authorization failed. Check your access token.")


class TMDBRateLimitError(TMDBError):
    def __init__(self):
        super().__init__("TMDB API rate limit exceeded.")


class TMDBNetworkError(TMDBError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TMDBResponseError(TMDBError):
    pass


class TMDBClient(object):
    def __init__(
        self,
        access_token: str,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({
            "accept": "application/json",
            "Authorization": f"Bearer {access_token}"
        })

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def check_status(self, resp: requests.Response, type_of_movie: str) -> None:
        if resp.status_code == 404:
            raise TMDBNotFoundError(type_of_movie)

        if resp.status_code in (401, 403):
            raise TMDBAuthorizationError()

        if resp.status_code == 429:
            raise TMDBRateLimitError()

        try:
            resp.raise_for_status()
        except requests.HTTPError as err:
            raise TMDBNetworkError(str(err), status_code=resp.status_code) from err

    def movie_list(self, type_of_movie: str) -> MovieListResponse:
        """
        Fetch the first page of one of TMDB's movie lists (`now_playing`,
        `popular`, `top_rated` or `upcoming`).
        """
        url = f"{self.base_url}/movie/{type_of_movie}"
        params = {
            "language": "en-US",
            "page": 1,
        }

        logger.debug("GET %s %s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as err:
            raise TMDBNetworkError(str(err)) from err
        logger.debug("%s responded with status %d", url, resp.status_code)

        self.check_status(resp, type_of_movie)

        try:
            return MovieListResponse.model_validate(resp.json())
        except (ValueError, pydantic.ValidationError) as err:
            raise TMDBResponseError(f"malformed response from {url}: {err}") from err
