"""Main Rolimons client: transport, status mapping and response decoding."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from roli.endpoints import (
    DealsEndpoints,
    GamesEndpoints,
    GroupsEndpoints,
    ItemsEndpoints,
    MarketActivityEndpoints,
    PlayersEndpoints,
    TradeAdsEndpoints,
)
from roli.utils import get_config
from roli.utils.exceptions import (
    HTTPStatusError,
    InternalServerError,
    MalformedResponseError,
    NetworkError,
    RequestUnsuccessfulError,
    RoliVerificationContainsInvalidCharactersError,
    RoliVerificationNotSetError,
    TooManyRequestsError,
    UnidentifiedStatusCodeError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

StatusErrorTable = Mapping[int, type[HTTPStatusError]]
ErrorCodeTable = Mapping[int | str, type[RequestUnsuccessfulError]]

# Constants
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_INTERNAL_SERVER_ERROR = 500
ROLI_VERIFICATION_COOKIE = "_RoliVerification"

DEFAULT_STATUS_ERRORS: StatusErrorTable = {
    HTTP_STATUS_TOO_MANY_REQUESTS: TooManyRequestsError,
    HTTP_STATUS_INTERNAL_SERVER_ERROR: InternalServerError,
}


class RoliClient:
    """Async Rolimons client. Every endpoint method makes exactly one request.

    Endpoints are organized into namespaces and return typed, immutable
    pydantic models. The client does no caching and no retrying: Rolimons
    limits how often its API may be called, so callers are expected to
    cache results and pace their requests.

    Example:
        ```python
        async with RoliClient() as client:
            items = await client.items.all_item_details()
            print(f"Item amount: {len(items)}")

            sales = await client.market_activity.recent_sales()
        ```
    """

    def __init__(
        self,
        roli_verification: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        request_timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            roli_verification: Value of the ``_RoliVerification`` cookie, needed
                only for authenticated endpoints. Falls back to config/env.
            http_client: Existing ``httpx.AsyncClient`` to send requests with.
                It is not closed by ``close()``. One is created when omitted.
            base_url: Rolimons base URL. Falls back to config/env.
            user_agent: User-Agent header value. Falls back to config/env.
            request_timeout: Timeout in seconds for a client roli creates.
                Falls back to config/env.
        """
        config = get_config().roli

        self._roli_verification = (
            roli_verification
            if roli_verification is not None
            else config.roli_verification
        )
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.user_agent = user_agent or config.user_agent
        self.request_timeout = (
            request_timeout if request_timeout is not None else config.request_timeout
        )

        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.items = ItemsEndpoints(self)
        self.deals = DealsEndpoints(self)
        self.trade_ads = TradeAdsEndpoints(self)
        self.players = PlayersEndpoints(self)
        self.games = GamesEndpoints(self)
        self.groups = GroupsEndpoints(self)
        self.market_activity = MarketActivityEndpoints(self)

    def __repr__(self) -> str:
        return (
            f"RoliClient(base_url={self.base_url!r}, "
            f"has_roli_verification={self.has_roli_verification})"
        )

    async def __aenter__(self) -> RoliClient:
        self._initialize_http_client()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def has_roli_verification(self) -> bool:
        """Whether a verification token is set. Does not check that it is valid."""
        return self._roli_verification is not None

    def _initialize_http_client(self) -> httpx.AsyncClient:
        """Create the HTTP client on first use."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.request_timeout)
        return self._http_client

    def _prepare_request_headers(self, headers: Mapping[str, str] | None) -> dict:
        """Merge default headers with per-request ones."""
        request_headers = {"User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)
        return request_headers

    def auth_headers(self) -> dict[str, str]:
        """Build the cookie header for authenticated endpoints.

        Raises:
            RoliVerificationNotSetError: If no token is set.
            RoliVerificationContainsInvalidCharactersError: If the token holds
                characters outside printable ASCII.
        """
        if self._roli_verification is None:
            raise RoliVerificationNotSetError()

        token = self._roli_verification
        if not all(32 <= ord(char) <= 126 for char in token) or ";" in token:
            raise RoliVerificationContainsInvalidCharactersError()

        return {"Cookie": f"{ROLI_VERIFICATION_COOKIE}={token}"}

    @staticmethod
    def status_error(
        status_code: int, status_errors: StatusErrorTable | None = None
    ) -> HTTPStatusError:
        """Classify a non-success status code.

        Endpoint tables take priority over the defaults (429 and 500).
        """
        error_cls = None
        if status_errors is not None:
            error_cls = status_errors.get(status_code)
        if error_cls is None:
            error_cls = DEFAULT_STATUS_ERRORS.get(status_code)
        if error_cls is None:
            return UnidentifiedStatusCodeError(status_code)
        return error_cls(status_code)

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        json_body: Any = None,
        status_errors: StatusErrorTable | None = None,
    ) -> httpx.Response:
        """Send one request and return the response if its status is 2xx.

        Args:
            method: HTTP method
            path: API path (e.g., /itemapi/itemdetails)
            params: Query parameters
            headers: Additional headers
            json_body: JSON body for POST requests
            status_errors: Endpoint-specific status code to error table

        Returns:
            The successful httpx.Response

        Raises:
            NetworkError: If no response was received
            HTTPStatusError: For any non-2xx status code
        """
        http_client = self._initialize_http_client()
        url = f"{self.base_url}{path}"
        request_headers = self._prepare_request_headers(headers)

        logger.debug("Sending %s %s", method, url)
        try:
            response = await http_client.request(
                method,
                url,
                params=params,
                headers=request_headers,
                json=json_body,
            )
        except httpx.RequestError as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            raise NetworkError(f"{method} {url} failed: {e}") from e

        logger.debug("Received %d for %s %s", response.status_code, method, url)

        if not response.is_success:
            error = self.status_error(response.status_code, status_errors)
            logger.warning(
                "%s %s returned status %d: %s",
                method,
                url,
                response.status_code,
                error,
            )
            raise error

        return response

    @staticmethod
    def check_success(body: Any, error_codes: ErrorCodeTable | None = None) -> None:
        """Raise the application error a ``success: false`` body describes.

        The body's ``code`` is looked up in ``error_codes`` first, then its
        ``message``. Unknown codes raise ``RequestUnsuccessfulError``.
        """
        if not isinstance(body, dict) or body.get("success") is not False:
            return

        code = body.get("code")
        message = body.get("message")
        error_cls = None
        if error_codes:
            if isinstance(code, (int, str)):
                error_cls = error_codes.get(code)
            if error_cls is None and isinstance(message, str):
                error_cls = error_codes.get(message)

        error = (error_cls or RequestUnsuccessfulError)(code, message)
        logger.warning("Request returned unsuccessful: %s", error)
        raise error

    def decode(
        self,
        model: type[ModelT],
        response: httpx.Response,
        error_codes: ErrorCodeTable | None = None,
    ) -> ModelT:
        """Validate a response body against ``model``.

        Args:
            model: Pydantic model describing the body
            response: Successful response from ``request``
            error_codes: Endpoint-specific application error table

        Raises:
            RequestUnsuccessfulError: If the body reports ``success: false``
            MalformedResponseError: If the body is not JSON or does not match
        """
        try:
            body = response.json()
        except ValueError as e:
            logger.warning(
                "Failed to parse JSON response for %s (status=%d): %s",
                response.request.url,
                response.status_code,
                e,
            )
            raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

        self.check_success(body, error_codes)

        try:
            return model.model_validate(body)
        except ValidationError as e:
            logger.warning(
                "Response for %s does not match %s: %s",
                response.request.url,
                model.__name__,
                e,
            )
            raise MalformedResponseError(
                f"Response does not match {model.__name__} "
                f"({e.error_count()} validation errors)"
            ) from e

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None
