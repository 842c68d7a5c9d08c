import base64
from logging import getLogger
from typing import TYPE_CHECKING, Optional, Sequence, TypeVar
from urllib.parse import quote_plus, urlencode

import httpx

from .._utils._logs import masked_headers
from .._utils._params import Param, render_param_string
from .._utils._serializer import JsonSerializer
from .._utils.constants import (
    ACCEPT_JSON,
    API_PATH,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    SUCCESS_STATUS_CODES,
)
from ..models.body import ManyBody, RequestBody, SingleBody
from ..models.errors import ApiClientError, ApiErrorKind, ConfigurationError
from ..models.meta import MetaEntity

if TYPE_CHECKING:
    from .._api_client import ApiClient

T = TypeVar("T")
EntityT = TypeVar("EntityT", bound=MetaEntity)


class RequestExecutor:
    """Fluent builder for a single API call.

    An executor is bound to a URL when created, collects headers, query
    values, typed params and a body through chained calls, and is consumed by
    one of the terminal verbs (``get``, ``post``, ``put``, ``delete``).

    Examples:
        ```python
        from moysklad import ApiClient, FilterParam, Product, EntityList

        api = ApiClient(token="...")

        products = (
            RequestExecutor.for_path(api, "/entity/product")
            .params([FilterParam("name", "~", "Widget")])
            .get(EntityList[Product])
        )
        ```
    """

    METHOD_GET = "GET"
    METHOD_POST = "POST"
    METHOD_PUT = "PUT"
    METHOD_DELETE = "DELETE"

    def __init__(
        self,
        api: "ApiClient",
        url: str,
        *,
        serializer: Optional[JsonSerializer] = None,
    ) -> None:
        self._logger = getLogger("moysklad")
        self._client: httpx.Client = api.client
        self._serializer = serializer or api.serializer
        self._url = url
        self._query: dict[str, str] = {}
        self._headers: dict[str, str] = {
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_ACCEPT: ACCEPT_JSON,
        }
        self._params: list[Param] = []
        self._body: Optional[RequestBody] = None

        self._auth(api)

    @classmethod
    def for_path(
        cls,
        api: Optional["ApiClient"],
        path: str,
        *,
        serializer: Optional[JsonSerializer] = None,
    ) -> "RequestExecutor":
        """Executor for ``path`` relative to the API root of ``api.host``."""
        if api is None:
            raise ConfigurationError(
                "To make an API request you need an initialized instance of ApiClient."
            )
        if api.client is None:
            raise ConfigurationError(
                "To make an API request you need an ApiClient with an open HTTP transport."
            )

        return cls(api, f"{api.host}{API_PATH}{path}", serializer=serializer)

    @classmethod
    def for_url(
        cls,
        api: Optional["ApiClient"],
        url: str,
        *,
        serializer: Optional[JsonSerializer] = None,
    ) -> "RequestExecutor":
        """Executor for an absolute ``url``, e.g. a ``meta.href`` from a response."""
        if api is None or api.client is None:
            raise ConfigurationError(
                "To make an API request you need an ApiClient with an open HTTP transport."
            )

        return cls(api, url, serializer=serializer)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def header(self, key: str, value: str) -> "RequestExecutor":
        if key:
            self._headers[key] = value
        return self

    def query(self, key: str, value: str) -> "RequestExecutor":
        """Set a raw query value.

        Raw query values are only sent when at least one typed param is set
        as well. A typed param with the same key replaces the raw value.
        """
        if key:
            self._query[key] = value
        return self

    def params(self, params: Sequence[Param]) -> "RequestExecutor":
        """Replace the typed params. An empty sequence keeps the current ones."""
        if len(params) > 0:
            self._params = list(params)
        return self

    def body(self, entity: MetaEntity) -> "RequestExecutor":
        self._body = SingleBody(entity)
        return self

    def body_array(self, entities: Sequence[MetaEntity]) -> "RequestExecutor":
        self._body = ManyBody(list(entities))
        return self

    def get(self, target_type: type[T]) -> T:
        request = httpx.Request(
            self.METHOD_GET, self._build_full_url(), headers=self._headers
        )

        return self._serializer.deserialize(
            self._execute_request(request), target_type
        )

    def post(self, target_type: type[T]) -> T:
        request = httpx.Request(
            self.METHOD_POST,
            self._build_full_url(),
            headers=self._headers,
            content=self._serialize_body(),
        )

        return self._serializer.deserialize(
            self._execute_request(request), target_type
        )

    def put(self, target_type: type[EntityT]) -> EntityT:
        request = httpx.Request(
            self.METHOD_PUT,
            self._build_full_url(),
            headers=self._headers,
            content=self._serialize_body(),
        )

        return self._serializer.deserialize(
            self._execute_request(request), target_type
        )

    def delete(self) -> None:
        request = httpx.Request(
            self.METHOD_DELETE, self._build_full_url(), headers=self._headers
        )

        self._execute_request(request)

    def _auth(self, api: "ApiClient") -> None:
        if api.token:
            self._headers[HEADER_AUTHORIZATION] = f"Basic {api.token}"
            return

        credentials = f"{api.login}:{api.password}".encode("utf-8")
        self._headers[HEADER_AUTHORIZATION] = (
            f"Basic {base64.b64encode(credentials).decode('ascii')}"
        )

    def _build_full_url(self) -> str:
        if len(self._params) < 1:
            return self._url

        param_types = dict.fromkeys(param.type for param in self._params)
        for param_type in param_types:
            self._query[quote_plus(param_type)] = render_param_string(
                param_type, self._params
            )

        return f"{self._url}?{urlencode(self._query)}"

    def _serialize_body(self) -> Optional[str]:
        if self._body is None:
            return None
        return self._serializer.serialize(self._body)

    def _execute_request(self, request: httpx.Request) -> str:
        request_info = f"{request.method} {request.url}"
        self._logger.debug(f"Request: {request_info}")
        self._logger.debug(f"HEADERS: {masked_headers(self._headers)}")

        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            raise self._transport_error(request_info, e) from e

        self._logger.debug(f"Response: {response.status_code} {request_info}")

        if response.status_code not in SUCCESS_STATUS_CODES:
            raise ApiClientError(
                request_info,
                response.status_code,
                response.reason_phrase,
                ApiErrorKind.HTTP_STATUS,
            )

        return response.text

    @staticmethod
    def _transport_error(request_info: str, error: httpx.HTTPError) -> ApiClientError:
        status_code = 0
        message = str(error)
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            if error.response.is_client_error:
                content = RequestExecutor._read_error_content(error.response)
                if content is not None:
                    message += f" Response content: {content}"

        return ApiClientError(request_info, status_code, message, ApiErrorKind.TRANSPORT)

    @staticmethod
    def _read_error_content(response: httpx.Response) -> Optional[str]:
        # httpx closes the response when a response hook raises, so the body
        # is only available if the hook read it first.
        try:
            response.read()
        except httpx.StreamError:
            return None
        return response.text
