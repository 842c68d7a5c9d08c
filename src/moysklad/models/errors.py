from enum import Enum


class ConfigurationError(Exception):
    """Raised when a request is built without a usable API client.

    The executor needs an initialized ``ApiClient`` that exposes an HTTP
    transport and credentials. This is a setup problem, not a transient one.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ApiErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"


class ApiClientError(Exception):
    """Raised when an API call fails.

    Either the transport could not complete the round trip, or the API
    answered with a status other than 200, 201 or 204.

    Attributes:
        request_info: The attempted method and URL, e.g. ``GET https://...``.
        status_code: The HTTP status, or the transport error code (``0`` when
            the transport failed before any response was received).
        message: The reason phrase or the transport error text.
        kind: Whether the transport or the HTTP status caused the failure.
    """

    def __init__(
        self,
        request_info: str,
        status_code: int,
        message: str,
        kind: ApiErrorKind = ApiErrorKind.HTTP_STATUS,
    ):
        self.request_info = request_info
        self.status_code = status_code
        self.message = message
        self.kind = kind
        super().__init__(
            f"Error calling {request_info}: [{status_code}] {message}"
        )
