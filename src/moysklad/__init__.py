"""Python client for the MoySklad JSON API 1.2.

Build requests with ``RequestExecutor`` (or the ``ApiClient.path`` and
``ApiClient.url`` shortcuts) and get typed pydantic models back.
"""

from ._api_client import ApiClient
from ._config import Config
from ._http import RequestExecutor
from ._services import EntityService
from ._utils import (
    ExpandParam,
    FilterParam,
    FilterSign,
    JsonSerializer,
    LimitParam,
    OffsetParam,
    OrderDirection,
    OrderParam,
    Param,
    SearchParam,
)
from .models import (
    ApiClientError,
    ApiErrorKind,
    ConfigurationError,
    Counterparty,
    EntityList,
    ManyBody,
    Meta,
    MetaEntity,
    Product,
    SingleBody,
)

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ApiErrorKind",
    "Config",
    "ConfigurationError",
    "Counterparty",
    "EntityList",
    "EntityService",
    "ExpandParam",
    "FilterParam",
    "FilterSign",
    "JsonSerializer",
    "LimitParam",
    "ManyBody",
    "Meta",
    "MetaEntity",
    "OffsetParam",
    "OrderDirection",
    "OrderParam",
    "Param",
    "Product",
    "RequestExecutor",
    "SearchParam",
    "SingleBody",
]
