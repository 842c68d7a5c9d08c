from .body import ManyBody, RequestBody, SingleBody
from .entities import Counterparty, EntityList, Product
from .errors import ApiClientError, ApiErrorKind, ConfigurationError
from .meta import Meta, MetaEntity

__all__ = [
    "ApiClientError",
    "ApiErrorKind",
    "ConfigurationError",
    "Counterparty",
    "EntityList",
    "ManyBody",
    "Meta",
    "MetaEntity",
    "Product",
    "RequestBody",
    "SingleBody",
]
