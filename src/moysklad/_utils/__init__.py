from ._logs import masked_headers, setup_logging
from ._params import (
    ExpandParam,
    FilterParam,
    FilterSign,
    LimitParam,
    OffsetParam,
    OrderDirection,
    OrderParam,
    Param,
    SearchParam,
    render_param_string,
)
from ._serializer import JsonSerializer
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "ExpandParam",
    "FilterParam",
    "FilterSign",
    "JsonSerializer",
    "LimitParam",
    "OffsetParam",
    "OrderDirection",
    "OrderParam",
    "Param",
    "SearchParam",
    "get_httpx_client_kwargs",
    "masked_headers",
    "render_param_string",
    "setup_logging",
]
