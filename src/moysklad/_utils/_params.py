"""Typed query parameters.

The API takes several composite query values, e.g.
``filter=name~Widget;archived=false`` or ``expand=agent,owner``. Each
``Param`` carries a ``type`` tag naming the query key it belongs to; all params
sharing a tag are rendered together into a single value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence, Union


class FilterSign(str, Enum):
    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER = ">"
    LESSER = "<"
    GREATER_OR_EQUALS = ">="
    LESSER_OR_EQUALS = "<="
    LIKE = "~"
    PREFIX = "~="
    POSTFIX = "=~"


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Param:
    """Base class for a typed query parameter.

    Subclasses set ``type`` to the query key and implement ``render``.
    ``separator`` joins several params of the same type; ``None`` means the
    parameter is single-valued and the last one wins.
    """

    type: ClassVar[str] = ""
    separator: ClassVar[Optional[str]] = None

    def render(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class FilterParam(Param):
    type: ClassVar[str] = "filter"
    separator: ClassVar[Optional[str]] = ";"

    field: str
    sign: Union[FilterSign, str]
    value: Union[str, int, float, bool]

    def render(self) -> str:
        sign = self.sign.value if isinstance(self.sign, FilterSign) else self.sign
        value = str(self.value).lower() if isinstance(self.value, bool) else self.value
        return f"{self.field}{sign}{value}"


@dataclass(frozen=True)
class ExpandParam(Param):
    type: ClassVar[str] = "expand"
    separator: ClassVar[Optional[str]] = ","

    field: str

    def render(self) -> str:
        return self.field


@dataclass(frozen=True)
class OrderParam(Param):
    type: ClassVar[str] = "order"
    separator: ClassVar[Optional[str]] = ";"

    field: str
    direction: OrderDirection = OrderDirection.ASC

    def render(self) -> str:
        return f"{self.field},{OrderDirection(self.direction).value}"


@dataclass(frozen=True)
class LimitParam(Param):
    type: ClassVar[str] = "limit"

    limit: int

    def render(self) -> str:
        return str(self.limit)


@dataclass(frozen=True)
class OffsetParam(Param):
    type: ClassVar[str] = "offset"

    offset: int

    def render(self) -> str:
        return str(self.offset)


@dataclass(frozen=True)
class SearchParam(Param):
    type: ClassVar[str] = "search"

    text: str

    def render(self) -> str:
        return self.text


def render_param_string(param_type: str, params: Sequence[Param]) -> str:
    """Render every param tagged ``param_type`` into one query value.

    Args:
        param_type: The type tag to render, e.g. ``"filter"``.
        params: All params of the request; those with another tag are skipped.

    Returns:
        The joined value, or an empty string if no param has the tag.
    """
    matching = [param for param in params if param.type == param_type]
    if not matching:
        return ""

    separator = matching[0].separator
    if separator is None:
        return matching[-1].render()
    return separator.join(param.render() for param in matching)
