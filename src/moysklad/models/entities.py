from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .meta import Meta, MetaEntity

EntityT = TypeVar("EntityT", bound=MetaEntity)


class Product(MetaEntity):
    code: Optional[str] = Field(default=None, alias="code")
    article: Optional[str] = Field(default=None, alias="article")
    description: Optional[str] = Field(default=None, alias="description")
    external_code: Optional[str] = Field(default=None, alias="externalCode")
    path_name: Optional[str] = Field(default=None, alias="pathName")
    archived: Optional[bool] = Field(default=None, alias="archived")
    weight: Optional[float] = Field(default=None, alias="weight")
    volume: Optional[float] = Field(default=None, alias="volume")
    updated: Optional[str] = Field(default=None, alias="updated")


class Counterparty(MetaEntity):
    company_type: Optional[str] = Field(default=None, alias="companyType")
    inn: Optional[str] = Field(default=None, alias="inn")
    email: Optional[str] = Field(default=None, alias="email")
    phone: Optional[str] = Field(default=None, alias="phone")
    actual_address: Optional[str] = Field(default=None, alias="actualAddress")
    legal_title: Optional[str] = Field(default=None, alias="legalTitle")
    external_code: Optional[str] = Field(default=None, alias="externalCode")
    archived: Optional[bool] = Field(default=None, alias="archived")


class EntityList(BaseModel, Generic[EntityT]):
    """A page of entities as returned by ``GET /entity/<type>``.

    ``meta.size`` is the total number of matching entities, ``rows`` holds at
    most ``meta.limit`` of them starting at ``meta.offset``.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    context: Optional[Dict[str, Any]] = Field(default=None, alias="context")
    meta: Optional[Meta] = Field(default=None, alias="meta")
    rows: List[EntityT] = Field(default_factory=list, alias="rows")
