from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Meta(BaseModel):
    """Reference block the API attaches to every entity and list."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )
    href: Optional[str] = Field(default=None, alias="href")
    metadata_href: Optional[str] = Field(default=None, alias="metadataHref")
    type: Optional[str] = Field(default=None, alias="type")
    media_type: Optional[str] = Field(default=None, alias="mediaType")
    uuid_href: Optional[str] = Field(default=None, alias="uuidHref")
    download_href: Optional[str] = Field(default=None, alias="downloadHref")
    size: Optional[int] = Field(default=None, alias="size")
    limit: Optional[int] = Field(default=None, alias="limit")
    offset: Optional[int] = Field(default=None, alias="offset")
    next_href: Optional[str] = Field(default=None, alias="nextHref")
    previous_href: Optional[str] = Field(default=None, alias="previousHref")


class MetaEntity(BaseModel):
    """Base model for every object sent to or returned by the API."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )
    meta: Optional[Meta] = Field(default=None, alias="meta")
    id: Optional[str] = Field(default=None, alias="id")
    account_id: Optional[str] = Field(default=None, alias="accountId")
    name: Optional[str] = Field(default=None, alias="name")
