from typing import Optional

from pydantic import BaseModel, Field, HttpUrl, field_validator

from ._utils.constants import DEFAULT_HOST, DEFAULT_TIMEOUT


class Config(BaseModel):
    host: str = DEFAULT_HOST
    token: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    @field_validator("host", mode="before")
    @classmethod
    def validate_host(cls, value: str) -> str:
        # scheme and host only, e.g. https://api.moysklad.ru
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid host"
        assert url_value.path in (None, "", "/"), "Host must not contain a path"
        return value.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.token) or bool(self.login and self.password)
