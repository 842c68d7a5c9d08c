from logging import getLogger
from os import environ as env
from typing import Optional, Type

import httpx
from dotenv import load_dotenv

from ._config import Config
from ._http import RequestExecutor
from ._services.entity_service import EntityService
from ._utils import JsonSerializer, get_httpx_client_kwargs, setup_logging
from ._utils.constants import (
    DEFAULT_HOST,
    DEFAULT_TIMEOUT,
    DOTENV_FILE,
    ENV_DEBUG,
    ENV_HOST,
    ENV_LOGIN,
    ENV_PASSWORD,
    ENV_TIMEOUT,
    ENV_TOKEN,
)
from .models import ConfigurationError, Counterparty, Product
from .models.entities import EntityT

load_dotenv(DOTENV_FILE)


class ApiClient:
    """Entry point to the MoySklad JSON API.

    Holds the host, the credentials, the HTTP transport and the serializer
    shared by every request built from it. Arguments that are not passed are
    read from the ``MOYSKLAD_*`` environment variables (a ``.env`` file in the
    working directory is loaded).

    Examples:
        ```python
        from moysklad import ApiClient

        with ApiClient(token="...") as api:
            page = api.products.list()
            for product in page.rows:
                print(product.name)
        ```
    """

    def __init__(
        self,
        host: Optional[str] = None,
        *,
        token: Optional[str] = None,
        login: Optional[str] = None,
        password: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        serializer: Optional[JsonSerializer] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
    ) -> None:
        self._config = Config(
            host=host or env.get(ENV_HOST) or DEFAULT_HOST,
            token=token or env.get(ENV_TOKEN),
            login=login or env.get(ENV_LOGIN),
            password=password or env.get(ENV_PASSWORD),
            timeout=timeout or env.get(ENV_TIMEOUT) or DEFAULT_TIMEOUT,
            debug=debug
            if debug is not None
            else env.get(ENV_DEBUG, "").lower() in ("1", "true", "yes"),
        )
        if not self._config.has_credentials:
            raise ConfigurationError(
                "Authentication required. Pass a token or a login and password, "
                f"or set the {ENV_TOKEN} environment variable."
            )

        setup_logging(self._config.debug)
        self._logger = getLogger("moysklad")
        self._logger.debug(f"HOST: {self._config.host}")

        self._owns_client = client is None
        self._client: Optional[httpx.Client] = client or httpx.Client(
            **get_httpx_client_kwargs(self._config.timeout)
        )
        self._serializer = serializer or JsonSerializer()

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def token(self) -> Optional[str]:
        return self._config.token

    @property
    def login(self) -> Optional[str]:
        return self._config.login

    @property
    def password(self) -> Optional[str]:
        return self._config.password

    @property
    def client(self) -> Optional[httpx.Client]:
        """The HTTP transport, ``None`` once the client has been closed."""
        return self._client

    @property
    def serializer(self) -> JsonSerializer:
        return self._serializer

    def path(self, path: str) -> RequestExecutor:
        return RequestExecutor.for_path(self, path)

    def url(self, url: str) -> RequestExecutor:
        return RequestExecutor.for_url(self, url)

    def entity(self, entity_type: str, model: Type[EntityT]) -> EntityService[EntityT]:
        return EntityService(self, entity_type, model)

    @property
    def products(self) -> EntityService[Product]:
        return self.entity("product", Product)

    @property
    def counterparties(self) -> EntityService[Counterparty]:
        return self.entity("counterparty", Counterparty)

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
        self._client = None

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
