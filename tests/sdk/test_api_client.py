import ssl

import httpx
import pytest
from pydantic import ValidationError

from moysklad import ApiClient, ConfigurationError, EntityService, Product
from moysklad._utils import get_httpx_client_kwargs
from moysklad._utils.constants import DEFAULT_HOST


class TestApiClient:
    def test_init_with_token(self, host: str, token: str):
        api = ApiClient(host, token=token)

        assert api.host == host
        assert api.token == token
        assert isinstance(api.client, httpx.Client)

        api.close()

    def test_host_trailing_slash_is_stripped(self, token: str):
        api = ApiClient("https://api.moysklad.test/", token=token)

        assert api.host == "https://api.moysklad.test"

        api.close()

    def test_invalid_host_raises(self, token: str):
        with pytest.raises(ValidationError):
            ApiClient("not a url", token=token)

    def test_missing_credentials_raises(self, host: str):
        with pytest.raises(ConfigurationError):
            ApiClient(host)

    def test_login_without_password_raises(self, host: str):
        with pytest.raises(ConfigurationError):
            ApiClient(host, login="admin@shop")

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MOYSKLAD_LOGIN", "admin@shop")
        monkeypatch.setenv("MOYSKLAD_PASSWORD", "s3cret")

        api = ApiClient()

        assert api.host == DEFAULT_HOST
        assert api.token is None
        assert api.login == "admin@shop"
        assert api.password == "s3cret"

        api.close()

    def test_arguments_take_precedence_over_environment(
        self, monkeypatch: pytest.MonkeyPatch, host: str
    ):
        monkeypatch.setenv("MOYSKLAD_HOST", "https://other.moysklad.test")
        monkeypatch.setenv("MOYSKLAD_TOKEN", "env-token")

        api = ApiClient(host, token="arg-token")

        assert api.host == host
        assert api.token == "arg-token"

        api.close()

    def test_timeout_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, host: str, token: str
    ):
        monkeypatch.setenv("MOYSKLAD_TIMEOUT", "12.5")

        api = ApiClient(host, token=token)

        assert api.client is not None
        assert api.client.timeout.read == 12.5

        api.close()

    def test_invalid_timeout_in_environment_raises(
        self, monkeypatch: pytest.MonkeyPatch, host: str, token: str
    ):
        monkeypatch.setenv("MOYSKLAD_TIMEOUT", "abc")

        with pytest.raises(ValidationError):
            ApiClient(host, token=token)

    def test_close_releases_owned_transport(self, host: str, token: str):
        with ApiClient(host, token=token) as api:
            transport = api.client

        assert api.client is None
        assert transport is not None and transport.is_closed

    def test_close_keeps_injected_transport_open(self, host: str, token: str):
        transport = httpx.Client()
        api = ApiClient(host, token=token, client=transport)

        api.close()

        assert api.client is None
        assert not transport.is_closed

        transport.close()

    def test_entity_services(self, api: ApiClient):
        assert api.products.entity_type == "product"
        assert api.counterparties.entity_type == "counterparty"
        assert isinstance(api.entity("service", Product), EntityService)

    def test_executor_shortcuts(self, api: ApiClient, api_url: str):
        assert api.path("/entity/product")._build_full_url() == (
            f"{api_url}/entity/product"
        )
        assert api.url("https://x.test/a")._build_full_url() == "https://x.test/a"

    def test_default_transport_kwargs(self):
        kwargs = get_httpx_client_kwargs(5.0)

        assert isinstance(kwargs["verify"], ssl.SSLContext)
        assert kwargs["timeout"] == httpx.Timeout(5.0)
        assert kwargs["follow_redirects"] is True
