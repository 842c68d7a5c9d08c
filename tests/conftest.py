from typing import Generator

import pytest

from moysklad import ApiClient
from moysklad._utils.constants import (
    API_PATH,
    ENV_DEBUG,
    ENV_HOST,
    ENV_LOGIN,
    ENV_PASSWORD,
    ENV_TIMEOUT,
    ENV_TOKEN,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (ENV_HOST, ENV_TOKEN, ENV_LOGIN, ENV_PASSWORD, ENV_TIMEOUT, ENV_DEBUG):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def host() -> str:
    return "https://api.moysklad.test"


@pytest.fixture
def token() -> str:
    return "test-token"


@pytest.fixture
def api_url(host: str) -> str:
    return f"{host}{API_PATH}"


@pytest.fixture
def api(host: str, token: str) -> Generator[ApiClient, None, None]:
    client = ApiClient(host, token=token)
    yield client
    client.close()
