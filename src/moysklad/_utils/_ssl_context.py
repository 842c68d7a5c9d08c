import os
import ssl
from typing import Any, Optional

import httpx

from .constants import DEFAULT_TIMEOUT


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def get_httpx_client_kwargs(timeout: Optional[float] = None) -> dict[str, Any]:
    """Keyword arguments for building the ``httpx.Client`` used as transport.

    Certificates come from the system store through truststore when it is
    installed, otherwise from ``SSL_CERT_FILE`` / ``REQUESTS_CA_BUNDLE`` /
    ``SSL_CERT_DIR`` or the certifi bundle.
    """
    try:
        import truststore

        verify: ssl.SSLContext = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        verify = ssl.create_default_context(
            cafile=_env_path("SSL_CERT_FILE")
            or _env_path("REQUESTS_CA_BUNDLE")
            or certifi.where(),
            capath=_env_path("SSL_CERT_DIR"),
        )

    return {
        "verify": verify,
        "timeout": httpx.Timeout(timeout or DEFAULT_TIMEOUT),
        "follow_redirects": True,
    }
