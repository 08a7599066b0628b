"""TLS verification settings for the default httpx transport."""

import os
import ssl
from typing import Any, Dict, Optional

CA_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """Create the verifying SSL context used by both httpx clients.

    The operating system trust store is used through ``truststore`` when it
    is installed. Otherwise the CA bundle comes from ``SSL_CERT_FILE`` or
    ``REQUESTS_CA_BUNDLE`` (first one set), then from ``certifi``, and
    ``SSL_CERT_DIR`` adds a directory of certificates.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, CA_ENV_VARS) if path), certifi.where()
        )
        return ssl.create_default_context(
            cafile=cafile, capath=_env_path("SSL_CERT_DIR")
        )


def get_httpx_client_kwargs() -> Dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients.

    Only certificate verification is configured. Timeouts, redirects and
    connection limits keep the httpx defaults.
    """
    return {"verify": create_ssl_context()}
