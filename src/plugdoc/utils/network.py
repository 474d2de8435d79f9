#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plugdoc/utils/network.py
"""HTTP fetching for the remote HTML conversion path.

This module wraps httpx with the constraints plugdoc applies to every fetch:

- is_network_disabled: Global kill switch via ``PLUGDOC_DISABLE_NETWORK``
- validate_url: Scheme and host checks before any request is made
- create_http_client: httpx client with redirect limiting and user agent
- fetch_content: Streamed GET with size limits, returning raw bytes

Failures surface as :class:`~plugdoc.exceptions.FetchError` (or
:class:`~plugdoc.exceptions.NetworkDisabledError`), never as empty content.
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import urlparse

from plugdoc.constants import DEFAULT_USER_AGENT, DEPS_NETWORK, ENV_DISABLE_NETWORK, ENV_USER_AGENT
from plugdoc.exceptions import FetchError, NetworkDisabledError
from plugdoc.options import FetchOptions
from plugdoc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def is_network_disabled() -> bool:
    """Check if network access is globally disabled via environment variable.

    Returns
    -------
    bool
        True if network access should be disabled, False otherwise

    """
    return os.getenv(ENV_DISABLE_NETWORK, "").lower() in ("true", "1", "yes", "on")


def validate_url(url: str, require_https: bool = False) -> None:
    """Validate that ``url`` is an absolute http(s) URL.

    Parameters
    ----------
    url : str
        URL to validate
    require_https : bool, default False
        If True, only HTTPS URLs are allowed

    Raises
    ------
    FetchError
        If the URL is malformed or uses a disallowed scheme

    """
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise FetchError(f"Malformed URL: {url}", url=url, original_error=e) from e

    scheme = parsed.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise FetchError(f"Unsupported URL scheme {scheme!r}; expected http or https", url=url)
    if require_https and scheme != "https":
        raise FetchError(f"HTTPS required but got {scheme}:// URL", url=url)
    if not parsed.hostname:
        raise FetchError(f"URL has no host: {url}", url=url)


def resolve_user_agent(user_agent: str | None = None) -> str:
    """Return the explicit user agent, the environment override, or the default."""
    return user_agent or os.getenv(ENV_USER_AGENT) or DEFAULT_USER_AGENT


@requires_dependencies("network", DEPS_NETWORK)
def create_http_client(options: FetchOptions | None = None, transport: Any = None) -> Any:
    """Create an httpx client configured from ``options``.

    Redirects are followed, and each redirect target is validated with the
    same rules as the original URL.

    Parameters
    ----------
    options : FetchOptions, optional
        Fetch configuration; defaults are used when omitted
    transport : httpx.BaseTransport, optional
        Custom transport, mainly for tests (``httpx.MockTransport``)

    Returns
    -------
    httpx.Client
        Configured HTTP client

    """
    import httpx

    options = options or FetchOptions()

    def validate_request_url(request: Any) -> None:
        validate_url(str(request.url), require_https=options.require_https)

    client_kwargs: dict[str, Any] = {
        "timeout": options.timeout,
        "follow_redirects": True,
        "max_redirects": options.max_redirects,
        "event_hooks": {"request": [validate_request_url]},
        "headers": {"User-Agent": resolve_user_agent(options.user_agent)},
    }
    if transport is not None:
        client_kwargs["transport"] = transport

    return httpx.Client(**client_kwargs)


@requires_dependencies("network", DEPS_NETWORK)
def fetch_content(url: str, options: FetchOptions | None = None, transport: Any = None) -> bytes:
    """Fetch the body of ``url`` as raw bytes.

    Parameters
    ----------
    url : str
        URL to fetch
    options : FetchOptions, optional
        Fetch configuration; defaults are used when omitted
    transport : httpx.BaseTransport, optional
        Custom transport passed through to :func:`create_http_client`

    Returns
    -------
    bytes
        Response body

    Raises
    ------
    DependencyError
        If httpx is not installed
    NetworkDisabledError
        If ``PLUGDOC_DISABLE_NETWORK`` is set
    FetchError
        If the URL is invalid or cannot be encoded, the transfer fails, the
        server answers with an error status or the body exceeds
        ``options.max_size_bytes``

    """
    from httpx import HTTPError

    options = options or FetchOptions()

    if is_network_disabled():
        raise NetworkDisabledError(
            f"Network access is globally disabled via {ENV_DISABLE_NETWORK} environment variable", url=url
        )

    validate_url(url, require_https=options.require_https)

    try:
        with create_http_client(options, transport=transport) as client:
            with client.stream("GET", url) as response:
                response.raise_for_status()

                content_chunks = []
                total_size = 0
                for chunk in response.iter_bytes(chunk_size=8192):
                    total_size += len(chunk)
                    if total_size > options.max_size_bytes:
                        raise FetchError(
                            f"Response too large: exceeded {options.max_size_bytes} bytes during streaming", url=url
                        )
                    content_chunks.append(chunk)

    except FetchError:
        raise
    except HTTPError as e:
        logger.warning("HTTP request failed for %s: %s", url, e)
        raise FetchError(f"HTTP request failed for {url}: {e}", url=url, original_error=e) from e
    except Exception as e:
        # httpx.InvalidURL and IDNA errors are raised while building the request
        logger.warning("Unexpected error fetching %s: %s", url, e)
        raise FetchError(f"Unexpected error fetching {url}: {e}", url=url, original_error=e) from e

    logger.debug(f"Fetched {total_size} bytes from {url}")
    return b"".join(content_chunks)
