"""
HTTP transport for license provider APIs.

Provides a requests session bound to a provider base URL with
default headers, timeouts and optional debug logging.
"""
import base64
import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urljoin

import requests

logger = logging.getLogger(__name__)

# Network, timeout and TLS failures surface as this type, unwrapped
TransportError = requests.exceptions.RequestException

REDACTED = "********"
SENSITIVE_HEADERS = ("authorization", "proxy-authorization")


def basic_auth_header(username: str, password: str) -> str:
    """
    Build an HTTP Basic Authorization header value.

    Args:
        username: Account username
        password: Account password

    Returns:
        Header value, e.g. "Basic dXNlcjpwYXNz"
    """
    credentials = f"{username}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def redact_headers(headers) -> Dict[str, str]:
    """Return a copy of headers with credentials masked."""
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def _decode_body(body: Any) -> Optional[str]:
    if body is None or isinstance(body, str):
        return body
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return repr(body)


def log_exchange(response: requests.Response, *args, **kwargs) -> requests.Response:
    """
    Response hook logging the full request/response exchange.

    Registered only when the provider configuration has debug enabled.
    """
    request = response.request
    logger.debug(
        "Provider API request: %s %s",
        request.method,
        request.url,
        extra={
            "request_headers": redact_headers(request.headers),
            "request_body": _decode_body(request.body),
        },
    )
    logger.debug(
        "Provider API response: %s %s",
        response.status_code,
        response.reason,
        extra={
            "url": request.url,
            "elapsed_seconds": response.elapsed.total_seconds(),
            "response_body": response.text,
        },
    )
    return response


class ProviderHttpClient(requests.Session):
    """
    Session bound to a single provider API.

    Relative request URLs are resolved against base_url the same way
    a URI base is, and every request gets the default timeouts unless
    the caller passes its own.
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        connect_timeout: float = 10,
        timeout: float = 60,
        debug: bool = False,
    ):
        """
        Initialize provider HTTP client.

        Args:
            base_url: Base URL of the provider API
            headers: Default headers sent with every request
            connect_timeout: Seconds to wait for the connection
            timeout: Seconds to wait for the response
            debug: Log every request and response at DEBUG level
        """
        super().__init__()
        self.base_url = base_url
        self.connect_timeout = connect_timeout
        self.timeout = timeout
        self.debug = debug

        if headers:
            self.headers.update(headers)

        if debug:
            self.hooks["response"].append(log_exchange)

    @property
    def default_timeout(self) -> Tuple[float, float]:
        """Return the (connect, read) timeout pair."""
        return (self.connect_timeout, self.timeout)

    def request(self, method, url, *args, **kwargs):
        """Send a request relative to the base URL."""
        kwargs.setdefault("timeout", self.default_timeout)
        return super().request(method, urljoin(self.base_url, url), *args, **kwargs)
