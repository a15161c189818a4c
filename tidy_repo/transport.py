"""
HTTP Transport for Tidy Repo.

A thin facade over ``httpx.AsyncClient``: sends a method/url/headers request
and hands back the status code and raw body. Status codes are not
interpreted here and nothing is retried.
"""

import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from tidy_repo.exceptions import TransportError
from tidy_repo.logging import log_http_request, log_http_response


@dataclass(frozen=True)
class HTTPRequest:
    """An outgoing request to an absolute URL."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HTTPResponse:
    """Status code and undecoded body of a response."""

    status_code: int
    body: str


class HTTPTransport:
    """
    Async HTTP transport layer.

    Handles:
    - Request/response logging with credentials masked
    - Translation of ``httpx`` failures into TransportError
    """

    def __init__(
        self,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            timeout: Request timeout; httpx's default when omitted
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "HTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        """
        Send a request and return its response, whatever the status.

        Args:
            request: Method, absolute URL and headers to send

        Returns:
            HTTPResponse with status code and body text

        Raises:
            TransportError: On connection failures, malformed responses or
                URLs httpx rejects
        """
        log_http_request(request.method, request.url, request.headers)
        started = time.monotonic()

        try:
            response = await self._client.request(
                request.method, request.url, headers=request.headers
            )
            body = response.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e) or e.__class__.__name__) from e

        log_http_response(
            response.status_code,
            request.url,
            body=body,
            elapsed_ms=(time.monotonic() - started) * 1000,
        )
        return HTTPResponse(status_code=response.status_code, body=body)
