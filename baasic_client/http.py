"""
Baasic Client HTTP Transport

HttpClient performs exactly one request per call over its own connection and
delivers exactly one outcome. Transport errors and JSON parse errors are not
caught: they reach the caller unchanged. There is no retry, no timeout and no
redirect following.
"""

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from .errors import HttpResponseError
from .types import HttpRequest, HttpResponse


logger = logging.getLogger("baasic_client")

SECURE_SCHEMES = ("https", "wss")
HTTPS_PORT = 443
HTTP_PORT = 80

Resolve = Callable[[Any], None]
Reject = Callable[[BaseException], None]


def resolve_port(url: httpx.URL) -> int:
    """Return the URL's explicit port, else the scheme's standard port."""
    if url.port is not None:
        return url.port
    return HTTPS_PORT if url.scheme in SECURE_SCHEMES else HTTP_PORT


def encode_body(data: Any) -> Optional[bytes]:
    """Serialize a request body to UTF-8 JSON, or None when there is no body."""
    if data is None:
        return None
    return json.dumps(data).encode("utf-8")


def parse_body(content: bytes) -> Any:
    """Parse a response body; an empty body yields None."""
    if not content:
        return None
    return json.loads(content)


def create_url(path: str, base: Optional[str] = None) -> httpx.URL:
    """Build a URL from a path and an optional base (plain concatenation)."""
    return httpx.URL(f"{base}{path}" if base else path)


def build_target(request: HttpRequest) -> httpx.URL:
    """Pin host, port, path and query of the outgoing request."""
    url = request.url
    return url.copy_with(port=resolve_port(url))


def build_headers(request: HttpRequest, payload: Optional[bytes]) -> Dict[str, str]:
    headers = dict(request.headers)
    if payload is not None:
        headers["Content-Length"] = str(len(payload))
    return headers


def parse_error_body(content: bytes) -> Any:
    """Parse an error response body; non-JSON bodies are kept as text."""
    try:
        return parse_body(content)
    except ValueError:
        return content.decode("utf-8", errors="replace")


def to_response(
    request: HttpRequest,
    response: httpx.Response,
    parse: Callable[[bytes], Any] = parse_body,
) -> HttpResponse:
    return HttpResponse(
        request=request,
        headers=dict(response.headers),
        status_code=response.status_code,
        status_text=response.reason_phrase,
        data=parse(response.content),
    )


class HttpClient:
    """
    Default transport adapter.

    Opens a fresh httpx.AsyncClient for every call, so no connection is
    reused across requests.
    """

    def create_promise(self, defer_fn: Callable[[Resolve, Reject], None]) -> "asyncio.Future[Any]":
        """
        Create a future settled by ``defer_fn(resolve, reject)``.

        The future is settled at most once; later resolve/reject calls are
        ignored. An exception raised by ``defer_fn`` rejects the future.
        """
        loop = asyncio.get_running_loop()
        future: "asyncio.Future[Any]" = loop.create_future()

        def resolve(value: Any) -> None:
            if not future.done():
                future.set_result(value)

        def reject(error: BaseException) -> None:
            if not future.done():
                future.set_exception(error)

        try:
            defer_fn(resolve, reject)
        except Exception as error:
            reject(error)
        return future

    async def request(self, request: HttpRequest) -> HttpResponse:
        """Send one request and return its response envelope."""
        payload = encode_body(request.data)
        headers = build_headers(request, payload)
        url = build_target(request)

        logger.debug("[Baasic] %s %s", request.method, url)

        async with httpx.AsyncClient(timeout=None, follow_redirects=False) as client:
            response = await client.request(
                request.method,
                url,
                headers=headers,
                content=payload,
            )

        return to_response(request, response)


class PooledHttpClient:
    """
    Transport over a caller-owned httpx.AsyncClient.

    Connections are pooled by the shared client. Non-success responses are
    raised as HttpResponseError carrying the full response envelope.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def request(self, request: HttpRequest) -> HttpResponse:
        payload = encode_body(request.data)
        headers = build_headers(request, payload)

        logger.debug("[Baasic] %s %s (pooled)", request.method, request.url)

        response = await self._client.request(
            request.method,
            request.url,
            headers=headers,
            content=payload,
        )
        if not response.is_success:
            raise HttpResponseError(to_response(request, response, parse_error_body))
        return to_response(request, response)

    async def close(self) -> None:
        """Close the shared HTTP client."""
        await self._client.aclose()
