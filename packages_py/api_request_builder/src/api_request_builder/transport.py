"""
Default transport based on httpx.
"""
import json
import logging
from typing import Any, Dict, Optional, Union

import httpx

from .config import BuilderConfig, TimeoutConfig, normalize_timeout
from .types import BODY_METHODS, ApiResponse, RequestDescriptor

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[HttpxTransport]"
MAX_LOGGED_BODY = 5000


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


def _format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        try:
            if body.strip().startswith(("{", "[")):
                return json.dumps(json.loads(body), indent=2)
        except json.JSONDecodeError:
            pass
        if len(body) > MAX_LOGGED_BODY:
            return body[:MAX_LOGGED_BODY] + "... (truncated)"
        return body
    if isinstance(body, (dict, list)):
        try:
            return json.dumps(body, indent=2)
        except (TypeError, ValueError):
            return str(body)
    return str(body)


def _safe_headers(headers: Dict[str, str]) -> Dict[str, str]:
    return {
        key: _mask_value(value) if key.lower() == "authorization" else value
        for key, value in headers.items()
    }


def _decode(response: httpx.Response, response_type: str) -> Any:
    """Decode the response payload according to the requested response type."""
    if response_type == "json":
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            # Covers JSONDecodeError and UnicodeDecodeError
            pass
        try:
            return response.content.decode(response.charset_encoding or "utf-8")
        except (UnicodeDecodeError, LookupError):
            return response.content
    if response_type in ("text", "document"):
        return response.text
    # arraybuffer, blob, stream
    return response.content


class HttpxTransport:
    """
    Transport wrapping httpx.AsyncClient.

    An injected client is used as-is and never closed. Otherwise the
    transport owns a client between connect() and close(), or opens a
    one-shot client per request when not connected.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
        raise_for_status: bool = True,
    ):
        self._client = client
        self._timeout = normalize_timeout(timeout)
        self._raise_for_status = raise_for_status

        # Flag to track if we own the client (created it)
        self._own_client = client is None

    @classmethod
    def from_config(cls, config: BuilderConfig, **kwargs: Any) -> "HttpxTransport":
        """Factory method to create a transport from builder config."""
        return cls(timeout=config.timeout, **kwargs)

    def _create_client(self) -> httpx.AsyncClient:
        timeout = httpx.Timeout(
            connect=self._timeout.connect,
            read=self._timeout.read,
            write=self._timeout.write,
            pool=self._timeout.pool,
        )
        return httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def connect(self) -> None:
        """Initialize the client if needed."""
        if self._client:
            return
        self._client = self._create_client()

    async def close(self) -> None:
        """Close the client if we own it."""
        if self._own_client and self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def __call__(self, descriptor: RequestDescriptor) -> ApiResponse:
        """Send one request described by the descriptor."""
        if self._client:
            return await self._send(self._client, descriptor)

        async with self._create_client() as client:
            return await self._send(client, descriptor)

    async def _send(self, client: httpx.AsyncClient, descriptor: RequestDescriptor) -> ApiResponse:
        method = descriptor["method"]
        url = descriptor["url"]
        headers = dict(descriptor.get("headers") or {})
        params = descriptor.get("params") or None
        response_type = descriptor.get("response_type", "json")

        body = descriptor.get("body") if method in BODY_METHODS else None
        content: Any = None
        json_body: Any = None
        if isinstance(body, (bytes, bytearray, str)):
            content = body
        elif body is not None:
            json_body = body

        logger.debug(f"{LOG_PREFIX} Request: {method} {url} headers={_safe_headers(headers)}")
        if body is not None:
            logger.debug(f"{LOG_PREFIX} Request body: {_format_body(body)}")

        try:
            response = await client.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                content=content,
                json=json_body,
            )
            if self._raise_for_status:
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"{LOG_PREFIX} {method} {url} returned {e.response.status_code}")
            raise
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            raise

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {response.reason_phrase}")

        return ApiResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            url=str(response.url),
            headers=dict(response.headers),
            data=_decode(response, response_type),
            ok=response.is_success,
            response_type=response_type,
        )
