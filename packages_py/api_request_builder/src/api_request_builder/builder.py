"""
Fluent API request builder.
"""
import logging
from typing import Any, Dict, Optional

from .config import BuilderConfig
from .errors import InvalidArgumentError, MissingConfigurationError
from .transport import HttpxTransport, _mask_value
from .types import (
    BODY_METHODS,
    RESPONSE_TYPES,
    HttpMethod,
    QueryValue,
    RequestDescriptor,
    ResponseType,
    Transport,
)

logger = logging.getLogger(__name__)

LOG_PREFIX = "[RequestBuilder]"


class RequestBuilder:
    """
    Fluent builder for a single API request.

    Setters mutate the builder in place and return it, so calls can be
    chained. State is never reset by execute(); the same builder can be
    executed again, as-is or after further changes.

    Example:
        response = await (
            RequestBuilder("https://api.example.com", token="T")
            .as_get()
            .set_relative_path("/users")
            .set_query_parameters({"limit": 10})
            .execute()
        )
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        self._method: HttpMethod = "GET"
        self._base_url = base_url
        self._resource = ""
        self._headers: Dict[str, str] = {}
        self._body: Any = None
        self._query_params: Dict[str, QueryValue] = {}
        self._response_type: ResponseType = "json"
        self._token = token
        self._transport: Transport = transport if transport is not None else HttpxTransport()

        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_config(
        cls, config: BuilderConfig, transport: Optional[Transport] = None
    ) -> "RequestBuilder":
        """Create a builder seeded from a BuilderConfig."""
        if transport is None:
            transport = HttpxTransport.from_config(config)
        builder = cls(config.base_url, config.token_value, transport)
        return builder.set_response_type(config.response_type)

    # Method selection

    def as_get(self) -> "RequestBuilder":
        self._method = "GET"
        return self

    def as_post(self, body: Any = None) -> "RequestBuilder":
        """Sets the method to POST and replaces the request body."""
        self._method = "POST"
        self._body = body
        return self

    def as_put(self, body: Any = None) -> "RequestBuilder":
        """Sets the method to PUT and replaces the request body."""
        self._method = "PUT"
        self._body = body
        return self

    def as_delete(self) -> "RequestBuilder":
        self._method = "DELETE"
        return self

    def as_patch(self, body: Any = None) -> "RequestBuilder":
        """Sets the method to PATCH and replaces the request body."""
        self._method = "PATCH"
        self._body = body
        return self

    # Configuration

    def set_base_url(self, url: str) -> "RequestBuilder":
        self._base_url = url
        return self

    def set_relative_path(self, path: str) -> "RequestBuilder":
        self._resource = path
        return self

    def set_query_parameters(self, params: Dict[str, QueryValue]) -> "RequestBuilder":
        """Replaces all query parameters; previous ones are discarded."""
        self._query_params = params
        return self

    def set_token(self, token: str) -> "RequestBuilder":
        """Updates the bearer token in the Authorization header."""
        self._token = token
        self._headers["Authorization"] = f"Bearer {token}"
        return self

    def set_response_type(self, response_type: ResponseType) -> "RequestBuilder":
        if response_type not in RESPONSE_TYPES:
            raise InvalidArgumentError("response_type", response_type, RESPONSE_TYPES)
        self._response_type = response_type
        return self

    # Accessors

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def resource_path(self) -> str:
        return self._resource

    @property
    def url(self) -> str:
        return f"{self._base_url or ''}{self._resource}"

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def body(self) -> Any:
        return self._body

    @property
    def query_parameters(self) -> Dict[str, QueryValue]:
        return dict(self._query_params)

    @property
    def response_type(self) -> ResponseType:
        return self._response_type

    @property
    def token(self) -> Optional[str]:
        return self._token

    # Execution

    def build(self) -> RequestDescriptor:
        """Get a snapshot of the request as currently configured."""
        return {
            "method": self._method,
            "url": self.url,
            "headers": dict(self._headers),
            "params": dict(self._query_params),
            "body": self._body if self._method in BODY_METHODS else None,
            "response_type": self._response_type,
        }

    def _validate(self) -> None:
        if not self._base_url:
            raise MissingConfigurationError("Base URL", "set_base_url")

    async def execute(self) -> Any:
        """
        Execute the request with the current configuration.

        Returns whatever the transport returns. Transport errors propagate
        unchanged. Validation runs when the coroutine is awaited, so a call
        that is never awaited raises nothing.

        Raises:
            MissingConfigurationError: base URL is empty, raised before any I/O.
        """
        self._validate()
        descriptor = self.build()

        auth = descriptor["headers"].get("Authorization")
        logger.debug(
            f"{LOG_PREFIX} execute: {descriptor['method']} {descriptor['url']} "
            f"params={descriptor['params']} response_type={descriptor['response_type']} "
            f"authorization={_mask_value(auth)}"
        )
        return await self._transport(descriptor)
