"""
API Request Builder - fluent single-request HTTP builder
"""

__version__ = "0.1.0"

from .config import BuilderConfig, TimeoutConfig
from .types import (
    HTTP_METHODS,
    RESPONSE_TYPES,
    ApiResponse,
    HttpMethod,
    RequestDescriptor,
    ResponseType,
    Transport,
)
from .errors import RequestBuilderError, MissingConfigurationError, InvalidArgumentError
from .transport import HttpxTransport
from .builder import RequestBuilder

__all__ = [
    "BuilderConfig", "TimeoutConfig",
    "HTTP_METHODS", "RESPONSE_TYPES",
    "ApiResponse", "HttpMethod", "RequestDescriptor", "ResponseType", "Transport",
    "RequestBuilderError", "MissingConfigurationError", "InvalidArgumentError",
    "HttpxTransport",
    "RequestBuilder",
]
