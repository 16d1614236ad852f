"""
Core type definitions for api-request-builder.
"""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Literal, Optional, Tuple, TypedDict, Union

# HTTP Methods
HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

HTTP_METHODS: Tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH")

# Methods that carry a request body
BODY_METHODS: Tuple[str, ...] = ("POST", "PUT", "PATCH")

# Expected response payload interpretation
ResponseType = Literal["arraybuffer", "blob", "document", "json", "text", "stream"]

RESPONSE_TYPES: Tuple[str, ...] = ("arraybuffer", "blob", "document", "json", "text", "stream")

QueryValue = Union[str, int, float]


class RequestDescriptor(TypedDict):
    """Fully resolved request handed to a transport."""
    method: HttpMethod
    url: str
    headers: Dict[str, str]
    params: Dict[str, QueryValue]  # Query parameters
    body: Any
    response_type: ResponseType


# Any async callable taking a descriptor and returning the response value
Transport = Callable[[RequestDescriptor], Awaitable[Any]]


@dataclass
class ApiResponse:
    """Standardized response object returned by HttpxTransport."""
    status: int
    status_text: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    data: Any = None  # Decoded according to the response type
    ok: bool = False
    response_type: Optional[ResponseType] = None
