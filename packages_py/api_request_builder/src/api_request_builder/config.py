"""
Configuration models for api-request-builder.
"""
import logging
import os
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, SecretStr

from .types import ResponseType

logger = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0
DEFAULT_RESPONSE_TYPE = "json"

ENV_BASE_URL = "API_REQUEST_BASE_URL"
ENV_TOKEN = "API_REQUEST_TOKEN"
ENV_RESPONSE_TYPE = "API_REQUEST_RESPONSE_TYPE"
ENV_TIMEOUT = "API_REQUEST_TIMEOUT"


class TimeoutConfig(BaseModel):
    """Timeout configuration."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout


def _resolve(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    """
    Resolve a value from multiple sources in priority order:
    1. Direct argument (if not None)
    2. Environment variables
    3. Default value
    """
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        val = os.getenv(key)
        if val is not None:
            return val

    return default


def _resolve_timeout(arg: Any, env_keys: Union[str, List[str]]) -> Optional[float]:
    val = _resolve(arg, env_keys, None)
    if val is None:
        return None
    try:
        return float(val)
    except (ValueError, TypeError):
        logger.warning(f"Ignoring invalid timeout value: {val!r}")
        return None


class BuilderConfig(BaseModel):
    """Configuration used to seed a RequestBuilder and its transport."""
    base_url: str = ""
    token: Optional[SecretStr] = None
    response_type: ResponseType = DEFAULT_RESPONSE_TYPE
    timeout: TimeoutConfig = Field(default_factory=TimeoutConfig)

    @property
    def token_value(self) -> Optional[str]:
        return self.token.get_secret_value() if self.token else None

    @classmethod
    def from_env(
        cls,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        response_type: Optional[str] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
    ) -> "BuilderConfig":
        """Build config from arguments, falling back to environment variables."""
        resolved_timeout = timeout
        if not isinstance(timeout, TimeoutConfig):
            resolved_timeout = _resolve_timeout(timeout, ENV_TIMEOUT)

        config = cls(
            base_url=_resolve(base_url, ENV_BASE_URL, ""),
            token=_resolve(token, ENV_TOKEN, None),
            response_type=_resolve(response_type, ENV_RESPONSE_TYPE, DEFAULT_RESPONSE_TYPE),
            timeout=normalize_timeout(resolved_timeout),
        )
        logger.debug(
            f"Resolved BuilderConfig: base_url={config.base_url!r}, "
            f"response_type={config.response_type}, token_set={config.token is not None}"
        )
        return config
