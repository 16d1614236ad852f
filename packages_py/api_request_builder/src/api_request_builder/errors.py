from typing import Any, Iterable


class RequestBuilderError(Exception):
    """Base exception for request builder errors."""
    pass


class MissingConfigurationError(RequestBuilderError, ValueError):
    def __init__(self, field_name: str, setter: str):
        msg = f"{field_name} is missing. Use {setter}() to set it."
        super().__init__(msg)
        self.field_name = field_name
        self.setter = setter


class InvalidArgumentError(RequestBuilderError, ValueError):
    def __init__(self, argument: str, value: Any, allowed: Iterable[str]):
        allowed = tuple(allowed)
        msg = f"Invalid {argument} '{value}'. Expected one of: {', '.join(allowed)}"
        super().__init__(msg)
        self.argument = argument
        self.value = value
        self.allowed = allowed
