"""Error taxonomy for a chat turn.

Every error aborts the current turn; none are recovered inside the package.
"""

from __future__ import annotations

from typing import Any


class ShopAgentError(Exception):
    """Base class for all shop agent failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ShopAgentError):
    """Required credentials or settings are missing."""


class ArgumentParseError(ShopAgentError):
    """The model produced tool arguments that could not be parsed."""

    def __init__(self, message: str, raw_arguments: str | None = None) -> None:
        super().__init__(message)
        self.raw_arguments = raw_arguments


class UnknownToolError(ShopAgentError):
    """The model named a tool outside the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Function {name} is not implemented.")
        self.name = name


class CommerceQueryError(ShopAgentError):
    """The commerce graph endpoint rejected a query."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors
        self.status_code = status_code


class CommerceConnectionError(CommerceQueryError):
    """The commerce endpoint could not be reached."""


class ModelAPIError(ShopAgentError):
    """The language-model call failed or returned an unexpected shape."""
