"""
Exception hierarchy for graphql_helper.

Construction-time failures (duplicate names, malformed templates) are raised
synchronously by the builders. Invocation-time failures are raised from the
awaited operation: server-reported GraphQL errors as GraphQLOperationError,
transport failures as TransportError.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp


class GraphQLHelperError(Exception):
    """
    Base exception for all graphql_helper errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = kwargs


class TemplateError(GraphQLHelperError, ValueError):
    """Raised for malformed template literals or empty names."""

    pass


class ConfigurationError(GraphQLHelperError):
    """Raised when the engine is used without a usable configuration."""

    pass


class DuplicateRegistrationError(GraphQLHelperError):
    """
    Raised when a fragment or operation name is registered twice.

    Attributes:
        kind: Either "fragment" or "operation"
        name: The offending name
    """

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} {name!r} is already registered", kind=kind, name=name)
        self.kind = kind
        self.name = name


class GraphQLOperationError(GraphQLHelperError):
    """
    Raised when the server response carries a non-empty ``errors`` array.

    The ``errors`` attribute is the server's list exactly as received.
    """

    def __init__(self, errors: List[Dict[str, Any]], document: Optional[str] = None) -> None:
        messages = "; ".join(
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in errors
        )
        super().__init__(f"GraphQL operation failed: {messages}", document=document)
        self.errors = errors
        self.document = document


class TransportError(GraphQLHelperError):
    """
    Raised by a transport when the request itself fails.

    Attributes:
        url: Endpoint that was called
        status_code: HTTP status, when a response was received
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, url=url, status_code=status_code)
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class ErrorHandler:
    """Converts aiohttp failures into TransportError."""

    @staticmethod
    def handle_aiohttp_error(error: Exception, url: Optional[str] = None) -> TransportError:
        """
        Convert an aiohttp (or asyncio timeout) exception to TransportError.

        Args:
            error: The original exception
            url: The URL that caused the error

        Returns:
            TransportError wrapping ``error``
        """
        if isinstance(error, asyncio.TimeoutError):
            message = f"Request timed out: {error}"
        elif isinstance(error, aiohttp.ClientResponseError):
            return TransportError(
                f"HTTP error {error.status}: {error.message}",
                url=url,
                status_code=error.status,
                original_error=error,
            )
        elif isinstance(error, aiohttp.ClientConnectionError):
            message = f"Connection error: {error}"
        elif isinstance(error, aiohttp.ClientPayloadError):
            message = f"Payload error: {error}"
        else:
            message = f"Unexpected network error: {error}"
        return TransportError(message, url=url, original_error=error)
