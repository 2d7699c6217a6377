"""Transports that deliver built documents to a GraphQL server."""

from .base import Transport, TransportResponse
from .http import HTTPTransport

__all__ = [
    "Transport",
    "TransportResponse",
    "HTTPTransport",
]
