"""
Transport interface.

A transport sends one document with its variables and returns the decoded
``{data, errors}`` envelope. It raises TransportError for failures of the
request itself; GraphQL errors are returned, not raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class TransportResponse:
    """Decoded GraphQL response envelope."""

    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[Dict[str, Any]]] = None
    status_code: Optional[int] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_json(cls, body: Mapping[str, Any], status_code: Optional[int] = None) -> TransportResponse:
        return cls(data=body.get("data"), errors=body.get("errors"), status_code=status_code)


class Transport(ABC):
    """Sends GraphQL documents to a server."""

    @abstractmethod
    async def send(self, document: str, variables: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        """
        Send a document.

        Args:
            document: Full document text
            variables: Variable values, or None

        Returns:
            TransportResponse
        """

    async def close(self) -> None:
        """Release any held resources."""

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
