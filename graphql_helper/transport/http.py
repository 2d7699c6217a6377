"""
HTTP transport backed by aiohttp.

Each document is POSTed as ``{"query": document, "variables": ...}`` to the
configured host. The response body is parsed as JSON whatever its status
code, since GraphQL servers report errors inside the body.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Mapping, Optional

import aiohttp

from ..config import GraphQLHelperConfig
from ..exceptions import ErrorHandler, TransportError
from .base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class HTTPTransport(Transport):
    """
    POST documents to a GraphQL endpoint.

    Used as an async context manager, one ``aiohttp.ClientSession`` is shared
    by every request until exit; otherwise each request opens and closes its
    own session.

    Examples:
        ```python
        transport = HTTPTransport(GraphQLHelperConfig(host="https://api.example.com/graphql"))
        async with transport:
            response = await transport.send("query Env  { env }")
        ```
    """

    def __init__(self, config: GraphQLHelperConfig):
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

    def _create_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            headers=self.config.request_headers(),
        )

    async def __aenter__(self) -> HTTPTransport:
        if self._session is None or self._session.closed:
            self._session = self._create_session()
        return self

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_body(self, document: str, variables: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Request body; variables are JSON-encoded once more when configured."""
        if self.config.encode_variables:
            encoded: Any = json.dumps(variables)
        else:
            encoded = variables
        return {"query": document, "variables": encoded}

    async def send(self, document: str, variables: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        url = self.config.endpoint
        body = self.build_body(document, variables)
        logger.debug("POST %s (%d bytes of document)", url, len(document))

        try:
            if self._session is not None and not self._session.closed:
                return await self._post(self._session, url, body)
            async with self._create_session() as session:
                return await self._post(session, url, body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ErrorHandler.handle_aiohttp_error(e, url=url) from e

    async def _post(self, session: aiohttp.ClientSession, url: str, body: Dict[str, Any]) -> TransportResponse:
        async with session.post(url, json=body) as response:
            text = await response.text()
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError as e:
                raise TransportError(
                    f"Response is not valid JSON (HTTP {response.status})",
                    url=url,
                    status_code=response.status,
                    original_error=e,
                ) from e
            if not isinstance(decoded, dict):
                raise TransportError(
                    "Response JSON is not an object",
                    url=url,
                    status_code=response.status,
                )
            logger.debug("Response from %s: HTTP %d", url, response.status)
            return TransportResponse.from_json(decoded, status_code=response.status)
