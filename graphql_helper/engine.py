"""
The composition engine.

A GraphQLHelper owns one Registry, the endpoint configuration and the
transport used by every operation it builds. Applications normally create one
at start-up (or use the package-level default) and declare their fragments and
operations against it at import time.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from .config import GraphQLHelperConfig, no_client_mutation_id
from .core import (
    Fragment,
    FragmentBuilder,
    FragmentUnion,
    MutationBuilder,
    Operation,
    Partial,
    QueryBuilder,
    Registry,
    build_partial,
    build_union,
)
from .exceptions import ConfigurationError, GraphQLOperationError
from .transport import HTTPTransport, Transport

logger = logging.getLogger(__name__)


class GraphQLHelper:
    """
    Builds GraphQL documents from templates and runs them.

    Examples:
        ```python
        gql = GraphQLHelper()
        gql.configure(host="https://api.example.com/graphql")

        Post = gql.fragment("Post")("{ id title }")
        get_post = gql.query("GetPost", {"id": "ID!"})(
            "{ post(id: $id) { ", Post, " } }"
        )
        create_post = gql.mutation("createPost", {"title": "String!"})(
            "{ post { ", Post, " } }"
        )

        post = await get_post({"id": "1"})
        payload = await create_post({"title": "Hello"})
        ```
    """

    def __init__(
        self,
        config: Optional[GraphQLHelperConfig] = None,
        transport: Optional[Transport] = None,
        registry: Optional[Registry] = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Endpoint configuration (may be supplied later via configure)
            transport: Transport override; defaults to HTTPTransport(config)
            registry: Name registry; a fresh one is created if omitted
        """
        self.config = config
        self.registry = registry if registry is not None else Registry()
        self._transport = transport

    def configure(
        self,
        host: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        client_mutation_id: Optional[Callable[[], str]] = None,
        config: Optional[GraphQLHelperConfig] = None,
        **kwargs: Any,
    ) -> GraphQLHelperConfig:
        """
        Set the endpoint configuration.

        Either pass a full ``config`` or the individual settings. A previously
        created default HTTP transport is discarded so the next request uses
        the new settings; an explicitly supplied transport is kept.

        Returns:
            The active configuration
        """
        if config is None:
            settings: Dict[str, Any] = {"host": host, "headers": headers or {}}
            if client_mutation_id is not None:
                settings["client_mutation_id"] = client_mutation_id
            settings.update(kwargs)
            try:
                config = GraphQLHelperConfig(**settings)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        self.config = config
        if isinstance(self._transport, HTTPTransport):
            self._transport = None
        logger.debug("Configured GraphQL endpoint %s", config.endpoint)
        return config

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            if self.config is None:
                raise ConfigurationError("GraphQL endpoint is not configured; call configure() first")
            self._transport = HTTPTransport(self.config)
        return self._transport

    def ignore_invariants(self) -> None:
        """Let fragments and operations be redefined under an existing name."""
        self.registry.ignore_invariants()

    def client_mutation_id(self) -> str:
        if self.config is None:
            return no_client_mutation_id()
        return self.config.client_mutation_id()

    # Builders

    def fragment(self, name: str, on_type: Optional[str] = None) -> FragmentBuilder:
        return FragmentBuilder(self.registry, name, on_type)

    def query(self, name: str, variables_def: Optional[Mapping[str, str]] = None) -> QueryBuilder:
        return QueryBuilder(self, name, variables_def)

    def mutation(self, name: str, variables_def: Optional[Mapping[str, str]] = None) -> MutationBuilder:
        return MutationBuilder(self, name, variables_def)

    def union(self, *members: Fragment) -> FragmentUnion:
        return build_union(*members)

    def partial(self, *chunks: Any) -> Partial:
        return build_partial(*chunks)

    # Execution

    async def request(self, document: str, variables: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Send ``document`` and return the response ``data``.

        Raises:
            GraphQLOperationError: If the response carries errors
            TransportError: If the transport fails
        """
        response = await self.transport.send(document, variables)
        if response.errors:
            raise GraphQLOperationError(response.errors, document=document)
        return response.data

    async def batch(
        self,
        operations: Sequence[Operation],
        variables: Optional[Mapping[str, Any]] = None,
    ) -> List[Any]:
        """
        Run several operations concurrently.

        Each operation receives only the variables it declares. Results are
        returned in the order of ``operations``; the first failure propagates.
        """
        return list(
            await asyncio.gather(
                *(operation(operation.select_variables(variables)) for operation in operations)
            )
        )

    async def close(self) -> None:
        if self._transport is not None:
            await self._transport.close()

    async def __aenter__(self) -> GraphQLHelper:
        await self.transport.__aenter__()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
