"""
Compose GraphQL queries, mutations and fragments from templates.

Fragment dependencies are flattened and deduplicated so that every built
operation carries one self-contained document::

    import graphql_helper as gql

    gql.configure(host="https://api.example.com/graphql")

    SitePath = gql.fragment("PathOfSite", "Path")("{ id name slug }")
    Site = gql.fragment("Site")("{ id name paths { ", SitePath, " } }")

    get_site = gql.query("GetSite", {"key": "String!"})(
        "{ site(key: $key) { ", Site, " } }"
    )
    site = await get_site({"key": "bustle"})

The module-level functions use a shared default GraphQLHelper. Create your own
GraphQLHelper for an isolated registry.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .config import ConfigLoader, GraphQLHelperConfig, LoggingConfig, LogLevel
from .core import (
    Fragment,
    FragmentBuilder,
    FragmentUnion,
    Mutation,
    MutationBuilder,
    Opaque,
    Operation,
    OperationType,
    Partial,
    PartKind,
    Query,
    QueryBuilder,
    Registry,
    TemplateLiteral,
    classify,
    merge_fragment_defs,
)
from .engine import GraphQLHelper
from .exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    GraphQLHelperError,
    GraphQLOperationError,
    TemplateError,
    TransportError,
)
from .logging import setup_logging
from .transport import HTTPTransport, Transport, TransportResponse

__version__ = "0.3.0"

default_engine = GraphQLHelper()


def configure(
    host: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    client_mutation_id: Optional[Callable[[], str]] = None,
    **kwargs: Any,
) -> GraphQLHelperConfig:
    """Configure the default engine's endpoint."""
    return default_engine.configure(
        host=host, headers=headers, client_mutation_id=client_mutation_id, **kwargs
    )


def ignore_invariants() -> None:
    default_engine.ignore_invariants()


def fragment(name: str, on_type: Optional[str] = None) -> FragmentBuilder:
    return default_engine.fragment(name, on_type)


def query(name: str, variables_def: Optional[Mapping[str, str]] = None) -> QueryBuilder:
    return default_engine.query(name, variables_def)


def mutation(name: str, variables_def: Optional[Mapping[str, str]] = None) -> MutationBuilder:
    return default_engine.mutation(name, variables_def)


def union(*members: Fragment) -> FragmentUnion:
    return default_engine.union(*members)


def partial(*chunks: Any) -> Partial:
    return default_engine.partial(*chunks)


async def request(document: str, variables: Optional[Mapping[str, Any]] = None) -> Any:
    return await default_engine.request(document, variables)


async def batch(operations: Sequence[Operation], variables: Optional[Mapping[str, Any]] = None) -> List[Any]:
    return await default_engine.batch(operations, variables)


__all__ = [
    # Engine
    "GraphQLHelper",
    "default_engine",
    "configure",
    "ignore_invariants",
    "fragment",
    "query",
    "mutation",
    "union",
    "partial",
    "request",
    "batch",
    # Values
    "TemplateLiteral",
    "PartKind",
    "Fragment",
    "FragmentUnion",
    "Partial",
    "Opaque",
    "classify",
    "merge_fragment_defs",
    "Registry",
    "OperationType",
    "Operation",
    "Query",
    "Mutation",
    "FragmentBuilder",
    "QueryBuilder",
    "MutationBuilder",
    # Transport
    "Transport",
    "TransportResponse",
    "HTTPTransport",
    # Configuration
    "GraphQLHelperConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigLoader",
    "setup_logging",
    # Exceptions
    "GraphQLHelperError",
    "DuplicateRegistrationError",
    "GraphQLOperationError",
    "TransportError",
    "ConfigurationError",
    "TemplateError",
]
