"""
Built GraphQL operations.

An Operation is both the finished document (operation text plus every
fragment definition it needs) and the coroutine function that sends it.
``str(operation)`` is the document text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

if TYPE_CHECKING:
    from ..engine import GraphQLHelper


class OperationType(str, Enum):
    """GraphQL operation types."""

    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True, eq=False)
class Operation:
    """Base class for built queries and mutations."""

    operation_type: OperationType
    name: str
    variables_def: Mapping[str, str]
    operation_text: str
    fragment_defs: Mapping[str, str]
    engine: GraphQLHelper = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables_def", MappingProxyType(dict(self.variables_def)))
        object.__setattr__(self, "fragment_defs", MappingProxyType(dict(self.fragment_defs)))

    @property
    def document_text(self) -> str:
        return self.operation_text + "\n\n" + "\n\n".join(self.fragment_defs.values())

    def __str__(self) -> str:
        return self.document_text

    def select_variables(self, variables: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Pick the declared variables out of ``variables``; None if none are declared."""
        if not self.variables_def or variables is None:
            return None
        return {key: variables[key] for key in self.variables_def if key in variables}

    async def __call__(self, variables: Optional[Mapping[str, Any]] = None) -> Any:
        raise NotImplementedError


class Query(Operation):
    """A built query. Awaiting it resolves to the response ``data``."""

    async def __call__(self, variables: Optional[Mapping[str, Any]] = None) -> Any:
        payload = dict(variables) if variables is not None else None
        return await self.engine.request(self.document_text, payload)


class Mutation(Operation):
    """
    A built mutation.

    The caller's variables are sent as the single ``input`` argument together
    with a generated ``clientMutationId``; the result is the aliased
    ``payload`` field rather than the whole ``data`` object.
    """

    async def __call__(self, variables: Optional[Mapping[str, Any]] = None) -> Any:
        mutation_input: Dict[str, Any] = {"clientMutationId": self.engine.client_mutation_id()}
        mutation_input.update(variables or {})
        data = await self.engine.request(self.document_text, {"input": mutation_input})
        if data is None:
            return None
        return data.get("payload")
