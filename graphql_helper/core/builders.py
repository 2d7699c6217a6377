"""
GraphQL document builders.

Fragments, queries and mutations are built in two stages: the first call
fixes the name (and type or variable declarations) and returns a builder; the
builder is then called with the body template::

    SitePath = engine.fragment("PathOfSite", "Path")("{ id name slug }")
    Site = engine.fragment("Site")("{ id paths { ", SitePath, " } }")
    get_site = engine.query("GetSite", {"key": "String!"})(
        "{ site(key: $key) { ", Site, " } }"
    )

Unions and partials are single stage and are never registered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from ..exceptions import TemplateError
from .operation import Mutation, Operation, OperationType, Query
from .parts import (
    Fragment,
    FragmentUnion,
    Partial,
    merge_fragment_defs,
    render_template,
)
from .registry import Registry
from .template import TemplateLiteral

if TYPE_CHECKING:
    from ..engine import GraphQLHelper

logger = logging.getLogger(__name__)


def capitalize(name: str) -> str:
    """Uppercase the first character only (``createPost`` -> ``CreatePost``)."""
    return name[:1].upper() + name[1:]


def render_variables_def(variables_def: Optional[Mapping[str, str]]) -> str:
    """
    Render a variable declaration clause.

    Args:
        variables_def: Variable name to GraphQL type, in declaration order

    Returns:
        ``"($a: T, $b: U) "`` or an empty string when nothing is declared
    """
    if not variables_def:
        return ""
    declarations = ", ".join(f"${key}: {type_}" for key, type_ in variables_def.items())
    return f"({declarations}) "


def _require_name(name: str, what: str) -> str:
    if not isinstance(name, str) or not name:
        raise TemplateError(f"{what} name must be a non-empty string, got {name!r}")
    return name


class FragmentBuilder:
    """Second stage of ``fragment(name, on_type)``."""

    def __init__(self, registry: Registry, name: str, on_type: Optional[str] = None):
        """
        Initialize fragment builder.

        Args:
            registry: Registry the built fragment is added to
            name: Fragment name
            on_type: Type condition (defaults to ``name``)
        """
        self.registry = registry
        self.name = _require_name(name, "fragment")
        self.on_type = on_type or name

    def build(self, template: TemplateLiteral) -> Fragment:
        """
        Build and register the fragment.

        Raises:
            DuplicateRegistrationError: If the name is taken in a strict registry
        """
        self.registry.check_fragment(self.name)
        fragment_defs = merge_fragment_defs(template.values)
        definition = f"fragment {self.name} on {self.on_type} {render_template(template)}"
        fragment_defs[self.name] = definition
        fragment = Fragment(
            name=self.name,
            on_type=self.on_type,
            definition=definition,
            fragment_defs=fragment_defs,
        )
        return self.registry.register_fragment(fragment)

    def __call__(self, *chunks: Any) -> Fragment:
        return self.build(TemplateLiteral.coerce(chunks))


class _OperationBuilder:
    operation_type: OperationType
    operation_class: type

    def __init__(
        self,
        engine: GraphQLHelper,
        name: str,
        variables_def: Optional[Mapping[str, str]] = None,
    ):
        self.engine = engine
        self.name = _require_name(name, self.operation_type.value)
        self.variables_def: Dict[str, str] = dict(variables_def or {})

    @property
    def operation_name(self) -> str:
        return self.name

    def render_operation(self, body: str) -> str:
        raise NotImplementedError

    def build(self, template: TemplateLiteral) -> Operation:
        """
        Build and register the operation.

        Raises:
            DuplicateRegistrationError: If the name is taken in a strict registry
        """
        registry = self.engine.registry
        registry.check_operation(self.operation_name)
        fragment_defs = merge_fragment_defs(template.values)
        operation = self.operation_class(
            operation_type=self.operation_type,
            name=self.operation_name,
            variables_def=self.variables_def,
            operation_text=self.render_operation(render_template(template)),
            fragment_defs=fragment_defs,
            engine=self.engine,
        )
        logger.debug(
            "Built %s %s with %d fragment(s)",
            self.operation_type.value,
            operation.name,
            len(fragment_defs),
        )
        return registry.register_operation(operation)

    def __call__(self, *chunks: Any) -> Operation:
        return self.build(TemplateLiteral.coerce(chunks))


class QueryBuilder(_OperationBuilder):
    """Second stage of ``query(name, variables_def)``."""

    operation_type = OperationType.QUERY
    operation_class = Query

    def render_operation(self, body: str) -> str:
        return f"query {self.name} {render_variables_def(self.variables_def)} {body}"


class MutationBuilder(_OperationBuilder):
    """
    Second stage of ``mutation(name, variables_def)``.

    The declared variables are not rendered: the mutation always takes a
    single ``$input: <Name>Input!`` and selects ``payload: name(input: $input)``.
    """

    operation_type = OperationType.MUTATION
    operation_class = Mutation

    @property
    def operation_name(self) -> str:
        return capitalize(self.name)

    def render_operation(self, body: str) -> str:
        capitalized = self.operation_name
        return (
            f"mutation {capitalized}($input: {capitalized}Input!) "
            f"{{ payload: {self.name}(input: $input) "
            f"{{ clientMutationId ... on {capitalized}Payload {body} }} }}"
        )


def build_union(*members: Any) -> FragmentUnion:
    """Spread ``__typename`` and every member; merge the members' fragments."""
    return FragmentUnion(members=tuple(members), fragment_defs=merge_fragment_defs(members))


def build_partial(*chunks: Any) -> Partial:
    """Build an inline body part from a template."""
    template = TemplateLiteral.coerce(chunks)
    return Partial(text=render_template(template), fragment_defs=merge_fragment_defs(template.values))
