"""
Document composition: template literals, fragment merging, the name
registry and the fragment/query/mutation builders.
"""

from .builders import (
    FragmentBuilder,
    MutationBuilder,
    QueryBuilder,
    build_partial,
    build_union,
    capitalize,
    render_variables_def,
)
from .operation import Mutation, Operation, OperationType, Query
from .parts import (
    Fragment,
    FragmentUnion,
    Opaque,
    Partial,
    PartKind,
    classify,
    merge_fragment_defs,
    render_value,
)
from .registry import Registry
from .template import TemplateLiteral

__all__ = [
    # Template
    "TemplateLiteral",
    # Parts
    "PartKind",
    "Fragment",
    "FragmentUnion",
    "Partial",
    "Opaque",
    "classify",
    "render_value",
    "merge_fragment_defs",
    # Registry
    "Registry",
    # Operations
    "OperationType",
    "Operation",
    "Query",
    "Mutation",
    # Builders
    "FragmentBuilder",
    "QueryBuilder",
    "MutationBuilder",
    "build_union",
    "build_partial",
    "capitalize",
    "render_variables_def",
]
