"""
Composable body parts and fragment dependency merging.

Every value interpolated into a template is classified into one variant of
:class:`PartKind`. Fragments, unions and partials are fragment-bearing: they
carry the flattened mapping of every fragment definition they depend on.
Anything else is opaque and is inlined as text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterable, Mapping, Union

from .template import TemplateLiteral


class PartKind(str, Enum):
    """Variants of an interpolated value."""

    FRAGMENT = "fragment"
    UNION = "union"
    PARTIAL = "partial"
    OPAQUE = "opaque"


def _frozen(defs: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(defs))


@dataclass(frozen=True, eq=False)
class Fragment:
    """
    A named GraphQL fragment.

    ``definition`` is this fragment's own ``fragment X on T {...}`` text and
    ``fragment_defs`` holds it together with every fragment it reaches.
    """

    kind: ClassVar[PartKind] = PartKind.FRAGMENT

    name: str
    on_type: str
    definition: str
    fragment_defs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fragment_defs", _frozen(self.fragment_defs))

    @property
    def spread_text(self) -> str:
        return f"...{self.name}"

    def __str__(self) -> str:
        return self.spread_text


@dataclass(frozen=True, eq=False)
class FragmentUnion:
    """``__typename`` followed by the spreads of several member fragments."""

    kind: ClassVar[PartKind] = PartKind.UNION

    members: tuple
    fragment_defs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fragment_defs", _frozen(self.fragment_defs))

    @property
    def spread_text(self) -> str:
        return "__typename " + " ".join(render_value(member) for member in self.members)

    def __str__(self) -> str:
        return self.spread_text


@dataclass(frozen=True, eq=False)
class Partial:
    """An unnamed body fragment, inlined verbatim where it is interpolated."""

    kind: ClassVar[PartKind] = PartKind.PARTIAL

    text: str
    fragment_defs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fragment_defs", _frozen(self.fragment_defs))

    @property
    def spread_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Opaque:
    """Any other interpolated value; contributes text only."""

    kind: ClassVar[PartKind] = PartKind.OPAQUE

    value: Any

    @property
    def spread_text(self) -> str:
        value = self.value
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "null"
        return str(value)

    def __str__(self) -> str:
        return self.spread_text


Part = Union[Fragment, FragmentUnion, Partial, Opaque]
FragmentBearing = Union[Fragment, FragmentUnion, Partial]


def classify(value: Any) -> Part:
    """Wrap ``value`` in its variant; non fragment-bearing values become Opaque."""
    if isinstance(value, (Fragment, FragmentUnion, Partial, Opaque)):
        return value
    return Opaque(value)


def render_value(value: Any) -> str:
    """Text used in place of an interpolated value."""
    return classify(value).spread_text


def render_template(template: TemplateLiteral) -> str:
    return template.render(render_value)


def merge_fragment_defs(values: Iterable[Any]) -> Dict[str, str]:
    """
    Union the fragment definitions carried by ``values``.

    Values are visited in order and the first definition seen for a name is
    kept; later definitions under the same name are dropped without
    comparison. Opaque values contribute nothing.

    Args:
        values: Interpolated values, in template order

    Returns:
        New mapping of fragment name to definition text
    """
    merged: Dict[str, str] = {}
    for part in map(classify, values):
        if part.kind is PartKind.OPAQUE:
            continue
        for name, definition in part.fragment_defs.items():
            merged.setdefault(name, definition)
    return merged
