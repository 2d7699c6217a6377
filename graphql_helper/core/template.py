"""
Template literals.

A template literal is the literal text of a GraphQL body split around its
interpolated values, so that ``strings[0] + v0 + strings[1] + ... + strings[n]``
reconstructs the body. It can be built from a chunk sequence or from any object
exposing ``strings`` and ``values`` (PEP 750 t-strings included).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple

from ..exceptions import TemplateError


@dataclass(frozen=True)
class TemplateLiteral:
    """Literal strings of a template and the values interpolated between them."""

    strings: Tuple[str, ...]
    values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if len(self.strings) != len(self.values) + 1:
            raise TemplateError(
                f"template has {len(self.strings)} strings for {len(self.values)} values; "
                "expected exactly one more string than values"
            )

    @classmethod
    def from_chunks(cls, chunks: Sequence[Any]) -> TemplateLiteral:
        """
        Build a template from alternating text and values.

        Every ``str`` chunk is literal text and every other chunk is an
        interpolated value. Adjacent text chunks are joined, and empty strings
        are inserted between adjacent values.

        Args:
            chunks: Text and values in body order

        Returns:
            TemplateLiteral
        """
        strings: List[str] = [""]
        values: List[Any] = []
        for chunk in chunks:
            if isinstance(chunk, str):
                strings[-1] += chunk
            else:
                values.append(chunk)
                strings.append("")
        return cls(tuple(strings), tuple(values))

    @classmethod
    def coerce(cls, chunks: Sequence[Any]) -> TemplateLiteral:
        """
        Normalize builder arguments into a TemplateLiteral.

        A single argument exposing ``strings`` and ``values`` is used as is;
        anything else goes through :meth:`from_chunks`.
        """
        if len(chunks) == 1:
            single = chunks[0]
            if isinstance(single, TemplateLiteral):
                return single
            if hasattr(single, "strings") and hasattr(single, "values"):
                return cls(tuple(single.strings), tuple(single.values))
        return cls.from_chunks(chunks)

    def render(self, render_value: Callable[[Any], str]) -> str:
        """Join the literal text with every value passed through ``render_value``."""
        parts = [self.strings[0]]
        for value, text in zip(self.values, self.strings[1:]):
            parts.append(render_value(value))
            parts.append(text)
        return "".join(parts)
