"""
Name registry for fragments and operations.

Each name may be registered once per registry. In ignore-invariants mode a
second registration replaces the first instead of raising; values already
built from the old entry keep the definitions they merged at build time.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Mapping, Optional

from ..exceptions import DuplicateRegistrationError
from .parts import Fragment

if TYPE_CHECKING:
    from .operation import Operation

logger = logging.getLogger(__name__)


class Registry:
    """Fragments and operations keyed by name."""

    def __init__(self, strict: bool = True) -> None:
        """
        Initialize an empty registry.

        Args:
            strict: Raise on duplicate names (False overwrites instead)
        """
        self.strict = strict
        self._fragments: Dict[str, Fragment] = {}
        self._operations: Dict[str, Operation] = {}

    @property
    def fragments(self) -> Mapping[str, Fragment]:
        return MappingProxyType(self._fragments)

    @property
    def operations(self) -> Mapping[str, Operation]:
        return MappingProxyType(self._operations)

    def ignore_invariants(self) -> None:
        """Allow names to be redefined; later definitions win."""
        self.strict = False

    def check_fragment(self, name: str) -> None:
        self._check(self._fragments, "fragment", name)

    def check_operation(self, name: str) -> None:
        self._check(self._operations, "operation", name)

    def register_fragment(self, fragment: Fragment) -> Fragment:
        self._store(self._fragments, "fragment", fragment.name, fragment)
        return fragment

    def register_operation(self, operation: Operation) -> Operation:
        self._store(self._operations, "operation", operation.name, operation)
        return operation

    def get_fragment(self, name: str) -> Optional[Fragment]:
        return self._fragments.get(name)

    def get_operation(self, name: str) -> Optional[Operation]:
        return self._operations.get(name)

    def clear(self) -> None:
        self._fragments.clear()
        self._operations.clear()

    def _check(self, table: Dict[str, object], kind: str, name: str) -> None:
        if self.strict and name in table:
            raise DuplicateRegistrationError(kind, name)

    def _store(self, table: Dict[str, object], kind: str, name: str, value: object) -> None:
        self._check(table, kind, name)
        if name in table:
            logger.warning("Redefining %s %r", kind, name)
        else:
            logger.debug("Registered %s %r", kind, name)
        table[name] = value

    def __repr__(self) -> str:
        return (
            f"Registry(fragments={len(self._fragments)}, "
            f"operations={len(self._operations)}, strict={self.strict})"
        )
