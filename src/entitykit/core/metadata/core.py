"""Metadata store for entity field annotations.

Usage:
    store = get_store()
    store.set_flag(Person, "name", FieldFlag.COMPARABLE)
    store.append_copy_param(Person, CopyParam("name", 0))

    store.get_flag(Person, "name", FieldFlag.COMPARABLE)  # True
    store.get_copy_params(Person)  # [CopyParam(name='name', position=0)]
"""

from __future__ import annotations

import threading
from typing import Any

from entitykit.core.metadata.models import CopyParam, FieldFlag


class MetadataStore:
    """Process-local registry of per-type field annotations.

    Entries are only ever added. Lookups walk the queried type's MRO, so a
    subclass sees the annotations declared on its bases. Writes are
    serialized with a lock and reads hand out copies, which keeps readers
    safe while another thread is still registering types.
    """

    def __init__(self) -> None:
        """Initialize empty metadata store."""
        self._flags: dict[type, dict[str, set[FieldFlag]]] = {}
        self._copy_params: dict[type, list[CopyParam]] = {}
        self._entity_types: set[type] = set()
        self._lock = threading.Lock()

    def set_flag(self, cls: type, field: str, flag: FieldFlag) -> None:
        """Record that a field of a type carries a facet.

        Idempotent: setting the same facet twice has no further effect.

        Args:
            cls: Owning type.
            field: Field (attribute) name.
            flag: Facet to record.
        """
        with self._lock:
            self._flags.setdefault(cls, {}).setdefault(field, set()).add(flag)

    def get_flag(self, cls: type, field: str, flag: FieldFlag) -> bool:
        """Check whether a field carries a facet on a type or any of its bases.

        Args:
            cls: Type to look up.
            field: Field name.
            flag: Facet to test.

        Returns:
            True if registered, False for unknown types or fields.
        """
        for klass in cls.__mro__:
            flags = self._flags.get(klass)
            if flags is not None and flag in flags.get(field, ()):
                return True
        return False

    def fields_with_flag(self, cls: type, flag: FieldFlag) -> set[str]:
        """Collect every declared field name carrying a facet.

        Args:
            cls: Type to look up, bases included.
            flag: Facet to filter on.

        Returns:
            Field names, empty if none were declared.
        """
        names: set[str] = set()
        for klass in cls.__mro__:
            for field, flags in list(self._flags.get(klass, {}).items()):
                if flag in flags:
                    names.add(field)
        return names

    def append_copy_param(self, cls: type, param: CopyParam) -> None:
        """Append a copy parameter to the type's ordered list.

        Args:
            cls: Owning type.
            param: Field-to-position binding.
        """
        with self._lock:
            params = list(self._copy_params.get(cls, ()))
            params.append(param)
            self._copy_params[cls] = params

    def get_copy_params(self, cls: type) -> list[CopyParam]:
        """Get copy parameters in declaration order.

        Uses the nearest class in the MRO that declared any parameters, since
        a subclass with its own constructor replaces the base's parameters
        rather than extending them.

        Args:
            cls: Type to look up.

        Returns:
            A new list, empty if no class in the MRO declared parameters.
        """
        for klass in cls.__mro__:
            params = self._copy_params.get(klass)
            if params:
                return list(params)
        return []

    def mark_entity_type(self, cls: type) -> None:
        """Mark a type as synthesized.

        Args:
            cls: Type that received is_equal() and copy().
        """
        with self._lock:
            self._entity_types.add(cls)

    def is_entity_type(self, cls: type, exact: bool = False) -> bool:
        """Check if a type, or one of its bases, is synthesized.

        Args:
            cls: Type to check.
            exact: Only consider the type itself, not its bases.

        Returns:
            True if marked, False otherwise.
        """
        if exact:
            return cls in self._entity_types
        return any(klass in self._entity_types for klass in cls.__mro__)

    def is_entity(self, value: Any) -> bool:
        """Check if a value is an instance of a synthesized type.

        Args:
            value: Any value, None included.

        Returns:
            True if the value's type is synthesized.
        """
        return self.is_entity_type(type(value))


# Module-level store instance
_store = MetadataStore()


def get_store() -> MetadataStore:
    """Access the global metadata store.

    Returns:
        The process-local MetadataStore instance.
    """
    return _store
