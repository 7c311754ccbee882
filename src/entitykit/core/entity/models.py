"""Entity models: the protocol implemented by synthesized types."""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """Structural equality and deep copy, as installed by @entity."""

    def is_equal(self, other: Any) -> bool:
        """Return whether all comparable fields equal those of ``other``.

        False if ``other`` is not of exactly the same type.
        """
        ...

    def copy(self) -> Self:
        """Return a new instance rebuilt from the copyable fields."""
        ...
