"""Metadata models: field facets and copy parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class FieldFlag(Enum):
    """Independent boolean facets a field can carry."""

    COMPARABLE = auto()  # Included in is_equal()
    COPYABLE = auto()  # Passed to the constructor by copy()


@dataclass(slots=True, frozen=True)
class CopyParam:
    """Binds a field to a positional constructor parameter used by copy()."""

    name: str
    position: int
