"""Entity functionality: synthesized structural equality and deep copy."""

from entitykit.core.entity.core import declare_entity, entity, is_entity
from entitykit.core.entity.models import Entity
from entitykit.core.entity.operations import (
    copy_field,
    entity_copy,
    entity_is_equal,
    fields_equal,
    is_entity_value,
    own_field_names,
)

__all__ = [
    # Models
    "Entity",
    # Core
    "entity",
    "declare_entity",
    "is_entity",
    # Operations
    "entity_is_equal",
    "entity_copy",
    "fields_equal",
    "is_entity_value",
    "copy_field",
    "own_field_names",
]
