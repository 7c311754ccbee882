"""Core functionalities: annotation metadata and synthesized operations.

Architecture Note:
    metadata/ is the only stateful part: an additive, process-wide registry.
    annotate/ and validation only write or check that registry, and entity/
    turns it into is_equal() and copy() on the decorated classes.
"""

from entitykit.core.annotate import (
    comparable,
    copy_params,
    copyable,
    declare_comparable,
    declare_copy_param,
    declare_copyable,
    declare_entity_field,
    entity_field,
    infer_copy_params,
)
from entitykit.core.entity import Entity, declare_entity, entity, is_entity
from entitykit.core.metadata import CopyParam, FieldFlag, MetadataStore, get_store
from entitykit.core.validation import (
    MismatchError,
    MismatchKind,
    validate_entity,
    verify_copyable,
)

__all__ = [
    # Metadata
    "FieldFlag",
    "CopyParam",
    "MetadataStore",
    "get_store",
    # Annotations
    "declare_comparable",
    "declare_copyable",
    "declare_entity_field",
    "declare_copy_param",
    "infer_copy_params",
    "comparable",
    "copyable",
    "entity_field",
    "copy_params",
    # Validation
    "MismatchError",
    "MismatchKind",
    "verify_copyable",
    "validate_entity",
    # Entity
    "Entity",
    "entity",
    "declare_entity",
    "is_entity",
]
