"""entitykit: annotation-driven structural equality and deep copy.

Usage:
    from entitykit import copy_params, entity, entity_field

    @entity
    @entity_field("value")
    @copy_params("value")
    class Optional:
        def __init__(self, value=None):
            self.value = value

    Optional(25).is_equal(Optional(25))  # True
    Optional(25).copy().value  # 25
"""

__version__ = "0.1.0"

# Core primitives
from entitykit.core import (
    CopyParam,
    Entity,
    FieldFlag,
    MetadataStore,
    MismatchError,
    MismatchKind,
    comparable,
    copy_params,
    copyable,
    declare_comparable,
    declare_copy_param,
    declare_copyable,
    declare_entity,
    declare_entity_field,
    entity,
    entity_field,
    get_store,
    infer_copy_params,
    is_entity,
    validate_entity,
)

# Configuration
from entitykit.config import EntitySettings, get_settings

__all__ = [
    # Version
    "__version__",
    # Synthesizer
    "entity",
    "declare_entity",
    "is_entity",
    "Entity",
    # Annotations
    "comparable",
    "copyable",
    "entity_field",
    "copy_params",
    "declare_comparable",
    "declare_copyable",
    "declare_entity_field",
    "declare_copy_param",
    "infer_copy_params",
    # Metadata
    "MetadataStore",
    "get_store",
    "FieldFlag",
    "CopyParam",
    # Errors
    "MismatchError",
    "MismatchKind",
    "validate_entity",
    # Config
    "EntitySettings",
    "get_settings",
]
