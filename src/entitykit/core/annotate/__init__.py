"""Annotation functionality: field facets and constructor-parameter bindings."""

from entitykit.core.annotate.core import (
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

__all__ = [
    # Plain declarations
    "declare_comparable",
    "declare_copyable",
    "declare_entity_field",
    "declare_copy_param",
    "infer_copy_params",
    # Class decorators
    "comparable",
    "copyable",
    "entity_field",
    "copy_params",
]
