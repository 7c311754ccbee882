"""Metadata functionality: per-type field facets and copy parameters."""

from entitykit.core.metadata.core import MetadataStore, get_store
from entitykit.core.metadata.models import CopyParam, FieldFlag

__all__ = [
    # Models
    "FieldFlag",
    "CopyParam",
    # Core
    "MetadataStore",
    "get_store",
]
