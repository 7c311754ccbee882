"""Consistency checks between copyable fields and copy parameters."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from entitykit.core.metadata import CopyParam, FieldFlag, MetadataStore, get_store


class MismatchKind(Enum):
    """Which side of the field/parameter pairing is missing."""

    MISSING_PARAM = "missing-param"  # Copyable field without a copy parameter
    MISSING_FIELD = "missing-field"  # Copy parameter without a copyable field


class MismatchError(TypeError):
    """Raised when copyable fields and copy parameters disagree.

    Attributes:
        name: The offending field or parameter name.
        kind: Which direction of the check failed.
    """

    def __init__(self, name: str, kind: MismatchKind) -> None:
        self.name = name
        self.kind = kind
        if kind is MismatchKind.MISSING_PARAM:
            message = f"Property {name} has no matching constructor argument annotation!"
        else:
            message = f"Constructor argument {name} has no matching property annotation!"
        super().__init__(message)

    def __reduce__(self) -> tuple[type[MismatchError], tuple[str, MismatchKind]]:
        return (type(self), (self.name, self.kind))


def verify_copyable(copyable_fields: Iterable[str], copy_params: Iterable[CopyParam]) -> None:
    """Verify that copyable fields and copy parameters pair up exactly.

    Copyable fields are checked first, so when both directions are broken the
    reported name is a field without a parameter.

    Args:
        copyable_fields: Names of the fields marked copyable.
        copy_params: Declared field-to-position bindings.

    Raises:
        MismatchError: Property `name` has no matching constructor argument
            annotation, or constructor argument `name` has no matching
            property annotation.
    """
    fields = list(copyable_fields)
    params = list(copy_params)
    param_names = {param.name for param in params}
    field_names = set(fields)

    for field in fields:
        if field not in param_names:
            raise MismatchError(field, MismatchKind.MISSING_PARAM)

    for param in params:
        if param.name not in field_names:
            raise MismatchError(param.name, MismatchKind.MISSING_FIELD)


def validate_entity(cls: type, store: MetadataStore | None = None) -> None:
    """Check a type's declared annotations without needing an instance.

    copy() validates against the instance's own attributes on every call;
    this checks the declarations alone, so a type can fail fast when it is
    defined.

    Args:
        cls: Type to check.
        store: Metadata store to read, defaults to the global one.

    Raises:
        MismatchError: If declared copyable fields and copy parameters disagree.
    """
    store = store or get_store()
    verify_copyable(
        sorted(store.fields_with_flag(cls, FieldFlag.COPYABLE)),
        store.get_copy_params(cls),
    )
