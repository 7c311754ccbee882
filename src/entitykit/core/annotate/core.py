"""Field and constructor-parameter annotations.

Usage:
    # Plain calls, e.g. right after the class body
    declare_entity_field(Person, "name")
    declare_copy_param(Person, "name", 0)

    # Or as class decorators, applied below @entity
    @entity
    @entity_field("name", "age")
    @copy_params("name", "age")
    class Person:
        def __init__(self, name: str, age: int) -> None:
            self.name = name
            self.age = age
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable

from entitykit.core.metadata import CopyParam, FieldFlag, MetadataStore, get_store

logger = logging.getLogger(__name__)


def declare_comparable(cls: type, field: str, store: MetadataStore | None = None) -> None:
    """Include a field when comparing two instances with is_equal().

    Fields that are not comparable are never read by is_equal().

    Args:
        cls: Owning type.
        field: Attribute name.
        store: Metadata store to write, defaults to the global one.
    """
    (store or get_store()).set_flag(cls, field, FieldFlag.COMPARABLE)


def declare_copyable(cls: type, field: str, store: MetadataStore | None = None) -> None:
    """Include a field when rebuilding an instance with copy().

    The field name must also be declared as a copy parameter, otherwise
    copy() raises MismatchError.

    Args:
        cls: Owning type.
        field: Attribute name.
        store: Metadata store to write, defaults to the global one.
    """
    (store or get_store()).set_flag(cls, field, FieldFlag.COPYABLE)


def declare_entity_field(cls: type, field: str, store: MetadataStore | None = None) -> None:
    """Declare a field both comparable and copyable, the common case.

    Args:
        cls: Owning type.
        field: Attribute name.
        store: Metadata store to write, defaults to the global one.
    """
    declare_comparable(cls, field, store)
    declare_copyable(cls, field, store)


def declare_copy_param(
    cls: type, field: str, position: int, store: MetadataStore | None = None
) -> None:
    """Bind a field to a positional constructor parameter for copy().

    Any field name is accepted here. A name that is not copyable surfaces as
    a MismatchError when copy() runs.

    Args:
        cls: Owning type.
        field: Attribute whose value is passed at this position.
        position: Zero-based index in the constructor's positional arguments.
        store: Metadata store to write, defaults to the global one.

    Raises:
        TypeError: If position is not an int.
        ValueError: If position is negative.
    """
    if not isinstance(position, int) or isinstance(position, bool):
        raise TypeError(f"Copy parameter position must be an int, got {type(position).__name__}")
    if position < 0:
        raise ValueError(f"Copy parameter position must be non-negative, got {position}")
    (store or get_store()).append_copy_param(cls, CopyParam(name=field, position=position))


def infer_copy_params(cls: type, store: MetadataStore | None = None) -> list[CopyParam]:
    """Declare copy parameters from the constructor signature.

    Each copyable field is bound to the position of the same-named parameter
    of ``cls.__init__``. This fits dataclasses and any class whose
    constructor parameters are named after its attributes.

    Args:
        cls: Type whose copyable fields are already declared.
        store: Metadata store to use, defaults to the global one.

    Returns:
        The declared parameters, sorted by position.

    Raises:
        TypeError: If a copyable field has no positional constructor parameter,
            or the copyable fields are not the leading parameters.
    """
    store = store or get_store()
    parameters = [
        p
        for p in inspect.signature(cls).parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    positions = {p.name: index for index, p in enumerate(parameters)}

    inferred = []
    for field in sorted(store.fields_with_flag(cls, FieldFlag.COPYABLE)):
        if field not in positions:
            raise TypeError(
                f"Cannot infer copy parameter for {cls.__name__}.{field}: "
                f"constructor has no positional parameter named {field!r}"
            )
        inferred.append(CopyParam(name=field, position=positions[field]))

    inferred.sort(key=lambda param: param.position)
    if [param.position for param in inferred] != list(range(len(inferred))):
        # copy() passes arguments positionally, so a gap would shift later values
        raise TypeError(
            f"Cannot infer copy parameters for {cls.__name__}: copyable fields "
            f"{[param.name for param in inferred]} are not the leading constructor parameters"
        )
    for param in inferred:
        store.append_copy_param(cls, param)
    logger.debug("Inferred copy parameters for %s: %s", cls.__qualname__, inferred)
    return inferred


def _field_decorator(
    declare: Callable[[type, str, MetadataStore | None], None],
    names: tuple[str, ...],
    store: MetadataStore | None,
) -> Callable[[type], type]:
    if not names:
        raise ValueError("At least one field name is required")

    def decorator(cls: type) -> type:
        for name in names:
            declare(cls, name, store)
        return cls

    return decorator


def comparable(*names: str, store: MetadataStore | None = None) -> Callable[[type], type]:
    """Class decorator form of declare_comparable() for several fields."""
    return _field_decorator(declare_comparable, names, store)


def copyable(*names: str, store: MetadataStore | None = None) -> Callable[[type], type]:
    """Class decorator form of declare_copyable() for several fields."""
    return _field_decorator(declare_copyable, names, store)


def entity_field(*names: str, store: MetadataStore | None = None) -> Callable[[type], type]:
    """Class decorator form of declare_entity_field() for several fields."""
    return _field_decorator(declare_entity_field, names, store)


def copy_params(*names: str, store: MetadataStore | None = None) -> Callable[[type], type]:
    """Class decorator binding ``names[i]`` to constructor position ``i``.

    Usage:
        @copy_params("name", "age", "genders")
        class Person: ...
    """
    if not names:
        raise ValueError("At least one field name is required")

    def decorator(cls: type) -> type:
        for position, name in enumerate(names):
            declare_copy_param(cls, name, position, store)
        return cls

    return decorator
