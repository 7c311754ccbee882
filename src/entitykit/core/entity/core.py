"""Entity decorator: synthesizes is_equal() and copy() from field annotations.

Usage:
    @entity
    @entity_field("name", "age")
    @copy_params("name", "age")
    class Person:
        def __init__(self, name: str, age: Optional) -> None:
            self.name = name
            self.age = age

    # Dataclasses can derive copy parameters from the generated __init__:
    @entity(infer_params=True)
    @entity_field("x", "y")
    @dataclass(slots=True)
    class Point:
        x: float
        y: float

    Person("Ada", Optional(36)).copy().is_equal(Person("Ada", Optional(36)))  # True
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from typing import Any, overload

from entitykit.config import EntitySettings, get_settings
from entitykit.core.annotate import infer_copy_params
from entitykit.core.entity.operations import entity_copy, entity_is_equal, is_entity_value
from entitykit.core.metadata import MetadataStore, get_store
from entitykit.core.validation import validate_entity

logger = logging.getLogger(__name__)


def declare_entity(
    cls: type,
    *,
    eq: bool = False,
    infer_params: bool = False,
    store: MetadataStore | None = None,
    settings: EntitySettings | None = None,
) -> type:
    """Mark a type as an entity and install is_equal() and copy() on it.

    Field and copy-parameter annotations are read when the installed methods
    run, not here, so they may be declared before or after this call.

    Args:
        cls: The class to synthesize.
        eq: Also make ``==`` delegate to is_equal(). Instances become
            unhashable, as with any mutable value type defining ``__eq__``.
        infer_params: Derive copy parameters from the constructor signature
            when none are declared for the class or its bases.
        store: Metadata store to use, defaults to the global one.
        settings: Overrides the process-wide settings.

    Returns:
        The same class, modified in place.

    Raises:
        MismatchError: If settings.validate_on_declare is set and the declared
            annotations don't pair up.
    """
    store = store or get_store()
    settings = settings or get_settings()

    if settings.warn_on_redeclare and store.is_entity_type(cls, exact=True):
        warnings.warn(
            f"{cls.__name__} is already an entity. Its is_equal() and copy() will be "
            f"replaced; existing annotations are kept.",
            stacklevel=2,
        )

    if infer_params and not store.get_copy_params(cls):
        infer_copy_params(cls, store)
    if settings.validate_on_declare:
        validate_entity(cls, store)

    def is_equal(self: Any, other: Any) -> bool:
        """Return whether all comparable fields equal those of ``other``.

        Args:
            other: The value to compare against.

        Returns:
            False if ``other`` is not of exactly the same type, True if every
            comparable field matches.
        """
        return entity_is_equal(self, other, store)

    def copy(self: Any) -> Any:
        """Return a copy built from the copyable fields.

        Returns:
            A new instance. Nested entities are copied, other values shared.

        Raises:
            MismatchError: If copyable fields and copy parameters disagree.
        """
        return entity_copy(self, store)

    is_equal.__qualname__ = f"{cls.__qualname__}.is_equal"
    copy.__qualname__ = f"{cls.__qualname__}.copy"
    cls.is_equal = is_equal  # type: ignore[attr-defined]
    cls.copy = copy  # type: ignore[attr-defined]

    if eq:

        def __eq__(self: Any, other: Any) -> bool:
            if type(other) is not type(self):
                return NotImplemented
            return entity_is_equal(self, other, store)

        __eq__.__qualname__ = f"{cls.__qualname__}.__eq__"
        cls.__eq__ = __eq__  # type: ignore[method-assign,assignment]
        cls.__hash__ = None  # type: ignore[assignment]

    cls.__entity_store__ = store  # type: ignore[attr-defined]
    store.mark_entity_type(cls)
    logger.debug("Synthesized is_equal() and copy() for %s", cls.__qualname__)
    return cls


@overload
def entity(cls: type) -> type: ...


@overload
def entity(
    cls: None = None,
    *,
    eq: bool = False,
    infer_params: bool = False,
    store: MetadataStore | None = None,
    settings: EntitySettings | None = None,
) -> Callable[[type], type]: ...


def entity(
    cls: type | None = None,
    *,
    eq: bool = False,
    infer_params: bool = False,
    store: MetadataStore | None = None,
    settings: EntitySettings | None = None,
) -> type | Callable[[type], type]:
    """Class decorator form of declare_entity().

    Supports three forms:
        @entity                       # bare decorator
        @entity()                     # parenthesized, no args
        @entity(infer_params=True)    # factory with args

    Args:
        cls: The class to synthesize, or None if called with arguments.
        eq: Also make ``==`` delegate to is_equal().
        infer_params: Derive copy parameters from the constructor signature.
        store: Metadata store to use, defaults to the global one.
        settings: Overrides the process-wide settings.

    Returns:
        Decorated class or decorator function.

    Note:
        Apply @entity and the field decorators AFTER @dataclass. With
        ``slots=True`` the dataclass decorator returns a new class, and
        annotations made on the original one would be lost:

        >>> @entity
        ... @entity_field("value")
        ... @copy_params("value")
        ... @dataclass(slots=True)
        ... class Box:
        ...     value: int
    """

    def decorator(c: type) -> type:
        return declare_entity(c, eq=eq, infer_params=infer_params, store=store, settings=settings)

    if cls is None:
        # Called with args: @entity() or @entity(eq=True)
        return decorator
    else:
        # Called bare: @entity
        return decorator(cls)


def is_entity(value: Any, store: MetadataStore | None = None) -> bool:
    """Check if a value is an instance of a type decorated with @entity.

    Args:
        value: Any value.
        store: Metadata store to consult. Defaults to the store the value's
            type was declared in.

    Returns:
        True if is_equal() and copy() were synthesized for the value's type.
    """
    if store is None:
        return is_entity_value(value)
    return store.is_entity(value)
