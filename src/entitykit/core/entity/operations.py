"""Pure functions behind the synthesized is_equal() and copy().

A value is either an entity, which compares and copies itself through its
own synthesized methods, or opaque, which is compared with ``==`` and reused
by reference. Lists and plain tuples are handled elementwise; every other
container is opaque.
"""

from __future__ import annotations

from typing import Any, TypeVar

from entitykit.core.metadata import FieldFlag, MetadataStore
from entitykit.core.validation import verify_copyable

T = TypeVar("T")


def own_field_names(instance: Any) -> list[str]:
    """List the attributes set on the instance itself.

    Instance ``__dict__`` keys come first in insertion order, followed by
    assigned ``__slots__`` across the MRO. Class attributes are not included.

    Args:
        instance: Any object.

    Returns:
        Attribute names.
    """
    names = list(getattr(instance, "__dict__", {}))
    seen = set(names)
    for klass in type(instance).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if slot.startswith("__") and not slot.endswith("__"):
                # Private slots are stored under their mangled name
                slot = f"_{klass.__name__.lstrip('_')}{slot}"
            if slot not in seen and hasattr(instance, slot):
                names.append(slot)
                seen.add(slot)
    return names


def is_sequence(value: Any) -> bool:
    """Check if a value gets elementwise treatment.

    Only exact lists and tuples qualify. Subclasses, named tuples included,
    are opaque, since they can't always be rebuilt from a plain iterable.
    """
    return type(value) is list or type(value) is tuple


def is_entity_value(value: Any) -> bool:
    """Check if a value is an entity in the store its own type was declared in."""
    store = getattr(type(value), "__entity_store__", None)
    return isinstance(store, MetadataStore) and store.is_entity(value)


def values_equal(left: Any, right: Any) -> bool:
    """Compare one pair of values. The left value decides the strategy."""
    if is_entity_value(left):
        return bool(left.is_equal(right))
    return bool(left == right)


def fields_equal(left: Any, right: Any) -> bool:
    """Compare two field values, elementwise when both are sequences."""
    if is_sequence(left) and is_sequence(right):
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right, strict=True))
    return values_equal(left, right)


def copy_value(value: T) -> T:
    """Deep copy an entity, reuse anything else as-is."""
    if is_entity_value(value):
        return value.copy()  # type: ignore[attr-defined,no-any-return]
    return value


def copy_field(value: Any) -> Any:
    """Copy a field value, building a new container for sequences."""
    if type(value) is list:
        return [copy_value(item) for item in value]
    if type(value) is tuple:
        return tuple(copy_value(item) for item in value)
    return copy_value(value)


def entity_is_equal(this: Any, other: Any, store: MetadataStore) -> bool:
    """Structural equality over the comparable fields of ``this``.

    Args:
        this: Entity instance whose fields drive the comparison.
        other: Value to compare against.
        store: Metadata store holding the annotations.

    Returns:
        False if ``other`` is not exactly the same type, is missing a
        comparable field, or any comparable field differs. True otherwise.
    """
    cls = type(this)
    if type(other) is not cls:
        return False

    for name in own_field_names(this):
        if not store.get_flag(cls, name, FieldFlag.COMPARABLE):
            continue
        if not hasattr(other, name):
            return False
        if not fields_equal(getattr(this, name), getattr(other, name)):
            return False

    return True


def entity_copy(this: T, store: MetadataStore) -> T:
    """Rebuild an instance by passing its copyable fields to the constructor.

    Entities found in copyable fields, directly or inside lists and tuples,
    are copied recursively. Other values are passed through unchanged.

    Args:
        this: Entity instance to copy.
        store: Metadata store holding the annotations.

    Returns:
        New instance of ``type(this)``.

    Raises:
        MismatchError: If the copyable fields and copy parameters disagree.
    """
    cls = type(this)
    copyable_fields = [
        name for name in own_field_names(this) if store.get_flag(cls, name, FieldFlag.COPYABLE)
    ]
    params = sorted(store.get_copy_params(cls), key=lambda param: param.position)
    verify_copyable(copyable_fields, params)

    args = [copy_field(getattr(this, param.name)) for param in params]
    return cls(*args)
