"""Tests for the metadata store."""

import threading

import pytest

from entitykit import CopyParam, FieldFlag, MetadataStore, get_store


class Base:
    pass


class Child(Base):
    pass


def test_unregistered_flag_defaults_to_false(store):
    assert not store.get_flag(Base, "name", FieldFlag.COMPARABLE)
    assert not store.get_flag(Base, "name", FieldFlag.COPYABLE)


def test_flags_are_independent(store):
    store.set_flag(Base, "name", FieldFlag.COMPARABLE)

    assert store.get_flag(Base, "name", FieldFlag.COMPARABLE)
    assert not store.get_flag(Base, "name", FieldFlag.COPYABLE)
    assert not store.get_flag(Base, "other", FieldFlag.COMPARABLE)


def test_set_flag_is_idempotent(store):
    store.set_flag(Base, "name", FieldFlag.COPYABLE)
    store.set_flag(Base, "name", FieldFlag.COPYABLE)

    assert store.fields_with_flag(Base, FieldFlag.COPYABLE) == {"name"}


def test_flags_are_keyed_by_type(store):
    """Metadata is per-type, never shared between unrelated classes."""

    class Unrelated:
        pass

    store.set_flag(Base, "name", FieldFlag.COMPARABLE)

    assert not store.get_flag(Unrelated, "name", FieldFlag.COMPARABLE)


def test_flags_are_inherited(store):
    store.set_flag(Base, "name", FieldFlag.COMPARABLE)
    store.set_flag(Child, "extra", FieldFlag.COMPARABLE)

    assert store.get_flag(Child, "name", FieldFlag.COMPARABLE)
    assert not store.get_flag(Base, "extra", FieldFlag.COMPARABLE)
    assert store.fields_with_flag(Child, FieldFlag.COMPARABLE) == {"name", "extra"}


def test_copy_params_default_to_empty(store):
    assert store.get_copy_params(Base) == []


def test_copy_params_keep_declaration_order(store):
    store.append_copy_param(Base, CopyParam("b", 1))
    store.append_copy_param(Base, CopyParam("a", 0))

    assert store.get_copy_params(Base) == [CopyParam("b", 1), CopyParam("a", 0)]


def test_get_copy_params_returns_a_copy(store):
    """Callers can't mutate the stored list through a returned value."""
    store.append_copy_param(Base, CopyParam("a", 0))

    params = store.get_copy_params(Base)
    params.append(CopyParam("b", 1))

    assert store.get_copy_params(Base) == [CopyParam("a", 0)]


def test_copy_params_come_from_nearest_declaring_class(store):
    store.append_copy_param(Base, CopyParam("a", 0))

    assert store.get_copy_params(Child) == [CopyParam("a", 0)]

    store.append_copy_param(Child, CopyParam("b", 0))

    assert store.get_copy_params(Child) == [CopyParam("b", 0)]
    assert store.get_copy_params(Base) == [CopyParam("a", 0)]


def test_entity_type_marking(store):
    assert not store.is_entity_type(Base)
    assert not store.is_entity(Base())

    store.mark_entity_type(Base)

    assert store.is_entity_type(Base)
    assert store.is_entity(Base())
    assert store.is_entity(Child())
    assert not store.is_entity_type(Child, exact=True)


@pytest.mark.parametrize("value", [None, 0, "text", [1, 2], {"a": 1}, Base])
def test_plain_values_are_not_entities(store, value):
    assert not store.is_entity(value)


def test_global_store_is_shared():
    assert get_store() is get_store()
    assert isinstance(get_store(), MetadataStore)


def test_concurrent_registration_keeps_every_param(store):
    """Additive writes from several threads are all retained."""

    def register(offset: int) -> None:
        for i in range(100):
            store.append_copy_param(Base, CopyParam(f"f{offset}_{i}", i))

    threads = [threading.Thread(target=register, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.get_copy_params(Base)) == 400
