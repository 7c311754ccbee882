"""End-to-end scenarios with nested entities and sequences of entities."""

import sys
from typing import Literal

sys.path.insert(0, "src")

from entitykit import copy_params, entity, entity_field

GenderMarker = Literal["M", "F", "X"]


@entity
@entity_field("value")
@copy_params("value")
class Optional:
    def __init__(self, value=None):
        self.value = value

    def is_empty(self) -> bool:
        return self.value is None

    @classmethod
    def of(cls, value=None) -> "Optional":
        return cls(value)


@entity
@entity_field("name", "age", "genders")
@copy_params("name", "age", "genders")
class Person:
    def __init__(self, name: str, age: Optional, genders: list[Optional]):
        self.name = name
        self.age = age
        self.genders = genders

    @classmethod
    def of(cls, name: str, age=None, genders: list[GenderMarker] = ()) -> "Person":
        return cls(name, Optional.of(age), [Optional.of(g) for g in genders])


def test_optional_equality():
    assert Optional.of(25).is_equal(Optional.of(25))
    assert not Optional.of(25).is_equal(Optional.of(30))


def test_optional_copy():
    assert Optional.of(25).copy().value == 25


def test_empty_optionals():
    assert Optional.of().is_equal(Optional.of(None))
    assert Optional.of().copy().is_empty()


def test_people_built_from_equal_values_are_equal():
    noemi = Person.of("Noemi", 20, ["F", "X"])
    noemi2 = Person.of("Noemi", 20, ["F", "X"])

    assert noemi.is_equal(noemi2)
    assert noemi.is_equal(noemi2.copy())


def test_changing_one_gender_marker():
    assert not Person.of("Noemi", 20, ["F", "X"]).is_equal(Person.of("Noemi", 20, ["F", "M"]))


def test_different_gender_count():
    assert not Person.of("Noemi", 20, ["F", "X"]).is_equal(Person.of("Noemi", 20, ["F"]))


def test_different_people():
    assert not Person.of("Noemi", 20, ["F", "X"]).is_equal(Person.of("Katie", 30, ["F"]))


def test_copy_is_deep():
    alexandra = Person.of("Alexandra", 52, ["F"])
    clone = alexandra.copy()

    assert clone.is_equal(alexandra)
    assert clone.age is not alexandra.age
    assert clone.genders is not alexandra.genders
    assert clone.genders[0] is not alexandra.genders[0]
    assert clone.name == "Alexandra"


def test_copy_of_copy_matches_independent_construction():
    assert Person.of("Alexandra", 52, ["F"]).copy().copy().is_equal(Person.of("Alexandra", 52, ["F"]))


def test_mutating_copy_leaves_original_untouched():
    original = Person.of("Noemi", 20, ["F", "X"])
    clone = original.copy()

    clone.genders.append(Optional.of("M"))
    clone.age.value = 21

    assert original.is_equal(Person.of("Noemi", 20, ["F", "X"]))
    assert not clone.is_equal(original)
