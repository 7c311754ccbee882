from typing import Literal

from entitykit import copy_params, entity, entity_field

GenderMarker = Literal["M", "F", "X"]


@entity
@entity_field("value")
@copy_params("value")
class Optional:
    """Wrapper around a value that may be missing."""

    def __init__(self, value=None):
        self.value = value

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
    def of(cls, name: str, age: int | None = None, genders: list[GenderMarker] = ()) -> "Person":
        return cls(name, Optional.of(age), [Optional.of(g) for g in genders])


def main() -> None:
    noemi = Person.of("Noemi", 20, ["F", "X"])
    noemi2 = Person.of("Noemi", 20, ["F", "X"])
    katie = Person.of("Katie", 30, ["F"])

    print(f"noemi == noemi2.copy(): {noemi.is_equal(noemi2.copy())}")  # True
    print(f"noemi == katie: {noemi.is_equal(katie)}")  # False

    alexandra = Person.of("Alexandra", 52, ["F"])
    print(f"copy equals original: {alexandra.copy().is_equal(Person.of('Alexandra', 52, ['F']))}")


if __name__ == "__main__":
    main()
