"""Closed sets of selector keys.

Each example has exactly one enumeration of keys. Selectors accept either
an enum member or its string value; anything else is rejected with
UnknownVariantError instead of falling through silently.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from carfactory.domain.exceptions import UnknownVariantError

_E = TypeVar("_E", bound=Enum)


class CarModel(Enum):
    """Keys of the Factory Method example."""

    MASTODON = "mastodon"
    RHINO = "rhino"

    @classmethod
    def parse(cls, value: CarModel | str) -> CarModel:
        return _parse(cls, value, "car model")


class BodyStyle(Enum):
    """Keys of the Abstract Factory example, one per product family."""

    SEDAN = "sedan"
    HATCHBACK = "hatchback"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: BodyStyle | str) -> BodyStyle:
        return _parse(cls, value, "body style")


def _parse(enum_cls: type[_E], value: _E | str, kind: str) -> _E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if member.value == value.strip().lower():
                return member
    expected = ", ".join(member.value for member in enum_cls)
    raise UnknownVariantError(
        f"Unknown {kind} {value!r} (expected one of: {expected})"
    )
