"""Abstract Factory: one factory per body style.

Each concrete factory implements every creation method of
``AbstractCarFactory`` and guarantees that all cars it returns share
its body style.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from carfactory.domain.model.gps_car import (
    Mastodon,
    MastodonHatchbackCar,
    MastodonSedanCar,
    Rhino,
    RhinoHatchbackCar,
    RhinoSedanCar,
)
from carfactory.domain.model.variants import BodyStyle


class AbstractCarFactory(ABC):

    body_style: BodyStyle

    @abstractmethod
    def create_mastodon(self) -> Mastodon:
        """Build a Mastodon in this factory's body style."""

    @abstractmethod
    def create_rhino(self) -> Rhino:
        """Build a Rhino in this factory's body style."""


class SedanCarFactory(AbstractCarFactory):

    body_style = BodyStyle.SEDAN

    def create_mastodon(self) -> Mastodon:
        return MastodonSedanCar()

    def create_rhino(self) -> Rhino:
        return RhinoSedanCar()


class HatchbackCarFactory(AbstractCarFactory):

    body_style = BodyStyle.HATCHBACK

    def create_mastodon(self) -> Mastodon:
        return MastodonHatchbackCar()

    def create_rhino(self) -> Rhino:
        return RhinoHatchbackCar()


_FACTORIES: dict[BodyStyle, type[AbstractCarFactory]] = {
    BodyStyle.SEDAN: SedanCarFactory,
    BodyStyle.HATCHBACK: HatchbackCarFactory,
}


def create_factory(kind: BodyStyle | str) -> AbstractCarFactory:
    """Return a new factory for the *kind* body style.

    Raises UnknownVariantError if *kind* is not a known body style.
    """
    return _FACTORIES[BodyStyle.parse(kind)]()
