"""Factory Method: one factory per concrete car.

``CarFactory.make_car`` is annotated as returning ``BaseCar`` so callers
depend on the abstraction, never on ``MastodonCar`` or ``RhinoCar``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from carfactory.domain.model.car import BaseCar, MastodonCar, RhinoCar
from carfactory.domain.model.variants import CarModel


class CarFactory(ABC):

    @abstractmethod
    def make_car(self) -> BaseCar:
        """Build a new car. Every call returns a fresh instance."""


class MastodonCarFactory(CarFactory):

    def make_car(self) -> BaseCar:
        return MastodonCar()


class RhinoCarFactory(CarFactory):

    def make_car(self) -> BaseCar:
        return RhinoCar()


_FACTORIES: dict[CarModel, type[CarFactory]] = {
    CarModel.MASTODON: MastodonCarFactory,
    CarModel.RHINO: RhinoCarFactory,
}


def create_factory(kind: CarModel | str) -> CarFactory:
    """Return a new factory for *kind* instead of calling a class directly.

    Raises UnknownVariantError if *kind* is not a known car model.
    """
    return _FACTORIES[CarModel.parse(kind)]()
