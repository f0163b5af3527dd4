"""Application function for the Factory Method example.

Works with any ``CarFactory``: swapping the factory changes which car is
built without touching this code.
"""

from __future__ import annotations

from carfactory.domain.factory.car_factory import CarFactory
from carfactory.domain.model.car import BaseCar


def app_factory(factory: CarFactory) -> None:
    car: BaseCar = factory.make_car()
    car.show_cost()
