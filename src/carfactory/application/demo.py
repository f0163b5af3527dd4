"""Scripted walkthroughs of both patterns.

Each function replays one example end to end: first with factories
instantiated directly, then (Factory Method) through the keyed selector.
"""

from __future__ import annotations

from carfactory.application.abstract_factory_app import app_car_factory
from carfactory.application.factory_method_app import app_factory
from carfactory.domain.factory import abstract_car_factory, car_factory
from carfactory.domain.model.variants import BodyStyle, CarModel


def run_factory_method_demo() -> None:
    # Any factory works since all of them share the same interface
    app_factory(car_factory.MastodonCarFactory())
    app_factory(car_factory.RhinoCarFactory())

    # Same again, naming the model instead of the class
    app_factory(car_factory.create_factory(CarModel.MASTODON))
    app_factory(car_factory.create_factory(CarModel.RHINO))


def run_abstract_factory_demo() -> None:
    app_car_factory(abstract_car_factory.create_factory(BodyStyle.HATCHBACK))
    app_car_factory(abstract_car_factory.create_factory(BodyStyle.SEDAN))
