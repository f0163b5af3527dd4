"""Application function for the Abstract Factory example."""

from __future__ import annotations

import click

from carfactory.domain.factory.abstract_car_factory import AbstractCarFactory
from carfactory.domain.model.gps_car import Mastodon, Rhino

NO_FACTORY_NOTICE = "--- No factory provided ---"


def app_car_factory(factory: AbstractCarFactory | None) -> None:
    """Build one car of each family and use its GPS.

    A missing factory is reported and ignored; no car is built.
    """
    if factory is None:
        click.echo(NO_FACTORY_NOTICE)
        return

    mastodon: Mastodon = factory.create_mastodon()
    rhino: Rhino = factory.create_rhino()
    mastodon.use_gps()
    rhino.use_gps()
