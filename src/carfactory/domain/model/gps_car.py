"""Products of the Abstract Factory example.

Two product families (Mastodon, Rhino), each built in two body styles.
A concrete factory always hands out members of both families in the
same body style, which is visible through ``body_style`` and in the
GPS message prefix.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click

from carfactory.domain.model.variants import BodyStyle


class Mastodon(ABC):

    body_style: BodyStyle

    @abstractmethod
    def use_gps(self) -> None:
        """Print the GPS banner of this Mastodon."""


class Rhino(ABC):

    body_style: BodyStyle

    @abstractmethod
    def use_gps(self) -> None:
        """Print the GPS banner of this Rhino."""


# --- Sedan family -------------------------------------------------------------


class MastodonSedanCar(Mastodon):

    body_style = BodyStyle.SEDAN

    def use_gps(self) -> None:
        click.echo("[Sedan] Mastodon GPS")


class RhinoSedanCar(Rhino):

    body_style = BodyStyle.SEDAN

    def use_gps(self) -> None:
        click.echo("[Sedan] Rhino GPS")


# --- Hatchback family ---------------------------------------------------------


class MastodonHatchbackCar(Mastodon):

    body_style = BodyStyle.HATCHBACK

    def use_gps(self) -> None:
        click.echo("[Hatchback] Mastodon GPS")


class RhinoHatchbackCar(Rhino):

    body_style = BodyStyle.HATCHBACK

    def use_gps(self) -> None:
        click.echo("[Hatchback] Rhino GPS")
