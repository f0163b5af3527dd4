"""Products of the Factory Method example.

A single product line: every car knows its price and can show it.
Callers only ever see ``BaseCar``; the concrete classes are chosen by
the factories in ``carfactory.domain.factory.car_factory``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click

from carfactory.domain.model.value_objects import Money


class BaseCar(ABC):

    @property
    @abstractmethod
    def cost(self) -> Money:
        """Sticker price of the car."""

    @abstractmethod
    def show_cost(self) -> None:
        """Print the car's cost to the console."""


class MastodonCar(BaseCar):

    @property
    def cost(self) -> Money:
        return Money.of(100000)

    def show_cost(self) -> None:
        click.echo(f"Mastodon car cost is {self.cost}")


class RhinoCar(BaseCar):

    @property
    def cost(self) -> Money:
        return Money.of(50000)

    def show_cost(self) -> None:
        click.echo(f"Rhino car cost is {self.cost}")
