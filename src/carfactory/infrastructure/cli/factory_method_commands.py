"""CLI commands for the Factory Method example."""

from __future__ import annotations

import click

from carfactory.application.factory_method_app import app_factory
from carfactory.domain.factory.car_factory import create_factory
from carfactory.domain.model.variants import CarModel


@click.command("run")
@click.option(
    "--model",
    required=True,
    type=click.Choice([m.value for m in CarModel], case_sensitive=False),
    help="Car model whose factory builds the car.",
)
def factory_method_run(model: str) -> None:
    """Build a car through its factory and show its cost."""
    app_factory(create_factory(model))


@click.command("list")
def factory_method_list() -> None:
    """List the available car models."""
    click.echo(f"{'Model':<12} {'Cost':>10}")
    click.echo("-" * 23)
    for model in CarModel:
        car = create_factory(model).make_car()
        click.echo(f"{model.value:<12} {str(car.cost):>10}")
