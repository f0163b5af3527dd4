"""CLI commands for the Abstract Factory example."""

from __future__ import annotations

import click

from carfactory.application.abstract_factory_app import app_car_factory
from carfactory.domain.factory.abstract_car_factory import create_factory
from carfactory.domain.model.variants import BodyStyle


@click.command("run")
@click.option(
    "--style",
    default=None,
    type=click.Choice([s.value for s in BodyStyle], case_sensitive=False),
    help="Body style of the factory. Omit to run without a factory.",
)
def abstract_factory_run(style: str | None) -> None:
    """Build one car of each family and use their GPS."""
    factory = create_factory(style) if style is not None else None
    app_car_factory(factory)


@click.command("list")
def abstract_factory_list() -> None:
    """List the available body styles."""
    click.echo(f"{'Key':<12} {'Label':<12}")
    click.echo("-" * 25)
    for style in BodyStyle:
        click.echo(f"{style.value:<12} {style.label:<12}")
