import click

from carfactory.infrastructure.cli.abstract_factory_commands import (
    abstract_factory_list,
    abstract_factory_run,
)
from carfactory.infrastructure.cli.demo_commands import demo
from carfactory.infrastructure.cli.factory_method_commands import (
    factory_method_list,
    factory_method_run,
)


@click.group()
def cli() -> None:
    """carfactory: creational design pattern walkthroughs"""


@cli.group("factory-method")
def factory_method() -> None:
    """Factory Method: one factory per car model."""


@cli.group("abstract-factory")
def abstract_factory() -> None:
    """Abstract Factory: one factory per body style."""


# Register subcommands
factory_method.add_command(factory_method_list)
factory_method.add_command(factory_method_run)
abstract_factory.add_command(abstract_factory_list)
abstract_factory.add_command(abstract_factory_run)
cli.add_command(demo)
