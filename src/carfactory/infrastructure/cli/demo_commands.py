"""CLI command replaying the pattern walkthroughs."""

from __future__ import annotations

import click

from carfactory.application.demo import (
    run_abstract_factory_demo,
    run_factory_method_demo,
)


@click.command("demo")
@click.argument(
    "pattern",
    required=False,
    default="all",
    type=click.Choice(["factory-method", "abstract-factory", "all"]),
)
def demo(pattern: str) -> None:
    """Replay the Factory Method and/or Abstract Factory walkthrough."""
    if pattern in ("factory-method", "all"):
        run_factory_method_demo()
    if pattern in ("abstract-factory", "all"):
        run_abstract_factory_demo()
