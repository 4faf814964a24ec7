import click

from beerstock.infrastructure.cli.beer_commands import (
    beer_create,
    beer_delete,
    beer_increment,
    beer_list,
    beer_show,
)
from beerstock.infrastructure.config import load_settings
from beerstock.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """beerstock: beer catalog and stock control"""
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)


@cli.group()
def beer() -> None:
    """Manage beers."""


# Register subcommands
beer.add_command(beer_create)
beer.add_command(beer_show)
beer.add_command(beer_list)
beer.add_command(beer_delete)
beer.add_command(beer_increment)
