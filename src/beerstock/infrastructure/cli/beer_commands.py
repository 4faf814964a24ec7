"""CLI commands for the Beer aggregate."""

from __future__ import annotations

import json

import click

from beerstock.application.dto import BeerDTO
from beerstock.domain.exceptions import DomainException
from beerstock.domain.model.beer import BeerType
from beerstock.infrastructure.bootstrap import beer_service


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2))


def _display_beer(dto: BeerDTO) -> None:
    click.echo(f"Beer #{dto.id}  {dto.name}")
    click.echo(f"Brand:    {dto.brand}")
    click.echo(f"Type:     {dto.type}")
    click.echo(f"Stock:    {dto.quantity}/{dto.max}")


@click.command("create")
@click.option("--name", required=True, help="Beer name (must be unique).")
@click.option("--brand", required=True, help="Brand name.")
@click.option("--max", "max_", required=True, type=int, help="Maximum stock capacity.")
@click.option("--quantity", default=0, show_default=True, type=int, help="Initial stock.")
@click.option(
    "--type", "type_",
    required=True,
    type=click.Choice([t.value for t in BeerType], case_sensitive=False),
    help="Beer type.",
)
def beer_create(name: str, brand: str, max_: int, quantity: int, type_: str) -> None:
    """Register a new beer in the catalog."""
    dto = BeerDTO(name=name, brand=brand, max=max_, quantity=quantity, type=type_)
    try:
        created = beer_service().create_beer(dto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{created.id} '{created.name}' created ({created.quantity}/{created.max})")


@click.command("show")
@click.option("--name", required=True, help="Beer name.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def beer_show(name: str, as_json: bool) -> None:
    """Show a beer by name."""
    try:
        dto = beer_service().find_by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(dto.to_dict())
    else:
        _display_beer(dto)


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def beer_list(as_json: bool) -> None:
    """List all beers in the catalog."""
    beers = beer_service().list_all()

    if as_json:
        _echo_json([dto.to_dict() for dto in beers])
        return

    if not beers:
        click.echo("No beers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Brand':<20} {'Type':<10} {'Qty':>5} {'Max':>5}")
    click.echo("-" * 71)
    for b in beers:
        click.echo(
            f"{b.id:<6} {b.name:<20} {b.brand:<20} {b.type:<10} {b.quantity:>5} {b.max:>5}"
        )


@click.command("delete")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID to delete.")
def beer_delete(beer_id: int) -> None:
    """Delete a beer from the catalog."""
    try:
        beer_service().delete_by_id(beer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{beer_id} deleted.")


@click.command("increment")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@click.option("--quantity", required=True, type=int, help="Units to add to stock.")
def beer_increment(beer_id: int, quantity: int) -> None:
    """Add stock to a beer, up to its maximum capacity."""
    try:
        dto = beer_service().increment(beer_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{dto.id} '{dto.name}' stock is now {dto.quantity}/{dto.max}")
