"""Command line interface for fleetdump.

Renders the built-in demo fleet or a YAML fleet file as XML or JSON.
"""

from __future__ import annotations

import logging
from typing import Iterable

import click

from fleetdump import __version__
from fleetdump.config import ConfigLoader
from fleetdump.exceptions import FleetDumpError
from fleetdump.rendering import FleetRenderer
from fleetdump.serialization import OutputFormat, SerializerFactory
from fleetdump.vehicles import Vehicle, demo_fleet

logger = logging.getLogger(__name__)


def _emit(renderer: FleetRenderer, vehicles: Iterable[Vehicle]) -> None:
    header = f"=== Serialized vehicles in {renderer.format_id.upper()} format ==="
    click.echo(f"\n{header}\n")
    for document in renderer.render_all(vehicles):
        click.echo(f"{document}\n")


@click.group()
@click.version_option(version=__version__, prog_name="fleetdump")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Render vehicles as XML or JSON."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--format", "format_id", help="Output format (json/xml)")
def demo(format_id: str | None) -> None:
    """Render the built-in demo fleet.

    Unsupported formats fall back to JSON.
    """
    if format_id is None:
        format_id = click.prompt("Choose format (json/xml)")
    format_id = format_id.strip().lower()

    if not SerializerFactory.is_supported(format_id):
        click.echo("Invalid format. Using JSON by default.")
        format_id = OutputFormat.JSON.value

    _emit(FleetRenderer(format_id), demo_fleet())


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "format_id", help="Override the configured format")
def render(config_file: str, format_id: str | None) -> None:
    """Render the vehicles described in a YAML fleet file."""
    try:
        loader = ConfigLoader()
        config = loader.load(config_file)
        vehicles = loader.build_vehicles(config)
        if format_id is None:
            renderer = FleetRenderer.from_config(config)
        else:
            renderer = FleetRenderer(format_id.strip().lower())
    except FleetDumpError as e:
        logger.debug("Render failed", exc_info=True)
        raise click.ClickException(str(e)) from e

    logger.info("Rendering fleet '%s'", config.global_config.name)
    _emit(renderer, vehicles)


@cli.command()
def formats() -> None:
    """List supported output formats."""
    for format_id in SerializerFactory.available_formats():
        click.echo(format_id)


def main() -> None:
    """Console script entry point."""
    cli()
