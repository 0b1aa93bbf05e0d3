"""CLI interface for hex map generation."""

import logging
import tomllib
from typing import Optional

import click
from pydantic import ValidationError

from hexmapgen import config
from hexmapgen.biomes import classify
from hexmapgen.game_map import generate_map
from hexmapgen.schemas import MapSummary


def render_summary(summary: MapSummary) -> None:
    """Print a generated map summary."""
    click.echo(f"Map (radius: {summary.radius}, seed: {summary.seed})")
    click.echo(f"  Hexes: {summary.total_hexes}")
    click.echo(f"  Land hexes: {summary.land_hexes}")
    click.echo(f"  Edges: {summary.total_edges}")
    click.echo(f"  Boundary edges: {summary.boundary_edges}")
    click.echo(f"  Coastline edges: {summary.coastline_edges}")
    click.echo("Biomes:")
    for name, count in summary.biome_counts.items():
        click.echo(f"  {name}: {count}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Hexagonal Biome Map Generator"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=config.LOG_FORMAT,
    )


@cli.command()
@click.option("--radius", type=int, default=None, help="Map radius in hexes")
@click.option("--seed", type=int, default=None, help="Noise seed")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="TOML file with a [map] table")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
def generate(radius: Optional[int], seed: Optional[int], config_path: Optional[str], as_json: bool):
    """Generate a map and print its summary."""
    try:
        if config_path:
            map_config = config.load_config(config_path, radius=radius, seed=seed)
        else:
            map_config = config.default_config(radius=radius, seed=seed)
    except (tomllib.TOMLDecodeError, config.ConfigError) as e:
        raise click.ClickException(f"Invalid config file: {e}")
    except ValidationError as e:
        raise click.ClickException(f"Invalid map configuration: {e}")

    game_map = generate_map(map_config)
    summary = game_map.summary()

    if as_json:
        click.echo(summary.model_dump_json(indent=2))
    else:
        render_summary(summary)


@cli.command("classify")
@click.argument("elevation", type=float)
@click.argument("moisture", type=float)
def classify_command(elevation: float, moisture: float):
    """Print the biome for an ELEVATION and MOISTURE pair."""
    click.echo(classify(elevation, moisture).value)


def main():
    cli()


if __name__ == "__main__":
    main()
