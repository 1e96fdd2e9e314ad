"""Airly command-line interface.

This module provides the ``pyairly`` command: one sub-command per API
operation, printing the downloaded data as JSON, plus configuration helpers.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from pyairly.client import AirlyAPIError, AirlyClient
from pyairly.client.endpoints import DEFAULT_INDEX_TYPE
from pyairly.models import AirlyModel
from pyairly.settings import ClientSettings
from pyairly.types import GeoCircle, GeoPoint

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Airly air-quality API CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
measurements_app = typer.Typer(help="Measurement queries")
app.add_typer(config_app, name="config")
app.add_typer(measurements_app, name="measurements")

logger: Final = logging.getLogger(__name__)  # Will be "pyairly.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DST_ARGUMENT = typer.Argument(..., help="Output config YAML")
ID_ARGUMENT = typer.Argument(..., help="Installation ID")
LAT_OPTION = typer.Option(..., "--lat", help="Latitude in degrees")
LNG_OPTION = typer.Option(..., "--lng", help="Longitude in degrees")
RADIUS_OPTION = typer.Option(3, "--radius", "-r", help="Search radius in km")
MAX_RESULTS_OPTION = typer.Option(
    1, "--max-results", "-n", help="Maximum number of installations, -1 for no limit"
)
INDEX_TYPE_OPTION = typer.Option(DEFAULT_INDEX_TYPE, "--index-type", "-i", help="Index to compute")
INCLUDE_WIND_OPTION = typer.Option(False, "--include-wind", help="Include wind measurements")


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Query the Airly API and print the results as JSON.

    The API key is read from --config, AIRLY_API_KEY or a default config file.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@contextmanager
def _client(ctx: typer.Context) -> Iterator[AirlyClient]:
    """Yield a configured client, turning failures into exit code 1."""
    try:
        settings = ClientSettings.resolve(ctx.obj)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    try:
        with AirlyClient.from_settings(settings) as client:
            yield client
            logger.debug("Rate limit after request: %s", client.rate_limit)
    except AirlyAPIError as exc:
        typer.secho(f"Airly API error {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        typer.secho(f"Invalid argument: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _emit(data: AirlyModel | Sequence[AirlyModel]) -> None:
    payload: Any
    if isinstance(data, AirlyModel):
        payload = data.to_wire()
    else:
        payload = [item.to_wire() for item in data]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ───────────────────────── installation commands ─────────────────────────────
@app.command()
def installation(ctx: typer.Context, installation_id: int = ID_ARGUMENT) -> None:
    """Show one installation."""
    with _client(ctx) as client:
        _emit(client.get_installation(installation_id))


@app.command()
def nearest(
    ctx: typer.Context,
    lat: float = LAT_OPTION,
    lng: float = LNG_OPTION,
    radius: int = RADIUS_OPTION,
    max_results: int = MAX_RESULTS_OPTION,
) -> None:
    """List installations nearest to a point."""
    with _client(ctx) as client:
        _emit(client.get_nearest(GeoCircle.around(lat, lng, radius), max_results))


@app.command()
def indexes(ctx: typer.Context) -> None:
    """List supported index types and their levels."""
    with _client(ctx) as client:
        _emit(client.get_indexes())


@app.command("measurement-types")
def measurement_types(ctx: typer.Context) -> None:
    """List supported measurement types."""
    with _client(ctx) as client:
        _emit(client.get_measurement_types())


# ───────────────────────── measurement commands ──────────────────────────────
@measurements_app.command("installation")
def installation_measurements(
    ctx: typer.Context,
    installation_id: int = ID_ARGUMENT,
    index_type: str = INDEX_TYPE_OPTION,
    include_wind: bool = INCLUDE_WIND_OPTION,
) -> None:
    """Measurements of one installation."""
    with _client(ctx) as client:
        _emit(client.get_installation_measurements(installation_id, index_type, include_wind))


@measurements_app.command("nearest")
def nearest_measurements(
    ctx: typer.Context,
    lat: float = LAT_OPTION,
    lng: float = LNG_OPTION,
    radius: int = RADIUS_OPTION,
    index_type: str = INDEX_TYPE_OPTION,
) -> None:
    """Measurements of the installation nearest to a point."""
    with _client(ctx) as client:
        _emit(client.get_nearest_measurements(GeoCircle.around(lat, lng, radius), index_type))


@measurements_app.command("point")
def point_measurements(
    ctx: typer.Context,
    lat: float = LAT_OPTION,
    lng: float = LNG_OPTION,
    index_type: str = INDEX_TYPE_OPTION,
) -> None:
    """Measurements interpolated for a point."""
    with _client(ctx) as client:
        _emit(client.get_point_measurements(GeoPoint.of(lat, lng), index_type))


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        ClientSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "api_key": typer.prompt("Airly API key", hide_input=True),
            "language": typer.prompt("Language [en|pl]", default="en"),
            "timeout": float(typer.prompt("Timeout in seconds", default="10")),
        }
        try:
            cfg = ClientSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
