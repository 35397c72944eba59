"""Command-line interface for the earthquake risk scorer."""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.table import Table

from quake_risk import narratives
from quake_risk.assessment import Assessment, assess
from quake_risk.catalog import DEFAULT_CATALOG, find_by_name, load_catalog
from quake_risk.evaluator import classify, classify_location
from quake_risk.logging_config import configure_logging
from quake_risk.models import RiskLevel
from quake_risk.samples import SAMPLES
from quake_risk.validation import InvalidInputError, parse_classify, parse_form

console = Console()

LEVEL_COLORS = {
    RiskLevel.HIGH: "red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "green",
}


def _catalog(path: str | None):
    try:
        return load_catalog(path) if path else DEFAULT_CATALOG
    except InvalidInputError as exc:
        raise click.ClickException(str(exc)) from exc


def _input_error(exc: InvalidInputError, locale: str) -> click.ClickException:
    return click.ClickException(
        f"{narratives.translate(exc.title_key, locale)}: "
        f"{narratives.translate(exc.key, locale)} ({exc})"
    )


def _level(level: RiskLevel, locale: str) -> str:
    color = LEVEL_COLORS[level]
    return f"[bold {color}]{narratives.translate(level.value, locale)}[/]"


def _print_assessment(result: Assessment) -> None:
    locale = result.locale
    inp = result.risk_input
    console.print(
        f"[bold]{result.place}[/] ({inp.latitude:.4f}, {inp.longitude:.4f}) "
        f"depth {inp.depth_km:g} km, M{inp.avg_magnitude:g}, "
        f"{inp.days_since_last_eq} days since last"
    )
    console.print(f"Headline: {_level(result.headline, locale)}")

    table = Table(title=result.combined.label)
    table.add_column("Factor")
    table.add_column("Score", justify="right")
    table.add_column("Level")
    table.add_column("Analysis")
    table.add_column("Recommendation")
    for f in result.combined.factors:
        table.add_row(f.label, f"{f.score:.0f}", _level(f.category, locale), f.narrative, f.recommendation)
    table.add_row(
        result.combined.label,
        f"{result.combined.score:.1f}",
        _level(result.combined.category, locale),
        result.combined.narrative,
        result.combined.recommendation,
    )
    console.print(table)

    refined = result.refined
    console.print(
        f"Refined: {_level(refined.category, locale)} "
        f"(confidence {refined.confidence:.0f}%, score {refined.raw_score:.1f})"
    )
    console.print(refined.narrative)
    if result.nearby_zones:
        names = ", ".join(z.name for z in result.nearby_zones)
        console.print(f"Nearby seismic zones: {names}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Japan earthquake risk scorer."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.option("--lat", "latitude", required=True, help="Latitude in degrees (24-46).")
@click.option("--lon", "longitude", required=True, help="Longitude in degrees (129-146).")
@click.option("--depth", required=True, help="Depth of last seismic activity in km.")
@click.option("--days", required=True, help="Days since last earthquake.")
@click.option("--magnitude", required=True, help="Historical average magnitude.")
@click.option("--locale", type=click.Choice(narratives.LOCALES), default=narratives.DEFAULT_LOCALE)
@click.option("--catalog", "catalog_path", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def predict(latitude, longitude, depth, days, magnitude, locale, catalog_path, as_json) -> None:
    """Score one location."""
    form = {
        "latitude": latitude,
        "longitude": longitude,
        "depth": depth,
        "daysSinceLastEarthquake": days,
        "averagePastMagnitude": magnitude,
    }
    try:
        risk_input = parse_form(form)
    except InvalidInputError as exc:
        raise _input_error(exc, locale) from exc

    result = assess(risk_input, _catalog(catalog_path), locale)
    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_assessment(result)


@cli.command("classify")
@click.argument("magnitude")
@click.argument("depth")
@click.argument("days")
def classify_cmd(magnitude: str, depth: str, days: str) -> None:
    """Hard-threshold category for MAGNITUDE DEPTH DAYS."""
    try:
        mag, depth_km, day_count = parse_classify({
            "avg_magnitude": magnitude,
            "depth_km": depth,
            "days_since_last_eq": days,
        })
    except InvalidInputError as exc:
        raise _input_error(exc, narratives.DEFAULT_LOCALE) from exc
    click.echo(classify(mag, depth_km, day_count).value)


@cli.command("catalog")
@click.option("--catalog", "catalog_path", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--name", default=None, help="Show a single city by name.")
def catalog_cmd(catalog_path: str | None, name: str | None) -> None:
    """List reference locations and their hard-threshold category."""
    locations = _catalog(catalog_path)
    if name is not None:
        match = find_by_name(name, locations)
        if match is None:
            raise click.ClickException(f"City not found in dataset: {name}")
        locations = (match,)

    table = Table(title="Reference locations")
    for col in ("City", "Lat", "Lon", "Depth km", "Avg M", "Days", "Category"):
        table.add_column(col)
    for loc in locations:
        table.add_row(
            loc.name, f"{loc.latitude:.4f}", f"{loc.longitude:.4f}",
            f"{loc.depth_km:g}", f"{loc.avg_magnitude:g}", str(loc.days_since_last_eq),
            _level(classify_location(loc), narratives.DEFAULT_LOCALE),
        )
    console.print(table)


@cli.command()
@click.option("--locale", type=click.Choice(narratives.LOCALES), default=narratives.DEFAULT_LOCALE)
def samples(locale: str) -> None:
    """Run every calibrated sample input."""
    for key, sample in SAMPLES.items():
        result = assess(parse_form(sample), locale=locale)
        console.print(
            f"{key:<8} {sample['name']}: combined {result.combined.score:5.1f} "
            f"{_level(result.combined.category, locale)}, "
            f"headline {_level(result.headline, locale)}, "
            f"refined {_level(result.refined.category, locale)}"
        )


if __name__ == "__main__":
    cli()
