"""CLI principal (Typer).

Por qué una CLI fina:
- Cada comando llama a exactamente una operación de `core.services`.
- Settings y logging se resuelven aquí; el Core no los lee nunca.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_json
from adapters.json_loader import load_products, load_rated_items
from cli.ui_components import (
    build_product_panel,
    build_ratings_table,
    build_settings_table,
    build_vehicle_panel,
)
from core.config import AppSettings
from core.domain.calendar import Day
from core.domain.casing import CaseMode
from core.domain.vehicles import Car, Vehicle
from core.errors import InputFileError, NegativeNumberError
from core.logging_setup import setup_logging
from core.services import (
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
    square_async,
)

app = typer.Typer(no_args_is_help=True, help="Small, independent utility operations.")

_console = Console()


@app.callback()
def _main(ctx: typer.Context) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc.errors()[0]['msg']}")
        raise typer.Exit(code=2) from exc
    setup_logging(settings.log_level)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


def _parse_number(raw: str) -> int | float:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise typer.BadParameter(f"not a number: {raw!r}") from None


@app.command(name="format")
def format_command(
    text: str = typer.Argument(..., help="Text to normalize."),
    upper: Optional[bool] = typer.Option(None, "--upper/--lower", help="Force upper or lower case."),
) -> None:
    """Upper-case TEXT (default) or lower-case it with --lower."""

    _console.print(format_string(text, CaseMode.from_flag(upper)), markup=False)


@app.command()
def ratings(
    path: Path = typer.Argument(..., help="JSON array of {title, rating}."),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Write kept items to this JSON file."),
) -> None:
    """Show the items rated 4 or higher."""

    try:
        items = load_rated_items(path)
    except InputFileError as exc:
        raise typer.BadParameter(str(exc)) from exc

    kept = filter_by_rating(items)
    _console.print(build_ratings_table(kept))
    if json_out is not None:
        out = export_json(payload=kept, output_path=json_out)
        _console.print(f"[green]Saved:[/green] {out}")


@app.command()
def concat(
    sequences: Optional[List[str]] = typer.Argument(None, help="Comma-separated lists, e.g. 1,2 3"),
) -> None:
    """Concatenate comma-separated lists in argument order."""

    parts = [[value for value in raw.split(",") if value] for raw in (sequences or [])]
    _console.print(concatenate_arrays(*parts))


@app.command()
def vehicle(
    make: str = typer.Argument(...),
    year: int = typer.Argument(...),
    model: Optional[str] = typer.Option(None, "--model", help="Describe a car with this model."),
) -> None:
    """Describe a vehicle, or a car when --model is given."""

    subject = Car(make, year, model) if model is not None else Vehicle(make, year)
    _console.print(build_vehicle_panel(subject))


@app.command()
def process(
    value: str = typer.Argument(...),
    number: bool = typer.Option(False, "--number", help="Treat VALUE as a number."),
) -> None:
    """Print the length of text, or twice a number with --number."""

    raw: str | int | float = _parse_number(value) if number else value
    _console.print(process_value(raw))


@app.command()
def priciest(path: Path = typer.Argument(..., help="JSON array of {name, price}.")) -> None:
    """Show the most expensive product (first wins on ties)."""

    try:
        products = load_products(path)
    except InputFileError as exc:
        raise typer.BadParameter(str(exc)) from exc

    product = get_most_expensive_product(products)
    if product is None:
        _console.print("[yellow]No products.[/yellow]")
        return
    _console.print(build_product_panel(product))


@app.command()
def day(name: str = typer.Argument(..., help="Day name, e.g. monday.")) -> None:
    """Classify a day as Weekday or Weekend."""

    try:
        parsed = Day.parse(name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _console.print(get_day_type(parsed).value)


@app.command()
def square(ctx: typer.Context, n: str = typer.Argument(..., help="Number to square.")) -> None:
    """Square N after the configured delay."""

    settings = _settings(ctx)
    value = _parse_number(n)
    try:
        result = asyncio.run(square_async(value, delay_seconds=settings.square_delay_seconds))
    except NegativeNumberError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    _console.print(result)


@app.command()
def config(ctx: typer.Context) -> None:
    """Show the effective settings."""

    _console.print(build_settings_table(_settings(ctx)))


def run() -> None:
    app()
