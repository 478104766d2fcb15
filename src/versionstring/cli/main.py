"""Command-line interface for versionstring."""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from ..config import configure, get_settings, load_settings
from ..exceptions import ConfigError, VersionStringError
from ..version_string import VersionString
from ..version_strings import VersionStrings
from ._helpers import (
    console,
    decode_payload,
    format_json,
    load_payload,
    print_error,
    print_success,
    write_output,
)

app = typer.Typer(help="Parse and convert dual-shape version strings")

DataOption = Annotated[
    Path, typer.Option(..., "--data", "-d", help="Path to payload file (JSON)")
]

ListOption = Annotated[
    bool,
    typer.Option(
        ...,
        "--list",
        "-l",
        help="Treat input as a semicolon-separated version list",
    ),
]


def _fail(message: str, error: Exception) -> typer.Exit:
    print_error(message)
    if error.__cause__ is not None:
        console.print(
            f"  [dim]caused by: {escape(str(error.__cause__))}[/dim]", soft_wrap=True
        )
    return typer.Exit(1)


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            ...,
            "--config",
            "-c",
            help="Path to config file (pyproject.toml or versionstring.toml)",
        ),
    ] = None,
) -> None:
    """Parse and convert dual-shape version strings."""
    try:
        configure(load_settings(config))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Version string to parse")],
    as_list: ListOption = False,
) -> None:
    """Parse a version string and print its structured JSON."""
    try:
        value: VersionString | VersionStrings = (
            VersionStrings.from_string(version)
            if as_list
            else VersionString.from_string(version)
        )
    except VersionStringError as e:
        raise _fail(f"Parse error: {e}", e) from e

    console.print(format_json(value), markup=False, highlight=False, soft_wrap=True)


@app.command()
def decode(
    data: DataOption,
    as_list: ListOption = False,
    output: Annotated[
        Path | None,
        typer.Option(..., "--output", "-o", help="Output file (default: stdout)"),
    ] = None,
) -> None:
    """Decode a payload in either shape and print its structured JSON."""
    try:
        value = decode_payload(load_payload(data), as_list)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ValidationError as e:
        print_error("Decode failed:")
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            console.print(f"  • {field}: {error['msg']}", markup=False)
        raise typer.Exit(1) from e
    except VersionStringError as e:
        raise _fail(f"Decode error: {e}", e) from e

    text = format_json(value)
    if output:
        write_output(output, text)
        print_success(f"Decoded {data}")
        console.print(f"[dim]Output written to: {output}[/dim]")
    else:
        console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def render(data: DataOption, as_list: ListOption = False) -> None:
    """Decode a payload in either shape and print its plain string form."""
    try:
        value = decode_payload(load_payload(data), as_list)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ValidationError as e:
        print_error(f"Decode failed with {e.error_count()} validation error(s)")
        raise typer.Exit(1) from e
    except VersionStringError as e:
        raise _fail(f"Decode error: {e}", e) from e

    console.print(str(value), markup=False, highlight=False, soft_wrap=True)


@app.command("config")
def show_config() -> None:
    """Show the effective settings."""
    settings = get_settings()

    table = Table(title="Settings")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")

    for name, field in type(settings).model_fields.items():
        table.add_row(field.alias or name, str(getattr(settings, name)))

    console.print(table)
