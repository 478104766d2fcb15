"""Helper functions for the CLI."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..types import JsonValue
from ..version_string import VersionString
from ..version_strings import VersionStrings

console = Console()


def load_payload(path: Path) -> bytes:
    """Read a raw JSON payload from a file.

    Args:
        path: Path to the payload file.

    Returns:
        File contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_bytes()


def decode_payload(payload: bytes, as_list: bool) -> VersionString | VersionStrings:
    """Decode a payload as a single version or a version list."""
    if as_list:
        return VersionStrings.decode(payload)
    return VersionString.decode(payload)


def format_json(value: VersionString | VersionStrings) -> str:
    """Format the structured form of a value for display."""
    data: JsonValue = json.loads(value.encode())
    return json.dumps(data, indent=2)


def write_output(path: Path, text: str) -> None:
    """Write text to a file, creating parent directories.

    Args:
        path: Destination file.
        text: Content to write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)
