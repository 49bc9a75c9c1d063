"""Shared utility functions for rn-arch-gen.

Provides naming-convention conversion, JSON I/O, file-system helpers and
Rich-based console reporting.  The naming helpers are pure and total: every
string maps to exactly one snake/pascal/camel/kebab form.
"""

from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")


def to_snake_case(name: str) -> str:
    """Convert any identifier-ish string to ``snake_case``.

    Camel-case humps and runs of non-alphanumeric characters both become a
    single underscore.

    Examples::

        to_snake_case("user profile") -> "user_profile"
        to_snake_case("UserProfile")  -> "user_profile"
        to_snake_case("HTTPClient")   -> "http_client"
    """
    s1 = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    s2 = _CAMEL_BOUNDARY.sub(r"\1_\2", s1)
    return _SEPARATORS.sub("_", s2).strip("_").lower()


def to_pascal_case(name: str) -> str:
    """Capitalise each snake segment and join: ``user_profile`` -> ``UserProfile``."""
    return "".join(part[:1].upper() + part[1:] for part in to_snake_case(name).split("_"))


def to_camel_case(name: str) -> str:
    """Pascal case with the first letter lowercased."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(name: str) -> str:
    """Snake case with hyphens: ``UserProfile`` -> ``user-profile``."""
    return to_snake_case(name).replace("_", "-")


@dataclass(frozen=True)
class NameForms:
    """The canonical case forms of one user-supplied name."""

    raw: str
    snake: str
    pascal: str
    camel: str
    kebab: str

    @classmethod
    def from_raw(cls, name: str) -> "NameForms":
        return cls(
            raw=name,
            snake=to_snake_case(name),
            pascal=to_pascal_case(name),
            camel=to_camel_case(name),
            kebab=to_kebab_case(name),
        )


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file holding a top-level object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as JSON indented by two spaces, the way npm writes manifests.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    await asyncio.to_thread(write_file, file_path, content)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_file(path: Path, content: str) -> None:
    """Create parent dirs and write *content*, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def relative_import(from_dir: Path, target: Path) -> str:
    """Return a POSIX relative import specifier from *from_dir* to *target*.

    Examples::

        relative_import(Path("src/navigation"), Path("src/features/a/LoginScreen"))
            -> "../features/a/LoginScreen"
        relative_import(Path("src/features/a/types"), Path("src/features/a/types/a.types"))
            -> "./a.types"
    """
    from_parts = Path(from_dir).parts
    target_parts = Path(target).parts
    common = 0
    for a, b in zip(from_parts, target_parts):
        if a != b:
            break
        common += 1
    ups = len(from_parts) - common
    rest = "/".join(target_parts[common:])
    if ups == 0:
        return f"./{rest}"
    return "/".join([".."] * ups + ([rest] if rest else []))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def create_progress() -> Progress:
    """Create a transient Rich spinner for a running command."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
