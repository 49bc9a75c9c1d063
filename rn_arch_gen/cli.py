"""rn-arch-gen command line interface.

Commands:

init     -- choose an architecture, generate the project skeleton, persist the
            config and generate an example ``auth`` feature.
feature  -- generate a feature module in the persisted architecture.
model    -- generate a single model/type file.
screen   -- generate a single screen and register it in navigation.

Usage::

    rn-arch-gen init
    rn-arch-gen init --architecture featureBased --state-management zustand --yes
    rn-arch-gen feature billing
    rn-arch-gen model invoice --feature billing
    rn-arch-gen screen settings
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable

from rich.prompt import Confirm, Prompt

from rn_arch_gen import __version__
from rn_arch_gen.config import (
    ARCHITECTURE_LABELS,
    Architecture,
    GeneratorConfig,
    Routing,
    StateManagement,
)
from rn_arch_gen.errors import ConfigNotFoundError, GeneratorError
from rn_arch_gen.scaffolder import (
    FeatureGenerator,
    ModelGenerator,
    ProjectGenerator,
    ScreenGenerator,
)
from rn_arch_gen.utils import (
    console,
    create_progress,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

# Errors reported at the command boundary.  Anything else is a bug.
_REPORTED_ERRORS = (GeneratorError, OSError, ValueError)

FEATURE_SUMMARIES: dict[Architecture, list[str]] = {
    Architecture.CLEAN_ARCHITECTURE: [
        "Entity, Repository, UseCase (Domain layer)",
        "Model, DataSource, RepoImpl (Data layer)",
        "Screen, State Management (Presentation layer)",
    ],
    Architecture.FEATURE_BASED: [
        "Service (API layer)",
        "Custom Hook",
        "Screen, Types, Barrel export",
    ],
    Architecture.ATOMIC_DESIGN: [
        "Atoms (Button, Input)",
        "Molecules (FormField)",
        "Organisms (Card) + Template (Layout)",
        "Screen, Hook, Service",
    ],
    Architecture.MVVM: [
        "Model (data structures)",
        "ViewModel (custom hook)",
        "View (Screen + ListItem component)",
        "Service (API layer)",
    ],
}


# ---------------------------------------------------------------------------
# Interactive config collection
# ---------------------------------------------------------------------------


def _choose(
    value: str | None,
    enum_cls: type,
    message: str,
    default: Any,
    assume_default: bool,
) -> Any:
    if value is not None:
        return enum_cls(value)
    if assume_default:
        return default
    answer = Prompt.ask(
        message,
        choices=[member.value for member in enum_cls],
        default=default.value,
        console=console,
    )
    return enum_cls(answer)


def _confirm(value: bool | None, message: str, default: bool, assume_default: bool) -> bool:
    if value is not None:
        return value
    if assume_default:
        return default
    return Confirm.ask(message, default=default, console=console)


def collect_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build the config from CLI options, prompting for anything not given."""
    defaults = GeneratorConfig()
    if args.architecture is None and not args.yes:
        print_summary_table(
            {arch.value: label for arch, label in ARCHITECTURE_LABELS.items()},
            title="Architecture patterns",
        )
    return GeneratorConfig(
        architecture=_choose(
            args.architecture, Architecture, "Select architecture pattern",
            defaults.architecture, args.yes,
        ),
        state_management=_choose(
            args.state_management, StateManagement, "Select state management",
            defaults.state_management, args.yes,
        ),
        routing=_choose(args.routing, Routing, "Select routing", defaults.routing, args.yes),
        localization=_confirm(
            args.localization, "Enable localization (i18next)?", defaults.localization, args.yes
        ),
        firebase=_confirm(args.firebase, "Enable Firebase?", defaults.firebase, args.yes),
        tests=_confirm(args.tests, "Enable tests?", defaults.tests, args.yes),
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def run_init(root: Path, args: argparse.Namespace) -> int:
    console.print("[bold blue]Initializing React Native Architecture...[/bold blue]")
    console.print()
    config = collect_config(args)

    try:
        with create_progress() as progress:
            task = progress.add_task("Generating structure...", total=None)
            await ProjectGenerator(root, config).generate()
            progress.update(task, description="Generating example feature: auth...")
            result = await FeatureGenerator(root, config).generate("auth")
    except _REPORTED_ERRORS as exc:
        print_error(f"Failed to generate architecture: {exc}")
        return 1

    print_success("Architecture and example feature generated!")
    for warning in result.warnings:
        print_warning(warning)
    console.print()
    label = ARCHITECTURE_LABELS[config.architecture]
    console.print(f"[green]Architecture:[/green] [cyan]{label}[/cyan]")
    console.print()
    console.print("[green]Next steps:[/green]")
    console.print("1. Run [yellow]npm install[/yellow] or [yellow]yarn[/yellow]")
    console.print("2. Configure your environments in .env files")
    console.print(
        "3. Run [yellow]npx react-native run-android[/yellow] or "
        "[yellow]npx react-native run-ios[/yellow]"
    )
    return 0


async def run_feature(root: Path, args: argparse.Namespace) -> int:
    try:
        config = GeneratorConfig.load(root)
        if config is None:
            raise ConfigNotFoundError(GeneratorConfig.path_for(root))
        with create_progress() as progress:
            progress.add_task(f"Generating feature: {args.name}...", total=None)
            result = await FeatureGenerator(root, config).generate(args.name)
    except ConfigNotFoundError as exc:
        print_error(f"Error: {exc}")
        return 1
    except _REPORTED_ERRORS as exc:
        print_error(f"Failed to generate feature: {exc}")
        return 1

    print_success(
        f'Feature "{args.name}" generated with {ARCHITECTURE_LABELS[config.architecture]}!'
    )
    console.print()
    console.print("[green]Generated:[/green]")
    for line in FEATURE_SUMMARIES[config.architecture]:
        console.print(f"  - {line}")
    if result.registered:
        console.print("  - Navigation auto-registered")
    if config.tests:
        console.print("  - Test hook run")
    for warning in result.warnings:
        print_warning(warning)
    return 0


async def run_model(root: Path, args: argparse.Namespace) -> int:
    try:
        config = GeneratorConfig.load(root)
        path = await ModelGenerator(root, config).generate(args.name, args.feature)
    except _REPORTED_ERRORS as exc:
        print_error(f"Failed to generate model: {exc}")
        return 1

    print_success(f"Model {path.name} generated in {path.parent.relative_to(root).as_posix()}!")
    return 0


async def run_screen(root: Path, args: argparse.Namespace) -> int:
    try:
        config = GeneratorConfig.load(root)
        result = await ScreenGenerator(root, config).generate(args.name, args.feature)
    except _REPORTED_ERRORS as exc:
        print_error(f"Failed to generate screen: {exc}")
        return 1

    path = result.path
    print_success(
        f"Screen {path.stem} generated in {path.parent.relative_to(root).as_posix()}!"
    )
    if result.registered:
        console.print("  - Navigation auto-registered")
    return 0


COMMANDS: dict[str, Callable[[Path, argparse.Namespace], Awaitable[int]]] = {
    "init": run_init,
    "feature": run_feature,
    "model": run_model,
    "screen": run_screen,
}


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rn-arch-gen",
        description=(
            "Generate a production-ready React Native project architecture."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  rn-arch-gen init\n"
            "  rn-arch-gen feature billing\n"
            "  rn-arch-gen model invoice --feature billing\n"
            "  rn-arch-gen screen settings\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--project-dir", "-C",
        default=".",
        help="Project root (default: current directory)",
    )
    sub = parser.add_subparsers(dest="command")

    init = sub.add_parser("init", help="Initialize React Native project architecture.")
    init.add_argument(
        "--architecture",
        choices=[a.value for a in Architecture],
        default=None,
    )
    init.add_argument(
        "--state-management",
        choices=[s.value for s in StateManagement],
        default=None,
    )
    init.add_argument("--routing", choices=[r.value for r in Routing], default=None)
    init.add_argument("--localization", action=argparse.BooleanOptionalAction, default=None)
    init.add_argument("--firebase", action=argparse.BooleanOptionalAction, default=None)
    init.add_argument("--tests", action=argparse.BooleanOptionalAction, default=None)
    init.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept defaults for every option not given instead of prompting",
    )

    feature = sub.add_parser(
        "feature", help="Generate a complete feature module using the selected architecture."
    )
    feature.add_argument("name")

    model = sub.add_parser("model", help="Generate a TypeScript model/interface.")
    model.add_argument("name")
    model.add_argument("--feature", "-f", default=None, help="Target feature module")

    screen = sub.add_parser(
        "screen", help="Generate a new screen with optional navigation registration."
    )
    screen.add_argument("name")
    screen.add_argument("--feature", "-f", default=None, help="Target feature module")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``rn-arch-gen`` and ``python -m rn_arch_gen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    root = Path(args.project_dir).resolve()
    return asyncio.run(COMMANDS[args.command](root, args))
