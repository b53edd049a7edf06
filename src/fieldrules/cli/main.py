"""CLI entry point for fieldrules.

Invoked as::

    fieldrules [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m fieldrules.cli.main

Commands
--------
check        Validate values given on the command line against shorthand rules
split        Show how a shorthand rule string is parsed
constraints  List built-in constraints and installed constraint providers
version      Show version information

Rules and values are passed as options only, for example::

    fieldrules check -r "age=min:18" -t "age=Age" -d age=15
    fieldrules check -p postal -r "code=zip::{title} must be five digits" -d code=1234
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _split_pairs(pairs: tuple[str, ...], option: str) -> list[tuple[str, str]]:
    """Split ``FIELD=VALUE`` option values, failing on malformed input."""
    result: list[tuple[str, str]] = []
    for pair in pairs:
        field, sep, value = pair.partition("=")
        if not sep or not field:
            raise click.BadParameter(
                f"expected FIELD=VALUE, got {pair!r}", param_hint=option
            )
        result.append((field, value))
    return result


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="fieldrules")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Schema-driven field validation with shorthand rule strings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from fieldrules import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]fieldrules[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# constraints command
# ---------------------------------------------------------------------------


@cli.command(name="constraints")
def constraints_command() -> None:
    """List built-in constraints and installed constraint providers."""
    from fieldrules.constraints import DEFAULT_MESSAGES, BuiltinConstraints, providers

    table = Table(title="Built-in constraints")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Default message")
    for name in sorted(BuiltinConstraints().get_constraints()):
        table.add_row(name, DEFAULT_MESSAGES.get(name, ""))
    console.print(table)

    providers.load_entrypoints()
    console.print("[bold]Constraint providers:[/bold]")
    for name in providers.list_providers():
        console.print(f"  {name} ({providers.get(name).__qualname__})")


# ---------------------------------------------------------------------------
# split command
# ---------------------------------------------------------------------------


@cli.command(name="split")
@click.argument("shorthand")
def split_command(shorthand: str) -> None:
    """Show how SHORTHAND is parsed into rule, options and message."""
    from fieldrules.shorthand import split_shorthand

    rule = split_shorthand(shorthand)

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Rule[/bold]", escape(rule.rule))
    table.add_row("[bold]Options[/bold]", escape(", ".join(repr(o) for o in rule.options)) or "-")
    table.add_row("[bold]Message[/bold]", escape(rule.message) or "-")
    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.option(
    "-r", "--rule", "rules", multiple=True, metavar="FIELD=SHORTHAND",
    help="Rule(s) for a field, e.g. 'name=notEmpty|minLength:3'. Repeatable.",
)
@click.option(
    "-d", "--data", "values", multiple=True, metavar="FIELD=VALUE",
    help="Value to validate for a field. Repeatable.",
)
@click.option(
    "-t", "--title", "titles", multiple=True, metavar="FIELD=TITLE",
    help="Display title for a field. Repeatable.",
)
@click.option(
    "-p", "--provider", "provider_names", multiple=True, metavar="NAME",
    help="Also load constraints from an installed provider. Repeatable.",
)
def check_command(
    rules: tuple[str, ...],
    values: tuple[str, ...],
    titles: tuple[str, ...],
    provider_names: tuple[str, ...],
) -> None:
    """Validate command-line values against shorthand rules.

    Built-in constraints are always available; ``--provider`` merges the
    constraints of a provider registered in-process or declared under the
    ``fieldrules.constraints`` entry-point group.

    Exits 0 when every value passes, 1 on validation failure or when there
    is nothing to check, and 2 on a configuration error.
    """
    from fieldrules.constraints import ProviderNotFoundError, providers
    from fieldrules.errors import FieldRulesError
    from fieldrules.validator import StandardValidator

    field_rules: dict[str, list[str]] = {}
    for field, shorthand in _split_pairs(rules, "--rule"):
        field_rules.setdefault(field, []).extend(shorthand.split("|"))

    title_map = dict(_split_pairs(titles, "--title"))
    data = dict(_split_pairs(values, "--data"))

    descriptors = {
        field: {"title": title_map.get(field, field), "rules": shorthands}
        for field, shorthands in field_rules.items()
    }

    validator = StandardValidator.from_shorthand(data, descriptors)

    if provider_names:
        providers.load_entrypoints()
        for name in provider_names:
            try:
                validator.add_constraints_from(providers.create(name))
            except ProviderNotFoundError as exc:
                err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
                sys.exit(2)

    try:
        passed = validator.validate()
    except FieldRulesError as exc:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(2)

    if passed:
        console.print(f"[green]OK[/green] {len(data)} value(s) checked, no errors")
        sys.exit(0)

    if not validator.errors:
        console.print("[yellow]Nothing to check:[/yellow] no values were given")
        sys.exit(1)

    table = Table(title="Validation errors", show_lines=True)
    table.add_column("Field", style="bold", min_width=10)
    table.add_column("Value")
    table.add_column("Message")

    for field, message in validator.errors.items():
        table.add_row(escape(field), escape(repr(data.get(field))), f"[red]{escape(message)}[/red]")

    console.print(table)
    console.print(f"\n[bold]Summary:[/bold] {len(validator.errors)} field(s) failed")
    sys.exit(1)


if __name__ == "__main__":
    cli()
