"""Shared helpers for CLI commands: calculator lookup, ``--set`` parsing and
result tables."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from mechcalc.core.base import Calculator, CalculatorOutput
from mechcalc.core.registry import CalculatorRegistry
from mechcalc.utils.validation import ValidationResult


def get_console(ctx: click.Context) -> Console:
    return ctx.obj.get("console", Console())


def get_calculator(ctx: click.Context, name: str) -> Calculator:
    """Look up a calculator by name, exiting with status 1 if unknown."""
    registry: CalculatorRegistry = ctx.obj["registry"]
    try:
        return registry.get(name)
    except KeyError as e:
        get_console(ctx).print(f"[red]Error:[/red] {e.args[0]}")
        raise SystemExit(1)


def parse_assignments(pairs: Iterable[str]) -> dict[str, str]:
    """Turn ``["floor_area=500", "ach=4"]`` into a dict of raw values.

    Raises:
        click.BadParameter: If an item has no ``=``.
    """
    raw: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected FIELD=VALUE, got {pair!r}", param_hint="--set")
        raw[key.strip()] = value.strip()
    return raw


def build_inputs(ctx: click.Context, calculator: Calculator, raw: dict[str, Any]) -> Any:
    """Validate and parse raw values, printing warnings; exit 1 on unknown fields."""
    console = get_console(ctx)
    result = calculator.validate(raw)
    print_validation(console, result)
    if not result.is_valid:
        raise SystemExit(1)
    return calculator.parse(raw)


def print_validation(console: Console, result: ValidationResult) -> None:
    for msg in result.errors:
        console.print(f"[red]Error:[/red] {msg.message}")
    for msg in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")


def result_table(calculator: Calculator, output: CalculatorOutput, title: str | None = None) -> Table:
    table = Table(title=title or f"{calculator.title} — Results")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    labels = output.labels()
    for key, text in output.display().items():
        label, unit = labels.get(key, (key, ""))
        table.add_row(label, text, unit or "—")
    return table


def print_result(
    ctx: click.Context,
    calculator: Calculator,
    inputs: Any,
    output: CalculatorOutput,
    as_json: bool = False,
    heading: str | None = None,
) -> None:
    """Show one evaluation as a rich table, or as JSON on stdout."""
    if as_json:
        data = {
            "calculator": calculator.name,
            "inputs": dataclasses.asdict(inputs),
            "outputs": output.as_dict(),
            "display": output.display(),
        }
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    console = get_console(ctx)
    console.print(f"\n[bold]{heading or calculator.title}[/bold]\n")
    console.print(result_table(calculator, output))
    if not output.computable:
        console.print("[yellow]Not computable for these inputs.[/yellow]")
