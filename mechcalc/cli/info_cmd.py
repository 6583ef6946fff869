"""CLI commands for listing calculators, their fields and the unit tables."""

from __future__ import annotations

import click
import pint
from rich.table import Table
from rich.tree import Tree

from mechcalc.cli.output import get_calculator, get_console
from mechcalc.core.registry import CalculatorRegistry
from mechcalc.utils.units import convert, from_si, pint_unit_for, table_deviation


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect calculators and unit tables."""
    pass


@info.command("calculators")
@click.pass_context
def info_calculators(ctx: click.Context) -> None:
    """List available calculators."""
    console = get_console(ctx)
    registry: CalculatorRegistry = ctx.obj["registry"]

    table = Table(title="Available Calculators")
    table.add_column("Name", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Description", style="dim")
    for name in registry.list_calculators():
        calc = registry.get(name)
        table.add_row(name, calc.title, calc.description)
    console.print(table)


@info.command("calculator")
@click.argument("name")
@click.pass_context
def info_calculator(ctx: click.Context, name: str) -> None:
    """Show the fields, formula and notes of one calculator."""
    console = get_console(ctx)
    calc = get_calculator(ctx, name)

    tree = Tree(f"[bold]{calc.title}[/bold] ({calc.name})")
    fields = tree.add("[cyan]Fields[/cyan]")
    for spec in calc.fields():
        unit = f" ({spec.unit})" if spec.unit else ""
        line = f"{spec.name}{unit}: {spec.label} (default {spec.default})"
        if spec.choices:
            line += f" — one of {', '.join(spec.choices)}"
        fields.add(line)

    tree.add(f"[cyan]Formula[/cyan]: {calc.formula}")
    if calc.notes:
        notes = tree.add("[cyan]Notes[/cyan]")
        for note in calc.notes:
            notes.add(note)
    console.print(tree)


@info.command("units")
@click.pass_context
def info_units(ctx: click.Context) -> None:
    """Show the conversion tables, checked against pint."""
    console = get_console(ctx)
    config = ctx.obj["config"]

    for conv in (config.length_units, config.density_units):
        deviations = table_deviation(conv)
        table = Table(title=f"{conv.quantity.capitalize()} units (base: {conv.base})")
        table.add_column("Unit", style="cyan")
        table.add_column("Multiplier", style="green", justify="right")
        table.add_column(f"Per {conv.base}", justify="right")
        table.add_column("Deviation from pint", style="dim", justify="right")
        for symbol in conv:
            dev = deviations.get(symbol)
            table.add_row(
                symbol,
                f"{conv[symbol]:g}",
                f"{from_si(1.0, symbol, conv):.6g}",
                "—" if dev is None else f"{dev:.1e}",
            )
        console.print(table)


@info.command("convert")
@click.argument("value", type=float)
@click.argument("from_unit")
@click.argument("to_unit")
@click.pass_context
def info_convert(ctx: click.Context, value: float, from_unit: str, to_unit: str) -> None:
    """Convert VALUE between two units with pint.

    Table symbols such as "in" or "lb/ft³" are accepted as well as any pint
    unit expression.
    """
    console = get_console(ctx)
    config = ctx.obj["config"]
    tables = (config.length_units, config.density_units)

    try:
        result = convert(value, pint_unit_for(from_unit, tables), pint_unit_for(to_unit, tables))
    except pint.errors.PintError as e:
        console.print(f"[red]Error:[/red] {e}")
        ctx.exit(1)
    console.print(f"{value:g} {from_unit} = [bold green]{result:.6g}[/bold green] {to_unit}")
