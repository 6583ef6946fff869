"""CLI command for one-at-a-time parameter sweeps."""

from __future__ import annotations

import click
from rich.table import Table

from mechcalc.analysis.sweep import linspace_values, sweep as run_sweep
from mechcalc.cli.output import build_inputs, get_calculator, get_console, parse_assignments


@click.command("sweep")
@click.argument("name")
@click.option("--field", "field_name", required=True, help="Numeric input field to vary.")
@click.option("--start", type=float, required=True, help="First value.")
@click.option("--stop", type=float, required=True, help="Last value.")
@click.option("--steps", type=int, default=11, show_default=True, help="Number of points.")
@click.option(
    "--set", "assignments", multiple=True, metavar="FIELD=VALUE", help="Fixed input value."
)
@click.pass_context
def sweep(
    ctx: click.Context,
    name: str,
    field_name: str,
    start: float,
    stop: float,
    steps: int,
    assignments: tuple[str, ...],
) -> None:
    """Evaluate calculator NAME while one input steps from START to STOP."""
    console = get_console(ctx)
    calculator = get_calculator(ctx, name)
    base = build_inputs(ctx, calculator, parse_assignments(assignments))

    try:
        result = run_sweep(calculator, base, field_name, linspace_values(start, stop, steps))
    except (KeyError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e.args[0]}")
        raise SystemExit(1)

    spec = calculator.field_spec(field_name)
    labels = calculator.output_type.labels()
    table = Table(title=f"{calculator.title} — sweep of {spec.label}")
    unit = f" ({spec.unit})" if spec.unit else ""
    table.add_column(f"{spec.name}{unit}", style="cyan", justify="right")
    keys = list(calculator.compute(base).display().keys())
    for key in keys:
        label, out_unit = labels.get(key, (key, ""))
        table.add_column(f"{label} ({out_unit})" if out_unit else label, style="green", justify="right")

    for value, output in result.rows():
        shown = output.display()
        table.add_row(f"{value:g}", *(shown[k] for k in keys))

    console.print(table)
    if result.n_not_computable:
        console.print(f"[yellow]{result.n_not_computable} point(s) not computable[/yellow]")
