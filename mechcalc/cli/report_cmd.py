"""CLI command for calculation report generation."""

from __future__ import annotations

from pathlib import Path

import click

from mechcalc.cli.output import build_inputs, get_calculator, get_console, parse_assignments
from mechcalc.reports.summary import (
    generate_text_report,
    save_html_report,
    save_text_report,
)


@click.command("report")
@click.argument("name")
@click.option(
    "--set", "assignments", multiple=True, metavar="FIELD=VALUE", help="Input value."
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "html", "both"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Report format.",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Output file path (auto-generated if not specified).",
)
@click.pass_context
def report(
    ctx: click.Context,
    name: str,
    assignments: tuple[str, ...],
    fmt: str,
    output: str | None,
) -> None:
    """Generate a calculation report for calculator NAME."""
    console = get_console(ctx)
    calculator = get_calculator(ctx, name)
    inputs = build_inputs(ctx, calculator, parse_assignments(assignments))
    result = calculator.compute(inputs)

    if fmt == "text" or fmt == "both":
        if output or fmt == "both":
            out_txt = output or f"{calculator.name}-report.txt"
            if fmt == "both" and output:
                out_txt = str(Path(output).with_suffix(".txt"))
            save_text_report(calculator, inputs, out_txt, result)
            console.print(f"[green]Text report saved:[/green] {out_txt}")
        else:
            # Print to console only
            console.print(f"\n{generate_text_report(calculator, inputs, result)}")

    if fmt == "html" or fmt == "both":
        out_html = output or f"{calculator.name}-report.html"
        if fmt == "both" and output:
            out_html = str(Path(output).with_suffix(".html"))
        save_html_report(calculator, inputs, out_html, result)
        console.print(f"[green]HTML report saved:[/green] {out_html}")
