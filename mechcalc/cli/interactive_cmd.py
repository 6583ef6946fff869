"""CLI command for an interactive calculator session.

Reads ``field=value`` lines from stdin and re-evaluates either after every
line (live mode) or on ``submit`` (on-submit mode).
"""

from __future__ import annotations

import click

from mechcalc.cli.output import get_calculator, get_console, result_table
from mechcalc.core.config import EVALUATION_MODES
from mechcalc.core.session import CalculatorSession

_HELP = "Enter FIELD=VALUE, or one of: submit, reset, show, fields, quit"


@click.command("interactive")
@click.argument("name")
@click.option(
    "--mode",
    type=click.Choice(EVALUATION_MODES),
    default=None,
    help="Evaluation mode (defaults to the configured mode).",
)
@click.pass_context
def interactive(ctx: click.Context, name: str, mode: str | None) -> None:
    """Drive calculator NAME interactively."""
    console = get_console(ctx)
    calculator = get_calculator(ctx, name)
    options = ctx.obj["config"].options_for(name)
    session = CalculatorSession(
        calculator,
        heading_text=options.heading_text,
        evaluation_mode=mode or options.evaluation_mode,
    )

    console.print(f"\n[bold]{session.heading_text}[/bold] ({session.evaluation_mode})")
    console.print(f"[dim]{_HELP}[/dim]")

    for line in click.get_text_stream("stdin"):
        command = line.strip()
        if not command:
            continue
        if command in ("quit", "exit"):
            break
        if command == "submit":
            console.print(result_table(calculator, session.submit()))
        elif command == "reset":
            session.reset()
            console.print("[dim]Inputs reset to defaults.[/dim]")
        elif command == "show":
            if session.output is None:
                console.print("[dim]No result yet — type 'submit'.[/dim]")
            else:
                console.print(result_table(calculator, session.output))
        elif command == "fields":
            for spec in calculator.fields():
                console.print(f"  {spec.name} = {getattr(session.inputs, spec.name)}")
        elif "=" in command:
            field_name, _, value = command.partition("=")
            try:
                output = session.update(field_name.strip(), value.strip())
            except KeyError as e:
                console.print(f"[red]Error:[/red] {e.args[0]}")
                continue
            if output is not None:
                console.print(result_table(calculator, output))
            else:
                console.print("[dim]Updated — type 'submit' to calculate.[/dim]")
        else:
            console.print(f"[red]Error:[/red] unrecognised command {command!r}. {_HELP}")
