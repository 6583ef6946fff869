"""MechCalc command-line interface.

Entry point for the ``mechcalc`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from mechcalc import __app_name__, __version__
from mechcalc.core.config import default_config, load_config_json
from mechcalc.core.registry import build_registry

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Engine configuration file (JSON).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """MechCalc — HVAC and plumbing field calculators.

    CFM, duct sizing, HVAC load, pipe slope and pipe volume.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    try:
        config = load_config_json(config_path) if config_path else default_config()
    except (ValueError, TypeError) as e:
        console.print(f"[red]Error:[/red] invalid config {config_path}: {e}")
        raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["config"] = config
    ctx.obj["registry"] = build_registry(config)


# Import and register sub-commands
from mechcalc.cli.calc_cmd import cfm, duct, hvac_load, pipe_slope, pipe_volume  # noqa: E402
from mechcalc.cli.info_cmd import info  # noqa: E402
from mechcalc.cli.interactive_cmd import interactive  # noqa: E402
from mechcalc.cli.report_cmd import report  # noqa: E402
from mechcalc.cli.sweep_cmd import sweep  # noqa: E402

cli.add_command(cfm)
cli.add_command(duct)
cli.add_command(hvac_load)
cli.add_command(pipe_slope)
cli.add_command(pipe_volume)
cli.add_command(info)
cli.add_command(sweep)
cli.add_command(report)
cli.add_command(interactive)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
