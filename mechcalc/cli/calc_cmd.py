"""CLI commands, one per calculator."""

from __future__ import annotations

import click

from mechcalc.cli.output import build_inputs, get_calculator, print_result

_json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print machine-readable JSON instead of a table."
)


def _run(ctx: click.Context, name: str, raw: dict, as_json: bool) -> None:
    calculator = get_calculator(ctx, name)
    inputs = build_inputs(ctx, calculator, raw)
    output = calculator.compute(inputs)
    heading = ctx.obj["config"].options_for(name).heading_text
    print_result(ctx, calculator, inputs, output, as_json=as_json, heading=heading)


@click.command("cfm")
@click.option("--floor-area", type=float, default=0.0, show_default=True, help="Room floor area [ft²].")
@click.option("--ceiling-height", type=float, default=0.0, show_default=True, help="Ceiling height [ft].")
@click.option("--ach", type=float, default=0.0, show_default=True, help="Air changes per hour.")
@_json_option
@click.pass_context
def cfm(ctx: click.Context, floor_area: float, ceiling_height: float, ach: float, as_json: bool) -> None:
    """Required airflow (CFM) for a room."""
    raw = {"floor_area": floor_area, "ceiling_height": ceiling_height, "ach": ach}
    _run(ctx, "cfm", raw, as_json)


@click.command("duct")
@click.option(
    "--static-pressure",
    type=float,
    default=0.5,
    show_default=True,
    help="Available static pressure [in.wc].",
)
@click.option(
    "--length", "tel", type=float, default=150.0, show_default=True, help="Total effective length [ft]."
)
@click.option("--cfm", "system_cfm", type=float, default=800.0, show_default=True, help="System CFM.")
@click.option(
    "--friction-rate",
    type=float,
    default=0.05,
    show_default=True,
    help="Design friction rate [in.wc/100ft].",
)
@_json_option
@click.pass_context
def duct(
    ctx: click.Context,
    static_pressure: float,
    tel: float,
    system_cfm: float,
    friction_rate: float,
    as_json: bool,
) -> None:
    """Friction rate and rough duct diameter."""
    raw = {
        "available_static_pressure": static_pressure,
        "total_effective_length": tel,
        "system_cfm": system_cfm,
        "friction_rate": friction_rate,
    }
    _run(ctx, "duct", raw, as_json)


@click.command("hvac-load")
@click.option("--square-footage", type=float, default=0.0, show_default=True, help="Floor area [ft²].")
@click.option("--ceiling-height", type=float, default=0.0, show_default=True, help="Ceiling height [ft].")
@click.option("--occupants", type=float, default=0.0, show_default=True, help="Number of occupants.")
@click.option("--windows", type=float, default=0.0, show_default=True, help="Number of windows.")
@click.option("--doors", type=float, default=0.0, show_default=True, help="Number of doors.")
@click.option(
    "--insulation",
    type=str,
    default="average",
    show_default=True,
    help="Insulation quality (poor, average, good, excellent).",
)
@_json_option
@click.pass_context
def hvac_load(
    ctx: click.Context,
    square_footage: float,
    ceiling_height: float,
    occupants: float,
    windows: float,
    doors: float,
    insulation: str,
    as_json: bool,
) -> None:
    """Cooling load [BTU/h] and equipment tonnage."""
    raw = {
        "square_footage": square_footage,
        "ceiling_height": ceiling_height,
        "occupants": occupants,
        "windows": windows,
        "doors": doors,
        "insulation_level": insulation,
    }
    _run(ctx, "hvac-load", raw, as_json)


@click.command("pipe-slope")
@click.option("--fall", type=float, default=0.0, show_default=True, help="Pipe fall [ft].")
@click.option("--length", type=float, default=0.0, show_default=True, help="Pipe length [ft].")
@_json_option
@click.pass_context
def pipe_slope(ctx: click.Context, fall: float, length: float, as_json: bool) -> None:
    """Pipe slope as a percentage of its length."""
    _run(ctx, "pipe-slope", {"pipe_fall": fall, "pipe_length": length}, as_json)


@click.command("pipe-volume")
@click.option("--diameter", type=float, default=0.0, show_default=True, help="Pipe inner diameter.")
@click.option("--diameter-unit", type=str, default="in", show_default=True, help="Diameter unit.")
@click.option("--length", type=float, default=0.0, show_default=True, help="Pipe length.")
@click.option("--length-unit", type=str, default="ft", show_default=True, help="Length unit.")
@click.option("--density", type=float, default=997.0, show_default=True, help="Liquid density.")
@click.option("--density-unit", type=str, default="kg/m³", show_default=True, help="Density unit.")
@_json_option
@click.pass_context
def pipe_volume(
    ctx: click.Context,
    diameter: float,
    diameter_unit: str,
    length: float,
    length_unit: str,
    density: float,
    density_unit: str,
    as_json: bool,
) -> None:
    """Pipe volume [m³] and liquid mass [kg]."""
    raw = {
        "diameter": diameter,
        "diameter_unit": diameter_unit,
        "length": length,
        "length_unit": length_unit,
        "density": density,
        "density_unit": density_unit,
    }
    _run(ctx, "pipe-volume", raw, as_json)
