"""Calculation summary report generation for MechCalc.

Produces text and HTML reports for a single calculator evaluation: the
inputs with their units, the formatted results, the formula and the
calculator's explanatory notes.
"""

from __future__ import annotations

import html as html_mod
import logging
from datetime import datetime, timezone
from typing import Any

from mechcalc import __app_name__, __version__
from mechcalc.core.base import Calculator, CalculatorOutput

logger = logging.getLogger(__name__)


def _input_rows(calculator: Calculator, inputs: Any) -> list[tuple[str, str, str]]:
    rows = []
    for spec in calculator.fields():
        value = getattr(inputs, spec.name)
        text = f"{value:g}" if spec.is_numeric else str(value)
        rows.append((spec.label, text, spec.unit))
    return rows


def _output_rows(output: CalculatorOutput) -> list[tuple[str, str, str]]:
    labels = output.labels()
    rows = []
    for key, text in output.display().items():
        label, unit = labels.get(key, (key, ""))
        rows.append((label, text, unit))
    return rows


# --- Plain-text report ---


def generate_text_report(
    calculator: Calculator,
    inputs: Any,
    output: CalculatorOutput | None = None,
) -> str:
    """Generate a plain-text calculation report.

    Args:
        calculator: Calculator that produced the result.
        inputs: Input record.
        output: Output record; computed from *inputs* if omitted.

    Returns:
        Multi-line text report string.
    """
    if output is None:
        output = calculator.compute(inputs)

    lines: list[str] = []
    _hr = "=" * 60

    lines.append(_hr)
    lines.append(f"  {__app_name__} — Calculation Report")
    lines.append(f"  {calculator.title}")
    lines.append(_hr)
    lines.append("")

    lines.append("INPUTS")
    lines.append("-" * 40)
    for label, value, unit in _input_rows(calculator, inputs):
        _add_row(lines, label, value, unit)
    lines.append("")

    lines.append("RESULTS")
    lines.append("-" * 40)
    for label, value, unit in _output_rows(output):
        _add_row(lines, label, value, unit)
    if not output.computable:
        lines.append("  (not computable for these inputs)")
    lines.append("")

    if calculator.formula:
        lines.append("FORMULA")
        lines.append("-" * 40)
        lines.append(f"  {calculator.formula}")
        lines.append("")

    if calculator.notes:
        lines.append("NOTES")
        lines.append("-" * 40)
        for note in calculator.notes:
            lines.append(f"  - {note}")
        lines.append("")

    lines.append(_hr)
    lines.append(f"  Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"  {__app_name__} v{__version__}")
    lines.append(_hr)

    return "\n".join(lines)


def _add_row(lines: list[str], label: str, value: str, unit: str = "") -> None:
    unit_str = f" {unit}" if unit else ""
    lines.append(f"  {label:<32s} {value:>12}{unit_str}")


# --- HTML report ---


def generate_html_report(
    calculator: Calculator,
    inputs: Any,
    output: CalculatorOutput | None = None,
) -> str:
    """Generate an HTML calculation report.

    Produces a self-contained HTML document with inline CSS styling.

    Returns:
        HTML string.
    """
    if output is None:
        output = calculator.compute(inputs)

    sections: list[str] = []
    sections.append(_html_header(calculator))
    sections.append(_html_table("Inputs", _input_rows(calculator, inputs)))
    sections.append(_html_table("Results", _output_rows(output)))
    if not output.computable:
        sections.append('<p class="na">Not computable for these inputs.</p>')

    esc = html_mod.escape
    if calculator.formula:
        sections.append(f"<h2>Formula</h2>\n<pre>{esc(calculator.formula)}</pre>")
    if calculator.notes:
        items = "\n".join(f"<li>{esc(note)}</li>" for note in calculator.notes)
        sections.append(f"<h2>About this calculation</h2>\n<ul>\n{items}\n</ul>")

    sections.append(_html_footer())
    return "\n".join(sections)


def _html_header(calculator: Calculator) -> str:
    title = html_mod.escape(calculator.title)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{__app_name__} — {title}</title>
<style>
body {{ font-family: "Source Sans Pro", -apple-system, "Segoe UI", Roboto, sans-serif;
       max-width: 800px; margin: 2em auto; padding: 0 1em; color: #222; }}
h1 {{ color: #fff; background: #012939; padding: 0.6em; text-align: center; }}
h2 {{ color: #012939; margin-top: 1.5em; }}
table {{ width: 100%; border-collapse: collapse; margin: 0.5em 0 1.5em; }}
th, td {{ text-align: left; padding: 0.4em 0.8em; border-bottom: 1px solid #e2e8f0; }}
th {{ background: #ebf4ff; color: #012939; }}
td:nth-child(2) {{ text-align: right; font-family: "SF Mono", "Fira Code", monospace; }}
td:nth-child(3) {{ color: #718096; font-size: 0.9em; }}
pre {{ background: #f7fafc; padding: 0.8em; white-space: pre-wrap; }}
.na {{ color: #c53030; }}
.footer {{ margin-top: 2em; padding-top: 1em; border-top: 1px solid #e2e8f0;
           color: #a0aec0; font-size: 0.85em; }}
</style>
</head>
<body>
<h1>{title}</h1>
"""


def _html_table(title: str, rows: list[tuple[str, str, str]]) -> str:
    esc = html_mod.escape
    lines = [f"<h2>{esc(title)}</h2>", "<table>"]
    lines.append("<tr><th>Parameter</th><th>Value</th><th>Unit</th></tr>")
    for label, value, unit in rows:
        lines.append(f"<tr><td>{esc(label)}</td><td>{esc(value)}</td><td>{esc(unit)}</td></tr>")
    lines.append("</table>")
    return "\n".join(lines)


def _html_footer() -> str:
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    return f"""<div class="footer">
Generated: {ts} &middot; {__app_name__} v{html_mod.escape(__version__)}
</div>
</body>
</html>"""


def save_text_report(
    calculator: Calculator, inputs: Any, filepath: str, output: CalculatorOutput | None = None
) -> None:
    """Generate and save a plain-text report to a file."""
    report = generate_text_report(calculator, inputs, output)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(report)
    logger.info("Saved text report to %s", filepath)


def save_html_report(
    calculator: Calculator, inputs: Any, filepath: str, output: CalculatorOutput | None = None
) -> None:
    """Generate and save an HTML report to a file."""
    report = generate_html_report(calculator, inputs, output)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(report)
    logger.info("Saved HTML report to %s", filepath)
