"""MechCalc command-line interface package.

Supports ``python -m mechcalc.cli`` as an alternative to the ``mechcalc`` entry point.
"""

from mechcalc.cli.main import cli, main

__all__ = ["cli", "main"]
