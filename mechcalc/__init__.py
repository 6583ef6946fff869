"""MechCalc — mechanical trade calculators.

HVAC load, duct sizing, CFM, pipe slope and pipe volume calculators built
on a small unit-aware calculation engine.
"""

__app_name__ = "MechCalc"
__version__ = "0.1.0"
