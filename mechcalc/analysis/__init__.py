"""Analysis helpers for MechCalc.

Parameter sweeps over a single calculator input.
"""
