"""Report generation for MechCalc."""
