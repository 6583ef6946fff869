"""Core calculation modules for MechCalc.

This package contains the calculators and the machinery around them:
- base: Calculator / output base classes, field enumeration and parsing
- cfm: Room airflow (CFM) from volume and air changes per hour
- duct: Friction rate and illustrative duct diameter
- hvac_load: BTU load and tonnage with insulation factors
- pipe_slope: Pipe slope percentage
- pipe_volume: Pipe volume and liquid mass with unit conversion
- config: Engine configuration (tables, headings, evaluation modes)
- registry: Calculator lookup by name
- session: Live / on-submit evaluation state for one calculator form
"""
