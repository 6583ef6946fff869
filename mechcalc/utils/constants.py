"""Constants used throughout MechCalc.

Imperial trade units are used where the calculators work in them (ft, in.wc,
BTU/h); SI values are noted explicitly.
"""

import math

# Mathematical
PI = math.pi

# Time
MINUTES_PER_HOUR = 60.0

# HVAC load
BTU_PER_TON = 12000.0  # BTU/h per ton of refrigeration
BTU_PER_OCCUPANT = 100.0  # BTU/h
BTU_PER_WINDOW = 1000.0  # BTU/h
BTU_PER_DOOR = 1000.0  # BTU/h

# Duct
FRICTION_RATE_RUN = 100.0  # ft — friction rate is quoted per 100 ft of duct
DIAMETER_CFM_DIVISOR = 10.0  # illustrative sqrt(CFM / 10) sizing rule

# Fluids
RHO_WATER = 997.0  # kg/m³ — water near 25 °C

# Conversion factors (to SI)
M_TO_M = 1.0
CM_TO_M = 1.0e-2
MM_TO_M = 1.0e-3
FT_TO_M = 0.3048
INCH_TO_M = 0.0254
KG_M3_TO_KG_M3 = 1.0
LB_FT3_TO_KG_M3 = 16.018463

# Display sentinel for results that cannot be computed
NOT_AVAILABLE = "N/A"
