"""
Design constants for freezer heat load calculations
Values follow ASHRAE Handbook - Refrigeration practice for cold rooms
"""

# Aggregate
SAFETY_FACTOR = 0.20
KW_PER_TR = 3.517
COOLING_TIME_H = 24.0
SECONDS_PER_DAY = 86400.0

# Insulation thermal conductivity, W/m·K
INSULATION_CONDUCTIVITY = {
    "PUF": 0.023,       # polyurethane foam, 40 kg/m³
    "PIR": 0.022,
    "XPS": 0.029,
    "EPS": 0.036,
    "ROCKWOOL": 0.040,
}
DEFAULT_INSULATION = "PUF"
MIN_INSULATION_THICKNESS_MM = 1.0

# Air change correlations, changes per 24 h vs room volume in ft³
FREEZER_AIR_CHANGE_COEFF = (596.21, -0.548)
COOLER_AIR_CHANGE_COEFF = (817.5, -0.5551)

# Psychrometrics
ATMOSPHERIC_PRESSURE_PA = 101325.0
GAS_CONSTANT_DRY_AIR = 287.055  # J/kg·K
CP_DRY_AIR = 1.006              # kJ/kg·K
CP_WATER_VAPOUR = 1.86          # kJ/kg·K
LATENT_HEAT_VAPORISATION = 2501.0  # kJ/kg at 0 °C

# Internal loads
PERSON_HEAT_W = 390.0
DEFAULT_WORKING_HOURS = 5.0
DEFAULT_EQUIPMENT_HOURS = 20.0
DEFAULT_LIGHT_HOURS = 6.0
DEFAULT_HEATER_HOURS = 0.0

# Air handling
AIR_CONSTANT_CFM = 1.08  # BTU/h per CFM·°F, standard air
COIL_TD_K = 6.0
W_TO_BTUH = 3.412142

# Unit conversion
M_TO_FT = 3.28084
M3_TO_FT3 = M_TO_FT ** 3
