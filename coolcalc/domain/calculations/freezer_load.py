"""
Freezer Room Heat Load Calculator
Transmission, product (three-stage freezing), air change and internal loads,
summed and converted to refrigeration capacity with a 20% safety margin
"""

import logging
import math
from typing import Dict, Optional, Tuple

from coolcalc.domain.models import (
    HeatLoadResult,
    LengthUnit,
    MiscParameters,
    ProductParameters,
    RoomParameters,
    TempUnit,
)
from coolcalc.domain.calculations.constants import (
    AIR_CONSTANT_CFM,
    ATMOSPHERIC_PRESSURE_PA,
    COIL_TD_K,
    COOLER_AIR_CHANGE_COEFF,
    COOLING_TIME_H,
    CP_DRY_AIR,
    CP_WATER_VAPOUR,
    DEFAULT_EQUIPMENT_HOURS,
    DEFAULT_HEATER_HOURS,
    DEFAULT_INSULATION,
    DEFAULT_LIGHT_HOURS,
    DEFAULT_WORKING_HOURS,
    FREEZER_AIR_CHANGE_COEFF,
    GAS_CONSTANT_DRY_AIR,
    INSULATION_CONDUCTIVITY,
    KW_PER_TR,
    LATENT_HEAT_VAPORISATION,
    M3_TO_FT3,
    M_TO_FT,
    MIN_INSULATION_THICKNESS_MM,
    PERSON_HEAT_W,
    SAFETY_FACTOR,
    SECONDS_PER_DAY,
    W_TO_BTUH,
)

logger = logging.getLogger(__name__)


def calculate_freezer_heat_load(
    room: RoomParameters,
    product: ProductParameters,
    misc: MiscParameters
) -> HeatLoadResult:
    """
    Calculate the refrigeration heat load of a freezer room.

    Inputs are taken as given; nonsensical values (negative dimensions,
    reversed temperatures) give nonsensical but finite numbers.

    Args:
        room: Room envelope and design conditions
        product: Product thermal properties and temperatures
        misc: Internal factors and daily product loading

    Returns:
        HeatLoadResult with every load in kW
    """
    length_m, width_m, height_m = _room_dimensions_m(room)
    ambient_c = _to_celsius(room.ambient_temp, room.temp_unit)
    room_c = _to_celsius(room.room_temp, room.temp_unit)

    # 1. Transmission through walls, ceiling and floor
    transmission = _calculate_transmission_loads(
        length_m, width_m, height_m,
        room.insulation_type, room.wall_insulation_thickness,
        ambient_c - room_c
    )

    # 2. Product freezing process
    mass_kg = _or_zero(misc.capacity_required)
    before, latent, after = _calculate_product_loads(product, mass_kg)
    total_product = before + latent + after

    # 3. Infiltration by air change
    volume_m3 = length_m * width_m * height_m
    air_changes = _air_changes_per_day(volume_m3, room_c)
    air_change_load, air_change_sensible, air_change_latent = _calculate_air_change_load(
        volume_m3, air_changes, ambient_c, room.ambient_rh, room_c, room.room_rh
    )

    # 4. Internal (miscellaneous) loads
    misc_loads = _calculate_misc_loads(misc, product, mass_kg)
    total_misc = sum(misc_loads.values())

    total_load = (
        transmission['total'] + total_product + air_change_load + total_misc
    )
    design_load_kw = total_load * (1 + SAFETY_FACTOR)

    latent_heat = air_change_latent
    sensible_heat = total_load - latent_heat
    air_qty_cfm = _calculate_air_quantity(sensible_heat)

    logger.debug(
        f"Freezer load: transmission={transmission['total']:.3f} kW, "
        f"product={total_product:.3f} kW, air_change={air_change_load:.3f} kW "
        f"(sensible {air_change_sensible:.3f}), misc={total_misc:.3f} kW, "
        f"total={total_load:.3f} kW"
    )

    return HeatLoadResult(
        wall_load=transmission['wall'],
        ceiling_load=transmission['ceiling'],
        floor_load=transmission['floor'],
        total_transmission_load=transmission['total'],
        before_freezing_load=before,
        latent_heat_load=latent,
        after_freezing_load=after,
        total_product_load=total_product,
        respiration_load=misc_loads['respiration'],
        air_change_load=air_change_load,
        equipment_load=misc_loads['equipment'],
        light_load=misc_loads['light'],
        heater_load=misc_loads['heater'],
        occupancy_load=misc_loads['occupancy'],
        total_misc_load=total_misc,
        sensible_heat=sensible_heat,
        latent_heat=latent_heat,
        air_qty_required=air_qty_cfm,
        total_load=total_load,
        design_load_kw=design_load_kw,
        capacity_tr=total_load * (1 + SAFETY_FACTOR) / KW_PER_TR,
        total_load_tr=total_load / KW_PER_TR,
        room_volume_m3=volume_m3,
        air_changes_per_day=air_changes,
    )


def _to_celsius(value: float, unit: str) -> float:
    if unit == TempUnit.FAHRENHEIT:
        return (value - 32.0) * 5.0 / 9.0
    return value


def _room_dimensions_m(room: RoomParameters) -> Tuple[float, float, float]:
    factor = 1.0 / M_TO_FT if room.length_unit == LengthUnit.FOOT else 1.0
    return room.length * factor, room.width * factor, room.height * factor


def _or_zero(value: Optional[float]) -> float:
    return 0.0 if value is None else value


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value


def _u_value(insulation_type: str, thickness_mm: float) -> float:
    """
    Overall heat transfer coefficient of an insulated panel.

    Args:
        insulation_type: Insulation material name (case-insensitive)
        thickness_mm: Panel thickness in mm

    Returns:
        U-value in W/m²·K
    """
    key = (insulation_type or "").strip().upper()
    if key not in INSULATION_CONDUCTIVITY:
        logger.debug(f"Unknown insulation '{insulation_type}', using {DEFAULT_INSULATION}")
        key = DEFAULT_INSULATION
    k = INSULATION_CONDUCTIVITY[key]
    thickness_mm = max(thickness_mm, MIN_INSULATION_THICKNESS_MM)
    return k / (thickness_mm / 1000.0)


def _calculate_transmission_loads(
    length_m: float,
    width_m: float,
    height_m: float,
    insulation_type: str,
    thickness_mm: float,
    delta_t: float
) -> Dict[str, float]:
    """Conduction loads in kW; all surfaces see the ambient-room differential"""
    u = _u_value(insulation_type, thickness_mm)

    wall_area = 2 * (length_m + width_m) * height_m
    ceiling_area = length_m * width_m
    floor_area = length_m * width_m

    wall = u * wall_area * delta_t / 1000.0
    ceiling = u * ceiling_area * delta_t / 1000.0
    floor = u * floor_area * delta_t / 1000.0

    return {
        'wall': wall,
        'ceiling': ceiling,
        'floor': floor,
        'total': wall + ceiling + floor,
    }


def _calculate_product_loads(product: ProductParameters, mass_kg: float) -> Tuple[float, float, float]:
    """
    Three-stage freezing model spread over the cooling time.

    Returns:
        (before_freezing, latent, after_freezing) in kW
    """
    entering = _to_celsius(product.product_entering_temp, product.temp_unit)
    final = _to_celsius(product.product_final_temp, product.temp_unit)
    freezing = _to_celsius(product.freezing_temp, product.temp_unit)

    before_kj = latent_kj = after_kj = 0.0

    if final >= freezing:
        # Chilled only, never crosses the freezing point
        before_kj = mass_kg * product.cp_above_freezing * max(entering - final, 0.0)
    elif entering >= freezing:
        before_kj = mass_kg * product.cp_above_freezing * (entering - freezing)
        latent_kj = mass_kg * product.latent_heat
        after_kj = mass_kg * product.cp_below_freezing * (freezing - final)
    else:
        # Arrives already frozen, below the freezing point
        after_kj = mass_kg * product.cp_below_freezing * max(entering - final, 0.0)

    cooling_seconds = COOLING_TIME_H * 3600.0
    return before_kj / cooling_seconds, latent_kj / cooling_seconds, after_kj / cooling_seconds


def _air_changes_per_day(volume_m3: float, room_c: float) -> float:
    """Air changes per 24 h from the ASHRAE volume correlation"""
    if volume_m3 <= 0:
        return 0.0
    coeff, exponent = FREEZER_AIR_CHANGE_COEFF if room_c < 0 else COOLER_AIR_CHANGE_COEFF
    return coeff * (volume_m3 * M3_TO_FT3) ** exponent


def _saturation_pressure_pa(t_c: float) -> float:
    # Tetens approximation
    return 610.94 * math.exp((17.625 * t_c) / (t_c + 243.04))


def _humidity_ratio(t_c: float, rh_percent: float) -> float:
    rh = max(0.0, min(1.0, rh_percent / 100.0))
    pv = rh * _saturation_pressure_pa(t_c)
    return 0.621945 * pv / max(1.0, ATMOSPHERIC_PRESSURE_PA - pv)


def _air_enthalpy(t_c: float, humidity_ratio: float) -> float:
    """Moist air enthalpy in kJ/kg dry air"""
    return CP_DRY_AIR * t_c + humidity_ratio * (LATENT_HEAT_VAPORISATION + CP_WATER_VAPOUR * t_c)


def _calculate_air_change_load(
    volume_m3: float,
    air_changes_per_day: float,
    ambient_c: float,
    ambient_rh: float,
    room_c: float,
    room_rh: float
) -> Tuple[float, float, float]:
    """
    Heat gained from air exchanged with the ambient.

    Returns:
        (total, sensible, latent) in kW
    """
    if volume_m3 <= 0 or air_changes_per_day <= 0:
        return 0.0, 0.0, 0.0

    air_density = ATMOSPHERIC_PRESSURE_PA / (GAS_CONSTANT_DRY_AIR * (room_c + 273.15))
    mass_flow = volume_m3 * air_changes_per_day / SECONDS_PER_DAY * air_density  # kg/s

    h_ambient = _air_enthalpy(ambient_c, _humidity_ratio(ambient_c, ambient_rh))
    h_room = _air_enthalpy(room_c, _humidity_ratio(room_c, room_rh))

    total = mass_flow * (h_ambient - h_room)
    sensible = mass_flow * CP_DRY_AIR * (ambient_c - room_c)
    return total, sensible, total - sensible


def _calculate_misc_loads(
    misc: MiscParameters,
    product: ProductParameters,
    mass_kg: float
) -> Dict[str, float]:
    """Internal loads in kW, each normalised by its daily usage hours"""
    working_hours = _or_default(misc.working_hours, DEFAULT_WORKING_HOURS)
    equipment_hours = _or_default(misc.equipment_usage_hours, DEFAULT_EQUIPMENT_HOURS)
    light_hours = _or_default(misc.light_hours, DEFAULT_LIGHT_HOURS)
    heater_hours = _or_default(misc.heater_hours, DEFAULT_HEATER_HOURS)

    occupancy_w = _or_zero(misc.occupancy_count) * PERSON_HEAT_W * working_hours / COOLING_TIME_H
    light_w = _or_zero(misc.light_power) * light_hours / COOLING_TIME_H
    equipment_w = _or_zero(misc.fan_motor_rating) * equipment_hours / COOLING_TIME_H
    heater_w = _or_zero(misc.heater_power) * heater_hours / COOLING_TIME_H
    respiration_w = mass_kg * product.respiration_heat

    return {
        'respiration': respiration_w / 1000.0,
        'equipment': equipment_w / 1000.0,
        'light': light_w / 1000.0,
        'heater': heater_w / 1000.0,
        'occupancy': occupancy_w / 1000.0,
    }


def _calculate_air_quantity(sensible_kw: float) -> float:
    """Evaporator air quantity in CFM for the sensible load"""
    coil_td_f = COIL_TD_K * 1.8
    return sensible_kw * 1000.0 * W_TO_BTUH / (AIR_CONSTANT_CFM * coil_td_f)
