"""
Freezer report builder
Turns the current room/product/misc parameters and their heat load result
into the ReportDocument handed to the PDF exporter
"""

from dataclasses import dataclass
from typing import Optional

from coolcalc.domain.calculations.constants import COOLING_TIME_H, SAFETY_FACTOR
from coolcalc.domain.models import HeatLoadResult, MiscParameters, ProductParameters, RoomParameters
from coolcalc.domain.report_models import ReportDocument, ReportItem, ReportSection

REPORT_TITLE = "Freezer Room Heat Load Summary"
REPORT_SUBTITLE = "Key calculation results for freezer room refrigeration system"

# Fixed entry of the heat load sheet that has no input field
INSULATION_DENSITY = "40 kg/m³"


def _fmt(value: float) -> str:
    """Render a number the way the input screens show it"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class MiscDisplayDefaults:
    """Default-if-absent policy for optional internal factors on the sheet"""
    occupancy_count: str = "0"
    fan_motor_rating: str = "0"
    light_power: str = "0"
    heater_power: str = "0"
    equipment_usage_hours: str = "20"
    capacity_required: str = "0"
    working_hours: str = "5"
    light_hours: str = "6"
    heater_hours: str = "0"

    def apply(self, misc: MiscParameters) -> "MiscDisplayValues":
        def pick(name: str) -> str:
            value = getattr(misc, name)
            return getattr(self, name) if value is None else _fmt(value)

        return MiscDisplayValues(
            occupancy_count=pick("occupancy_count"),
            fan_motor_rating=pick("fan_motor_rating"),
            light_power=pick("light_power"),
            heater_power=pick("heater_power"),
            equipment_usage_hours=pick("equipment_usage_hours"),
            capacity_required=pick("capacity_required"),
            working_hours=pick("working_hours"),
            light_hours=pick("light_hours"),
            heater_hours=pick("heater_hours"),
        )


@dataclass(frozen=True)
class MiscDisplayValues:
    occupancy_count: str
    fan_motor_rating: str
    light_power: str
    heater_power: str
    equipment_usage_hours: str
    capacity_required: str
    working_hours: str
    light_hours: str
    heater_hours: str


def build_freezer_report(
    room: RoomParameters,
    product: ProductParameters,
    misc: MiscParameters,
    result: HeatLoadResult,
    defaults: Optional[MiscDisplayDefaults] = None
) -> ReportDocument:
    """
    Build the heat load sheet document for a freezer room.

    Args:
        room: Room parameters
        product: Product parameters
        misc: Internal factors (absent values filled by ``defaults``)
        result: Heat load result computed from the three records
        defaults: Display policy for absent internal factors

    Returns:
        ReportDocument with four input sections and one result section
    """
    shown = (defaults or MiscDisplayDefaults()).apply(misc)
    room_temp_unit = f"°{room.temp_unit}"
    product_temp_unit = f"°{product.temp_unit}"
    volume = room.length * room.width * room.height
    volume_unit = "m³" if room.length_unit == "m" else "ft³"

    ambient = ReportSection("Ambient Conditions", (
        ReportItem("Ambient Temperature", _fmt(room.ambient_temp), room_temp_unit),
        ReportItem("Ambient RH", _fmt(room.ambient_rh), "%"),
    ))

    room_definition = ReportSection("Room Definition", (
        ReportItem("Room Length", _fmt(room.length), room.length_unit),
        ReportItem("Room Width", _fmt(room.width), room.length_unit),
        ReportItem("Room Height", _fmt(room.height), room.length_unit),
        ReportItem("Insulation Thickness", _fmt(room.wall_insulation_thickness), "mm"),
        ReportItem("Room Internal Volume", f"{volume:.2f}", volume_unit),
        ReportItem("Cold Room Position", "Inside", ""),
        ReportItem("Room Temperature", _fmt(room.room_temp), room_temp_unit),
        ReportItem("Insulation", room.insulation_type, INSULATION_DENSITY),
    ))

    product_definition = ReportSection("Product Definition", (
        ReportItem("Product", "Product", ""),
        ReportItem("Product Quantity", shown.capacity_required, "kg"),
        ReportItem("Daily Product Loading", shown.capacity_required, "kg"),
        ReportItem("Product Incoming Temp", _fmt(product.product_entering_temp), product_temp_unit),
        ReportItem("Product Final Temp", _fmt(product.product_final_temp), product_temp_unit),
        ReportItem("Specific Heat Above Freezing", _fmt(product.cp_above_freezing), "kJ/kg °C"),
        ReportItem("Specific Heat Below Freezing", _fmt(product.cp_below_freezing), "kJ/kg °C"),
        ReportItem("Freezing Temp", _fmt(product.freezing_temp), product_temp_unit),
        ReportItem("Latent Heat of Freezing", _fmt(product.latent_heat), "kJ/kg"),
        ReportItem("Respiration Heat", f"{product.respiration_heat:.2f}", "W/kg * 24 h"),
    ))

    internal_factors = ReportSection("Internal Factors", (
        ReportItem("No. of Workers", shown.occupancy_count, ""),
        ReportItem("Rated Power of motors", shown.fan_motor_rating, "W"),
        ReportItem("Lightings", shown.light_power, "W"),
        ReportItem("Heater Coils", shown.heater_power, "W"),
        ReportItem("Working Time", shown.working_hours, "h"),
        ReportItem("Operating Time 1", shown.equipment_usage_hours, "h"),
        ReportItem("Operating Time 2", shown.light_hours, "h"),
        ReportItem("Operating Time 3", shown.heater_hours, "h"),
    ))

    results = ReportSection("Heat Load Results", (
        ReportItem("Transmission Load in 24h", f"{result.total_transmission_load:.2f}", "kW", True),
        ReportItem("Product Load in 24h", f"{result.total_product_load:.2f}", "kW", True),
        ReportItem("Infiltration Load in 24h", f"{result.air_change_load:.2f}", "kW", True),
        ReportItem("Internal Load in 24h", f"{result.total_misc_load:.2f}", "kW", True),
        ReportItem("Safety Factor", f"{SAFETY_FACTOR * 100:.0f}", "%"),
        ReportItem("Cooling Time", f"{COOLING_TIME_H:.2f}", "h"),
        ReportItem("Equipment Operating Time", shown.equipment_usage_hours, "h"),
        ReportItem("Hourly Equipment Load", f"{result.load_in_kw:.2f}", "kW", True),
    ))

    return ReportDocument(
        title=REPORT_TITLE,
        subtitle=REPORT_SUBTITLE,
        inputs=(ambient, room_definition, product_definition, internal_factors),
        sections=(results,),
    )
