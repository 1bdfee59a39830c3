"""
Input and result models for freezer heat load calculations
Parameters are pydantic models (type coercion only, no range checks),
results are immutable dataclasses recomputed on every input change
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TempUnit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class LengthUnit(str, Enum):
    METRE = "m"
    FOOT = "ft"


class _Parameters(BaseModel):
    # camelCase keys from the mobile app payloads are accepted too
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        frozen=True,
        extra="forbid",
    )


class RoomParameters(_Parameters):
    """Freezer room envelope and design conditions"""
    length: float = Field(..., description="Room length")
    width: float = Field(..., description="Room width")
    height: float = Field(..., description="Room height")
    length_unit: LengthUnit = Field(LengthUnit.METRE, description="Unit of length/width/height")
    wall_insulation_thickness: float = Field(150.0, description="Insulation panel thickness in mm")
    insulation_type: str = Field("PUF", description="Insulation material, e.g. PUF, EPS")
    ambient_temp: float = Field(..., description="Ambient design temperature")
    room_temp: float = Field(..., description="Room design temperature")
    temp_unit: TempUnit = Field(TempUnit.CELSIUS, description="Unit of ambient/room temperature")
    ambient_rh: float = Field(60.0, description="Ambient relative humidity in %")
    room_rh: float = Field(90.0, description="Room relative humidity in %")


class ProductParameters(_Parameters):
    """Thermal properties of the product being frozen"""
    product_entering_temp: float = Field(..., description="Product incoming temperature")
    product_final_temp: float = Field(..., description="Product final temperature")
    freezing_temp: float = Field(..., description="Product freezing point")
    cp_above_freezing: float = Field(..., description="Specific heat above freezing, kJ/kg K")
    cp_below_freezing: float = Field(..., description="Specific heat below freezing, kJ/kg K")
    latent_heat: float = Field(..., description="Latent heat of freezing, kJ/kg")
    temp_unit: TempUnit = Field(TempUnit.CELSIUS, description="Unit of product temperatures")
    respiration_heat: float = Field(0.0, description="Respiration heat, W/kg")


class MiscParameters(_Parameters):
    """Internal factors; every field is optional"""
    occupancy_count: Optional[float] = Field(None, description="Number of workers")
    fan_motor_rating: Optional[float] = Field(None, description="Rated power of motors, W")
    light_power: Optional[float] = Field(None, description="Lighting power, W")
    equipment_usage_hours: Optional[float] = Field(None, description="Equipment operating hours per day")
    capacity_required: Optional[float] = Field(None, description="Daily product loading, kg")
    heater_power: Optional[float] = Field(None, description="Heater coil power, W")
    working_hours: Optional[float] = Field(None, description="Hours workers spend in the room per day")
    light_hours: Optional[float] = Field(None, description="Lighting hours per day")
    heater_hours: Optional[float] = Field(None, description="Heater operating hours per day")


@dataclass(frozen=True)
class HeatLoadResult:
    """Freezer heat load results, all loads in kW"""
    # Transmission
    wall_load: float
    ceiling_load: float
    floor_load: float
    total_transmission_load: float

    # Product (freezing process)
    before_freezing_load: float
    latent_heat_load: float
    after_freezing_load: float
    total_product_load: float

    # Other loads
    respiration_load: float
    air_change_load: float
    equipment_load: float
    light_load: float
    heater_load: float
    occupancy_load: float
    total_misc_load: float

    # Heat distribution
    sensible_heat: float
    latent_heat: float
    air_qty_required: float  # CFM

    # Totals
    total_load: float
    design_load_kw: float
    capacity_tr: float
    total_load_tr: float

    # Intermediates
    room_volume_m3: float = 0.0
    air_changes_per_day: float = 0.0

    @property
    def load_in_kw(self) -> float:
        """Base load without safety factor"""
        return self.total_load

    def to_json(self) -> Dict[str, Any]:
        data = {key: round(value, 3) for key, value in asdict(self).items()}
        data["air_qty_required"] = round(self.air_qty_required)
        data["capacity_tr"] = round(self.capacity_tr, 2)
        data["total_load_tr"] = round(self.total_load_tr, 2)
        return data
