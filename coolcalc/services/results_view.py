"""
Grouped result cards for the freezer results screen
"""

from dataclasses import dataclass
from typing import List, Tuple

from coolcalc.domain.calculations.constants import KW_PER_TR
from coolcalc.domain.models import HeatLoadResult


@dataclass(frozen=True)
class ResultCard:
    title: str
    value: float
    unit: str
    is_highlighted: bool = False

    @property
    def display_value(self) -> str:
        return f"{self.value:.1f} {self.unit}"


@dataclass(frozen=True)
class ResultGroup:
    title: str
    cards: Tuple[ResultCard, ...]


def build_results_view(result: HeatLoadResult) -> List[ResultGroup]:
    """Arrange a heat load result into the five groups shown on screen"""
    return [
        ResultGroup("Main Results", (
            ResultCard("Total Load (with 20% Safety)", result.capacity_tr * KW_PER_TR, "kW", True),
            ResultCard("Refrigeration Capacity (with 20% Safety)", result.capacity_tr, "TR", True),
            ResultCard("Base Load (without safety)", result.load_in_kw, "kW", True),
            ResultCard("Base Refrigeration Capacity", result.total_load_tr, "TR", True),
        )),
        ResultGroup("Transmission Loads", (
            ResultCard("Wall Load", result.wall_load, "kW"),
            ResultCard("Ceiling Load", result.ceiling_load, "kW"),
            ResultCard("Floor Load", result.floor_load, "kW"),
            ResultCard("Total Transmission Load", result.total_transmission_load, "kW"),
        )),
        ResultGroup("Product Loads (Freezing Process)", (
            ResultCard("Before Freezing Load", result.before_freezing_load, "kW"),
            ResultCard("Latent Heat Load (Freezing)", result.latent_heat_load, "kW"),
            ResultCard("After Freezing Load", result.after_freezing_load, "kW"),
            ResultCard("Total Product Load", result.total_product_load, "kW"),
        )),
        ResultGroup("Other Loads", (
            ResultCard("Respiration Load", result.respiration_load, "kW"),
            ResultCard("Air Change Load", result.air_change_load, "kW"),
            ResultCard("Equipment Load", result.equipment_load, "kW"),
            ResultCard("Lighting Load", result.light_load, "kW"),
            ResultCard("Heater Load", result.heater_load, "kW"),
            ResultCard("Occupancy Load", result.occupancy_load, "kW"),
            ResultCard("Total Miscellaneous Load", result.total_misc_load, "kW"),
        )),
        ResultGroup("Heat Distribution", (
            ResultCard("Sensible Heat", result.sensible_heat, "kW"),
            ResultCard("Latent Heat", result.latent_heat, "kW"),
            ResultCard("Air Quantity Required", result.air_qty_required, "CFM"),
        )),
    ]


def render_results_text(groups: List[ResultGroup], width: int = 60) -> str:
    """Plain-text rendering; highlighted cards are marked with '*'"""
    lines: List[str] = []
    for group in groups:
        lines.append(group.title.upper())
        lines.append("-" * width)
        for card in group.cards:
            marker = "*" if card.is_highlighted else " "
            value = card.display_value
            label_width = max(width - len(value) - 2, 1)
            lines.append(f"{marker} {card.title:<{label_width}}{value}")
        lines.append("")
    return "\n".join(lines).rstrip("\n") + "\n"
