"""
Tests for the freezer heat load sheet document
"""

import pytest

from coolcalc.domain.calculations import calculate_freezer_heat_load
from coolcalc.domain.models import MiscParameters
from coolcalc.services.report_builder import (
    REPORT_SUBTITLE,
    REPORT_TITLE,
    MiscDisplayDefaults,
    build_freezer_report,
)


def _items(section):
    return {item.label: item for item in section.items}


class TestBuildFreezerReport:

    @pytest.fixture
    def document(self, room, product, misc):
        result = calculate_freezer_heat_load(room, product, misc)
        return build_freezer_report(room, product, misc, result)

    def test_titles_and_section_order(self, document):
        assert document.title == REPORT_TITLE
        assert document.subtitle == REPORT_SUBTITLE
        assert [s.title for s in document.inputs] == [
            "Ambient Conditions", "Room Definition", "Product Definition", "Internal Factors"
        ]
        assert [s.title for s in document.sections] == ["Heat Load Results"]

    def test_room_definition_values(self, document):
        rows = _items(document.inputs[1])
        assert rows["Room Length"].value == "5"
        assert rows["Room Length"].unit == "m"
        assert rows["Room Internal Volume"].value == "60.00"
        assert rows["Room Internal Volume"].unit == "m³"
        assert rows["Room Temperature"].value == "-18"
        assert rows["Room Temperature"].unit == "°C"
        assert rows["Insulation"].value == "PUF"

    def test_result_values_are_in_kw(self, room, product, misc, document):
        result = calculate_freezer_heat_load(room, product, misc)
        rows = _items(document.sections[0])

        assert rows["Transmission Load in 24h"].value == f"{result.total_transmission_load:.2f}"
        assert rows["Product Load in 24h"].value == f"{result.total_product_load:.2f}"
        assert rows["Infiltration Load in 24h"].value == f"{result.air_change_load:.2f}"
        assert rows["Internal Load in 24h"].value == f"{result.total_misc_load:.2f}"
        assert rows["Hourly Equipment Load"].value == f"{result.load_in_kw:.2f}"
        assert rows["Safety Factor"].value == "20"
        assert rows["Cooling Time"].value == "24.00"

    def test_highlighted_rows(self, document):
        highlighted = [item.label for item in document.sections[0].items if item.is_highlighted]
        assert highlighted == [
            "Transmission Load in 24h",
            "Product Load in 24h",
            "Infiltration Load in 24h",
            "Internal Load in 24h",
            "Hourly Equipment Load",
        ]
        assert not any(item.is_highlighted for s in document.inputs for item in s.items)

    def test_absent_misc_values_use_display_defaults(self, room, product):
        misc = MiscParameters()
        result = calculate_freezer_heat_load(room, product, misc)
        document = build_freezer_report(room, product, misc, result)

        internal = _items(document.inputs[3])
        assert internal["No. of Workers"].value == "0"
        assert internal["Rated Power of motors"].value == "0"
        assert internal["Lightings"].value == "0"
        assert internal["Operating Time 1"].value == "20"
        assert internal["Working Time"].value == "5"
        assert _items(document.inputs[2])["Product Quantity"].value == "0"
        assert _items(document.sections[0])["Equipment Operating Time"].value == "20"

    def test_custom_display_defaults(self, room, product):
        misc = MiscParameters()
        result = calculate_freezer_heat_load(room, product, misc)
        document = build_freezer_report(
            room, product, misc, result, defaults=MiscDisplayDefaults(occupancy_count="-")
        )
        assert _items(document.inputs[3])["No. of Workers"].value == "-"

    def test_present_misc_values_shown(self, document):
        internal = _items(document.inputs[3])
        assert internal["No. of Workers"].value == "2"
        assert internal["Rated Power of motors"].value == "500"
        assert internal["Lightings"].value == "300"
        assert _items(document.inputs[2])["Daily Product Loading"].value == "1000"
