"""
Pytest configuration and fixtures
"""
import pytest

from coolcalc.domain.models import MiscParameters, ProductParameters, RoomParameters
from coolcalc.domain.report_models import ReportDocument, ReportItem, ReportSection


@pytest.fixture
def room():
    """5 x 4 x 3 m freezer at -18 °C in a 35 °C ambient, 150 mm PUF"""
    return RoomParameters(
        length=5,
        width=4,
        height=3,
        wall_insulation_thickness=150,
        insulation_type="PUF",
        ambient_temp=35,
        room_temp=-18,
        temp_unit="C",
    )


@pytest.fixture
def product():
    """Meat-like product frozen from 25 °C to -18 °C"""
    return ProductParameters(
        product_entering_temp=25,
        product_final_temp=-18,
        freezing_temp=-2,
        cp_above_freezing=3.5,
        cp_below_freezing=1.8,
        latent_heat=250,
        temp_unit="C",
    )


@pytest.fixture
def misc():
    return MiscParameters(
        occupancy_count=2,
        fan_motor_rating=500,
        light_power=300,
        equipment_usage_hours=20,
        capacity_required=1000,
    )


@pytest.fixture
def sample_document():
    return ReportDocument(
        title="Freezer Room Heat Load Summary",
        subtitle="Key calculation results",
        inputs=(
            ReportSection("Room Definition", (
                ReportItem("Room Length", "5", "m"),
                ReportItem("Room Width", "4", "m"),
            )),
        ),
        sections=(
            ReportSection("Heat Load Results", (
                ReportItem("Safety Factor", "20", "%"),
                ReportItem("Transmission Load in 24h", "0.76", "kW", True),
                ReportItem("Hourly Equipment Load", "7.10", "kW", True),
            )),
        ),
    )


class RecordingNotifier:
    def __init__(self):
        self.alerts = []

    def alert(self, title, message):
        self.alerts.append((title, message))


class FakePrinter:
    def __init__(self, path="/tmp/heat_load_test.pdf", error=None):
        self.path = path
        self.error = error
        self.html = []

    async def print_to_file(self, html):
        self.html.append(html)
        if self.error:
            raise self.error
        return self.path


class FakeSharer:
    def __init__(self, available=True, error=None):
        self.available = available
        self.error = error
        self.calls = []

    async def is_available(self):
        return self.available

    async def share(self, path, mime_type, dialog_title, uti=None):
        if self.error:
            raise self.error
        self.calls.append((path, mime_type, dialog_title, uti))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def printer():
    return FakePrinter()


@pytest.fixture
def sharer():
    return FakeSharer()
