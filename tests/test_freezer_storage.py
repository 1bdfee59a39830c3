"""
Tests for parameter storage and result subscriptions
"""

import pytest
from pydantic import ValidationError

from coolcalc.domain.calculations import calculate_freezer_heat_load
from coolcalc.services.freezer_storage import FreezerStorage


class TestFreezerStorage:

    @pytest.fixture
    def storage(self, room, product, misc):
        return FreezerStorage(room, product, misc)

    def test_initial_result(self, storage, room, product, misc):
        assert storage.result == calculate_freezer_heat_load(room, product, misc)

    def test_update_recomputes_and_notifies(self, storage):
        received = []
        storage.subscribe(received.append)
        before = storage.result.total_transmission_load

        result = storage.update_room(ambient_temp=40)

        assert storage.room.ambient_temp == 40
        assert received == [result]
        assert result.total_transmission_load > before
        assert storage.result is result

    def test_subscribers_called_in_order(self, storage):
        calls = []
        storage.subscribe(lambda r: calls.append("first"))
        storage.subscribe(lambda r: calls.append("second"))

        storage.update_misc(occupancy_count=4)

        assert calls == ["first", "second"]

    def test_unsubscribe(self, storage):
        received = []
        unsubscribe = storage.subscribe(received.append)
        unsubscribe()
        unsubscribe()

        storage.update_product(latent_heat=300)

        assert received == []
        assert storage.product.latent_heat == 300

    def test_misc_defaults_to_empty(self, room, product):
        storage = FreezerStorage(room, product)
        assert storage.misc.occupancy_count is None
        assert storage.result.total_product_load == 0

    def test_update_is_validated(self, storage):
        with pytest.raises(ValidationError):
            storage.update_room(length="not a number")

    def test_unknown_field_is_rejected(self, storage):
        received = []
        storage.subscribe(received.append)

        with pytest.raises(ValidationError):
            storage.update_room(ambent_temp=40)
        with pytest.raises(ValidationError):
            storage.update_misc(lightPowr=100)

        assert storage.room.ambient_temp == 35
        assert received == []

    def test_camel_case_update(self, storage):
        storage.update_misc(lightPower=100)
        assert storage.misc.light_power == 100

    def test_input_records_are_not_mutated(self, storage, room):
        storage.update_room(length=10)
        assert room.length == 5
        assert storage.room.length == 10
