"""
Freezer storage - current room, product and misc parameters
Recomputes the heat load on every change and notifies subscribers
"""

import logging
from typing import Any, Callable, List, Optional

from coolcalc.domain.calculations import calculate_freezer_heat_load
from coolcalc.domain.models import HeatLoadResult, MiscParameters, ProductParameters, RoomParameters
from coolcalc.utils.logging_utils import log_with_context

logger = logging.getLogger(__name__)

Subscriber = Callable[[HeatLoadResult], None]


class FreezerStorage:
    """
    Holds the parameters being edited and the result derived from them.

    Subscribers are called synchronously, in subscription order, with the
    freshly computed result after each update.
    """

    def __init__(
        self,
        room: RoomParameters,
        product: ProductParameters,
        misc: Optional[MiscParameters] = None
    ):
        self._room = room
        self._product = product
        self._misc = misc if misc is not None else MiscParameters()
        self._subscribers: List[Subscriber] = []
        self._result: Optional[HeatLoadResult] = None

    @property
    def room(self) -> RoomParameters:
        return self._room

    @property
    def product(self) -> ProductParameters:
        return self._product

    @property
    def misc(self) -> MiscParameters:
        return self._misc

    @property
    def result(self) -> HeatLoadResult:
        if self._result is None:
            self._result = calculate_freezer_heat_load(self._room, self._product, self._misc)
        return self._result

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that removes it"""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def update_room(self, **changes: Any) -> HeatLoadResult:
        self._room = _with_changes(self._room, changes)
        return self._recompute("room", changes)

    def update_product(self, **changes: Any) -> HeatLoadResult:
        self._product = _with_changes(self._product, changes)
        return self._recompute("product", changes)

    def update_misc(self, **changes: Any) -> HeatLoadResult:
        self._misc = _with_changes(self._misc, changes)
        return self._recompute("misc", changes)

    def _recompute(self, source: str, changes: dict) -> HeatLoadResult:
        self._result = calculate_freezer_heat_load(self._room, self._product, self._misc)
        log_with_context("debug", f"Recomputed heat load after {source} update", {
            'source': source,
            'changed_fields': sorted(changes),
            'total_load_kw': self._result.total_load,
            'subscribers': len(self._subscribers),
        }, logger)
        for callback in list(self._subscribers):
            callback(self._result)
        return self._result


def _with_changes(model, changes: dict):
    """
    Validated copy of a frozen parameter model.

    camelCase aliases map onto their fields; unknown names fail validation.
    """
    model_type = type(model)
    field_names = {
        (field.alias or name): name for name, field in model_type.model_fields.items()
    }
    data = model.model_dump()
    for key, value in changes.items():
        data[field_names.get(key, key)] = value
    return model_type.model_validate(data)
