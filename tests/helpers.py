"""Builders shared by the test modules."""

from __future__ import annotations

import itertools
from typing import Iterable, Optional, Sequence

from critical_temp_gauge.models.part import Part, StaticThermalProbe
from critical_temp_gauge.models.vehicle import Vehicle

_part_ids = itertools.count(1)


def make_part(
    name: str,
    temperature: Optional[float] = None,
    limit: float = 1000.0,
    modules: Iterable[str] = (),
) -> Part:
    """Build a part; ``temperature=None`` gives a part without a thermal probe."""

    probe = None
    if temperature is not None:
        probe = StaticThermalProbe(temperature=temperature, temperature_limit=limit)
    return Part(
        name=name,
        part_id=next(_part_ids),
        modules=frozenset(modules),
        thermal=probe,
    )


def set_index(part: Part, index: float) -> None:
    """Set a part's temperature so that its criticality index equals ``index``."""

    probe = part.thermal
    assert isinstance(probe, StaticThermalProbe)
    probe.temperature = index * probe.temperature_limit


def make_vehicle(parts: Sequence[Part], vehicle_id: int = 1) -> Vehicle:
    return Vehicle(vehicle_id=vehicle_id, name=f"Vessel {vehicle_id}", parts=list(parts))


class SignalRecorder:
    """Slot that stores every value it receives."""

    def __init__(self) -> None:
        self.values: list = []

    def __call__(self, *args) -> None:
        self.values.append(args[0] if len(args) == 1 else args)
