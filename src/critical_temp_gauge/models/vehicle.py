"""Active vehicle - the ordered part list handed to the monitor each tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from critical_temp_gauge.models.part import Part


@dataclass
class Vehicle:
    """
    A vehicle and its parts in enumeration order.

    The order matters: it breaks ties when two parts are equally critical.
    """

    vehicle_id: int
    name: str
    parts: List[Part] = field(default_factory=list)
