"""Vehicle parts, their thermal readings, and derived criticality records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Protocol


@dataclass(frozen=True)
class ThermalReading:
    """Current temperature and failure limit of a part (same unit, Kelvin)."""

    temperature: float
    temperature_limit: float

    @property
    def is_applicable(self) -> bool:
        """True if both values are finite and the limit is positive."""
        return (
            math.isfinite(self.temperature)
            and math.isfinite(self.temperature_limit)
            and self.temperature_limit > 0
        )


class ThermalProbe(Protocol):
    """Capability of a part that exposes thermal data."""

    def read_thermal(self) -> Optional[ThermalReading]:
        """Return the current reading, or None if nothing can be measured."""
        ...


@dataclass
class StaticThermalProbe:
    """Thermal probe holding plain values, updated by the data source."""

    temperature: float
    temperature_limit: float

    def read_thermal(self) -> Optional[ThermalReading]:
        return ThermalReading(self.temperature, self.temperature_limit)


@dataclass(eq=False)
class Part:
    """
    A physical part of the monitored vehicle.

    Parts compare by identity: the same name may appear several times on a
    vehicle (e.g., symmetric radiators) and each is a separate part.
    """

    name: str
    part_id: int
    modules: FrozenSet[str] = field(default_factory=frozenset)
    thermal: Optional[ThermalProbe] = None
    highlighted: bool = False  # Written only by PartHighlighter

    def has_any_module(self, module_names: FrozenSet[str]) -> bool:
        """True if the part carries at least one of the given modules."""
        return not self.modules.isdisjoint(module_names)

    def read_thermal(self) -> Optional[ThermalReading]:
        """Current thermal reading, or None for parts without a probe."""
        if self.thermal is None:
            return None
        return self.thermal.read_thermal()

    def __repr__(self) -> str:
        return f"Part({self.name!r}, id={self.part_id})"


@dataclass(frozen=True)
class CriticalityRecord:
    """Criticality of one part for one tick."""

    part: Part
    temperature: float
    temperature_limit: float

    @property
    def index(self) -> float:
        """Temperature / limit; exceeds 1.0 once the part overheats."""
        return self.temperature / self.temperature_limit
