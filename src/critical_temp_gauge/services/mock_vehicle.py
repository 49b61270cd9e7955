"""Mock vehicle data source for development without a simulator feed."""

from __future__ import annotations

import itertools
import logging
import random
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, Signal, Slot

from critical_temp_gauge.models.part import Part, StaticThermalProbe
from critical_temp_gauge.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


# (name, modules, temperature limit in K); None limit = no thermal probe
MOCK_PART_CATALOG: List[Tuple[str, Tuple[str, ...], Optional[float]]] = [
    ("Command Pod", ("ModuleCommand", "ModuleReactionWheel"), 2400.0),
    ("Heat Shield", ("ModuleAblator",), 3400.0),
    ("Fuel Tank", ("ModuleFuelTank",), 2000.0),
    ("Fuel Tank", ("ModuleFuelTank",), 2000.0),
    ("Liquid Engine", ("ModuleEngines", "ModuleGimbal"), 2000.0),
    ("Nuclear Engine", ("ModuleEngines", "ModuleCoreHeat"), 2500.0),
    ("Radiator Panel", ("ModuleActiveRadiator",), 2500.0),
    ("Parachute", ("ModuleParachute",), 650.0),
    ("Strut", (), None),
]

AMBIENT_K = 290.0


class MockVehicleSource(QObject):
    """
    Mock vehicle source for development/testing.

    Part temperatures random-walk with a slow heating trend so the gauge
    crosses its thresholds now and then.
    """

    # Signals
    vehicle_changed = Signal(object)  # Vehicle or None

    def __init__(self, seed: Optional[int] = None):
        super().__init__()
        self._random = random.Random(seed)
        self._ids = itertools.count(1)
        self._vehicle: Optional[Vehicle] = None
        self._running = False

    @property
    def vehicle(self) -> Optional[Vehicle]:
        """Active vehicle (None until started)."""
        return self._vehicle

    @Slot()
    def start(self) -> None:
        """Create the first vehicle."""
        self._running = True
        self.swap_vehicle()

    @Slot()
    def stop(self) -> None:
        """Drop the active vehicle."""
        self._running = False
        self._vehicle = None
        self.vehicle_changed.emit(None)

    @Slot()
    def swap_vehicle(self) -> None:
        """Replace the active vehicle with a freshly built one."""
        vehicle_id = next(self._ids)
        parts = []
        for name, modules, limit in MOCK_PART_CATALOG:
            probe = None
            if limit is not None:
                probe = StaticThermalProbe(
                    temperature=AMBIENT_K + self._random.uniform(0, 200),
                    temperature_limit=limit,
                )
            parts.append(
                Part(
                    name=name,
                    part_id=vehicle_id * 100 + len(parts),
                    modules=frozenset(modules),
                    thermal=probe,
                )
            )
        self._vehicle = Vehicle(vehicle_id=vehicle_id, name=f"Mock Vessel {vehicle_id}", parts=parts)
        logger.info("Mock vehicle %s created with %d parts", vehicle_id, len(parts))
        self.vehicle_changed.emit(self._vehicle)

    def mock_tick(self) -> None:
        """
        Advance the simulated temperatures.

        Call this from MainWindow's mock timer.
        """
        if not self._running or self._vehicle is None:
            return

        for part in self._vehicle.parts:
            probe = part.thermal
            if not isinstance(probe, StaticThermalProbe):
                continue
            step = self._random.uniform(-0.02, 0.025) * probe.temperature_limit
            probe.temperature = max(
                AMBIENT_K, min(probe.temperature_limit * 1.05, probe.temperature + step)
            )
