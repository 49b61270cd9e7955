# Critical Temperature Gauge - Data models
from critical_temp_gauge.models.part import (
    CriticalityRecord,
    Part,
    StaticThermalProbe,
    ThermalProbe,
    ThermalReading,
)
from critical_temp_gauge.models.vehicle import Vehicle

__all__ = [
    "CriticalityRecord",
    "Part",
    "StaticThermalProbe",
    "ThermalProbe",
    "ThermalReading",
    "Vehicle",
]
