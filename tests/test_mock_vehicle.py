from __future__ import annotations

from critical_temp_gauge.models.part import StaticThermalProbe
from critical_temp_gauge.services.mock_vehicle import AMBIENT_K, MOCK_PART_CATALOG, MockVehicleSource

from helpers import SignalRecorder


def test_start_creates_vehicle() -> None:
    source = MockVehicleSource(seed=1)
    recorder = SignalRecorder()
    source.vehicle_changed.connect(recorder)

    source.start()

    vehicle = source.vehicle
    assert vehicle is not None
    assert recorder.values == [vehicle]
    assert [p.name for p in vehicle.parts] == [name for name, _, _ in MOCK_PART_CATALOG]


def test_swap_vehicle_gives_new_id_and_parts() -> None:
    source = MockVehicleSource(seed=2)
    source.start()
    first = source.vehicle

    source.swap_vehicle()

    assert source.vehicle.vehicle_id != first.vehicle_id
    assert not set(map(id, source.vehicle.parts)) & set(map(id, first.parts))


def test_mock_tick_keeps_temperatures_in_range() -> None:
    source = MockVehicleSource(seed=3)
    source.start()

    for _ in range(200):
        source.mock_tick()

    for part in source.vehicle.parts:
        if isinstance(part.thermal, StaticThermalProbe):
            assert AMBIENT_K <= part.thermal.temperature <= part.thermal.temperature_limit * 1.05


def test_stop_drops_vehicle() -> None:
    source = MockVehicleSource(seed=4)
    source.start()

    source.stop()
    source.mock_tick()

    assert source.vehicle is None
