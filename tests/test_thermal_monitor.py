from __future__ import annotations

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.services.highlighter import PartHighlighter
from critical_temp_gauge.services.thermal_monitor import ThermalMonitor

from helpers import SignalRecorder, make_part, make_vehicle, set_index


def make_monitor(settings: Settings):
    highlighter = PartHighlighter()
    return ThermalMonitor(lambda: settings, highlighter), highlighter


def test_tick_drives_both_controllers(settings: Settings) -> None:
    engine = make_part("engine", 0.0, limit=1000.0)
    tank = make_part("tank", 0.0, limit=1000.0)
    vehicle = make_vehicle([tank, engine])
    monitor, highlighter = make_monitor(settings)

    states = []
    for index in (0.5, 0.95, 0.8, 0.6):
        set_index(engine, index)
        set_index(tank, 0.1)
        result = monitor.tick(vehicle)
        states.append((result.gauge_visible, result.highlighted))

    assert states == [(False, None), (True, engine), (True, engine), (False, None)]
    assert highlighter.highlighted_part is None


def test_tick_reports_critical_record(settings: Settings) -> None:
    vehicle = make_vehicle([make_part("tank", 100.0), make_part("engine", 400.0)])
    monitor, _ = make_monitor(settings)
    recorder = SignalRecorder()
    monitor.critical_changed.connect(recorder)

    result = monitor.tick(vehicle)

    assert result.critical.part is vehicle.parts[1]
    assert recorder.values == [result.critical]
    assert monitor.last_result == result


def test_no_vehicle_drives_empty_states(settings: Settings) -> None:
    engine = make_part("engine", 950.0)
    monitor, highlighter = make_monitor(settings)
    monitor.tick(make_vehicle([engine]))

    result = monitor.tick(None)

    assert result.critical is None
    assert not result.gauge_visible
    assert result.highlighted is None
    assert not engine.highlighted


def test_empty_vehicle_with_always_show_stays_hidden() -> None:
    settings = Settings(always_show_gauge=True)
    monitor, _ = make_monitor(settings)

    result = monitor.tick(make_vehicle([]))

    assert result.critical is None
    assert not result.gauge_visible


def test_vehicle_change_resets_session(settings: Settings) -> None:
    old_engine = make_part("engine", 950.0)
    monitor, highlighter = make_monitor(settings)
    gauge_events = SignalRecorder()
    sessions = SignalRecorder()
    monitor.gauge_visibility_changed.connect(gauge_events)
    monitor.session_ended.connect(sessions)
    monitor.tick(make_vehicle([old_engine], vehicle_id=1))
    assert old_engine.highlighted

    # New vehicle sits in the dead band: a fresh session must not carry over
    new_engine = make_part("engine", 800.0)
    result = monitor.tick(make_vehicle([new_engine], vehicle_id=2))

    assert not old_engine.highlighted
    assert result.highlighted is None
    assert not result.gauge_visible
    assert gauge_events.values == [True, False]
    assert len(sessions.values) == 1


def test_same_vehicle_keeps_session(settings: Settings) -> None:
    engine = make_part("engine", 950.0)
    vehicle = make_vehicle([engine])
    monitor, _ = make_monitor(settings)
    sessions = SignalRecorder()
    monitor.session_ended.connect(sessions)

    monitor.tick(vehicle)
    set_index(engine, 0.8)
    result = monitor.tick(vehicle)

    assert result.gauge_visible
    assert result.highlighted is engine
    assert sessions.values == []


def test_settings_read_every_tick() -> None:
    current = {"settings": Settings(gauge_showing_threshold=0.9, gauge_hiding_threshold=0.7)}
    monitor = ThermalMonitor(lambda: current["settings"])
    vehicle = make_vehicle([make_part("engine", 800.0)])

    assert not monitor.tick(vehicle).gauge_visible

    current["settings"] = Settings(gauge_showing_threshold=0.75, gauge_hiding_threshold=0.7)
    assert monitor.tick(vehicle).gauge_visible


def test_end_session_clears_highlight(settings: Settings) -> None:
    engine = make_part("engine", 950.0)
    monitor, highlighter = make_monitor(settings)
    monitor.tick(make_vehicle([engine]))

    monitor.end_session()

    assert highlighter.highlighted_part is None
    assert not engine.highlighted
    assert not monitor.gauge.is_visible
    assert monitor.last_result.critical is None


def test_excluded_hot_part_is_not_highlighted() -> None:
    settings = Settings(
        gauge_showing_threshold=0.9,
        gauge_hiding_threshold=0.7,
        use_exclusion_list=True,
        exclusion_list_items=["ModuleCoreHeat"],
    )
    reactor = make_part("reactor", 990.0, modules=["ModuleCoreHeat"])
    tank = make_part("tank", 300.0)
    monitor, _ = make_monitor(settings)

    result = monitor.tick(make_vehicle([reactor, tank]))

    assert result.critical.part is tank
    assert result.highlighted is None
    assert not result.gauge_visible
