from __future__ import annotations

import math
import random

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.models.part import Part, ThermalReading
from critical_temp_gauge.services.criticality import (
    find_critical_part,
    is_part_ignored,
    sample_parts,
    select_critical,
)

from helpers import make_part


class _SilentProbe:
    def read_thermal(self):
        return None


def test_sample_parts_computes_index_in_input_order() -> None:
    parts = [
        make_part("tank", 500.0, limit=2000.0),
        make_part("engine", 1500.0, limit=2000.0),
        make_part("pod", 1200.0, limit=2400.0),
    ]

    records = sample_parts(parts, Settings())

    assert [r.part for r in records] == parts
    assert [r.index for r in records] == [0.25, 0.75, 0.5]


def test_sample_parts_skips_parts_without_thermal_data() -> None:
    strut = make_part("strut")
    silent = Part(name="probe", part_id=99, thermal=_SilentProbe())
    no_limit = make_part("decoupler", 300.0, limit=0.0)
    negative = make_part("fairing", 300.0, limit=-5.0)
    tank = make_part("tank", 400.0, limit=2000.0)

    records = sample_parts([strut, silent, no_limit, negative, tank], Settings())

    assert [r.part for r in records] == [tank]


def test_excluded_parts_never_sampled_even_when_hottest() -> None:
    settings = Settings(use_exclusion_list=True, exclusion_list_items=["ModuleCoreHeat"])
    reactor = make_part("reactor", 2400.0, limit=2500.0, modules=["ModuleEngines", "ModuleCoreHeat"])
    engine = make_part("engine", 500.0, limit=2000.0, modules=["ModuleEngines"])

    records = sample_parts([reactor, engine], settings)

    assert [r.part for r in records] == [engine]
    assert find_critical_part([reactor, engine], settings).part is engine


def test_exclusion_list_ignored_when_disabled() -> None:
    settings = Settings(use_exclusion_list=False, exclusion_list_items=["ModuleCoreHeat"])
    reactor = make_part("reactor", 2400.0, limit=2500.0, modules=["ModuleCoreHeat"])

    assert not is_part_ignored(reactor, settings)
    assert find_critical_part([reactor], settings).part is reactor


def test_is_part_ignored_requires_module_overlap() -> None:
    settings = Settings(use_exclusion_list=True, exclusion_list_items=["ModuleAblator"])

    assert is_part_ignored(make_part("shield", 100.0, modules=["ModuleAblator"]), settings)
    assert not is_part_ignored(make_part("tank", 100.0, modules=["ModuleFuelTank"]), settings)
    assert not is_part_ignored(make_part("strut"), settings)


def test_select_critical_empty_is_none() -> None:
    assert select_critical([]) is None
    assert find_critical_part([], Settings()) is None
    assert find_critical_part([make_part("strut")], Settings()) is None


def test_select_critical_first_wins_on_tie() -> None:
    first = make_part("left radiator", 800.0, limit=1000.0)
    second = make_part("right radiator", 1600.0, limit=2000.0)
    cooler = make_part("tank", 100.0, limit=1000.0)

    for _ in range(5):
        records = sample_parts([cooler, first, second], Settings())
        assert select_critical(records).part is first


def test_selected_index_is_maximum() -> None:
    rng = random.Random(7)
    parts = [make_part(f"part{i}", rng.uniform(0, 3000), limit=rng.uniform(500, 3000)) for i in range(40)]

    records = sample_parts(parts, Settings())
    critical = select_critical(records)

    assert critical is not None
    assert all(critical.index >= r.index for r in records)


def test_index_is_unbounded_above_one() -> None:
    critical = find_critical_part([make_part("chute", 975.0, limit=650.0)], Settings())

    assert critical.index == 1.5


def test_thermal_reading_applicability() -> None:
    assert ThermalReading(100.0, 1.0).is_applicable
    assert not ThermalReading(100.0, 0.0).is_applicable


def test_non_finite_readings_are_not_ranked() -> None:
    sensor = make_part("sensor", math.nan, limit=1000.0)
    runaway = make_part("runaway", math.inf, limit=1000.0)
    broken_limit = make_part("gauge", 500.0, limit=math.nan)
    engine = make_part("engine", 990.0, limit=1000.0)

    records = sample_parts([sensor, runaway, broken_limit, engine], Settings())
    critical = find_critical_part([sensor, runaway, broken_limit, engine], Settings())

    assert [r.part for r in records] == [engine]
    assert critical.part is engine
    assert not ThermalReading(math.nan, 1000.0).is_applicable
