"""Part sampling and critical part selection."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.models.part import CriticalityRecord, Part


def is_part_ignored(part: Part, settings: Settings) -> bool:
    """True if the exclusion list is enabled and the part carries a listed module."""
    return part.has_any_module(settings.exclusion_modules)


def sample_part(part: Part) -> Optional[CriticalityRecord]:
    """
    Build the criticality record of a single part.

    Returns:
        The record, or None if the part has no usable temperature/limit pair
    """
    reading = part.read_thermal()
    if reading is None or not reading.is_applicable:
        return None
    return CriticalityRecord(
        part=part,
        temperature=reading.temperature,
        temperature_limit=reading.temperature_limit,
    )


def sample_parts(parts: Iterable[Part], settings: Settings) -> List[CriticalityRecord]:
    """
    Compute criticality records for all parts that are not ignored.

    Records keep the order of ``parts``.
    """
    records = []
    for part in parts:
        if is_part_ignored(part, settings):
            continue
        record = sample_part(part)
        if record is not None:
            records.append(record)
    return records


def select_critical(records: Sequence[CriticalityRecord]) -> Optional[CriticalityRecord]:
    """
    Pick the record with the greatest index.

    On ties the first record wins. Returns None for an empty sequence.
    """
    critical: Optional[CriticalityRecord] = None
    for record in records:
        if critical is None or record.index > critical.index:
            critical = record
    return critical


def find_critical_part(
    parts: Iterable[Part], settings: Settings
) -> Optional[CriticalityRecord]:
    """Sample the parts and return the most critical one."""
    return select_critical(sample_parts(parts, settings))
