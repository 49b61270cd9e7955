"""Display formatting for temperatures and criticality."""

from __future__ import annotations

from typing import Optional


def format_temperature(kelvin: Optional[float]) -> str:
    """Format a temperature in Kelvin ("--" if unknown)."""
    if kelvin is None:
        return "--"
    return f"{kelvin:.0f} K"


def format_index(index: Optional[float]) -> str:
    """Format a criticality index as a percentage of the limit."""
    if index is None:
        return "--"
    return f"{index * 100:.0f}%"


def index_fill(index: float, segments: int) -> int:
    """Number of filled bar segments for an index (clamped to 0..1)."""
    clamped = max(0.0, min(1.0, index))
    return int(round(clamped * segments))
