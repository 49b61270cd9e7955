"""Critical part highlight with its own hysteresis."""

from __future__ import annotations

from typing import Optional

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.models.part import CriticalityRecord, Part
from critical_temp_gauge.services.highlighter import PartHighlighter


class HighlightController:
    """
    Decides which part, if any, carries the highlight.

    A part has to exceed the showing threshold to get highlighted. Once a
    highlight is active it stays on the critical part until the index drops
    to the hiding threshold.
    """

    def __init__(self, highlighter: Optional[PartHighlighter] = None):
        self._highlighter = highlighter
        self._highlighted: Optional[Part] = None

    @property
    def highlighted_part(self) -> Optional[Part]:
        """Part selected for highlighting on the last tick."""
        return self._highlighted

    @property
    def is_active(self) -> bool:
        """True if a highlight is active."""
        return self._highlighted is not None

    def update(self, critical: Optional[CriticalityRecord], settings: Settings) -> Optional[Part]:
        """
        Compute this tick's highlight target and push it to the highlighter.

        Args:
            critical: Most critical part of this tick, or None
            settings: Current settings (read every tick)

        Returns:
            The highlighted part, or None
        """
        target = None
        if settings.highlight_critical_part and critical is not None:
            keep = self.is_active and critical.index > settings.gauge_hiding_threshold
            if keep or critical.index > settings.gauge_showing_threshold:
                target = critical.part

        self._highlighted = target
        if self._highlighter is not None:
            self._highlighter.set_highlighted_part(target)
        return target

    def clear(self) -> None:
        """Drop the highlight (session end)."""
        self._highlighted = None
        if self._highlighter is not None:
            self._highlighter.set_highlighted_part(None)
