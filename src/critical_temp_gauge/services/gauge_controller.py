"""Gauge visibility with show/hide hysteresis."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.models.part import CriticalityRecord

logger = logging.getLogger(__name__)


class GaugeVisibility(Enum):
    """Gauge state machine states."""

    HIDDEN = "hidden"
    VISIBLE = "visible"


class GaugeVisibilityController(QObject):
    """
    Decides whether the gauge is shown.

    State machine:
        HIDDEN ──(record and (always show or index > showing))──> VISIBLE
        VISIBLE ──(not always show and (no record or index < hiding))──> HIDDEN

    Only the rule leaving the current state is checked. Between the two
    thresholds the gauge keeps whatever state it is in.
    """

    # Signals
    visibility_changed = Signal(bool)  # True when the gauge becomes visible

    def __init__(self):
        super().__init__()
        self._state = GaugeVisibility.HIDDEN

    @property
    def state(self) -> GaugeVisibility:
        """Current gauge state."""
        return self._state

    @property
    def is_visible(self) -> bool:
        """True if the gauge should be shown."""
        return self._state == GaugeVisibility.VISIBLE

    def update(self, critical: Optional[CriticalityRecord], settings: Settings) -> bool:
        """
        Advance the state machine by one tick.

        Args:
            critical: Most critical part of this tick, or None
            settings: Current settings (read every tick)

        Returns:
            True if the gauge is visible after the update
        """
        if self._state == GaugeVisibility.HIDDEN:
            if critical is not None and (
                settings.always_show_gauge
                or critical.index > settings.gauge_showing_threshold
            ):
                self._transition_to(GaugeVisibility.VISIBLE)
        elif self._state == GaugeVisibility.VISIBLE:
            if critical is None or (
                not settings.always_show_gauge
                and critical.index < settings.gauge_hiding_threshold
            ):
                self._transition_to(GaugeVisibility.HIDDEN)

        return self.is_visible

    def reset(self) -> None:
        """Return to HIDDEN (session end)."""
        self._transition_to(GaugeVisibility.HIDDEN)

    def _transition_to(self, new_state: GaugeVisibility) -> None:
        """Transition to a new state."""
        if new_state != self._state:
            self._state = new_state
            logger.debug("Gauge %s", new_state.value)
            self.visibility_changed.emit(new_state == GaugeVisibility.VISIBLE)
