"""Per-tick thermal monitoring of the active vehicle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.models.part import CriticalityRecord, Part
from critical_temp_gauge.models.vehicle import Vehicle
from critical_temp_gauge.services.criticality import find_critical_part
from critical_temp_gauge.services.gauge_controller import GaugeVisibilityController
from critical_temp_gauge.services.highlight_controller import HighlightController
from critical_temp_gauge.services.highlighter import PartHighlighter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Outputs of one monitoring tick."""

    critical: Optional[CriticalityRecord]
    gauge_visible: bool
    highlighted: Optional[Part]


class ThermalMonitor(QObject):
    """
    Runs sampling, selection and both hysteresis controllers once per tick.

    Settings are fetched from ``settings_provider`` on every tick so live
    edits apply immediately. A new vehicle id ends the previous session
    before the tick samples anything.
    """

    # Signals
    critical_changed = Signal(object)  # CriticalityRecord or None, every tick
    gauge_visibility_changed = Signal(bool)
    session_ended = Signal()

    def __init__(
        self,
        settings_provider: Callable[[], Settings],
        highlighter: Optional[PartHighlighter] = None,
    ):
        super().__init__()
        self._settings_provider = settings_provider
        self._gauge = GaugeVisibilityController()
        self._highlight = HighlightController(highlighter)
        self._vehicle_id: Optional[int] = None
        self._last_result = TickResult(critical=None, gauge_visible=False, highlighted=None)

        self._gauge.visibility_changed.connect(self.gauge_visibility_changed)

    @property
    def gauge(self) -> GaugeVisibilityController:
        return self._gauge

    @property
    def highlight(self) -> HighlightController:
        return self._highlight

    @property
    def last_result(self) -> TickResult:
        """Result of the most recent tick."""
        return self._last_result

    def tick(self, vehicle: Optional[Vehicle]) -> TickResult:
        """
        Process one sampling tick.

        Args:
            vehicle: Active vehicle, or None if there is none

        Returns:
            TickResult with the critical record, gauge visibility and highlight
        """
        vehicle_id = vehicle.vehicle_id if vehicle is not None else None
        if vehicle_id != self._vehicle_id:
            if self._vehicle_id is not None:
                self.end_session()
            if vehicle is not None:
                logger.info("Monitoring vehicle %r (id %s)", vehicle.name, vehicle_id)
            self._vehicle_id = vehicle_id

        settings = self._settings_provider()
        critical = None
        if vehicle is not None:
            critical = find_critical_part(vehicle.parts, settings)

        gauge_visible = self._gauge.update(critical, settings)
        highlighted = self._highlight.update(critical, settings)

        self._last_result = TickResult(
            critical=critical,
            gauge_visible=gauge_visible,
            highlighted=highlighted,
        )
        self.critical_changed.emit(critical)
        return self._last_result

    def end_session(self) -> None:
        """Reset both state machines and release the highlighted part."""
        self._gauge.reset()
        self._highlight.clear()
        self._vehicle_id = None
        self._last_result = TickResult(critical=None, gauge_visible=False, highlighted=None)
        logger.info("Monitoring session ended")
        self.session_ended.emit()
