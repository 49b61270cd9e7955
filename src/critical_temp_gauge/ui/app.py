from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from critical_temp_gauge.config.settings import Settings
from critical_temp_gauge.models.part import CriticalityRecord, Part
from critical_temp_gauge.models.vehicle import Vehicle
from critical_temp_gauge.services.highlighter import PartHighlighter
from critical_temp_gauge.services.mock_vehicle import MockVehicleSource
from critical_temp_gauge.services.thermal_monitor import ThermalMonitor
from critical_temp_gauge.ui.gauge_window import GaugeWindow
from critical_temp_gauge.ui.settings_dialog import SettingsDialog
from critical_temp_gauge.utils.formatting import format_index, format_temperature

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = QColor(220, 60, 30)
MOCK_INTERVAL_MS = 500


class MainWindow(QMainWindow):
    """
    Flight view: parts list, critical temperature gauge and toolbar.

    The UI timer drives one monitor tick per interval. The mock timer
    advances simulated temperatures independently.
    """

    def __init__(
        self,
        settings_path: Optional[Path] = None,
        mock: bool = True,
        always_show_override: Optional[bool] = None,
    ):
        super().__init__()
        self.setWindowTitle("Critical Temperature Gauge")
        self.resize(720, 560)

        self.settings_path = settings_path
        self.settings = Settings.load(settings_path)
        self.mock = mock
        self.always_show_override = always_show_override

        self.vehicle: Optional[Vehicle] = None
        self.vehicle_source: Optional[MockVehicleSource] = None

        self.highlighter = PartHighlighter()
        self.monitor = ThermalMonitor(self._effective_settings, self.highlighter)
        self.monitor.gauge_visibility_changed.connect(self._on_gauge_visibility_changed)
        self.highlighter.highlight_changed.connect(self._on_highlight_changed)

        root = QWidget()
        self.setCentralWidget(root)
        main = QVBoxLayout(root)
        main.setContentsMargins(14, 12, 14, 12)
        main.setSpacing(10)

        # --- Toolbar ---
        top = QHBoxLayout()
        self.vehicle_label = QLabel("No vehicle")
        self.vehicle_label.setObjectName("vehicleLabel")
        top.addWidget(self.vehicle_label)
        top.addStretch(1)

        self.swap_btn = QPushButton("Swap Vehicle")
        self.swap_btn.clicked.connect(self._swap_vehicle)
        self.swap_btn.setEnabled(self.mock)
        top.addWidget(self.swap_btn)

        self.ui_btn = QPushButton("Hide UI")
        self.ui_btn.setCheckable(True)
        self.ui_btn.toggled.connect(self._on_ui_toggled)
        top.addWidget(self.ui_btn)

        self.settings_btn = QPushButton("\u2699")  # Gear icon
        self.settings_btn.setToolTip("Critical Temperature Gauge settings")
        self.settings_btn.clicked.connect(self._toggle_settings)
        top.addWidget(self.settings_btn)
        main.addLayout(top)

        # --- Gauge ---
        self.gauge_window = GaugeWindow()
        self.gauge_window.show_temperature_limit = self.settings.show_temperature_limit
        main.addWidget(self.gauge_window, 0, Qt.AlignHCenter)

        # --- Parts ---
        self.parts_list = QListWidget()
        self.parts_list.setObjectName("partsList")
        main.addWidget(self.parts_list, 1)

        self.settings_dialog = SettingsDialog(self.settings, parent=self)
        self.settings_dialog.settings_changed.connect(self._on_settings_changed)

        self._init_source()

        self.ui_timer = QTimer(self)
        self.ui_timer.timeout.connect(self._tick)
        self.ui_timer.start(self.settings.tick_interval_ms)

        logger.info("Entering flight view")

    def _init_source(self):
        """Initialize the vehicle data source."""
        if not self.mock:
            logger.warning("No live vehicle source configured; running without a vehicle")
            return

        self.vehicle_source = MockVehicleSource()
        self.vehicle_source.vehicle_changed.connect(self._on_vehicle_changed)
        self.vehicle_source.start()

        self.mock_timer = QTimer(self)
        self.mock_timer.timeout.connect(self.vehicle_source.mock_tick)
        self.mock_timer.start(MOCK_INTERVAL_MS)

    def closeEvent(self, event):
        """Save settings and release the highlighted part."""
        self.ui_timer.stop()
        try:
            self.settings.save(self.settings_path)
        except Exception:
            logger.exception("Failed to save settings on exit")
        try:
            self.monitor.end_session()
            self.gauge_window.hide_gauge()
            self.settings_dialog.hide()
        except Exception:
            logger.exception("Error while leaving flight view")
        if self.vehicle_source:
            self.vehicle_source.stop()
        logger.info("Exiting flight view")
        super().closeEvent(event)

    # ---------- Slots ----------

    @Slot(object)
    def _on_vehicle_changed(self, vehicle: Optional[Vehicle]):
        self.vehicle = vehicle
        self.vehicle_label.setText(vehicle.name if vehicle else "No vehicle")

    @Slot(bool)
    def _on_gauge_visibility_changed(self, visible: bool):
        if visible:
            self.gauge_window.show_gauge()
        else:
            self.gauge_window.hide_gauge()

    @Slot(object)
    def _on_highlight_changed(self, part: Optional[Part]):
        logger.debug("Highlight moved to %s", part)

    @Slot(bool)
    def _on_ui_toggled(self, hidden: bool):
        self.ui_btn.setText("Show UI" if hidden else "Hide UI")
        self.gauge_window.can_show = not hidden
        if hidden:
            self.settings_dialog.hide()
        self.settings_btn.setEnabled(not hidden)

    @Slot(object)
    def _on_settings_changed(self, new_settings: Settings):
        self.settings = new_settings
        self.gauge_window.show_temperature_limit = new_settings.show_temperature_limit
        self.ui_timer.setInterval(new_settings.tick_interval_ms)

    def _effective_settings(self) -> Settings:
        return self.settings.with_overrides(always_show_gauge=self.always_show_override)

    def _toggle_settings(self):
        self.settings_dialog.toggle()

    def _swap_vehicle(self):
        if self.vehicle_source:
            self.vehicle_source.swap_vehicle()

    # ---------- Updates ----------

    def _tick(self):
        result = self.monitor.tick(self.vehicle)

        # Rendering faults must not stop monitoring
        try:
            if result.gauge_visible:
                self.gauge_window.set_state(
                    result.critical,
                    self.settings.gauge_showing_threshold,
                    self.settings.gauge_hiding_threshold,
                )
            self._render_parts(result.critical)
        except Exception:
            logger.exception("Failed to render monitor state")

    def _render_parts(self, critical: Optional[CriticalityRecord]):
        self.parts_list.clear()
        if self.vehicle is None:
            return

        for part in self.vehicle.parts:
            reading = part.read_thermal()
            if reading is None:
                text = f"{part.name}    --"
            else:
                index = reading.temperature / reading.temperature_limit if reading.is_applicable else None
                text = (
                    f"{part.name}    {format_temperature(reading.temperature)}"
                    f" / {format_temperature(reading.temperature_limit)}    {format_index(index)}"
                )
            if critical is not None and part is critical.part:
                text += "    ◀"
            item = QListWidgetItem(text)
            if part.highlighted:
                item.setForeground(HIGHLIGHT_COLOR)
            self.parts_list.addItem(item)
