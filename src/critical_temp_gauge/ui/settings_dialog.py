"""Settings dialog with tabbed sections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from critical_temp_gauge.config.settings import format_exclusion_list, parse_exclusion_list

if TYPE_CHECKING:
    from critical_temp_gauge.config.settings import Settings

logger = logging.getLogger(__name__)


class ValueStepper(QWidget):
    """
    Numeric stepper with +/- buttons.

    Layout: [Label]  [ - ]  [Value]  [ + ]
    """

    value_changed = Signal(float)

    def __init__(
        self,
        label: str,
        min_val: float,
        max_val: float,
        value: float,
        suffix: str = "",
        decimals: int = 0,
        step: float = 1.0,
    ):
        super().__init__()
        self.min_val = min_val
        self.max_val = max_val
        self.decimals = decimals
        self.suffix = suffix
        self.step = step
        self._value = value

        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 4, 0, 4)
        lay.setSpacing(8)

        self.label = QLabel(label)
        self.label.setObjectName("stepperLabel")
        self.label.setFixedWidth(160)
        lay.addWidget(self.label)

        lay.addStretch(1)

        self.minus_btn = QPushButton("\u2212")  # Proper minus sign
        self.minus_btn.setObjectName("stepperBtn")
        self.minus_btn.setFixedSize(36, 36)
        self.minus_btn.setAutoRepeat(True)
        self.minus_btn.setAutoRepeatDelay(400)
        self.minus_btn.setAutoRepeatInterval(100)
        self.minus_btn.clicked.connect(self._on_minus)
        lay.addWidget(self.minus_btn)

        self.value_label = QLabel()
        self.value_label.setObjectName("stepperValue")
        self.value_label.setFixedWidth(90)
        self.value_label.setFixedHeight(36)
        self.value_label.setAlignment(Qt.AlignCenter)
        lay.addWidget(self.value_label)

        self.plus_btn = QPushButton("+")
        self.plus_btn.setObjectName("stepperBtn")
        self.plus_btn.setFixedSize(36, 36)
        self.plus_btn.setAutoRepeat(True)
        self.plus_btn.setAutoRepeatDelay(400)
        self.plus_btn.setAutoRepeatInterval(100)
        self.plus_btn.clicked.connect(self._on_plus)
        lay.addWidget(self.plus_btn)

        self._update_value_label()

    def _on_minus(self):
        new_val = round(max(self.min_val, self._value - self.step), 6)
        if new_val != self._value:
            self._value = new_val
            self._update_value_label()
            self.value_changed.emit(self._value)

    def _on_plus(self):
        new_val = round(min(self.max_val, self._value + self.step), 6)
        if new_val != self._value:
            self._value = new_val
            self._update_value_label()
            self.value_changed.emit(self._value)

    def _update_value_label(self):
        if self.decimals == 0:
            text = f"{int(self._value)}{self.suffix}"
        else:
            text = f"{self._value:.{self.decimals}f}{self.suffix}"
        self.value_label.setText(text)

    def value(self) -> float:
        """Get current value."""
        return self._value

    def setValue(self, value: float):
        """Set current value."""
        self._value = max(self.min_val, min(self.max_val, value))
        self._update_value_label()


class SettingsDialog(QDialog):
    """
    Settings dialog with tabbed sections.

    Tabs: GAUGE, EXCLUSIONS

    Edits are applied to the shared Settings object on APPLY; the monitor
    reads them on its next tick.
    """

    settings_changed = Signal(object)  # Emit Settings when applied

    def __init__(self, settings: "Settings", parent=None):
        super().__init__(parent)
        self.settings = settings
        self._modified = False

        self.setWindowTitle("Critical Temperature Gauge")
        self.setFixedSize(560, 420)

        self._setup_ui()
        self._apply_styles()

    def _setup_ui(self):
        """Build the dialog UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.tabs = QTabWidget()
        self.tabs.addTab(self._create_gauge_tab(), "GAUGE")
        self.tabs.addTab(self._create_exclusions_tab(), "EXCLUSIONS")
        layout.addWidget(self.tabs)

        self.warning_label = QLabel("")
        self.warning_label.setObjectName("warningText")
        self.warning_label.setWordWrap(True)
        layout.addWidget(self.warning_label)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()

        self.reset_btn = QPushButton("RESET DEFAULTS")
        self.reset_btn.setObjectName("settingsBtn")
        self.reset_btn.clicked.connect(self._reset_defaults)
        btn_layout.addWidget(self.reset_btn)

        self.apply_btn = QPushButton("APPLY")
        self.apply_btn.setObjectName("settingsBtnPrimary")
        self.apply_btn.clicked.connect(self.apply)
        btn_layout.addWidget(self.apply_btn)

        layout.addLayout(btn_layout)

    def _create_gauge_tab(self) -> QWidget:
        """Create the gauge settings tab."""
        widget = QWidget()
        layout = QVBoxLayout(widget)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(4)

        header = QLabel("THRESHOLDS")
        header.setObjectName("sectionHeader")
        layout.addWidget(header)

        self.showing_stepper = ValueStepper(
            "Show gauge above:", 0.0, 1.0, self.settings.gauge_showing_threshold,
            decimals=2, step=0.01,
        )
        self.showing_stepper.value_changed.connect(self._on_value_changed)
        layout.addWidget(self.showing_stepper)

        self.hiding_stepper = ValueStepper(
            "Hide gauge below:", 0.0, 1.0, self.settings.gauge_hiding_threshold,
            decimals=2, step=0.01,
        )
        self.hiding_stepper.value_changed.connect(self._on_value_changed)
        layout.addWidget(self.hiding_stepper)

        layout.addSpacing(12)

        self.always_show_check = QCheckBox("Always show gauge")
        self.always_show_check.setObjectName("settingsCheck")
        self.always_show_check.setChecked(self.settings.always_show_gauge)
        self.always_show_check.stateChanged.connect(self._on_value_changed)
        layout.addWidget(self.always_show_check)

        self.highlight_check = QCheckBox("Highlight critical part")
        self.highlight_check.setObjectName("settingsCheck")
        self.highlight_check.setChecked(self.settings.highlight_critical_part)
        self.highlight_check.stateChanged.connect(self._on_value_changed)
        layout.addWidget(self.highlight_check)

        self.limit_check = QCheckBox("Show temperature limit")
        self.limit_check.setObjectName("settingsCheck")
        self.limit_check.setChecked(self.settings.show_temperature_limit)
        self.limit_check.stateChanged.connect(self._on_value_changed)
        layout.addWidget(self.limit_check)

        layout.addStretch()
        return widget

    def _create_exclusions_tab(self) -> QWidget:
        """Create the exclusion list tab."""
        widget = QWidget()
        layout = QVBoxLayout(widget)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        header = QLabel("EXCLUSION LIST")
        header.setObjectName("sectionHeader")
        layout.addWidget(header)

        self.exclusion_check = QCheckBox("Ignore parts with these modules")
        self.exclusion_check.setObjectName("settingsCheck")
        self.exclusion_check.setChecked(self.settings.use_exclusion_list)
        self.exclusion_check.stateChanged.connect(self._on_value_changed)
        layout.addWidget(self.exclusion_check)

        self.exclusion_edit = QLineEdit(format_exclusion_list(self.settings.exclusion_list_items))
        self.exclusion_edit.setPlaceholderText("ModuleCoreHeat, ModuleAblator")
        self.exclusion_edit.textEdited.connect(self._on_value_changed)
        layout.addWidget(self.exclusion_edit)

        info = QLabel("Comma-separated module names.")
        info.setObjectName("infoText")
        layout.addWidget(info)

        layout.addStretch()
        return widget

    def _on_value_changed(self, *args):
        """Mark settings as modified."""
        self._modified = True

    def _reset_defaults(self):
        """Reset all settings to defaults."""
        reply = QMessageBox.question(
            self,
            "Reset Settings",
            "Reset all settings to defaults?",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        if reply == QMessageBox.Yes:
            self.settings.reset_to_defaults()
            self._update_ui_from_settings()
            self._modified = True

    def _update_ui_from_settings(self):
        """Update all UI controls from current settings."""
        self.showing_stepper.setValue(self.settings.gauge_showing_threshold)
        self.hiding_stepper.setValue(self.settings.gauge_hiding_threshold)
        self.always_show_check.setChecked(self.settings.always_show_gauge)
        self.highlight_check.setChecked(self.settings.highlight_critical_part)
        self.limit_check.setChecked(self.settings.show_temperature_limit)
        self.exclusion_check.setChecked(self.settings.use_exclusion_list)
        self.exclusion_edit.setText(format_exclusion_list(self.settings.exclusion_list_items))

    def _collect_settings(self):
        """Collect settings from UI controls."""
        self.settings.gauge_showing_threshold = self.showing_stepper.value()
        self.settings.gauge_hiding_threshold = self.hiding_stepper.value()
        self.settings.always_show_gauge = self.always_show_check.isChecked()
        self.settings.highlight_critical_part = self.highlight_check.isChecked()
        self.settings.show_temperature_limit = self.limit_check.isChecked()
        self.settings.use_exclusion_list = self.exclusion_check.isChecked()
        self.settings.exclusion_list_items = parse_exclusion_list(self.exclusion_edit.text())

    def apply(self):
        """Apply edits to the shared settings."""
        if not self._modified:
            return
        self._collect_settings()
        self._modified = False

        warning = self.settings.threshold_warning()
        if warning:
            logger.warning(warning)
        self.warning_label.setText(warning or "")

        self.settings_changed.emit(self.settings)

    def toggle(self):
        """Show the dialog if hidden, hide it otherwise."""
        self.setVisible(not self.isVisible())

    def _apply_styles(self):
        """Apply dialog styles."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: rgba(20, 18, 15, 250);
            }
            QTabWidget::pane {
                border: 1px solid rgba(255, 220, 160, 55);
                border-radius: 8px;
                background-color: rgba(25, 22, 17, 230);
            }
            QTabBar::tab {
                background-color: rgba(35, 32, 26, 220);
                color: rgba(200, 190, 170, 220);
                border: 1px solid rgba(255, 220, 160, 45);
                padding: 10px 20px;
                margin-right: 4px;
                font-size: 13px;
                font-weight: 800;
            }
            QTabBar::tab:selected {
                background-color: rgba(60, 55, 45, 240);
                color: rgba(255, 235, 205, 250);
                border-bottom: 2px solid rgba(220, 160, 60, 200);
            }
            QLabel#sectionHeader {
                color: rgba(220, 180, 120, 240);
                font-size: 15px;
                font-weight: 900;
                letter-spacing: 1px;
                padding-bottom: 6px;
            }
            QLabel#stepperLabel, QCheckBox#settingsCheck {
                color: rgba(220, 210, 195, 240);
                font-size: 14px;
                font-weight: 700;
            }
            QLabel#stepperValue {
                color: rgba(255, 235, 205, 255);
                font-size: 16px;
                font-weight: 900;
                background-color: rgba(45, 40, 32, 255);
                border: 1px solid rgba(255, 220, 160, 80);
                border-radius: 6px;
            }
            QPushButton#stepperBtn {
                background-color: rgba(70, 65, 55, 255);
                border: 1px solid rgba(255, 220, 160, 120);
                border-radius: 6px;
                color: rgba(255, 235, 205, 255);
                font-size: 20px;
                font-weight: 900;
            }
            QLineEdit {
                background-color: rgba(45, 40, 32, 255);
                border: 1px solid rgba(255, 220, 160, 80);
                border-radius: 6px;
                color: rgba(255, 235, 205, 255);
                padding: 6px;
            }
            QLabel#infoText {
                color: rgba(150, 145, 135, 200);
                font-size: 12px;
            }
            QLabel#warningText {
                color: rgba(255, 180, 80, 250);
                font-size: 12px;
                font-weight: 700;
            }
            QPushButton#settingsBtn, QPushButton#settingsBtnPrimary {
                border: 1px solid rgba(255, 220, 160, 75);
                border-radius: 8px;
                color: rgba(240, 230, 215, 245);
                font-size: 13px;
                font-weight: 800;
                padding: 8px 18px;
                min-height: 32px;
            }
            QPushButton#settingsBtn { background-color: rgba(45, 42, 36, 230); }
            QPushButton#settingsBtnPrimary { background-color: rgba(160, 120, 40, 230); }
            """
        )
