"""Critical temperature gauge panel."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QRect
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from critical_temp_gauge.models.part import CriticalityRecord
from critical_temp_gauge.utils.formatting import format_index, format_temperature, index_fill

SEGMENTS = 20  # index bar segments


class IndexBar(QWidget):
    """
    Segmented bar showing the criticality index, amber to red.
    """

    def __init__(self, segments: int = SEGMENTS):
        super().__init__()
        self._segments = segments
        self._filled = 0
        self._label = ""
        self.setMinimumHeight(30)
        self.setMaximumHeight(30)

    def set_index(self, index: Optional[float], showing: float, hiding: float):
        self._label = ""
        if index is None:
            self._filled = 0
            self.update()
            return

        self._filled = index_fill(index, self._segments)
        if index >= 1.0:
            self._label = "OVERHEAT"
        elif index > showing:
            self._label = "CRITICAL"
        elif index > hiding:
            self._label = "HOT"
        self.update()

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)

        r = self.rect().adjusted(6, 6, -6, -6)
        seg_gap = 2
        seg_w = int((r.width() - (self._segments - 1) * seg_gap) / self._segments)
        seg_h = r.height()

        col_empty = QColor(80, 70, 55, 180)
        col_ok = QColor(220, 140, 35, 220)
        col_warn = QColor(230, 120, 25, 235)
        col_crit = QColor(180, 35, 25, 240)

        def seg_color(i: int) -> QColor:
            # i is 1..segments; last fifth red, previous fifth orange
            if i > self._segments * 0.8:
                return col_crit
            if i > self._segments * 0.6:
                return col_warn
            return col_ok

        for i in range(self._segments):
            x = r.left() + i * (seg_w + seg_gap)
            seg = QRect(x, r.top(), seg_w, seg_h)
            p.fillRect(seg, seg_color(i + 1) if i < self._filled else col_empty)

        if self._label:
            p.setPen(QColor(255, 235, 200, 230))
            p.setFont(self.font())
            p.drawText(self.rect(), Qt.AlignCenter, self._label)


class GaugeWindow(QFrame):
    """
    Floating gauge for the most critical part.

    Logical visibility is driven by the monitor; ``can_show`` is cleared
    while the UI is hidden and keeps the widget off screen without losing
    the logical state.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("gaugeWindow")
        self.setFixedSize(360, 150)

        self._logically_visible = False
        self._can_show = True
        self.show_temperature_limit = True

        lay = QVBoxLayout(self)
        lay.setContentsMargins(16, 12, 16, 12)
        lay.setSpacing(4)

        self.part_label = QLabel("--")
        self.part_label.setObjectName("gaugePart")
        lay.addWidget(self.part_label)

        self.value_label = QLabel("--")
        self.value_label.setObjectName("gaugeValue")
        lay.addWidget(self.value_label)

        self.bar = IndexBar()
        lay.addWidget(self.bar)

        self.setVisible(False)

    @property
    def is_logically_visible(self) -> bool:
        return self._logically_visible

    @property
    def can_show(self) -> bool:
        return self._can_show

    @can_show.setter
    def can_show(self, value: bool) -> None:
        self._can_show = value
        self._apply_visibility()

    def show_gauge(self) -> None:
        self._logically_visible = True
        self._apply_visibility()

    def hide_gauge(self) -> None:
        self._logically_visible = False
        self._apply_visibility()

    def _apply_visibility(self) -> None:
        self.setVisible(self._logically_visible and self._can_show)

    def set_state(self, record: Optional[CriticalityRecord], showing: float, hiding: float):
        """Render a critical part record (only called while visible)."""
        if record is None:
            self.part_label.setText("--")
            self.value_label.setText("--")
            self.bar.set_index(None, showing, hiding)
            return

        self.part_label.setText(record.part.name)
        text = f"{format_temperature(record.temperature)}"
        if self.show_temperature_limit:
            text += f" / {format_temperature(record.temperature_limit)}"
        text += f"  ({format_index(record.index)})"
        self.value_label.setText(text)
        self.bar.set_index(record.index, showing, hiding)

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)

        r = self.rect().adjusted(1, 1, -1, -1)
        radius = 10

        path = QPainterPath()
        path.addRoundedRect(r, radius, radius)
        p.setClipPath(path)
        p.fillRect(r, QColor(22, 20, 16, 235))

        p.setClipping(False)
        p.setPen(QPen(QColor(255, 220, 160, 70), 1))
        p.drawRoundedRect(r, radius, radius)

        super().paintEvent(event)
