"""Visual marker on the critical part."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from critical_temp_gauge.models.part import Part

logger = logging.getLogger(__name__)


class PartHighlighter(QObject):
    """
    Applies the highlight marker to at most one part.

    Setting the same target again is a no-op, so callers may push the
    target every tick.
    """

    # Signals
    highlight_changed = Signal(object)  # Part or None

    def __init__(self):
        super().__init__()
        self._part: Optional[Part] = None

    @property
    def highlighted_part(self) -> Optional[Part]:
        """Currently highlighted part (None if nothing is highlighted)."""
        return self._part

    @property
    def is_there_highlighted_part(self) -> bool:
        return self._part is not None

    def set_highlighted_part(self, part: Optional[Part]) -> None:
        """Move the highlight to ``part``, or clear it when None."""
        if part is self._part:
            return

        if self._part is not None:
            self._part.highlighted = False
        self._part = part
        if part is not None:
            part.highlighted = True

        logger.debug("Highlighted part: %s", part)
        self.highlight_changed.emit(part)
