from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication

from critical_temp_gauge.config.settings import Settings


@pytest.fixture(scope="session", autouse=True)
def qt_core_app() -> QCoreApplication:
    """Qt objects and signals are used without any widgets."""

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def settings() -> Settings:
    return Settings(gauge_showing_threshold=0.9, gauge_hiding_threshold=0.7)
