import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from critical_temp_gauge.ui.app import MainWindow


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--settings", type=Path, default=None, help="Settings file (JSON)")
    p.add_argument("--no-mock", action="store_true", help="Do not start the mock vehicle source")
    p.add_argument("--always-show", action="store_true", help="Always show the gauge for this run (not saved)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    w = MainWindow(
        settings_path=args.settings,
        mock=not args.no_mock,
        always_show_override=True if args.always_show else None,
    )
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
