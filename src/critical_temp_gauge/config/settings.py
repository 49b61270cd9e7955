"""Gauge settings with persistence."""

from __future__ import annotations

import json
import logging
import platform
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


def parse_exclusion_list(text: str) -> List[str]:
    """
    Parse a comma-separated list of module names.

    Blank entries are dropped and duplicates keep their first position.
    """
    items: List[str] = []
    for raw in text.split(","):
        name = raw.strip()
        if name and name not in items:
            items.append(name)
    return items


def _coerce_exclusion_list(value) -> List[str]:
    """Normalize a stored exclusion list (list of names or comma-separated text)."""
    if isinstance(value, str):
        return parse_exclusion_list(value)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return parse_exclusion_list(",".join(value))
    logger.warning("Ignoring malformed exclusion list: %r", value)
    return []


def format_exclusion_list(items: Iterable[str]) -> str:
    """Format module names for the exclusion list editor."""
    return ", ".join(items)


@dataclass
class Settings:
    """
    Gauge settings with defaults and JSON persistence.

    Thresholds are criticality indices (temperature / temperature limit).
    The gauge appears above the showing threshold and disappears below the
    hiding threshold; the critical part highlight uses the same pair.
    """

    # Hysteresis thresholds
    gauge_showing_threshold: float = 0.5
    gauge_hiding_threshold: float = 0.4

    # Behaviour
    always_show_gauge: bool = False
    highlight_critical_part: bool = True

    # Parts carrying any of these modules are ignored
    use_exclusion_list: bool = False
    exclusion_list_items: List[str] = field(default_factory=list)

    # Display
    show_temperature_limit: bool = True
    tick_interval_ms: int = 200

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Settings:
        """
        Load settings from JSON file.

        Args:
            path: Optional custom path. Uses default if None.

        Returns:
            Settings instance (defaults if file doesn't exist or fails)
        """
        if path is None:
            path = cls._default_path()

        try:
            if path.exists():
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
                # Filter to only known fields (ignore obsolete settings)
                known_fields = {f.name for f in cls.__dataclass_fields__.values()}
                filtered = {k: v for k, v in data.items() if k in known_fields}
                settings = cls(**filtered)
                settings.exclusion_list_items = _coerce_exclusion_list(settings.exclusion_list_items)
                warning = settings.threshold_warning()
                if warning:
                    logger.warning(warning)
                return settings
        except Exception as e:
            logger.error("Failed to load settings from %s: %s", path, e)

        return cls()

    def save(self, path: Optional[Path] = None) -> bool:
        """
        Save settings to JSON file.

        Args:
            path: Optional custom path. Uses default if None.

        Returns:
            True if saved successfully
        """
        if path is None:
            path = self._default_path()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(self), f, indent=2)
            logger.debug("Settings saved to %s", path)
            return True
        except Exception as e:
            logger.error("Failed to save settings to %s: %s", path, e)
            return False

    @staticmethod
    def _default_path() -> Path:
        """Get default settings file location."""
        if platform.system() == "Windows":
            base = Path.home() / ".critical_temp_gauge"
        else:
            base = Path.home() / ".local" / "share" / "critical_temp_gauge"
        return base / "settings.json"

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values."""
        defaults = Settings()
        for field_name in self.__dataclass_fields__:
            setattr(self, field_name, getattr(defaults, field_name))

    def threshold_warning(self) -> Optional[str]:
        """
        Describe an inverted or collapsed threshold pair, if any.

        The thresholds are used as configured; this only reports the problem.
        """
        if self.gauge_showing_threshold <= self.gauge_hiding_threshold:
            return (
                f"Gauge showing threshold ({self.gauge_showing_threshold:.2f}) is not above "
                f"the hiding threshold ({self.gauge_hiding_threshold:.2f}); "
                "the gauge may flicker or stay visible"
            )
        return None

    def with_overrides(self, always_show_gauge: Optional[bool] = None) -> Settings:
        """
        Session view of the settings with command-line overrides applied.

        The stored settings are left untouched, so overrides are never saved.
        """
        if always_show_gauge is None:
            return self
        return replace(self, always_show_gauge=always_show_gauge)

    @property
    def exclusion_modules(self) -> frozenset:
        """Active exclusion list as a set (empty when the list is disabled)."""
        if not self.use_exclusion_list:
            return frozenset()
        return frozenset(self.exclusion_list_items)
