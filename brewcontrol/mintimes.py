"""Minimum on/off and peak-detection times for the controller."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional

from brewcontrol.applog import log
from brewcontrol.jsonstore import JsonFileStore, JsonStoreError

FILENAME_CUSTOM_MIN_TIMES = "customMinTimes.json"

KEY_SETTINGS_CHOICE = "settings_choice"

_FIELD_KEYS = {
    "min_cool_off_time": "min_cool_off_time",
    "min_heat_off_time": "min_heat_off_time",
    "min_cool_on_time": "min_cool_on_time",
    "min_heat_on_time": "min_heat_on_time",
    "min_cool_off_time_fridge_constant": "min_cool_off_time_fridge_constant",
    "min_switch_time": "min_switch_time",
    "cool_peak_detect_time": "cool_peak_detect_time",
    "heat_peak_detect_time": "heat_peak_detect_time",
}


class MinTimesChoice(IntEnum):
    DEFAULT = 0
    LOW_DELAY = 1
    CUSTOM = 2
    DEVELOP = 3


_PRESETS = {
    MinTimesChoice.DEFAULT: (300, 300, 180, 180, 600, 600, 1800, 900),
    MinTimesChoice.CUSTOM: (300, 300, 180, 180, 600, 600, 1800, 900),
    MinTimesChoice.LOW_DELAY: (60, 300, 20, 180, 60, 600, 1800, 900),
    MinTimesChoice.DEVELOP: (6, 30, 20, 18, 20, 60, 180, 90),
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class MinTimes:
    """Timing limits in seconds, chosen from presets or loaded from a store."""

    def __init__(self, store: Optional[JsonFileStore] = None) -> None:
        self.store = store
        self.settings_choice = MinTimesChoice.DEFAULT
        self.min_cool_off_time = 0
        self.min_heat_off_time = 0
        self.min_cool_on_time = 0
        self.min_heat_on_time = 0
        self.min_cool_off_time_fridge_constant = 0
        self.min_switch_time = 0
        self.cool_peak_detect_time = 0
        self.heat_peak_detect_time = 0
        self.set_defaults()

    def set_defaults(self, choice: MinTimesChoice = MinTimesChoice.DEFAULT) -> None:
        """Apply the preset for ``choice``; a custom choice then loads the store."""
        choice = MinTimesChoice(choice)
        log.verbose("BREW: Using default MinTimes, %d.\n", int(choice))
        self.settings_choice = choice
        for field, value in zip(_FIELD_KEYS, _PRESETS[choice]):
            setattr(self, field, value)
        if choice is MinTimesChoice.CUSTOM:
            self.load()

    def save(self) -> None:
        """Write the current values to the store, if there is one."""
        if self.store is not None:
            self.store.save(self.to_json())

    def load(self) -> bool:
        """Reset to defaults and read values from the store.

        Returns True when a document was read, False when there is no store
        or the store could not be read.
        """
        if self.store is None:
            return False
        self.set_defaults()
        try:
            doc = self.store.load()
        except JsonStoreError:
            return False
        if isinstance(doc, dict):
            self.from_json(doc)
        return True

    def to_json(self) -> Dict[str, int]:
        doc: Dict[str, int] = {KEY_SETTINGS_CHOICE: int(self.settings_choice)}
        for field, key in _FIELD_KEYS.items():
            doc[key] = getattr(self, field)
        return doc

    def from_json(self, doc: Dict[str, Any]) -> None:
        """Take every integer value present in ``doc``; ignore the rest."""
        choice = doc.get(KEY_SETTINGS_CHOICE)
        if _is_int(choice) and choice in MinTimesChoice._value2member_map_:
            self.settings_choice = MinTimesChoice(choice)
        for field, key in _FIELD_KEYS.items():
            value = doc.get(key)
            if _is_int(value):
                setattr(self, field, value)