"""Actuators that hold an on/off state."""

from __future__ import annotations

from brewcontrol.applog import log


class ValueActuator:
    """An actuator that only remembers whether it is active."""

    def __init__(self, initial: bool = False) -> None:
        log.verbose(
            "BREW: Creating ValueActuator state=%s.\n", "true" if initial else "false"
        )
        self._active = bool(initial)

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        log.verbose(
            "BREW: ValueActuator set active=%s.\n", "true" if value else "false"
        )
        self._active = bool(value)