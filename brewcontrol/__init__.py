"""Filters, timing limits, actuators, timers, logging and JSON storage for temperature control."""

__version__ = "0.1.0"