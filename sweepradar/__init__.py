"""
sweepradar package
==================

Radar-style display for a sweeping ultrasonic range sensor.
"""

__all__ = [
    "constants",
    "config",
    "errors",
    "protocol",
    "history",
    "geometry",
    "renderer",
    "state",
    "serial_reader",
    "mqtt_client",
    "gui",
]

__version__ = "0.5.0"
