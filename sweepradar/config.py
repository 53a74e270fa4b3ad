"""
sweepradar.config
=================

Tiny helper that loads / saves *radar_config.json* and injects sensible
defaults for any missing keys.
"""

from __future__ import annotations
import json
from pathlib import Path
from sweepradar.constants import CFG_PATH

_DEFAULT = {
    # input selection
    "input_mode": "serial",           # "serial"  or  "mqtt"
    "serial_port": "/dev/tty.usbmodem101",
    "serial_baud": 9600,

    # MQTT (only used when input_mode == "mqtt")
    "broker": "127.0.0.1",
    "port": 1883,
    "topic": "sweepradar/raw",

    # window loop
    "fps": 60,
    "log_level": "INFO",
}


def load(path: Path = CFG_PATH) -> dict:
    try:
        with open(path) as fh:
            return {**_DEFAULT, **json.load(fh)}
    except FileNotFoundError:
        save(_DEFAULT, path)
        return dict(_DEFAULT)


def save(cfg: dict, path: Path = CFG_PATH) -> None:
    Path(path).write_text(json.dumps(cfg, indent=2))
