"""
sweepradar.state
================

`RadarState` ties parser, history and renderer together and owns the
*range map*: angle → first in-range distance ever seen at that angle, kept
for downstream consumers (the core never reads it back).
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import pygame

from sweepradar.history import HistoryBuffer
from sweepradar.protocol import Reading, StreamParser
from sweepradar.renderer import RadarRenderer

logger = logging.getLogger(__name__)

RANGE_MIN_CM, RANGE_MAX_CM = 1, 50          # exclusive bounds for the range map


def in_range(distance_cm: int) -> bool:
    return RANGE_MIN_CM < distance_cm < RANGE_MAX_CM


class RadarState:
    def __init__(self,
                 renderer: Optional[RadarRenderer] = None,
                 display: Optional[Callable[[pygame.Surface], None]] = None,
                 parser: Optional[StreamParser] = None,
                 history: Optional[HistoryBuffer] = None) -> None:
        self.renderer = renderer or RadarRenderer()
        self.display  = display
        self.parser   = parser or StreamParser()
        self.history  = history if history is not None else HistoryBuffer()
        self.range_map: Dict[int, int] = {}
        self.latest: Optional[Reading] = None
        self.last_frame: Optional[pygame.Surface] = None

    # ───────────────────────── public API
    def feed(self, chunk: bytes) -> int:
        """Parse *chunk* and apply every completed reading; return how many."""
        n = 0
        for reading in self.parser.append(chunk):
            self.update(reading)
            n += 1
        return n

    def update(self, reading: Reading) -> None:
        logger.debug("reading angle=%d distance=%dcm", *reading)
        self.history.push(reading)
        self.latest = reading

        self.last_frame = self.renderer.render(self.history, reading)
        if self.display is not None:
            self.display(self.last_frame)

        # first write wins; the trail above is unaffected
        if in_range(reading.distance_cm) and reading.angle not in self.range_map:
            self.range_map[reading.angle] = reading.distance_cm

    def run(self, source, should_stop: Optional[Callable[[], bool]] = None) -> None:
        """Blocking read → feed loop until *should_stop* returns True."""
        while not (should_stop and should_stop()):
            chunk = source.read()
            if chunk:
                self.feed(chunk)
