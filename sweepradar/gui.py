"""
sweepradar.gui
==============

Single-window radar viewer – serial / MQTT input, one control flow.

Key features
------------
• Template drawn on open, before any data arrives
• Every reading redraws the full frame (trail + blips + status bar)
• Upscaled ×3 for display; all drawing stays at native 240×140
• `q`, Esc or closing the window ends the loop

Reading, parsing, drawing and display all happen on the thread that calls
`run()`; nothing in `RadarState` is shared with another thread.
"""

from __future__ import annotations
import logging
import pygame

from sweepradar import constants as C
from sweepradar.mqtt_client import MqttSource
from sweepradar.serial_reader import ByteSource, SerialSource
from sweepradar.state import RadarState

logger = logging.getLogger(__name__)


class RadarGUI:
    # ────────────────────────────────────────────────── INIT
    def __init__(self, cfg: dict, source: ByteSource | None = None) -> None:
        self.cfg = cfg
        self.fps = int(cfg.get("fps", 60))

        # ―― Pygame window
        self.screen = pygame.display.set_mode(C.DISPLAY_SIZE)
        pygame.display.set_caption(C.CAPTION)
        self.clock = pygame.time.Clock()
        self.running = True

        # ―― Core
        self.state = RadarState(display=self.show)
        self.show(self.state.renderer.blank())

        # ―― Input
        self.source = source if source is not None else self._open_input()

    # ───────────────────────────────────────── helper – open data source
    def _open_input(self) -> ByteSource:
        mode = self.cfg.get("input_mode", "serial").lower()
        if mode == "mqtt":
            return MqttSource(self.cfg["broker"], self.cfg["port"],
                              self.cfg["topic"]).connect()
        return SerialSource(self.cfg["serial_port"],
                            int(self.cfg["serial_baud"])).open()

    # ───────────────────────────────────────── display collaborator
    def show(self, frame: pygame.Surface) -> None:
        self.screen.blit(frame, (0, 0))
        pygame.display.flip()

    # ───────────────────────────────────────── events
    def _pump_events(self) -> None:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.running = False
            elif e.type == pygame.KEYDOWN and e.key in (pygame.K_q, pygame.K_ESCAPE):
                self.running = False

    # ───────────────────────────────────────── MAIN LOOP
    def step(self) -> int:
        """One loop pass: events, one blocking read, parse/draw.  Returns readings applied."""
        self._pump_events()
        if not self.running:
            return 0
        chunk = self.source.read()
        n = self.state.feed(chunk) if chunk else 0
        self.clock.tick(self.fps)
        return n

    def run(self) -> None:
        try:
            while self.running:
                self.step()
        finally:
            # graceful shutdown
            self.source.close()
            logger.info("Radar closed; %d angles in range map", len(self.state.range_map))
