"""
sweepradar.renderer
===================

Draws the radar at its native 240×140 resolution and smooth-scales it ×3
for the window.

Every `render()` starts from a freshly drawn template surface, so nothing
from a previous frame can survive into the next one (no ghost lines or
blips).  Only coordinates at native resolution are used while drawing.

Frame layout
------------
• Dark background, origin dot at bottom-centre
• Five range rings (20px apart, labelled 10 … 50 cm)
• Guide lines every 30° (30 … 150), labelled with their angle
• Status bar: "Degree: <n>"  "Distance: <n> cm | Nothing"
• Trail: one line per history entry, green fading with age
• Blips: red dot at 2·distance for detections in (2, 50) cm
"""
from __future__ import annotations

from typing import Optional, Tuple

import pygame

from sweepradar import constants as C
from sweepradar.geometry import Point, blip_point, cartesian, label_point
from sweepradar.history import HistoryBuffer
from sweepradar.protocol import Reading

NOTHING = "Nothing"
DETECT_LIMIT_CM = 50        # status bar shows a distance below this
BLIP_MIN_CM     = 2         # blips need distance strictly above this


def distance_text(distance_cm: int) -> str:
    return f"{distance_cm} cm" if distance_cm < DETECT_LIMIT_CM else NOTHING


def has_blip(distance_cm: int) -> bool:
    return BLIP_MIN_CM < distance_cm < DETECT_LIMIT_CM


def trail_colour(age: int) -> Tuple[int, int, int]:
    return (0, max(0, C.TRAIL_BASE - C.TRAIL_FADE * age), 0)


def blip_colour(age: int) -> Tuple[int, int, int]:
    return (max(0, C.BLIP_BASE - C.BLIP_FADE * age), 8, 0)


class RadarRenderer:
    def __init__(self, origin: Point = C.ORIGIN, scale: int = C.SCALE) -> None:
        self.origin = origin
        self.display_size = (C.WIDTH * scale, C.HEIGHT * scale)
        self.frame: Optional[pygame.Surface] = None          # native
        self.display_frame: Optional[pygame.Surface] = None  # upscaled

        # Font objects are invalid once pygame.quit() has run
        pygame.font.init()
        self.font       = pygame.font.SysFont(C.FONT_NAME, C.FONT_SIZE)
        self.small_font = pygame.font.SysFont(C.FONT_NAME, C.SMALL_FONT_SIZE)

    # ───────────────────────── public API
    def render(self, history: HistoryBuffer, latest: Reading) -> pygame.Surface:
        frame = self.draw_template()
        self._draw_trail(frame, history)
        self._draw_status(frame, latest)
        return self._present(frame)

    def blank(self) -> pygame.Surface:
        """Upscaled template with no trail, shown before the first reading."""
        return self._present(self.draw_template())

    def draw_template(self) -> pygame.Surface:
        frame = pygame.Surface(C.SIZE, 0, 32)
        frame.fill(C.BACKGROUND)

        # rings
        pygame.draw.circle(frame, C.GREEN, self.origin, C.DOT_R)
        for k in range(1, C.RING_COUNT + 1):
            pygame.draw.circle(frame, C.GREEN, self.origin, k * C.RING_STEP, 1)

        # angle guides
        for angle in range(C.GUIDE_STEP, 180, C.GUIDE_STEP):
            self._line_at(frame, angle, C.GUIDE_LEN, C.GREEN)
            self._text(frame, str(angle), label_point(self.origin, angle, C.GUIDE_LEN),
                       self.small_font)

        # status bar
        pygame.draw.line(frame, C.GREEN, (0, C.STATUS_TOP - 1), (C.WIDTH, C.STATUS_TOP - 1))
        pygame.draw.rect(frame, C.STATUS_BG,
                         pygame.Rect(0, C.STATUS_TOP, C.WIDTH, C.HEIGHT - C.STATUS_TOP))
        self._text(frame, "Degree: ", C.DEGREE_POS)
        self._text(frame, "Distance: ", C.DISTANCE_POS)

        # range labels sit on the bar, under the ring they name
        for k in range(1, C.RING_COUNT + 1):
            pos = (C.WIDTH // 2 + k * C.RING_STEP - 5, C.HEIGHT - 17)
            self._text(frame, str(k * C.RING_UNITS), pos, self.small_font)
        return frame

    # ───────────────────────── overlay
    def _draw_trail(self, frame: pygame.Surface, history: HistoryBuffer) -> None:
        for age, (angle, dist) in history.entries():
            self._line_at(frame, angle, C.TRAIL_LEN, trail_colour(age))
            if has_blip(dist):
                pygame.draw.circle(frame, blip_colour(age),
                                   blip_point(self.origin, angle, dist), C.DOT_R)

    def _draw_status(self, frame: pygame.Surface, latest: Reading) -> None:
        dx, dy = C.DEGREE_POS
        self._text(frame, str(latest.angle), (dx + C.DEGREE_VAL_DX, dy))
        dx, dy = C.DISTANCE_POS
        self._text(frame, distance_text(latest.distance_cm), (dx + C.DISTANCE_VAL_DX, dy))

    # ───────────────────────── helpers
    def _line_at(self, frame, angle, length, colour) -> None:
        pygame.draw.line(frame, colour, self.origin, cartesian(self.origin, angle, length))

    def _text(self, frame, text: str, baseline: Point, font=None) -> None:
        """Blit *text* with its left end on *baseline* (OpenCV-style anchor)."""
        font = font or self.font
        surf = font.render(text, True, C.GREEN)
        x, y = baseline
        frame.blit(surf, (x, y - font.get_ascent()))

    def _present(self, frame: pygame.Surface) -> pygame.Surface:
        self.frame = frame
        self.display_frame = pygame.transform.smoothscale(frame, self.display_size)
        return self.display_frame
