"""
sweepradar.geometry
===================

Polar → screen helpers.  Screen y grows downward, so a positive angle
moves the point *up* from the origin; 0° points right, 180° points left.
"""
from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[int, int]

BLIP_SCALE   = 2        # pixels per centimetre for detections
LABEL_GAP    = 3        # labels sit just past the end of their line
LABEL_SHIFT  = 8        # pull labels left once the line leans left


def cartesian(origin: Point, angle_deg: float, length: float) -> Point:
    """Return the integer pixel *length* away from *origin* at *angle_deg*."""
    rad = angle_deg * (math.pi / 180)
    ox, oy = origin
    return (round(ox + math.cos(rad) * length),
            round(oy - math.sin(rad) * length))


def label_point(origin: Point, angle_deg: float, length: float) -> Point:
    x, y = cartesian(origin, angle_deg, length + LABEL_GAP)
    if angle_deg >= 90:
        x -= LABEL_SHIFT
    return x, y


def blip_point(origin: Point, angle_deg: float, distance_cm: int) -> Point:
    return cartesian(origin, angle_deg, distance_cm * BLIP_SCALE)
