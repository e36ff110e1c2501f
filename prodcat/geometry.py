"""Points in the integer plane and the Euclidean distance between them."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def distance(p1: Point, p2: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)