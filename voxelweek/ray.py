"""A ray that marches forward from a point along a view direction."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


class Ray:
    """March from ``position`` along a direction given as pitch/yaw degrees.

    ``direction`` is a rotation vector: its x component is the pitch and its
    y component the yaw, both in degrees.
    """

    def __init__(self, position: Sequence[float], direction: Sequence[float]) -> None:
        self._start = np.array(position, dtype=float)
        self._end = self._start.copy()
        self._direction = np.array(direction, dtype=float)

    def step(self, scale: float) -> None:
        """Advance the end of the ray by ``scale`` along its direction."""
        yaw = math.radians(self._direction[1] + 90)
        pitch = math.radians(self._direction[0])

        self._end[0] -= math.cos(yaw) * scale
        self._end[2] -= math.sin(yaw) * scale
        self._end[1] -= math.tan(pitch) * scale

    @property
    def end(self) -> np.ndarray:
        """The current end point of the ray."""
        return self._end.copy()

    @property
    def length(self) -> float:
        """Distance from the start of the ray to its end."""
        return float(np.linalg.norm(self._end - self._start))