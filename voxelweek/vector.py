"""Small integer vectors used as coordinates and dictionary keys."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VectorXZ:
    """A position on the horizontal XZ plane."""

    x: int
    z: int


@dataclass(frozen=True)
class Vector3i:
    """An integer position in 3D space."""

    x: int
    y: int
    z: int