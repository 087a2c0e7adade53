"""Handle and index count describing something ready to draw."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderInfo:
    """A vertex array handle and the number of indices to draw from it."""

    vao: int = 0
    indices_count: int = 0

    def reset(self) -> None:
        """Forget the handle and the index count."""
        self.vao = 0
        self.indices_count = 0