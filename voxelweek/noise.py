"""Value noise used to produce terrain heights."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class NoiseParameters:
    """Settings that shape the generated terrain."""

    octaves: int
    amplitude: int
    smoothness: int
    height_offset: int
    roughness: float


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class NoiseGenerator:
    """Seeded multi-octave value noise giving a height for each column."""

    def __init__(self, seed: int, chunk_size: int, water_level: int) -> None:
        self._seed = seed
        self._chunk_size = chunk_size
        self._water_level = water_level
        self._parameters = NoiseParameters(
            octaves=7,
            amplitude=70,
            smoothness=235,
            height_offset=-5,
            roughness=0.53,
        )

    @property
    def parameters(self) -> NoiseParameters:
        return self._parameters

    def set_parameters(self, params: NoiseParameters) -> None:
        """Replace the noise parameters."""
        self._parameters = params

    def _hash_noise(self, n: int) -> float:
        n = _to_int32(n + self._seed)
        n = _to_int32((n << 13) ^ n)
        new_n = (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF
        return 1.0 - new_n / 1073741824.0

    def _noise_at(self, x: float, z: float) -> float:
        return self._hash_noise(int(x + z * 57.0))

    @staticmethod
    def _lerp(a: float, b: float, t: float) -> float:
        mu2 = (1 - math.cos(t * 3.14)) / 2
        return a * (1 - mu2) + b * mu2

    def _noise(self, x: float, z: float) -> float:
        floor_x = float(int(x))
        floor_z = float(int(z))

        s = self._noise_at(floor_x, floor_z)
        t = self._noise_at(floor_x + 1, floor_z)
        u = self._noise_at(floor_x, floor_z + 1)
        v = self._noise_at(floor_x + 1, floor_z + 1)

        rec1 = self._lerp(s, t, x - floor_x)
        rec2 = self._lerp(u, v, x - floor_x)
        return self._lerp(rec1, rec2, z - floor_z)

    def get_height(self, x: int, z: int, chunk_x: int, chunk_z: int) -> float:
        """Return the terrain height of block ``(x, z)`` in the given chunk."""
        new_x = x + chunk_x * self._chunk_size
        new_z = z + chunk_z * self._chunk_size

        if new_x < 0 or new_z < 0:
            return self._water_level - 1

        params = self._parameters
        total = 0.0
        for octave in range(params.octaves - 1):
            frequency = 2.0**octave
            amplitude = params.roughness**octave
            total += (
                self._noise(
                    float(new_x) * frequency / params.smoothness,
                    float(new_z) * frequency / params.smoothness,
                )
                * amplitude
            )

        value = ((total / 2.1) + 1.2) * params.amplitude + params.height_offset
        return value if value > 0 else 1